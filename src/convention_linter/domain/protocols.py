from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    import astroid  # type: ignore[import-untyped]

    from convention_linter.domain.entities import ConventionWarning


class MatcherProtocol(Protocol):
    """Predicate pair identifying occurrences of one variant. Must be pure."""

    def skip(self, node: "astroid.nodes.NodeNG") -> bool:
        """Exclude this node from consideration (its children are still visited)."""
        ...

    def match(self, node: "astroid.nodes.NodeNG") -> bool:
        """Return True when the node is exactly an occurrence of the idiom."""
        ...


class AstroidProtocol(Protocol):
    def parse_file(self, file_path: str) -> "astroid.nodes.Module":
        """Parse a file and return the astroid Module node. Raises ParseFailure."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def targets_to_filenames(
        self, targets: list[str], exclude: Optional[list[str]] = None
    ) -> list[str]:
        """Turn CLI targets into an ordered, de-duplicated list of Python files."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...
    def set_level(self, level: int) -> None: ...


class WarningReporterProtocol(Protocol):
    def report(self, warnings: "list[ConventionWarning]", output_format: str = "text") -> None:
        """Render warnings in engine order."""
        ...
