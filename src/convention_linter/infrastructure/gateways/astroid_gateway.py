from pathlib import Path

import astroid  # type: ignore[import-untyped]

from convention_linter.domain.errors import ParseFailure
from convention_linter.domain.protocols import AstroidProtocol

# astroid's file name for modules parsed without a path
UNKNOWN_FILE = "<?>"


class AstroidGateway(AstroidProtocol):
    """Parses source files into astroid trees. Failures are never swallowed."""

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file and return the astroid Module node."""
        try:
            source = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseFailure(file_path, f"cannot read file: {exc}") from exc
        try:
            return astroid.parse(source, module_name=Path(file_path).stem, path=file_path)
        except (astroid.AstroidSyntaxError, astroid.AstroidBuildingError) as exc:
            raise ParseFailure(file_path, str(exc)) from exc


class ModuleCache(AstroidProtocol):
    """Replays trees that were already built elsewhere, e.g. by pylint."""

    def __init__(self) -> None:
        self._modules: dict[str, astroid.nodes.Module] = {}

    def add(self, module: astroid.nodes.Module) -> bool:
        """Keep the first tree seen per file. Trees built from strings have no file."""
        if module.file in (None, UNKNOWN_FILE):
            return False
        self._modules.setdefault(module.file, module)
        return True

    def filenames(self) -> list[str]:
        return list(self._modules)

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        try:
            return self._modules[file_path]
        except KeyError:
            raise ParseFailure(file_path, "module was never loaded") from None
