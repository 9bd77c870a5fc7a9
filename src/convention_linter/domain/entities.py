"""Operation/variant data model and the records produced by a run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from convention_linter.domain.protocols import MatcherProtocol


class Scope(Enum):
    """How much of a file an operation's matchers get to see."""

    ANY = "any"
    LOCAL = "local"
    # Whole-package traversal. Selecting it is a fatal error.
    GLOBAL = "global"


@dataclass(eq=False)
class Variant:
    """One concrete idiom for an operation. Identity, not value, equality."""

    name: str
    matcher: "MatcherProtocol"
    count: int = 0


@dataclass(eq=False)
class Operation:
    """
    A semantic category of equivalent idioms.

    Declaration order of ``variants`` is the only tie-break source.
    ``convention`` stays unset until election.
    """

    name: str
    scope: Scope
    variants: list[Variant]
    convention: Optional[Variant] = None

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError(f"operation {self.name!r} declares no variants")

    def variant_names(self) -> list[str]:
        return [v.name for v in self.variants]


@dataclass(frozen=True)
class Position:
    """File and 1-based line/column of a node."""

    path: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class ConventionWarning:
    """One occurrence that deviates from its operation's elected convention."""

    position: Position
    operation: str
    convention: str
    variant: str
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def text(self) -> str:
        return f"{self.operation}: use {self.convention} instead of {self.variant}"

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for the JSON reporter."""
        return {
            "path": self.position.path,
            "line": self.position.line,
            "column": self.position.column,
            "operation": self.operation,
            "convention": self.convention,
            "variant": self.variant,
            "message": self.text,
        }


@dataclass(frozen=True)
class Ambiguity:
    """Advisory: ``candidate`` tied with the elected variant."""

    operation: str
    candidate: str
    elected: str

    @property
    def text(self) -> str:
        return f"{self.operation}: can't decide between {self.candidate} and {self.elected}"


@dataclass
class RunContext:
    """State of one invocation: the catalog, the pedantic toggle, and the warnings."""

    operations: list[Operation]
    pedantic: bool = False
    warnings: list[ConventionWarning] = field(default_factory=list)
