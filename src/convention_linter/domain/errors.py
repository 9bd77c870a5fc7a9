"""Domain errors. Every one of them is fatal to the run."""


class ConventionLinterError(Exception):
    """Base class for errors that abort a convention run."""


class ParseFailure(ConventionLinterError):
    """A file of the batch could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class UnimplementedScopeError(ConventionLinterError):
    """An operation asked for a traversal scope the dispatcher does not walk."""


class EngineStateError(ConventionLinterError):
    """A pass was started out of order."""
