from pylint.lint import PyLinter

from convention_linter.checks.conventions import ConventionChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    linter.register_checker(ConventionChecker(linter))
