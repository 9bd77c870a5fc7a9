"""Renders the engine's warnings for the terminal."""

import json
from typing import Optional, TextIO

import typer

from convention_linter.domain.entities import ConventionWarning


class TerminalWarningReporter:
    """Prints warnings to stdout in the order the engine produced them."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def report(self, warnings: list[ConventionWarning], output_format: str = "text") -> None:
        if output_format == "json":
            self._echo(json.dumps([w.to_dict() for w in warnings], indent=2))
            return
        for warn in warnings:
            self._echo(f"{warn.position}: {warn.text}")

    def _echo(self, line: str) -> None:
        typer.echo(line, file=self.stream)
