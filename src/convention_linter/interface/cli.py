"""CLI entry points - thin controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from convention_linter.domain.catalog import setup_catalog
from convention_linter.domain.config import OUTPUT_FORMATS, ConfigurationLoader
from convention_linter.domain.entities import RunContext
from convention_linter.domain.errors import ConventionLinterError
from convention_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    TelemetryPort,
    WarningReporterProtocol,
)
from convention_linter.use_cases.check_conventions import ConventionEngine


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    reporter: WarningReporterProtocol


def _resolve_targets(targets: Optional[list[str]]) -> list[str]:
    """Explicit targets, else src/ if it exists, else '.'."""
    if targets:
        return list(targets)
    src_dir = Path.cwd() / "src"
    if src_dir.is_dir():
        return ["src"]
    return ["."]


def _set_verbosity(telemetry: TelemetryPort, verbose: bool, quiet: bool) -> None:
    if verbose:
        telemetry.set_level(logging.DEBUG)
    elif quiet:
        telemetry.set_level(logging.ERROR)


def create_app(deps: CLIDependencies) -> typer.Typer:
    """Create the Typer app with explicitly injected dependencies."""
    app = typer.Typer(
        name="convention-lint",
        help="Infer a codebase's majority idioms and flag every deviation.",
        add_completion=False,
    )

    @app.command()
    def check(
        targets: Optional[list[str]] = typer.Argument(None, help="Files or directories (default: src/ or .)"),  # noqa: B008
        pedantic: Optional[bool] = typer.Option(
            None, "--pedantic/--no-pedantic", help="More pedantic and comprehensive diagnostics."
        ),
        output_format: Optional[str] = typer.Option(None, "--format", help="text or json"),
        verbose: bool = typer.Option(False, "--verbose", "-v"),
        quiet: bool = typer.Option(False, "--quiet", "-q"),
    ) -> None:
        """Infer conventions over the batch, then report every inconsistency."""
        _set_verbosity(deps.telemetry, verbose, quiet)
        deps.telemetry.handshake()
        config = deps.config_loader

        fmt = output_format or config.output_format
        if fmt not in OUTPUT_FORMATS:
            raise typer.BadParameter(
                f"expected one of {', '.join(sorted(OUTPUT_FORMATS))}", param_hint="--format"
            )

        filenames = deps.filesystem.targets_to_filenames(
            _resolve_targets(targets), exclude=config.exclude
        )
        if not filenames:
            deps.telemetry.warning("no Python files to check")
            if fmt == "json":
                deps.reporter.report([], fmt)
            return

        context = RunContext(
            operations=setup_catalog(config.disabled_operations),
            pedantic=config.pedantic if pedantic is None else pedantic,
        )
        engine = ConventionEngine(context, deps.astroid_gateway)
        try:
            engine.infer(filenames)
        except ConventionLinterError as exc:
            deps.telemetry.error(f"infer conventions: {exc}")
            raise typer.Exit(code=2) from exc
        try:
            warnings = engine.detect(filenames)
        except ConventionLinterError as exc:
            deps.telemetry.error(f"report inconsistent: {exc}")
            raise typer.Exit(code=2) from exc

        deps.reporter.report(warnings, fmt)
        deps.telemetry.step(f"{len(warnings)} inconsistencies in {len(filenames)} files")
        if warnings:
            raise typer.Exit(code=1)

    @app.command()
    def operations() -> None:
        """List the operations and variants the linter infers."""
        for op in setup_catalog(deps.config_loader.disabled_operations):
            typer.echo(f"{op.scope.value} {op.name}: {', '.join(op.variant_names())}")

    return app
