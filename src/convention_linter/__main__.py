"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from convention_linter.infrastructure.di.container import ConventionContainer
from convention_linter.interface.cli import CLIDependencies, create_app


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ConventionContainer()
    deps = CLIDependencies(
        config_loader=container.get("ConfigurationLoader"),
        telemetry=container.get("TelemetryPort"),
        astroid_gateway=container.get("AstroidGateway"),
        filesystem=container.get("FileSystemGateway"),
        reporter=container.get("WarningReporter"),
    )
    app = create_app(deps)
    app()


if __name__ == "__main__":
    main()
