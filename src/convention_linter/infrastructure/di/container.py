from typing import Any, Optional

from convention_linter.domain.config import ConfigurationLoader
from convention_linter.infrastructure.config_file_loader import ConfigFileLoader
from convention_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from convention_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from convention_linter.infrastructure.reporters import TerminalWarningReporter
from convention_linter.interface.telemetry import ProjectTelemetry


class ConventionContainer:
    """Dependency Injection Container for the convention linter."""

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config)

    def _register_defaults(self, config: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config is None:
            config = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("TelemetryPort", ProjectTelemetry("CONVENTION-LINT"))
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config))
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("WarningReporter", TerminalWarningReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        try:
            return self._singletons[key]
        except KeyError:
            raise KeyError(f"nothing registered under {key!r}") from None
