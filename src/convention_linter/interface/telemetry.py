"""Terminal telemetry on top of the standard logging module."""

import logging
import sys

LOGGER_NAME = "convention_linter"


class ProjectTelemetry:
    """
    Implements TelemetryPort by logging bare messages to stderr.

    The handler is attached to the package logger so that warnings logged by
    the domain (ambiguous elections, skipped targets, config problems) reach
    the user the same way.
    """

    def __init__(self, project_name: str, level: int = logging.INFO) -> None:
        self.project_name = project_name
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)
        if not any(getattr(h, "_convention_lint", False) for h in self.logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(message)s"))
            handler._convention_lint = True  # type: ignore[attr-defined]
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def handshake(self) -> None:
        self.logger.debug("[%s] starting convention scan", self.project_name)

    def step(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
