"""Configuration values for a convention run."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})


class ConfigurationLoader:
    """
    Typed view over the ``[tool.convention-lint]`` section of pyproject.toml.

    Invalid values are reported and replaced by defaults; configuration is
    never fatal.
    """

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        self.validate_config()

    @property
    def config(self) -> dict[str, object]:
        return self._config

    @property
    def pedantic(self) -> bool:
        return bool(self._config.get("pedantic", False))

    @property
    def disabled_operations(self) -> list[str]:
        return list(self._config.get("disable", []))  # type: ignore[call-overload]

    @property
    def exclude(self) -> list[str]:
        return list(self._config.get("exclude", []))  # type: ignore[call-overload]

    @property
    def output_format(self) -> str:
        return str(self._config.get("format", "text"))

    def validate_config(self) -> None:
        """Drop values of the wrong type, logging each one."""
        if "pedantic" in self._config and not isinstance(self._config["pedantic"], bool):
            logger.warning("Configuration Warning: 'pedantic' must be a boolean; using false.")
            del self._config["pedantic"]

        for key in ("disable", "exclude"):
            value = self._config.get(key)
            if value is None:
                continue
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                logger.warning("Configuration Warning: '%s' must be a list of strings; ignored.", key)
                del self._config[key]

        fmt = self._config.get("format")
        if fmt is not None and fmt not in OUTPUT_FORMATS:
            logger.warning(
                "Configuration Warning: 'format' must be one of %s; using 'text'.",
                ", ".join(sorted(OUTPUT_FORMATS)),
            )
            del self._config["format"]
