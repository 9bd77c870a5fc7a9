"""Load [tool.convention-lint] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib  # type: ignore[import-not-found]

SECTION = "convention-lint"

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Finds the nearest pyproject.toml at or above ``start``."""

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Return the ``[tool.convention-lint]`` table, or an empty dict."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except OSError:
                # Keep looking in parent dirs
                continue
            except toml_lib.TOMLDecodeError as exc:
                logger.warning("Configuration Warning: cannot read %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            return dict(tool_section.get(SECTION, {}) or {})
        return {}
