"""CLI configuration via dataclass.

Priority (highest wins): constructor arg > env var > config.toml > default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from jabberid.errors import ConfigError

logger = logging.getLogger(__name__)

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_OUTPUT_FORMAT = "text"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_OUTPUT_FORMATS = {"text", "json"}


@dataclass
class CLIConfig:
    """Settings for the ``jabberid`` command.

    ``log_level`` and ``output_format`` can be overridden via environment
    variables (``JABBERID_LOG_LEVEL``, ``JABBERID_OUTPUT_FORMAT``) or a
    ``[cli]`` table in ``config.toml`` under ``config_dir``.
    ``JABBERID_HOME`` overrides the default ``~/.jabberid`` config directory.
    """

    log_level: str | None = None
    output_format: str | None = None
    config_dir: Path | str | None = None

    def __post_init__(self) -> None:
        if self.config_dir is None:
            home = os.getenv("JABBERID_HOME")
            self.config_dir = Path(home) if home else Path.home() / ".jabberid"
        else:
            self.config_dir = Path(self.config_dir)

        file_values: dict = {}
        config_path = self.config_dir / "config.toml"
        if config_path.exists():
            file_values = self._load_config_file(config_path)

        if self.log_level is None:
            self.log_level = os.getenv("JABBERID_LOG_LEVEL") or file_values.get(
                "log_level", _DEFAULT_LOG_LEVEL
            )
        if self.output_format is None:
            self.output_format = os.getenv("JABBERID_OUTPUT_FORMAT") or file_values.get(
                "output_format", _DEFAULT_OUTPUT_FORMAT
            )

        self.log_level = str(self.log_level).upper()
        self.output_format = str(self.output_format).lower()

        if self.log_level not in _VALID_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log_level '{self.log_level}'. "
                f"Must be one of: {sorted(_VALID_LOG_LEVELS)}"
            )
        if self.output_format not in _VALID_OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output_format '{self.output_format}'. "
                f"Must be one of: {sorted(_VALID_OUTPUT_FORMATS)}"
            )

    @staticmethod
    def _load_config_file(path: Path) -> dict:
        """Return the ``[cli]`` table of *path*, or ``{}`` if it can't be read."""
        try:
            import tomllib
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[no-redef]  # Python 3.10 fallback

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            logger.warning("Failed to load config file %s", path, exc_info=True)
            return {}

        section = data.get("cli", {})
        if not isinstance(section, dict):
            logger.warning("Ignoring non-table [cli] section in %s", path)
            return {}
        return section


def configure_logging(level: str) -> None:
    """Send log records to stderr at *level*."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
