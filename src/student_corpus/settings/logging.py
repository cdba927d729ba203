"""
Logging preferences for student_corpus.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# "OFF" disables the console handler
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "OFF"]


@dataclass(frozen=True)
class LogConfig:
    """Snapshot of the logging preferences read by setup_logging.

    `console_level` is None when console output is off; `log_file` is None
    when no CSV log file should be written.
    """

    console_level: Optional[int] = logging.INFO
    use_colors: bool = True
    log_file: Optional[Path] = None


class LoggingSettings:
    """Stored console level, color choice and optional CSV log file."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def console_level(self) -> str:
        """Get console level name, or "OFF"."""
        return self._get_str("logging/console_level", "INFO").upper()

    @console_level.setter
    def console_level(self, value: str) -> None:
        if value.upper() not in VALID_LEVELS:
            logger.warning(f"Invalid console log level: {value}, keeping {self.console_level}")
            return
        self.settings.setValue("logging/console_level", value.upper())
        self.settings.sync()

    @property
    def use_colors(self) -> bool:
        value = self.settings.value("logging/use_colors", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    @use_colors.setter
    def use_colors(self, value: bool) -> None:
        self.settings.setValue("logging/use_colors", value)
        self.settings.sync()

    @property
    def log_file(self) -> str:
        """Get CSV log file path; empty means no file logging."""
        return self._get_str("logging/file", "")

    @log_file.setter
    def log_file(self, value: str) -> None:
        self.settings.setValue("logging/file", value.strip())
        self.settings.sync()

    def config(self) -> LogConfig:
        """Build the LogConfig that setup_logging applies."""
        level_name = self.console_level
        if level_name == "OFF":
            console_level = None
        elif level_name in VALID_LEVELS:
            console_level = getattr(logging, level_name)
        else:
            console_level = logging.INFO

        return LogConfig(
            console_level=console_level,
            use_colors=self.use_colors,
            log_file=Path(self.log_file) if self.log_file else None,
        )
