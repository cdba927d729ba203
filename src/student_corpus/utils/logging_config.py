"""
Logging configuration for student_corpus.

Console output goes to stderr at the configured level; an optional CSV log
file always captures DEBUG. Both are driven by a LogConfig snapshot taken
from the stored settings.
"""

import copy
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from ..settings.logging import LogConfig

PACKAGE_LOGGER = "student_corpus"

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Loggers of the HTTP stack that report every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


class ColoredFormatter(logging.Formatter):
    """Console formatter that wraps the level name in an ANSI color."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        # Handlers share the record, so color a copy
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class CSVFormatter(logging.Formatter):
    """One `;`-separated line per record: time, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        fields = [
            self.formatTime(record, self.datefmt),
            record.levelname,
            record.name,
            message,
        ]
        return ";".join('"' + value.replace('"', '""') + '"' for value in fields)


def _console_handler(config: LogConfig) -> logging.Handler:
    formatter_class = ColoredFormatter if config.use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(config.console_level or logging.INFO)
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(log_file: Path) -> Optional[logging.Handler]:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not open log file {log_file}: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(config: LogConfig) -> None:
    """
    Replace the root handlers with the ones described by `config`.

    Args:
        config: Logging snapshot, usually `settings.logging.config()`
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    if config.console_level is not None:
        root_logger.addHandler(_console_handler(config))

    file_handler = _file_handler(config.log_file) if config.log_file else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    console = logging.getLevelName(config.console_level) if config.console_level else "off"
    log_file = config.log_file.absolute() if file_handler and config.log_file else "off"
    logging.getLogger(__name__).debug(f"Logging initialized: console={console}, file={log_file}")
