"""
Settings package for student_corpus.

Configuration built on Qt's QSettings for cross-platform storage.

Usage:
    from student_corpus.settings import AppSettings

    settings = AppSettings()
    settings.validate().raise_for_errors()
"""

from .core import AppSettings
from .types import ConfigError, ValidationIssue, ValidationResult
from .source import SourceSettings
from .logging import LogConfig, LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationIssue",
    "ValidationResult",
    "SourceSettings",
    "LogConfig",
    "LoggingSettings",
]
