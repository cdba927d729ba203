"""
Core settings management for student_corpus.
"""

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from .logging import LoggingSettings
from .source import SourceSettings
from .types import ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION = "baseball-comic"
APPLICATION = "student_corpus"


class AppSettings:
    """
    Configuration stored in QSettings.

    Holds only where datasets come from and how to log. Constructing an
    AppSettings never writes to the store; values are written only through
    the subsystem setters. Loaded datasets and the contributor selection
    are runtime state and never stored here.
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: Optional QSettings backend; defaults to the native
                per-user store for this application.
        """
        if settings is None:
            settings = QSettings(ORGANIZATION, APPLICATION)
        self.settings = settings
        self.profile = profile

        # Keys live under the profile group: default/source/owner, ...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._source = SourceSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(f"Settings opened for profile '{profile}'")

    @property
    def source(self) -> SourceSettings:
        """Access content source settings subsystem."""
        return self._source

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
