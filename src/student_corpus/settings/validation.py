"""
Settings validation for student_corpus.
"""

import logging
from typing import TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Checks that the stored content source can be used."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        result = ValidationResult()
        source = self.settings.source

        if not source.api_base.startswith(("http://", "https://")):
            result.add_error(
                "source/api_base", f"API base must be an http(s) URL: {source.api_base!r}"
            )
        for key, label, value in (
            ("source/owner", "Repository owner", source.owner),
            ("source/repo", "Repository name", source.repo),
            ("source/branch", "Branch", source.branch),
            ("source/students_dir", "Students directory", source.students_dir),
        ):
            if not value.strip():
                result.add_error(key, f"{label} is not set")

        if not source.name_map_path.endswith(".json"):
            result.add_warning(
                "source/name_map_path",
                f"Name map path does not look like a JSON file: {source.name_map_path}",
            )

        level = self.settings.logging.console_level
        if level not in VALID_LEVELS:
            result.add_warning(
                "logging/console_level", f"Unknown console log level {level!r}, using INFO"
            )

        if result.errors:
            logger.debug(f"Settings validation found {len(result.errors)} errors")

        return result
