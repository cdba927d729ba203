"""
Validation results and configuration errors for student_corpus settings.
"""

from dataclasses import dataclass, field
from typing import List, Literal

Severity = Literal["error", "warning"]


class ConfigError(Exception):
    """Raised when the content source configuration cannot be used."""


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a stored setting.

    `key` is the settings key the problem belongs to (e.g. `source/owner`),
    so a caller can point at the offending field.
    """

    key: str
    message: str
    severity: Severity = "error"


@dataclass
class ValidationResult:
    """Issues found while validating the stored configuration."""

    issues: List[ValidationIssue] = field(default_factory=list)

    def add_error(self, key: str, message: str) -> None:
        self.issues.append(ValidationIssue(key, message, "error"))

    def add_warning(self, key: str, message: str) -> None:
        self.issues.append(ValidationIssue(key, message, "warning"))

    @property
    def errors(self) -> List[str]:
        return [issue.message for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> List[str]:
        return [issue.message for issue in self.issues if issue.severity == "warning"]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def issues_for(self, key: str) -> List[ValidationIssue]:
        """Return the issues reported for one settings key."""
        return [issue for issue in self.issues if issue.key == key]

    def raise_for_errors(self) -> None:
        """Raise ConfigError listing every error, if there is any."""
        if not self.is_valid:
            raise ConfigError("; ".join(self.errors))
