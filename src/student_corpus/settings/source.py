"""
Content source settings for student_corpus.
"""

from typing import TYPE_CHECKING

from ..content import DEFAULT_API_BASE
from ..datasets import DEFAULT_NAME_MAP_PATH, DEFAULT_STUDENTS_DIR

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

DEFAULT_OWNER = "ycshu"
DEFAULT_REPO = "baseball-comic-obsidian"
DEFAULT_BRANCH = "main"


class SourceSettings:
    """Manages where datasets are read from."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _set_str(self, key: str, value: str) -> None:
        self.settings.setValue(key, value.strip())
        self.settings.sync()

    @property
    def api_base(self) -> str:
        """Get API root URL."""
        return self._get_str("source/api_base", DEFAULT_API_BASE)

    @api_base.setter
    def api_base(self, value: str) -> None:
        self._set_str("source/api_base", value.rstrip("/"))

    @property
    def owner(self) -> str:
        """Get repository owner."""
        return self._get_str("source/owner", DEFAULT_OWNER)

    @owner.setter
    def owner(self, value: str) -> None:
        self._set_str("source/owner", value)

    @property
    def repo(self) -> str:
        """Get repository name."""
        return self._get_str("source/repo", DEFAULT_REPO)

    @repo.setter
    def repo(self, value: str) -> None:
        self._set_str("source/repo", value)

    @property
    def branch(self) -> str:
        """Get branch to read from."""
        return self._get_str("source/branch", DEFAULT_BRANCH)

    @branch.setter
    def branch(self, value: str) -> None:
        self._set_str("source/branch", value)

    @property
    def students_dir(self) -> str:
        """Get directory holding one subdirectory per student."""
        return self._get_str("source/students_dir", DEFAULT_STUDENTS_DIR)

    @students_dir.setter
    def students_dir(self, value: str) -> None:
        self._set_str("source/students_dir", value.strip("/"))

    @property
    def name_map_path(self) -> str:
        """Get path of the identifier to display-name map."""
        return self._get_str("source/name_map_path", DEFAULT_NAME_MAP_PATH)

    @name_map_path.setter
    def name_map_path(self, value: str) -> None:
        self._set_str("source/name_map_path", value)

    @property
    def repository(self) -> str:
        """Get `owner/repo` shorthand."""
        return f"{self.owner}/{self.repo}"

    def reset(self) -> None:
        """Restore default source settings."""
        self.settings.remove("source")
        self.settings.sync()
