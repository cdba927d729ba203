"""Basic unit tests for student_corpus settings and logging."""

import logging
from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from student_corpus.settings import AppSettings, ConfigError, LogConfig, ValidationResult


def open_ini(path: Path) -> QSettings:
    return QSettings(str(path), QSettings.Format.IniFormat)


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, app_settings) -> None:
        """Test AppSettings can be initialized."""
        assert app_settings is not None
        assert app_settings.profile == "default"

    def test_construction_writes_nothing(self, tmp_path) -> None:
        """Test opening settings and reading every value leaves the store empty."""
        store = open_ini(tmp_path / "s.ini")
        settings = AppSettings(settings=store)
        settings.validate()
        settings.logging.config()
        assert settings.source.repository == "ycshu/baseball-comic-obsidian"

        assert store.allKeys() == []
        assert open_ini(tmp_path / "s.ini").allKeys() == []

    def test_source_defaults(self, tmp_path) -> None:
        """Test content source defaults point at the original repository."""
        source = AppSettings(settings=open_ini(tmp_path / "s.ini")).source
        assert source.owner == "ycshu"
        assert source.repo == "baseball-comic-obsidian"
        assert source.branch == "main"
        assert source.students_dir == "data/students"
        assert source.name_map_path == "data/student_name_map.json"
        assert source.api_base == "https://api.github.com"
        assert source.repository == "ycshu/baseball-comic-obsidian"

    def test_source_settings_persist(self, tmp_path) -> None:
        """Test source values survive a reload of the same INI file."""
        settings = AppSettings(settings=open_ini(tmp_path / "s.ini"))
        settings.source.owner = "someone"
        settings.source.students_dir = "/students/"
        settings.source.api_base = "https://example.test/"
        settings.sync()

        reloaded = AppSettings(settings=open_ini(tmp_path / "s.ini"))
        assert reloaded.source.owner == "someone"
        assert reloaded.source.students_dir == "students"
        assert reloaded.source.api_base == "https://example.test"

    def test_profiles_are_separate(self, tmp_path) -> None:
        """Test each profile keeps its own group of keys."""
        AppSettings(settings=open_ini(tmp_path / "s.ini")).source.owner = "someone"
        other = AppSettings("other", settings=open_ini(tmp_path / "s.ini"))
        assert other.source.owner == "ycshu"

    def test_source_reset(self, app_settings) -> None:
        """Test resetting the source restores defaults."""
        app_settings.source.owner = "someone"
        app_settings.source.reset()
        assert app_settings.source.owner == "ycshu"


class TestSettingsValidation:
    """Test configuration validation."""

    def test_app_settings_validation(self, app_settings) -> None:
        """Test default settings validate cleanly."""
        validation = app_settings.validate()
        assert validation.is_valid
        assert validation.issues == []
        validation.raise_for_errors()

    def test_invalid_source(self, app_settings) -> None:
        """Test empty coordinates and a bad API base are errors tied to their keys."""
        app_settings.source.owner = "  "
        app_settings.source.api_base = "ftp://example"
        validation = app_settings.validate()
        assert not validation.is_valid
        assert [issue.message for issue in validation.issues_for("source/owner")] == [
            "Repository owner is not set"
        ]
        assert validation.issues_for("source/api_base")[0].severity == "error"
        with pytest.raises(ConfigError, match="Repository owner is not set"):
            validation.raise_for_errors()

    def test_name_map_warning(self, app_settings) -> None:
        """Test a non-JSON name map path only warns."""
        app_settings.source.name_map_path = "data/names.txt"
        validation = app_settings.validate()
        assert validation.is_valid
        assert len(validation.warnings) == 1
        assert validation.issues_for("source/name_map_path")[0].severity == "warning"

    def test_unknown_stored_log_level_warns(self, app_settings) -> None:
        """Test a hand-edited log level is reported and falls back to INFO."""
        app_settings.settings.setValue("logging/console_level", "LOUD")
        validation = app_settings.validate()
        assert validation.is_valid
        assert validation.issues_for("logging/console_level")
        assert app_settings.logging.config().console_level == logging.INFO

    def test_empty_result(self) -> None:
        """Test an empty result is valid."""
        result = ValidationResult()
        assert result.is_valid
        assert result.errors == [] and result.warnings == []


class TestLoggingSettings:
    """Test the stored logging preferences."""

    def test_defaults(self, app_settings) -> None:
        """Test console INFO with colors and no log file by default."""
        assert app_settings.logging.config() == LogConfig(
            console_level=logging.INFO, use_colors=True, log_file=None
        )

    def test_console_off_and_log_file(self, app_settings) -> None:
        """Test OFF disables the console and a path enables file logging."""
        app_settings.logging.console_level = "off"
        app_settings.logging.use_colors = False
        app_settings.logging.log_file = " logs/corpus.csv "
        config = app_settings.logging.config()
        assert config.console_level is None
        assert config.use_colors is False
        assert config.log_file == Path("logs/corpus.csv")

    def test_invalid_level_is_rejected(self, app_settings) -> None:
        """Test an unknown level keeps the previous one."""
        app_settings.logging.console_level = "debug"
        app_settings.logging.console_level = "chatty"
        assert app_settings.logging.console_level == "DEBUG"


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, app_settings, restore_root_logging) -> None:
        """Test logging setup works with settings."""
        from student_corpus.utils.logging_config import setup_logging

        setup_logging(app_settings.logging.config())

        logger = logging.getLogger("student_corpus")
        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.INFO

    def test_console_off(self, restore_root_logging) -> None:
        """Test no handler is installed when everything is off."""
        from student_corpus.utils.logging_config import setup_logging

        setup_logging(LogConfig(console_level=None))
        assert logging.getLogger().handlers == []

    def test_file_logging(self, restore_root_logging, tmp_path) -> None:
        """Test file logging writes quoted CSV lines to the log file."""
        from student_corpus.utils.logging_config import setup_logging

        log_file = tmp_path / "logs" / "corpus.csv"
        setup_logging(LogConfig(console_level=None, log_file=log_file))

        logging.getLogger("student_corpus.test").info('said "hi"')
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert '"INFO";"student_corpus.test";"said ""hi"""' in content

    def test_colored_formatter(self) -> None:
        """Test the console formatter colors the level name only on its copy."""
        from student_corpus.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s: %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        assert formatter.format(record) == "\033[33mWARNING\033[0m: careful"
        assert record.levelname == "WARNING"
