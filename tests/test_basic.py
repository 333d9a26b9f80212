"""Basic unit tests for amber_levels settings and logging."""

import logging
import logging.handlers
from pathlib import Path

import pytest

from amber_levels.settings import AppSettings, ConfigVersion


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, settings: AppSettings) -> None:
        """Test AppSettings can be initialized."""
        assert settings is not None
        assert settings.version == ConfigVersion.CURRENT.value

    def test_settings_file_is_used(self, tmp_path: Path) -> None:
        """Test INI-backed settings persist between instances."""
        path = tmp_path / "persist.ini"
        first = AppSettings(settings_file=path)
        first.paths.levels_path = tmp_path / "mine"
        first.paths.include_user_levels = False
        first.sync()

        second = AppSettings(settings_file=path)
        assert second.paths.levels_path == tmp_path / "mine"
        assert second.paths.include_user_levels is False

    def test_profiles_are_separate(self, tmp_path: Path) -> None:
        path = tmp_path / "profiles.ini"
        AppSettings("one", settings_file=path).paths.levels_path = "one_levels"
        assert AppSettings("two", settings_file=path).paths.levels_path == Path("levels")

    def test_unknown_version_is_restamped(self, tmp_path: Path) -> None:
        path = tmp_path / "old.ini"
        path.write_text("[default]\napp\\version=0.9\n", encoding="utf-8")
        settings = AppSettings(settings_file=path)
        assert settings.version == ConfigVersion.CURRENT.value
        assert settings.settings.value("app/migrated_from") == "0.9"


class TestPathSettings:
    """Test level directory settings."""

    def test_defaults(self, settings: AppSettings) -> None:
        assert settings.paths.levels_path == Path("levels")
        assert settings.paths.include_user_levels is True

    def test_empty_levels_path_restores_default(self, settings: AppSettings) -> None:
        settings.paths.levels_path = "custom"
        settings.paths.levels_path = None
        assert settings.paths.levels_path == Path("levels")


class TestLoggingSettings:
    """Test logging-related settings."""

    def test_defaults(self, settings: AppSettings) -> None:
        assert settings.logging.console_logging is True
        assert settings.logging.console_log_level == "INFO"
        assert settings.logging.console_use_colors is True
        assert settings.logging.file_logging is False
        assert settings.logging.log_file_path.endswith(".csv")

    def test_level_is_normalized(self, settings: AppSettings) -> None:
        settings.logging.console_log_level = "debug"
        assert settings.logging.console_log_level == "DEBUG"

    def test_invalid_level_is_ignored(self, settings: AppSettings) -> None:
        settings.logging.console_log_level = "LOUD"
        assert settings.logging.console_log_level == "INFO"


class TestSettingsValidation:
    """Test settings validation."""

    def test_existing_levels_dir_is_valid(self, settings: AppSettings, tmp_path: Path) -> None:
        settings.paths.levels_path = tmp_path
        result = settings.validate()
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_missing_levels_dir_is_a_warning(self, settings: AppSettings, tmp_path: Path) -> None:
        settings.paths.levels_path = tmp_path / "absent"
        result = settings.validate()
        assert result.is_valid
        assert any("absent" in warning for warning in result.warnings)

    def test_levels_path_must_be_directory(self, settings: AppSettings, tmp_path: Path) -> None:
        file_path = tmp_path / "file.json"
        file_path.write_text("{}", encoding="utf-8")
        settings.paths.levels_path = file_path
        result = settings.validate()
        assert not result.is_valid

    def test_stored_invalid_level_is_an_error(self, settings: AppSettings, tmp_path: Path) -> None:
        settings.paths.levels_path = tmp_path
        settings.settings.setValue("logging/console_level", "LOUD")
        result = settings.validate()
        assert not result.is_valid
        assert any("LOUD" in error for error in result.errors)

class TestUtilsLogging:
    """Test logging configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_logging_setup_with_settings(self, settings: AppSettings) -> None:
        """Test logging setup works with settings."""
        from amber_levels.utils.logging_config import setup_logging

        setup_logging(settings=settings)

        logger = logging.getLogger("amber_levels")
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers)

    def test_file_logging_writes_csv(self, settings: AppSettings, tmp_path: Path) -> None:
        from amber_levels.utils.logging_config import setup_logging

        settings.logging.file_logging = True
        settings.logging.console_logging = False
        log_file = tmp_path / "logs" / "test.csv"
        setup_logging(settings, log_file=log_file)

        logging.getLogger("amber_levels.test").info('loaded "level"')
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert '"amber_levels.test"' in content
        assert '"loaded ""level"""' in content

    def test_unwritable_log_file_keeps_console(self, settings: AppSettings, tmp_path: Path) -> None:
        from amber_levels.utils.logging_config import setup_logging

        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        settings.logging.file_logging = True
        setup_logging(settings, log_file=blocker / "app.csv")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.handlers.RotatingFileHandler)

    def test_colored_formatter(self) -> None:
        from amber_levels.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s : %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "ERROR happened", None, None)
        formatted = formatter.format(record)
        assert formatted.startswith("\033[31mERROR\033[0m")
        assert formatted.endswith("ERROR happened")
