"""Basic unit tests for animate-library settings and logging."""

import logging
from pathlib import Path

from animate_library.settings import AppSettings, ConfigVersion


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, app_settings: AppSettings) -> None:
        """Test AppSettings can be initialized."""
        assert app_settings is not None
        assert app_settings.profile == "pytest"

    def test_app_settings_validation(self, app_settings: AppSettings) -> None:
        """Test settings validation returns result."""
        validation = app_settings.validate()
        assert validation.is_valid
        assert validation.errors == []

    def test_version_defaults_to_current(self, app_settings: AppSettings) -> None:
        assert app_settings.version == ConfigVersion.CURRENT.value


class TestPublishSettings:
    """Test publish settings values."""

    def test_defaults(self, app_settings: AppSettings) -> None:
        assert app_settings.precision_places == 2
        assert app_settings.strict_asset_ids is False
        assert app_settings.last_export_path is None

    def test_precision_is_clamped(self, app_settings: AppSettings) -> None:
        app_settings.precision_places = 25
        assert app_settings.precision_places == 10
        app_settings.precision_places = 4
        assert app_settings.precision_places == 4

    def test_strict_ids_roundtrip(self, app_settings: AppSettings) -> None:
        app_settings.strict_asset_ids = True
        assert app_settings.strict_asset_ids is True

    def test_missing_last_export_warns(self, app_settings: AppSettings, tmp_path: Path) -> None:
        app_settings.last_export_path = tmp_path / "gone.json"
        validation = app_settings.validate()
        assert validation.is_valid
        assert any("gone.json" in w for w in validation.warnings)


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, app_settings: AppSettings) -> None:
        """Test logging setup works with settings."""
        from animate_library.utils.logging_config import setup_logging

        app_settings.console_use_colors = False
        setup_logging(settings=app_settings)

        logger = logging.getLogger("animate_library")
        assert logger.level == logging.DEBUG
        assert any(
            isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers
        )

    def test_invalid_console_level_is_ignored(self, app_settings: AppSettings) -> None:
        app_settings.console_log_level = "LOUD"
        assert app_settings.console_log_level == "INFO"

    def test_colored_formatter(self) -> None:
        from animate_library.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s: %(message)s")
        record = logging.LogRecord("animate_library", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == "\033[31mERROR\033[0m: boom"

    def test_csv_formatter_escapes_quotes(self) -> None:
        from animate_library.utils.logging_config import CSVFormatter

        record = logging.LogRecord("animate_library", logging.INFO, __file__, 7, 'say "hi"', None, None)
        line = CSVFormatter(datefmt="%Y").format(record)
        assert line.endswith('"animate_library";"7";"say ""hi"""')


class TestSettingsMigration:
    """Test configuration version handling."""

    def test_first_run_flag(self, app_settings: AppSettings) -> None:
        fresh = AppSettings(profile="pytest")
        assert fresh.is_first_run is True
        fresh.set_first_run_complete()
        assert AppSettings(profile="pytest").is_first_run is False

    def test_old_version_is_migrated(self, app_settings: AppSettings) -> None:
        app_settings.settings.setValue("app/version", "0.9")
        migrated = AppSettings(profile="pytest")
        assert migrated.version == ConfigVersion.CURRENT.value
        assert str(migrated.settings.value("app/migrated_from")) == "0.9"

    def test_subsystems_share_storage(self, app_settings: AppSettings) -> None:
        app_settings.publish.precision_places = 3
        assert app_settings.precision_places == 3
        app_settings.logging.file_logging = True
        assert app_settings.file_logging is True
