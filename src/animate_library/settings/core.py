"""
Core settings management for animate-library.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .logging import LoggingSettings
from .publish import PublishSettings

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "animate_library"
APPLICATION_NAME = "animate_library"


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to settings with automatic cross-platform
    storage and validation.
    """

    def __init__(self, profile: str = "default"):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
        """
        self.settings = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
        self.profile = profile

        # Profile group: animate_library/animate_library/<profile>/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._logging = LoggingSettings(self.settings)
        self._publish = PublishSettings(self.settings)

        # Ensure version and migrate if needed
        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def publish(self) -> PublishSettings:
        """Access publish settings subsystem."""
        return self._publish

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run."""
        value = self.settings.value("app/first_run", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === PUBLISH SETTINGS (DELEGATED) ===

    @property
    def precision_places(self) -> int:
        """Decimal places used when rounding output numbers."""
        return self._publish.precision_places

    @precision_places.setter
    def precision_places(self, value: int) -> None:
        self._publish.precision_places = value

    @property
    def strict_asset_ids(self) -> bool:
        """Whether duplicate asset ids fail the build."""
        return self._publish.strict_asset_ids

    @strict_asset_ids.setter
    def strict_asset_ids(self, value: bool) -> None:
        self._publish.strict_asset_ids = value

    @property
    def last_export_path(self) -> Optional[Path]:
        """Get the last export file that was loaded."""
        return self._publish.last_export_path

    @last_export_path.setter
    def last_export_path(self, value: Optional[Path]) -> None:
        self._publish.last_export_path = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def clear(self) -> None:
        """Remove every value stored for this profile."""
        self.settings.remove("")
        self.settings.sync()
