"""
Settings validation system for animate-library.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult
from .logging import VALID_LEVELS

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        if self.settings.console_log_level.upper() not in VALID_LEVELS:
            errors.append(f"Invalid console log level: {self.settings.console_log_level}")

        last_export = self.settings.last_export_path
        if last_export and not last_export.exists():
            warnings.append(f"Last export file no longer exists: {last_export}")

        if self.settings.file_logging and not self.settings.console_logging:
            warnings.append("Console logging disabled; messages go to the log file only")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
