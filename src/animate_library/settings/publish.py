"""
Publish-related settings for animate-library.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

MIN_PRECISION_PLACES = 0
MAX_PRECISION_PLACES = 10


class PublishSettings:
    """Manages settings used while building libraries and writing output."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    @property
    def precision_places(self) -> int:
        """Decimal places used when rounding output numbers (0-10)."""
        value = self._get_int("publish/precision_places", 2)
        return max(MIN_PRECISION_PLACES, min(MAX_PRECISION_PLACES, value))

    @precision_places.setter
    def precision_places(self, value: int) -> None:
        validated = max(MIN_PRECISION_PLACES, min(MAX_PRECISION_PLACES, value))
        if validated != value:
            logger.warning(f"Precision {value} out of range, using {validated}")
        self.settings.setValue("publish/precision_places", validated)
        self.settings.sync()

    @property
    def strict_asset_ids(self) -> bool:
        """Whether duplicate asset ids fail the build."""
        return self._get_bool("publish/strict_asset_ids", False)

    @strict_asset_ids.setter
    def strict_asset_ids(self, value: bool) -> None:
        self.settings.setValue("publish/strict_asset_ids", value)
        self.settings.sync()

    @property
    def last_export_path(self) -> Optional[Path]:
        """Get the last export file that was loaded."""
        value = self.settings.value("publish/last_export", "")
        return Path(str(value)) if value else None

    @last_export_path.setter
    def last_export_path(self, value: Optional[Path]) -> None:
        self.settings.setValue("publish/last_export", str(value) if value else "")
        self.settings.sync()
