"""
Settings package for animate-library.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from animate_library.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ValidationResult
from .logging import LoggingSettings
from .publish import PublishSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ValidationResult",
    "LoggingSettings",
    "PublishSettings",
]
