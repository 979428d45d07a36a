"""Utility helpers: logging setup and output formatting."""

from .data_utils import to_precision, stringify_simple, readable_shapes
from .logging_config import setup_logging, ColoredFormatter, CSVFormatter

__all__ = [
    "to_precision",
    "stringify_simple",
    "readable_shapes",
    "setup_logging",
    "ColoredFormatter",
    "CSVFormatter",
]
