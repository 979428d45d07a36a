"""
animate-library: typed asset graphs for exported 2D animation projects

Turns the JSON document written by the animation exporter into a
cross-referenced library of bitmaps, shapes, texts and timelines, and
creates runtime instance handles from it by asset id.
"""

__version__ = "0.1.0"
__author__ = "animate-library Contributors"

# Core service imports
from .library import Library, classify_timeline
from .library.errors import LibraryError, SchemaError, NotFoundError, UseAfterTeardownError
from .utils.logging_config import setup_logging

# Main data models
from .library.models import AssetKind
from .library.items import (
    LibraryItem, Bitmap, Shape, Text, Timeline, Container, Graphic, Stage
)
from .library.instances import Instance

__all__ = [
    # Services
    'Library',
    'classify_timeline',

    # Errors
    'LibraryError',
    'SchemaError',
    'NotFoundError',
    'UseAfterTeardownError',

    # Logging
    'setup_logging',

    # Data models
    'AssetKind',
    'LibraryItem',
    'Bitmap',
    'Shape',
    'Text',
    'Timeline',
    'Container',
    'Graphic',
    'Stage',
    'Instance',
]
