"""
Module for working with exported animation assets.

Provides the Library service that turns an export document into typed
assets, the classification policy for timeline records, and the asset
and instance models.
"""

from .service import Library
from .classification import classify_timeline
from .errors import LibraryError, SchemaError, NotFoundError, UseAfterTeardownError
from .models import AssetKind, RawRecord, RawDocument, MetaData
from .items import (
    LibraryItem,
    Bitmap,
    Shape,
    Text,
    Timeline,
    Container,
    Graphic,
    Stage,
    ASSET_TYPES,
)
from .instances import (
    Instance,
    BitmapInstance,
    ShapeInstance,
    TextInstance,
    TimelineInstance,
    ContainerInstance,
    GraphicInstance,
    StageInstance,
)
from .managers import AssetsManager
from .loaders import ExportFileLoader

# Public exports
__all__ = [
    # Main service
    "Library",
    # Classification
    "classify_timeline",
    "AssetKind",
    # Errors
    "LibraryError",
    "SchemaError",
    "NotFoundError",
    "UseAfterTeardownError",
    # Type aliases
    "RawRecord",
    "RawDocument",
    "MetaData",
    # Assets
    "LibraryItem",
    "Bitmap",
    "Shape",
    "Text",
    "Timeline",
    "Container",
    "Graphic",
    "Stage",
    "ASSET_TYPES",
    # Instances
    "Instance",
    "BitmapInstance",
    "ShapeInstance",
    "TextInstance",
    "TimelineInstance",
    "ContainerInstance",
    "GraphicInstance",
    "StageInstance",
    # Component classes (for advanced usage)
    "AssetsManager",
    "ExportFileLoader",
]
