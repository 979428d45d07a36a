"""
Data models for exported animation documents.

Contains type aliases, schema keys and the asset variant tag used
throughout the library package. Raw records stay plain dicts; typed
assets are built from them in the items module.
"""

from enum import Enum
from typing import Any, Dict, TypeAlias

# Type aliases for clarity
RawRecord: TypeAlias = Dict[str, Any]
"""A single exported record (bitmap, shape, text or timeline) as a dict."""

RawDocument: TypeAlias = Dict[str, Any]
"""The whole export document."""

MetaData: TypeAlias = Dict[str, Any]
"""Build settings copied from the document's `_meta` field."""


# Top-level document keys, in processing order
BITMAPS_KEY = "Bitmaps"
SHAPES_KEY = "Shapes"
TEXTS_KEY = "Texts"
TIMELINES_KEY = "Timelines"
META_KEY = "_meta"

CATEGORY_KEYS = (BITMAPS_KEY, SHAPES_KEY, TEXTS_KEY, TIMELINES_KEY)

# Required keys inside _meta
META_STAGE_NAME = "stageName"
META_FRAMERATE = "framerate"

# Record keys
ASSET_ID_KEY = "assetId"
TYPE_KEY = "type"
TOTAL_FRAMES_KEY = "totalFrames"

# Timeline type values
STAGE_TYPE = "stage"
GRAPHIC_TYPE = "graphic"
MOVIECLIP_TYPE = "movieclip"


class AssetKind(Enum):
    """Variant tag for constructed assets."""
    BITMAP = "bitmap"
    SHAPE = "shape"
    TEXT = "text"
    TIMELINE = "timeline"
    CONTAINER = "container"
    GRAPHIC = "graphic"
    STAGE = "stage"

    @property
    def is_timeline(self) -> bool:
        """True for every variant built from a Timelines record."""
        return self in TIMELINE_KINDS


TIMELINE_KINDS = frozenset(
    {AssetKind.TIMELINE, AssetKind.CONTAINER, AssetKind.GRAPHIC, AssetKind.STAGE}
)
