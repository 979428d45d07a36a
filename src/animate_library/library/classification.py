"""
Classification of exported timeline records.

Decides which timeline variant a record becomes. Kept free of any
construction or library state so the rule order can be tested on
plain dicts.
"""

import math
from typing import Any

from .models import (
    GRAPHIC_TYPE,
    STAGE_TYPE,
    TOTAL_FRAMES_KEY,
    TYPE_KEY,
    AssetKind,
    RawRecord,
)


_MISSING = object()


def _frame_count(total_frames: Any) -> float:
    """Convert a totalFrames value to a number the way the exporter compares it.

    null and false count as 0, true as 1, numeric strings by their value
    (a blank string is 0). Anything else yields NaN.
    """
    if total_frames is None:
        return 0.0
    if isinstance(total_frames, (bool, int, float)):
        return float(total_frames)
    if isinstance(total_frames, str):
        text = total_frames.strip()
        if not text:
            return 0.0
        if "_" in text:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _is_single_frame(total_frames: Any) -> bool:
    """Return True if a totalFrames value means a static timeline.

    A missing key never counts as static; NaN never compares <= 1.
    """
    if total_frames is _MISSING:
        return False
    return _frame_count(total_frames) <= 1


def classify_timeline(record: RawRecord) -> AssetKind:
    """Select the asset variant for a raw timeline record.

    Rules are applied in priority order, first match wins:

    1. one frame or less and not the stage -> CONTAINER
    2. type "graphic" -> GRAPHIC
    3. type "stage" -> STAGE
    4. anything else -> TIMELINE (animated movie clip)

    Args:
        record: Raw timeline record

    Returns:
        Variant tag for the record
    """
    timeline_type = record.get(TYPE_KEY)

    if _is_single_frame(record.get(TOTAL_FRAMES_KEY, _MISSING)) and timeline_type != STAGE_TYPE:
        return AssetKind.CONTAINER
    if timeline_type == GRAPHIC_TYPE:
        return AssetKind.GRAPHIC
    if timeline_type == STAGE_TYPE:
        return AssetKind.STAGE
    return AssetKind.TIMELINE
