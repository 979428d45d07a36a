"""
Formatting helpers for generated output.

Number rounding and two JSON pretty-printers used when writing
human-readable data files. Independent of the asset library.
"""

import math
import re
from typing import Any

import orjson

# Quoted object keys without digits, quotes or parentheses
_SIMPLE_KEY_RE = re.compile(r'"([^()"\d]+)":')
# Opening quote of a lowercase string
_LOWER_STRING_RE = re.compile(r'("[a-z])')


def to_precision(value: float, places: int = 2) -> float:
    """Round a number to a number of decimal places.

    Halves round up toward positive infinity, so results match the
    exporter's JavaScript runtime (-2.5 -> -2.0, 0.125 -> 0.13).

    Args:
        value: Number to round
        places: Number of decimal places

    Returns:
        Rounded number
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    num = 10 ** places
    return math.floor(value * num + 0.5) / num


def stringify_simple(obj: Any) -> str:
    """Serialize to indented JSON with simple keys left unquoted.

    Keys containing digits, quotes or parentheses keep their quotes.

    Args:
        obj: JSON-serializable object

    Returns:
        Two-space indented text
    """
    text = orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8")
    return _SIMPLE_KEY_RE.sub(r"\1:", text)


def readable_shapes(obj: Any) -> str:
    """Serialize shape data into a readable, line-broken listing.

    Args:
        obj: Shape data (usually a dict of path lists)

    Returns:
        Re-spaced JSON text
    """
    text = orjson.dumps(obj).decode("utf-8")
    text = text.replace("{", "{\n  ", 1)
    text = text.replace("]}", "\n  ]\n}", 1)
    text = text.replace(":", ": ")
    text = text.replace(",", ", ")
    text = _LOWER_STRING_RE.sub(r"\n    \1", text)
    return text.replace("],", "],\n  ")
