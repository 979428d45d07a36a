"""
Loaders for exported animation documents.

Handles reading export files with orjson and checking the top-level
document schema before any asset is constructed.
"""

import logging
from pathlib import Path
from typing import Any, cast

import orjson

from .errors import SchemaError
from .models import (
    CATEGORY_KEYS,
    META_FRAMERATE,
    META_KEY,
    META_STAGE_NAME,
    RawDocument,
)


class ExportFileLoader:
    """Reads and validates exported JSON documents."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read_export_file(self, export_file: str | Path) -> RawDocument:
        """Read an export file and validate its top-level structure.

        Args:
            export_file: Path to the exported JSON file

        Returns:
            The parsed document

        Raises:
            SchemaError: If the file cannot be read, is not valid JSON or
                does not match the export schema
        """
        export_path = Path(export_file)
        self.logger.debug(f"Reading export file: {export_path}")

        try:
            with export_path.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except OSError as e:
            self.logger.error(f"Error reading export file {export_path}: {e}")
            raise SchemaError(f"Cannot read export file {export_path}: {e}") from e
        except orjson.JSONDecodeError as e:
            self.logger.error(f"Error parsing export file {export_path}: {e}")
            raise SchemaError(f"Invalid JSON in {export_path}: {e}") from e

        self.validate_document(data)
        return cast(RawDocument, data)

    @staticmethod
    def validate_document(data: Any) -> None:
        """Check that a document has every required top-level field.

        Records themselves are checked while they are constructed.

        Args:
            data: Parsed export document

        Raises:
            SchemaError: On the first problem found
        """
        if not isinstance(data, dict):
            raise SchemaError(
                f"Export document must be an object, got {type(data).__name__}"
            )
        document = cast(RawDocument, data)

        for key in CATEGORY_KEYS:
            if key not in document:
                raise SchemaError(f"Export document is missing '{key}'")
            if not isinstance(document[key], list):
                raise SchemaError(
                    f"'{key}' must be a list, got {type(document[key]).__name__}"
                )

        meta = document.get(META_KEY)
        if meta is None:
            raise SchemaError(f"Export document is missing '{META_KEY}'")
        if not isinstance(meta, dict):
            raise SchemaError(f"'{META_KEY}' must be an object, got {type(meta).__name__}")
        for key in (META_STAGE_NAME, META_FRAMERATE):
            if key not in meta:
                raise SchemaError(f"'{META_KEY}' is missing '{key}'")
        framerate = meta[META_FRAMERATE]
        if isinstance(framerate, bool) or not isinstance(framerate, (int, float)):
            raise SchemaError(
                f"'{META_KEY}' {META_FRAMERATE} must be a number, "
                f"got {type(framerate).__name__}: {framerate!r}"
            )
