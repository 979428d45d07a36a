"""
Main service for exported animation assets.

Provides the Library: builds the typed asset graph from an export
document and offers id lookup and instance creation on top of it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .classification import classify_timeline
from .errors import UseAfterTeardownError
from .instances import Instance
from .items import Bitmap, Container, Graphic, LibraryItem, Shape, Stage, Text, Timeline
from .loaders import ExportFileLoader
from .managers import AssetsManager
from .models import (
    ASSET_ID_KEY,
    BITMAPS_KEY,
    META_FRAMERATE,
    META_KEY,
    SHAPES_KEY,
    TEXTS_KEY,
    TIMELINES_KEY,
    AssetKind,
    MetaData,
    RawDocument,
    RawRecord,
)


class Library:
    """Typed assets of one exported project.

    Construction runs a single pass over the document: Bitmaps, Shapes,
    Texts, then Timelines, each in export order. Assets are collected in
    a fresh manager that is attached only after the whole pass succeeds,
    so a malformed document never leaves a partially built library.

    After construction the library is read-only; `teardown()` releases
    the assets and any later query raises UseAfterTeardownError.
    """

    def __init__(self, data: RawDocument, strict_ids: bool = False):
        """Build the library from an export document.

        Args:
            data: Parsed export document
            strict_ids: Raise SchemaError on duplicate asset ids instead
                of letting the last asset win

        Raises:
            SchemaError: If the document or any record is malformed
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._manager: Optional[AssetsManager] = None
        self._torn_down = False

        ExportFileLoader.validate_document(data)
        self._meta: MetaData = data[META_KEY]

        self._manager = self._build(data, strict_ids)
        self.logger.info(f"Library built: {self.summary()}")

    @classmethod
    def from_file(cls, export_file: str | Path, strict_ids: bool = False) -> "Library":
        """Read an export file and build its library."""
        data = ExportFileLoader().read_export_file(export_file)
        return cls(data, strict_ids=strict_ids)

    def _build(self, data: RawDocument, strict_ids: bool) -> AssetsManager:
        """Construct every asset into a new manager."""
        manager = AssetsManager(strict_ids=strict_ids)

        for bitmap_data in data[BITMAPS_KEY]:
            manager.add_asset(Bitmap.from_dict(self, bitmap_data))

        for shape_data in data[SHAPES_KEY]:
            manager.add_asset(Shape.from_dict(self, shape_data))

        for text_data in data[TEXTS_KEY]:
            manager.add_asset(Text.from_dict(self, text_data))

        for timeline_data in data[TIMELINES_KEY]:
            manager.add_asset(self._build_timeline(timeline_data))

        return manager

    def _build_timeline(self, timeline_data: RawRecord) -> Timeline:
        """Classify a timeline record and construct its variant."""
        # Validate the record before classification reads from it
        LibraryItem.read_asset_id(timeline_data)
        kind = classify_timeline(timeline_data)
        self.logger.debug(
            f"Timeline {timeline_data.get(ASSET_ID_KEY)!r} classified as {kind.value}"
        )

        if kind is AssetKind.CONTAINER:
            return Container.from_dict(self, timeline_data)
        if kind is AssetKind.GRAPHIC:
            return Graphic.from_dict(self, timeline_data)
        if kind is AssetKind.STAGE:
            return Stage.from_dict(self, timeline_data, self._meta[META_FRAMERATE])
        return Timeline.from_dict(self, timeline_data)

    def _check_active(self) -> None:
        """Fail if the library was torn down."""
        if self._torn_down:
            raise UseAfterTeardownError("Library has been torn down")

    def _require_manager(self) -> AssetsManager:
        """Return the manager or fail if the library was torn down."""
        self._check_active()
        if self._manager is None:
            raise UseAfterTeardownError("Library is still being built")
        return self._manager

    # Public API methods - delegate to manager

    @property
    def meta(self) -> MetaData:
        """Build settings from the export's `_meta` field."""
        self._check_active()
        return self._meta

    @property
    def bitmaps(self) -> Tuple[LibraryItem, ...]:
        """Bitmap assets in export order."""
        return tuple(self._require_manager().bitmaps)

    @property
    def shapes(self) -> Tuple[LibraryItem, ...]:
        """Shape assets in export order."""
        return tuple(self._require_manager().shapes)

    @property
    def texts(self) -> Tuple[LibraryItem, ...]:
        """Text assets in export order."""
        return tuple(self._require_manager().texts)

    @property
    def timelines(self) -> Tuple[LibraryItem, ...]:
        """Timeline assets (every variant) in export order."""
        return tuple(self._require_manager().timelines)

    @property
    def stage(self) -> Optional[Stage]:
        """The root timeline, or None if the export has no stage."""
        return self._require_manager().stage

    @property
    def has_container(self) -> bool:
        """Whether any non-animated container timeline was built."""
        return self._require_manager().has_container

    @property
    def is_torn_down(self) -> bool:
        """Whether teardown() has been called."""
        return self._torn_down

    def lookup(self, asset_id: Any) -> LibraryItem:
        """Return the asset with this id.

        Raises:
            NotFoundError: If no asset has this id
            UseAfterTeardownError: If the library was torn down
        """
        return self._require_manager().get_asset_by_id(asset_id)

    def create_instance(self, asset_id: Any, instance_id: Any) -> Instance:
        """Create a new instance of the asset with this id.

        Every call returns a fresh instance, even for a repeated
        (asset_id, instance_id) pair.

        Raises:
            NotFoundError: If no asset has this id
            UseAfterTeardownError: If the library was torn down
        """
        return self.lookup(asset_id).create(instance_id)

    def summary(self) -> Dict[str, Any]:
        """Return asset counts plus stage/container information."""
        manager = self._require_manager()
        summary: Dict[str, Any] = manager.counts()
        summary["stage"] = manager.stage.asset_id if manager.stage else None
        summary["has_container"] = manager.has_container
        return summary

    def teardown(self) -> None:
        """Release every asset. Calling it again does nothing."""
        if self._torn_down:
            return
        if self._manager is not None:
            self._manager.clear()
        self._manager = None
        self._torn_down = True
        self.logger.debug("Library torn down")

    def __contains__(self, asset_id: Any) -> bool:
        return self._require_manager().has_asset(asset_id)
