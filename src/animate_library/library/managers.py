"""
Managers for asset storage and lookup.

Provides AssetsManager, which keeps the typed asset collections in
export order together with an id index for O(1) lookup.
"""

import logging
from typing import Any, Dict, List, Optional

from .errors import NotFoundError, SchemaError
from .items import Container, LibraryItem, Stage
from .models import AssetKind


class AssetsManager:
    """Storage and index for the assets of one library.

    Maintains:
    - bitmaps, shapes, texts, timelines: ordered as in the export
    - assets_by_id: global index asset_id -> asset (across categories)
    - stage: the last stage timeline added
    - has_container: whether any static container was added

    Duplicate ids across or within categories follow last-write-wins,
    or raise SchemaError when `strict_ids` is set.
    """

    def __init__(self, strict_ids: bool = False):
        self.bitmaps: List[LibraryItem] = []
        self.shapes: List[LibraryItem] = []
        self.texts: List[LibraryItem] = []
        self.timelines: List[LibraryItem] = []

        # Fast lookup index: asset_id -> asset
        self.assets_by_id: Dict[Any, LibraryItem] = {}

        self.stage: Optional[Stage] = None
        self.has_container = False
        self.strict_ids = strict_ids
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _collection_for(self, kind: AssetKind) -> List[LibraryItem]:
        """Return the ordered collection that stores assets of this kind."""
        if kind is AssetKind.BITMAP:
            return self.bitmaps
        if kind is AssetKind.SHAPE:
            return self.shapes
        if kind is AssetKind.TEXT:
            return self.texts
        return self.timelines

    def add_asset(self, asset: LibraryItem) -> None:
        """Append an asset to its collection and index it by id.

        Args:
            asset: Constructed asset

        Raises:
            SchemaError: If the id is already indexed and strict_ids is set
        """
        previous = self.assets_by_id.get(asset.asset_id)
        if previous is not None:
            message = (
                f"Duplicate asset id {asset.asset_id!r}: "
                f"{previous.kind.value} replaced by {asset.kind.value}"
            )
            if self.strict_ids:
                raise SchemaError(message)
            self.logger.warning(message)

        self._collection_for(asset.kind).append(asset)
        self.assets_by_id[asset.asset_id] = asset

        if isinstance(asset, Stage):
            self.stage = asset
        elif isinstance(asset, Container):
            self.has_container = True

    def get_asset_by_id(self, asset_id: Any) -> LibraryItem:
        """Return the asset with this id.

        Raises:
            NotFoundError: If no asset has this id
        """
        try:
            return self.assets_by_id[asset_id]
        except (KeyError, TypeError):
            raise NotFoundError(asset_id) from None

    def has_asset(self, asset_id: Any) -> bool:
        """Return True if an asset with this id is indexed."""
        try:
            return asset_id in self.assets_by_id
        except TypeError:
            return False

    def counts(self) -> Dict[str, int]:
        """Return the number of assets per collection."""
        return {
            "bitmaps": len(self.bitmaps),
            "shapes": len(self.shapes),
            "texts": len(self.texts),
            "timelines": len(self.timelines),
        }

    def clear(self) -> None:
        """Drop every asset and the id index."""
        self.bitmaps.clear()
        self.shapes.clear()
        self.texts.clear()
        self.timelines.clear()
        self.assets_by_id.clear()
        self.stage = None
