"""
Typed asset variants built from exported records.

Each variant wraps one raw record and keeps a reference to the library
that built it. Models are intentionally lightweight: no file-system or
playback logic, only the attributes copied from the record and a
`create` method that fans out new instances.

Assets are frozen once built. Sequence fields are tuples and mapping
fields are read-only proxies.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, cast

from .errors import SchemaError
from .instances import (
    BitmapInstance,
    ContainerInstance,
    GraphicInstance,
    Instance,
    ShapeInstance,
    StageInstance,
    TextInstance,
    TimelineInstance,
)
from .models import (
    ASSET_ID_KEY,
    META_STAGE_NAME,
    MOVIECLIP_TYPE,
    TOTAL_FRAMES_KEY,
    TYPE_KEY,
    AssetKind,
    RawRecord,
)

if TYPE_CHECKING:
    from .service import Library


_EMPTY_MAPPING: Mapping[str, Any] = MappingProxyType({})


def read_sequence(data: RawRecord, key: str, asset_id: int) -> Tuple[Any, ...]:
    """Read an optional list field as a tuple.

    Args:
        data: Raw record
        key: Field name
        asset_id: Id of the record, for error messages

    Returns:
        Tuple of the list items (empty if the field is missing or null)

    Raises:
        SchemaError: If the field is present but not a list
    """
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise SchemaError(
            f"Asset {asset_id}: '{key}' must be a list, got {type(value).__name__}"
        )
    return tuple(cast(list[Any], value))


def read_mapping(data: RawRecord, key: str, asset_id: int) -> Mapping[str, Any]:
    """Read an optional object field as a read-only mapping.

    Raises:
        SchemaError: If the field is present but not an object
    """
    value = data.get(key)
    if value is None:
        return _EMPTY_MAPPING
    if not isinstance(value, dict):
        raise SchemaError(
            f"Asset {asset_id}: '{key}' must be an object, got {type(value).__name__}"
        )
    return MappingProxyType(dict(cast(dict[str, Any], value)))


# =============================================================================
# Base
# =============================================================================

@dataclass(frozen=True)
class LibraryItem:
    """Base class for every asset in a library.

    `asset_id` is copied from the record's `assetId`; it is required and
    must be an integer. The raw record is kept as `data` for consumers
    that need fields this model does not expose.
    """
    library: "Library" = field(repr=False, compare=False)
    asset_id: int
    data: RawRecord = field(repr=False, compare=False)

    kind: ClassVar[AssetKind]
    instance_class: ClassVar[Type[Instance]]

    @staticmethod
    def read_asset_id(data: Any) -> int:
        """Return the record's asset id or raise SchemaError.

        Args:
            data: Raw record

        Returns:
            The `assetId` value
        """
        if not isinstance(data, dict):
            raise SchemaError(
                f"Asset record must be an object, got {type(data).__name__}"
            )
        record = cast(RawRecord, data)
        asset_id = record.get(ASSET_ID_KEY)
        if asset_id is None:
            raise SchemaError(f"Asset record is missing '{ASSET_ID_KEY}': {record!r}")
        # bool is an int subclass and would collide with ids 0 and 1
        if isinstance(asset_id, bool) or not isinstance(asset_id, int):
            raise SchemaError(
                f"'{ASSET_ID_KEY}' must be an integer, got {type(asset_id).__name__}: "
                f"{asset_id!r}"
            )
        return asset_id

    def create(self, instance_id: Any) -> Instance:
        """Create a new runtime instance of this asset.

        Never cached: every call returns a fresh instance.
        """
        return self.instance_class(self, instance_id)


# =============================================================================
# Bitmap / Shape / Text
# =============================================================================

@dataclass(frozen=True)
class Bitmap(LibraryItem):
    """Bitmap image exported to an external file."""
    name: str = ""
    src: str = ""
    width: Optional[int] = None
    height: Optional[int] = None

    kind = AssetKind.BITMAP
    instance_class = BitmapInstance

    @classmethod
    def from_dict(cls, library: "Library", data: RawRecord) -> "Bitmap":
        """Create Bitmap from an exported record."""
        asset_id = cls.read_asset_id(data)
        return cls(
            library=library,
            asset_id=asset_id,
            data=data,
            name=str(data.get("name", "")),
            src=str(data.get("src", "")),
            width=data.get("width"),
            height=data.get("height"),
        )


@dataclass(frozen=True)
class Shape(LibraryItem):
    """Vector shape.

    The name is derived from the project stage name so generated
    shape files do not collide between projects.
    """
    name: str = ""
    paths: Tuple[Any, ...] = field(default=(), repr=False)

    kind = AssetKind.SHAPE
    instance_class = ShapeInstance

    @classmethod
    def from_dict(cls, library: "Library", data: RawRecord) -> "Shape":
        """Create Shape from an exported record.

        Args:
            library: Owning library; its meta provides the stage name
            data: Raw shape record

        Returns:
            Shape named `<stageName>_<assetId>`
        """
        asset_id = cls.read_asset_id(data)
        stage_name = library.meta[META_STAGE_NAME]
        return cls(
            library=library,
            asset_id=asset_id,
            data=data,
            name=f"{stage_name}_{asset_id}",
            paths=read_sequence(data, "paths", asset_id),
        )


@dataclass(frozen=True)
class Text(LibraryItem):
    """Static or dynamic text field."""
    name: str = ""
    text: str = ""
    style: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_MAPPING)
    width: Optional[float] = None
    height: Optional[float] = None

    kind = AssetKind.TEXT
    instance_class = TextInstance

    @classmethod
    def from_dict(cls, library: "Library", data: RawRecord) -> "Text":
        """Create Text from an exported record."""
        asset_id = cls.read_asset_id(data)
        return cls(
            library=library,
            asset_id=asset_id,
            data=data,
            name=str(data.get("name", "")),
            text=str(data.get("text", "")),
            style=read_mapping(data, "style", asset_id),
            width=data.get("width"),
            height=data.get("height"),
        )


# =============================================================================
# Timelines
# =============================================================================

@dataclass(frozen=True)
class Timeline(LibraryItem):
    """Animated movie clip: the default timeline variant."""
    name: str = ""
    type: str = MOVIECLIP_TYPE
    total_frames: Optional[int] = None
    frames: Tuple[Any, ...] = field(default=(), repr=False)
    labels: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_MAPPING, repr=False)
    children: Tuple[Any, ...] = field(default=(), repr=False)

    kind = AssetKind.TIMELINE
    instance_class = TimelineInstance

    @classmethod
    def _timeline_fields(cls, data: RawRecord, asset_id: int) -> Dict[str, Any]:
        """Extract the attributes shared by every timeline variant."""
        return {
            "name": str(data.get("name", "")),
            "type": str(data.get(TYPE_KEY, MOVIECLIP_TYPE)),
            "total_frames": data.get(TOTAL_FRAMES_KEY),
            "frames": read_sequence(data, "frames", asset_id),
            "labels": read_mapping(data, "labels", asset_id),
            "children": read_sequence(data, "children", asset_id),
        }

    @classmethod
    def from_dict(cls, library: "Library", data: RawRecord) -> "Timeline":
        """Create a timeline variant from an exported record."""
        asset_id = cls.read_asset_id(data)
        return cls(
            library=library,
            asset_id=asset_id,
            data=data,
            **cls._timeline_fields(data, asset_id),
        )


@dataclass(frozen=True)
class Container(Timeline):
    """Non-animated timeline (one frame or less)."""
    kind = AssetKind.CONTAINER
    instance_class = ContainerInstance


@dataclass(frozen=True)
class Graphic(Timeline):
    """Graphic symbol timeline, driven by its parent's frames."""
    kind = AssetKind.GRAPHIC
    instance_class = GraphicInstance


@dataclass(frozen=True)
class Stage(Timeline):
    """Root timeline of the project.

    The framerate comes from the build settings, not from the record.
    """
    framerate: float = 0.0

    kind = AssetKind.STAGE
    instance_class = StageInstance

    @classmethod
    def from_dict(  # type: ignore[override]
        cls, library: "Library", data: RawRecord, framerate: float = 0.0
    ) -> "Stage":
        """Create Stage from an exported record and the project framerate."""
        asset_id = cls.read_asset_id(data)
        return cls(
            library=library,
            asset_id=asset_id,
            data=data,
            framerate=framerate,
            **cls._timeline_fields(data, asset_id),
        )


# Variant tag -> asset class
ASSET_TYPES: Dict[AssetKind, Type[LibraryItem]] = {
    AssetKind.BITMAP: Bitmap,
    AssetKind.SHAPE: Shape,
    AssetKind.TEXT: Text,
    AssetKind.TIMELINE: Timeline,
    AssetKind.CONTAINER: Container,
    AssetKind.GRAPHIC: Graphic,
    AssetKind.STAGE: Stage,
}
