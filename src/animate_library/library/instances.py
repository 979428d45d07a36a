"""
Runtime instance handles created from library assets.

An instance is a lightweight placement of an asset, identified by an
id supplied by the caller. Instances are not tracked by the library;
playback and rendering consume them elsewhere.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from .models import AssetKind

if TYPE_CHECKING:
    from .items import LibraryItem


@dataclass(eq=False)
class Instance:
    """Base instance handle.

    Compared by identity: two calls to `create` with the same id
    produce two distinct instances.
    """
    asset: "LibraryItem" = field(repr=False)
    instance_id: Any

    kind: ClassVar[AssetKind]

    @property
    def asset_id(self) -> Any:
        """Id of the asset this instance was created from."""
        return self.asset.asset_id

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(asset_id={self.asset_id!r}, "
            f"instance_id={self.instance_id!r})"
        )


@dataclass(eq=False, repr=False)
class BitmapInstance(Instance):
    kind = AssetKind.BITMAP


@dataclass(eq=False, repr=False)
class ShapeInstance(Instance):
    kind = AssetKind.SHAPE


@dataclass(eq=False, repr=False)
class TextInstance(Instance):
    kind = AssetKind.TEXT


@dataclass(eq=False, repr=False)
class TimelineInstance(Instance):
    """Animated movie clip placement."""
    kind = AssetKind.TIMELINE


@dataclass(eq=False, repr=False)
class ContainerInstance(TimelineInstance):
    """Static, single-frame container placement."""
    kind = AssetKind.CONTAINER


@dataclass(eq=False, repr=False)
class GraphicInstance(TimelineInstance):
    kind = AssetKind.GRAPHIC


@dataclass(eq=False, repr=False)
class StageInstance(TimelineInstance):
    """Root timeline placement."""
    kind = AssetKind.STAGE
