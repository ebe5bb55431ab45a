"""3D first-fit bin packing of weighted boxes into containers."""

from binpack.errors import BinpackError, InvalidArgument, InvalidRotation
from binpack.geometry import OverlapRule, Rotation, boxes_overlap, effective_dimensions, volume
from binpack.models import Container, ContainerPlacement, Item, ItemPlacement, PackingJob
from binpack.packing.first_fit import pack, place_in_container, try_place_at, unplaced_items

__all__ = [
    "BinpackError",
    "Container",
    "ContainerPlacement",
    "InvalidArgument",
    "InvalidRotation",
    "Item",
    "ItemPlacement",
    "OverlapRule",
    "PackingJob",
    "Rotation",
    "boxes_overlap",
    "effective_dimensions",
    "pack",
    "place_in_container",
    "try_place_at",
    "unplaced_items",
    "volume",
]
