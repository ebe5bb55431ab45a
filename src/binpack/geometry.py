"""Geometry utilities for box packing."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Sequence

from binpack.errors import InvalidArgument, InvalidRotation

if TYPE_CHECKING:
    from .models import Container, Item

Vector = tuple[float, float, float]

AXIS_X = 0
AXIS_Y = 1
AXIS_Z = 2

# (x, y), (y, z), (x, z)
_PROJECTIONS = ((AXIS_X, AXIS_Y), (AXIS_Y, AXIS_Z), (AXIS_X, AXIS_Z))


class Rotation(IntEnum):
    """
    The six axis-aligned orientations of a box.

    Each member names which of the box's own extents ends up on the
    container's width, height and depth axes:
      0:(w,h,d) 1:(h,w,d) 2:(h,d,w) 3:(d,h,w) 4:(d,w,h) 5:(w,d,h)
    """

    WHD = 0
    HWD = 1
    HDW = 2
    DHW = 3
    DWH = 4
    WDH = 5

    @property
    def axes(self) -> tuple[str, str, str]:
        return _ROTATION_AXES[self]

    @classmethod
    def from_index(cls, index: object) -> "Rotation":
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgument(f"Rotation must be an integer, got {index!r}")
        if not 0 <= index <= 5:
            raise InvalidRotation(f"Rotation must be in 0..5, got {index}")
        return cls(index)


_ROTATION_AXES: dict[Rotation, tuple[str, str, str]] = {
    Rotation.WHD: ("width", "height", "depth"),
    Rotation.HWD: ("height", "width", "depth"),
    Rotation.HDW: ("height", "depth", "width"),
    Rotation.DHW: ("depth", "height", "width"),
    Rotation.DWH: ("depth", "width", "height"),
    Rotation.WDH: ("width", "depth", "height"),
}


class OverlapRule(str, Enum):
    """Per-axis threshold used by :func:`boxes_overlap`."""

    # centre distance < extent1 + extent2 / 2
    LEGACY = "legacy"
    # centre distance < (extent1 + extent2) / 2
    SYMMETRIC = "symmetric"


def volume(width: float, height: float, depth: float) -> float:
    return width * height * depth


def box_volume(box: "Item | Container") -> float:
    return volume(box.width, box.height, box.depth)


def effective_dimensions(box: "Item", rotation: int) -> Vector:
    """Return the box extents reordered for the given rotation index."""
    rot = Rotation.from_index(rotation)
    return tuple(getattr(box, axis) for axis in rot.axes)  # type: ignore[return-value]


def _axis_overlap(
    pos1: Sequence[float],
    dim1: Sequence[float],
    pos2: Sequence[float],
    dim2: Sequence[float],
    axis: int,
    rule: OverlapRule,
) -> bool:
    c1 = pos1[axis] + dim1[axis] / 2
    c2 = pos2[axis] + dim2[axis] / 2
    distance = abs(c1 - c2)

    if rule is OverlapRule.LEGACY:
        threshold = dim1[axis] + dim2[axis] / 2
    else:
        threshold = (dim1[axis] + dim2[axis]) / 2

    return distance < threshold


def _rectangles_overlap(pos1, dim1, pos2, dim2, a: int, b: int, rule: OverlapRule) -> bool:
    return _axis_overlap(pos1, dim1, pos2, dim2, a, rule) and _axis_overlap(pos1, dim1, pos2, dim2, b, rule)


def boxes_overlap(
    pos1: Sequence[float],
    dim1: Sequence[float],
    pos2: Sequence[float],
    dim2: Sequence[float],
    rule: OverlapRule = OverlapRule.LEGACY,
) -> bool:
    """
    Overlap test for two axis-aligned boxes.

    Each box is given by its minimum corner and its (rotated) extents. The
    boxes are projected onto the (x,y), (y,z) and (x,z) planes and only count
    as intersecting when all three projected rectangles overlap.

    With ``OverlapRule.LEGACY`` the per-axis threshold is
    ``extent1 + extent2 / 2``, which is not symmetric in its arguments and
    reports boxes sharing a face as overlapping. ``OverlapRule.SYMMETRIC``
    uses ``(extent1 + extent2) / 2``. In both cases a centre distance exactly
    equal to the threshold is NOT an overlap.
    """
    rule = OverlapRule(rule)
    return all(_rectangles_overlap(pos1, dim1, pos2, dim2, a, b, rule) for a, b in _PROJECTIONS)
