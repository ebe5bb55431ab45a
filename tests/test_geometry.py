from __future__ import annotations

from collections import Counter

import pytest

from binpack.errors import InvalidArgument, InvalidRotation
from binpack.geometry import OverlapRule, Rotation, boxes_overlap, effective_dimensions, volume
from binpack.models import Item


def test_volume() -> None:
    assert volume(10, 5, 20) == 1_000
    assert volume(0, 5, 20) == 0
    assert Item(width=10, height=5, depth=20).volume == 1_000


def test_effective_dimensions_for_every_rotation() -> None:
    item = Item(width=5, height=10, depth=15)

    assert effective_dimensions(item, 0) == (5, 10, 15)
    assert effective_dimensions(item, 1) == (10, 5, 15)
    assert effective_dimensions(item, 2) == (10, 15, 5)
    assert effective_dimensions(item, 3) == (15, 10, 5)
    assert effective_dimensions(item, 4) == (15, 5, 10)
    assert effective_dimensions(item, 5) == (5, 15, 10)


@pytest.mark.parametrize("dims", [(5, 10, 15), (3, 3, 7), (4, 4, 4), (0, 2, 9)])
def test_rotations_are_permutations(dims) -> None:
    """No extent is lost or duplicated by any rotation."""
    item = Item(width=dims[0], height=dims[1], depth=dims[2])
    for rotation in Rotation:
        assert Counter(effective_dimensions(item, rotation)) == Counter(dims)


def test_six_distinct_rotations() -> None:
    item = Item(width=5, height=10, depth=15)
    assert len({effective_dimensions(item, r) for r in Rotation}) == 6


@pytest.mark.parametrize("index", [-1, 6, 42])
def test_rotation_out_of_range(index) -> None:
    with pytest.raises(InvalidRotation):
        effective_dimensions(Item(width=1, height=2, depth=3), index)


@pytest.mark.parametrize("index", ["1", 1.0, None, True])
def test_rotation_not_an_integer(index) -> None:
    with pytest.raises(InvalidArgument):
        Rotation.from_index(index)


def test_invalid_rotation_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Rotation.from_index(9)


def test_boxes_overlap_overlapping() -> None:
    """Two boxes sharing the origin overlap."""
    assert boxes_overlap((0, 0, 0), (5, 10, 15), (0, 0, 0), (3, 8, 13)) is True


def test_boxes_overlap_not_overlapping() -> None:
    """Boxes clear of each other along x do not overlap."""
    assert boxes_overlap((6, 0, 0), (5, 10, 15), (0, 0, 0), (3, 8, 13)) is False
    assert boxes_overlap((20, 20, 20), (1, 1, 1), (0, 0, 0), (3, 3, 3), OverlapRule.SYMMETRIC) is False


def test_legacy_rule_reports_near_boxes_as_overlapping() -> None:
    # x ranges [6, 16] and [0, 3] are disjoint, the legacy threshold still trips
    assert boxes_overlap((6, 0, 0), (10, 5, 15), (0, 0, 0), (3, 8, 13)) is True
    assert boxes_overlap((6, 0, 0), (10, 5, 15), (0, 0, 0), (3, 8, 13), OverlapRule.SYMMETRIC) is False


def test_face_touching_boxes() -> None:
    first = ((0, 0, 0), (6, 5, 4))
    second = ((6, 0, 0), (7, 4, 2))

    assert boxes_overlap(*first, *second, OverlapRule.SYMMETRIC) is False
    assert boxes_overlap(*first, *second, OverlapRule.LEGACY) is True


def test_distance_equal_to_threshold_is_not_overlap() -> None:
    # legacy threshold along x: 2 + 2 / 2 = 3
    assert boxes_overlap((0, 0, 0), (2, 2, 2), (3, 0, 0), (2, 2, 2)) is False
    assert boxes_overlap((0, 0, 0), (2, 2, 2), (2, 0, 0), (2, 2, 2)) is True


def test_legacy_rule_depends_on_argument_order() -> None:
    big = ((0, 0, 0), (4, 4, 4))
    small = ((5.5, 0, 0), (2, 4, 4))

    # centre distance along x is 4.5; thresholds are 4 + 1 and 2 + 2
    assert boxes_overlap(*big, *small) is True
    assert boxes_overlap(*small, *big) is False


def test_symmetric_rule_ignores_argument_order() -> None:
    big = ((0, 0, 0), (4, 4, 4))
    small = ((3, 1, 1), (2, 2, 2))

    assert boxes_overlap(*big, *small, OverlapRule.SYMMETRIC) is True
    assert boxes_overlap(*small, *big, OverlapRule.SYMMETRIC) is True


def test_overlap_rule_accepts_string() -> None:
    assert boxes_overlap((0, 0, 0), (6, 5, 4), (6, 0, 0), (7, 4, 2), "symmetric") is False
