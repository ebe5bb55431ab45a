# src/binpack/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Iterable

from binpack.config import get_settings
from binpack.geometry import AXIS_X, AXIS_Y, AXIS_Z, OverlapRule, Rotation, box_volume
from binpack.models import ContainerPlacement, ItemPlacement, PackingJob

logger = logging.getLogger(__name__)

_AXES = (AXIS_X, AXIS_Y, AXIS_Z)


def candidate_position(placed: ItemPlacement, axis: int) -> tuple[int, int, int]:
    """Position flush against the far face of ``placed`` along ``axis``."""
    position = list(placed.position)
    position[axis] += placed.effective_dimensions()[axis]
    return tuple(position)  # type: ignore[return-value]


def try_place_at(
    container: ContainerPlacement,
    item: ItemPlacement,
    position: tuple[int, int, int],
    rule: OverlapRule = OverlapRule.SYMMETRIC,
) -> tuple[bool, ContainerPlacement, ItemPlacement]:
    """
    Try every rotation of ``item`` at ``position`` and keep the first that fits.

    The weight budget is checked once up front since it does not depend on
    rotation. On failure the container and item are returned unchanged.
    """
    if not container.fits_weight_budget(item):
        return False, container, item

    for rotation in Rotation:
        candidate = item.set_rotation(rotation).set_position(position)
        if container.within_boundaries(candidate) and container.no_intersections(candidate, rule):
            placed = candidate.set_placed(True)
            return True, container.add_placed_item(placed), placed

    return False, container, item


def place_in_container(
    container: ContainerPlacement,
    item: ItemPlacement,
    rule: OverlapRule = OverlapRule.SYMMETRIC,
) -> tuple[bool, ContainerPlacement, ItemPlacement]:
    """
    Place ``item`` at the first feasible candidate position in ``container``.

    An empty container only offers the origin. Otherwise candidates are the
    faces of the already placed items, walked axis by axis (x, y, z) and, per
    axis, in storage order. An item that fits nowhere is recorded in the
    container's ``unfitted_items`` and returned untouched.
    """
    if not container.placed_items:
        fits, updated_container, updated_item = try_place_at(container, item, (0, 0, 0), rule)
    else:
        fits, updated_container, updated_item = False, container, item
        for axis in _AXES:
            for placed in container.placed_items:
                fits, updated_container, updated_item = try_place_at(
                    container, item, candidate_position(placed, axis), rule
                )
                if fits:
                    break
            if fits:
                break

    if fits:
        logger.debug(
            "Item placed: payload=%r position=%s rotation=%d",
            updated_item.item.payload,
            updated_item.position,
            updated_item.rotation,
        )
        return True, updated_container, updated_item

    logger.debug("Item unfit: payload=%r container=%r", item.item.payload, container.container.payload)
    return False, container.add_unfitted_item(item), item


def pack(job: PackingJob, overlap_rule: OverlapRule | str | None = None) -> list[ContainerPlacement]:
    """
    Greedy first-fit packing of ``job.items`` into ``job.containers``.

    - Containers and items are processed largest volume first (stable sort)
    - Each container gets one pass over the items not placed yet
    - Items placed earlier are passed through untouched
    - Deterministic, no backtracking

    Returns one ContainerPlacement per container in processing order, with
    ``placed_items`` and ``unfitted_items`` most recent first.
    """
    rule = OverlapRule(overlap_rule) if overlap_rule is not None else get_settings().overlap_rule

    containers = [
        ContainerPlacement(container=c) for c in sorted(job.containers, key=box_volume, reverse=True)
    ]
    items = [ItemPlacement(item=i) for i in sorted(job.items, key=box_volume, reverse=True)]

    logger.info(
        "pack start: containers=%d items=%d overlap_rule=%s",
        len(containers),
        len(items),
        rule.value,
    )

    packed: list[ContainerPlacement] = []
    for container in containers:
        carried: list[ItemPlacement] = []
        for item in items:
            if item.placed:
                carried.append(item)
                continue
            _, container, item = place_in_container(container, item, rule)
            carried.append(item)

        packed.append(container)
        items = carried

    logger.info(
        "pack done: placed=%d unplaced=%d",
        sum(1 for i in items if i.placed),
        sum(1 for i in items if not i.placed),
    )
    return packed


def unplaced_items(results: Iterable[ContainerPlacement]) -> list[ItemPlacement]:
    """
    Items no container accepted, in processing order.

    An item left over by a run was tried by every container, so it sits in the
    last container's ``unfitted_items``.
    """
    results = list(results)
    if not results:
        return []
    return list(reversed(results[-1].unfitted_items))
