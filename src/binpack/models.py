from __future__ import annotations

from numbers import Integral
from collections.abc import Sequence
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from binpack.errors import InvalidArgument
from binpack.geometry import OverlapRule, Rotation, box_volume, boxes_overlap, effective_dimensions


class Item(BaseModel):
    """A box to be packed, with weight and an opaque caller payload."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0, description="Extent along x")
    height: int = Field(default=0, ge=0, description="Extent along y")
    depth: int = Field(default=0, ge=0, description="Extent along z")
    weight: int = Field(default=0, ge=0, description="Weight of the item")
    payload: Any = Field(
        default=None,
        validation_alias=AliasChoices("payload", "data"),
        description="Caller data returned untouched with the result",
    )

    @property
    def volume(self) -> int:
        return box_volume(self)


class Container(BaseModel):
    """A box to pack into, with a maximum carried weight."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0, description="Interior extent along x")
    height: int = Field(default=0, ge=0, description="Interior extent along y")
    depth: int = Field(default=0, ge=0, description="Interior extent along z")
    max_weight: int = Field(default=0, ge=0, description="Maximum total item weight")
    payload: Any = Field(
        default=None,
        validation_alias=AliasChoices("payload", "data"),
        description="Caller data returned untouched with the result",
    )

    @property
    def volume(self) -> int:
        return box_volume(self)


class ItemPlacement(BaseModel):
    """An item together with its rotation, position and placed flag for one run."""

    model_config = ConfigDict(frozen=True)

    item: Item
    rotation: Rotation = Field(default=Rotation.WHD, description="Orientation code 0..5")
    # minimum corner, container-local
    position: tuple[int, int, int] = Field(default=(0, 0, 0))
    placed: bool = False

    def __init__(self, **data: Any) -> None:
        # raise InvalidRotation directly instead of a wrapped ValidationError
        if "rotation" in data:
            data["rotation"] = Rotation.from_index(data["rotation"])
        super().__init__(**data)

    def set_position(self, position: Sequence[int]) -> "ItemPlacement":
        if isinstance(position, (str, bytes)) or not isinstance(position, Sequence) or len(position) != 3:
            raise InvalidArgument(f"Position must be a 3-element sequence, got {position!r}")
        for value in position:
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidArgument(f"Position coordinates must be integers, got {position!r}")
        return self.model_copy(update={"position": tuple(position)})

    def set_rotation(self, rotation: int) -> "ItemPlacement":
        return self.model_copy(update={"rotation": Rotation.from_index(rotation)})

    def set_placed(self, placed: bool) -> "ItemPlacement":
        if not isinstance(placed, bool):
            raise InvalidArgument(f"Placed flag must be a bool, got {placed!r}")
        return self.model_copy(update={"placed": placed})

    def effective_dimensions(self) -> tuple[int, int, int]:
        """Item extents as oriented by the current rotation."""
        return effective_dimensions(self.item, self.rotation)

    def intersects(self, other: "ItemPlacement", rule: OverlapRule = OverlapRule.LEGACY) -> bool:
        return boxes_overlap(
            self.position,
            self.effective_dimensions(),
            other.position,
            other.effective_dimensions(),
            rule,
        )


class ContainerPlacement(BaseModel):
    """
    A container and the item placements accumulated for it during a run.

    Both ``placed_items`` and ``unfitted_items`` grow at the front, so the most
    recent entry comes first. Use :meth:`chronological` for insertion order.
    """

    model_config = ConfigDict(frozen=True)

    container: Container
    placed_items: tuple[ItemPlacement, ...] = ()
    unfitted_items: tuple[ItemPlacement, ...] = ()

    def add_placed_item(self, item_placement: ItemPlacement) -> "ContainerPlacement":
        # feasibility is checked by the caller
        return self.model_copy(update={"placed_items": (item_placement, *self.placed_items)})

    def add_unfitted_item(self, item_placement: ItemPlacement) -> "ContainerPlacement":
        return self.model_copy(update={"unfitted_items": (item_placement, *self.unfitted_items)})

    def total_weight(self) -> int:
        return sum(p.item.weight for p in self.placed_items)

    def within_boundaries(self, item_placement: ItemPlacement) -> bool:
        """True if the item, at its position and rotation, stays inside the container."""
        limits = (self.container.width, self.container.height, self.container.depth)
        dims = item_placement.effective_dimensions()
        return all(pos + dim <= limit for pos, dim, limit in zip(item_placement.position, dims, limits))

    def no_intersections(
        self,
        item_placement: ItemPlacement,
        rule: OverlapRule = OverlapRule.LEGACY,
    ) -> bool:
        """
        True if ``item_placement`` overlaps none of the placed items.

        Defaults to ``OverlapRule.LEGACY`` like :func:`boxes_overlap`. The
        packing engine passes the configured rule instead, which is
        ``OverlapRule.SYMMETRIC`` unless ``BINPACK_OVERLAP_RULE`` says
        otherwise, so pass ``rule`` explicitly to get the engine's answer.
        """
        return not any(placed.intersects(item_placement, rule) for placed in self.placed_items)

    def fits_weight_budget(self, item_placement: ItemPlacement) -> bool:
        return self.total_weight() + item_placement.item.weight <= self.container.max_weight

    def chronological(self) -> "ContainerPlacement":
        """Copy with both sequences reversed into insertion order."""
        return self.model_copy(
            update={
                "placed_items": tuple(reversed(self.placed_items)),
                "unfitted_items": tuple(reversed(self.unfitted_items)),
            }
        )


class PackingJob(BaseModel):
    """Candidate containers and the items to place in them."""

    containers: list[Container] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)

    def add_container(self, container: Container) -> "PackingJob":
        self.containers.insert(0, container)
        return self

    def add_item(self, item: Item) -> "PackingJob":
        self.items.insert(0, item)
        return self
