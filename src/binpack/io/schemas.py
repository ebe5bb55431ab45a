"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, model_validator

from binpack.containers import get_container
from binpack.geometry import OverlapRule
from binpack.metrics import compute_metrics, weight_fill_rate
from binpack.models import Container, ContainerPlacement, Item, ItemPlacement, PackingJob


class ItemSchema(BaseModel):
    """Schema for an item (or `quantity` identical items)."""
    width: int = Field(ge=0, description="Width of the item")
    height: int = Field(ge=0, description="Height of the item")
    depth: int = Field(ge=0, description="Depth of the item")
    weight: int = Field(0, ge=0, description="Weight of the item")
    payload: Any = Field(None, description="Opaque caller data")
    quantity: int = Field(1, ge=1, description="Number of identical items")

    def to_items(self) -> List[Item]:
        item = Item(width=self.width, height=self.height, depth=self.depth, weight=self.weight, payload=self.payload)
        return [item] * self.quantity


class ContainerSchema(BaseModel):
    """Schema for a container, given by preset or explicit dimensions."""
    preset: Optional[str] = Field(None, description="Container preset, e.g. 20, 40HC")
    width: Optional[int] = Field(None, ge=0, description="Width of the container")
    height: Optional[int] = Field(None, ge=0, description="Height of the container")
    depth: Optional[int] = Field(None, ge=0, description="Depth of the container")
    max_weight: Optional[int] = Field(None, ge=0, description="Maximum weight capacity")
    payload: Any = Field(None, description="Opaque caller data")

    @model_validator(mode="after")
    def check_dimensions(self) -> "ContainerSchema":
        if self.preset is not None:
            preset = get_container(self.preset)
            # explicit values override the preset
            for key in ("width", "height", "depth", "max_weight"):
                if getattr(self, key) is None:
                    setattr(self, key, getattr(preset, key))
        missing = [k for k in ("width", "height", "depth", "max_weight") if getattr(self, k) is None]
        if missing:
            raise ValueError(f"Container needs 'preset' or explicit dimensions and max_weight; missing {missing}")
        return self

    def to_container(self) -> Container:
        return Container(
            width=self.width,
            height=self.height,
            depth=self.depth,
            max_weight=self.max_weight,
            payload=self.payload,
        )


class PackRequest(BaseModel):
    """Schema for a packing request."""
    containers: List[ContainerSchema] = Field(description="Candidate containers")
    items: List[ItemSchema] = Field(default_factory=list, description="Items to pack")
    overlap_rule: Optional[OverlapRule] = Field(None, description="Overrides the configured overlap rule")
    chronological: bool = Field(False, description="Report placements in insertion order")

    def to_job(self) -> PackingJob:
        job = PackingJob()
        for container in self.containers:
            job.add_container(container.to_container())
        for item in self.items:
            for unit in item.to_items():
                job.add_item(unit)
        return job


class PlacementSchema(BaseModel):
    """Schema for an item placement."""
    width: int
    height: int
    depth: int
    weight: int
    payload: Any = None
    rotation: int = Field(ge=0, le=5)
    position: List[int]
    placed: bool

    @classmethod
    def from_placement(cls, placement: ItemPlacement) -> "PlacementSchema":
        item = placement.item
        return cls(
            width=item.width,
            height=item.height,
            depth=item.depth,
            weight=item.weight,
            payload=item.payload,
            rotation=int(placement.rotation),
            position=list(placement.position),
            placed=placement.placed,
        )


class ContainerResultSchema(BaseModel):
    """Schema for one packed container."""
    width: int
    height: int
    depth: int
    max_weight: int
    payload: Any = None
    placed_items: List[PlacementSchema]
    unfitted_items: List[PlacementSchema]
    used_volume: float
    fill_rate: float = Field(ge=0, le=1)
    total_weight: int
    weight_fill_rate: float = Field(ge=0)

    @classmethod
    def from_placement(cls, placement: ContainerPlacement) -> "ContainerResultSchema":
        container = placement.container
        used_volume, _, fill_rate = compute_metrics(placement)
        return cls(
            width=container.width,
            height=container.height,
            depth=container.depth,
            max_weight=container.max_weight,
            payload=container.payload,
            placed_items=[PlacementSchema.from_placement(p) for p in placement.placed_items],
            unfitted_items=[PlacementSchema.from_placement(p) for p in placement.unfitted_items],
            used_volume=used_volume,
            fill_rate=fill_rate,
            total_weight=placement.total_weight(),
            weight_fill_rate=weight_fill_rate(placement),
        )


class PackResponse(BaseModel):
    """Schema for a packing result."""
    containers: List[ContainerResultSchema]
    unplaced: List[PlacementSchema] = Field(description="Items no container accepted")

    @classmethod
    def from_results(
        cls,
        results: List[ContainerPlacement],
        unplaced: List[ItemPlacement],
        chronological: bool = False,
    ) -> "PackResponse":
        if chronological:
            results = [r.chronological() for r in results]
        return cls(
            containers=[ContainerResultSchema.from_placement(r) for r in results],
            unplaced=[PlacementSchema.from_placement(p) for p in unplaced],
        )
