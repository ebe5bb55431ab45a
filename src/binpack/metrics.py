from __future__ import annotations
from binpack.geometry import volume
from binpack.models import ContainerPlacement, ItemPlacement


def placement_volume(p: ItemPlacement) -> float:
    return volume(*p.effective_dimensions())


def compute_metrics(container_placement: ContainerPlacement) -> tuple[float, float, float]:
    used_volume = sum(placement_volume(p) for p in container_placement.placed_items)
    container_volume = container_placement.container.volume
    fill_rate = 0.0 if container_volume == 0 else used_volume / container_volume
    return used_volume, container_volume, fill_rate


def weight_fill_rate(container_placement: ContainerPlacement) -> float:
    max_weight = container_placement.container.max_weight
    return 0.0 if max_weight == 0 else container_placement.total_weight() / max_weight
