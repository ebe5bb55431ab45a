# src/binpack/containers.py
from __future__ import annotations

from typing import Any

from binpack.models import Container

# Interior dims (mm) and max payload (kg). x = length, y = height, z = width.
CONTAINER_PRESETS_MM: dict[str, dict[str, int]] = {
    "20":   {"width": 5900,  "height": 2395, "depth": 2352, "max_weight": 28200},
    "20HC": {"width": 5891,  "height": 2700, "depth": 2330, "max_weight": 28080},
    "40":   {"width": 12032, "height": 2395, "depth": 2352, "max_weight": 26700},
    "40HC": {"width": 12032, "height": 2700, "depth": 2350, "max_weight": 26500},
    "45HC": {"width": 13556, "height": 2695, "depth": 2352, "max_weight": 27700},
    "53HC": {"width": 15951, "height": 2769, "depth": 2489, "max_weight": 20400},
}


def get_container_dims(preset: str) -> dict[str, int]:
    key = preset.strip().upper()
    if key not in CONTAINER_PRESETS_MM:
        raise ValueError(f"Unknown container preset '{preset}'. Valid: {sorted(CONTAINER_PRESETS_MM.keys())}")
    return CONTAINER_PRESETS_MM[key]


def get_container(preset: str, payload: Any = None) -> Container:
    return Container(**get_container_dims(preset), payload=payload)
