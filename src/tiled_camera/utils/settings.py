# src/tiled_camera/utils/settings.py
"""
Centralized defaults and camera configuration.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# --- Grid Settings ---
DEFAULT_TILE_COUNT = (80, 45)
DEFAULT_PIXELS_PER_TILE = (8, 8)
DEFAULT_CENTERED = True
WORLD_SPACES = ("units", "pixels")  # 1 tile = 1 unit, or 1 texel = 1 unit
DEFAULT_WORLD_SPACE = "units"

# --- Projection Settings ---
CAMERA_NEAR = 0.0
CAMERA_FAR = 1000.0
CAMERA_Z_OFFSET = 0.1  # camera sits just in front of the far plane

# --- Events ---
WINDOW_RESIZED_EVENT = "window_resized"


def validate_dimensions(name: str, value: Tuple[int, int]) -> Tuple[int, int]:
    """
    Coerce a 2D size into an (int, int) tuple, rejecting anything below 1.

    Raises:
        ValueError: if `value` doesn't have two components or either is < 1.
    """
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a pair of integers, got {value!r}") from None
    x, y = int(x), int(y)
    if x < 1 or y < 1:
        raise ValueError(f"{name} must be >= 1 on both axes, got ({x}, {y})")
    return x, y


@dataclass(frozen=True)
class CameraSettings:
    """
    In-memory camera parameters. Validated on creation so a bad tile count
    or pixels-per-tile never reaches the viewport math.
    """
    tile_count: Tuple[int, int] = DEFAULT_TILE_COUNT
    pixels_per_tile: Tuple[int, int] = DEFAULT_PIXELS_PER_TILE
    world_space: str = DEFAULT_WORLD_SPACE
    centered: bool = DEFAULT_CENTERED

    def __post_init__(self) -> None:
        object.__setattr__(self, "tile_count", validate_dimensions("tile_count", self.tile_count))
        object.__setattr__(
            self, "pixels_per_tile", validate_dimensions("pixels_per_tile", self.pixels_per_tile)
        )
        object.__setattr__(self, "centered", bool(self.centered))
        space = str(getattr(self.world_space, "value", self.world_space)).lower()
        if space not in WORLD_SPACES:
            raise ValueError(f"world_space must be one of {WORLD_SPACES}, got {self.world_space!r}")
        object.__setattr__(self, "world_space", space)
