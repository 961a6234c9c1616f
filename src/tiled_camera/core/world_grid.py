# src/tiled_camera/core/world_grid.py
"""
World-space layer over SizedGrid.

Grid-local distances are in tiles. `WorldSpace` decides how long a tile is
in the world: one unit (UNITS) or its pixel footprint (PIXELS). Local
positions are relative to the camera, so every world transform takes the
camera's world position.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, Tuple, Union

import pygame

from ..utils.camera_types import TileIndex, Vec2Like
from ..utils.settings import validate_dimensions
from .sized_grid import SizedGrid


class WorldSpace(str, Enum):
    UNITS = "units"    # 1 tile == 1 world unit
    PIXELS = "pixels"  # 1 texel == 1 world unit

    @classmethod
    def coerce(cls, value: Union["WorldSpace", str]) -> "WorldSpace":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"unknown world space {value!r}; expected 'units' or 'pixels'") from None


class WorldGrid:
    """A SizedGrid plus the scale that maps it into world space."""

    __slots__ = ("grid", "_pixels_per_tile", "_world_space")

    def __init__(
        self,
        tile_count: Tuple[int, int],
        pixels_per_tile: Tuple[int, int],
        world_space: Union[WorldSpace, str] = WorldSpace.UNITS,
        centered: bool = True,
    ) -> None:
        self.grid = SizedGrid(tile_count, centered)
        self._pixels_per_tile = validate_dimensions("pixels_per_tile", pixels_per_tile)
        self._world_space = WorldSpace.coerce(world_space)

    # -------------------------
    # Configuration
    # -------------------------

    @property
    def tile_count(self) -> Tuple[int, int]:
        return self.grid.tile_count

    @tile_count.setter
    def tile_count(self, value: Tuple[int, int]) -> None:
        self.grid.tile_count = value

    @property
    def centered(self) -> bool:
        return self.grid.centered

    @centered.setter
    def centered(self, value: bool) -> None:
        self.grid.centered = value

    @property
    def pixels_per_tile(self) -> Tuple[int, int]:
        return self._pixels_per_tile

    @pixels_per_tile.setter
    def pixels_per_tile(self, value: Tuple[int, int]) -> None:
        self._pixels_per_tile = validate_dimensions("pixels_per_tile", value)

    @property
    def world_space(self) -> WorldSpace:
        return self._world_space

    @world_space.setter
    def world_space(self, value: Union[WorldSpace, str]) -> None:
        self._world_space = WorldSpace.coerce(value)

    def world_space_scale(self) -> pygame.Vector2:
        """World length of one grid-local unit, per axis."""
        if self._world_space is WorldSpace.PIXELS:
            return pygame.Vector2(self._pixels_per_tile)
        return pygame.Vector2(1.0, 1.0)

    def tile_size_world(self) -> pygame.Vector2:
        return self.world_space_scale()

    def unit_size(self) -> Optional[pygame.Vector2]:
        """
        Size art should be drawn at so tiles line up, or None in PIXELS space
        where native texture sizes already match.
        """
        if self._world_space is WorldSpace.UNITS:
            return pygame.Vector2(1.0, 1.0)
        return None

    # -------------------------
    # Local <-> world
    # -------------------------

    def local_to_world(self, camera_pos: Vec2Like, local: Vec2Like) -> pygame.Vector2:
        scaled = pygame.Vector2(local[0], local[1]).elementwise() * self.world_space_scale()
        return scaled + pygame.Vector2(camera_pos[0], camera_pos[1])

    def world_to_local(self, camera_pos: Vec2Like, world: Vec2Like) -> pygame.Vector2:
        delta = pygame.Vector2(world[0], world[1]) - pygame.Vector2(camera_pos[0], camera_pos[1])
        return delta.elementwise() / self.world_space_scale()

    # -------------------------
    # Composed transforms
    # -------------------------

    def world_to_index(self, camera_pos: Vec2Like, world: Vec2Like) -> TileIndex:
        """Index of the tile under `world`; may lie outside the grid."""
        return self.grid.local_to_tile(self.world_to_local(camera_pos, world))

    def index_to_tile_pos(self, camera_pos: Vec2Like, tile_index: TileIndex) -> Optional[pygame.Vector2]:
        """World position of a tile's bottom-left corner, None if out of bounds."""
        local = self.grid.tile_to_local(tile_index)
        if local is None:
            return None
        return self.local_to_world(camera_pos, local)

    def index_to_tile_center(self, camera_pos: Vec2Like, tile_index: TileIndex) -> Optional[pygame.Vector2]:
        local = self.grid.tile_to_tile_center(tile_index)
        if local is None:
            return None
        return self.local_to_world(camera_pos, local)

    def world_to_tile_pos(self, camera_pos: Vec2Like, world: Vec2Like) -> Optional[pygame.Vector2]:
        """Snap `world` to the corner of its tile; None if that tile is outside the grid."""
        return self.index_to_tile_pos(camera_pos, self.world_to_index(camera_pos, world))

    def world_to_tile_center(self, camera_pos: Vec2Like, world: Vec2Like) -> Optional[pygame.Vector2]:
        return self.index_to_tile_center(camera_pos, self.world_to_index(camera_pos, world))

    def world_positions(self, camera_pos: Vec2Like) -> Iterator[pygame.Vector2]:
        for local in self.grid.positions():
            yield self.local_to_world(camera_pos, local)

    def world_centers(self, camera_pos: Vec2Like) -> Iterator[pygame.Vector2]:
        for local in self.grid.centers():
            yield self.local_to_world(camera_pos, local)

    def __repr__(self) -> str:
        return (
            f"WorldGrid(tile_count={self.tile_count}, pixels_per_tile={self._pixels_per_tile}, "
            f"world_space={self._world_space.value}, centered={self.centered})"
        )


__all__ = ["WorldGrid", "WorldSpace"]
