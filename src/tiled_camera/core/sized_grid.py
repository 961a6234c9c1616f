# src/tiled_camera/core/sized_grid.py
"""
Index/position math for a fixed-size tile grid in camera-local units
(one tile = one local unit).

Two origin conventions:
- centered: tile (0, 0) sits at the middle of the grid. When an axis has an
  even tile count no tile straddles the middle, so every tile is shifted by
  half a unit (the parity offset) and tile (0, 0) has its corner at 0.
- corner: tile (0, 0) is the bottom-left tile with its corner at 0.

Position-returning calls are bounds-checked and return None outside the
grid. Index-returning calls are not: a cursor may sit outside the grid.
"""
from __future__ import annotations

import math
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

import pygame

from ..utils.camera_types import TileIndex, Vec2Like
from ..utils.settings import validate_dimensions
from .rect import Rect

T = TypeVar("T")

_HALF = pygame.Vector2(0.5, 0.5)


class GridIterable(Generic[T]):
    """
    Finite, sized view over every tile of a grid, row-major (x fastest).
    Each `iter()` starts over from the first tile.
    """

    __slots__ = ("_min", "_size", "_map")

    def __init__(self, min_index: TileIndex, size: Tuple[int, int], fn: Callable[[int, int], T]) -> None:
        self._min = min_index
        self._size = size
        self._map = fn

    def __len__(self) -> int:
        return self._size[0] * self._size[1]

    def __iter__(self) -> Iterator[T]:
        x0, y0 = self._min
        w, h = self._size
        for y in range(y0, y0 + h):
            for x in range(x0, x0 + w):
                yield self._map(x, y)


class SizedGrid:
    """A fixed-size tile grid with a choice of origin convention."""

    __slots__ = ("_tile_count", "_centered", "_center_offset")

    def __init__(self, tile_count: Tuple[int, int], centered: bool = True) -> None:
        self._tile_count = validate_dimensions("tile_count", tile_count)
        self._centered = bool(centered)
        self._center_offset = pygame.Vector2()
        self._update_offset()

    # -------------------------
    # Configuration
    # -------------------------

    @property
    def tile_count(self) -> Tuple[int, int]:
        return self._tile_count

    @tile_count.setter
    def tile_count(self, value: Tuple[int, int]) -> None:
        self._tile_count = validate_dimensions("tile_count", value)
        self._update_offset()

    @property
    def centered(self) -> bool:
        return self._centered

    @centered.setter
    def centered(self, value: bool) -> None:
        self._centered = bool(value)
        self._update_offset()

    @property
    def center_offset(self) -> pygame.Vector2:
        return pygame.Vector2(self._center_offset)

    @property
    def tile_offset(self) -> pygame.Vector2:
        """Shift from a tile's index to its local corner."""
        if not self._centered:
            return pygame.Vector2()
        return self._center_offset - _HALF

    def _update_offset(self) -> None:
        if not self._centered:
            self._center_offset.update(0.0, 0.0)
            return
        w, h = self._tile_count
        self._center_offset.update(
            0.5 if w % 2 == 0 else 0.0,
            0.5 if h % 2 == 0 else 0.0,
        )

    # -------------------------
    # Bounds
    # -------------------------

    def min_index(self) -> TileIndex:
        if not self._centered:
            return 0, 0
        w, h = self._tile_count
        return -(w // 2), -(h // 2)

    def index_bounds(self) -> Rect:
        """Valid tile indices as a grid rect: [min_index, min_index + tile_count)."""
        return Rect.from_grid_position_size(self.min_index(), self._tile_count)

    def in_bounds(self, tile_index: TileIndex) -> bool:
        x0, y0 = self.min_index()
        w, h = self._tile_count
        x, y = tile_index
        return x0 <= x < x0 + w and y0 <= y < y0 + h

    def min_local_corner(self) -> pygame.Vector2:
        """Local corner of the minimum tile; the anchor for iteration."""
        return self._corner(*self.min_index())

    # -------------------------
    # Index <-> local
    # -------------------------

    def _corner(self, x: int, y: int) -> pygame.Vector2:
        return pygame.Vector2(x, y) + self.tile_offset

    def tile_to_local(self, tile_index: TileIndex) -> Optional[pygame.Vector2]:
        """Bottom-left corner of a tile in local units, or None if out of bounds."""
        if not self.in_bounds(tile_index):
            return None
        return self._corner(*tile_index)

    def tile_to_tile_center(self, tile_index: TileIndex) -> Optional[pygame.Vector2]:
        """Center of a tile in local units, or None if out of bounds."""
        corner = self.tile_to_local(tile_index)
        if corner is None:
            return None
        return corner + _HALF

    def local_to_tile(self, local_pos: Vec2Like) -> TileIndex:
        """Index of the tile containing `local_pos`. Not bounds-checked."""
        off = self.tile_offset
        return math.floor(local_pos[0] - off.x), math.floor(local_pos[1] - off.y)

    def snap_local(self, local_pos: Vec2Like) -> pygame.Vector2:
        """Snap a local position to the corner of the tile it falls in."""
        return self._corner(*self.local_to_tile(local_pos))

    def local_to_tile_center(self, local_pos: Vec2Like) -> pygame.Vector2:
        """Snap a local position to the center of the tile it falls in."""
        return self.snap_local(local_pos) + _HALF

    # -------------------------
    # Iteration
    # -------------------------

    def indices(self) -> GridIterable[TileIndex]:
        return GridIterable(self.min_index(), self._tile_count, lambda x, y: (x, y))

    def positions(self) -> GridIterable[pygame.Vector2]:
        """Every tile's local corner."""
        return GridIterable(self.min_index(), self._tile_count, self._corner)

    def centers(self) -> GridIterable[pygame.Vector2]:
        """Every tile's local center."""
        return GridIterable(self.min_index(), self._tile_count, lambda x, y: self._corner(x, y) + _HALF)

    def __repr__(self) -> str:
        return f"SizedGrid(tile_count={self._tile_count}, centered={self._centered})"


__all__ = ["GridIterable", "SizedGrid"]
