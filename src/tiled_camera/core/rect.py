# src/tiled_camera/core/rect.py
"""
Axis-aligned rectangle in continuous or grid (integer) coordinates.

The rect is stored as continuous `min`/`max` corners (y up). The `grid_*`
accessors floor those corners so the same rect can be treated as a block of
whole tiles. Iterating a rect yields the integer cells it covers, row-major
(x fastest), and can be repeated as often as needed.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple

import pygame

from ..utils.camera_types import TileIndex, Vec2Like


def _vec(v: Vec2Like) -> pygame.Vector2:
    return pygame.Vector2(v[0], v[1])


def _check_size(size: pygame.Vector2) -> None:
    if size.x < 0 or size.y < 0:
        raise ValueError(f"rect size must be >= 0 on both axes, got ({size.x}, {size.y})")


@dataclass
class Rect:
    min: pygame.Vector2 = field(default_factory=pygame.Vector2)
    max: pygame.Vector2 = field(default_factory=pygame.Vector2)

    # -------------------------
    # Construction
    # -------------------------

    @classmethod
    def from_position_size(cls, pos: Vec2Like, size: Vec2Like) -> "Rect":
        """Construct a rect from its bottom-left position and size."""
        pos = _vec(pos)
        size = _vec(size)
        _check_size(size)
        return cls(pos, pos + size)

    @classmethod
    def from_extents(cls, min_: Vec2Like, max_: Vec2Like) -> "Rect":
        """Construct a rect from its min and max extents."""
        return cls(_vec(min_), _vec(max_))

    @classmethod
    def from_center_size(cls, center: Vec2Like, size: Vec2Like) -> "Rect":
        size = _vec(size)
        _check_size(size)
        lo = _vec(center) - size / 2.0
        return cls(lo, lo + size)

    @classmethod
    def from_grid_position_size(cls, grid_pos: TileIndex, grid_size: Tuple[int, int]) -> "Rect":
        x, y = int(grid_pos[0]), int(grid_pos[1])
        w, h = int(grid_size[0]), int(grid_size[1])
        if w < 0 or h < 0:
            raise ValueError(f"grid size must be >= 0 on both axes, got ({w}, {h})")
        return cls(pygame.Vector2(x, y), pygame.Vector2(x + w, y + h))

    @classmethod
    def from_grid_extents(cls, min_: TileIndex, max_: TileIndex) -> "Rect":
        return cls(pygame.Vector2(int(min_[0]), int(min_[1])), pygame.Vector2(int(max_[0]), int(max_[1])))

    @classmethod
    def from_grid_center_size(cls, center: TileIndex, size: Tuple[int, int]) -> "Rect":
        """Integer rect of `size` tiles whose grid center is `center`."""
        w, h = int(size[0]), int(size[1])
        x = int(center[0]) - w // 2
        y = int(center[1]) - h // 2
        return cls.from_grid_position_size((x, y), (w, h))

    # -------------------------
    # Accessors
    # -------------------------

    def size(self) -> pygame.Vector2:
        return self.max - self.min

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self.min)

    def center(self) -> pygame.Vector2:
        return self.min + self.size() / 2.0

    def grid_min(self) -> TileIndex:
        return math.floor(self.min.x), math.floor(self.min.y)

    def grid_max(self) -> TileIndex:
        return math.floor(self.max.x), math.floor(self.max.y)

    def grid_width(self) -> int:
        return max(0, math.floor(self.width()))

    def grid_height(self) -> int:
        return max(0, math.floor(self.height()))

    def grid_size(self) -> Tuple[int, int]:
        return self.grid_width(), self.grid_height()

    def grid_position(self) -> TileIndex:
        return self.grid_min()

    def grid_center(self) -> TileIndex:
        x, y = self.grid_min()
        return x + self.grid_width() // 2, y + self.grid_height() // 2

    # -------------------------
    # Mutation
    # -------------------------

    def set_size(self, new_size: Vec2Like) -> None:
        new_size = _vec(new_size)
        _check_size(new_size)
        self.max = self.min + new_size

    def set_position(self, new_pos: Vec2Like) -> None:
        """Move the rect's min corner without changing its size."""
        size = self.size()
        self.min = _vec(new_pos)
        self.max = self.min + size

    def set_grid_position(self, new_pos: TileIndex) -> None:
        self.set_position((int(new_pos[0]), int(new_pos[1])))

    def set_center(self, pos: Vec2Like) -> None:
        """Move the rect so its center lands on `pos`, keeping its size."""
        self.set_position(_vec(pos) - self.size() / 2.0)

    # -------------------------
    # Queries
    # -------------------------

    def overlaps(self, other: "Rect") -> bool:
        """Closed-interval overlap test; rects that only touch still overlap."""
        return not (
            self.max.x < other.min.x or self.max.y < other.min.y
            or self.min.x > other.max.x or self.min.y > other.max.y
        )

    def grid_overlaps(self, other: "Rect") -> bool:
        """Same as `overlaps`, on the floored grid extents."""
        (ax0, ay0), (ax1, ay1) = self.grid_min(), self.grid_max()
        (bx0, by0), (bx1, by1) = other.grid_min(), other.grid_max()
        return not (ax1 < bx0 or ay1 < by0 or ax0 > bx1 or ay0 > by1)

    def contains_point(self, p: Vec2Like) -> bool:
        """Half-open membership: min is inside, max is not."""
        x, y = p[0], p[1]
        return self.min.x <= x < self.max.x and self.min.y <= y < self.max.y

    # -------------------------
    # Iteration
    # -------------------------

    def iter_grid(self) -> Iterator[TileIndex]:
        """
        Every integer cell whose bottom-left corner lies in [min, max),
        row-major with x fastest. Zero-area rects yield nothing.
        """
        x0, x1 = math.ceil(self.min.x), math.ceil(self.max.x)
        y0, y1 = math.ceil(self.min.y), math.ceil(self.max.y)
        for y in range(y0, y1):
            for x in range(x0, x1):
                yield x, y

    def iter_points(self) -> Iterator[pygame.Vector2]:
        """Continuous positions `min + (i, j)` for each whole cell of `grid_size()`."""
        w, h = self.grid_size()
        for j in range(h):
            for i in range(w):
                yield pygame.Vector2(self.min.x + i, self.min.y + j)

    def __iter__(self) -> Iterator[TileIndex]:
        return self.iter_grid()

    def __str__(self) -> str:
        gx, gy = self.grid_min()
        gw, gh = self.grid_size()
        return (
            f"Rect[pos({self.min.x},{self.min.y}) size({self.width()},{self.height()}), "
            f"Grid[pos({gx},{gy}) size({gw},{gh})]]"
        )


__all__ = ["Rect"]
