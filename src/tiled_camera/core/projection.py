# src/tiled_camera/core/projection.py
"""
Orthographic projection and screen <-> world transforms.

Matrices are 4x4 numpy arrays applied to column vectors (`M @ v`). The view
matrix is the camera's world transform (camera -> world); its inverse takes
world points into camera space.

Screen positions are window pixels with a top-left origin (y down), the way
cursor positions arrive from the window. NDC is y up, x/y in [-1, 1] and
depth in [0, 1]. Only the viewport sub-rectangle maps onto NDC; positions
outside it have no world position.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np
import pygame
from numpy.typing import NDArray

from ..utils.camera_types import Size2, Vec2Like
from ..utils.settings import CAMERA_FAR, CAMERA_NEAR

Mat4 = NDArray[np.float64]


# ---------------------------------------------------------------------
# Matrix helpers
# ---------------------------------------------------------------------

def orthographic_rh(left: float, right: float, bottom: float, top: float,
                    near: float, far: float) -> Mat4:
    """Right-handed orthographic projection mapping depth [near, far] to [0, 1]."""
    rcp_w = 1.0 / (right - left)
    rcp_h = 1.0 / (top - bottom)
    r = 1.0 / (near - far)
    return np.array(
        [
            [2.0 * rcp_w, 0.0, 0.0, -(left + right) * rcp_w],
            [0.0, 2.0 * rcp_h, 0.0, -(top + bottom) * rcp_h],
            [0.0, 0.0, r, r * near],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def translation_matrix(x: float, y: float, z: float = 0.0) -> Mat4:
    m = np.identity(4, dtype=np.float64)
    m[:3, 3] = (x, y, z)
    return m


def near_plane_depth(proj: Mat4) -> float:
    """
    NDC depth of the camera plane, read from the projection coefficients.
    Reverse-depth projections put it at 1, standard ones at 0.
    """
    clip = proj @ np.array([0.0, 0.0, 0.0, 1.0])
    if clip[3] == 0.0:
        return 1.0
    return float(min(1.0, max(0.0, clip[2] / clip[3])))


# ---------------------------------------------------------------------
# Screen <-> world
# ---------------------------------------------------------------------

def screen_to_ndc(screen_pos: Vec2Like, viewport_size: Size2,
                  viewport_pos: Size2) -> Optional[Tuple[float, float]]:
    """Viewport-relative NDC for a screen point, None outside the viewport."""
    vw, vh = viewport_size
    if vw <= 0 or vh <= 0:
        return None
    px = screen_pos[0] - viewport_pos[0]
    py = screen_pos[1] - viewport_pos[1]
    # half-open, same as ViewportState.contains_screen_point
    if not (0 <= px < vw and 0 <= py < vh):
        return None
    return px / vw * 2.0 - 1.0, 1.0 - py / vh * 2.0


def screen_to_world(screen_pos: Vec2Like, viewport_size: Size2, viewport_pos: Size2,
                    view: Mat4, proj: Mat4) -> Optional[pygame.Vector2]:
    """World position under a screen pixel, or None outside the viewport."""
    ndc = screen_to_ndc(screen_pos, viewport_size, viewport_pos)
    if ndc is None:
        return None
    ndc_to_world = view @ np.linalg.inv(proj)
    p = ndc_to_world @ np.array([ndc[0], ndc[1], near_plane_depth(proj), 1.0])
    if p[3] != 0.0:
        p = p / p[3]
    return pygame.Vector2(float(p[0]), float(p[1]))


def world_to_screen(world_pos: Vec2Like, viewport_size: Size2, viewport_pos: Size2,
                    view: Mat4, proj: Mat4, world_z: float = 0.0) -> Optional[Tuple[int, int]]:
    """
    Screen pixel for a world position, or None when it falls outside the
    camera's depth range (behind it or past the far plane).
    """
    world_to_ndc = proj @ np.linalg.inv(view)
    clip = world_to_ndc @ np.array([float(world_pos[0]), float(world_pos[1]), float(world_z), 1.0])
    if clip[3] == 0.0:
        return None
    ndc = clip[:3] / clip[3]
    if not (0.0 <= ndc[2] <= 1.0):
        return None
    vw, vh = viewport_size
    sx = (ndc[0] + 1.0) * 0.5 * vw + viewport_pos[0]
    sy = (1.0 - ndc[1]) * 0.5 * vh + viewport_pos[1]
    return math.floor(sx + 0.5), math.floor(sy + 0.5)


def _round_to_multiple(value: float, step: float) -> float:
    if step <= 0:
        return value
    return step * math.floor(value / step + 0.5)


# ---------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------

@dataclass
class OrthographicProjection:
    """
    Fixed-vertical orthographic projection.

    `fixed_vertical` world units always span the viewport height; the width
    follows the viewport aspect, corrected by `pixel_aspect` when a world
    unit isn't square in pixels. `origin` places the camera inside the view:
    (0.5, 0.5) is the middle, (0, 0) the bottom-left corner.
    With `texel_size` set, the edges are snapped to whole texels so art
    that sits on the texel grid stays on the pixel grid.
    """
    fixed_vertical: float = 1.0
    origin: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(0.5, 0.5))
    near: float = CAMERA_NEAR
    far: float = CAMERA_FAR
    pixel_aspect: float = 1.0
    texel_size: Optional[pygame.Vector2] = None
    left: float = -1.0
    right: float = 1.0
    bottom: float = -1.0
    top: float = 1.0

    def update(self, width: float, height: float) -> None:
        """Recompute the extents for a viewport of `width` x `height` pixels."""
        if width <= 0 or height <= 0 or self.fixed_vertical <= 0:
            return
        view_h = self.fixed_vertical
        view_w = view_h * width * self.pixel_aspect / height
        tx, ty = (self.texel_size.x, self.texel_size.y) if self.texel_size is not None else (0.0, 0.0)
        self.left = -_round_to_multiple(self.origin.x * view_w, tx)
        self.right = self.left + view_w
        self.bottom = -_round_to_multiple(self.origin.y * view_h, ty)
        self.top = self.bottom + view_h

    def extents(self) -> Tuple[float, float]:
        return self.right - self.left, self.top - self.bottom

    def matrix(self) -> Mat4:
        # near and far are swapped so depth runs [1, 0] (reverse-z)
        return orthographic_rh(self.left, self.right, self.bottom, self.top, self.far, self.near)


__all__ = [
    "Mat4",
    "OrthographicProjection",
    "near_plane_depth",
    "orthographic_rh",
    "screen_to_ndc",
    "screen_to_world",
    "translation_matrix",
    "world_to_screen",
]
