# src/tiled_camera/core/viewport.py
"""
Integer viewport scaling for pixel art.

Given how many tiles the camera should show, how many texels one tile is,
and the window size, pick the largest whole zoom that fits, the pixel
rectangle the camera should render into, and the vertical extent of its
orthographic projection. The same zoom is used on both axes so pixels stay
square; a window smaller than the art still gets zoom 1 and the art is
cropped rather than shrunk.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from ..utils.camera_types import Size2
from ..utils.settings import validate_dimensions
from .world_grid import WorldSpace

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportState:
    zoom: int
    target_resolution: Size2
    viewport_size: Size2
    viewport_position: Size2
    ortho_size: float          # vertical extent for the full (unclamped) viewport
    visible_ortho_size: float  # vertical extent actually shown; smaller only when clamped

    @property
    def clamped(self) -> bool:
        tw, th = self.target_resolution
        vw, vh = self.viewport_size
        return vw < tw * self.zoom or vh < th * self.zoom

    def contains_screen_point(self, screen_pos: Tuple[float, float]) -> bool:
        px, py = self.viewport_position
        w, h = self.viewport_size
        return px <= screen_pos[0] < px + w and py <= screen_pos[1] < py + h


def _window(window: Size2) -> Size2:
    w, h = int(window[0]), int(window[1])
    if w < 0 or h < 0:
        raise ValueError(f"window size must be >= 0, got ({w}, {h})")
    return w, h


def target_resolution(tile_count: Size2, pixels_per_tile: Size2) -> Size2:
    """Pixel size of the art at zoom 1."""
    tw, th = validate_dimensions("tile_count", tile_count)
    pw, ph = validate_dimensions("pixels_per_tile", pixels_per_tile)
    return tw * pw, th * ph


def tile_count_for_resolution(pixels_per_tile: Size2, resolution: Size2) -> Size2:
    """Whole tiles of `pixels_per_tile` that fit in `resolution` (at least one per axis)."""
    pw, ph = validate_dimensions("pixels_per_tile", pixels_per_tile)
    rw, rh = validate_dimensions("resolution", resolution)
    return max(1, rw // pw), max(1, rh // ph)


def compute_zoom(target: Size2, window: Size2) -> int:
    tw, th = target
    ww, wh = window
    return max(1, min(ww // tw, wh // th))


def compute_viewport(
    tile_count: Size2,
    pixels_per_tile: Size2,
    window: Size2,
    world_space: Union[WorldSpace, str] = WorldSpace.UNITS,
) -> ViewportState:
    """
    Recompute zoom, viewport rect and projection extent for `window`.

    Raises:
        ValueError: zero tile count / pixels per tile, or a negative window.
    """
    tile_count = validate_dimensions("tile_count", tile_count)
    target = target_resolution(tile_count, pixels_per_tile)
    ww, wh = _window(window)
    world_space = WorldSpace.coerce(world_space)

    zoom = compute_zoom(target, (ww, wh))

    if world_space is WorldSpace.PIXELS:
        ortho_size = float(target[1])
    else:
        ortho_size = float(tile_count[1])

    full_w, full_h = target[0] * zoom, target[1] * zoom
    size = (min(full_w, ww), min(full_h, wh))

    # No slack on an axis -> nothing to center within, anchor at the origin.
    if ww <= full_w or wh <= full_h:
        position = (0, 0)
    else:
        position = ((ww - size[0]) // 2, (wh - size[1]) // 2)

    visible = ortho_size * size[1] / full_h

    state = ViewportState(
        zoom=zoom,
        target_resolution=target,
        viewport_size=size,
        viewport_position=position,
        ortho_size=ortho_size,
        visible_ortho_size=visible,
    )
    _LOG.debug(
        "viewport: window=%sx%s target=%sx%s zoom=%d size=%s pos=%s ortho=%.3f",
        ww, wh, target[0], target[1], zoom, size, position, visible,
    )
    return state


__all__ = [
    "ViewportState",
    "compute_viewport",
    "compute_zoom",
    "target_resolution",
    "tile_count_for_resolution",
]
