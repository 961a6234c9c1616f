# src/tiled_camera/core/camera.py
"""
Pixel-art camera.

- Integer zoom that fits a target tile grid into the window without
  deforming pixels (see viewport.compute_viewport)
- Tile <-> world <-> screen transforms consistent with that zoom
- Eager recompute: every parameter change and every window resize updates
  the cached viewport and pushes it to attached sinks before returning
- Host coupling through two narrow contracts: a ViewportSink that receives
  the viewport rect + projection extent, and a ResizeSource (e.g. EventBus)
  that announces window resizes
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pygame

from ..utils.camera_types import ResizeSource, Size2, TileIndex, Vec2Like, ViewportSink
from ..utils.settings import (
    CAMERA_FAR,
    CAMERA_NEAR,
    CAMERA_Z_OFFSET,
    DEFAULT_PIXELS_PER_TILE,
    WINDOW_RESIZED_EVENT,
    CameraSettings,
)
from . import projection as proj
from .projection import Mat4, OrthographicProjection
from .viewport import ViewportState, compute_viewport, tile_count_for_resolution
from .world_grid import WorldGrid, WorldSpace

_LOG = logging.getLogger(__name__)

_NO_WINDOW = "TiledCamera has no window size yet; call set_window_size() first"


class TiledCamera:
    """A camera that displays a fixed number of tiles at a whole-number zoom."""

    def __init__(
        self,
        settings: Optional[CameraSettings] = None,
        *,
        position: Vec2Like = (0.0, 0.0),
        near: float = CAMERA_NEAR,
        far: float = CAMERA_FAR,
    ) -> None:
        settings = settings or CameraSettings()
        self.world_grid = WorldGrid(
            settings.tile_count,
            settings.pixels_per_tile,
            settings.world_space,
            settings.centered,
        )
        self.projection = OrthographicProjection(near=near, far=far)

        # World-space position of the camera; z keeps it just inside the far plane.
        self.position = pygame.Vector2(position[0], position[1])
        self.z = far - CAMERA_Z_OFFSET

        self._window: Optional[Size2] = None
        self._state: Optional[ViewportState] = None
        self._sinks: List[ViewportSink] = []
        self._sync_projection_shape()

    # -------------------------
    # Constructors
    # -------------------------

    @classmethod
    def unit_cam(cls, tile_count: Size2, pixels_per_tile: Union[int, Size2] = DEFAULT_PIXELS_PER_TILE) -> "TiledCamera":
        """One tile == one world unit."""
        return cls(CameraSettings(tile_count, _pair(pixels_per_tile), WorldSpace.UNITS.value))

    @classmethod
    def pixel_cam(cls, tile_count: Size2, pixels_per_tile: Union[int, Size2] = 8) -> "TiledCamera":
        """One texel == one world unit."""
        return cls(CameraSettings(tile_count, _pair(pixels_per_tile), WorldSpace.PIXELS.value))

    def with_tile_count(self, tile_count: Size2) -> "TiledCamera":
        self.tile_count = tile_count
        return self

    def with_pixels_per_tile(self, pixels_per_tile: Union[int, Size2]) -> "TiledCamera":
        self.pixels_per_tile = _pair(pixels_per_tile)
        return self

    def with_centered(self, centered: bool) -> "TiledCamera":
        self.centered = centered
        return self

    def with_world_space(self, world_space: Union[WorldSpace, str]) -> "TiledCamera":
        self.world_space = world_space
        return self

    def with_position(self, position: Vec2Like) -> "TiledCamera":
        self.position.update(position[0], position[1])
        return self

    def with_target_resolution(self, pixels_per_tile: Union[int, Size2], resolution: Size2) -> "TiledCamera":
        """Show as many whole tiles as fit in `resolution` at `pixels_per_tile`."""
        ppt = _pair(pixels_per_tile)
        self.world_grid.pixels_per_tile = ppt
        self.tile_count = tile_count_for_resolution(ppt, resolution)
        return self

    # -------------------------
    # Parameters (each change recomputes)
    # -------------------------

    @property
    def tile_count(self) -> Size2:
        return self.world_grid.tile_count

    @tile_count.setter
    def tile_count(self, value: Size2) -> None:
        self.world_grid.tile_count = value
        self._recompute()

    @property
    def pixels_per_tile(self) -> Size2:
        return self.world_grid.pixels_per_tile

    @pixels_per_tile.setter
    def pixels_per_tile(self, value: Size2) -> None:
        self.world_grid.pixels_per_tile = value
        self._recompute()

    @property
    def centered(self) -> bool:
        return self.world_grid.centered

    @centered.setter
    def centered(self, value: bool) -> None:
        self.world_grid.centered = value
        self._recompute()

    @property
    def world_space(self) -> WorldSpace:
        return self.world_grid.world_space

    @world_space.setter
    def world_space(self, value: Union[WorldSpace, str]) -> None:
        self.world_grid.world_space = value
        self._recompute()

    @property
    def settings(self) -> CameraSettings:
        return CameraSettings(self.tile_count, self.pixels_per_tile, self.world_space.value, self.centered)

    # -------------------------
    # Window / host wiring
    # -------------------------

    @property
    def window_size(self) -> Optional[Size2]:
        return self._window

    def set_window_size(self, width: int, height: int) -> ViewportState:
        """Update on window resize. Returns the fresh viewport state."""
        w, h = int(width), int(height)
        if w < 0 or h < 0:
            raise ValueError(f"window size must be >= 0, got ({w}, {h})")
        self._window = (w, h)
        self._recompute()
        assert self._state is not None
        return self._state

    def add_sink(self, sink: ViewportSink) -> None:
        """Attach a receiver for viewport updates; it gets the current state right away."""
        self._sinks.append(sink)
        _LOG.debug("viewport sink attached: %r", sink)
        if self._state is not None:
            self._push(sink, self._state)

    def remove_sink(self, sink: ViewportSink) -> None:
        try:
            self._sinks.remove(sink)
        except ValueError:
            pass

    def attach_resize_source(self, source: ResizeSource, event: str = WINDOW_RESIZED_EVENT) -> Callable[[], None]:
        """Listen for `event` payloads carrying `width`/`height`. Returns the unsubscribe callable."""
        def _on_resize(payload: Dict[str, Any]) -> None:
            self.set_window_size(payload["width"], payload["height"])

        _LOG.debug("listening for %r", event)
        return source.on(event, _on_resize)

    # -------------------------
    # Cached state
    # -------------------------

    @property
    def viewport(self) -> ViewportState:
        """Last computed viewport; requires a window size."""
        if self._state is None:
            raise RuntimeError(_NO_WINDOW)
        return self._state

    @property
    def zoom(self) -> int:
        return self.viewport.zoom

    def _sync_projection_shape(self) -> None:
        self.projection.origin.update((0.5, 0.5) if self.centered else (0.0, 0.0))
        pw, ph = self.pixels_per_tile
        if self.world_space is WorldSpace.UNITS:
            self.projection.pixel_aspect = ph / pw
        else:
            self.projection.pixel_aspect = 1.0
        # world size of one texel; centered edges snap to it
        self.projection.texel_size = self.world_grid.tile_size_world().elementwise() / pygame.Vector2(pw, ph)

    def _recompute(self) -> None:
        self._sync_projection_shape()
        if self._window is None:
            return
        state = compute_viewport(self.tile_count, self.pixels_per_tile, self._window, self.world_space)
        self.projection.fixed_vertical = state.visible_ortho_size
        self.projection.update(*state.viewport_size)
        self._state = state
        for sink in list(self._sinks):
            self._push(sink, state)

    @staticmethod
    def _push(sink: ViewportSink, state: ViewportState) -> None:
        sink.set_viewport(state.viewport_position, state.viewport_size)
        sink.set_projection_size(state.visible_ortho_size)

    # -------------------------
    # Matrices
    # -------------------------

    def view_matrix(self) -> Mat4:
        """Camera -> world transform."""
        return proj.translation_matrix(self.position.x, self.position.y, self.z)

    def projection_matrix(self) -> Mat4:
        if self._state is None:
            raise RuntimeError(_NO_WINDOW)
        return self.projection.matrix()

    # -------------------------
    # Tile <-> world
    # -------------------------

    def tile_to_world(self, tile_index: TileIndex) -> Optional[pygame.Vector2]:
        """World position of a tile's bottom-left corner, None outside the grid."""
        return self.world_grid.index_to_tile_pos(self.position, tile_index)

    def tile_center_to_world(self, tile_index: TileIndex) -> Optional[pygame.Vector2]:
        return self.world_grid.index_to_tile_center(self.position, tile_index)

    def world_to_tile(self, world_pos: Vec2Like) -> TileIndex:
        """Tile index under a world position; may be outside the grid."""
        return self.world_grid.world_to_index(self.position, world_pos)

    def world_to_tile_pos(self, world_pos: Vec2Like) -> Optional[pygame.Vector2]:
        return self.world_grid.world_to_tile_pos(self.position, world_pos)

    def world_to_tile_center(self, world_pos: Vec2Like) -> Optional[pygame.Vector2]:
        return self.world_grid.world_to_tile_center(self.position, world_pos)

    def unit_size(self) -> Optional[pygame.Vector2]:
        return self.world_grid.unit_size()

    def is_tile_in_bounds(self, tile_index: TileIndex) -> bool:
        return self.world_grid.grid.in_bounds(tile_index)

    # -------------------------
    # Screen <-> world
    # -------------------------

    def screen_to_world(self, screen_pos: Vec2Like) -> Optional[pygame.Vector2]:
        """World position under a window pixel (top-left origin), None outside the viewport."""
        state = self.viewport
        return proj.screen_to_world(
            screen_pos, state.viewport_size, state.viewport_position,
            self.view_matrix(), self.projection.matrix(),
        )

    def world_to_screen(self, world_pos: Vec2Like) -> Optional[Tuple[int, int]]:
        state = self.viewport
        return proj.world_to_screen(
            world_pos, state.viewport_size, state.viewport_position,
            self.view_matrix(), self.projection.matrix(),
        )

    def screen_to_tile(self, screen_pos: Vec2Like) -> Optional[TileIndex]:
        """Tile under the cursor, None when the cursor is outside the viewport."""
        world = self.screen_to_world(screen_pos)
        if world is None:
            return None
        return self.world_to_tile(world)

    def __repr__(self) -> str:
        return f"TiledCamera({self.world_grid!r}, position=({self.position.x}, {self.position.y}), window={self._window})"


def _pair(value: Union[int, Size2]) -> Size2:
    if isinstance(value, int):
        return value, value
    return int(value[0]), int(value[1])


__all__ = ["TiledCamera"]
