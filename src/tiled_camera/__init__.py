# --- FILE: src/tiled_camera/__init__.py
"""
Top-level package for tiled_camera: a pixel-art 2D camera core.

Fits a target tile grid into any window at a whole-number zoom and converts
positions between world space, tile indices and screen pixels.
"""
from .core import (
    OrthographicProjection,
    Rect,
    SizedGrid,
    TiledCamera,
    ViewportState,
    WorldGrid,
    WorldSpace,
    compute_viewport,
)
from .utils import CameraSettings, EventBus, ViewportSink, configure_logging

__all__ = [
    "CameraSettings",
    "EventBus",
    "OrthographicProjection",
    "Rect",
    "SizedGrid",
    "TiledCamera",
    "ViewportSink",
    "ViewportState",
    "WorldGrid",
    "WorldSpace",
    "compute_viewport",
    "configure_logging",
]
