# --- FILE: src/tiled_camera/utils/__init__.py
"""
Utilities package: settings, logging setup, host protocols and the event bus.
"""
from .camera_types import ResizeSource, TileIndex, ViewportSink
from .event_bus import EventBus
from .logging_setup import configure_logging
from .settings import CameraSettings

__all__ = [
    "CameraSettings",
    "EventBus",
    "ResizeSource",
    "TileIndex",
    "ViewportSink",
    "configure_logging",
]
