"""
Lightweight camera type hints and host-engine protocols.

- Uses `from __future__ import annotations` so pygame types in annotations
  don't need pygame at import-time.
- `ViewportSink` and `ResizeSource` are the only two contracts the camera
  has with the host engine: one receives the computed viewport, the other
  announces window resizes. `EventBus` satisfies `ResizeSource`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Protocol, Tuple, Union, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    import pygame  # noqa: F401

TileIndex = Tuple[int, int]
Size2 = Tuple[int, int]
Vec2Like = Union["pygame.math.Vector2", Tuple[float, float]]


# ---- Host protocols ---------------------------------------------------------

@runtime_checkable
class ViewportSink(Protocol):
    """
    Receives the camera's computed viewport (pixels, top-left origin) and the
    vertical extent of its orthographic projection (world units).
    """

    def set_viewport(self, position: Size2, size: Size2) -> None: ...
    def set_projection_size(self, vertical_extent: float) -> None: ...


@runtime_checkable
class ResizeSource(Protocol):
    """
    Anything that can notify a handler of named events and hand back an
    unsubscribe callable.
    """

    def on(self, event: str, handler: Callable[[Dict[str, Any]], None]) -> Callable[[], None]: ...


__all__ = [
    "ResizeSource",
    "Size2",
    "TileIndex",
    "Vec2Like",
    "ViewportSink",
]
