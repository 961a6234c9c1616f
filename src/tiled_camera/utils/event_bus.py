# src/tiled_camera/utils/event_bus.py
"""
Pub/sub bus that carries window resizes to cameras.

The host's event loop hands its pygame events to `forward_resizes` (or calls
`emit_resize` directly); every camera attached with
`TiledCamera.attach_resize_source(bus)` then recomputes its viewport:

    bus = EventBus()
    off = camera.attach_resize_source(bus)
    bus.forward_resizes(pygame.event.get())
    off()  # stop following the window
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Dict, Iterable, List

import pygame

from .settings import WINDOW_RESIZED_EVENT

_LOG = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], None]


class EventBus:
    def __init__(self) -> None:
        self._subs: DefaultDict[str, List[Handler]] = defaultdict(list)

    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        """Subscribe `handler` to `event`; returns the unsubscribe callable (safe to call twice)."""
        self._subs[event].append(handler)
        _LOG.debug("subscribed %r to %r", handler, event)

        def off() -> None:
            try:
                self._subs[event].remove(handler)
            except ValueError:
                pass
        return off

    def emit(self, event: str, **payload: Any) -> None:
        for h in list(self._subs.get(event, ())):
            h(payload)

    def subscriber_count(self, event: str) -> int:
        return len(self._subs.get(event, ()))

    # -------------------------
    # Window resizes
    # -------------------------

    def emit_resize(self, width: int, height: int) -> None:
        """Announce a new window size in pixels."""
        w, h = int(width), int(height)
        if w < 0 or h < 0:
            raise ValueError(f"window size must be >= 0, got ({w}, {h})")
        _LOG.debug("window resized to %dx%d", w, h)
        self.emit(WINDOW_RESIZED_EVENT, width=w, height=h)

    def forward_resizes(self, events: Iterable[pygame.event.Event]) -> int:
        """
        Re-emit every pygame VIDEORESIZE in `events` as a window-resized
        event. Other events are ignored. Returns how many were forwarded.
        """
        forwarded = 0
        for event in events:
            if event.type == pygame.VIDEORESIZE:
                self.emit_resize(event.w, event.h)
                forwarded += 1
        return forwarded


__all__ = ["EventBus", "Handler"]
