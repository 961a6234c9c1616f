# tests/conftest.py
from __future__ import annotations
import os
import sys
from pathlib import Path
from typing import List, Tuple
import pytest

# Ensure src/ is importable (so `import tiled_camera` works without an install)
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame (only pygame.math is used, but keep imports quiet on CI)
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingSink:
    """ViewportSink that remembers every update it receives."""

    def __init__(self) -> None:
        self.viewports: List[Tuple[Tuple[int, int], Tuple[int, int]]] = []
        self.projection_sizes: List[float] = []

    def set_viewport(self, position, size) -> None:
        self.viewports.append((tuple(position), tuple(size)))

    def set_projection_size(self, vertical_extent: float) -> None:
        self.projection_sizes.append(vertical_extent)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def bus():
    from tiled_camera.utils.event_bus import EventBus
    return EventBus()
