from .camera import TiledCamera
from .projection import OrthographicProjection, screen_to_world, world_to_screen
from .rect import Rect
from .sized_grid import GridIterable, SizedGrid
from .viewport import ViewportState, compute_viewport
from .world_grid import WorldGrid, WorldSpace

__all__ = [
    "GridIterable",
    "OrthographicProjection",
    "Rect",
    "SizedGrid",
    "TiledCamera",
    "ViewportState",
    "WorldGrid",
    "WorldSpace",
    "compute_viewport",
    "screen_to_world",
    "world_to_screen",
]
