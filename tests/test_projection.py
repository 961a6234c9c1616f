# tests/test_projection.py
from __future__ import annotations

import numpy as np
import pygame
import pytest

from tiled_camera.core.projection import (
    OrthographicProjection,
    near_plane_depth,
    orthographic_rh,
    screen_to_ndc,
    screen_to_world,
    translation_matrix,
    world_to_screen,
)
from util_asserts import assert_vec2_close


def _ortho(vertical: float, size=(100, 100), origin=(0.5, 0.5)) -> OrthographicProjection:
    p = OrthographicProjection(fixed_vertical=vertical)
    p.origin.update(origin)
    p.update(*size)
    return p


def test_orthographic_maps_extents_to_ndc():
    m = orthographic_rh(-2.0, 2.0, -1.0, 1.0, 0.0, 10.0)
    np.testing.assert_allclose(m @ [2.0, 1.0, 0.0, 1.0], [1.0, 1.0, 0.0, 1.0])
    np.testing.assert_allclose(m @ [-2.0, -1.0, -10.0, 1.0], [-1.0, -1.0, 1.0, 1.0])


def test_reverse_depth_near_plane_read_from_matrix():
    standard = orthographic_rh(-1.0, 1.0, -1.0, 1.0, 0.0, 100.0)
    reverse = orthographic_rh(-1.0, 1.0, -1.0, 1.0, 100.0, 0.0)
    assert near_plane_depth(standard) == pytest.approx(0.0)
    assert near_plane_depth(reverse) == pytest.approx(1.0)


def test_projection_update_centered_and_corner():
    centered = _ortho(10.0, size=(200, 100))
    assert (centered.left, centered.right, centered.bottom, centered.top) == (-10.0, 10.0, -5.0, 5.0)
    corner = _ortho(10.0, size=(200, 100), origin=(0.0, 0.0))
    assert (corner.left, corner.right, corner.bottom, corner.top) == (0.0, 20.0, 0.0, 10.0)
    assert corner.extents() == (20.0, 10.0)


def test_projection_update_ignores_empty_viewport():
    p = _ortho(4.0)
    p.update(0, 0)
    assert p.extents() == (4.0, 4.0)


def test_texel_size_snaps_centered_edges():
    p = OrthographicProjection(fixed_vertical=3.0, texel_size=pygame.Vector2(0.5, 0.5))
    p.update(50, 100)
    assert (p.left, p.right, p.bottom, p.top) == (-1.0, 0.5, -1.5, 1.5)
    assert p.extents() == (1.5, 3.0)


def test_texel_size_leaves_corner_origin_alone():
    p = OrthographicProjection(fixed_vertical=3.0, texel_size=pygame.Vector2(0.5, 0.5))
    p.origin.update(0.0, 0.0)
    p.update(50, 100)
    assert (p.left, p.right, p.bottom, p.top) == (0.0, 1.5, 0.0, 3.0)


def test_pixel_aspect_widens_view():
    p = OrthographicProjection(fixed_vertical=4.0, pixel_aspect=0.5)
    p.update(100, 100)
    assert p.extents() == (2.0, 4.0)


def test_screen_to_ndc_flips_y_and_rejects_outside():
    assert screen_to_ndc((50, 50), (100, 100), (0, 0)) == (0.0, 0.0)
    assert screen_to_ndc((10, 20), (100, 100), (10, 20)) == (-1.0, 1.0)
    assert screen_to_ndc((109, 119), (100, 100), (10, 20)) == pytest.approx((0.98, -0.98))
    # one past the last pixel is outside, as in ViewportState.contains_screen_point
    assert screen_to_ndc((110, 50), (100, 100), (10, 20)) is None
    assert screen_to_ndc((50, 120), (100, 100), (10, 20)) is None
    assert screen_to_ndc((9, 50), (100, 100), (10, 20)) is None
    assert screen_to_ndc((50, 121), (100, 100), (10, 20)) is None
    assert screen_to_ndc((0, 0), (0, 0), (0, 0)) is None


def test_screen_to_world_uses_viewport_not_window():
    proj = _ortho(10.0).matrix()
    view = translation_matrix(3.0, -2.0, 999.9)
    # viewport 100x100 placed at (50, 20) inside a larger window
    assert_vec2_close(screen_to_world((100, 70), (100, 100), (50, 20), view, proj), (3.0, -2.0))
    assert_vec2_close(screen_to_world((50, 20), (100, 100), (50, 20), view, proj), (-2.0, 3.0))
    assert_vec2_close(screen_to_world((149, 119), (100, 100), (50, 20), view, proj), (7.9, -6.9))
    assert screen_to_world((150, 120), (100, 100), (50, 20), view, proj) is None
    assert screen_to_world((10, 10), (100, 100), (50, 20), view, proj) is None


def test_world_to_screen_rounds_and_offsets():
    proj = _ortho(10.0).matrix()
    view = translation_matrix(3.0, -2.0, 999.9)
    assert world_to_screen((3.0, -2.0), (100, 100), (50, 20), view, proj) == (100, 70)
    assert world_to_screen((-2.0, 3.0), (100, 100), (50, 20), view, proj) == (50, 20)
    assert world_to_screen((3.04, -2.0), (100, 100), (50, 20), view, proj) == (100, 70)
    assert world_to_screen((3.06, -2.0), (100, 100), (50, 20), view, proj) == (101, 70)


def test_world_to_screen_rejects_outside_depth_range():
    proj = _ortho(10.0).matrix()
    view = translation_matrix(0.0, 0.0, 999.9)
    # in front of the camera (past the near plane)
    assert world_to_screen((0.0, 0.0), (100, 100), (0, 0), view, proj, world_z=1000.5) is None
    # beyond the far plane
    assert world_to_screen((0.0, 0.0), (100, 100), (0, 0), view, proj, world_z=-5.0) is None
    assert world_to_screen((0.0, 0.0), (100, 100), (0, 0), view, proj, world_z=0.0) == (50, 50)


def test_screen_world_round_trip_on_whole_pixels():
    proj = _ortho(9.0, size=(144, 144)).matrix()
    view = translation_matrix(-4.0, 12.5, 999.9)
    for sx in range(0, 145, 7):
        for sy in range(0, 145, 11):
            screen = (16 + sx, 8 + sy)
            world = screen_to_world(screen, (144, 144), (16, 8), view, proj)
            assert world is not None
            assert world_to_screen(world, (144, 144), (16, 8), view, proj) == screen
