# tests/test_rect.py
from __future__ import annotations

import pytest

from tiled_camera.core.rect import Rect
from util_asserts import assert_vec2_close


def test_grid_position_size_init():
    rect = Rect.from_grid_position_size((5, 5), (5, 5))
    assert rect.grid_position() == (5, 5)
    assert rect.grid_size() == (5, 5)
    assert rect.grid_max() == (10, 10)


def test_accessors_from_extents():
    rect = Rect.from_extents((0.0, 0.0), (10.0, 4.0))
    assert rect.width() == 10.0
    assert rect.height() == 4.0
    assert_vec2_close(rect.size(), (10.0, 4.0))
    assert_vec2_close(rect.center(), (5.0, 2.0))
    assert_vec2_close(rect.position(), (0.0, 0.0))


def test_center_size_is_centered():
    rect = Rect.from_center_size((3.0, -2.0), (4.0, 2.0))
    assert_vec2_close(rect.min, (1.0, -3.0))
    assert_vec2_close(rect.max, (5.0, -1.0))
    assert_vec2_close(rect.center(), (3.0, -2.0))


def test_grid_center_size():
    rect = Rect.from_grid_center_size((10, 10), (4, 3))
    assert rect.grid_min() == (8, 9)
    assert rect.grid_size() == (4, 3)
    assert rect.grid_center() == (10, 10)


@pytest.mark.parametrize("size", [(-1.0, 2.0), (2.0, -0.5)])
def test_negative_size_rejected(size):
    with pytest.raises(ValueError):
        Rect.from_position_size((0.0, 0.0), size)


def test_iterator_covers_every_cell_row_major():
    size = 10
    rect = Rect.from_grid_position_size((0, 0), (size, size))
    points = list(rect)
    assert len(points) == size * size
    for x in range(size):
        for y in range(size):
            assert (x, y) in points
    # x fastest, y slowest
    assert points[:3] == [(0, 0), (1, 0), (2, 0)]
    assert points[size] == (0, 1)


def test_iteration_is_restartable():
    rect = Rect.from_grid_position_size((-2, -1), (3, 2))
    assert list(rect.iter_grid()) == list(rect.iter_grid())
    assert list(rect) == [(-2, -1), (-1, -1), (0, -1), (-2, 0), (-1, 0), (0, 0)]


def test_iteration_uses_half_open_corners():
    rect = Rect.from_extents((0.5, 0.0), (2.5, 1.0))
    assert list(rect) == [(1, 0), (2, 0)]


def test_zero_area_rect_iterates_nothing():
    assert list(Rect.from_grid_position_size((3, 3), (0, 5))) == []
    assert list(Rect.from_position_size((1.0, 1.0), (0.0, 0.0))) == []


def test_iter_points_offsets_from_min():
    rect = Rect.from_position_size((0.5, 0.25), (2.0, 1.0))
    pts = [(p.x, p.y) for p in rect.iter_points()]
    assert pts == [(0.5, 0.25), (1.5, 0.25)]


def test_overlap():
    r1 = Rect.from_grid_extents((0, 0), (10, 10))
    r2 = Rect.from_grid_extents((5, 5), (10, 10))
    r3 = Rect.from_grid_extents((100, 100), (110, 110))

    assert r1.grid_overlaps(r2)
    assert not r1.grid_overlaps(r3)
    assert r1.grid_overlaps(r1)

    r1 = Rect.from_grid_extents((0, 0), (5, 5))
    r2 = Rect.from_grid_extents((6, 6), (10, 10))
    assert not r1.overlaps(r2)

    r1 = Rect.from_grid_position_size((24, 12), (6, 8))
    r2 = Rect.from_grid_position_size((6, 31), (9, 7))
    assert not r1.grid_overlaps(r2)


def test_touching_edges_overlap():
    left = Rect.from_extents((0.0, 0.0), (1.0, 1.0))
    right = Rect.from_extents((1.0, 0.0), (2.0, 1.0))
    corner = Rect.from_extents((1.0, 1.0), (2.0, 2.0))
    assert left.overlaps(right)
    assert left.overlaps(corner)


def test_contains_point_half_open():
    rect = Rect.from_position_size((0.0, 0.0), (2.0, 2.0))
    assert rect.contains_point((0.0, 0.0))
    assert rect.contains_point((1.99, 1.0))
    assert not rect.contains_point((2.0, 1.0))


def test_setters_keep_size():
    rect = Rect.from_grid_position_size((0, 0), (10, 10))
    rect.set_center((30.0, 30.0))
    assert_vec2_close(rect.center(), (30.0, 30.0))
    assert_vec2_close(rect.min, (25.0, 25.0))
    assert_vec2_close(rect.max, (35.0, 35.0))

    rect.set_grid_position((-3, 4))
    assert rect.grid_position() == (-3, 4)
    assert rect.grid_size() == (10, 10)

    rect.set_size((2.0, 3.0))
    assert_vec2_close(rect.max, (-1.0, 7.0))


def test_str_lists_both_views():
    text = str(Rect.from_grid_position_size((1, 2), (3, 4)))
    assert text.startswith("Rect[pos(")
    assert "Grid[pos(1,2) size(3,4)]" in text
