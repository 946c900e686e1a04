import pytest
from hypothesis import given
from hypothesis import strategies as st

from sandfall.geometry import Color, Entity, Rect, color_from_floats

coords = st.integers(min_value=-50, max_value=50)
sizes = st.integers(min_value=-3, max_value=20)


def test_color_from_floats_full_red():
    assert color_from_floats(1.0, 0.0, 0.0, 1.0) == Color(255, 0, 0, 255)


def test_color_from_floats_black_opaque():
    assert color_from_floats(0.0, 0.0, 0.0, 1.0) == Color(0, 0, 0, 255)


def test_color_from_floats_rejects_out_of_range():
    with pytest.raises(ValueError):
        color_from_floats(1.5, 0.0, 0.0, 1.0)


def test_color_rejects_bad_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0, 0)


@given(st.floats(0.0, 1.0), st.floats(0.0, 1.0), st.floats(0.0, 1.0), st.floats(0.0, 1.0))
def test_color_from_floats_stays_in_range(r, g, b, a):
    color = color_from_floats(r, g, b, a)
    assert all(0 <= c <= 255 for c in (color.red, color.green, color.blue, color.alpha))


def test_intersects_overlapping():
    assert Rect(0, 0, 2, 2).intersects(Rect(1, 1, 2, 2))


def test_intersects_touching_edges_do_not_overlap():
    assert not Rect(0, 0, 1, 1).intersects(Rect(1, 0, 1, 1))
    assert not Rect(0, 0, 1, 1).intersects(Rect(0, 1, 1, 1))


def test_intersects_empty_rect_never():
    assert not Rect(0, 0, 0, 5).intersects(Rect(0, 0, 5, 5))


@given(coords, coords, sizes, sizes, coords, coords, sizes, sizes)
def test_intersects_is_symmetric(ax, ay, aw, ah, bx, by, bw, bh):
    a = Rect(ax, ay, aw, ah)
    b = Rect(bx, by, bw, bh)
    assert a.intersects(b) == b.intersects(a)


@given(coords, coords, sizes, sizes)
def test_nonempty_rect_intersects_itself(x, y, w, h):
    r = Rect(x, y, w, h)
    assert r.intersects(r) == (w > 0 and h > 0)


def test_contains_point_edges():
    r = Rect(2, 3, 4, 5)
    assert r.contains_point(2, 3)
    assert r.contains_point(5, 7)
    assert not r.contains_point(6, 3)
    assert not r.contains_point(2, 8)
    assert not r.contains_point(1, 3)


@given(coords, coords, sizes, sizes, coords, coords)
def test_shifted_round_trip(x, y, w, h, dx, dy):
    r = Rect(x, y, w, h)
    moved = r.shifted(dx, dy)
    assert moved.shifted(-dx, -dy) == r
    assert (moved.x, moved.y) == (x + dx, y + dy)
    assert (moved.w, moved.h) == (w, h)


def test_entity_position_and_size():
    entity = Entity(10, 20)
    assert entity.position == Rect(10, 20, 32, 32)
    assert entity.frame == 0
    assert entity.animated is False