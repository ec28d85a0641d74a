import pytest

from mallas3d.axes import Axes


def test_default_size_matches_source():
    assert Axes().size == 1000.0


def test_change_size_updates_size():
    axes = Axes()
    axes.change_size(5000)
    assert axes.size == 5000.0


def test_vertex_array_layout():
    axes = Axes(7)
    assert axes.vertex_array() == [
        -7, 0, 0, 7, 0, 0,
        0, -7, 0, 0, 7, 0,
        0, 0, -7, 0, 0, 7,
    ]


def test_color_array_is_fixed():
    assert Axes(3).color_array() == [
        1, 0, 0, 1, 0, 0,
        0, 1, 0, 0, 1, 0,
        0, 0, 1, 0, 0, 1,
    ]


def test_arrays_have_eighteen_entries():
    axes = Axes(2.5)
    assert len(axes.vertex_array()) == 18
    assert len(axes.color_array()) == 18


def test_segments_are_symmetric_about_origin():
    axes = Axes(4)
    for _, start, end in axes.segments():
        assert start == -end
        assert end.length_sq() == pytest.approx(16.0)


def test_segment_colors_match_axis_direction():
    axes = Axes(9)
    for color, _, end in axes.segments():
        assert end / 9 == color


def test_change_size_reflected_in_arrays():
    axes = Axes()
    axes.change_size(2)
    assert max(axes.vertex_array()) == 2.0
    assert min(axes.vertex_array()) == -2.0