import pytest

from vtkit.color_map import ColorMap
from vtkit.palette import MemoryPalette


@pytest.fixture
def palette():
    return MemoryPalette(colors=256, pairs=16)


@pytest.fixture
def cmap(palette):
    return ColorMap(palette)


@pytest.mark.parametrize("color", range(8))
def test_basic_colors_pass_through(cmap, color):
    assert cmap.add(color, 10, 20, 30) == color
    assert len(cmap) == 0


def test_black_returns_color_black(cmap):
    assert cmap.add(20, 0, 0, 0) == 0
    assert cmap.add(21, -5, -1, -3) == 0
    assert len(cmap) == 0


def test_first_mapping_uses_first_free_slot(cmap, palette):
    assert cmap.add(20, 255, 0, 0) == 8
    assert palette.color_content(8) == (1000, 0, 0)


def test_occupied_slots_are_skipped():
    palette = MemoryPalette(colors=256, pairs=16, rgb={8: (5, 5, 5), 9: (1, 0, 0)})
    cmap = ColorMap(palette)
    assert cmap.add(30, 0, 255, 0) == 10


def test_same_private_color_reuses_mapping(cmap):
    first = cmap.add(20, 10, 20, 30)
    assert cmap.add(20, 200, 200, 200) == first
    assert len(cmap) == 1


def test_same_rgb_reuses_mapping(cmap):
    first = cmap.add(20, 10, 20, 30)
    assert cmap.add(40, 10.7, 20.2, 30.9) == first
    assert cmap.add(-1, 10, 20, 30) == first


def test_components_are_clamped(cmap, palette):
    color = cmap.add(21, 300, 0, 0)
    assert palette.color_content(color) == (1000, 0, 0)
    assert cmap.lookup_rgb(255, 0, 0) == color


def test_lookup(cmap):
    color = cmap.add(33, 1, 2, 3)
    assert cmap.lookup(33) == color
    assert cmap.lookup(34) == -1
    assert cmap.lookup(-1) == -1


def test_lookup_rgb_missing(cmap):
    assert cmap.lookup_rgb(1, 2, 3) == -1


def test_anonymous_colors_get_distinct_slots(cmap):
    a = cmap.add(-1, 100, 0, 0)
    b = cmap.add(-1, 0, 100, 0)
    assert a != b
    assert {entry.global_color for entry in cmap} == {a, b}


def test_exhaustion_returns_minus_one():
    palette = MemoryPalette(colors=9, pairs=4)
    cmap = ColorMap(palette)
    assert cmap.add(20, 50, 50, 50) == 8
    assert cmap.add(21, 60, 60, 60) == -1


def test_clear_frees_slots(cmap, palette):
    color = cmap.add(20, 255, 255, 255)
    cmap.clear()
    assert len(cmap) == 0
    assert palette.color_content(color) == (0, 0, 0)
    assert cmap.lookup(20) == -1
    assert cmap.add(22, 1, 1, 1) == color