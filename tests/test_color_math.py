import pytest

from vtkit.color_math import (
    cie76_delta,
    cielab_to_hue,
    hsl_to_rgb,
    hue_to_rgb,
    rgb_to_hsl,
    rgb_to_lab,
)


def test_lab_of_black_is_origin():
    l, a, b = rgb_to_lab(0, 0, 0)
    assert l == pytest.approx(0.0, abs=1e-9)
    assert a == pytest.approx(0.0, abs=1e-9)
    assert b == pytest.approx(0.0, abs=1e-9)


def test_lab_of_white_has_full_lightness_and_no_chroma():
    l, a, b = rgb_to_lab(255, 255, 255)
    assert l == pytest.approx(100.0, abs=0.01)
    assert abs(a) < 0.1
    assert abs(b) < 0.1


def test_lab_lightness_grows_with_grey_level():
    levels = [rgb_to_lab(v, v, v)[0] for v in (0, 10, 64, 128, 200, 255)]
    assert levels == sorted(levels)
    assert len(set(levels)) == len(levels)


def test_lab_red_has_positive_a():
    _, a, _ = rgb_to_lab(255, 0, 0)
    assert a > 0


def test_hsl_of_grey_has_no_hue_or_saturation():
    h, s, l = rgb_to_hsl(128, 128, 128)
    assert h == 0.0
    assert s == 0.0
    assert l == pytest.approx(128 / 255)


def test_hsl_of_primaries():
    red = rgb_to_hsl(255, 0, 0)
    green = rgb_to_hsl(0, 255, 0)
    blue = rgb_to_hsl(0, 0, 255)
    assert red[0] == pytest.approx(0.0, abs=1e-9)
    assert green[0] == pytest.approx(1 / 3)
    assert blue[0] == pytest.approx(2 / 3)
    assert red[1] == green[1] == blue[1]
    assert red[2] == green[2] == blue[2]


def test_hsl_hue_within_unit_range():
    for rgb in [(10, 200, 30), (255, 0, 128), (1, 2, 3), (250, 240, 5)]:
        h, s, l = rgb_to_hsl(*rgb)
        assert 0.0 <= h <= 1.0
        assert 0.0 <= s <= 1.0
        assert 0.0 <= l <= 1.0


def test_hsl_to_rgb_grey_uses_lightness():
    assert hsl_to_rgb(0.7, 0, 0.5) == (127.5, 127.5, 127.5)


def test_hsl_round_trip_red():
    r, g, b = hsl_to_rgb(*rgb_to_hsl(255, 0, 0))
    assert r == pytest.approx(255)
    assert g == pytest.approx(0, abs=1e-6)
    assert b == pytest.approx(0, abs=1e-6)


def test_hsl_round_trip_grey():
    r, g, b = hsl_to_rgb(*rgb_to_hsl(40, 40, 40))
    assert (r, g, b) == (pytest.approx(40), pytest.approx(40), pytest.approx(40))


def test_hue_to_rgb_branches():
    assert hue_to_rgb(0.2, 0.8, 0.3) == 0.8
    assert hue_to_rgb(0.2, 0.8, 0.9) == 0.2
    assert hue_to_rgb(0.0, 1.0, 0.1) == pytest.approx(0.6)


def test_hue_to_rgb_wraps_out_of_range_hue():
    assert hue_to_rgb(0.2, 0.8, -0.7) == hue_to_rgb(0.2, 0.8, 0.3)
    assert hue_to_rgb(0.2, 0.8, 1.9) == hue_to_rgb(0.2, 0.8, 0.9)


def test_hue_to_rgb_equal_inputs_is_constant():
    for vh in (0.05, 0.3, 0.5, 0.9):
        assert hue_to_rgb(0.4, 0.4, vh) == pytest.approx(0.4)


def test_cie76_delta_identity_and_symmetry():
    assert cie76_delta(50, 10, -20, 50, 10, -20) == 0.0
    assert cie76_delta(1, 2, 3, 7, -1, 9) == cie76_delta(7, -1, 9, 1, 2, 3)


def test_cie76_delta_is_euclidean():
    assert cie76_delta(0, 0, 0, 3, 4, 0) == pytest.approx(5.0)


def test_cielab_to_hue_axes():
    assert cielab_to_hue(1, 0) == 0
    assert cielab_to_hue(0, 0) == 0
    assert cielab_to_hue(-1, 0) == 180
    assert cielab_to_hue(0, 1) == 90
    assert cielab_to_hue(0, -1) == 270


def test_cielab_to_hue_quadrants():
    first = cielab_to_hue(1, 1)
    assert 0 < first < 90
    assert 90 < cielab_to_hue(-1, 1) < 180
    assert cielab_to_hue(-1, -1) - first == pytest.approx(180)
    assert 270 < cielab_to_hue(1, -1) < 360
    assert cielab_to_hue(2, 2) == pytest.approx(first)