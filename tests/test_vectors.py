import numpy as np
import pytest

from whitted.vectors import BLACK, Colour, cross, normalize, reflect, vec3


def test_normalize_zero_vector_is_unchanged():
    zero = vec3(0, 0, 0)
    assert np.array_equal(normalize(zero), zero)


def test_normalize_gives_unit_length():
    assert np.isclose(np.linalg.norm(normalize(vec3(3, 4, 12))), 1.0)


def test_reflect_about_up():
    assert np.allclose(reflect(vec3(1, -1, 0), vec3(0, 1, 0)), vec3(1, 1, 0))


def test_cross_follows_right_hand_rule():
    assert np.allclose(cross(vec3(1, 0, 0), vec3(0, 1, 0)), vec3(0, 0, 1))


def test_colour_from_array_clamps_and_rounds():
    assert Colour.from_array([-10.0, 127.6, 300.0]) == Colour(0, 128, 255)


def test_colour_from_array_maps_nan_to_zero():
    assert Colour.from_array([np.nan, 10.2, 0.0]) == Colour(0, 10, 0)


def test_black_is_zero():
    assert BLACK == (0, 0, 0)
    assert np.array_equal(BLACK.as_array(), np.zeros(3))


def test_colour_of_accepts_whole_bytes():
    assert Colour.of((0, 128.0, np.uint8(255))) == Colour(0, 128, 255)


@pytest.mark.parametrize("values", [
    (300, 0, 0),
    (0, -4, 0),
    (0, 0, 1.5),
    (0, 0, float("nan")),
    (1, 2),
])
def test_colour_of_rejects_non_bytes(values):
    with pytest.raises(ValueError):
        Colour.of(values)
