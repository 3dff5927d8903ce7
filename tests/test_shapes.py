import numpy as np
import pytest

from whitted.shapes import Plane, Sphere
from whitted.vectors import normalize, vec3

CENTRE = vec3(0, 0, 5)


def test_sphere_hit_along_centre_line():
    sphere = Sphere(1.0)
    origin = vec3(0, 0, 0)
    t = sphere.intersect(CENTRE, origin, vec3(0, 0, 1))
    assert t == pytest.approx(np.linalg.norm(CENTRE - origin) - 1.0)
    hit = origin + vec3(0, 0, 1) * t
    assert np.allclose(sphere.normal(CENTRE, hit), normalize(hit - CENTRE))


def test_sphere_miss_when_ray_passes_outside_radius():
    assert Sphere(1.0).intersect(CENTRE, vec3(0, 1.5, 0), vec3(0, 0, 1)) is None


def test_sphere_behind_origin_is_not_hit():
    assert Sphere(1.0).intersect(CENTRE, vec3(0, 0, 0), vec3(0, 0, -1)) is None


def test_sphere_from_inside_returns_exit_point():
    t = Sphere(2.0).intersect(CENTRE, CENTRE, vec3(1, 0, 0))
    assert t == pytest.approx(2.0)


def test_sphere_zero_direction_is_not_hit():
    assert Sphere(1.0).intersect(CENTRE, vec3(0, 0, 4.5), vec3(0, 0, 0)) is None


def test_sphere_contains_uses_squared_radius():
    sphere = Sphere(2.0)
    assert sphere.contains(CENTRE, CENTRE + vec3(1.5, 0, 0))
    assert not sphere.contains(CENTRE, CENTRE + vec3(2.5, 0, 0))


def test_sphere_rejects_non_positive_radius():
    with pytest.raises(ValueError):
        Sphere(0)


PLANE_POS = vec3(1, 0, 3)
DOWN = vec3(0, -1, 0)


@pytest.mark.parametrize("x, z, expected", [
    (1.0, 3.0, True),
    (2.99, 3.0, True),
    (3.01, 3.0, False),
    (-0.99, 3.0, True),
    (-1.01, 3.0, False),
    (1.0, 3.99, True),
    (1.0, 4.01, False),
    (1.0, 1.99, False),
])
def test_plane_hit_only_inside_footprint(x, z, expected):
    plane = Plane(4.0, 2.0)
    t = plane.intersect(PLANE_POS, vec3(x, 5, z), DOWN)
    if expected:
        assert t == pytest.approx(5.0)
    else:
        assert t is None


def test_plane_parallel_ray_is_not_hit():
    assert Plane(4.0, 2.0).intersect(PLANE_POS, vec3(1, 0, 0), vec3(1, 0, 0)) is None


def test_plane_receding_ray_is_not_hit():
    assert Plane(4.0, 2.0).intersect(PLANE_POS, vec3(1, 5, 3), vec3(0, 1, 0)) is None


def test_plane_normal_is_up():
    assert np.array_equal(Plane(1, 1).normal(PLANE_POS, PLANE_POS), vec3(0, 1, 0))


def test_plane_contains_within_tolerance():
    plane = Plane(4.0, 2.0)
    assert plane.contains(PLANE_POS, vec3(1, 0.005, 3))
    assert not plane.contains(PLANE_POS, vec3(1, 0.05, 3))
    assert not plane.contains(PLANE_POS, vec3(5, 0, 3))
