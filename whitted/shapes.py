# shapes.py
# Shapes carry only their own dimensions; the owning object supplies the position.
from typing import Optional

import numpy as np

from .config import PARALLEL_TOLERANCE, PLANE_TOLERANCE
from .vectors import dot, normalize, vec3

UP = vec3(0.0, 1.0, 0.0)


class Shape:
    def intersect(self, position, origin, direction) -> Optional[float]:
        raise NotImplementedError

    def normal(self, position, point):
        raise NotImplementedError

    def contains(self, position, point) -> bool:
        raise NotImplementedError


class Sphere(Shape):
    def __init__(self, radius):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.radius = float(radius)

    def __repr__(self):
        return f"Sphere(radius={self.radius})"

    def intersect(self, position, origin, direction):
        """Distance to the nearest forward hit, or None.

        With a unit direction ``d`` and ``m = origin - centre`` the roots are
        ``-d.m +/- sqrt((d.m)^2 - m.m + r^2)``.
        """
        d = normalize(direction)
        if not np.any(d):
            return None
        m = origin - position
        k = dot(d, m)
        disc = k * k - dot(m, m) + self.radius * self.radius
        if disc < 0:
            return None
        sqrt_disc = np.sqrt(disc)
        ts = [t for t in (-k - sqrt_disc, -k + sqrt_disc) if t > 0]
        return float(min(ts)) if ts else None

    def normal(self, position, point):
        return normalize(point - position)

    def contains(self, position, point):
        offset = point - position
        return dot(offset, offset) <= self.radius * self.radius


class Plane(Shape):
    """A width x height rectangle lying in y = position.y, facing +y.

    ``width`` spans x and ``height`` spans z.
    """

    def __init__(self, width, height):
        if width < 0 or height < 0:
            raise ValueError(f"Plane size must be non-negative, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    def __repr__(self):
        return f"Plane(width={self.width}, height={self.height})"

    def _within(self, position, point):
        return (abs(point[0] - position[0]) <= self.width / 2
                and abs(point[2] - position[2]) <= self.height / 2)

    def intersect(self, position, origin, direction):
        d = normalize(direction)
        denom = dot(d, UP)
        # Parallel (or zero-length) rays never meet the plane
        if abs(denom) < PARALLEL_TOLERANCE:
            return None
        t = dot(position - origin, UP) / denom
        if t <= 0:
            return None
        if not self._within(position, origin + d * t):
            return None
        return float(t)

    def normal(self, position, point):
        return UP.copy()

    def contains(self, position, point):
        return self._within(position, point) and abs(point[1] - position[1]) < PLANE_TOLERANCE
