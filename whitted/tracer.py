# tracer.py
from typing import NamedTuple, Optional

import numpy as np

from .config import EPSILON, JITTER_MAX, JITTER_MIN, MAX_SAMPLES, MIN_SAMPLES
from .scene import Scene, WorldObject
from .vectors import BLACK, Colour, normalize


class Hit(NamedTuple):
    index: int
    obj: WorldObject
    distance: float


# ---------------- Ray Tracing ----------------
def find_nearest(origin, direction, scene: Scene) -> Optional[Hit]:
    nearest = None
    for index, obj in enumerate(scene):
        t = obj.intersect(origin, direction)
        # Strict < keeps the earliest object on equal distances
        if t is not None and t > 0 and (nearest is None or t < nearest.distance):
            nearest = Hit(index, obj, t)
    return nearest


def cast_ray(origin, direction, depth, scene: Scene, rng) -> Colour:
    start = origin + direction * EPSILON
    hit = find_nearest(start, direction, scene)
    if hit is None:
        return BLACK
    at = start + direction * hit.distance
    return hit.obj.material.colour(hit.index, at, direction, origin, scene, depth, rng)


def cast_rays(origin, direction, depth, scene: Scene, roughness, rng) -> Colour:
    """Average several jittered casts to approximate a glossy reflection.

    The sample count is ``roughness`` clamped to [1, 5] and the per-axis jitter
    scales with ``roughness``, so ``roughness=0`` is a single plain cast.
    """
    samples = int(np.clip(roughness, MIN_SAMPLES, MAX_SAMPLES))
    total = np.zeros(3)
    for _ in range(samples):
        offset = rng.uniform(JITTER_MIN, JITTER_MAX, size=3) * rng.choice((-1.0, 1.0), size=3)
        jittered = normalize(direction + offset * roughness)
        total += cast_ray(origin, jittered, depth, scene, rng).as_array()
    return Colour.from_array(total / samples)


def render_pixel(origin, direction, scene: Scene, rng=None) -> Colour:
    """Shade one primary ray. ``direction`` must already be normalized."""
    if rng is None:
        rng = np.random.default_rng()
    origin = np.asarray(origin, dtype=float)
    direction = np.asarray(direction, dtype=float)
    return cast_ray(origin, direction, 0, scene, rng)
