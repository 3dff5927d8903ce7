# materials.py
import numpy as np

from . import tracer
from .config import EPSILON, MAX_DEPTH
from .vectors import BLACK, Colour, dot, normalize, reflect


class Material:
    """Base for all shading strategies.

    ``colour`` is what the tracer calls. It enforces the recursion cutoff and
    defers to ``shade``, which subclasses implement. Arguments:

    - ``index``: scene index of the object being shaded
    - ``at``: hit point on its surface
    - ``incident``: unit direction of the arriving ray
    - ``incident_from``: where that ray started
    - ``scene``, ``depth``, ``rng``: threaded through from the tracer
    """

    def colour(self, index, at, incident, incident_from, scene, depth, rng) -> Colour:
        if depth > MAX_DEPTH:
            return BLACK
        return self.shade(index, at, incident, incident_from, scene, depth, rng)

    def shade(self, index, at, incident, incident_from, scene, depth, rng) -> Colour:
        raise NotImplementedError


# ---------------- Textures ----------------
class Flat(Material):
    def __init__(self, colour):
        self.value = Colour.of(colour)

    def __repr__(self):
        return f"Flat({tuple(self.value)})"

    def shade(self, index, at, incident, incident_from, scene, depth, rng):
        return self.value


class Checkerboard(Material):
    # World-space XZ checker pattern, independent of the surface it is on
    def __init__(self, colour1, colour2, repeat=1.0):
        self.colour1 = Colour.of(colour1)
        self.colour2 = Colour.of(colour2)
        self.repeat = float(repeat)

    def shade(self, index, at, incident, incident_from, scene, depth, rng):
        if self.repeat <= 0:
            return self.colour1
        check = (int(np.floor(at[0] / self.repeat)) + int(np.floor(at[2] / self.repeat))) % 2
        return self.colour1 if check == 0 else self.colour2


class Gradient(Material):
    """Vertical blend from ``start`` at ``from_y`` to ``end`` at ``to_y``.

    Points outside the band get the nearer end colour. Put it on a large
    sphere around the scene to get a sky.
    """

    def __init__(self, start, end, from_y, to_y):
        self.start = Colour.of(start)
        self.end = Colour.of(end)
        self.from_y = float(from_y)
        self.to_y = float(to_y)

    def ratio(self, y):
        span = self.to_y - self.from_y
        if span == 0:
            return 1.0 if y >= self.from_y else 0.0
        return float(np.clip((y - self.from_y) / span, 0.0, 1.0))

    def shade(self, index, at, incident, incident_from, scene, depth, rng):
        t = self.ratio(at[1])
        start = self.start.as_array()
        return Colour.from_array(start + (self.end.as_array() - start) * t)


# ---------------- Reflection ----------------
class Reflect(Material):
    # Mirror tinted by the base material; smoothness is the glossy jitter scale
    def __init__(self, base, smoothness=0.0):
        self.base = base
        self.smoothness = float(smoothness)

    def shade(self, index, at, incident, incident_from, scene, depth, rng):
        normal = scene[index].normal(at)
        ray = normalize(reflect(incident, normal))
        reflected = tracer.cast_rays(at, ray, depth + 1, scene, self.smoothness, rng).as_array()
        base = self.base.colour(index, at, incident, incident_from, scene, depth, rng).as_array()
        return Colour.from_array(reflected * base / 255)


class Lit(Material):
    """Local illumination with shadows, Phong highlights and reflection.

    The result is ``emit + specular_amount * specular + absorb * diffuse``:

    - ``emit`` is the surface's own light, added as is.
    - ``diffuse`` sums ``light * max(0, L.N)`` over every unoccluded light,
      plus ``reflectivity`` times the (possibly glossy) reflected colour.
    - ``specular`` sums ``light * max(0, L.R) ** shininess``, where R is the
      incident ray mirrored about the normal.
    - ``absorb`` is the surface colour, scaled to [0, 1], that filters the
      incoming light.

    A light is the colour of whatever its material shows where a shadow ray
    from the hit point lands on it. It counts only if no other object is
    nearer along that ray. An object never lights itself.
    """

    def __init__(self, absorb, emit=None, shininess=32.0, specular_amount=0.0,
                 reflectivity=0.0, roughness=0.0):
        if shininess < 0:
            raise ValueError(f"shininess must be non-negative, got {shininess}")
        self.absorb = absorb
        self.emit = emit if emit is not None else Flat(BLACK)
        self.shininess = float(shininess)
        self.specular_amount = float(specular_amount)
        self.reflectivity = float(reflectivity)
        self.roughness = float(roughness)

    def gather_lights(self, index, at, normal, reflected, scene, depth, rng):
        diffuse = np.zeros(3)
        specular = np.zeros(3)
        for light_index, light in scene.lights():
            if light_index == index:
                continue
            to_light = normalize(light.position - at)
            start = at + to_light * EPSILON
            hit = tracer.find_nearest(start, to_light, scene)
            if hit is None or hit.index != light_index:
                continue
            light_point = start + to_light * hit.distance
            light_colour = light.material.colour(
                light_index, light_point, to_light, at, scene, depth + 1, rng
            ).as_array()
            diffuse += light_colour * max(0.0, dot(to_light, normal))
            specular += light_colour * max(0.0, dot(to_light, reflected)) ** self.shininess
        return diffuse, specular

    def shade(self, index, at, incident, incident_from, scene, depth, rng):
        normal = scene[index].normal(at)
        reflected = normalize(reflect(incident, normal))

        emission = self.emit.colour(index, at, incident, incident_from, scene, depth + 1, rng).as_array()
        diffuse, specular = self.gather_lights(index, at, normal, reflected, scene, depth, rng)

        # Reflections arrive as incoming light and are filtered by absorb
        if self.reflectivity > 0:
            bounce = tracer.cast_rays(at, reflected, depth + 1, scene, self.roughness, rng)
            diffuse += bounce.as_array() * self.reflectivity

        absorb = self.absorb.colour(index, at, incident, incident_from, scene, depth + 1, rng).as_array() / 255
        return Colour.from_array(emission + self.specular_amount * specular + absorb * diffuse)
