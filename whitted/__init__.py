"""Recursive Whitted-style ray tracing over spheres and rectangular planes."""

from .camera import Camera
from .materials import Checkerboard, Flat, Gradient, Lit, Material, Reflect
from .scene import Scene, WorldObject
from .shapes import Plane, Shape, Sphere
from .tracer import Hit, cast_ray, cast_rays, find_nearest, render_pixel
from .vectors import BLACK, Colour, vec3

__all__ = [
    "BLACK",
    "Camera",
    "Checkerboard",
    "Colour",
    "Flat",
    "Gradient",
    "Hit",
    "Lit",
    "Material",
    "Plane",
    "Reflect",
    "Scene",
    "Shape",
    "Sphere",
    "WorldObject",
    "cast_ray",
    "cast_rays",
    "find_nearest",
    "render_pixel",
    "vec3",
]
