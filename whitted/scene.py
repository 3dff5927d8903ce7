# scene.py
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

import numpy as np

from .shapes import Shape


# eq=False keeps identity semantics; two identical-looking spheres are still
# different objects when testing which one a shadow ray hit.
@dataclass(frozen=True, eq=False)
class WorldObject:
    position: np.ndarray
    shape: Shape
    material: Any
    is_light: bool = False

    def __post_init__(self):
        position = np.array(self.position, dtype=float)
        if position.shape != (3,):
            raise ValueError(f"position must have 3 components, got {position.shape}")
        position.flags.writeable = False
        object.__setattr__(self, "position", position)

    def intersect(self, origin, direction):
        return self.shape.intersect(self.position, origin, direction)

    def normal(self, point):
        return self.shape.normal(self.position, point)

    def contains(self, point):
        return self.shape.contains(self.position, point)


class Scene:
    """An ordered, read-only collection of objects.

    An object's index in the scene is its identifier; the tracer reports hits
    by index and materials use it to tell lights and occluders apart.
    """

    def __init__(self, objects: Sequence[WorldObject]):
        objects = tuple(objects)
        for obj in objects:
            if not isinstance(obj, WorldObject):
                raise TypeError(f"Scene accepts WorldObject instances, got {type(obj).__name__}")
        self._objects = objects

    @property
    def objects(self) -> Tuple[WorldObject, ...]:
        return self._objects

    def __len__(self):
        return len(self._objects)

    def __iter__(self) -> Iterator[WorldObject]:
        return iter(self._objects)

    def __getitem__(self, index) -> WorldObject:
        return self._objects[index]

    def lights(self) -> Iterator[Tuple[int, WorldObject]]:
        for index, obj in enumerate(self._objects):
            if obj.is_light:
                yield index, obj
