# vectors.py
from typing import NamedTuple

import numpy as np

from .config import BACKGROUND


# ---------------- Math Utilities ----------------
def vec3(x, y, z):
    return np.array([x, y, z], dtype=float)


def normalize(v):
    n = np.linalg.norm(v)
    if n == 0:
        return v
    return v / n


def length(v):
    return float(np.linalg.norm(v))


def dot(a, b):
    return float(np.dot(a, b))


def cross(a, b):
    return np.cross(a, b)


def reflect(I, N):
    # Reflect incident vector I around normal N
    return I - 2 * dot(I, N) * N


# ---------------- Colour ----------------
class Colour(NamedTuple):
    """An 8-bit RGB colour.

    Shading is done on float arrays; ``from_array`` is the single place where
    those floats are clipped and rounded back to bytes.
    """

    r: int
    g: int
    b: int

    @classmethod
    def of(cls, values) -> "Colour":
        """Build a colour from three whole numbers in [0, 255].

        Raises ValueError for anything else; use ``from_array`` to clamp.
        """
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"Colour needs 3 channels, got {len(values)}")
        channels = []
        for value in values:
            if not float(value).is_integer() or not 0 <= value <= 255:
                raise ValueError(f"Colour channels must be integers in [0, 255], got {values}")
            channels.append(int(value))
        return cls(*channels)

    @classmethod
    def from_array(cls, values) -> "Colour":
        arr = np.nan_to_num(np.asarray(values, dtype=float), nan=0.0)
        arr = np.rint(np.clip(arr, 0, 255)).astype(int)
        return cls(int(arr[0]), int(arr[1]), int(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=float)


BLACK = Colour(*BACKGROUND)
