"""Shared fixtures for the tracer tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from whitted import Flat, Lit, Sphere, WorldObject  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def lamp():
    """A small emissive sphere that lights everything else but not itself."""
    def make(position, colour=(255, 255, 255), radius=0.5):
        return WorldObject(position, Sphere(radius),
                           Lit(Flat((0, 0, 0)), emit=Flat(colour)), is_light=True)
    return make


@pytest.fixture
def white_light(lamp):
    return lamp
