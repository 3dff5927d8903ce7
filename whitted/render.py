# render.py
import logging
import os

import numpy as np
from PIL import Image
from tqdm import tqdm

from .tracer import render_pixel

logger = logging.getLogger(__name__)


# ---------------- Rendering ----------------
def render_image(scene, camera, width, height, seed=None, progress=False):
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")

    rng = np.random.default_rng(seed)
    image = Image.new("RGB", (width, height))
    pixels = image.load()

    logger.info("Rendering %dx%d image of %d objects", width, height, len(scene))
    for py in tqdm(range(height), desc="Rendering rows", disable=not progress):
        for px in range(width):
            direction = camera.pixel_ray(px, py, width, height)
            pixels[px, py] = tuple(render_pixel(camera.position, direction, scene, rng))
    logger.info("Render complete")
    return image


def save_image(image, path):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image.save(path)
    logger.info("Saved image to %s", path)
    return path
