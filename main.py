# main.py
import logging
import os

from whitted.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, OUTPUT_DIR
from whitted.render import render_image, save_image
from whitted.scenes import demo_camera, demo_scene


def render(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, seed=0):
    image = render_image(demo_scene(), demo_camera(), width, height, seed=seed, progress=True)
    out_path = save_image(image, os.path.join(OUTPUT_DIR, "whitted.png"))
    print(f"Saved: {out_path}")
    return out_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    render()
