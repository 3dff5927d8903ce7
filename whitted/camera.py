# camera.py
# Pinhole camera turning pixel coordinates into normalized primary rays.
import numpy as np

from .vectors import cross, normalize


class Camera:
    def __init__(self, position, direction, up, focal_length=1.0, sensor_width=1.0):
        self.position = np.array(position, dtype=float)
        self.direction = normalize(np.array(direction, dtype=float))
        self.up = normalize(np.array(up, dtype=float))
        self.right = cross(self.direction, self.up)
        self.focal_length = float(focal_length)
        self.sensor_width = float(sensor_width)

    def ray(self, x, y, aspect=1.0):
        """Direction through sensor coordinates ``x``, ``y`` in [-0.5, 0.5).

        ``aspect`` is height / width; +y points down the image.
        """
        sensor_height = self.sensor_width * aspect
        return normalize(self.direction * self.focal_length
                         + self.right * (x * self.sensor_width)
                         + self.up * (-y * sensor_height))

    def pixel_ray(self, px, py, width, height):
        return self.ray(px / width - 0.5, py / height - 0.5, height / width)
