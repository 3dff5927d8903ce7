# scenes.py
from .camera import Camera
from .materials import Checkerboard, Flat, Gradient, Lit, Reflect
from .scene import Scene, WorldObject
from .shapes import Plane, Sphere


def demo_camera():
    return Camera((-5.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def demo_scene():
    # Scene definition: two mirrored spheres over a checkerboard, under a sky
    return Scene([
        WorldObject((2.0, 0.6, -0.6), Sphere(0.2), Flat((212, 165, 57))),
        WorldObject((4.0, 0.0, 0.0), Sphere(1.0),
                    Reflect(Flat((232, 104, 80)), smoothness=1.0)),
        WorldObject((5.0, 0.0, 3.0), Sphere(1.0),
                    Lit(Flat((232, 104, 80)), shininess=50.0, specular_amount=0.6,
                        reflectivity=0.8, roughness=2.0)),
        WorldObject((3.0, -2.0, 0.0), Plane(50.0, 15.0),
                    Lit(Checkerboard((200, 0, 0), (40, 40, 40), repeat=1.0),
                        specular_amount=0.2, reflectivity=0.3)),
        WorldObject((1.0, 4.0, -3.0), Sphere(0.5),
                    Lit(Flat((0, 0, 0)), emit=Flat((255, 250, 235))), is_light=True),
        WorldObject((0.0, 0.0, 0.0), Sphere(100.0),
                    Gradient((255, 255, 255), (135, 206, 235), from_y=-10.0, to_y=3.0)),
    ])
