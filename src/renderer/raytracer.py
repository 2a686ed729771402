# renderer/raytracer.py
import sys
import numpy as np
from camera.camera import Camera, pixel_uv
from .settings import ImageSettings, Scene
from .shading import ray_color
from .kernels import render_kernel

class Renderer:
    """
    Drives the per-pixel evaluation: one primary ray per pixel, scanlines
    from the top of the viewport (j = height - 1) down to the bottom (j = 0).

    Images are float64 arrays of shape (height, width, 3) whose row 0 is the
    top of the picture.
    """
    def __init__(self, settings: ImageSettings, camera: Camera, scene: Scene):
        self.settings = settings
        self.camera = camera
        self.scene = scene
        self.width = settings.image_width
        self.height = settings.image_height

    def render(self, progress: bool = False) -> np.ndarray:
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for row, j in enumerate(range(self.height - 1, -1, -1)):
            if progress:
                print(f"\rScanlines remaining: {j}", end="", file=sys.stderr, flush=True)
            for i in range(self.width):
                u, v = pixel_uv(i, j, self.width, self.height)
                color = ray_color(self.camera.get_ray(u, v), self.scene)
                image[row, i] = (color.r, color.g, color.b)
        if progress:
            print("\nDone.", file=sys.stderr)
        return image

    def render_parallel(self, progress: bool = False) -> np.ndarray:
        """
        Same image as render(), computed by the compiled kernel with rows
        spread over threads. Progress is only reported as start and finish.
        """
        if progress:
            print(f"Rendering {self.width}x{self.height} with compiled kernel...",
                  file=sys.stderr, flush=True)
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        sphere = self.scene.sphere
        render_kernel(
            image,
            _as_array(self.camera.origin),
            _as_array(self.camera.lower_left_corner),
            _as_array(self.camera.horizontal),
            _as_array(self.camera.vertical),
            _as_array(sphere.center),
            sphere.radius,
            _as_array(self.scene.sky_bottom),
            _as_array(self.scene.sky_top),
        )
        if progress:
            print("Done.", file=sys.stderr)
        return image


def _as_array(v) -> np.ndarray:
    return np.array(tuple(v), dtype=np.float64)
