# camera/camera.py
import math
from typing import Optional, Tuple
from core.vector import Vector3, Point3, as_point
from core.ray import Ray

class Camera:
    """
    A pinhole camera with a flat viewport placed focal_length in front of
    the eye. By default it sits at the origin looking down -z.

    look_at and vup aim the camera. When vfov_degrees is given it sets the
    vertical field of view and replaces viewport_height.
    """
    def __init__(self, aspect_ratio: float = 16.0 / 9.0, viewport_height: float = 2.0,
                 focal_length: float = 1.0, origin: Point3 = Point3(0, 0, 0),
                 look_at: Optional[Point3] = None, vup: Vector3 = Vector3(0, 1, 0),
                 vfov_degrees: Optional[float] = None):
        self.origin = as_point(origin)
        self.look_at = self.origin - Vector3(0, 0, 1) if look_at is None else as_point(look_at)
        self.vup = vup
        self.aspect_ratio = aspect_ratio
        self.focal_length = focal_length

        if vfov_degrees is not None:
            theta = math.radians(vfov_degrees)
            viewport_height = 2.0 * math.tan(theta / 2) * focal_length
        self.vfov_degrees = vfov_degrees
        self.viewport_height = viewport_height
        self.viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points back towards the eye, u right, v up
        back = self.origin - self.look_at
        if back.length_squared() == 0:
            raise ValueError("Camera look_at must differ from its origin")
        self.w = back.normalize()
        right = vup.cross(self.w)
        if right.length_squared() == 0:
            raise ValueError("Camera vup must not be parallel to the view direction")
        self.u = right.normalize()
        self.v = self.w.cross(self.u)

        self.horizontal = self.u * self.viewport_width
        self.vertical = self.v * self.viewport_height
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  self.w * self.focal_length)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Generates a ray passing through the viewport coordinates (u, v),
        both in [0, 1] with (0, 0) at the lower left corner.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)


def pixel_uv(i: int, j: int, width: int, height: int) -> Tuple[float, float]:
    """Maps pixel column i and row j (j = 0 at the bottom) to viewport (u, v)."""
    return i / (width - 1), j / (height - 1)
