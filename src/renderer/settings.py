# renderer/settings.py
from typing import Optional
from core.vector import Point3
from core.color import Color, WHITE, SKY_BLUE
from geometry.sphere import Sphere
from camera.camera import Camera

DEFAULT_IMAGE_WIDTH = 400
DEFAULT_ASPECT_RATIO = 16.0 / 9.0

class ImageSettings:
    """
    Output image dimensions. The height is derived from the width and
    aspect ratio, truncated to a whole number of pixels.
    """
    def __init__(self, image_width: int = DEFAULT_IMAGE_WIDTH,
                 aspect_ratio: float = DEFAULT_ASPECT_RATIO):
        if aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        self.image_width = int(image_width)
        self.aspect_ratio = aspect_ratio
        self.image_height = int(self.image_width / aspect_ratio)
        # u and v are computed as i / (width - 1) and j / (height - 1)
        if self.image_width < 2 or self.image_height < 2:
            raise ValueError(
                f"Image must be at least 2x2 pixels, got {self.image_width}x{self.image_height}")

    def __repr__(self) -> str:
        return f"ImageSettings({self.image_width}x{self.image_height}, aspect={self.aspect_ratio:.4f})"


class Scene:
    """
    The sphere being rendered and the two ends of the sky gradient.
    A scene holds exactly one sphere; there is no object list to search.
    """
    def __init__(self, sphere: Sphere, sky_top: Color = SKY_BLUE, sky_bottom: Color = WHITE):
        self.sphere = sphere
        self.sky_top = sky_top
        self.sky_bottom = sky_bottom


def default_scene() -> Scene:
    return Scene(Sphere(Point3(0, 0, -1), 0.5))


def default_camera(settings: ImageSettings, look_from: Optional[Point3] = None,
                   look_at: Optional[Point3] = None,
                   vfov_degrees: Optional[float] = None) -> Camera:
    if look_from is None:
        look_from = Point3(0, 0, 0)
    return Camera(aspect_ratio=settings.aspect_ratio, origin=look_from,
                  look_at=look_at, vfov_degrees=vfov_degrees)
