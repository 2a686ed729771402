# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3, Point3, as_point
from core.ray import Ray

def hit_sphere(center: Point3, radius: float, ray: Ray) -> Optional[float]:
    """
    Returns the ray parameter of the near intersection with the sphere, or
    None when the ray misses it.

    Only the near root is considered. A near root behind the origin counts as
    a miss, so a ray leaving the surface outward never reports a spurious
    negative t, while a ray on the surface pointing inward reports t = 0.

    The ray direction must be non-zero; a zero direction raises
    ZeroDivisionError.
    """
    oc = ray.origin - as_point(center)
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    root = (-half_b - math.sqrt(discriminant)) / a
    if root < 0:
        return None
    return root


class Sphere:
    """
    Represents a sphere defined by its center and radius.
    """
    __slots__ = ("center", "radius")

    def __init__(self, center: Point3, radius: float):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        object.__setattr__(self, "center", as_point(center))
        object.__setattr__(self, "radius", float(radius))

    def __setattr__(self, name, value):
        raise AttributeError("Sphere is immutable")

    def hit(self, ray: Ray) -> Optional[float]:
        return hit_sphere(self.center, self.radius, ray)

    def outward_normal(self, p: Point3) -> Vector3:
        return (p - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
