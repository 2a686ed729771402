# core/ray.py
from core.vector import Vector3, Point3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction does not need to be unit length.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.direction * t + self.origin

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
