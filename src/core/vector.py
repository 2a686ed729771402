# core/vector.py
import math
from typing import Iterator

class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    and normalization. Every operation returns a new Vector3.

    Division follows Python float semantics: dividing by zero (and therefore
    normalizing a zero-length vector) raises ZeroDivisionError.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __add__(self, other: "Vector3") -> "Vector3":
        if type(other) is not Vector3:
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if type(other) is not Vector3:
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> "Vector3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        if type(other) is not Vector3:
            raise TypeError(f"cannot take the dot product with {type(other).__name__}")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        if type(other) is not Vector3:
            raise TypeError(f"cannot take the cross product with {type(other).__name__}")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction.
        The vector must have non-zero length.
        """
        return self / self.length()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"


class Point3(Vector3):
    """
    A position in space. Points can be offset by vectors and subtracted from
    each other, but not added, scaled or used in products.
    """
    __slots__ = ()

    @classmethod
    def from_vector(cls, v: Vector3) -> "Point3":
        return cls(v.x, v.y, v.z)

    def __add__(self, other: Vector3) -> "Point3":
        if type(other) is not Vector3:
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other: Vector3) -> "Point3":
        return self.__add__(other)

    def __sub__(self, other):
        # point - point is the displacement between them
        if type(other) is Point3:
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if type(other) is Vector3:
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, t):
        return NotImplemented

    def __rmul__(self, t):
        return NotImplemented

    def __truediv__(self, t):
        return NotImplemented

    def __neg__(self):
        raise TypeError("cannot negate a point")

    def dot(self, other):
        raise TypeError("dot product is not defined for points")

    def cross(self, other):
        raise TypeError("cross product is not defined for points")

    def length_squared(self):
        raise TypeError("length is not defined for points")

    def distance(self, other: "Point3") -> float:
        return (self - other).length()


def as_point(v: Vector3) -> Point3:
    """
    Accepts a Point3, or a plain Vector3 used as a position, and returns a
    Point3. Colors are rejected.
    """
    if type(v) is Point3:
        return v
    if type(v) is Vector3:
        return Point3.from_vector(v)
    raise TypeError(f"expected a position, got {type(v).__name__}")
