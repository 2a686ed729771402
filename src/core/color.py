# core/color.py
from core.vector import Vector3

class Color(Vector3):
    """
    An RGB color, stored as a Vector3 with x=red, y=green, z=blue.
    Channels are nominally in [0, 1]. Colors combine only with other colors
    and scalars.
    """
    __slots__ = ()

    @classmethod
    def from_vector(cls, v: Vector3) -> "Color":
        return cls(v.x, v.y, v.z)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __add__(self, other: "Color") -> "Color":
        if type(other) is not Color:
            return NotImplemented
        return Color(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Color") -> "Color":
        if type(other) is not Color:
            return NotImplemented
        return Color(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other) -> "Color":
        if isinstance(other, (int, float)):
            return Color(self.x * other, self.y * other, self.z * other)
        # Channel-wise modulation
        if type(other) is Color:
            return Color(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other) -> "Color":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Color(self.x / t, self.y / t, self.z / t)

    def __neg__(self):
        raise TypeError("cannot negate a color")

    def dot(self, other):
        raise TypeError("dot product is not defined for colors")

    def cross(self, other):
        raise TypeError("cross product is not defined for colors")

    def length_squared(self):
        raise TypeError("length is not defined for colors")


WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
