import pytest
from core.vector import Vector3, Point3
from core.ray import Ray

RAY = Ray(Point3(1, 2, 3), Vector3(0.5, -1, 2))


def test_at_zero_is_origin():
    assert tuple(RAY.at(0)) == tuple(RAY.origin)


def test_at_one_is_origin_plus_direction():
    assert tuple(RAY.at(1)) == (1.5, 1.0, 5.0)


def test_at_negative_parameter():
    assert tuple(RAY.at(-2)) == (0.0, 4.0, -1.0)


def test_at_returns_point():
    assert isinstance(RAY.at(0.25), Point3)


def test_ray_is_immutable():
    with pytest.raises(AttributeError):
        RAY.direction = Vector3(0, 0, 1)
