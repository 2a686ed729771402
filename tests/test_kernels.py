import numpy as np
import pytest
from core.vector import Vector3, Point3
from core.ray import Ray
from geometry.sphere import hit_sphere
from renderer.kernels import NO_HIT, hit_sphere_kernel
from renderer.raytracer import Renderer
from renderer.settings import ImageSettings, default_camera, default_scene

CENTER = np.array([0.0, 0.0, -1.0])


@pytest.mark.parametrize("direction", [
    (0.0, 0.0, -1.0),
    (0.0, 1.0, 0.0),
    (0.2, -0.1, -1.0),
    (0.0, 0.0, 1.0),
])
def test_kernel_intersection_matches_python(direction):
    expected = hit_sphere(Point3(0, 0, -1), 0.5, Ray(Point3(0, 0, 0), Vector3(*direction)))
    t = hit_sphere_kernel(0.0, 0.0, 0.0, *direction, CENTER, 0.5)
    if expected is None:
        assert t == NO_HIT
    else:
        assert t == pytest.approx(expected)


def test_parallel_render_matches_scalar_render():
    settings = ImageSettings(image_width=80)
    renderer = Renderer(settings, default_camera(settings), default_scene())
    scalar = renderer.render()
    parallel = renderer.render_parallel()
    assert parallel.shape == scalar.shape == (45, 80, 3)
    np.testing.assert_allclose(parallel, scalar, rtol=0, atol=1e-12)


def test_parallel_render_matches_for_an_aimed_camera():
    settings = ImageSettings(image_width=64)
    camera = default_camera(settings, look_from=Point3(1, 1, 1),
                            look_at=Point3(0, 0, -1), vfov_degrees=50)
    renderer = Renderer(settings, camera, default_scene())
    np.testing.assert_allclose(renderer.render_parallel(), renderer.render(), rtol=0, atol=1e-12)
