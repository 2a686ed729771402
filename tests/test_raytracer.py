import io
import numpy as np
import pytest
from camera.camera import pixel_uv
from renderer.settings import ImageSettings, default_camera, default_scene
from renderer.raytracer import Renderer
from renderer.shading import ray_color
from renderer.ppm import write_ppm


def make_renderer(width=400):
    settings = ImageSettings(image_width=width)
    return Renderer(settings, default_camera(settings), default_scene())


def render_ppm(renderer):
    stream = io.StringIO()
    write_ppm(stream, renderer.render())
    return stream.getvalue()


@pytest.fixture(scope="module")
def full_ppm():
    return render_ppm(make_renderer())


def test_default_image_is_400_by_225():
    settings = ImageSettings()
    assert (settings.image_width, settings.image_height) == (400, 225)


@pytest.mark.parametrize("width", [0, 1, 3])
def test_degenerate_image_sizes_are_rejected(width):
    with pytest.raises(ValueError):
        ImageSettings(image_width=width)


def test_full_render_has_one_line_per_pixel(full_ppm):
    lines = full_ppm.splitlines()
    assert lines[:3] == ["P3", "400 225", "255"]
    pixels = lines[3:]
    assert len(pixels) == 400 * 225
    for line in pixels:
        channels = [int(c) for c in line.split()]
        assert len(channels) == 3
        assert all(0 <= c <= 255 for c in channels)


def test_render_is_deterministic(full_ppm):
    assert render_ppm(make_renderer()) == full_ppm


def test_rows_run_from_top_to_bottom():
    renderer = make_renderer(40)
    image = renderer.render()
    height, width = image.shape[:2]
    assert image.shape == (22, 40, 3)
    for row, j in ((0, height - 1), (height - 1, 0)):
        for i in (0, width - 1):
            u, v = pixel_uv(i, j, width, height)
            expected = ray_color(renderer.camera.get_ray(u, v), renderer.scene)
            np.testing.assert_array_equal(image[row, i], tuple(expected))
    # sky gets bluer towards the top, so red drops
    assert image[0, 0, 0] < image[-1, 0, 0]


def test_sphere_is_visible_in_the_middle():
    image = make_renderer(41).render()
    height, width = image.shape[:2]
    centre = image[height // 2, width // 2]
    # normal facing the camera is close to (0, 0, 1)
    assert centre[2] == pytest.approx(1.0, abs=0.02)
    assert centre[0] == pytest.approx(0.5, abs=0.05)


def test_progress_is_reported_on_stderr(capsys):
    make_renderer(16).render(progress=True)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "\rScanlines remaining: 8" in captured.err
    assert "\rScanlines remaining: 0" in captured.err
    assert captured.err.endswith("\nDone.\n")
