# renderer/shading.py
from core.ray import Ray
from core.vector import Vector3
from core.color import Color

ONE = Vector3(1.0, 1.0, 1.0)

def ray_color(ray: Ray, scene) -> Color:
    """
    Returns the color seen along the ray. A ray that hits the sphere in front
    of its origin is colored by the surface normal at the hit point, remapped
    from [-1, 1] to [0, 1]. Any other ray gets the vertical sky gradient.
    """
    sphere = scene.sphere
    t = sphere.hit(ray)
    if t is not None and t > 0.0:
        n = sphere.outward_normal(ray.at(t))
        return Color.from_vector(0.5 * (n + ONE))

    # Background gradient, 0 looking straight down and 1 straight up
    unit_direction = ray.direction.normalize()
    s = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - s) * scene.sky_bottom + s * scene.sky_top
