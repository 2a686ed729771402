# renderer/kernels.py

from numba import njit, prange
import math

NO_HIT = -1.0

@njit
def dot(ax, ay, az, bx, by, bz):
    return ax * bx + ay * by + az * bz

@njit
def hit_sphere_kernel(ox, oy, oz, dx, dy, dz, center, radius):
    """Compiled twin of geometry.sphere.hit_sphere. Returns NO_HIT on a miss."""
    ocx = ox - center[0]
    ocy = oy - center[1]
    ocz = oz - center[2]

    a = dot(dx, dy, dz, dx, dy, dz)
    half_b = dot(ocx, ocy, ocz, dx, dy, dz)
    c = dot(ocx, ocy, ocz, ocx, ocy, ocz) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return NO_HIT

    root = (-half_b - math.sqrt(discriminant)) / a
    if root < 0:
        return NO_HIT
    return root

@njit
def ray_color_kernel(ox, oy, oz, dx, dy, dz, center, radius, sky_bottom, sky_top, out):
    """
    Compiled twin of renderer.shading.ray_color. Writes the color into out[0:3].
    """
    t = hit_sphere_kernel(ox, oy, oz, dx, dy, dz, center, radius)
    if t > 0.0:
        # Hit point minus center, then normalized
        nx = (dx * t + ox) - center[0]
        ny = (dy * t + oy) - center[1]
        nz = (dz * t + oz) - center[2]
        length = math.sqrt(dot(nx, ny, nz, nx, ny, nz))
        out[0] = 0.5 * (nx / length + 1.0)
        out[1] = 0.5 * (ny / length + 1.0)
        out[2] = 0.5 * (nz / length + 1.0)
        return

    length = math.sqrt(dot(dx, dy, dz, dx, dy, dz))
    s = 0.5 * (dy / length + 1.0)
    for k in range(3):
        out[k] = (1.0 - s) * sky_bottom[k] + s * sky_top[k]

@njit(parallel=True)
def render_kernel(image, origin, lower_left, horizontal, vertical,
                  center, radius, sky_bottom, sky_top):
    """
    Fills image (height x width x 3) with one primary ray per pixel.
    Row 0 of the image is the top scanline. Rows are independent, so they
    are distributed across threads.
    """
    height = image.shape[0]
    width = image.shape[1]
    for row in prange(height):
        j = height - 1 - row
        v = j / (height - 1)
        for i in range(width):
            u = i / (width - 1)
            dx = lower_left[0] + horizontal[0] * u + vertical[0] * v - origin[0]
            dy = lower_left[1] + horizontal[1] * u + vertical[1] * v - origin[1]
            dz = lower_left[2] + horizontal[2] * u + vertical[2] * v - origin[2]
            ray_color_kernel(origin[0], origin[1], origin[2], dx, dy, dz,
                             center, radius, sky_bottom, sky_top, image[row, i])
    return image
