# renderer/ppm.py
from typing import TextIO
import numpy as np
from core.color import Color

MAX_VALUE = 255

def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Convert a linear [0, 1] float image to 8-bit channels.
    Channels are clamped to [0, 1] first, then scaled by 255.999 and truncated,
    so 1.0 maps to 255 and anything brighter does not overflow.
    """
    clamped = np.clip(image, 0.0, 1.0)
    return np.floor(255.999 * clamped).astype(np.uint8)

def format_color(color: Color) -> str:
    r, g, b = to_rgb8(np.array((color.r, color.g, color.b), dtype=np.float64))
    return f"{r} {g} {b}"

def write_ppm(stream: TextIO, image: np.ndarray) -> None:
    """
    Write an ASCII (P3) pixel map. The image is (height, width, 3) with row 0
    at the top; one "R G B" line is written per pixel.
    """
    height, width = image.shape[:2]
    rgb = to_rgb8(image)
    stream.write(f"P3\n{width} {height}\n{MAX_VALUE}\n")
    for row in rgb:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row))

def save_ppm(path: str, image: np.ndarray) -> None:
    with open(path, "w", encoding="ascii", newline="\n") as f:
        write_ppm(f, image)
