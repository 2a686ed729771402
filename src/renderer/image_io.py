# renderer/image_io.py
import os
import numpy as np
from PIL import Image
from .ppm import to_rgb8

def save_image(path: str, image: np.ndarray) -> None:
    """
    Save a rendered (height, width, 3) float image with Pillow.

    The format is inferred from the file suffix (e.g. .png, .bmp).

    Raises:
        ValueError: If Pillow does not recognise the suffix
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(to_rgb8(image)).save(path)
