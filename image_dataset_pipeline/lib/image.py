from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image


def load_and_resize_image(
    image_path: Union[str, Path], rows: int, cols: int
) -> np.ndarray:
    """
    Decode an image and return it as an RGB array of exactly ``(rows, cols, 3)``.

    Images already at the target size are returned as decoded. Anything else
    is stretched to the target with bilinear interpolation, without keeping
    the aspect ratio or cropping.

    Raises:
        ValueError: if ``rows`` or ``cols`` is not positive
        PIL.UnidentifiedImageError, OSError: if the file cannot be decoded
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Target size must be positive, got {rows}x{cols}")

    with Image.open(image_path) as image:
        image = image.convert("RGB")

        # PIL sizes are (width, height)
        if image.size != (cols, rows):
            image = image.resize((cols, rows), resample=Image.Resampling.BILINEAR)

        return np.array(image, dtype=np.uint8)
