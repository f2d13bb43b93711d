from pathlib import Path
from typing import Callable, Dict, Tuple

import numpy as np
import pytest
from PIL import Image


def write_jpg(path: Path, size: Tuple[int, int] = (32, 24), value: int = 128) -> Path:
    """Write a solid-colour JPEG of ``size`` (width, height) to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pixels = np.full((size[1], size[0], 3), value, dtype=np.uint8)
    Image.fromarray(pixels).save(path, format="JPEG")
    return path


@pytest.fixture
def make_image_tree(tmp_path: Path) -> Callable[[Dict[str, int]], Path]:
    """Create a class-per-directory image tree, e.g. ``{"1_cat": 10, "2_dog": 10}``."""

    def _make(classes: Dict[str, int], size: Tuple[int, int] = (32, 24)) -> Path:
        root = tmp_path / "images"
        root.mkdir(exist_ok=True)
        for class_dir, count in classes.items():
            (root / class_dir).mkdir(exist_ok=True)
            for i in range(count):
                write_jpg(
                    root / class_dir / f"img_{i:03d}.jpg",
                    size=size,
                    value=(i * 10) % 256,
                )
        return root

    return _make
