from pathlib import Path

import numpy as np
import pytest
from PIL import Image, UnidentifiedImageError

from image_dataset_pipeline.lib import load_and_resize_image

from conftest import write_jpg


def test_resize_to_square_target(tmp_path: Path):
    path = write_jpg(tmp_path / "wide.jpg", size=(400, 300))

    image = load_and_resize_image(path, 128, 128)

    assert image.shape == (128, 128, 3)
    assert image.dtype == np.uint8


def test_resize_stretches_without_cropping(tmp_path: Path):
    path = write_jpg(tmp_path / "wide.jpg", size=(400, 300))

    image = load_and_resize_image(path, 50, 80)

    assert image.shape == (50, 80, 3)


def test_matching_size_is_left_untouched(tmp_path: Path):
    rng = np.random.default_rng(0)
    pixels = rng.integers(0, 256, size=(20, 30, 3), dtype=np.uint8)
    path = tmp_path / "exact.png"
    Image.fromarray(pixels).save(path)

    image = load_and_resize_image(path, 20, 30)

    np.testing.assert_array_equal(image, pixels)


def test_grayscale_is_converted_to_rgb(tmp_path: Path):
    path = tmp_path / "gray.jpg"
    Image.new("L", (16, 16), color=200).save(path)

    image = load_and_resize_image(path, 8, 8)

    assert image.shape == (8, 8, 3)


def test_corrupt_file_raises(tmp_path: Path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"this is not a jpeg")

    with pytest.raises(UnidentifiedImageError):
        load_and_resize_image(path, 16, 16)


def test_target_size_must_be_positive(tmp_path: Path):
    path = write_jpg(tmp_path / "image.jpg")

    with pytest.raises(ValueError):
        load_and_resize_image(path, 0, 16)
