from pathlib import Path

import numpy as np
import pytest

from image_dataset_pipeline.dataset_loader import load_and_split, split_dataset
from image_dataset_pipeline.lib import Dataset, ImageRecord, save_dataset


def _dataset(num_images: int) -> Dataset:
    """A dataset whose numeric label and first pixel both equal the record's position."""
    dataset = Dataset()
    for i in range(num_images):
        image = np.full((2, 2, 3), i % 256, dtype=np.uint8)
        dataset.append(
            image,
            ImageRecord(file_path=f"{i}.jpg", class_label=str(i), class_index=i),
        )
    return dataset


def test_default_fraction_on_thousand_images():
    split = split_dataset(_dataset(1000))

    assert split.training_size == 950
    assert split.testing_size == 50
    assert len(split.training_images) == 950
    assert len(split.testing_images) == 50


def test_every_record_appears_exactly_once():
    split = split_dataset(_dataset(1000), test_fraction=0.05)

    combined = np.concatenate([split.training_labels, split.testing_labels])
    assert sorted(combined.tolist()) == list(range(1000))
    indices = np.concatenate([split.training_indices, split.testing_indices])
    assert sorted(indices.tolist()) == list(range(1000))


def test_images_stay_aligned_with_labels():
    split = split_dataset(_dataset(200), test_fraction=0.3)

    for images, labels in [
        (split.training_images, split.training_labels),
        (split.testing_images, split.testing_labels),
    ]:
        np.testing.assert_array_equal(images[:, 0, 0, 0], labels % 256)


@pytest.mark.parametrize(
    "num_images, test_fraction",
    [(0, 0.05), (1, 0.05), (7, 0.5), (10, 0.33), (19, 0.1), (100, 0.999)],
)
def test_split_sizes(num_images: int, test_fraction: float):
    split = split_dataset(_dataset(num_images), test_fraction=test_fraction)

    expected_training = int(np.floor(num_images * (1 - test_fraction)))
    assert split.training_size == expected_training
    assert split.testing_size == num_images - expected_training


def test_zero_and_full_fraction():
    dataset = _dataset(10)

    assert split_dataset(dataset, test_fraction=0.0).testing_size == 0
    assert split_dataset(dataset, test_fraction=1.0).training_size == 0


@pytest.mark.parametrize("test_fraction", [-0.1, 1.5])
def test_out_of_range_fraction_is_rejected(test_fraction: float):
    with pytest.raises(ValueError):
        split_dataset(_dataset(10), test_fraction=test_fraction)


def test_seed_makes_split_reproducible():
    dataset = _dataset(100)

    first = split_dataset(dataset, seed=7)
    second = split_dataset(dataset, seed=7)

    np.testing.assert_array_equal(first.training_indices, second.training_indices)
    np.testing.assert_array_equal(first.testing_labels, second.testing_labels)


def test_load_and_split_reads_the_file(tmp_path: Path):
    path = tmp_path / "dataset.dat"
    save_dataset(_dataset(40), path)

    split = load_and_split(path, test_fraction=0.25, seed=3)

    assert split.training_size == 30
    assert split.testing_size == 10
    assert split.training_labels.dtype == np.int64


def test_load_and_split_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_and_split(tmp_path / "missing.dat")
