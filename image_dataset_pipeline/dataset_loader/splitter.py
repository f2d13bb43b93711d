from pathlib import Path
from typing import Optional, Union

import numpy as np

from image_dataset_pipeline.lib import (
    setup_logger,
    Dataset,
    TrainTestSplit,
    load_dataset,
)

from .config import DEFAULT_TEST_FRACTION

logger = setup_logger(__name__)


def split_dataset(
    dataset: Dataset,
    test_fraction: float = DEFAULT_TEST_FRACTION,
    seed: Optional[int] = None,
) -> TrainTestSplit:
    """
    Randomly split a dataset into training and testing sets.

    The first ``floor(N * (1 - test_fraction))`` positions of a uniform random
    permutation go to training and the rest to testing, so every image ends
    up in exactly one of the two sets. Only numeric labels are kept.

    Args:
        dataset: The dataset to split
        test_fraction: Fraction of the images used for testing, in [0, 1]
        seed: Random seed for reproducibility. ``None`` draws fresh entropy,
            so repeated calls give different splits.

    Returns:
        The training and testing images and labels
    """
    if not 0.0 <= test_fraction <= 1.0:
        raise ValueError(f"test_fraction must be between 0 and 1, got {test_fraction}")

    num_images = len(dataset)
    rng = np.random.default_rng(seed)
    indices = rng.permutation(num_images)

    split_point = int(num_images * (1.0 - test_fraction))
    training_indices = indices[:split_point]
    testing_indices = indices[split_point:]

    images = dataset.image_array()
    numeric_labels = np.array(dataset.numeric_labels, dtype=np.int64)

    logger.info(
        f"Split {num_images} images into {len(training_indices)} training "
        f"and {len(testing_indices)} testing"
    )

    return TrainTestSplit(
        training_images=images[training_indices],
        training_labels=numeric_labels[training_indices],
        testing_images=images[testing_indices],
        testing_labels=numeric_labels[testing_indices],
        training_indices=training_indices,
        testing_indices=testing_indices,
    )


def load_and_split(
    dataset_file: Union[str, Path],
    test_fraction: float = DEFAULT_TEST_FRACTION,
    seed: Optional[int] = None,
) -> TrainTestSplit:
    """Load a saved dataset file and split it into training and testing sets."""
    if not 0.0 <= test_fraction <= 1.0:
        raise ValueError(f"test_fraction must be between 0 and 1, got {test_fraction}")

    dataset = load_dataset(dataset_file)
    return split_dataset(dataset, test_fraction=test_fraction, seed=seed)
