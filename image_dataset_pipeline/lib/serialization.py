"""
Dataset file reading and writing.

A dataset file is three ``.npy`` records written back to back, in order:

- images, ``uint8`` array of shape ``(N, rows, cols, 3)``
- class labels, unicode string array of shape ``(N,)``
- numeric labels, ``uint64`` array of shape ``(N,)``

There is no additional header, version or checksum. Pickled objects are never
written or accepted.
"""

from pathlib import Path
from typing import Union

import numpy as np
from pydantic import ValidationError

from image_dataset_pipeline.lib.logger import setup_logger
from image_dataset_pipeline.lib.models import Dataset

logger = setup_logger(__name__)


class DatasetFormatError(ValueError):
    """Raised when a dataset file cannot be interpreted."""


def save_dataset(dataset: Dataset, output_file: Union[str, Path]) -> None:
    """Write a dataset to ``output_file``, creating parent directories."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    labels = np.array(dataset.labels, dtype=np.str_)
    numeric_labels = np.array(dataset.numeric_labels, dtype=np.uint64)

    with open(output_file, "wb") as f:
        np.save(f, dataset.image_array(), allow_pickle=False)
        np.save(f, labels, allow_pickle=False)
        np.save(f, numeric_labels, allow_pickle=False)

    logger.info(f"Saved {len(dataset)} images to {output_file}")


def load_dataset(dataset_file: Union[str, Path]) -> Dataset:
    """
    Read a dataset previously written by :func:`save_dataset`.

    Raises:
        FileNotFoundError: if the file does not exist
        DatasetFormatError: if the content is truncated, corrupt or misaligned
    """
    dataset_file = Path(dataset_file)

    with open(dataset_file, "rb") as f:
        try:
            images = np.load(f, allow_pickle=False)
            labels = np.load(f, allow_pickle=False)
            numeric_labels = np.load(f, allow_pickle=False)
        except (ValueError, EOFError, OSError) as e:
            raise DatasetFormatError(
                f"Could not read dataset file {dataset_file}: {e}"
            ) from e

    for name, array in [
        ("images", images),
        ("labels", labels),
        ("numeric labels", numeric_labels),
    ]:
        if not isinstance(array, np.ndarray):
            raise DatasetFormatError(
                f"Unexpected {name} record in {dataset_file}: {type(array).__name__}"
            )

    if images.dtype != np.uint8 or images.ndim != 4 or images.shape[-1] != 3:
        raise DatasetFormatError(
            f"Expected uint8 images of shape (N, rows, cols, 3) in {dataset_file}, "
            f"got {images.dtype} {images.shape}"
        )
    if labels.ndim != 1 or labels.dtype.kind != "U":
        raise DatasetFormatError(
            f"Expected a 1-d string array of labels in {dataset_file}, "
            f"got {labels.dtype} {labels.shape}"
        )
    if numeric_labels.ndim != 1 or numeric_labels.dtype.kind not in "ui":
        raise DatasetFormatError(
            f"Expected a 1-d integer array of numeric labels in {dataset_file}, "
            f"got {numeric_labels.dtype} {numeric_labels.shape}"
        )
    if numeric_labels.size and numeric_labels.min() < 0:
        raise DatasetFormatError(f"Negative numeric label in {dataset_file}")

    try:
        dataset = Dataset(
            images=list(images),
            labels=labels.tolist(),
            numeric_labels=numeric_labels.tolist(),
        )
    except ValidationError as e:
        raise DatasetFormatError(f"Invalid dataset file {dataset_file}: {e}") from e

    # Keep the stacked array so splitting can index it without restacking
    dataset.set_image_array(images)

    logger.info(f"Loaded {len(dataset)} images from {dataset_file}")
    return dataset
