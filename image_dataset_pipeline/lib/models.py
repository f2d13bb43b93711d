from enum import Enum
from typing import List, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class ImageFormat(str, Enum):
    """File suffixes picked up when listing class directories."""

    JPG = ".jpg"


class ImageRecord(BaseModel):
    """Represents a single discovered image with its class."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    class_label: str
    class_index: int = Field(..., ge=0)


class Dataset(BaseModel):
    """
    Decoded images with their textual and numeric labels.

    The three lists are index-aligned: ``images[i]`` was loaded from a file
    whose class is ``labels[i]`` with index ``numeric_labels[i]``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    images: List[np.ndarray] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)
    numeric_labels: List[int] = Field(default_factory=list)

    # Stacked form of `images` when it is already available, e.g. after loading
    _stacked_images: Optional[np.ndarray] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def validate_alignment(self) -> "Dataset":
        """Validate that images and both label lists have the same length."""
        if not (len(self.images) == len(self.labels) == len(self.numeric_labels)):
            raise ValueError(
                f"Misaligned dataset: {len(self.images)} images, "
                f"{len(self.labels)} labels, {len(self.numeric_labels)} numeric labels"
            )
        return self

    def __len__(self) -> int:
        return len(self.images)

    def append(self, image: np.ndarray, record: ImageRecord) -> None:
        """Add one loaded image together with the labels of its record."""
        self.images.append(image)
        self.labels.append(record.class_label)
        self.numeric_labels.append(record.class_index)
        self._stacked_images = None

    def image_array(self) -> np.ndarray:
        """Stack all images into a single ``(N, rows, cols, 3)`` array."""
        if self._stacked_images is not None:
            return self._stacked_images
        if not self.images:
            return np.empty((0, 0, 0, 3), dtype=np.uint8)
        return np.stack(self.images).astype(np.uint8, copy=False)

    def set_image_array(self, images: np.ndarray) -> None:
        """Reuse an already stacked ``(N, rows, cols, 3)`` array for :meth:`image_array`."""
        if len(images) != len(self.images):
            raise ValueError(
                f"Expected {len(self.images)} stacked images, got {len(images)}"
            )
        self._stacked_images = images


class TrainTestSplit(BaseModel):
    """Represents a dataset split into training and testing sets."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    training_images: np.ndarray
    training_labels: np.ndarray
    testing_images: np.ndarray
    testing_labels: np.ndarray

    # Positions in the original dataset each output row was taken from
    training_indices: np.ndarray
    testing_indices: np.ndarray

    @property
    def training_size(self) -> int:
        return len(self.training_labels)

    @property
    def testing_size(self) -> int:
        return len(self.testing_labels)
