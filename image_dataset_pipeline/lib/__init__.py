"""
Utility library for the image dataset pipeline.

This module provides the models, image handling, file format and cancellation
helpers shared by the pipeline components.
"""

from .logger import setup_logger
from .models import ImageRecord, ImageFormat, Dataset, TrainTestSplit
from .image import load_and_resize_image
from .serialization import DatasetFormatError, save_dataset, load_dataset
from .cancellation import CancellationToken, interrupt_handler

__all__ = [
    "setup_logger",
    "ImageRecord",
    "ImageFormat",
    "Dataset",
    "TrainTestSplit",
    "load_and_resize_image",
    "DatasetFormatError",
    "save_dataset",
    "load_dataset",
    "CancellationToken",
    "interrupt_handler",
]
