"""
Dataset Construction Component for the Image Dataset Pipeline.

This module provides functionality for:
- Listing images in class subdirectories and numbering the classes
- Loading and resizing every image to a fixed resolution
- Saving the images and their labels to a single dataset file
"""

from .builder import DatasetBuilder, create_dataset
from .config import BuildConfig, PipelineConfig
from .lister import list_images, extract_class_label

__all__ = [
    "DatasetBuilder",
    "create_dataset",
    "BuildConfig",
    "PipelineConfig",
    "list_images",
    "extract_class_label",
]
