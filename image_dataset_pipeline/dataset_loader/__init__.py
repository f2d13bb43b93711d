"""
Dataset Loading Component for the Image Dataset Pipeline.

This module provides functionality for:
- Reading a dataset file written by the dataset builder
- Shuffling it and splitting it into training and testing sets
"""

from .config import SplitConfig
from .splitter import split_dataset, load_and_split

__all__ = [
    "SplitConfig",
    "split_dataset",
    "load_and_split",
]
