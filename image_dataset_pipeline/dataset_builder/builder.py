from pathlib import Path
from typing import Optional, Union

from tqdm import tqdm

from image_dataset_pipeline.lib import (
    setup_logger,
    CancellationToken,
    Dataset,
    load_and_resize_image,
    save_dataset,
)

from .config import BuildConfig, DEFAULT_IMAGE_SIZE
from .lister import list_images

logger = setup_logger(__name__)


class DatasetBuilder:
    """Builds a dataset file from a directory of class subdirectories."""

    def __init__(self, config: Optional[BuildConfig] = None):
        self.config = config or BuildConfig()

    def build(
        self,
        image_root: Union[str, Path],
        cancel_token: Optional[CancellationToken] = None,
    ) -> Dataset:
        """
        Load and resize every listed image into a dataset.

        Images that fail to load are logged and skipped. When ``cancel_token``
        is cancelled, processing stops before the next image and the images
        loaded so far are returned.

        Args:
            image_root: Path to the root directory containing class subdirectories
            cancel_token: Optional token checked before each image

        Returns:
            The loaded dataset
        """
        logger.info(f"Scanning image directory {image_root}")
        records = list_images(image_root)
        if not records:
            raise ValueError(f"No images found in directory: {image_root}")

        rows, cols = self.config.image_rows, self.config.image_cols
        interval = self.config.progress_interval
        total = len(records)

        logger.info(f"Loading and resizing {total} images to {rows}x{cols}")
        dataset = Dataset()

        for i, record in enumerate(
            tqdm(
                records,
                desc="Processing images",
                disable=not self.config.show_progress_bar,
            )
        ):
            if cancel_token is not None and cancel_token.cancelled:
                logger.warning(
                    f"Cancelled after {i} of {total} images, keeping {len(dataset)} loaded"
                )
                break

            try:
                image = load_and_resize_image(record.file_path, rows, cols)
                dataset.append(image, record)
            except Exception as e:
                logger.error(f"Error processing image {record.file_path}: {e}")

            if (i + 1) % interval == 0 or i == total - 1:
                logger.info(f"Progress: {i + 1}/{total} images processed")

        logger.info(f"Dataset built with {len(dataset)} images")
        return dataset

    def save(self, dataset: Dataset, output_file: Union[str, Path]) -> None:
        """Save a dataset to a single file."""
        logger.info(f"Saving dataset to {output_file}")
        save_dataset(dataset, output_file)


def create_dataset(
    image_root: Union[str, Path],
    output_file: Union[str, Path],
    rows: int = DEFAULT_IMAGE_SIZE,
    cols: int = DEFAULT_IMAGE_SIZE,
    cancel_token: Optional[CancellationToken] = None,
) -> Dataset:
    """Build a dataset from ``image_root`` and save it to ``output_file``."""
    builder = DatasetBuilder(BuildConfig(image_rows=rows, image_cols=cols))
    dataset = builder.build(image_root, cancel_token=cancel_token)
    builder.save(dataset, output_file)
    return dataset
