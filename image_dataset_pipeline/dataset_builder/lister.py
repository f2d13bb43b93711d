from pathlib import Path
from typing import List, Union

from image_dataset_pipeline.lib import setup_logger, ImageRecord, ImageFormat

logger = setup_logger(__name__)


def extract_class_label(dir_name: str) -> str:
    """
    Extract the class description from a directory name.

    Directory names are expected in the form ``<id>_<description>``, e.g.
    ``n01440764_tench`` gives ``tench``. Only the first underscore separates,
    so ``n02_great_white_shark`` gives ``great_white_shark``. Names without an
    underscore are used as they are.
    """
    _, sep, description = dir_name.partition("_")
    if not sep:
        logger.debug(f"Directory name {dir_name} has no id prefix, using it as is")
        return dir_name
    return description


def _is_listed_image(path: Path) -> bool:
    name = path.name
    return (
        len(name) > len(ImageFormat.JPG.value)
        and name.lower().endswith(ImageFormat.JPG.value)
        and path.is_file()
    )


def list_images(image_root: Union[str, Path]) -> List[ImageRecord]:
    """
    List every image below ``image_root`` together with its class.

    Each immediate subdirectory of the root is one class. The class index of a
    subdirectory is its position in the lexicographic sort of all subdirectory
    names, so the mapping stays the same as long as the set of subdirectories
    does. Subdirectories without any image still take up an index.

    Only ``.jpg`` files (any case) directly inside a class directory are
    listed; other formats and nested directories are ignored.

    Raises:
        FileNotFoundError: if ``image_root`` does not exist
        NotADirectoryError: if ``image_root`` is not a directory
    """
    image_root = Path(image_root)
    if not image_root.exists():
        raise FileNotFoundError(f"Image directory {image_root} does not exist")
    if not image_root.is_dir():
        raise NotADirectoryError(f"Image directory {image_root} is not a directory")

    class_dirs = sorted(
        (path for path in image_root.iterdir() if path.is_dir()),
        key=lambda path: path.name,
    )

    records: List[ImageRecord] = []
    for class_index, class_dir in enumerate(class_dirs):
        class_label = extract_class_label(class_dir.name)
        image_files = sorted(
            (path for path in class_dir.iterdir() if _is_listed_image(path)),
            key=lambda path: path.name,
        )
        logger.debug(
            f"Class {class_index} ({class_label}): {len(image_files)} images in {class_dir}"
        )

        records.extend(
            ImageRecord(
                file_path=str(image_path),
                class_label=class_label,
                class_index=class_index,
            )
            for image_path in image_files
        )

    logger.info(f"Found {len(records)} images in {len(class_dirs)} class directories")
    return records
