import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field

from image_dataset_pipeline.dataset_loader.config import SplitConfig

DEFAULT_IMAGE_SIZE = 224
DEFAULT_PROGRESS_INTERVAL = 1000


class BuildConfig(BaseModel):
    """Configuration for building a dataset file from an image directory."""

    image_rows: int = Field(
        DEFAULT_IMAGE_SIZE, description="Height images are resized to", ge=1
    )
    image_cols: int = Field(
        DEFAULT_IMAGE_SIZE, description="Width images are resized to", ge=1
    )
    progress_interval: int = Field(
        DEFAULT_PROGRESS_INTERVAL,
        description="Log progress every this many processed images",
        ge=1,
    )
    show_progress_bar: bool = Field(True, description="Display a tqdm progress bar")


class PipelineConfig(BaseModel):
    """Main configuration for building a dataset and splitting it back."""

    build: BuildConfig = Field(
        default_factory=BuildConfig, description="Dataset construction settings"
    )
    split: SplitConfig = Field(
        default_factory=SplitConfig, description="Train/test split settings"
    )


def read_config_file(config_file: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML or JSON configuration file into a dictionary."""
    config_path = Path(config_file)
    if config_path.suffix.lower() in [".yaml", ".yml"]:
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f)
    elif config_path.suffix.lower() == ".json":
        with open(config_path, "r") as f:
            config_data = json.load(f)
    else:
        raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    # An empty YAML document means "all defaults"
    return config_data or {}


def load_pipeline_config(config_file: Optional[Union[str, Path]]) -> PipelineConfig:
    """Load and validate the pipeline configuration, or return the defaults."""
    if config_file is None:
        return PipelineConfig()
    return PipelineConfig.model_validate(read_config_file(config_file))
