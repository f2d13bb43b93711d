import sys
from typing import Optional

import typer
from pydantic import ValidationError

from image_dataset_pipeline.dataset_loader import SplitConfig, load_and_split
from image_dataset_pipeline.lib import setup_logger, CancellationToken, interrupt_handler

from .builder import DatasetBuilder
from .config import BuildConfig, load_pipeline_config

app = typer.Typer(help="Dataset Construction Component")

logger = setup_logger(__name__)

NUM_LABELS_TO_SHOW = 3


@app.command()
def build(
    image_dir: str = typer.Argument(
        ..., help="Path to the root image directory, one subdirectory per class"
    ),
    output_file: str = typer.Argument(..., help="Path to save the dataset file"),
    image_size: int = typer.Argument(
        ..., help="Width and height every image is resized to"
    ),
    test_fraction: Optional[float] = typer.Option(
        None, help="Fraction of images used for testing when loading back [default: 0.05]"
    ),
    seed: Optional[int] = typer.Option(
        None, help="Random seed for a reproducible train/test split"
    ),
    config_file: Optional[str] = typer.Option(
        None, help="Path to a configuration file (YAML/JSON)"
    ),
    progress_bar: Optional[bool] = typer.Option(
        None, "--progress-bar/--no-progress-bar", help="Display a progress bar"
    ),
):
    """
    Build a dataset file from a directory of labeled images, then load it back with a train/test split.
    """
    try:
        # Command line values take precedence over the configuration file
        try:
            config = load_pipeline_config(config_file)
            build_overrides = {"image_rows": image_size, "image_cols": image_size}
            if progress_bar is not None:
                build_overrides["show_progress_bar"] = progress_bar
            build_config = BuildConfig.model_validate(
                {**config.build.model_dump(), **build_overrides}
            )

            split_overrides = {}
            if test_fraction is not None:
                split_overrides["test_fraction"] = test_fraction
            if seed is not None:
                split_overrides["seed"] = seed
            split_config = SplitConfig.model_validate(
                {**config.split.model_dump(), **split_overrides}
            )
        except ValidationError as e:
            typer.echo(f"Configuration validation error: {e}", err=True)
            raise typer.Exit(code=1)

        typer.echo("Creating dataset with parameters:")
        typer.echo(f"  Image directory: {image_dir}")
        typer.echo(f"  Output file: {output_file}")
        typer.echo(f"  Image size: {build_config.image_rows}x{build_config.image_cols}")

        builder = DatasetBuilder(build_config)
        with interrupt_handler(CancellationToken()) as token:
            dataset = builder.build(image_dir, cancel_token=token)
        builder.save(dataset, output_file)

        if token.cancelled:
            typer.echo(f"Interrupted, saved {len(dataset)} images to {output_file}")
        else:
            typer.echo(f"Dataset successfully built and saved to {output_file}")

        split = load_and_split(
            output_file,
            test_fraction=split_config.test_fraction,
            seed=split_config.seed,
        )

        for name, labels in [
            ("Training", split.training_labels),
            ("Testing", split.testing_labels),
        ]:
            typer.echo(f"\n{name} set: {len(labels)} images")
            for i, label in enumerate(labels[:NUM_LABELS_TO_SHOW]):
                typer.echo(f"  - Image {i + 1}: label {label}")

    except typer.Exit:
        raise
    except Exception as e:
        logger.critical(e, exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    """Console entry point, reporting usage errors with exit status 1."""
    try:
        app()
    except SystemExit as e:
        # Usage errors exit with status 2 in standalone mode
        sys.exit(1 if e.code == 2 else e.code)


if __name__ == "__main__":
    main()
