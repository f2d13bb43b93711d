from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_TEST_FRACTION = 0.05


class SplitConfig(BaseModel):
    """Configuration for splitting a loaded dataset into training and testing sets."""

    test_fraction: float = Field(
        DEFAULT_TEST_FRACTION,
        description="Fraction of the images used for testing",
        ge=0,
        le=1,
    )
    seed: Optional[int] = Field(
        None,
        description="Random seed for a reproducible split, fresh entropy if unset",
    )
