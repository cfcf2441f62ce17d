"""Run configuration for a Game of Life board."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GridConfig:
    """Configuration fixed for the duration of a run."""

    rows: int = 5
    cols: int = 4
    density: float = 0.5
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the configuration values.

        Raises:
            ValueError: If dimensions are not positive or density is outside [0, 1]
        """
        errors = []

        if self.rows <= 0:
            errors.append("Rows must be positive")

        if self.cols <= 0:
            errors.append("Columns must be positive")

        if not 0.0 <= self.density <= 1.0:
            errors.append("Density must be between 0.0 and 1.0")

        if errors:
            raise ValueError("; ".join(errors))

    @property
    def shape(self):
        """Grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)
