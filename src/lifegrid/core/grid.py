"""Bounded grid data structure for the Game of Life."""

from typing import Sequence, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .config import GridConfig

# (drow, dcol) for the eight compass directions around a cell
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ALIVE = 1
DEAD = 0

_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


class Grid:
    """A fixed-size 2D board of live/dead cells.

    Cells are addressed as (row, col). The board has hard edges: coordinates
    outside it are invalid for the accessors and contribute nothing to
    neighbor counts.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize an all-dead grid.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self._cells = np.zeros((rows, cols), dtype=np.int8)

        # Boards are tiny; keep the convolution single-threaded
        torch.set_num_threads(1)

    @classmethod
    def from_config(cls, config: GridConfig) -> "Grid":
        """Create an all-dead grid with the configured dimensions."""
        return cls(config.rows, config.cols)

    @classmethod
    def from_rows(cls, data: Union[Sequence[Sequence[Union[int, bool]]], np.ndarray]) -> "Grid":
        """Create a grid from rows of cell states.

        Args:
            data: Nested list or 2D array of cell states, truthy for alive

        Returns:
            New grid sized to match the data

        Raises:
            ValueError: If the rows are ragged or empty
        """
        if len(data) == 0 or len(data[0]) == 0:
            raise ValueError("Grid data must have at least one row and one column")

        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("All rows must have the same length")

        arr = np.asarray(data, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"Grid data must be two-dimensional, got {arr.ndim} dimensions")

        grid = cls(len(data), width)
        grid._cells[:] = arr.astype(np.int8)
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get a read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int) -> None:
        """Raise IndexError unless (row, col) lies on the board."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self.check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self.check_bounds(row, col)
        self._cells[row, col] = ALIVE if alive else DEAD

    def randomize(self, density: float = 0.5, seed=None) -> None:
        """Randomly populate the grid.

        Args:
            density: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for a reproducible board
        """
        rng = np.random.default_rng(seed)
        mask = rng.random((self.rows, self.cols)) < density
        self._cells[mask] = ALIVE
        self._cells[~mask] = DEAD

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def count_all_neighbors(self) -> np.ndarray:
        """Count live neighbors for every cell using a PyTorch convolution.

        Zero padding stands in for the missing cells past the edges, so border
        cells only see the neighbors that exist on the board.

        Returns:
            Array of shape (rows, cols) with neighbor counts
        """
        board = torch.from_numpy((self._cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(board, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
