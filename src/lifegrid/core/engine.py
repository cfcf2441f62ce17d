"""Generation transitions for Conway's Game of Life on a bounded grid.

Implements the classic rules:
- Live cell with fewer than 2 neighbors dies (underpopulation)
- Live cell with 2-3 neighbors survives
- Live cell with more than 3 neighbors dies (overpopulation)
- Dead cell with exactly 3 neighbors becomes alive (reproduction)

All functions are pure: they read the grids they are given and never
modify them.
"""

import numpy as np

from .grid import ALIVE, NEIGHBOR_OFFSETS, Grid


def count_live_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count living neighbors of a single cell.

    Neighbors that would fall outside the board are absent, so corner cells
    have three candidates and edge cells five.

    Args:
        grid: Grid to inspect
        row: Row coordinate of a cell on the grid
        col: Column coordinate of a cell on the grid

    Returns:
        Number of living neighbors (0-8)

    Raises:
        IndexError: If (row, col) is not on the grid
    """
    grid.check_bounds(row, col)

    count = 0
    for drow, dcol in NEIGHBOR_OFFSETS:
        nrow, ncol = row + drow, col + dcol
        if grid.in_bounds(nrow, ncol) and grid.get_cell(nrow, ncol):
            count += 1
    return count


def compute_next_generation(grid: Grid) -> Grid:
    """Compute the generation that follows ``grid``.

    Args:
        grid: Current generation (left untouched)

    Returns:
        A new grid of the same dimensions holding the next generation
    """
    neighbor_counts = grid.count_all_neighbors()
    cells = grid.cells

    # Survival: live cell with 2 or 3 neighbors
    survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))

    # Birth: dead cell with exactly 3 neighbors
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    next_grid = Grid(grid.rows, grid.cols)
    next_grid._cells[survive_mask | birth_mask] = ALIVE
    return next_grid


def generations_equal(first: Grid, second: Grid) -> bool:
    """Check whether two generations are cell-for-cell identical.

    Raises:
        ValueError: If the grids have different dimensions
    """
    if first.shape != second.shape:
        raise ValueError(f"Grid dimensions don't match: {first.shape} vs {second.shape}")

    return bool(np.array_equal(first.cells, second.cells))
