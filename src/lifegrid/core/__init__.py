"""Core Game of Life logic: grid, generation engine and run loop."""

from .config import GridConfig
from .grid import Grid, NEIGHBOR_OFFSETS
from .engine import count_live_neighbors, compute_next_generation, generations_equal
from .game import GameOfLife, SimulationState, Command, parse_command

__all__ = [
    "GridConfig",
    "Grid",
    "NEIGHBOR_OFFSETS",
    "count_live_neighbors",
    "compute_next_generation",
    "generations_equal",
    "GameOfLife",
    "SimulationState",
    "Command",
    "parse_command",
]
