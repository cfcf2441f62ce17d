"""Bounded Conway's Game of Life with a text console frontend."""

__version__ = "0.1.0"

from .core.config import GridConfig
from .core.grid import Grid
from .core.game import GameOfLife, SimulationState, Command

__all__ = ["GridConfig", "Grid", "GameOfLife", "SimulationState", "Command"]
