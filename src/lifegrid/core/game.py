"""Run loop for Conway's Game of Life."""

from collections import deque
from enum import Enum
from typing import Callable, Deque, Dict, Iterable, Optional

from .grid import Grid
from .engine import compute_next_generation, generations_equal


class SimulationState(Enum):
    """Lifecycle of a simulation run."""

    RUNNING = "running"
    CONVERGED = "converged"
    USER_STOPPED = "user_stopped"
    MAX_GENERATIONS = "max_generations"

    @property
    def is_terminal(self) -> bool:
        return self is not SimulationState.RUNNING


class Command(Enum):
    """Commands fed into the run loop between generations."""

    CONTINUE = "continue"
    QUIT = "quit"


def parse_command(text: Optional[str]) -> Command:
    """Translate a line of user input into a command.

    ``q`` or ``Q`` as the first character quits. ``None`` stands for end of
    input and also quits. Anything else, an empty line included, continues.
    """
    if text is None:
        return Command.QUIT
    if text[:1] in ("q", "Q"):
        return Command.QUIT
    return Command.CONTINUE


GenerationCallback = Callable[[int, Grid], None]

POPULATION_HISTORY_SIZE = 100


class GameOfLife:
    """Drives a grid through successive generations.

    The seeded grid is generation 1. Each step replaces the current grid with
    a freshly computed one, so the previous generation is never written to
    while the next is being derived.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a starting grid.

        Args:
            grid: Generation 1 of the simulation
        """
        self._grid = grid
        self._generation = 1
        self._state = SimulationState.RUNNING
        self._population_history: Deque[int] = deque([grid.population], maxlen=POPULATION_HISTORY_SIZE)

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number (1-based)."""
        return self._generation

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def population_history(self) -> list:
        """Population of the most recent generations."""
        return list(self._population_history)

    def step(self) -> bool:
        """Advance the simulation by one generation.

        Returns:
            True if the new generation is identical to the previous one

        Raises:
            RuntimeError: If the simulation has already finished
        """
        if self._state.is_terminal:
            raise RuntimeError(f"Cannot step a finished simulation (state: {self._state.value})")

        next_grid = compute_next_generation(self._grid)
        converged = generations_equal(self._grid, next_grid)

        self._grid = next_grid
        self._generation += 1
        self._population_history.append(self._grid.population)

        if converged:
            self._state = SimulationState.CONVERGED

        return converged

    def stop(self) -> None:
        """Stop a running simulation at the user's request."""
        if self._state is SimulationState.RUNNING:
            self._state = SimulationState.USER_STOPPED

    def _cap_reached(self, max_generations: Optional[int]) -> bool:
        return max_generations is not None and self._generation >= max_generations

    def run(
        self,
        commands: Iterable[Command],
        on_generation: Optional[GenerationCallback] = None,
        max_generations: Optional[int] = None,
    ) -> SimulationState:
        """Run until convergence, a quit command or the generation cap.

        The current generation is reported first, then every generation the
        loop produces. After each produced generation that did not converge,
        one command is taken from ``commands``; running out of commands counts
        as a quit.

        Args:
            commands: Source of commands between generations
            on_generation: Called with (generation, grid) for each generation
            max_generations: Optional last generation number to produce

        Returns:
            The terminal state the simulation finished in
        """
        command_iter = iter(commands)

        if on_generation:
            on_generation(self._generation, self._grid)

        while self._state is SimulationState.RUNNING:
            if self._cap_reached(max_generations):
                self._state = SimulationState.MAX_GENERATIONS
                break

            converged = self.step()
            if on_generation:
                on_generation(self._generation, self._grid)

            if converged or self._cap_reached(max_generations):
                continue

            if next(command_iter, Command.QUIT) is Command.QUIT:
                self.stop()

        return self._state

    def reset(self, grid: Grid) -> None:
        """Start over from a new generation 1.

        Raises:
            ValueError: If the new grid has different dimensions
        """
        if grid.shape != self._grid.shape:
            raise ValueError(f"Grid dimensions don't match: {grid.shape} vs {self._grid.shape}")

        self._grid = grid
        self._generation = 1
        self._state = SimulationState.RUNNING
        self._population_history = deque([grid.population], maxlen=POPULATION_HISTORY_SIZE)

    def get_statistics(self) -> Dict:
        """Get a summary of the run so far."""
        return {
            "generation": self._generation,
            "state": self._state.value,
            "population": self.population,
            "population_history": list(self._population_history),
            "grid_size": self._grid.shape,
            "population_density": self.population / (self._grid.rows * self._grid.cols),
        }
