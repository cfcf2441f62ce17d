"""Command-line interface for Conway's Game of Life."""

import argparse
import itertools
import sys
import time
from typing import Callable, Iterator, List, Optional, Tuple

from ..core.config import GridConfig
from ..core.grid import Grid
from ..core.game import Command, GameOfLife, SimulationState, parse_command

QUIT_PROMPT = "Type q to quit [any other to continue]: "
DEFAULT_UNATTENDED_GENERATIONS = 100


def _format_rows(rows: List[List[str]]) -> List[str]:
    return [" " + "".join(f"  {value}   " for value in row) for row in rows]


def format_generation(grid: Grid, caption: str, symbols: bool = False) -> str:
    """Format a board under a caption line.

    Args:
        grid: Grid to format
        caption: Heading printed above the board
        symbols: Show '*' and '.' instead of 1 and 0

    Returns:
        Formatted board string
    """
    alive, dead = ("*", ".") if symbols else ("1", "0")
    rows = [[alive if cell else dead for cell in row] for row in grid.cells]
    return "\n".join([caption] + _format_rows(rows))


def format_neighbor_counts(grid: Grid) -> str:
    """Format the live-neighbor count of every cell, laid out like the board."""
    counts = grid.count_all_neighbors()
    rows = [[str(int(count)) for count in row] for row in counts]
    return "\n".join(["Count of neighbors"] + _format_rows(rows))


def format_finish_reason(state: SimulationState) -> str:
    """Format the simulation finish reason for display."""
    if state is SimulationState.CONVERGED:
        return "Still life - No more generational changes"
    elif state is SimulationState.USER_STOPPED:
        return "Stopped by user"
    elif state is SimulationState.MAX_GENERATIONS:
        return "Maximum generations reached"
    else:
        return f"Unknown reason: {state.value}"


def prompt_commands(input_fn: Optional[Callable[[str], str]] = None) -> Iterator[Command]:
    """Yield commands typed at the quit prompt.

    End of input is treated as a quit and ends the stream.
    """
    read_line = input_fn or input
    while True:
        try:
            line = read_line("\n" + QUIT_PROMPT)
        except EOFError:
            yield Command.QUIT
            return
        yield parse_command(line)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None) -> None:
        """Initialize CLI interface.

        Args:
            input_fn: Reads one line of user input for the quit prompt
                (defaults to the builtin input)
        """
        self.input_fn = input_fn if input_fn is not None else input

    def run_simulation(
        self,
        config: GridConfig,
        max_generations: Optional[int] = None,
        interactive: bool = True,
        symbols: bool = False,
        show_neighbors: bool = False,
        verbose: bool = False,
    ) -> Tuple[SimulationState, dict]:
        """Run a Game of Life simulation on a randomly seeded board.

        Args:
            config: Board dimensions and seeding
            max_generations: Optional last generation to produce
            interactive: Ask whether to quit after each generation
            symbols: Draw cells as '*' and '.' instead of 1 and 0
            show_neighbors: Print neighbor counts under every board
            verbose: Print progress details

        Returns:
            Tuple of (final_state, statistics)
        """
        grid = Grid.from_config(config)

        if verbose:
            print(f"Initializing {config.rows}x{config.cols} grid")
            print(f"Generating random population (density: {config.density:.2%}, seed: {config.seed})")

        grid.randomize(config.density, config.seed)
        game = GameOfLife(grid)
        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        def show(generation: int, current: Grid) -> None:
            caption = f"Generation {generation}"
            if generation > 1:
                caption = "\n" + caption
            print(format_generation(current, caption, symbols=symbols))
            if show_neighbors:
                print(format_neighbor_counts(current))

        if interactive:
            commands = prompt_commands(self.input_fn)
        else:
            commands = itertools.repeat(Command.CONTINUE)
            if max_generations is None:
                max_generations = DEFAULT_UNATTENDED_GENERATIONS

        start_time = time.time()
        state = game.run(commands, on_generation=show, max_generations=max_generations)
        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration

        return state, stats


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a small bounded board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive 5x4 board, press q to quit
  lifegrid-cli

  # Reproducible 8x8 board
  lifegrid-cli --rows 8 --cols 8 --seed 42

  # Run unattended for at most 20 generations
  lifegrid-cli --no-prompt --max-generations 20 --symbols

  # Show the neighbor counts behind each transition
  lifegrid-cli --show-neighbors
        """,
    )

    # Grid configuration
    parser.add_argument("-r", "--rows", type=int, default=5, help="Number of rows (default: 5)")

    parser.add_argument("-c", "--cols", type=int, default=4, help="Number of columns (default: 4)")

    parser.add_argument(
        "-p",
        "--density",
        type=float,
        default=0.5,
        help="Chance each seeded cell is alive, 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible first generation",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help=f"Stop after this generation (default: unlimited, {DEFAULT_UNATTENDED_GENERATIONS} with --no-prompt)",
    )

    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not ask whether to quit between generations",
    )

    # Output configuration
    parser.add_argument(
        "--symbols",
        action="store_true",
        help="Draw live cells as '*' and dead cells as '.'",
    )

    parser.add_argument(
        "--show-neighbors",
        action="store_true",
        help="Print the neighbor count of every cell under each board",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def print_results(state: SimulationState, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        state: Terminal simulation state
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(format_finish_reason(state))

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Generations: {stats['generation']}")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.cols <= 0:
        errors.append("Columns must be positive")

    if not 0.0 <= args.density <= 1.0:
        errors.append("Density must be between 0.0 and 1.0")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()

    try:
        config = GridConfig(rows=args.rows, cols=args.cols, density=args.density, seed=args.seed)
        state, stats = cli.run_simulation(
            config,
            max_generations=args.max_generations,
            interactive=not args.no_prompt,
            symbols=args.symbols,
            show_neighbors=args.show_neighbors,
            verbose=args.verbose,
        )

        print_results(state, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
