"""Tests for the CLI frontend."""

import argparse
import itertools
from io import StringIO
from unittest.mock import Mock, patch

from lifegrid.core.config import GridConfig
from lifegrid.core.grid import Grid
from lifegrid.core.game import Command, SimulationState
from lifegrid.frontends.cli import (
    CLIGameOfLife,
    create_parser,
    format_finish_reason,
    format_generation,
    format_neighbor_counts,
    print_results,
    prompt_commands,
    validate_args,
    main,
)


class TestFormatting:
    """Test output formatting functions."""

    def test_format_generation(self):
        """Test the board layout under its caption."""
        grid = Grid.from_rows([[1, 0], [0, 1]])
        formatted = format_generation(grid, "Generation 1")

        assert formatted == "Generation 1\n   1     0   \n   0     1   "

    def test_format_generation_symbols(self):
        """Test the symbolic cell style."""
        grid = Grid.from_rows([[1, 0]])
        formatted = format_generation(grid, "Generation 3", symbols=True)

        assert formatted == "Generation 3\n   *     .   "

    def test_format_neighbor_counts(self):
        """Test the neighbor count table."""
        grid = Grid.from_rows([[1, 1], [1, 1]])
        formatted = format_neighbor_counts(grid)

        assert formatted == "Count of neighbors\n   3     3   \n   3     3   "

    def test_format_finish_reason(self):
        """Test every terminal state has a message."""
        assert "Still life" in format_finish_reason(SimulationState.CONVERGED)
        assert "user" in format_finish_reason(SimulationState.USER_STOPPED)
        assert "Maximum generations" in format_finish_reason(SimulationState.MAX_GENERATIONS)
        assert "Unknown" in format_finish_reason(SimulationState.RUNNING)

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results_compact(self, mock_stdout):
        """Test the short result summary."""
        print_results(SimulationState.CONVERGED, {}, verbose=False)
        assert "Still life - No more generational changes" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results_verbose(self, mock_stdout):
        """Test the detailed result summary."""
        stats = {
            "generation": 4,
            "grid_size": (5, 4),
            "initial_population": 9,
            "population": 4,
            "population_density": 0.2,
            "duration_seconds": 0.01,
        }
        print_results(SimulationState.USER_STOPPED, stats, verbose=True)

        output = mock_stdout.getvalue()
        assert "Detailed Statistics:" in output
        assert "Grid size: 5x4" in output
        assert "Initial population: 9" in output
        assert "Final population: 4" in output


class TestPromptCommands:
    """Test the quit prompt command source."""

    def test_commands_from_input(self):
        """Test lines are turned into commands."""
        input_fn = Mock(side_effect=["", "x", "q"])
        commands = list(itertools.islice(prompt_commands(input_fn), 3))

        assert commands == [Command.CONTINUE, Command.CONTINUE, Command.QUIT]
        assert "Type q to quit" in input_fn.call_args[0][0]

    def test_end_of_input(self):
        """Test end of input quits and ends the stream."""
        input_fn = Mock(side_effect=EOFError)
        assert list(prompt_commands(input_fn)) == [Command.QUIT]


class TestCLIGameOfLife:
    """Test cases for the CLI Game of Life."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_full_block_converges(self, mock_stdout):
        """Test a fully alive 2x2 board stops as a still life without prompting."""
        input_fn = Mock(side_effect=AssertionError("prompt should not be shown"))
        cli = CLIGameOfLife(input_fn=input_fn)

        state, stats = cli.run_simulation(GridConfig(rows=2, cols=2, density=1.0))

        assert state is SimulationState.CONVERGED
        assert stats["generation"] == 2
        assert stats["initial_population"] == 4
        assert "duration_seconds" in stats
        input_fn.assert_not_called()

        output = mock_stdout.getvalue()
        assert "Generation 1" in output
        assert "Generation 2" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_empty_board_converges(self, mock_stdout):
        """Test an empty board converges immediately."""
        cli = CLIGameOfLife(input_fn=Mock(return_value=""))

        state, stats = cli.run_simulation(GridConfig(density=0.0))

        assert state is SimulationState.CONVERGED
        assert stats["population"] == 0

    @patch("sys.stdout", new_callable=StringIO)
    def test_quit_at_prompt(self, mock_stdout):
        """Test typing q stops the run."""
        input_fn = Mock(return_value="q")
        cli = CLIGameOfLife(input_fn=input_fn)

        state, stats = cli.run_simulation(GridConfig(rows=3, cols=3, density=1.0))

        assert state is SimulationState.USER_STOPPED
        assert stats["generation"] == 2
        input_fn.assert_called_once()

    @patch("sys.stdout", new_callable=StringIO)
    def test_end_of_input_quits(self, mock_stdout):
        """Test end of input at the prompt stops the run."""
        cli = CLIGameOfLife(input_fn=Mock(side_effect=EOFError))

        state, _ = cli.run_simulation(GridConfig(rows=3, cols=3, density=1.0))

        assert state is SimulationState.USER_STOPPED

    @patch("sys.stdout", new_callable=StringIO)
    def test_continue_until_still_life(self, mock_stdout):
        """Test continuing through a full 3x3 board until it dies out."""
        cli = CLIGameOfLife(input_fn=Mock(return_value=""))

        state, stats = cli.run_simulation(GridConfig(rows=3, cols=3, density=1.0))

        # full board -> corners -> empty -> empty
        assert state is SimulationState.CONVERGED
        assert stats["generation"] == 4
        assert stats["population_history"] == [9, 4, 0, 0]

    @patch("sys.stdout", new_callable=StringIO)
    def test_unattended_with_cap(self, mock_stdout):
        """Test the non-interactive mode honours the generation cap."""
        input_fn = Mock()
        cli = CLIGameOfLife(input_fn=input_fn)

        state, stats = cli.run_simulation(
            GridConfig(rows=3, cols=3, density=1.0),
            max_generations=2,
            interactive=False,
        )

        assert state is SimulationState.MAX_GENERATIONS
        assert stats["generation"] == 2
        input_fn.assert_not_called()

    @patch("sys.stdout", new_callable=StringIO)
    def test_seed_reproducible(self, mock_stdout):
        """Test the same seed prints the same first generation."""
        cli = CLIGameOfLife()
        config = GridConfig(rows=6, cols=6, seed=99)

        cli.run_simulation(config, max_generations=1, interactive=False)
        first = mock_stdout.getvalue()
        mock_stdout.seek(0)
        mock_stdout.truncate()
        cli.run_simulation(config, max_generations=1, interactive=False)

        assert mock_stdout.getvalue() == first

    @patch("sys.stdout", new_callable=StringIO)
    def test_show_neighbors_and_verbose(self, mock_stdout):
        """Test the optional neighbor table and progress lines."""
        cli = CLIGameOfLife()
        cli.run_simulation(
            GridConfig(rows=2, cols=2, density=1.0),
            interactive=False,
            show_neighbors=True,
            verbose=True,
        )

        output = mock_stdout.getvalue()
        assert "Count of neighbors" in output
        assert "Initializing 2x2 grid" in output
        assert "Initial population: 4 cells" in output


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_default_args(self):
        """Test default argument values."""
        args = create_parser().parse_args([])

        assert args.rows == 5
        assert args.cols == 4
        assert args.density == 0.5
        assert args.seed is None
        assert args.max_generations is None
        assert args.no_prompt is False
        assert args.symbols is False
        assert args.show_neighbors is False
        assert args.verbose is False

    def test_parse_short_args(self):
        """Test parsing short argument forms."""
        args = create_parser().parse_args(["-r", "8", "-c", "6", "-p", "0.3", "-s", "42", "-m", "20", "-v"])

        assert args.rows == 8
        assert args.cols == 6
        assert args.density == 0.3
        assert args.seed == 42
        assert args.max_generations == 20
        assert args.verbose is True

    def test_parse_output_args(self):
        """Test parsing output-related arguments."""
        args = create_parser().parse_args(["--no-prompt", "--symbols", "--show-neighbors"])

        assert args.no_prompt is True
        assert args.symbols is True
        assert args.show_neighbors is True


class TestValidation:
    """Test argument validation."""

    def make_args(self, **overrides):
        values = {"rows": 5, "cols": 4, "density": 0.5, "max_generations": None}
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_validate_args_valid(self):
        """Test validation with valid arguments."""
        assert validate_args(self.make_args()) is True
        assert validate_args(self.make_args(max_generations=10)) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_validate_args_invalid(self, mock_stdout):
        """Test each invalid argument is reported."""
        assert validate_args(self.make_args(rows=0)) is False
        assert validate_args(self.make_args(cols=-2)) is False
        assert validate_args(self.make_args(density=1.5)) is False
        assert validate_args(self.make_args(max_generations=0)) is False

        output = mock_stdout.getvalue()
        assert "Rows must be positive" in output
        assert "Columns must be positive" in output
        assert "Density must be between" in output
        assert "Max generations must be positive" in output


class TestMain:
    """Test the main entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_unattended(self, mock_stdout):
        """Test an unattended run exits cleanly."""
        exit_code = main(["--no-prompt", "-m", "3", "-s", "1"])

        assert exit_code == 0
        output = mock_stdout.getvalue()
        assert "Generation 1" in output

    @patch("builtins.input", side_effect=EOFError)
    @patch("sys.stdout", new_callable=StringIO)
    def test_main_interactive_end_of_input(self, mock_stdout, mock_input):
        """Test the interactive run ends when input runs out."""
        exit_code = main(["-r", "3", "-c", "3", "-p", "1.0"])

        assert exit_code == 0
        assert "Stopped by user" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_args(self, mock_stdout):
        """Test invalid arguments give a non-zero exit code."""
        exit_code = main(["--rows", "0"])

        assert exit_code == 1
        assert "Error: Invalid arguments:" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_error(self, mock_stdout):
        """Test unexpected errors are reported."""
        with patch.object(CLIGameOfLife, "run_simulation", side_effect=RuntimeError("boom")):
            exit_code = main(["--no-prompt"])

        assert exit_code == 1
        assert "Error: boom" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_keyboard_interrupt(self, mock_stdout):
        """Test Ctrl-C is reported as an interruption."""
        with patch.object(CLIGameOfLife, "run_simulation", side_effect=KeyboardInterrupt):
            exit_code = main(["--no-prompt"])

        assert exit_code == 1
        assert "interrupted" in mock_stdout.getvalue()
