#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import itertools

from lifegrid import Command, GameOfLife, Grid, GridConfig


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # A blinker next to a block on a 6x6 board
    grid = Grid.from_config(GridConfig(rows=6, cols=6))
    for row, col in [(1, 1), (1, 2), (1, 3), (4, 3), (4, 4), (5, 3), (5, 4)]:
        grid.set_cell(row, col, True)

    game = GameOfLife(grid)

    def show(generation, current):
        print(f"Generation {generation}:")
        print(current)
        print(f"Population: {current.population}")
        print()

    # The blinker never settles, so cap the run
    state = game.run(itertools.repeat(Command.CONTINUE), on_generation=show, max_generations=5)
    print(f"Finished: {state.value}")

    # A lone block is a still life and converges on the first step
    block = Grid.from_rows([[1, 1], [1, 1]])
    state = GameOfLife(block).run(itertools.repeat(Command.CONTINUE), on_generation=show)
    print(f"Finished: {state.value}")


if __name__ == "__main__":
    main()
