"""Puzzle generation: fill a grid, then dig holes while keeping it unique."""

import logging
import random
from dataclasses import dataclass
from typing import Iterator

from .grid import N, Grid
from .populate import populate
from .reduce import ReductionResult, reduce_grid
from .uniqueness import UnsolvableGridError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Puzzle:
    """A generated puzzle together with its solution."""

    puzzle: Grid
    solution: Grid
    seed: int | None = None
    checks: int = 0

    @property
    def num_clues(self) -> int:
        return self.puzzle.num_filled

    @property
    def num_blanks(self) -> int:
        return self.puzzle.n * self.puzzle.n - self.puzzle.num_filled


def make_solution(n: int = N, rng: random.Random | None = None) -> Grid:
    """
    Build a random complete n×n solution grid.

    Raises:
        UnsolvableGridError: If the backtracking fill fails.
    """
    rng = rng or random.Random()
    grid = Grid(n)
    if not populate(grid, rng):
        raise UnsolvableGridError(f"could not populate an empty {n}x{n} grid")
    return grid


def make_puzzle(solution: Grid, rng: random.Random | None = None) -> tuple[Grid, ReductionResult]:
    """Reduce a copy of `solution` to a puzzle with a unique completion."""
    rng = rng or random.Random()
    puzzle = solution.copy()
    result = reduce_grid(puzzle, rng)
    return puzzle, result


def generate_puzzle(
    n: int = N,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Puzzle:
    """
    Generate a single puzzle-solution pair.

    Args:
        n: Size of the grid (n x n). Must be a perfect square.
        seed: Seed for a private random.Random. Ignored if `rng` is given.
        rng: Random source to draw every shuffle from.

    Returns:
        The generated Puzzle.
    """
    rng = rng or random.Random(seed)
    solution = make_solution(n, rng)
    puzzle, result = make_puzzle(solution, rng)
    logger.debug(
        f"Generated {n}x{n} puzzle with {puzzle.num_filled} clues "
        f"({result.checks} uniqueness checks)"
    )
    return Puzzle(puzzle=puzzle, solution=solution, seed=seed, checks=result.checks)


def puzzle_seed(seed: int | None, index: int) -> int | None:
    """Seed of the `index`-th puzzle in a batch started from `seed`."""
    return None if seed is None else seed + index


def generate_puzzles(count: int, n: int = N, seed: int | None = None) -> Iterator[Puzzle]:
    """
    Yield `count` puzzles, the i-th generated from seed `seed + i`.

    Each puzzle records its own seed, so `generate_puzzle(seed=p.seed)`
    regenerates it. With no seed every puzzle is drawn independently.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative; got {count}")
    for index in range(count):
        yield generate_puzzle(n=n, seed=puzzle_seed(seed, index))
