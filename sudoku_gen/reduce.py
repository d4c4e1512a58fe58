"""Greedy, uniqueness-preserving removal of clues from a solved grid."""

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from .grid import Coordinate, Grid
from .populate import shuffled_coordinates
from .uniqueness import has_multiple_solutions

logger = logging.getLogger(__name__)


@dataclass
class ReductionResult:
    """Outcome of one reduction pass."""

    removed: list[Coordinate] = field(default_factory=list)
    kept: list[Coordinate] = field(default_factory=list)
    checks: int = 0


def reduce_grid(
    grid: Grid,
    rng: random.Random,
    order: Sequence[Coordinate] | None = None,
) -> ReductionResult:
    """
    Blank as many cells of `grid` as possible while keeping one solution.

    Each cell is visited once. Its value is cleared, and an independent copy
    of the grid is checked for a second solution. If one exists the value
    goes back, otherwise the blank stays. The result depends on the visiting
    order and is minimal only locally: no remaining clue can be removed on
    its own.

    Args:
        grid: A grid with a unique completion (usually a full solution);
            mutated in place.
        rng: Used to shuffle the visiting order when `order` is omitted.
        order: Visiting order over cell positions.

    Returns:
        ReductionResult listing accepted and rejected removals.
    """
    if order is None:
        order = shuffled_coordinates(grid, rng)

    result = ReductionResult()
    for row, col in order:
        value = grid[row, col]
        if value == 0:
            continue

        grid[row, col] = 0
        result.checks += 1
        if has_multiple_solutions(grid.copy()):
            grid[row, col] = value
            result.kept.append((row, col))
            logger.debug(f"Kept clue {value} at ({row}, {col})")
        else:
            result.removed.append((row, col))
            logger.debug(f"Removed clue {value} at ({row}, {col})")

    return result
