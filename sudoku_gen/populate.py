"""Randomized backtracking fill of a grid into a complete solution."""

import random
from typing import Sequence

from .grid import Coordinate, Grid


def shuffled_coordinates(grid: Grid, rng: random.Random) -> list[Coordinate]:
    """Return all cell positions of `grid` in a random order drawn from `rng`."""
    coords = grid.coordinates()
    rng.shuffle(coords)
    return coords


def populate(
    grid: Grid,
    rng: random.Random,
    order: Sequence[Coordinate] | None = None,
) -> bool:
    """
    Fill every empty cell of `grid` in place with a valid value.

    Cells are visited in `order` (a fresh shuffle from `rng` when omitted) and
    candidates 1..n are tried in a random order per cell. Filled cells are
    left untouched.

    Args:
        grid: Grid to fill; mutated in place.
        rng: Source of all shuffles.
        order: Visiting order over all cell positions.

    Returns:
        True if the grid was completed. False means no completion exists;
        the grid is then restored to its initial state.
    """
    if order is None:
        order = shuffled_coordinates(grid, rng)
    candidates = list(range(1, grid.n + 1))
    return _populate_step(grid, rng, order, candidates, 0)


def _populate_step(
    grid: Grid,
    rng: random.Random,
    order: Sequence[Coordinate],
    candidates: list[int],
    step: int,
) -> bool:
    if step == len(order):
        return True

    row, col = order[step]
    if grid[row, col] != 0:
        return _populate_step(grid, rng, order, candidates, step + 1)

    values = candidates.copy()
    rng.shuffle(values)
    for value in values:
        if grid.is_placement_valid(row, col, value):
            grid[row, col] = value
            if _populate_step(grid, rng, order, candidates, step + 1):
                return True
            grid[row, col] = 0
    return False
