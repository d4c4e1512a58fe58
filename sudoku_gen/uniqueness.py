"""
Backtracking solution counter and solver.

The counter stops as soon as it has seen `limit` completions, which turns
"is this puzzle unique?" into a cheap question even on near-empty grids.
"""

from .grid import Grid


class GridError(ValueError):
    """Base class for puzzles that do not have exactly one completion."""


class UnsolvableGridError(GridError):
    """Raised when a grid admits no valid completion."""


class AmbiguousGridError(GridError):
    """Raised when a grid admits more than one valid completion."""


def count_solutions(grid: Grid, limit: int | None = 2) -> int:
    """
    Count the completions of `grid`, stopping early at `limit`.

    The search runs on a private copy; `grid` is never modified.

    Args:
        grid: A possibly partial grid.
        limit: Stop once this many completions are found. None counts all.

    Returns:
        Number of completions found, capped at `limit`.
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be positive or None; got {limit}")
    if not grid.is_consistent():
        return 0
    snapshot = grid.copy()
    return _count_step(snapshot, snapshot.coordinates(), 0, 0, limit)


def _count_step(
    grid: Grid,
    order: list[tuple[int, int]],
    step: int,
    found: int,
    limit: int | None,
) -> int:
    if step == len(order):
        return found + 1

    row, col = order[step]
    if grid[row, col] != 0:
        return _count_step(grid, order, step + 1, found, limit)

    for value in range(1, grid.n + 1):
        if grid.is_placement_valid(row, col, value):
            grid[row, col] = value
            found = _count_step(grid, order, step + 1, found, limit)
            if limit is not None and found >= limit:
                # Snapshot is discarded, no need to undo.
                return found
            grid[row, col] = 0
    return found


def has_multiple_solutions(grid: Grid) -> bool:
    """True if `grid` admits at least two completions."""
    return count_solutions(grid, limit=2) > 1


def has_unique_solution(grid: Grid) -> bool:
    """True if `grid` admits exactly one completion."""
    return count_solutions(grid, limit=2) == 1


def solve(grid: Grid) -> Grid:
    """
    Return the unique completion of `grid` as a new grid.

    Raises:
        UnsolvableGridError: If no completion exists.
        AmbiguousGridError: If more than one completion exists.
    """
    count = count_solutions(grid, limit=2)
    if count == 0:
        raise UnsolvableGridError(f"grid has no solution: {grid.to_string()}")
    if count > 1:
        raise AmbiguousGridError(f"grid has multiple solutions: {grid.to_string()}")

    solution = grid.copy()
    _fill_first(solution, solution.coordinates(), 0)
    return solution


def _fill_first(grid: Grid, order: list[tuple[int, int]], step: int) -> bool:
    if step == len(order):
        return True

    row, col = order[step]
    if grid[row, col] != 0:
        return _fill_first(grid, order, step + 1)

    for value in range(1, grid.n + 1):
        if grid.is_placement_valid(row, col, value):
            grid[row, col] = value
            if _fill_first(grid, order, step + 1):
                return True
            grid[row, col] = 0
    return False
