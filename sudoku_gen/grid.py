"""Grid storage and the row/column/box constraint predicate."""

import math
from typing import Iterator

import numpy as np

Coordinate = tuple[int, int]

# Default puzzle: 4x4 with 2x2 boxes.
N: int = 4

BLANK_CHARS = ("0", ".")


def require_square_sudoku(n: int) -> int:
    """Validate that n is a supported Sudoku order and return box size."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    box = int(math.isqrt(n))
    if box * box != n:
        raise ValueError(f"n must be a perfect square (e.g. 4, 9, 16); got {n}")
    return box


class Grid:
    """
    An n×n Sudoku grid. Cells hold 0 (empty) or a value in 1..n.

    The grid is mutable in place; use `copy()` to get an independent
    snapshot before any exploratory search.
    """

    def __init__(self, n: int = N):
        self.box = require_square_sudoku(n)
        self.n = n
        self._cells = np.zeros((n, n), dtype=np.int64)

    @classmethod
    def from_array(cls, values: np.ndarray | list[list[int]]) -> "Grid":
        """Build a grid from a square array of values in 0..n."""
        array = np.asarray(values, dtype=np.int64)
        n = int(array.shape[0]) if array.ndim == 2 else -1
        if array.shape != (n, n):
            raise ValueError(f"grid must be square; got shape={array.shape}")
        grid = cls(n)
        if array.size and (array.min() < 0 or array.max() > n):
            raise ValueError(f"grid contains out-of-range values for n={n}")
        grid._cells[:] = array
        return grid

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """
        Parse a row-major puzzle string.

        Each cell is a single character, so grids up to 9x9 are supported.
        Digits 1..n are givens, '0' or '.' are blanks. Whitespace, '|',
        '-' and '+' are ignored, so `render()` output of such grids parses back.
        """
        chars = [c for c in text if not c.isspace() and c not in "|-+"]
        n = int(math.isqrt(len(chars)))
        if n * n != len(chars):
            raise ValueError(f"puzzle string must hold a square number of cells; got {len(chars)}")
        values = []
        for idx, char in enumerate(chars):
            if char in BLANK_CHARS:
                values.append(0)
            elif char.isdigit():
                values.append(int(char))
            else:
                raise ValueError(f"Invalid character {char!r} at position {idx}")
        return cls.from_array(np.array(values, dtype=np.int64).reshape(n, n))

    @property
    def values(self) -> np.ndarray:
        """A copy of the underlying array."""
        return self._cells.copy()

    @property
    def num_filled(self) -> int:
        return int(np.count_nonzero(self._cells))

    def __getitem__(self, coord: Coordinate) -> int:
        return int(self._cells[coord])

    def __setitem__(self, coord: Coordinate, value: int) -> None:
        self._cells[coord] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.n == other.n and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid.from_string({self.to_string()!r})"

    def __str__(self) -> str:
        return self.render()

    def copy(self) -> "Grid":
        """Return a fully independent deep copy."""
        out = Grid(self.n)
        out._cells[:] = self._cells
        return out

    def coordinates(self) -> list[Coordinate]:
        """All cell positions in row-major order."""
        return [(r, c) for r in range(self.n) for c in range(self.n)]

    def is_placement_valid(self, row: int, col: int, value: int) -> bool:
        """
        Check whether `value` can sit at (row, col) without a clash.

        Scans the row, the column and the containing box. The target cell
        itself is not treated specially, so a cell that already holds
        `value` reports a conflict with itself.
        """
        cells = self._cells
        for i in range(self.n):
            if cells[row, i] == value or cells[i, col] == value:
                return False

        top = row - row % self.box
        left = col - col % self.box
        for dr in range(self.box):
            for dc in range(self.box):
                if cells[top + dr, left + dc] == value:
                    return False
        return True

    def is_complete(self) -> bool:
        return bool(np.all(self._cells != 0))

    def is_consistent(self) -> bool:
        """True if no row, column or box repeats a non-zero value."""
        for unit in self._units():
            filled = unit[unit != 0]
            if len(filled) != len(np.unique(filled)):
                return False
        return True

    def _units(self) -> Iterator[np.ndarray]:
        for i in range(self.n):
            yield self._cells[i, :]
            yield self._cells[:, i]
        for top in range(0, self.n, self.box):
            for left in range(0, self.n, self.box):
                yield self._cells[top:top + self.box, left:left + self.box].flatten()

    def to_string(self) -> str:
        """Compact row-major form with '.' for blanks."""
        return "".join(str(int(v)) if v else "." for v in self._cells.flatten())

    def render(self, placeholder: str = ".") -> str:
        """
        Format the grid for display.

        For the default 4x4 grid:

            12|34
            34|12
            --+--
            21|43
            43|21
        """
        width = len(str(self.n))
        separator = "+".join("-" * (self.box * width) for _ in range(self.box))
        lines = []
        for r in range(self.n):
            if r and r % self.box == 0:
                lines.append(separator)
            line = ""
            for c in range(self.n):
                if c and c % self.box == 0:
                    line += "|"
                value = int(self._cells[r, c])
                line += str(value).rjust(width) if value else placeholder * width
            lines.append(line)
        return "\n".join(lines)
