"""
sudoku-gen: small Sudoku puzzle generator.

Fills a grid by randomized backtracking, then digs holes one cell at a
time, keeping a blank only when the puzzle still has a unique solution.
"""

from sudoku_gen.config import Config, load_config, merge_configs
from sudoku_gen.data import PuzzleDataset, encode_puzzle, encode_solution
from sudoku_gen.generator import (
    Puzzle,
    generate_puzzle,
    generate_puzzles,
    make_puzzle,
    make_solution,
)
from sudoku_gen.grid import Grid
from sudoku_gen.logging_utils import GenerationMetrics, MetricsLogger, get_logger
from sudoku_gen.populate import populate
from sudoku_gen.reduce import ReductionResult, reduce_grid
from sudoku_gen.uniqueness import (
    AmbiguousGridError,
    GridError,
    UnsolvableGridError,
    count_solutions,
    has_multiple_solutions,
    has_unique_solution,
    solve,
)

__version__ = "0.1.0"
__all__ = [
    # Grid
    "Grid",
    # Generation
    "populate",
    "reduce_grid",
    "ReductionResult",
    "Puzzle",
    "generate_puzzle",
    "generate_puzzles",
    "make_puzzle",
    "make_solution",
    # Uniqueness
    "count_solutions",
    "has_multiple_solutions",
    "has_unique_solution",
    "solve",
    "GridError",
    "UnsolvableGridError",
    "AmbiguousGridError",
    # Data
    "PuzzleDataset",
    "encode_puzzle",
    "encode_solution",
    # Logging
    "get_logger",
    "GenerationMetrics",
    "MetricsLogger",
    # Configuration
    "Config",
    "load_config",
    "merge_configs",
]
