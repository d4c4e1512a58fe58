import numpy as np
import torch
from torch.utils.data import Dataset

from .config import Config
from .generator import generate_puzzle
from .grid import N, Grid


def encode_puzzle(puzzle: Grid) -> np.ndarray:
    """
    One-hot encode an n*n puzzle into (n^2, n+1).

    Channel 0 represents blank (0 in the puzzle).
    Channels 1..n represent digits 1..n.

    Args:
        puzzle (Grid): An n*n puzzle grid with blanks represented as 0.
    Returns:
        np.ndarray: One-hot encoded representation of shape (n^2, n+1).
    """
    n = puzzle.n
    encoded = np.zeros((n * n, n + 1), dtype=np.float32)
    encoded[np.arange(n * n), puzzle.values.flatten()] = 1.0
    return encoded


def encode_solution(solution: Grid) -> np.ndarray:
    """
    Encode an n*n solution into class indices in [0, n-1] with shape (n^2,).

    Args:
        solution (Grid): A complete n*n grid.
    Returns:
        np.ndarray: Encoded solution as class indices with shape (n^2,).
    """
    if not solution.is_complete():
        raise ValueError(f"solution must be complete; got {solution.to_string()}")
    return solution.values.flatten().astype(np.int64) - 1


class PuzzleDataset(Dataset):
    """Generated puzzles with unique solutions, reproducible per index."""

    def __init__(self, num_samples: int, n: int = N, seed: int = 0):
        self.num_samples = num_samples
        self.n = n
        self.seed = seed

    @classmethod
    def from_config(cls, config: Config) -> "PuzzleDataset":
        """Build the dataset described by `config.dataset` and the generator size."""
        return cls(
            num_samples=config.dataset.num_samples,
            n=config.generator.puzzle_size,
            seed=config.dataset.seed,
        )

    def __len__(self) -> int:
        return self.num_samples

    def __getitem__(self, idx: int) -> tuple[torch.Tensor, torch.Tensor]:
        if not 0 <= idx < self.num_samples:
            raise IndexError(f"index {idx} out of range for {self.num_samples} samples")
        sample = generate_puzzle(n=self.n, seed=self.seed + idx)
        return (
            torch.tensor(encode_puzzle(sample.puzzle), dtype=torch.float32),
            torch.tensor(encode_solution(sample.solution), dtype=torch.long),
        )
