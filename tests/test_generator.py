"""Tests for the puzzle generation facade."""

import random

import pytest

from sudoku_gen.generator import (
    Puzzle,
    generate_puzzle,
    generate_puzzles,
    make_puzzle,
    make_solution,
    puzzle_seed,
)
from sudoku_gen.uniqueness import count_solutions, solve


class TestMakeSolution:
    """Tests for make_solution."""

    def test_solution_is_complete_and_valid(self):
        solution = make_solution(rng=random.Random(0))
        assert solution.n == 4
        assert solution.is_complete()
        assert solution.is_consistent()

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            make_solution(n=6)

    def test_trivial_size(self):
        """A 1x1 grid is a perfect square and fills with a single 1."""
        solution = make_solution(n=1, rng=random.Random(0))
        assert solution[0, 0] == 1


class TestMakePuzzle:
    """Tests for make_puzzle."""

    def test_does_not_touch_solution(self):
        solution = make_solution(rng=random.Random(0))
        before = solution.copy()
        puzzle, _ = make_puzzle(solution, random.Random(1))
        assert solution == before
        assert puzzle.num_filled < 16


class TestGeneratePuzzle:
    """Tests for generate_puzzle."""

    def test_returns_puzzle(self):
        result = generate_puzzle(seed=1)
        assert isinstance(result, Puzzle)
        assert result.seed == 1
        assert result.num_clues + result.num_blanks == 16
        assert result.num_blanks >= 1
        assert result.checks == 16

    def test_round_trip(self):
        """Solving the puzzle reproduces the solution it was dug from."""
        for seed in range(10):
            result = generate_puzzle(seed=seed)
            assert count_solutions(result.puzzle, limit=None) == 1
            assert solve(result.puzzle) == result.solution

    def test_deterministic_under_seed(self):
        a = generate_puzzle(seed=123)
        b = generate_puzzle(seed=123)
        assert a.puzzle == b.puzzle
        assert a.solution == b.solution

    def test_injected_rng(self):
        a = generate_puzzle(rng=random.Random(5))
        b = generate_puzzle(rng=random.Random(5))
        assert a.puzzle == b.puzzle

    def test_seeds_vary(self):
        puzzles = {generate_puzzle(seed=s).puzzle.to_string() for s in range(10)}
        assert len(puzzles) > 1


class TestGeneratePuzzles:
    """Tests for batch generation."""

    def test_count(self):
        assert len(list(generate_puzzles(3, seed=0))) == 3

    def test_batch_is_reproducible(self):
        a = [p.puzzle.to_string() for p in generate_puzzles(4, seed=8)]
        b = [p.puzzle.to_string() for p in generate_puzzles(4, seed=8)]
        assert a == b

    def test_negative_count(self):
        with pytest.raises(ValueError):
            list(generate_puzzles(-1))

    def test_each_puzzle_records_its_own_seed(self):
        """Any puzzle of a seeded batch can be regenerated from its recorded seed."""
        batch = list(generate_puzzles(3, seed=8))
        assert [p.seed for p in batch] == [8, 9, 10]
        for puzzle in batch:
            again = generate_puzzle(seed=puzzle.seed)
            assert again.puzzle == puzzle.puzzle
            assert again.solution == puzzle.solution

    def test_unseeded_batch_records_no_seed(self):
        assert all(p.seed is None for p in generate_puzzles(2))


class TestPuzzleSeed:
    """Tests for puzzle_seed."""

    def test_offsets_batch_seed(self):
        assert puzzle_seed(100, 0) == 100
        assert puzzle_seed(100, 4) == 104

    def test_no_seed(self):
        assert puzzle_seed(None, 3) is None
