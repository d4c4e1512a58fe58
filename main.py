#!/usr/bin/env python3
"""
Main entry point for puzzle generation.

Generates one or more Sudoku puzzles with unique solutions, prints them,
and optionally records per-puzzle generation metrics to CSV.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import yaml
from tqdm import tqdm

from sudoku_gen.config import Config, load_config, merge_configs
from sudoku_gen.generator import generate_puzzle, puzzle_seed
from sudoku_gen.logging_utils import GenerationMetrics, MetricsLogger, get_logger


def run_generation(config: Config) -> int:
    """
    Generate and print the puzzles described by `config`.

    Args:
        config: Complete configuration.

    Returns:
        Number of puzzles generated.
    """
    gen = config.generator
    logger = logging.getLogger("sudoku_gen")

    metrics_path = config.metrics_path
    metrics = MetricsLogger(metrics_path) if metrics_path is not None else None

    logger.info(f"Generating {gen.count} puzzle(s): size={gen.puzzle_size}x{gen.puzzle_size}, seed={gen.seed}")
    generated = 0
    for index in tqdm(range(gen.count), desc="Generating", disable=gen.count <= 1):
        start = time.perf_counter()
        puzzle = generate_puzzle(n=gen.puzzle_size, seed=puzzle_seed(gen.seed, index))
        elapsed = time.perf_counter() - start

        tqdm.write(puzzle.puzzle.render(placeholder=gen.placeholder))
        if gen.show_solution:
            tqdm.write("")
            tqdm.write(puzzle.solution.render())
        tqdm.write("")

        if metrics is not None:
            metrics.log(
                GenerationMetrics(
                    index=index,
                    size=gen.puzzle_size,
                    num_clues=puzzle.num_clues,
                    num_blanks=puzzle.num_blanks,
                    checks=puzzle.checks,
                    seed=puzzle.seed,
                    seconds=elapsed,
                )
            )
        generated += 1

    if metrics is not None:
        logger.info(f"Metrics written to {metrics.filepath}")
    return generated


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Sudoku puzzles with a unique solution",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Grid size n for an n x n puzzle; must be a perfect square (default: 4)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of puzzles to generate (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--placeholder",
        type=str,
        default=None,
        help="Character printed for blank cells (default: .)",
    )
    parser.add_argument(
        "--show-solution",
        action="store_true",
        help="Print the solution below each puzzle",
    )
    parser.add_argument(
        "--metrics-csv",
        type=str,
        default=None,
        help="Write per-puzzle generation metrics to this CSV file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Load the config file (if any) and apply command line overrides on top."""
    config = load_config(args.config)

    generator: dict[str, object] = {}
    if args.size is not None:
        generator["puzzle_size"] = args.size
    if args.count is not None:
        generator["count"] = args.count
    if args.seed is not None:
        generator["seed"] = args.seed
    if args.placeholder is not None:
        generator["placeholder"] = args.placeholder
    if args.show_solution:
        generator["show_solution"] = True

    logging_overrides: dict[str, object] = {}
    if args.log_level is not None:
        logging_overrides["level"] = args.log_level
    if args.metrics_csv is not None:
        metrics_path = Path(args.metrics_csv)
        logging_overrides["log_dir"] = str(metrics_path.parent)
        logging_overrides["metrics_file"] = metrics_path.name

    return merge_configs(config, {"generator": generator, "logging": logging_overrides})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = config_from_args(args)
        log_file = None
        if config.logging.log_file:
            log_file = Path(config.logging.log_dir) / config.logging.log_file
        logger = get_logger("sudoku_gen", level=config.logging.level, log_file=log_file)
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        get_logger("sudoku_gen", level=args.log_level or "INFO").error(f"Invalid configuration: {e}")
        return 1

    try:
        run_generation(config)
    except ValueError as e:
        logger.error(f"Generation failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
