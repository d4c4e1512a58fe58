"""Tests for the command line entry point."""

import csv
import logging
import tempfile
from pathlib import Path

import pytest

from main import build_parser, config_from_args, main


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger("sudoku_gen")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestConfigFromArgs:
    """Tests for turning arguments into a Config."""

    def test_defaults(self):
        config = config_from_args(build_parser().parse_args([]))
        assert config.generator.puzzle_size == 4
        assert config.generator.count == 1

    def test_overrides(self):
        args = build_parser().parse_args(["--count", "3", "--seed", "9", "--placeholder", "_", "--show-solution"])
        config = config_from_args(args)
        assert config.generator.count == 3
        assert config.generator.seed == 9
        assert config.generator.placeholder == "_"
        assert config.generator.show_solution is True

    def test_config_file_then_flags(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("generator:\n  count: 4\n  seed: 2\n")
            args = build_parser().parse_args(["--config", str(path), "--seed", "5"])
            config = config_from_args(args)
        assert config.generator.count == 4
        assert config.generator.seed == 5


class TestMain:
    """Tests for running the CLI end to end."""

    def test_prints_puzzle(self, capsys):
        assert main(["--seed", "1", "--log-level", "WARNING"]) == 0
        out = capsys.readouterr().out
        assert "--+--" in out
        assert "." in out

    def test_writes_metrics(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "metrics.csv"
            assert main(["--count", "2", "--seed", "3", "--metrics-csv", str(path), "--log-level", "WARNING"]) == 0
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        assert [row["index"] for row in rows] == ["0", "1"]
        assert all(int(row["num_clues"]) + int(row["num_blanks"]) == 16 for row in rows)

    def test_invalid_size_fails(self):
        assert main(["--size", "5", "--log-level", "ERROR"]) == 1

    def test_metrics_record_per_puzzle_seed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "metrics.csv"
            assert main(["--count", "3", "--seed", "5", "--metrics-csv", str(path), "--log-level", "WARNING"]) == 0
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        assert [row["seed"] for row in rows] == ["5", "6", "7"]

    def test_missing_config_file_fails(self):
        assert main(["--config", "/nonexistent/config.yaml", "--log-level", "ERROR"]) == 1

    def test_unknown_config_key_fails(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("generator:\n  difficulty: hard\n")
            assert main(["--config", str(path), "--log-level", "ERROR"]) == 1

    def test_malformed_yaml_fails(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("generator: [unclosed\n")
            assert main(["--config", str(path), "--log-level", "ERROR"]) == 1

    def test_bad_log_level_in_config_fails(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("logging:\n  level: LOUD\n")
            assert main(["--config", str(path)]) == 1
