"""
Logging and generation metrics.
- Console/file logger setup
- Per-puzzle generation metrics written to CSV
"""

import csv
import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path


def get_logger(
    name: str,
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Create and configure a logger.

    Args:
        name: Logger name.
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional file path to write logs to.

    Returns:
        Configured logger instance.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


@dataclass
class GenerationMetrics:
    """Metrics recorded for each generated puzzle."""

    index: int
    size: int
    num_clues: int
    num_blanks: int
    checks: int
    seed: int | None = None
    seconds: float | None = None


class MetricsLogger:
    """
    CSV-based logger for generation metrics.

    Writes one row per puzzle with a fixed schema.
    """

    FIELDNAMES = [
        "index",
        "size",
        "num_clues",
        "num_blanks",
        "checks",
        "seed",
        "seconds",
    ]

    def __init__(self, path: Path):
        """
        Initialize the metrics logger.

        Args:
            path: CSV file to write. Parent directories are created.
        """
        self.filepath = Path(path)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._initialized = False

    def _init_file(self) -> None:
        """Initialize CSV file with headers."""
        if not self._initialized:
            with open(self.filepath, "w", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
                writer.writeheader()
            self._initialized = True

    def log(self, metrics: GenerationMetrics) -> None:
        """Append one row of metrics."""
        self._init_file()
        with open(self.filepath, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writerow(asdict(metrics))

