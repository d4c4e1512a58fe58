"""Configuration management for puzzle generation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class GeneratorConfig:
    """Puzzle generation configuration."""

    puzzle_size: int = 4
    count: int = 1
    seed: int | None = None
    placeholder: str = "."
    show_solution: bool = False


@dataclass
class DatasetConfig:
    """Generated dataset configuration."""

    num_samples: int = 1_000
    seed: int = 0


@dataclass
class LoggingConfig:
    """Logging and metrics configuration."""

    level: str = "INFO"
    log_dir: str = "logs"
    log_file: str | None = None
    metrics_file: str | None = None


@dataclass
class Config:
    """Complete generator configuration."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            raw = yaml.safe_load(f)

        return cls.from_dict(raw or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary."""
        config = cls()

        if "generator" in data:
            config.generator = GeneratorConfig(**data["generator"])

        if "dataset" in data:
            config.dataset = DatasetConfig(**data["dataset"])

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "generator": dict(self.generator.__dict__),
            "dataset": dict(self.dataset.__dict__),
            "logging": dict(self.logging.__dict__),
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @property
    def metrics_path(self) -> Path | None:
        """Full path of the metrics CSV, if enabled."""
        if self.logging.metrics_file is None:
            return None
        return Path(self.logging.log_dir) / self.logging.metrics_file


def load_config(path: str | Path | None = None) -> Config:
    """
    Load configuration from file or return defaults.

    Args:
        path: Path to YAML config file. If None, returns default config.

    Returns:
        Configuration object.
    """
    if path is None:
        return Config()
    return Config.from_yaml(path)


def merge_configs(base: Config, overrides: dict[str, Any]) -> Config:
    """
    Merge override values into a base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.to_dict()

    for key, value in overrides.items():
        if isinstance(value, dict) and key in base_dict:
            base_dict[key].update(value)
        else:
            base_dict[key] = value

    return Config.from_dict(base_dict)
