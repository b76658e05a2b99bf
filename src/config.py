"""
Configuration management for PowerPath.

This module centralizes all configuration settings:
- Tunables loaded from environment variables
- Sensible defaults that reproduce the PowerPath 100 scoring curve
- Type hints for IDE support
- Single source of truth for all settings
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class PowerPathConfig:
    """Score model and difficulty policy settings."""

    # Score bounds
    max_score: int = 100
    min_score: int = 0

    # Increment: max(min_increment, base_increment - floor(score / 10))
    min_increment: int = 4
    base_increment: int = 14

    # Difficulty targeting
    hard_only_threshold: int = 90  # score >= 90 → hard only
    mixed_threshold: int = 50  # 50 <= score < 90 → medium/hard mix
    medium_probability: float = field(
        default_factory=lambda: float(os.getenv("POWERPATH_MEDIUM_PROBABILITY", "0.75"))
    )

    # Reproducibility
    random_seed: Optional[int] = field(
        default_factory=lambda: _optional_int("POWERPATH_RANDOM_SEED")
    )

    # Check raw pools against the question schema on construction
    validate_pools: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    log_stats_updates: bool = False  # DEBUG-log every stats snapshot


@dataclass
class PathConfig:
    """File system paths - single source of truth for all directories."""

    project_root: Path = field(default_factory=lambda: Path(__file__).parent.parent)

    schemas_dir: Path = field(init=False)
    question_schema: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.schemas_dir = self.project_root / "schemas"
        self.question_schema = self.schemas_dir / "question.schema.json"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from src.config import config

        # Access settings
        threshold = config.powerpath.hard_only_threshold

        # Pin the random source for reproducible sessions
        config.powerpath.random_seed = 42
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.powerpath = PowerPathConfig()
            cls._instance.logging = LoggingConfig()

        return cls._instance

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        pp = self.powerpath

        if not (0 <= pp.medium_probability <= 1):
            errors.append(
                f"medium_probability must be in [0, 1], got {pp.medium_probability}"
            )

        if pp.min_score != 0:
            errors.append(f"min_score must be 0, got {pp.min_score}")

        if pp.max_score <= pp.min_score:
            errors.append(
                f"max_score ({pp.max_score}) must be > min_score ({pp.min_score})"
            )

        if not (pp.min_score < pp.mixed_threshold < pp.hard_only_threshold <= pp.max_score):
            errors.append(
                "Thresholds must satisfy min_score < mixed_threshold < hard_only_threshold <= max_score, "
                f"got mixed_threshold={pp.mixed_threshold}, hard_only_threshold={pp.hard_only_threshold}"
            )

        if pp.min_increment < 1:
            errors.append(f"min_increment must be >= 1, got {pp.min_increment}")

        if pp.base_increment < pp.min_increment:
            errors.append(
                f"base_increment ({pp.base_increment}) must be >= min_increment ({pp.min_increment})"
            )

        if not isinstance(logging.getLevelName(self.logging.log_level.upper()), int):
            errors.append(f"Unknown log level: {self.logging.log_level}")

        if not self.paths.question_schema.exists():
            errors.append(f"Question schema not found: {self.paths.question_schema}")

        return errors


# Global config instance
config = Config()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging from LoggingConfig.

    Safe to call more than once; only the level is updated after the first call.
    Call this explicitly from your app entrypoint.
    """
    level_name = (level or config.logging.log_level).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level_name, format=config.logging.log_format)
    root.setLevel(level_name)
