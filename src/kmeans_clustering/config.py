"""
Configuration management for kmeans_clustering.

Loads defaults from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

Usage:
    from kmeans_clustering.config import config

    max_iterations = config.clustering.max_iterations
    log_level = config.logging.level
"""

import math
import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path


# Try to load .env file if it exists
try:
    from dotenv import load_dotenv

    # Look for .env in project root (parent of src/)
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
except ImportError:
    # python-dotenv not installed - will use system environment variables
    pass


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class ClusteringDefaults:
    """Default parameters for clustering runs."""
    max_iterations: int = 100
    tolerance: float = 1e-6
    num_runs: int = 10
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate ranges so a bad environment fails at import, not mid-run."""
        if self.max_iterations < 1:
            raise ValueError(
                f"KMEANS_MAX_ITERATIONS must be >= 1, got {self.max_iterations}"
            )
        if not math.isfinite(self.tolerance) or self.tolerance < 0:
            raise ValueError(
                f"KMEANS_TOLERANCE must be a finite value >= 0, got {self.tolerance}"
            )
        if self.num_runs < 1:
            raise ValueError(f"KMEANS_NUM_RUNS must be >= 1, got {self.num_runs}")
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError(
                f"KMEANS_RANDOM_SEED must be a non-negative integer, got {self.random_seed}"
            )


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"

    def __post_init__(self):
        """Normalise the level name."""
        self.level = (self.level or "INFO").upper()


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    3. In a container/deployment environment
    """

    def __init__(self):
        """Load configuration from environment."""
        self.clustering = ClusteringDefaults(
            max_iterations=_env_int("KMEANS_MAX_ITERATIONS", 100),
            tolerance=_env_float("KMEANS_TOLERANCE", 1e-6),
            num_runs=_env_int("KMEANS_NUM_RUNS", 10),
            random_seed=_env_int("KMEANS_RANDOM_SEED", None),
        )
        self.logging = LoggingConfig(level=os.getenv("KMEANS_LOG_LEVEL", "INFO"))


# Global config instance
config = Config()
