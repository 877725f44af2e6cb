"""Utility modules for kmeans_clustering."""

from .logging_config import get_logger, setup_logging
from .random_source import RngLike, ensure_rng

__all__ = [
    "get_logger",
    "setup_logging",
    "RngLike",
    "ensure_rng",
]
