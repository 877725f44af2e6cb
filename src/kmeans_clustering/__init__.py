"""
kmeans_clustering - Core Package

Partitional clustering with Lloyd's algorithm (K-Means), K-Means++ seeding
and best-of-N selection by inertia.

This package provides:
- Algorithm layer (distance, centroids, seeding, assignment, the K-Means loop)
- Environment-driven defaults and logging setup
- JSON/CSV loading and a ``kmeans-cluster`` command-line wrapper
"""

__version__ = "0.1.0"

from .exceptions import (
    ClusteringError,
    DimensionMismatchError,
    EmptyClusterError,
    EmptyDatasetError,
    InvalidClusterCountError,
    InvalidCoordinateError,
    InvalidParameterError,
)
from .algorithms import (
    Cluster,
    KMeansConfig,
    KMeansRun,
    MultiRunConfig,
    MultiRunResult,
    RunState,
    best_of_runs,
    euclidean_distance,
    inertia,
    kmeans,
    kmeans_run,
    run_with_optimal_inertia,
)

from . import algorithms
from . import utils

__all__ = [
    "ClusteringError",
    "DimensionMismatchError",
    "EmptyClusterError",
    "EmptyDatasetError",
    "InvalidClusterCountError",
    "InvalidCoordinateError",
    "InvalidParameterError",
    "Cluster",
    "KMeansConfig",
    "KMeansRun",
    "MultiRunConfig",
    "MultiRunResult",
    "RunState",
    "best_of_runs",
    "euclidean_distance",
    "inertia",
    "kmeans",
    "kmeans_run",
    "run_with_optimal_inertia",
    "algorithms",
    "utils",
]
