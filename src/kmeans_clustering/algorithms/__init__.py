"""
Algorithm Core Library - K-Means clustering.

Distance, centroid math, K-Means++ seeding, assignment, the Lloyd loop and
best-of-N selection, with no I/O and no global state.
"""

from .distance import euclidean_distance, squared_distance
from .centroid import centroid_of
from .seeding import kmeanspp_init
from .assignment import Cluster, assign_points
from .kmeans import (
    KMeansConfig,
    KMeansRun,
    RunState,
    inertia,
    kmeans,
    kmeans_run,
)
from .selection import (
    MultiRunConfig,
    MultiRunResult,
    best_of_runs,
    run_with_optimal_inertia,
)

__all__ = [
    # Primitives
    "euclidean_distance",
    "squared_distance",
    "centroid_of",
    "kmeanspp_init",
    "Cluster",
    "assign_points",
    # Single run
    "KMeansConfig",
    "KMeansRun",
    "RunState",
    "inertia",
    "kmeans",
    "kmeans_run",
    # Best-of-N
    "MultiRunConfig",
    "MultiRunResult",
    "best_of_runs",
    "run_with_optimal_inertia",
]
