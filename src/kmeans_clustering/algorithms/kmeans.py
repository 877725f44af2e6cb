"""
Lloyd's algorithm (K-Means) with K-Means++ seeding.

A run moves through ``SEEDING -> ITERATING -> {CONVERGED | MAX_ITER_REACHED}``:
centroids are seeded once, then every iteration assigns each point to its
nearest centroid, recomputes centroids as cluster means (re-seeding empty
clusters from the whole dataset) and stops once no centroid moved by
``tolerance`` or more, or after ``max_iterations`` iterations.

The clusters returned are those of the last assignment phase, so their
centroids are the ones the points were assigned to, not the centroids
computed from them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Sequence

import numpy as np

from ..config import config
from ..exceptions import InvalidCoordinateError
from ..utils.logging_config import get_logger
from ..utils.random_source import RngLike, ensure_rng
from .assignment import Cluster, assign_points
from .centroid import centroid_of
from .distance import squared_distance
from .seeding import kmeanspp_init
from .validation import validate_dataset, validate_iteration_params

logger = get_logger(__name__)


class RunState(str, Enum):
    """States of a single K-Means run."""

    SEEDING = "seeding"
    ITERATING = "iterating"
    CONVERGED = "converged"
    MAX_ITER_REACHED = "max_iter_reached"


@dataclass
class KMeansConfig:
    """Configuration for a single K-Means run."""

    data: Sequence[Any]
    k: int
    max_iterations: int = field(default_factory=lambda: config.clustering.max_iterations)
    tolerance: float = field(default_factory=lambda: config.clustering.tolerance)


@dataclass
class KMeansRun:
    """Result of a single K-Means run."""

    clusters: List[Cluster]
    centroids: np.ndarray
    n_iter: int
    state: RunState
    inertia: float
    inertia_history: List[float] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.state is RunState.CONVERGED


def _sum_squares(P: np.ndarray, centroid: np.ndarray) -> float:
    if len(P) == 0:
        return 0.0
    return float(np.sum((P - centroid) ** 2))


def inertia(clusters: Sequence[Cluster]) -> float:
    """
    Sum of squared distances from each point to its cluster's centroid.

    Lower values mean tighter clusters.

    Args:
        clusters: Clusters as returned by ``kmeans``

    Returns:
        Non-negative total

    Raises:
        DimensionMismatchError: If a point and its centroid differ in
            dimensionality
    """
    total = 0.0
    for cluster in clusters:
        for point in cluster.points:
            total += squared_distance(point, cluster.centroid)
    return total


def lloyd_iterations(
    X: np.ndarray,
    points: Sequence[Any],
    k: int,
    *,
    max_iterations: int,
    tolerance: float,
    rng: np.random.Generator,
) -> KMeansRun:
    """
    Run seeding plus the assign/update loop on already validated input.

    Args:
        X: (n, d) validated data matrix
        points: Caller's point objects aligned with the rows of *X*
        k: Number of clusters
        max_iterations: Iteration cap
        tolerance: Convergence threshold on per-centroid movement
        rng: Random generator for seeding and empty-cluster re-seeds

    Returns:
        KMeansRun for this run
    """
    logger.debug("Seeding %d centroids from %d points", k, len(X))
    centroids = kmeanspp_init(X, k, rng)

    state = RunState.ITERATING
    clusters: List[Cluster] = []
    history: List[float] = []
    n_iter = 0
    while state is RunState.ITERATING:
        clusters = assign_points(X, centroids, points)
        history.append(sum(_sum_squares(X[c.indices], c.centroid) for c in clusters))
        if not np.isfinite(history[-1]):
            raise InvalidCoordinateError(
                f"Inertia overflowed to a non-finite value at iteration {n_iter + 1}"
            )

        new_centroids = np.empty_like(centroids)
        for j, cluster in enumerate(clusters):
            if cluster.size == 0:
                new_centroids[j] = kmeanspp_init(X, 1, rng)[0]
                logger.debug("Iteration %d: cluster %d is empty, re-seeding", n_iter + 1, j)
            else:
                new_centroids[j] = centroid_of(X[cluster.indices])

        shifts = np.linalg.norm(new_centroids - centroids, axis=1)
        converged = bool(np.all(shifts < tolerance))
        centroids = new_centroids
        n_iter += 1
        logger.debug(
            "Iteration %d: inertia=%.6g, max centroid shift=%.3g",
            n_iter, history[-1], float(shifts.max()),
        )

        if converged:
            state = RunState.CONVERGED
        elif n_iter >= max_iterations:
            state = RunState.MAX_ITER_REACHED

    logger.info(
        "K-Means run finished: k=%d, n=%d, state=%s, iterations=%d, inertia=%.6g",
        k, len(X), state.value, n_iter, history[-1],
    )
    return KMeansRun(
        clusters=clusters,
        centroids=centroids,
        n_iter=n_iter,
        state=state,
        inertia=history[-1],
        inertia_history=history,
    )


def kmeans_run(cfg: KMeansConfig, rng: RngLike = None) -> KMeansRun:
    """
    Perform K-Means clustering and return the full run record.

    Args:
        cfg: KMeansConfig with data, k, max_iterations and tolerance
        rng: Generator, int seed, or None (configured seed / OS entropy)

    Returns:
        KMeansRun with clusters, final centroids, iteration count, terminal
        state and inertia per iteration

    Raises:
        EmptyDatasetError, InvalidClusterCountError, DimensionMismatchError,
        InvalidCoordinateError, InvalidParameterError: On invalid input,
        before any computation
        InvalidCoordinateError: If a centroid or the inertia overflows the
            float range during the run
    """
    X, points = validate_dataset(cfg.data, cfg.k)
    validate_iteration_params(cfg.max_iterations, cfg.tolerance)
    return lloyd_iterations(
        X,
        points,
        int(cfg.k),
        max_iterations=int(cfg.max_iterations),
        tolerance=float(cfg.tolerance),
        rng=ensure_rng(rng),
    )


def kmeans(cfg: KMeansConfig, rng: RngLike = None) -> List[Cluster]:
    """
    Perform K-Means clustering on a dataset.

    Args:
        cfg: KMeansConfig with data, k, max_iterations and tolerance
        rng: Generator, int seed, or None (configured seed / OS entropy)

    Returns:
        Exactly ``k`` clusters, each with a centroid and its points

    Raises:
        ClusteringError subclasses on invalid input (see ``kmeans_run``)
    """
    return kmeans_run(cfg, rng).clusters
