"""
K-Means++ seeding.

The first centroid is drawn uniformly from the data; each further centroid is
drawn with probability proportional to the squared distance from a point to
its nearest already-chosen centroid.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import InvalidClusterCountError
from ..utils.logging_config import get_logger
from ..utils.random_source import RngLike, ensure_rng

logger = get_logger(__name__)


def weighted_index(weights: np.ndarray, rng: np.random.Generator) -> int:
    """
    Draw an index with probability proportional to *weights*.

    Uses cumulative-sum inversion: ``r`` is drawn uniformly in
    ``[0, total)`` and the first index whose cumulative weight is ``>= r``
    wins. When every weight is zero the last index is returned.
    """
    cumulative = np.cumsum(weights)
    total = float(cumulative[-1])
    if total <= 0.0:
        logger.debug("All %d seeding weights are zero; falling back to the last point", len(weights))
        return len(weights) - 1
    r = rng.random() * total
    return int(np.searchsorted(cumulative, r, side="left"))


def kmeanspp_init(X: np.ndarray, k: int, rng: RngLike = None) -> np.ndarray:
    """
    Return (k, d) initial centroids chosen by the k-means++ rule.

    Points already chosen are not excluded, so with duplicate points the same
    coordinates can be picked more than once.

    Args:
        X: (n, d) float data matrix
        k: Number of centroids, 1 <= k <= n
        rng: Generator, int seed, or None (configured seed / OS entropy)

    Returns:
        (k, d) float64 array of centroid coordinates (copies of data rows)

    Raises:
        InvalidClusterCountError: If k is outside [1, n]
    """
    rng = ensure_rng(rng)
    n, d = X.shape
    if k < 1 or k > n:
        raise InvalidClusterCountError(
            f"Cannot seed {k} centroids from {n} points; k must be between 1 and {n}."
        )

    centroids = np.empty((k, d), dtype=np.float64)
    centroids[0] = X[int(rng.integers(0, n))]

    # Running minimum of squared distances to the chosen centroids
    min_sq = np.sum((X - centroids[0]) ** 2, axis=1)
    for c in range(1, k):
        idx = weighted_index(min_sq, rng)
        centroids[c] = X[idx]
        min_sq = np.minimum(min_sq, np.sum((X - centroids[c]) ** 2, axis=1))
    return centroids
