"""
Cluster record and nearest-centroid assignment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from .distance import pairwise_distances


@dataclass
class Cluster:
    """One centroid and the points currently assigned to it."""

    centroid: np.ndarray
    points: List[Any] = field(default_factory=list)
    indices: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=int))

    @property
    def size(self) -> int:
        return len(self.points)

    def to_dict(self) -> Dict[str, Any]:
        """Plain ``{"centroid": [...], "points": [[...], ...]}`` form."""
        return {
            "centroid": [float(v) for v in self.centroid],
            "points": [[float(v) for v in point] for point in self.points],
        }


def nearest_centroid_labels(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """(n,) index of the nearest centroid for each row of *X*.

    ``np.argmin`` returns the first minimum, so ties go to the lowest
    centroid index.
    """
    return np.argmin(pairwise_distances(X, centroids), axis=1)


def assign_points(
    X: np.ndarray,
    centroids: np.ndarray,
    points: Optional[Sequence[Any]] = None,
) -> List[Cluster]:
    """
    Assign every point to its nearest centroid.

    Args:
        X: (n, d) data matrix
        centroids: (K, d) current centroids
        points: Objects to store in the clusters, aligned with the rows of
            *X* (defaults to the rows themselves)

    Returns:
        K clusters in centroid order; each holds its points in dataset
        order. A cluster may be empty.
    """
    if points is None:
        points = list(X)
    labels = nearest_centroid_labels(X, centroids)

    clusters = []
    for j in range(len(centroids)):
        idx = np.flatnonzero(labels == j)
        clusters.append(
            Cluster(
                centroid=centroids[j].copy(),
                points=[points[i] for i in idx],
                indices=idx,
            )
        )
    return clusters
