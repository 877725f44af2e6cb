"""
Euclidean distance, the only metric used by the clustering engine.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import DimensionMismatchError


def squared_distance(a, b) -> float:
    """Squared Euclidean distance between two points of equal dimensionality.

    Raises:
        DimensionMismatchError: If the points differ in length
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 1 or b.ndim != 1:
        raise DimensionMismatchError(
            f"Points must be one-dimensional, got shapes {a.shape} and {b.shape}"
        )
    if len(a) != len(b):
        raise DimensionMismatchError(
            f"Points must have the same number of dimensions: {len(a)} != {len(b)}"
        )
    diff = a - b
    return float(np.dot(diff, diff))


def euclidean_distance(a, b) -> float:
    """
    Euclidean distance between two points in n-dimensional space.

    sqrt(sum((a_i - b_i)^2))

    Args:
        a: First point (sequence of numbers or 1-D array)
        b: Second point, same dimensionality as *a*

    Returns:
        Non-negative distance

    Raises:
        DimensionMismatchError: If the points differ in length
    """
    return float(np.sqrt(squared_distance(a, b)))


def pairwise_distances(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """(n, K) matrix of Euclidean distances from each row of *X* to each centroid."""
    if X.shape[1] != centroids.shape[1]:
        raise DimensionMismatchError(
            f"Points have {X.shape[1]} dimensions but centroids have {centroids.shape[1]}"
        )
    return np.linalg.norm(X[:, None, :] - centroids[None, :, :], axis=2)
