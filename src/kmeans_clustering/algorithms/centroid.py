"""
Centroid (coordinate-wise arithmetic mean) of a set of points.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ..exceptions import DimensionMismatchError, EmptyClusterError, InvalidCoordinateError
from .validation import as_point_array, point_dimension


def _finite_mean(mean: np.ndarray) -> np.ndarray:
    if not np.all(np.isfinite(mean)):
        raise InvalidCoordinateError(
            f"Centroid overflowed to a non-finite value: {mean.tolist()!r}"
        )
    return mean


def centroid_of(points: Sequence[Any]) -> np.ndarray:
    """
    Compute the arithmetic mean of a non-empty set of n-dimensional points.

    Args:
        points: Sequence of points (or a 2-D array), all of one dimensionality

    Returns:
        1-D float64 array with the same dimensionality as the points

    Raises:
        EmptyClusterError: If *points* is empty
        DimensionMismatchError: If the points disagree on dimensionality
        InvalidCoordinateError: If a coordinate is non-numeric, NaN or infinite,
            or the mean overflows the float range
    """
    if isinstance(points, np.ndarray) and points.ndim == 2 and points.dtype.kind in "iuf":
        if points.shape[0] == 0:
            raise EmptyClusterError("Cannot calculate the mean of an empty cluster.")
        if points.shape[1] < 1:
            raise DimensionMismatchError("Points must have at least one dimension.")
        X = points.astype(np.float64)
        if not np.all(np.isfinite(X)):
            row, col = np.argwhere(~np.isfinite(X))[0]
            raise InvalidCoordinateError(
                f"Invalid coordinate value at dimension {col} of point {row}: {X[row, col]!r}"
            )
        return _finite_mean(X.mean(axis=0))

    if points is None or len(points) == 0:
        raise EmptyClusterError("Cannot calculate the mean of an empty cluster.")

    d = point_dimension(points[0], 0)
    for i, point in enumerate(points):
        got = point_dimension(point, i)
        if got != d:
            raise DimensionMismatchError(
                f"Point has incorrect dimensions: expected {d}, but got {got}"
            )

    total = np.zeros(d, dtype=np.float64)
    for i, point in enumerate(points):
        total += as_point_array(point, i)
    return _finite_mean(total / len(points))
