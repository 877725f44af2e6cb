"""
Input validation for the clustering entry points.

All checks run eagerly, before any random draw or distance computation, so a
caller gets either a complete result or a descriptive error.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, List, Sequence, Tuple

import numpy as np

from ..exceptions import (
    DimensionMismatchError,
    EmptyDatasetError,
    InvalidClusterCountError,
    InvalidCoordinateError,
    InvalidParameterError,
)

Array2D = np.ndarray


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _where(index) -> str:
    return "point" if index is None else f"point {index}"


def point_dimension(point: Any, index=None) -> int:
    """Return the number of coordinates of *point*.

    Raises:
        DimensionMismatchError: If *point* is not a flat sequence or has no
            coordinates at all
    """
    if isinstance(point, np.ndarray) and point.ndim != 1:
        raise DimensionMismatchError(
            f"{_where(index)} must be one-dimensional, got shape {point.shape}"
        )
    try:
        d = len(point)
    except TypeError as e:
        raise DimensionMismatchError(
            f"{_where(index)} is not a sequence of coordinates: {point!r}"
        ) from e
    if d < 1:
        raise DimensionMismatchError("Points must have at least one dimension.")
    return d


def as_point_array(point: Any, index=None) -> np.ndarray:
    """
    Convert one point to a float64 vector, rejecting bad coordinates.

    Args:
        point: Sequence of real numbers or 1-D numeric array
        index: Position of the point in its dataset (for error messages)

    Returns:
        1-D float64 array

    Raises:
        InvalidCoordinateError: If a coordinate is non-numeric, NaN or infinite
    """
    if isinstance(point, np.ndarray) and point.dtype.kind in "iuf":
        values = point.astype(np.float64)
    else:
        coords = list(point)
        for i, value in enumerate(coords):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
                raise InvalidCoordinateError(
                    f"Invalid coordinate value at dimension {i} of {_where(index)}: {value!r}"
                )
        values = np.asarray(coords, dtype=np.float64)

    bad = np.flatnonzero(~np.isfinite(values))
    if bad.size:
        i = int(bad[0])
        raise InvalidCoordinateError(
            f"Invalid coordinate value at dimension {i} of {_where(index)}: {values[i]!r}"
        )
    return values


def validate_dataset(data: Sequence[Any], k: Any) -> Tuple[Array2D, List[Any]]:
    """
    Validate a dataset and cluster count and build the working matrix.

    Checks run in a fixed order: non-empty dataset, cluster count, shared
    dimensionality, then coordinate values.

    Args:
        data: Sequence of points or a 2-D numeric array
        k: Requested number of clusters

    Returns:
        Tuple of:
        - X: float64 array of shape (n, d)
        - points: the caller's point objects, in dataset order

    Raises:
        EmptyDatasetError, InvalidClusterCountError, DimensionMismatchError,
        InvalidCoordinateError
    """
    if data is None:
        raise EmptyDatasetError("Dataset is empty.")
    if isinstance(data, np.ndarray) and data.ndim != 2:
        if data.size == 0:
            raise EmptyDatasetError("Dataset is empty.")
        raise DimensionMismatchError(
            f"Dataset array must be 2-D (n_points, n_dims), got shape {data.shape}"
        )
    points = list(data)

    n = len(points)
    if n == 0:
        raise EmptyDatasetError("Dataset is empty.")

    if not _is_integer(k):
        raise InvalidClusterCountError(f"k must be an integer, got {k!r}")
    if k <= 0 or k > n:
        raise InvalidClusterCountError(
            f"Invalid number of clusters: k={k} must be between 1 and the number of points ({n})."
        )

    d = point_dimension(points[0], 0)
    for i, point in enumerate(points[1:], start=1):
        if point_dimension(point, i) != d:
            raise DimensionMismatchError(
                f"All data points must have the same dimensions: point 0 has {d}, "
                f"point {i} has {len(point)}."
            )

    X = np.empty((n, d), dtype=np.float64)
    for i, point in enumerate(points):
        X[i] = as_point_array(point, i)
    return X, points


def validate_iteration_params(max_iterations: Any, tolerance: Any) -> None:
    """Check ``max_iterations`` (positive int) and ``tolerance`` (finite, >= 0)."""
    if not _is_integer(max_iterations) or max_iterations < 1:
        raise InvalidParameterError(
            f"max_iterations must be a positive integer, got {max_iterations!r}"
        )
    if (
        isinstance(tolerance, (bool, np.bool_))
        or not isinstance(tolerance, numbers.Real)
        or not math.isfinite(tolerance)
        or tolerance < 0
    ):
        raise InvalidParameterError(
            f"tolerance must be a finite number >= 0, got {tolerance!r}"
        )


def validate_num_runs(num_runs: Any) -> None:
    """Check ``num_runs`` is a positive integer."""
    if not _is_integer(num_runs) or num_runs < 1:
        raise InvalidParameterError(f"num_runs must be a positive integer, got {num_runs!r}")
