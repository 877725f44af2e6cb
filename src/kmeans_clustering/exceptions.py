"""
Exception hierarchy for clustering input and numeric-integrity failures.

Every error derives from ``ValueError`` so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class ClusteringError(ValueError):
    """Base class for all clustering errors."""


class EmptyDatasetError(ClusteringError):
    """The dataset contains no points."""


class InvalidClusterCountError(ClusteringError):
    """``k`` is not an integer in ``[1, len(data)]``."""


class DimensionMismatchError(ClusteringError):
    """Points do not all share one dimensionality."""


class EmptyClusterError(ClusteringError):
    """A centroid was requested for a cluster with no points."""


class InvalidCoordinateError(ClusteringError):
    """A coordinate is non-numeric, NaN, or infinite."""


class InvalidParameterError(ClusteringError):
    """``max_iterations``, ``tolerance`` or ``num_runs`` is out of range."""
