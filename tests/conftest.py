"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import logging

import numpy as np
import pytest

from kmeans_clustering.utils.logging_config import ROOT_LOGGER_NAME


CLUSTER_ONE = [[1, 1], [1.5, 1.5], [1, 1.5]]
CLUSTER_TWO = [[5, 5], [5.5, 5.5], [5, 5.5]]
CLUSTER_THREE = [[9, 9], [9.5, 9], [9, 9.5]]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """
    Undo ``setup_logging`` between tests.

    The CLI installs a stream handler bound to whatever ``sys.stderr`` was
    at the time; pytest swaps that stream per test.
    """
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def rng():
    """Seeded NumPy generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def three_blobs():
    """Three well-separated 2D blobs near (1,1), (5,5) and (9,9), 3 points each."""
    return [list(p) for p in CLUSTER_ONE + CLUSTER_TWO + CLUSTER_THREE]


@pytest.fixture
def three_blob_means():
    """Means of the ``three_blobs`` groups, ordered by x coordinate."""
    return [
        np.mean(CLUSTER_ONE, axis=0),
        np.mean(CLUSTER_TWO, axis=0),
        np.mean(CLUSTER_THREE, axis=0),
    ]


@pytest.fixture
def two_blobs():
    """Two tight 2D blobs around (1,1) and (5,5)."""
    return [
        [1, 1],
        [1.1, 1.1],
        [0.9, 0.9],
        [5, 5],
        [5.1, 5.1],
        [4.9, 4.9],
    ]


@pytest.fixture
def random_points():
    """100 uniform points in [0, 10)^2 as a list of lists."""
    gen = np.random.default_rng(0)
    return (gen.random((100, 2)) * 10).tolist()
