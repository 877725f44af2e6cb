"""
Tests for random generator plumbing.
"""

import numpy as np
import pytest

from kmeans_clustering.config import config
from kmeans_clustering.utils.random_source import ensure_rng


def test_ensure_rng_passes_generator_through(rng):
    assert ensure_rng(rng) is rng


def test_ensure_rng_int_seed_is_reproducible():
    assert ensure_rng(5).random() == ensure_rng(5).random()
    assert ensure_rng(np.int64(5)).random() == np.random.default_rng(5).random()


def test_ensure_rng_none_uses_configured_seed(monkeypatch):
    monkeypatch.setattr(config.clustering, "random_seed", 11)
    assert ensure_rng(None).random() == np.random.default_rng(11).random()


def test_ensure_rng_none_without_seed_returns_generator(monkeypatch):
    monkeypatch.setattr(config.clustering, "random_seed", None)
    assert isinstance(ensure_rng(), np.random.Generator)


@pytest.mark.parametrize("bad", [1.5, "7", True, object()])
def test_ensure_rng_rejects_other_types(bad):
    with pytest.raises(TypeError, match="rng must be"):
        ensure_rng(bad)


@pytest.mark.parametrize("seed", [-1, np.int64(-5)])
def test_ensure_rng_rejects_negative_seed(seed):
    with pytest.raises(ValueError, match="non-negative"):
        ensure_rng(seed)
