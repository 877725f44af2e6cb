"""Random generator plumbing shared by the clustering algorithms."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

RngLike = Union[np.random.Generator, int, None]


def ensure_rng(seed_or_rng: RngLike = None) -> np.random.Generator:
    """
    Return a NumPy Generator for *seed_or_rng*.

    - ``np.random.Generator`` -> returned unchanged (callers share its stream)
    - ``int`` >= 0 -> ``np.random.default_rng(seed)``
    - ``None`` -> seeded from ``KMEANS_RANDOM_SEED`` when configured,
      otherwise from OS entropy
    """
    if isinstance(seed_or_rng, np.random.Generator):
        return seed_or_rng
    if seed_or_rng is None:
        from ..config import config

        seed: Optional[int] = config.clustering.random_seed
        return np.random.default_rng(seed)
    if isinstance(seed_or_rng, bool) or not isinstance(seed_or_rng, (int, np.integer)):
        raise TypeError(
            f"rng must be a numpy Generator, an int seed or None, got {type(seed_or_rng).__name__}"
        )
    if seed_or_rng < 0:
        raise ValueError(f"rng seed must be a non-negative integer, got {seed_or_rng}")
    return np.random.default_rng(int(seed_or_rng))
