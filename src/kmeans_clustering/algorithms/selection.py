"""
Best-of-N K-Means: repeat independent runs and keep the lowest inertia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..config import config
from ..utils.logging_config import get_logger
from ..utils.random_source import RngLike, ensure_rng
from .assignment import Cluster
from .kmeans import KMeansConfig, KMeansRun, lloyd_iterations
from .validation import validate_dataset, validate_iteration_params, validate_num_runs

logger = get_logger(__name__)


@dataclass
class MultiRunConfig(KMeansConfig):
    """Configuration for best-of-N K-Means."""

    num_runs: int = field(default_factory=lambda: config.clustering.num_runs)


@dataclass
class MultiRunResult:
    """Outcome of a best-of-N selection."""

    best: KMeansRun
    best_index: int
    inertias: List[float] = field(default_factory=list)

    @property
    def clusters(self) -> List[Cluster]:
        return self.best.clusters


def best_of_runs(cfg: MultiRunConfig, rng: RngLike = None) -> MultiRunResult:
    """
    Run K-Means ``cfg.num_runs`` times and select the lowest-inertia run.

    Runs execute sequentially and draw from one shared generator, so each
    gets fresh seeding. A later run replaces the current best only if its
    inertia is strictly lower; ties keep the earlier run.

    Args:
        cfg: MultiRunConfig with data, k, max_iterations, tolerance, num_runs
        rng: Generator, int seed, or None (configured seed / OS entropy)

    Returns:
        MultiRunResult with the best run, its index and every run's inertia

    Raises:
        InvalidParameterError: If num_runs < 1
        ClusteringError subclasses on invalid data or parameters
    """
    X, points = validate_dataset(cfg.data, cfg.k)
    validate_iteration_params(cfg.max_iterations, cfg.tolerance)
    validate_num_runs(cfg.num_runs)
    rng = ensure_rng(rng)

    best: Optional[KMeansRun] = None
    best_index = -1
    inertias: List[float] = []
    for run_idx in range(cfg.num_runs):
        run = lloyd_iterations(
            X,
            points,
            int(cfg.k),
            max_iterations=int(cfg.max_iterations),
            tolerance=float(cfg.tolerance),
            rng=rng,
        )
        inertias.append(run.inertia)
        if best is None or run.inertia < best.inertia:
            best = run
            best_index = run_idx

    logger.info(
        "Best of %d runs: run %d with inertia %.6g (worst %.6g)",
        cfg.num_runs, best_index, best.inertia, max(inertias),
    )
    return MultiRunResult(best=best, best_index=best_index, inertias=inertias)


def run_with_optimal_inertia(cfg: MultiRunConfig, rng: RngLike = None) -> List[Cluster]:
    """
    Run K-Means several times and return the clusters with the lowest inertia.

    Args:
        cfg: MultiRunConfig with data, k, max_iterations, tolerance, num_runs
        rng: Generator, int seed, or None (configured seed / OS entropy)

    Returns:
        Exactly ``k`` clusters from the best run
    """
    return best_of_runs(cfg, rng).clusters
