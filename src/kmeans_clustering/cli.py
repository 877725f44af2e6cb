"""
Cluster a dataset file from the command line and print the result as JSON.

Usage:
  kmeans-cluster points.json -k 3
  kmeans-cluster points.csv -k 4 --runs 20 --seed 7 --output clusters.json
  kmeans-cluster points.json -k 2 --runs 1 --tolerance 1e-9 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .algorithms import KMeansConfig, MultiRunConfig, best_of_runs, kmeans_run
from .config import config
from .serialization import dump_clusters, load_points
from .utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmeans-cluster",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="Dataset file (.json or .csv)")
    parser.add_argument(
        "-k",
        "--clusters",
        type=int,
        required=True,
        help="Number of clusters",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=config.clustering.max_iterations,
        help="Iteration cap per run (default: %(default)s)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=config.clustering.tolerance,
        help="Convergence threshold on centroid movement (default: %(default)s)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=config.clustering.num_runs,
        help="Independent runs; the lowest-inertia run is kept (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write JSON here instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: KMEANS_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_level)
        data = load_points(args.path)
        if args.runs == 1:
            run = kmeans_run(
                KMeansConfig(
                    data=data,
                    k=args.clusters,
                    max_iterations=args.max_iterations,
                    tolerance=args.tolerance,
                ),
                rng=args.seed,
            )
        else:
            run = best_of_runs(
                MultiRunConfig(
                    data=data,
                    k=args.clusters,
                    max_iterations=args.max_iterations,
                    tolerance=args.tolerance,
                    num_runs=args.runs,
                ),
                rng=args.seed,
            ).best
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                dump_clusters(run.clusters, f, inertia=run.inertia)
            logger.info("Wrote %d clusters to %s", len(run.clusters), args.output)
        else:
            dump_clusters(run.clusters, sys.stdout, inertia=run.inertia)
    except (ValueError, OSError) as e:
        logger.error("Clustering failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
