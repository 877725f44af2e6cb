"""
Dataset loading and JSON marshalling of clustering results.

Supported dataset files:
- ``.json``: a list of points (``[[1, 2], [3, 4]]``) or an object with a
  ``"data"`` key holding that list
- ``.csv``: numeric rows, comma separated, ``#`` comments allowed
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, TextIO, Union

import numpy as np

from .algorithms.assignment import Cluster
from .utils.logging_config import get_logger

logger = get_logger(__name__)


def load_points(path: Union[str, Path]) -> Union[list, np.ndarray]:
    """
    Load a dataset of points from a JSON or CSV file.

    Args:
        path: Path to a ``.json`` or ``.csv`` file

    Returns:
        List of points (JSON) or (n, d) float array (CSV). Values are not
        validated here; the clustering entry points do that.

    Raises:
        ValueError: If the file type is unsupported or the JSON layout is
            not a list of points
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if isinstance(payload, dict):
            if "data" not in payload:
                raise ValueError(f"{path}: JSON object must have a 'data' key")
            payload = payload["data"]
        if not isinstance(payload, list):
            raise ValueError(f"{path}: expected a list of points, got {type(payload).__name__}")
        logger.debug("Loaded %d points from %s", len(payload), path)
        return payload
    if suffix == ".csv":
        X = np.loadtxt(path, delimiter=",", dtype=np.float64, ndmin=2)
        logger.debug("Loaded %d points from %s", len(X), path)
        return X
    raise ValueError(f"Unsupported dataset format: {path.suffix!r} (use .json or .csv)")


def clusters_to_dict(
    clusters: Sequence[Cluster], inertia: Optional[float] = None
) -> Dict[str, Any]:
    """Build a JSON-ready dict for a clustering result."""
    result: Dict[str, Any] = {
        "k": len(clusters),
        "clusters": [cluster.to_dict() for cluster in clusters],
    }
    if inertia is not None:
        result["inertia"] = float(inertia)
    return result


def dump_clusters(
    clusters: Sequence[Cluster],
    fp: TextIO,
    inertia: Optional[float] = None,
    indent: Optional[int] = 2,
) -> None:
    """Write ``clusters_to_dict(clusters, inertia)`` as JSON to *fp*."""
    json.dump(clusters_to_dict(clusters, inertia), fp, indent=indent)
    fp.write("\n")
