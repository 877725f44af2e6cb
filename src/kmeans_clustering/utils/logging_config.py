"""
Logging configuration for kmeans_clustering.

Library modules only ask for loggers; handlers are installed by
``setup_logging`` which entry points (the CLI, scripts) call once.

Usage:
    from kmeans_clustering.utils.logging_config import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "kmeans_clustering"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Names that already live under ``kmeans_clustering`` (i.e. ``__name__``
    inside the package) are used as-is; anything else is nested below it so
    that ``setup_logging`` controls every logger the package creates.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: Optional[Union[int, str]] = None,
    stream=None,
) -> logging.Logger:
    """
    Configure the package root logger.

    Args:
        level: Log level name or number. Defaults to ``config.logging.level``
            (``KMEANS_LOG_LEVEL`` in the environment).
        stream: Stream for the handler (default: ``sys.stderr``)

    Returns:
        The configured package root logger
    """
    if level is None:
        from ..config import config

        level = config.logging.level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Replace our own handler on repeated calls instead of stacking them
    for handler in list(root.handlers):
        if getattr(handler, "_kmeans_clustering_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._kmeans_clustering_handler = True
    root.addHandler(handler)
    return root
