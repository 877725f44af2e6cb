"""
Tests for logging setup.
"""

import io
import logging

import pytest

from kmeans_clustering.config import config
from kmeans_clustering.utils.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging


def test_get_logger_keeps_package_names():
    assert get_logger("kmeans_clustering.algorithms.kmeans").name == "kmeans_clustering.algorithms.kmeans"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_get_logger_nests_foreign_names():
    assert get_logger("scripts.run").name == "kmeans_clustering.scripts.run"


def test_setup_logging_writes_to_stream():
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream)

    get_logger("kmeans_clustering.test").debug("hello %s", "world")

    output = stream.getvalue()
    assert "hello world" in output
    assert "DEBUG" in output


def test_setup_logging_respects_level():
    stream = io.StringIO()
    setup_logging(logging.WARNING, stream=stream)

    logger = get_logger("kmeans_clustering.test")
    logger.info("quiet")
    logger.warning("loud")

    output = stream.getvalue()
    assert "quiet" not in output
    assert "loud" in output


def test_setup_logging_does_not_stack_handlers():
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("INFO", stream=io.StringIO())
    root = logging.getLogger(ROOT_LOGGER_NAME)
    ours = [h for h in root.handlers if getattr(h, "_kmeans_clustering_handler", False)]
    assert len(ours) == 1


def test_setup_logging_default_level_from_config(monkeypatch):
    monkeypatch.setattr(config.logging, "level", "ERROR")
    root = setup_logging(stream=io.StringIO())
    assert root.level == logging.ERROR


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("LOUDEST")
