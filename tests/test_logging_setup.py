"""
Tests for logging configuration.
"""

import logging

from utils.logging_setup import setup_logging


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "solver.log"
    root = setup_logging(logging.DEBUG, log_file=log_file)
    try:
        logging.getLogger("tiling.resolver").debug("frontier has 3 boards")
        for handler in root.handlers:
            handler.flush()
        assert root.level == logging.DEBUG
        assert "frontier has 3 boards" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging(logging.WARNING)


def test_setup_logging_replaces_handlers():
    setup_logging(logging.INFO)
    root = setup_logging(logging.WARNING)
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
