"""Logging setup for the command line."""

import logging
import sys

FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING, name: str = "noise_seed") -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATEFMT))
    logger.addHandler(handler)
    return logger
