"""Simple logging configuration for heatgrid."""

import logging
import time
from contextlib import contextmanager
from typing import Generator

from .config import get_settings


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(get_settings().log_level)
    return logger


@contextmanager
def log_execution_time(
    logger: logging.Logger, operation: str
) -> Generator[None, None, None]:
    """Context manager to log execution time of operations.

    Failures propagate to the caller unlogged.
    """
    start_time = time.time()
    logger.debug(f"Starting {operation}")
    yield
    duration = time.time() - start_time
    logger.debug(f"Completed {operation} in {duration:.3f}s")
