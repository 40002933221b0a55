"""Logging configuration for the slippage guard."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: LogLevel = "INFO") -> None:
    """Configure process-wide logging.

    Intended for the embedding application; library code only obtains
    loggers through get_logger().

    Args:
        level: The logging level to use.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # jsonschema emits noisy reference-resolution messages at DEBUG
    logging.getLogger("jsonschema").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A logger instance.
    """
    return logging.getLogger(name)
