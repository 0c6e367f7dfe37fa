"""Logging configuration for html-creator."""

import sys

from loguru import logger

# Reporter messages already carry the "HTML-Creator >> " prefix, so the sink
# only adds the level.
LOG_FORMAT = "<level>{level: <8}</level> {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send html-creator logs to stderr, at DEBUG when verbose and INFO otherwise."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=LOG_FORMAT,
        colorize=False,
    )
