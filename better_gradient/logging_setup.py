"""Console logging for the command line entry point."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "better_gradient"


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Library code only logs; handlers are installed here, once.
    """
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        return logger

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(stream_handler)
    return logger
