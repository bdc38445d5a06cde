"""Logging setup for the modtrace command line."""

import logging
import sys

LOGGER_NAME = "modtrace"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the `modtrace` logger to write trace lines to stderr.

    Args:
        verbose: Emit DEBUG trace lines when True, only warnings otherwise.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # sys.stderr may have been swapped since the last call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
