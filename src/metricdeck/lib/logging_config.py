"""Logging configuration for metricdeck.

All modules log through loggers under the ``metricdeck`` namespace. The CLI
calls ``setup_logging`` once per command to pick the level from its flags;
library callers that never call it inherit whatever the host application set.
"""

import logging
import sys

LOGGER_NAMESPACE = "metricdeck"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the metricdeck logger hierarchy.

    Args:
        verbose: Enable DEBUG level output
        quiet: Only show errors (takes precedence over verbose)
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(level)

    # Replace handlers so repeated CLI invocations don't stack output
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger, nesting it under the metricdeck namespace if needed."""
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
