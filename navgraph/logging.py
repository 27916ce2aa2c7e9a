"""Logging setup shared by the navgraph package and its CLI.

Every module logs through a child of the ``navgraph`` logger. Records go to
stderr by default because the CLI writes its JSON results to stdout.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "navgraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package root has its handler; cleared by reset_logging()
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``navgraph`` logger.

    Subsequent calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        # stdout is reserved for command output
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Records also reach the global root, where pytest's caplog listens
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the ``navgraph`` configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance with level NOTSET, so the root level applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI's ``--verbose``/``--quiet`` flags to a logging level.

    ``verbose`` wins when both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def set_global_log_level(level: int) -> None:
    """Set the level of the ``navgraph`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so the next setup starts fresh."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
