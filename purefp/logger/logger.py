"""Package-wide logger configuration for purefp."""

import logging
import os
import sys

__all__ = ["HANDLER_NAME", "logger", "setup_logger", "get_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "purefp-stderr"


def setup_logger(
    name: str = "purefp",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name (package root)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); falls back to LOG_LEVEL
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)

    # Other tools may attach their own handlers; only ours is managed here
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        # stderr keeps stdout clean for CLI output
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child logger of the package logger, e.g. purefp.parallel.mapper."""
    if module_name == "purefp" or module_name.startswith("purefp."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"purefp.{module_name}")


logger = setup_logger()
