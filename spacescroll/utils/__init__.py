"""
Utility functions for spacescroll: the package logger, a type check for
arguments, and where to find the images.
"""

import os
import logging

from ._dirs import get_assets_dir  # noqa: F401

logger = logging.getLogger("spacescroll")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("SPACESCROLL_LOG_LEVEL", "")
    if level:
        set_log_level(level)


def set_log_level(level):
    """Set the level of the spacescroll logger from a name or a number."""
    try:
        if isinstance(level, str) and level.isnumeric():
            logger.setLevel(int(level))
        elif isinstance(level, str):
            logger.setLevel(level.upper())
        else:
            logger.setLevel(level)
    except (TypeError, ValueError):
        logger.warning(f"Invalid spacescroll log level: {level}")


_set_log_level()


def assert_type(name, value, *classes):
    """Raise a TypeError if ``value`` is not an instance of one of ``classes``.

    A leading None in ``classes`` also allows ``value`` to be None.
    """
    allow_none = classes[0] is None
    if allow_none:
        classes = classes[1:]
    if (allow_none and value is None) or isinstance(value, classes):
        return

    expected = " | ".join(cls.__name__ for cls in classes)
    if allow_none:
        expected += " or None"
    raise TypeError(
        f"Expected '{name}' to be an instance of {expected}, "
        f"but got {type(value).__name__} object."
    )
