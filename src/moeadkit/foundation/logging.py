"""
Console logging for scripts and notebooks that drive moeadkit directly.

Every module logs through ``logging.getLogger(__name__)`` below the
``moeadkit`` logger and never installs handlers itself. The helper here is
the only place that does, and only when asked.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "moeadkit"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_moeadkit_logging(*, level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach a stream handler to the ``moeadkit`` logger.

    Nothing is attached when the application has already configured logging
    (root handlers present) or when moeadkit already has a handler, so
    calling this twice is harmless. Records handled here do not propagate to
    the root logger, which avoids duplicate lines.

    Returns
    -------
    logging.Logger
        The package logger.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if logging.getLogger().handlers or pkg_logger.handlers:
        return pkg_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
    return pkg_logger


__all__ = ["configure_moeadkit_logging"]
