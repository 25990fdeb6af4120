# logging_utils.py
# Shared logger setup

from __future__ import annotations

import logging

from config import LOGGER_NAME, LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the package logger, or a child of it when name is given.

    The root package logger gets a stderr handler the first time it is
    requested, unless the application already configured one.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)

    if name:
        return root.getChild(name)
    return root
