"""
Package logger for promptcodec.
Level is taken from the caller, then PROMPTCODEC_LOG_LEVEL, then WARNING.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "PROMPTCODEC_LOG_LEVEL"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("promptcodec")


def init(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if not any(getattr(h, "_promptcodec", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._promptcodec = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
