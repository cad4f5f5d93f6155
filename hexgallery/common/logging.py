# hexgallery/common/logging.py
from __future__ import annotations

import logging
from typing import Optional


def _level_from_settings() -> int:
    from hexgallery.common.settings import get_settings

    level = logging.getLevelName(get_settings().log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "uvicorn.error", level: Optional[int] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once. The level defaults
    to settings.log_level.
    """
    if level is None:
        level = _level_from_settings()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
