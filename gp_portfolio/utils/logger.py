"""loguru sinks for the portfolio generator."""

from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger

from gp_portfolio.config import settings


def resolve_level(debug: bool, env_level: Optional[str]) -> str:
    """Debug mode always wins; otherwise GP_PORTFOLIO_LOG_LEVEL, default INFO."""
    if debug:
        return "DEBUG"
    return (env_level or "INFO").upper()


def configure_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> str:
    level = level or resolve_level(settings.app.debug, os.getenv("GP_PORTFOLIO_LOG_LEVEL"))
    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, enqueue=True)
    if log_file:
        logger.add(log_file, level=level, rotation="1 week", enqueue=True)
    return level


configure_logger(log_file=os.getenv("GP_PORTFOLIO_LOG_FILE"))

__all__ = ["logger", "configure_logger", "resolve_level"]
