"""Loguru configuration shared by the HTTP server and the serverless entry."""

import sys

from loguru import logger


LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def setup_logging(level: str = "INFO", sink=sys.stdout) -> None:
    """Replace loguru's default sink with ``sink`` (stdout) at ``level``."""
    logger.remove()
    # Tracebacks must not print frame locals: they hold the API key
    logger.add(sink, format=LOG_FORMAT, level=level.upper(), backtrace=False, diagnose=False)
