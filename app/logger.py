"""
Package logger for the product API.

Messages go to stdout. The level is owned by Settings.log_level and is
applied by create_app() through configure(); until then it stays at INFO.
"""
import logging
import sys
from typing import Optional

from .config import LOG_LEVELS

logger = logging.getLogger("product_api")
logger.setLevel(logging.INFO)
logger.propagate = False

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(_handler)


def configure(level: str) -> None:
    """Apply a level name from Settings; unknown names fall back to INFO."""
    name = level.upper()
    logger.setLevel(name if name in LOG_LEVELS else "INFO")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Child of the package logger, e.g. get_logger("api") -> product_api.api."""
    if name:
        return logging.getLogger(f"product_api.{name}")
    return logger
