"""
Runtime settings, read from the environment once per process.

A .env file in the working directory is loaded first, so PORT and API_KEY
can live there during development.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    return level if level in LOG_LEVELS else default


@dataclass
class Settings:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    api_key: Optional[str] = None       # unset -> every /api request is rejected
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            port=_int_env("PORT", DEFAULT_PORT),
            host=os.getenv("HOST", "0.0.0.0"),
            api_key=os.getenv("API_KEY") or None,
            log_level=_level_env("LOG_LEVEL", "INFO"),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
