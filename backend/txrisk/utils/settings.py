"""Environment-driven configuration for the risk engine service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()

LOGGER = logging.getLogger(__name__)

DEFAULT_BLOCKSCOUT_API_URL = "https://eth.blockscout.com/api/v2"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from environment variables."""

    blockscout_api_url: str
    blockscout_timeout: float
    transaction_fetch_limit: int
    cors_allow_origins: List[str]


def _read_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        LOGGER.warning("Ignoring invalid %s=%r, using default %s", name, raw, default)
        return default
    if value <= 0:
        LOGGER.warning("Ignoring non-positive %s=%r, using default %s", name, raw, default)
        return default
    return value


def _read_origins() -> List[str]:
    env_origins = os.getenv("CORS_ALLOW_ORIGINS")
    if not env_origins:
        return list(DEFAULT_CORS_ORIGINS)
    origins = [origin.strip() for origin in env_origins.split(",") if origin.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance, reading the environment once."""
    base_url = (os.getenv("BLOCKSCOUT_API_URL") or "").strip() or DEFAULT_BLOCKSCOUT_API_URL
    return Settings(
        blockscout_api_url=base_url.rstrip("/"),
        blockscout_timeout=_read_number("BLOCKSCOUT_TIMEOUT", 30.0, float),
        transaction_fetch_limit=_read_number("TRANSACTION_FETCH_LIMIT", 10, int),
        cors_allow_origins=_read_origins(),
    )


__all__ = ["Settings", "get_settings"]
