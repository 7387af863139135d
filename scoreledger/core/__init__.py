"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    PLAYER_STORE,
    SECRET_KEY,
    SEQUENCER_TOKEN,
    WALLET_TOKEN_MAX_AGE,
)
from .database import build_engine, engine, get_session, init_db
from .logging import configure_logging
from .time import unix_now, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "PLAYER_STORE",
    "SECRET_KEY",
    "SEQUENCER_TOKEN",
    "WALLET_TOKEN_MAX_AGE",
    "build_engine",
    "configure_logging",
    "engine",
    "get_session",
    "init_db",
    "unix_now",
    "utcnow",
]
