"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .leaderboard import router as leaderboard_router
from .ledger import router as ledger_router
from .players import router as players_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    auth_router,
    players_router,
    leaderboard_router,
    ledger_router,
)

__all__ = ["ALL_ROUTERS"]
