"""Leaderboard endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends

from ...models import LeaderboardEntry
from ...services.leaderboard import leaderboard
from ...services.store import PlayerStore
from ..deps import get_store

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def get_leaderboard(top_n: Optional[int] = None, store: PlayerStore = Depends(get_store)):
    """Top players by high score; ``top_n`` defaults to 10 and is clamped to 1..100."""

    return leaderboard(store, top_n)


__all__ = ["router"]
