"""Flattened leaderboard view of a player record."""

from __future__ import annotations

from typing import Optional

from sqlmodel import SQLModel


class LeaderboardEntry(SQLModel):
    """Leaderboard row as returned to clients."""

    wallet_address: str
    high_score: int
    games_played: int
    last_played_at: Optional[int] = None
    display_name: Optional[str] = None
    replay_data: Optional[str] = None


__all__ = ["LeaderboardEntry"]
