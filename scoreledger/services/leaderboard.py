"""Read-only leaderboard projections over a player store."""

from __future__ import annotations

from typing import List, Optional

from ..models import LeaderboardEntry, PlayerRecord
from .store import PlayerStore

DEFAULT_TOP_N = 10
MAX_TOP_N = 100


def clamp_top_n(top_n: Optional[int]) -> int:
    if top_n is None:
        return DEFAULT_TOP_N
    return max(1, min(MAX_TOP_N, int(top_n)))


def entry_from_record(wallet_address: str, record: PlayerRecord) -> LeaderboardEntry:
    """Flatten a stored record into its leaderboard view."""

    return LeaderboardEntry(
        wallet_address=wallet_address,
        high_score=record.high_score,
        games_played=record.games_played,
        last_played_at=record.last_played_at,
        display_name=record.display_name,
        replay_data=record.replay_data,
    )


def leaderboard(store: PlayerStore, top_n: Optional[int] = None) -> List[LeaderboardEntry]:
    """Top players by high score.

    Equal scores keep the store's enumeration order. Keys removed between
    enumeration and lookup are skipped.
    """

    limit = clamp_top_n(top_n)
    entries: List[LeaderboardEntry] = []
    for key in store.keys():
        record = store.get(key)
        if record is not None:
            entries.append(entry_from_record(key, record))

    entries.sort(key=lambda entry: entry.high_score, reverse=True)
    return entries[:limit]


def player(store: PlayerStore, wallet_address: str) -> Optional[LeaderboardEntry]:
    record = store.get(wallet_address)
    if record is None:
        return None
    return entry_from_record(wallet_address, record)


def player_count(store: PlayerStore) -> int:
    return len(store.keys())


__all__ = [
    "DEFAULT_TOP_N",
    "MAX_TOP_N",
    "clamp_top_n",
    "entry_from_record",
    "leaderboard",
    "player",
    "player_count",
]
