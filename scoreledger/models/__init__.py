"""Database model exports."""

from .leaderboard import LeaderboardEntry
from .player import PlayerRecord, PlayerRow, U32_MAX, U64_MAX

__all__ = [
    "LeaderboardEntry",
    "PlayerRecord",
    "PlayerRow",
    "U32_MAX",
    "U64_MAX",
]
