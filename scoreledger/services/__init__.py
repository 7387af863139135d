"""Service layer helpers."""

from .errors import (
    InvalidScore,
    LedgerError,
    ReplayRequired,
    ReplayTooLarge,
    StoreError,
    SubmissionError,
    Unauthenticated,
)
from .leaderboard import leaderboard, player, player_count
from .ledger import LedgerMessage, RegisterPlayer, SaveScore, execute, replay_messages
from .registration import UNSET, register_player
from .scores import MAX_REPLAY_BYTES, submit_score
from .store import MemoryPlayerStore, PlayerStore, SqlPlayerStore, load_or_default

__all__ = [
    "InvalidScore",
    "LedgerError",
    "LedgerMessage",
    "MAX_REPLAY_BYTES",
    "MemoryPlayerStore",
    "PlayerStore",
    "RegisterPlayer",
    "ReplayRequired",
    "ReplayTooLarge",
    "SaveScore",
    "SqlPlayerStore",
    "StoreError",
    "SubmissionError",
    "UNSET",
    "Unauthenticated",
    "execute",
    "leaderboard",
    "load_or_default",
    "player",
    "player_count",
    "register_player",
    "replay_messages",
    "submit_score",
]
