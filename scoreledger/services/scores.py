"""Score submission rules.

A submission is accepted or rejected as a whole. Accepted submissions bump
``games_played`` and ``last_played_at``; only a strictly higher score moves
``high_score``, and it must arrive with replay data that is stored alongside
it. Rejections never touch the store.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..models import PlayerRecord, U32_MAX, U64_MAX
from .errors import InvalidScore, ReplayRequired, ReplayTooLarge, Unauthenticated
from .store import PlayerStore, load_or_default

logger = logging.getLogger(__name__)

MAX_REPLAY_BYTES = 1_000_000


def require_identity(identity: Optional[str]) -> str:
    """Return the verified caller or raise :class:`Unauthenticated`."""

    if identity is None or not str(identity).strip():
        raise Unauthenticated()
    return str(identity)


def replay_size(replay_data: str) -> int:
    """Size of the replay payload in UTF-8 bytes."""

    return len(replay_data.encode("utf-8"))


def apply_score(
    current: PlayerRecord,
    score: int,
    replay_data: Optional[str],
    timestamp: int,
) -> PlayerRecord:
    """Return the record that results from accepting ``score``.

    Raises a :class:`SubmissionError` subclass instead when the submission is
    not acceptable. ``current`` is never modified.
    """

    if score <= 0 or score > U32_MAX:
        raise InvalidScore()
    if timestamp < 0 or timestamp > U64_MAX:
        raise InvalidScore("Invalid timestamp")

    changes = {
        "games_played": current.games_played + 1,
        "last_played_at": timestamp,
    }

    if score > current.high_score:
        if replay_data is None:
            raise ReplayRequired()
        size = replay_size(replay_data)
        if size > MAX_REPLAY_BYTES:
            raise ReplayTooLarge(
                f"Replay data is {size} bytes; the limit is {MAX_REPLAY_BYTES}"
            )
        changes["high_score"] = score
        changes["replay_data"] = replay_data

    return current.model_copy(update=changes)


def submit_score(
    store: PlayerStore,
    identity: Optional[str],
    score: int,
    replay_data: Optional[str],
    timestamp: int,
) -> PlayerRecord:
    """Validate a score for ``identity`` and persist the updated record."""

    wallet = require_identity(identity)
    current = load_or_default(store, wallet)
    try:
        updated = apply_score(current, score, replay_data, timestamp)
    except InvalidScore as exc:
        logger.info("score rejected wallet=%s score=%s code=%s", wallet, score, exc.code)
        raise
    except (ReplayRequired, ReplayTooLarge) as exc:
        logger.info(
            "score rejected wallet=%s score=%s high=%s code=%s",
            wallet,
            score,
            current.high_score,
            exc.code,
        )
        raise

    store.put(wallet, updated)
    logger.info(
        "score accepted wallet=%s score=%s high=%s games=%s new_high=%s",
        wallet,
        score,
        updated.high_score,
        updated.games_played,
        updated.high_score != current.high_score,
    )
    return updated


__all__ = [
    "MAX_REPLAY_BYTES",
    "apply_score",
    "replay_size",
    "require_identity",
    "submit_score",
]
