"""Score submission and player registration endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...core import unix_now
from ...models import U32_MAX, U64_MAX
from ...services.leaderboard import entry_from_record, player, player_count
from ...services.ledger import RegisterPlayer, SaveScore, execute
from ...services.scores import require_identity
from ...services.store import PlayerStore
from ..deps import get_identity, get_store

router = APIRouter(tags=["players"])


class ScoreSubmission(BaseModel):
    score: int = Field(ge=0, le=U32_MAX)
    timestamp: Optional[int] = Field(default=None, ge=0, le=U64_MAX)
    replay_data: Optional[str] = None


@router.post("/scores")
def save_score(
    body: ScoreSubmission,
    identity: Optional[str] = Depends(get_identity),
    store: PlayerStore = Depends(get_store),
):
    """Submit a finished game's score for the logged-in wallet."""

    request = SaveScore(
        score=body.score,
        timestamp=body.timestamp if body.timestamp is not None else unix_now(),
        replay_data=body.replay_data,
    )
    record = execute(store, identity, request)
    return {"ok": True, "player": entry_from_record(require_identity(identity), record)}


@router.post("/players/register")
def register(
    body: RegisterPlayer,
    identity: Optional[str] = Depends(get_identity),
    store: PlayerStore = Depends(get_store),
):
    """Set or clear the logged-in wallet's display name."""

    record = execute(store, identity, body)
    return {"ok": True, "player": entry_from_record(require_identity(identity), record)}


@router.get("/players/count")
def get_player_count(store: PlayerStore = Depends(get_store)):
    return {"count": player_count(store)}


@router.get("/players/{wallet_address}")
def get_player(wallet_address: str, store: PlayerStore = Depends(get_store)):
    """Get one player's record without ranking."""

    entry = player(store, wallet_address)
    if not entry:
        raise HTTPException(404, "Player not found")
    return entry


@router.get("/players/{wallet_address}/replay")
def get_player_replay(wallet_address: str, store: PlayerStore = Depends(get_store)):
    """Replay that backs the player's current high score."""

    entry = player(store, wallet_address)
    if not entry:
        raise HTTPException(404, "Player not found")
    if entry.replay_data is None:
        raise HTTPException(404, "No replay recorded")
    return {
        "wallet_address": wallet_address,
        "high_score": entry.high_score,
        "replay_data": entry.replay_data,
    }


__all__ = ["router"]
