"""Endpoint for messages replayed by the sequencing layer."""

from __future__ import annotations

import hmac
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel

from ...core import SEQUENCER_TOKEN
from ...services.ledger import LedgerMessage, replay_messages
from ...services.store import PlayerStore
from ..deps import get_store

router = APIRouter(tags=["ledger"])


class MessageBatch(BaseModel):
    messages: List[LedgerMessage]


def _check_sequencer(token: Optional[str]) -> None:
    if not SEQUENCER_TOKEN:
        raise HTTPException(503, "Message replay is not configured")
    if not token or not hmac.compare_digest(token, SEQUENCER_TOKEN):
        raise HTTPException(403, "Invalid sequencer token")


@router.post("/ledger/messages")
def apply_messages(
    body: MessageBatch,
    x_sequencer_token: Optional[str] = Header(default=None),
    store: PlayerStore = Depends(get_store),
):
    """Apply signed messages in log order with the same rules as direct calls."""

    _check_sequencer(x_sequencer_token)
    outcomes = replay_messages(store, body.messages)
    return {
        "applied": sum(1 for outcome in outcomes if outcome.ok),
        "rejected": sum(1 for outcome in outcomes if not outcome.ok),
        "results": [outcome.model_dump() for outcome in outcomes],
    }


__all__ = ["router"]
