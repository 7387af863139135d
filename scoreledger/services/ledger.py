"""Canonical ledger requests shared by direct calls and replayed messages."""

from __future__ import annotations

import logging
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..models import PlayerRecord, U32_MAX, U64_MAX
from .errors import SubmissionError
from .registration import UNSET, DisplayNameUpdate, register_player
from .scores import submit_score
from .store import PlayerStore

logger = logging.getLogger(__name__)


class SaveScore(BaseModel):
    kind: Literal["save_score"] = "save_score"
    score: int = Field(ge=0, le=U32_MAX)
    timestamp: int = Field(ge=0, le=U64_MAX)
    replay_data: Optional[str] = None


class RegisterPlayer(BaseModel):
    kind: Literal["register_player"] = "register_player"
    display_name: Optional[str] = None

    def display_name_update(self) -> DisplayNameUpdate:
        """Distinguish an omitted name from an explicit ``null``."""

        if "display_name" not in self.model_fields_set:
            return UNSET
        return self.display_name


LedgerRequest = Annotated[Union[SaveScore, RegisterPlayer], Field(discriminator="kind")]


class LedgerMessage(BaseModel):
    """A request replayed from the sequencing log with its authenticated signer."""

    signer: Optional[str] = None
    request: LedgerRequest


class MessageOutcome(BaseModel):
    index: int
    ok: bool
    error: Optional[str] = None
    detail: Optional[str] = None
    player: Optional[PlayerRecord] = None


def execute(store: PlayerStore, identity: Optional[str], request: LedgerRequest) -> PlayerRecord:
    """Apply one request on behalf of ``identity``."""

    if isinstance(request, SaveScore):
        return submit_score(
            store,
            identity,
            request.score,
            request.replay_data,
            request.timestamp,
        )
    if isinstance(request, RegisterPlayer):
        return register_player(store, identity, request.display_name_update())
    raise TypeError(f"Unsupported ledger request: {type(request).__name__}")


def replay_messages(store: PlayerStore, messages: List[LedgerMessage]) -> List[MessageOutcome]:
    """Apply messages in order.

    A rejected message is reported and the batch continues; a store failure
    propagates and stops the batch.
    """

    outcomes: List[MessageOutcome] = []
    for index, message in enumerate(messages):
        try:
            record = execute(store, message.signer, message.request)
        except SubmissionError as exc:
            outcomes.append(
                MessageOutcome(index=index, ok=False, error=exc.code, detail=exc.message)
            )
            continue
        outcomes.append(MessageOutcome(index=index, ok=True, player=record))

    accepted = sum(1 for outcome in outcomes if outcome.ok)
    logger.info("replayed %d messages accepted=%d", len(outcomes), accepted)
    return outcomes


__all__ = [
    "LedgerMessage",
    "LedgerRequest",
    "MessageOutcome",
    "RegisterPlayer",
    "SaveScore",
    "execute",
    "replay_messages",
]
