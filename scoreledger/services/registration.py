"""Display name registration."""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..models import PlayerRecord
from .scores import require_identity
from .store import PlayerStore, load_or_default

logger = logging.getLogger(__name__)

MAX_DISPLAY_NAME_LENGTH = 30


class _Unset:
    """Marker for a display name that was not sent at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

DisplayNameUpdate = Union[str, None, _Unset]


def normalize_display_name(raw: str) -> Optional[str]:
    """Return the trimmed name, or ``None`` when it is empty or too long."""

    trimmed = raw.strip()
    if not trimmed or len(trimmed) > MAX_DISPLAY_NAME_LENGTH:
        return None
    return trimmed


def apply_display_name(current: PlayerRecord, display_name: DisplayNameUpdate) -> PlayerRecord:
    """Return ``current`` with the requested name change applied.

    ``UNSET`` keeps the name, ``None`` clears it, and a string that fails
    validation is ignored rather than rejected.
    """

    if display_name is UNSET:
        return current.model_copy()
    if display_name is None:
        return current.model_copy(update={"display_name": None})

    name = normalize_display_name(display_name)
    if name is None:
        logger.debug("ignoring invalid display name %r", display_name)
        return current.model_copy()
    return current.model_copy(update={"display_name": name})


def register_player(
    store: PlayerStore,
    identity: Optional[str],
    display_name: DisplayNameUpdate = UNSET,
) -> PlayerRecord:
    """Apply a name change for ``identity`` and persist the record."""

    wallet = require_identity(identity)
    updated = apply_display_name(load_or_default(store, wallet), display_name)
    store.put(wallet, updated)
    logger.info("player registered wallet=%s display_name=%r", wallet, updated.display_name)
    return updated


__all__ = [
    "DisplayNameUpdate",
    "MAX_DISPLAY_NAME_LENGTH",
    "UNSET",
    "apply_display_name",
    "normalize_display_name",
    "register_player",
]
