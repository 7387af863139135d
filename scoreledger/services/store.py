"""Keyed player record stores."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..models import PlayerRecord, PlayerRow
from .errors import StoreError

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError, not a DBAPI error, for integers it cannot bind.
_DB_ERRORS = (SQLAlchemyError, OverflowError)


class PlayerStore(Protocol):
    def get(self, key: str) -> Optional[PlayerRecord]: ...

    def put(self, key: str, record: PlayerRecord) -> None: ...

    def keys(self) -> List[str]: ...


def load_or_default(store: PlayerStore, key: str) -> PlayerRecord:
    """Return the stored record for ``key`` or the zero record. Never writes."""

    return store.get(key) or PlayerRecord()


class MemoryPlayerStore:
    """Process-local store; records are copied in and out."""

    def __init__(self):
        self._records: Dict[str, PlayerRecord] = {}

    def get(self, key: str) -> Optional[PlayerRecord]:
        record = self._records.get(key)
        return record.model_copy() if record is not None else None

    def put(self, key: str, record: PlayerRecord) -> None:
        self._records[key] = record.model_copy()

    def keys(self) -> List[str]:
        return list(self._records)


class SqlPlayerStore:
    """Store backed by the ``player`` table through a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str) -> Optional[PlayerRecord]:
        try:
            row = self.session.get(PlayerRow, key)
        except _DB_ERRORS as exc:
            raise self._failed("read", key, exc) from exc
        return row.to_record() if row else None

    def put(self, key: str, record: PlayerRecord) -> None:
        try:
            row = self.session.get(PlayerRow, key)
            if row is None:
                row = PlayerRow(wallet_address=key)
            row.update_from(record)
            self.session.add(row)
            self.session.commit()
        except _DB_ERRORS as exc:
            raise self._failed("write", key, exc) from exc

    def keys(self) -> List[str]:
        try:
            return list(self.session.exec(select(PlayerRow.wallet_address)).all())
        except _DB_ERRORS as exc:
            raise self._failed("enumerate", None, exc) from exc

    def _failed(self, action: str, key: Optional[str], exc: Exception) -> StoreError:
        self.session.rollback()
        logger.error("player store %s failed key=%s", action, key, exc_info=exc)
        return StoreError(f"Player store {action} failed")


__all__ = [
    "MemoryPlayerStore",
    "PlayerStore",
    "SqlPlayerStore",
    "load_or_default",
]
