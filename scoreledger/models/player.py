"""Per-wallet player record and its table."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Text
from sqlmodel import Field as ORMField, SQLModel

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


class PlayerFields(SQLModel):
    high_score: int = ORMField(default=0, ge=0, le=U32_MAX, sa_type=BigInteger)
    games_played: int = ORMField(default=0, ge=0, le=U32_MAX, sa_type=BigInteger)
    replay_data: Optional[str] = ORMField(default=None, sa_type=Text)
    display_name: Optional[str] = ORMField(default=None, max_length=30)


class PlayerRecord(PlayerFields):
    """State held for one wallet; ``PlayerRecord()`` is the zero record."""

    last_played_at: Optional[int] = ORMField(default=None, ge=0, le=U64_MAX)


class PlayerRow(PlayerFields, table=True):
    """Persisted player record, one row per wallet address."""

    __tablename__ = "player"

    wallet_address: str = ORMField(primary_key=True, max_length=128)
    # Decimal text: u64 timestamps do not fit a signed BIGINT.
    last_played_at: Optional[str] = ORMField(default=None, max_length=20)

    def to_record(self) -> PlayerRecord:
        return PlayerRecord(
            high_score=self.high_score,
            games_played=self.games_played,
            last_played_at=(
                int(self.last_played_at) if self.last_played_at is not None else None
            ),
            replay_data=self.replay_data,
            display_name=self.display_name,
        )

    def update_from(self, record: PlayerRecord) -> None:
        self.high_score = record.high_score
        self.games_played = record.games_played
        self.last_played_at = (
            str(record.last_played_at) if record.last_played_at is not None else None
        )
        self.replay_data = record.replay_data
        self.display_name = record.display_name


__all__ = ["PlayerFields", "PlayerRecord", "PlayerRow", "U32_MAX", "U64_MAX"]
