"""Database configuration and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_URL, DB_RESET


def build_engine(url: str) -> Engine:
    """Create an engine, preparing SQLite files and in-memory pools."""

    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if parsed.database in (None, "", ":memory:"):
        # One shared connection, otherwise each checkout sees an empty database.
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)

    Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


engine = build_engine(DATABASE_URL)


def init_db(bind: Engine = engine, reset: bool = DB_RESET) -> None:
    """Create the tables, dropping them first when a reset is requested."""

    from .. import models  # noqa: F401 - ensure models are registered with SQLModel

    if reset:
        SQLModel.metadata.drop_all(bind)
    SQLModel.metadata.create_all(bind)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["build_engine", "engine", "get_session", "init_db"]
