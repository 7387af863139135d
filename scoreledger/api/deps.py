"""Request dependencies: the player store and the caller's wallet."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from itsdangerous import URLSafeTimedSerializer
from sqlmodel import Session

from ..core import PLAYER_STORE, SECRET_KEY, get_session
from ..services.store import MemoryPlayerStore, PlayerStore, SqlPlayerStore

_SESSION_WALLET_KEY = "wallet"

_memory_store = MemoryPlayerStore()

wallet_signer = URLSafeTimedSerializer(SECRET_KEY, salt="wallet-auth")


def issue_wallet_token(wallet_address: str) -> str:
    """Sign ``wallet_address`` into a short-lived login token."""

    return wallet_signer.dumps(wallet_address)


def get_store(session: Session = Depends(get_session)) -> PlayerStore:
    """FastAPI dependency that returns the configured player store."""

    if PLAYER_STORE == "memory":
        return _memory_store
    return SqlPlayerStore(session)


def get_identity(request: Request) -> Optional[str]:
    """Wallet address bound to the session, if the caller has logged in."""

    wallet = request.session.get(_SESSION_WALLET_KEY)
    return str(wallet) if wallet else None


def bind_identity(request: Request, wallet_address: str) -> None:
    request.session[_SESSION_WALLET_KEY] = wallet_address


__all__ = [
    "bind_identity",
    "get_identity",
    "get_store",
    "issue_wallet_token",
    "wallet_signer",
]
