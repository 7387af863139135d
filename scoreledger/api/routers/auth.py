"""Wallet session endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from itsdangerous import BadSignature, SignatureExpired
from pydantic import BaseModel

from ...core import WALLET_TOKEN_MAX_AGE
from ...services.leaderboard import player
from ...services.store import PlayerStore
from ..deps import bind_identity, get_identity, get_store, wallet_signer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


class WalletLogin(BaseModel):
    wallet_address: str
    token: str


@router.post("/auth/wallet")
def auth_wallet(body: WalletLogin, request: Request):
    """Bind a wallet to the session after checking its signed token."""

    wallet_address = body.wallet_address.strip()
    if not wallet_address:
        raise HTTPException(400, "Wallet address required")

    try:
        signed_wallet = wallet_signer.loads(body.token, max_age=WALLET_TOKEN_MAX_AGE)
    except SignatureExpired as exc:
        raise HTTPException(401, "Wallet token expired") from exc
    except BadSignature as exc:
        raise HTTPException(401, "Invalid wallet token") from exc

    if signed_wallet != wallet_address:
        raise HTTPException(401, "Wallet token does not match wallet address")

    bind_identity(request, wallet_address)
    logger.info("wallet session opened wallet=%s", wallet_address)
    return {"ok": True, "wallet_address": wallet_address}


@router.post("/auth/logout")
def auth_logout(request: Request):
    request.session.clear()
    return JSONResponse({"ok": True})


@router.get("/me")
def me(
    identity: Optional[str] = Depends(get_identity),
    store: PlayerStore = Depends(get_store),
):
    if not identity:
        return JSONResponse({"user": None})
    entry = player(store, identity)
    return {
        "user": {
            "wallet_address": identity,
            "player": entry.model_dump() if entry else None,
        }
    }


__all__ = ["router"]
