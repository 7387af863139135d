"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...services.leaderboard import DEFAULT_TOP_N, MAX_TOP_N
from ...services.registration import MAX_DISPLAY_NAME_LENGTH
from ...services.scores import MAX_REPLAY_BYTES

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> JSONResponse:
    """Kubernetes-style readiness endpoint."""

    return JSONResponse({"ok": True})


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose the limits clients need before submitting."""

    return {
        "max_replay_bytes": MAX_REPLAY_BYTES,
        "max_display_name_length": MAX_DISPLAY_NAME_LENGTH,
        "default_top_n": DEFAULT_TOP_N,
        "max_top_n": MAX_TOP_N,
    }


__all__ = ["router"]
