"""Errors raised by the ledger engines and stores."""

from __future__ import annotations


class LedgerError(Exception):
    """Base error; ``code`` and ``status_code`` drive the HTTP response."""

    code = "ledger_error"
    status_code = 500
    default_message = "Ledger error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class SubmissionError(LedgerError):
    """A request was rejected; nothing was written."""

    code = "submission_error"
    status_code = 400


class Unauthenticated(SubmissionError):
    code = "unauthenticated"
    status_code = 401
    default_message = "Unauthorized: a verified wallet is required"


class InvalidScore(SubmissionError):
    code = "invalid_score"
    default_message = "Invalid score: score must be greater than 0"


class ReplayRequired(SubmissionError):
    code = "replay_required"
    default_message = "A new high score must include replay data"


class ReplayTooLarge(SubmissionError):
    code = "replay_too_large"
    status_code = 413
    default_message = "Replay data exceeds the size limit"


class StoreError(LedgerError):
    """The underlying store failed; the original error is chained."""

    code = "store_error"
    status_code = 503
    default_message = "Player store unavailable"


__all__ = [
    "InvalidScore",
    "LedgerError",
    "ReplayRequired",
    "ReplayTooLarge",
    "StoreError",
    "SubmissionError",
    "Unauthenticated",
]
