"""Per-wallet score ledger with replay-gated high scores."""

__version__ = "0.1.0"
