"""Net worth ledger: balance snapshots, ledger reconciliation and time-series views."""

__version__ = "0.1.0"
