"""Account ledger factory.

Provides get_ledger() / set_ledger() to swap implementations. The adapter is
chosen by the LEDGER_ADAPTER environment variable ("memory" by default).
"""

import os

from shipping.ledger.memory_adapter import InMemoryLedger
from shipping.ledger.port import AccountLedger

_current_ledger: AccountLedger | None = None


def get_ledger() -> AccountLedger:
    """Return the current account ledger."""
    global _current_ledger
    if _current_ledger is None:
        adapter = os.environ.get("LEDGER_ADAPTER", "memory")
        if adapter == "memory":
            _current_ledger = InMemoryLedger()
        else:
            raise ValueError(f"Unknown ledger adapter: {adapter}")
    return _current_ledger


def set_ledger(ledger: AccountLedger) -> None:
    """Override the active account ledger (useful for tests)."""
    global _current_ledger
    _current_ledger = ledger


def reset_ledger() -> None:
    """Reset to the default ledger."""
    global _current_ledger
    _current_ledger = None
