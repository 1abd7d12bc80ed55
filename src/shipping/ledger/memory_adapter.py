"""In-memory account ledger for development and testing.

Balances are fixed-point Decimals. Each debit is an atomic
check-and-decrement under a lock, so concurrent debits never overdraw an
account. Every call is recorded in `calls` for assertions.
"""

import threading
from decimal import Decimal

from shipping.exceptions import LedgerUnavailable
from shipping.ledger.port import AccountLedger

_ZERO = Decimal("0.00")


def _as_amount(amount) -> Decimal:
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if value < 0:
        raise ValueError(f"Ledger amounts must be non-negative, got {value}")
    return value


class InMemoryLedger(AccountLedger):
    """Dictionary-backed account ledger."""

    def __init__(self) -> None:
        self._balances: dict[str, Decimal] = {}
        self._lock = threading.Lock()
        self.available: bool = True
        self.failure_reason: str = "Account ledger unavailable"
        self.calls: list[dict] = []

    def configure(self, available: bool, failure_reason: str = "Account ledger unavailable") -> None:
        """Configure ledger availability at runtime."""
        self.available = available
        self.failure_reason = failure_reason

    def open_account(self, customer_id: str, balance=_ZERO) -> None:
        with self._lock:
            self._balances[str(customer_id)] = _as_amount(balance)

    def balance_of(self, customer_id: str) -> Decimal:
        with self._lock:
            return self._balances.get(str(customer_id), _ZERO)

    def debit(self, customer_id: str, amount: Decimal) -> bool:
        value = _as_amount(amount)
        self._ensure_available()
        with self._lock:
            self.calls.append({"method": "debit", "customer_id": str(customer_id), "amount": value})
            balance = self._balances.get(str(customer_id), _ZERO)
            if balance < value:
                return False
            self._balances[str(customer_id)] = balance - value
            return True

    def credit(self, customer_id: str, amount: Decimal) -> None:
        value = _as_amount(amount)
        self._ensure_available()
        with self._lock:
            self.calls.append({"method": "credit", "customer_id": str(customer_id), "amount": value})
            self._balances[str(customer_id)] = self._balances.get(str(customer_id), _ZERO) + value

    def _ensure_available(self) -> None:
        if not self.available:
            raise LedgerUnavailable(self.failure_reason)
