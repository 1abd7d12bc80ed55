"""Account ledger port (abstract interface).

Customer balances live outside the Shipping domain. The workflow only ever
debits or credits them; it never reads a balance.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class AccountLedger(ABC):
    """Abstract account ledger interface."""

    @abstractmethod
    def debit(self, customer_id: str, amount: Decimal) -> bool:
        """Withdraw amount from the customer's account.

        Returns:
            True if the debit was applied, False if funds were insufficient.
            A failed debit has no effect on the account.
        """
        ...

    @abstractmethod
    def credit(self, customer_id: str, amount: Decimal) -> None:
        """Deposit amount into the customer's account. Always succeeds."""
        ...
