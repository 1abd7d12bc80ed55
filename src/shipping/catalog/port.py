"""Order catalog port (abstract interface).

The Shipping domain does not own orders. It reads them through this port and
receives them as one of two immutable variants, so every operation dispatches
on the variant instead of casting.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SimpleOrder:
    """An order for a single customer, shipped as one unit."""

    order_id: str
    address: str
    customer_id: str


@dataclass(frozen=True)
class BundleOrder:
    """Several simple orders shipped and billed together."""

    order_id: str
    address: str
    members: tuple[SimpleOrder, ...]

    def __post_init__(self) -> None:
        members = tuple(self.members)
        if not members:
            raise ValueError(f"Bundle order {self.order_id} must contain at least one order")
        if not all(isinstance(member, SimpleOrder) for member in members):
            raise ValueError(f"Bundle order {self.order_id} may only contain simple orders")
        object.__setattr__(self, "members", members)

    @property
    def member_count(self) -> int:
        return len(self.members)


Order = SimpleOrder | BundleOrder


class OrderCatalog(ABC):
    """Abstract order catalog interface."""

    @abstractmethod
    def find(self, order_id: str) -> Order | None:
        """Return the order with this identifier, or None if it does not exist."""
        ...

    @abstractmethod
    def owner_of(self, order: SimpleOrder) -> str:
        """Return the identifier of the customer who owns a simple order."""
        ...
