"""In-memory order catalog for development and testing.

Orders are registered with add(); bundle members are registered alongside
their bundle so they can also be looked up on their own. The catalog can be
switched to an unavailable state to exercise collaborator failures.
"""

from shipping.catalog.port import BundleOrder, Order, OrderCatalog, SimpleOrder
from shipping.exceptions import CatalogUnavailable


class InMemoryOrderCatalog(OrderCatalog):
    """Dictionary-backed order catalog."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self.available: bool = True
        self.failure_reason: str = "Order catalog unavailable"

    def configure(self, available: bool, failure_reason: str = "Order catalog unavailable") -> None:
        """Configure catalog availability at runtime."""
        self.available = available
        self.failure_reason = failure_reason

    def add(self, order: Order) -> Order:
        if isinstance(order, BundleOrder):
            for member in order.members:
                self._orders.setdefault(str(member.order_id), member)
        self._orders[str(order.order_id)] = order
        return order

    def find(self, order_id: str) -> Order | None:
        self._ensure_available()
        return self._orders.get(str(order_id))

    def owner_of(self, order: SimpleOrder) -> str:
        self._ensure_available()
        return str(order.customer_id)

    def _ensure_available(self) -> None:
        if not self.available:
            raise CatalogUnavailable(self.failure_reason)
