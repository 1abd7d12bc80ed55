"""Shipment aggregate (CQRS) — the record of an order handed to shipping.

A shipment has no update path. It is created once when an order ships and
deleted when the shipment is cancelled, so its lifecycle is:

    Active (within window) → Active-Expired (window elapsed, still present)
    Active → Cancelled (deleted)

Only Active → Cancelled is permitted, gated by the cancellation window.
"""

from datetime import UTC, datetime, timedelta

from protean.fields import DateTime, Identifier, Text

from shipping.domain import shipping
from shipping.shipment.events import ShipmentCreated


def within_window(created_at: datetime, now: datetime, window: timedelta) -> bool:
    """Return True while a shipment created at `created_at` may still be cancelled.

    Elapsed time is `now - created_at`. Zero or negative elapsed time (clock
    skew) counts as inside the window. Naive timestamps are treated as UTC.
    """
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now - created_at < window


@shipping.aggregate
class Shipment:
    order_id = Identifier(required=True)
    delivery_address = Text()
    shipped_at = DateTime(required=True)

    @classmethod
    def create(cls, order_id: str, delivery_address: str, shipped_at: datetime | None = None):
        """Create a shipment for an order, copying the order's address."""
        shipped_at = shipped_at or datetime.now(UTC)
        shipment = cls(
            order_id=order_id,
            delivery_address=delivery_address,
            shipped_at=shipped_at,
        )
        shipment.raise_(
            ShipmentCreated(
                shipment_id=str(shipment.id),
                order_id=order_id,
                delivery_address=delivery_address or "",
                shipped_at=shipped_at,
            )
        )
        return shipment

    def is_cancellable(self, now: datetime, window: timedelta) -> bool:
        return within_window(self.shipped_at, now, window)
