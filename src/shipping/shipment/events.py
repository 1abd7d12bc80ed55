"""Domain events for the Shipment aggregate."""

from protean.fields import DateTime, Identifier, Text

from shipping.domain import shipping


@shipping.event(part_of="Shipment")
class ShipmentCreated:
    """A shipment record was created for an order."""

    __version__ = 1

    shipment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    delivery_address = Text()
    shipped_at = DateTime(required=True)
