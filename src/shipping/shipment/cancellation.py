"""Shipment cancellation — commands and handler.

Cancels a shipment inside the cancellation window and refunds the fees.
"""

from protean import handle
from protean.core.command_handler import BaseCommandHandler
from protean.fields import Identifier
from protean.utils.eventing import Message

from shipping.domain import shipping
from shipping.shipment.locks import order_locks
from shipping.shipment.shipment import Shipment
from shipping.shipment.store import ShipmentStore
from shipping.shipment.workflow import ShipmentWorkflow


@shipping.command(part_of="Shipment")
class CancelSimpleShipment:
    """Cancel the shipment of a simple order."""

    shipment_id = Identifier(required=True)


@shipping.command(part_of="Shipment")
class CancelBundleShipment:
    """Cancel the shipment of a bundle order."""

    shipment_id = Identifier(required=True)


@shipping.command_handler(part_of=Shipment)
class CancellationHandler(BaseCommandHandler):
    @classmethod
    def _handle(cls, item):
        # Hold the shipped order's lock until the deletion has been committed.
        command = item.to_domain_object() if isinstance(item, Message) else item
        shipment = ShipmentStore().find(command.shipment_id)
        if shipment is None:
            return super()._handle(item)

        with order_locks.hold(str(shipment.order_id)):
            return super()._handle(item)

    @handle(CancelSimpleShipment)
    def cancel_simple_shipment(self, command):
        return ShipmentWorkflow().cancel_simple_order_shipment(command.shipment_id)

    @handle(CancelBundleShipment)
    def cancel_bundle_shipment(self, command):
        return ShipmentWorkflow().cancel_compound_order_shipment(command.shipment_id)
