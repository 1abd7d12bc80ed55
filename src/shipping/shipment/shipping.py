"""Order shipping — commands and handler.

Ships simple and bundle orders and settles their shipping fees.
"""

from protean import handle
from protean.core.command_handler import BaseCommandHandler
from protean.fields import Identifier
from protean.utils.eventing import Message

from shipping.domain import shipping
from shipping.shipment.locks import order_locks
from shipping.shipment.shipment import Shipment
from shipping.shipment.workflow import ShipmentWorkflow


@shipping.command(part_of="Shipment")
class ShipSimpleOrder:
    """Ship a simple order and charge its customer the shipping fee."""

    order_id = Identifier(required=True)


@shipping.command(part_of="Shipment")
class ShipBundleOrder:
    """Ship a bundle order and split the shipping fee across its members."""

    order_id = Identifier(required=True)


@shipping.command_handler(part_of=Shipment)
class ShippingHandler(BaseCommandHandler):
    @classmethod
    def _handle(cls, item):
        # `@handle` commits its unit of work after the method returns, so the
        # order lock must stay held until dispatch is complete.
        command = item.to_domain_object() if isinstance(item, Message) else item
        with order_locks.hold(str(command.order_id)):
            return super()._handle(item)

    @handle(ShipSimpleOrder)
    def ship_simple_order(self, command):
        return ShipmentWorkflow().ship_simple_order(command.order_id)

    @handle(ShipBundleOrder)
    def ship_bundle_order(self, command):
        return ShipmentWorkflow().ship_compound_order(command.order_id)
