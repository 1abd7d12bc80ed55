"""Shipping bounded context — Shipment Settlement and Reversal.

Ships simple and bundle orders, settles shipping fees against customer
accounts, and reverses shipments within a short cancellation window. Uses
CQRS: a Shipment is either present or absent, with no update path.
"""

from protean.domain import Domain

from shipping.utils.logging import configure_logging

configure_logging()

shipping = Domain(name="shipping")
