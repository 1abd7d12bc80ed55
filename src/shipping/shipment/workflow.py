"""Shipment workflow — settles shipping fees and reverses shipments.

The workflow resolves an order through the order catalog, creates or deletes
the Shipment record, and debits or credits the paying customers through the
account ledger. Every domain outcome is returned as a WorkflowResult; only
collaborator failures raise.

Partial failures are not rolled back:
- A failed debit does not remove the shipment that was already created.
- Bundle debits stop at the first failing member. Members charged before it
  stay charged.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from shipping import config
from shipping.catalog import get_catalog
from shipping.catalog.port import BundleOrder, Order, OrderCatalog, SimpleOrder
from shipping.ledger import get_ledger
from shipping.ledger.port import AccountLedger
from shipping.shipment.fees import calculate_shipping_fees
from shipping.shipment.locks import KeyedLock, order_locks
from shipping.shipment.result import ShipmentOutcome, WorkflowResult
from shipping.shipment.shipment import Shipment
from shipping.shipment.store import ShipmentStore
from shipping.utils.logging import add_context, clear_context, get_logger, log_context

logger = get_logger(__name__)

_VARIANT_NAMES = {SimpleOrder: "simple", BundleOrder: "compound"}


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _describe(window: timedelta) -> str:
    seconds = int(window.total_seconds())
    if seconds and seconds % 60 == 0:
        minutes = seconds // 60
        return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
    return f"{seconds} seconds"


class ShipmentWorkflow:
    """Ships and cancels simple and bundle orders.

    Collaborators default to the configured adapters. The workflow keeps no
    per-request state; fee shares and member counts are computed per call.
    """

    def __init__(
        self,
        catalog: OrderCatalog | None = None,
        ledger: AccountLedger | None = None,
        store: ShipmentStore | None = None,
        clock: Callable[[], datetime] | None = None,
        locks: KeyedLock | None = None,
        base_fee: Decimal | None = None,
        window: timedelta | None = None,
    ) -> None:
        self._catalog = catalog or get_catalog()
        self._ledger = ledger or get_ledger()
        self._store = store or ShipmentStore()
        self._clock = clock or _utc_now
        self._locks = locks or order_locks
        self._base_fee = base_fee
        self._window = window

    # -------------------------------------------------------------------
    # Shipping
    # -------------------------------------------------------------------
    def ship_simple_order(self, order_id: str) -> WorkflowResult:
        """Ship a simple order and charge its customer the full fee."""
        return self._ship(str(order_id), SimpleOrder)

    def ship_compound_order(self, order_id: str) -> WorkflowResult:
        """Ship a bundle order and charge each member's customer an equal share."""
        return self._ship(str(order_id), BundleOrder)

    def _ship(self, order_id: str, variant: type) -> WorkflowResult:
        with self._locks.hold(order_id), log_context(order_id=order_id):
            order = self._catalog.find(order_id)
            if order is None and variant is SimpleOrder:
                logger.info("Order not found for shipment")
                return WorkflowResult.failed(
                    ShipmentOutcome.ORDER_NOT_FOUND,
                    f"Order with ID {order_id} not found",
                )
            if order is None:
                logger.info("Compound order not found for shipment")
                return WorkflowResult.failed(
                    ShipmentOutcome.INVALID_ORDER,
                    f"Compound order with ID {order_id} not found",
                )
            if not isinstance(order, variant):
                logger.info("Order has the wrong type for shipment")
                return WorkflowResult.failed(
                    ShipmentOutcome.INVALID_ORDER,
                    f"Order with ID {order_id} is not a {_VARIANT_NAMES[variant]} order",
                )

            existing = self._store.find_by_order(order_id)
            if existing is not None:
                logger.info("Order already shipped", shipment_id=str(existing.id))
                return WorkflowResult.failed(
                    ShipmentOutcome.ALREADY_SHIPPED,
                    f"Order with ID {order_id} already has shipment {existing.id}",
                )

            shipment = self._store.create(
                Shipment.create(
                    order_id=order_id,
                    delivery_address=order.address,
                    shipped_at=self._clock(),
                )
            )
            add_context(shipment_id=str(shipment.id))
            logger.info("Shipment created")

            try:
                for customer_id, fee in self._apportion(order):
                    if not self._ledger.debit(customer_id, fee):
                        logger.warning("Shipping fee debit failed", customer_id=customer_id, amount=str(fee))
                        return WorkflowResult.failed(
                            ShipmentOutcome.INSUFFICIENT_FUNDS,
                            "Customer does not have enough funds to cover shipping fees",
                        )
                    logger.info("Shipping fee debited", customer_id=customer_id, amount=str(fee))
            finally:
                clear_context("shipment_id")

            return WorkflowResult.succeeded(ShipmentOutcome.SHIPPED, shipment)

    # -------------------------------------------------------------------
    # Cancellation
    # -------------------------------------------------------------------
    def cancel_simple_order_shipment(self, shipment_id: str) -> WorkflowResult:
        """Cancel a simple order's shipment and refund its customer."""
        return self._cancel(str(shipment_id), SimpleOrder)

    def cancel_compound_order_shipment(self, shipment_id: str) -> WorkflowResult:
        """Cancel a bundle order's shipment and refund every member's customer."""
        return self._cancel(str(shipment_id), BundleOrder)

    def _cancel(self, shipment_id: str, variant: type) -> WorkflowResult:
        with log_context(shipment_id=shipment_id):
            shipment = self._store.find(shipment_id)
            if shipment is None:
                return self._shipment_not_found(shipment_id)

            order_id = str(shipment.order_id)
            with self._locks.hold(order_id), log_context(order_id=order_id):
                # Re-read under the lock: a concurrent cancellation may have won.
                shipment = self._store.find(shipment_id)
                if shipment is None:
                    return self._shipment_not_found(shipment_id)

                window = self._cancellation_window()
                if not shipment.is_cancellable(self._clock(), window):
                    logger.info("Cancellation window expired")
                    return WorkflowResult.failed(
                        ShipmentOutcome.CANCELLATION_WINDOW_EXPIRED,
                        f"Shipment cannot be cancelled after {_describe(window)}",
                    )

                order = self._catalog.find(order_id)
                if order is None:
                    logger.warning("Shipped order no longer exists")
                    return WorkflowResult.failed(
                        ShipmentOutcome.ORDER_NOT_FOUND,
                        f"Order with ID {order_id} not found",
                    )
                if not isinstance(order, variant):
                    logger.info("Shipment belongs to the wrong order type")
                    return WorkflowResult.failed(
                        ShipmentOutcome.INVALID_ORDER,
                        f"Shipment {shipment_id} does not ship a {_VARIANT_NAMES[variant]} order",
                    )

                for customer_id, fee in self._apportion(order):
                    self._ledger.credit(customer_id, fee)
                    logger.info("Shipping fee refunded", customer_id=customer_id, amount=str(fee))

                self._store.delete(shipment)
                logger.info("Shipment cancelled")
                return WorkflowResult.succeeded(ShipmentOutcome.CANCELLED, shipment)

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _apportion(self, order: Order) -> list[tuple[str, Decimal]]:
        """Pair each paying customer with their share of the fee."""
        fees = calculate_shipping_fees(order, self._shipping_base_fee())
        payers = order.members if isinstance(order, BundleOrder) else (order,)
        return [(self._catalog.owner_of(payer), fee) for payer, fee in zip(payers, fees, strict=True)]

    def _shipping_base_fee(self) -> Decimal:
        return self._base_fee if self._base_fee is not None else config.base_fee()

    def _cancellation_window(self) -> timedelta:
        return self._window if self._window is not None else config.cancellation_window()

    @staticmethod
    def _shipment_not_found(shipment_id: str) -> WorkflowResult:
        logger.info("Shipment not found")
        return WorkflowResult.failed(
            ShipmentOutcome.SHIPMENT_NOT_FOUND,
            f"Shipment with ID {shipment_id} not found",
        )
