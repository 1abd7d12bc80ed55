"""Uniform outcome of every shipment workflow operation."""

from dataclasses import dataclass
from enum import Enum

from shipping.shipment.schemas import ShipmentSchema, WorkflowResultSchema
from shipping.shipment.shipment import Shipment


class ShipmentOutcome(Enum):
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"
    ORDER_NOT_FOUND = "Order_Not_Found"
    INVALID_ORDER = "Invalid_Order"
    INSUFFICIENT_FUNDS = "Insufficient_Funds"
    SHIPMENT_NOT_FOUND = "Shipment_Not_Found"
    CANCELLATION_WINDOW_EXPIRED = "Cancellation_Window_Expired"
    ALREADY_SHIPPED = "Already_Shipped"


_SUCCESSFUL_OUTCOMES = {ShipmentOutcome.SHIPPED, ShipmentOutcome.CANCELLED}

_MESSAGES = {
    ShipmentOutcome.SHIPPED: "Shipment successful",
    ShipmentOutcome.CANCELLED: "Shipment cancellation successful",
    ShipmentOutcome.ORDER_NOT_FOUND: "Order not found",
    ShipmentOutcome.INVALID_ORDER: "Invalid order",
    ShipmentOutcome.INSUFFICIENT_FUNDS: "Insufficient funds",
    ShipmentOutcome.SHIPMENT_NOT_FOUND: "Shipment not found",
    ShipmentOutcome.CANCELLATION_WINDOW_EXPIRED: "Shipment cancellation failed",
    ShipmentOutcome.ALREADY_SHIPPED: "Order already shipped",
}


@dataclass(frozen=True)
class WorkflowResult:
    """Tagged result: a Shipment payload on success, an explanation on failure."""

    outcome: ShipmentOutcome
    shipment: Shipment | None = None
    explanation: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.shipment is None:
            raise ValueError(f"{self.outcome.value} result requires a shipment")
        if not self.success and not self.explanation:
            raise ValueError(f"{self.outcome.value} result requires an explanation")
        if self.shipment is not None and self.explanation is not None:
            raise ValueError("A result carries either a shipment or an explanation, not both")

    @classmethod
    def succeeded(cls, outcome: ShipmentOutcome, shipment: Shipment) -> "WorkflowResult":
        return cls(outcome=outcome, shipment=shipment)

    @classmethod
    def failed(cls, outcome: ShipmentOutcome, explanation: str) -> "WorkflowResult":
        return cls(outcome=outcome, explanation=explanation)

    @property
    def success(self) -> bool:
        return self.outcome in _SUCCESSFUL_OUTCOMES

    @property
    def message(self) -> str:
        return _MESSAGES[self.outcome]

    def to_payload(self) -> WorkflowResultSchema:
        if self.shipment is not None:
            detail = ShipmentSchema(
                shipment_id=str(self.shipment.id),
                order_id=str(self.shipment.order_id),
                shipped_at=self.shipment.shipped_at,
                delivery_address=self.shipment.delivery_address,
            )
        else:
            detail = self.explanation
        return WorkflowResultSchema(success=self.success, message=self.message, detail=detail)
