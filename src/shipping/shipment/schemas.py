"""Pydantic schemas for serialised workflow results.

These are the external contracts handed to whatever transport sits in front
of the workflow. They are kept separate from the domain model.
"""

from datetime import datetime

from pydantic import BaseModel


class ShipmentSchema(BaseModel):
    shipment_id: str
    order_id: str
    shipped_at: datetime
    delivery_address: str | None = None


class WorkflowResultSchema(BaseModel):
    success: bool
    message: str
    detail: ShipmentSchema | str
