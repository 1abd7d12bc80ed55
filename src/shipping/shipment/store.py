"""Shipment store — create, look up and delete Shipment records.

Backed by the protean repository for the Shipment aggregate, so it must be
used inside an active domain context. Only "not found" is translated (into
None); every other persistence error propagates.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shipping.shipment.shipment import Shipment


class ShipmentStore:
    @property
    def _repo(self):
        return current_domain.repository_for(Shipment)

    def create(self, shipment: Shipment) -> Shipment:
        self._repo.add(shipment)
        return shipment

    def find(self, shipment_id: str) -> Shipment | None:
        try:
            return self._repo.get(shipment_id)
        except ObjectNotFoundError:
            return None

    def find_by_order(self, order_id: str) -> Shipment | None:
        results = self._repo._dao.query.filter(order_id=str(order_id)).all()
        if not results or not results.items:
            return None
        return results.first

    def delete(self, shipment: Shipment) -> None:
        self._repo._dao.delete(shipment)
