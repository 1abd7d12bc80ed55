from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from shipping.catalog import reset_catalog, set_catalog
from shipping.catalog.memory_adapter import InMemoryOrderCatalog
from shipping.ledger import reset_ledger, set_ledger
from shipping.ledger.memory_adapter import InMemoryLedger


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(scope="session")
def shipping_bed():
    from shipping.domain import shipping

    bed = DomainFixture(shipping)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shipping_bed):
    with shipping_bed.domain_context():
        yield

        # Clear all databases and drain the event store
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def catalog():
    catalog = InMemoryOrderCatalog()
    set_catalog(catalog)
    yield catalog
    reset_catalog()


@pytest.fixture()
def ledger():
    ledger = InMemoryLedger()
    set_ledger(ledger)
    yield ledger
    reset_ledger()


@pytest.fixture()
def clock():
    return FakeClock(datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC))
