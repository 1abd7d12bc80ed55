"""Shared BDD fixtures and step definitions for the Shipping domain."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, then
from shipping.catalog.port import BundleOrder, SimpleOrder
from shipping.shipment.store import ShipmentStore
from shipping.shipment.workflow import ShipmentWorkflow


@pytest.fixture()
def workflow(catalog, ledger, clock):
    return ShipmentWorkflow(catalog=catalog, ledger=ledger, clock=clock)


@pytest.fixture()
def outcome():
    """Container for the latest workflow result and the shipment under test."""
    return {"result": None, "shipment": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('customer "{customer_id}" has a balance of {amount}'))
def customer_with_balance(ledger, customer_id, amount):
    ledger.open_account(customer_id, Decimal(amount))


@given(parsers.cfparse('a simple order "{order_id}" for customer "{customer_id}"'))
def simple_order(catalog, order_id, customer_id):
    catalog.add(SimpleOrder(order_id=order_id, address="221B Baker St", customer_id=customer_id))


@given(parsers.cfparse('a bundle order "{order_id}" for customers "{customer_ids}"'))
def bundle_order(catalog, order_id, customer_ids):
    members = [
        SimpleOrder(order_id=f"{order_id}-{index}", address="221B Baker St", customer_id=customer_id)
        for index, customer_id in enumerate(customer_ids.split(","), start=1)
    ]
    catalog.add(BundleOrder(order_id=order_id, address="1 Bundle Way", members=members))


@given(parsers.cfparse('simple order "{order_id}" has been shipped'))
def simple_order_shipped(workflow, outcome, order_id):
    outcome["result"] = workflow.ship_simple_order(order_id)
    outcome["shipment"] = outcome["result"].shipment


@given(parsers.cfparse('bundle order "{order_id}" has been shipped'))
def bundle_order_shipped(workflow, outcome, order_id):
    outcome["result"] = workflow.ship_compound_order(order_id)
    outcome["shipment"] = outcome["result"].shipment


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the result is successful with message "{message}"'))
def result_successful(outcome, message):
    result = outcome["result"]
    assert result.success is True
    assert result.message == message


@then(parsers.cfparse('the result fails with message "{message}"'))
def result_failed(outcome, message):
    result = outcome["result"]
    assert result.success is False
    assert result.message == message
    assert result.explanation


@then(parsers.cfparse('the shipment is for order "{order_id}"'))
def shipment_for_order(outcome, order_id):
    assert outcome["result"].shipment.order_id == order_id


@then(parsers.cfparse('customer "{customer_id}" has a balance of {amount}'))
def customer_balance_is(ledger, customer_id, amount):
    assert ledger.balance_of(customer_id) == Decimal(amount)


@then("the shipment no longer exists")
def shipment_gone(outcome):
    assert ShipmentStore().find(outcome["shipment"].id) is None


@then("the shipment still exists")
def shipment_present(outcome):
    assert ShipmentStore().find(outcome["shipment"].id) is not None
