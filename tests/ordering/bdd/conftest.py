"""Shared BDD fixtures and step definitions for checkout and order management."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.ordering.order.order import Order


@pytest.fixture()
def context():
    """Mutable state passed between steps within one scenario."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the customer is signed in", target_fixture="browser")
def customer_signed_in(customer_client):
    return customer_client


@given("the administrator is signed in", target_fixture="browser")
def administrator_signed_in(admin_client):
    return admin_client


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the response status is {status:d}"))
def response_status(context, status):
    assert context["response"].status_code == status, context["response"].text


@then(parsers.cfparse('the stored order {order_id:d} has status "{status}"'))
def stored_order_status(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status
