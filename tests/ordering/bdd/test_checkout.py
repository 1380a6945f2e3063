"""BDD tests for the checkout flow."""

import json

from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.ordering.checkout.checkout import Checkout
from storefront.ordering.order.order import Order

scenarios("features/checkout.feature")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price:f}'), target_fixture="product")
def product_priced(make_product, name, price):
    return make_product(name=name, price=price)


@given(parsers.cfparse("the cart holds {quantity:d} of the product"))
def cart_holds(browser, product, quantity):
    response = browser.post("/api/cart/items", json={"productId": product.id, "quantity": quantity})
    assert response.status_code == 200


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the customer authorizes payment for the cart")
def authorize_payment(browser, context):
    response = browser.post("/api/create-payment-intent", json={})
    assert response.status_code == 200, response.text
    context["intent_id"] = response.json()["paymentIntentId"]


@when("the processor accepts the payment")
def processor_accepts(fake_gateway, context):
    fake_gateway.confirm_payment_intent(context["intent_id"])


@when(parsers.cfparse('the processor declines the payment with "{reason}"'))
def processor_declines(fake_gateway, context, reason):
    fake_gateway.configure(should_succeed=False, failure_reason=reason)
    fake_gateway.confirm_payment_intent(context["intent_id"])


@when(parsers.cfparse('the processor reports the payment as "{status}"'))
def processor_reports(fake_gateway, context, status):
    fake_gateway.confirm_payment_intent(context["intent_id"], status=status)


@when("the customer places the order")
def place_order(browser, context):
    context["response"] = browser.post("/api/orders", json={"paymentIntentId": context["intent_id"]})


@when(parsers.cfparse('the processor notifies "{event_type}"'))
def processor_notifies(client, context, event_type):
    event = {"type": event_type, "data": {"object": {"id": context["intent_id"]}}}
    response = client.post("/api/webhook", content=json.dumps(event))
    assert response.status_code == 200


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is created with status "{status}"'))
def order_created(context, status):
    response = context["response"]
    assert response.status_code == 201, response.text
    assert response.json()["status"] == status
    context["order_id"] = response.json()["id"]


@then(parsers.cfparse("the order total is {total:f}"))
def order_total(context, total):
    assert context["response"].json()["total"] == total


@then("the cart is empty")
def cart_is_empty(browser):
    assert browser.get("/api/cart").json()["items"] == []


@then(parsers.cfparse("the cart still holds {count:d} item"))
def cart_still_holds(browser, count):
    assert browser.get("/api/cart").json()["totalItems"] == count


@then(parsers.cfparse("the order is refused with status {status:d}"))
def order_refused(context, status):
    assert context["response"].status_code == status


@then(parsers.cfparse('the checkout is "{state}"'))
def checkout_state(context, state):
    assert current_domain.repository_for(Checkout).get(context["intent_id"]).state == state


@then(parsers.cfparse('the stored order has status "{status}"'))
def stored_order(context, status):
    assert current_domain.repository_for(Order).get(context["order_id"]).status == status
