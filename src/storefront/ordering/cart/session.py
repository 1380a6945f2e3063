"""Loading and storing the cart in the signed session cookie."""

from starlette.requests import Request

from storefront.ordering.cart.cart import Cart

SESSION_CART_KEY = "cart"


def load_cart(request: Request) -> Cart:
    return Cart.from_dict(request.session.get(SESSION_CART_KEY))


def save_cart(request: Request, cart: Cart) -> None:
    if cart.is_empty:
        request.session.pop(SESSION_CART_KEY, None)
    else:
        request.session[SESSION_CART_KEY] = cart.to_dict()
