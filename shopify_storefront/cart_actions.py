"""Cart actions triggered from the storefront pages."""

import logging
from typing import Optional

from .client import ShopifyStorefront
from .constants import TAGS
from .errors import CartError
from .models.storefront_models import CartLineInput, CartLineUpdateInput

logger = logging.getLogger(__name__)


class CartSession:
    """Cart cookie state for one request."""

    def __init__(self, cart_id: Optional[str] = None):
        self.cart_id = cart_id
        self.changed = False

    def set_cart_id(self, cart_id: Optional[str]) -> None:
        if cart_id != self.cart_id:
            self.cart_id = cart_id
            self.changed = True


async def add_item(
    storefront: ShopifyStorefront,
    session: CartSession,
    selected_variant_id: Optional[str],
) -> str:
    """
    Add one unit of a variant to the visitor's cart, creating the cart first if needed.

    Returns:
        Message shown next to the add-to-cart button
    """
    if not selected_variant_id:
        return "Error adding item to cart"

    try:
        cart = await storefront.get_cart(session.cart_id)
        if not cart:
            cart = await storefront.create_cart()
            session.set_cart_id(cart.id)

        await storefront.add_to_cart(
            session.cart_id,
            [CartLineInput(merchandise_id=selected_variant_id, quantity=1)],
        )
        storefront.revalidate_tag(TAGS.cart)
        return "Item added to cart successfully"
    except Exception:
        logger.exception("Add to cart error")
        return "Error adding item to cart"


async def remove_item(
    storefront: ShopifyStorefront,
    session: CartSession,
    merchandise_id: str,
) -> Optional[str]:
    """Remove the cart line holding a variant. Returns an error message, or None on success."""
    try:
        cart = await storefront.get_cart(session.cart_id)
        if not cart:
            return "Error fetching cart"

        line_item = next((line for line in cart.lines if line.merchandise.id == merchandise_id), None)
        if not line_item or not line_item.id:
            return "Item not found in cart"

        await storefront.remove_from_cart(session.cart_id, [line_item.id])
        storefront.revalidate_tag(TAGS.cart)
        return None
    except Exception:
        logger.exception("Remove from cart error")
    return "Error removing item from cart"


async def update_item_quantity(
    storefront: ShopifyStorefront,
    session: CartSession,
    merchandise_id: str,
    quantity: int,
) -> Optional[str]:
    """
    Set the quantity of a variant in the cart.

    A quantity of zero removes the line; a variant not yet in the cart is added.
    Returns an error message, or None on success.
    """
    try:
        cart = await storefront.get_cart(session.cart_id)
        if not cart:
            return "Error fetching cart"

        line_item = next((line for line in cart.lines if line.merchandise.id == merchandise_id), None)

        if line_item and line_item.id:
            if quantity == 0:
                await storefront.remove_from_cart(session.cart_id, [line_item.id])
            else:
                await storefront.update_cart(
                    session.cart_id,
                    [CartLineUpdateInput(id=line_item.id, merchandise_id=merchandise_id, quantity=quantity)],
                )
        elif quantity > 0:
            await storefront.add_to_cart(
                session.cart_id,
                [CartLineInput(merchandise_id=merchandise_id, quantity=quantity)],
            )

        storefront.revalidate_tag(TAGS.cart)
        return None
    except Exception:
        logger.exception("Cart update error")
    return "Error updating item quantity"


async def redirect_to_checkout(storefront: ShopifyStorefront, session: CartSession) -> str:
    """
    Return the checkout URL of the visitor's cart.

    Raises:
        CartError: The cart is missing or has no checkout URL
    """
    cart = await storefront.get_cart(session.cart_id)
    if not cart or not cart.checkout_url:
        raise CartError("No checkout URL available")
    return cart.checkout_url


async def create_cart_and_set_cookie(storefront: ShopifyStorefront, session: CartSession) -> None:
    cart = await storefront.create_cart()
    session.set_cart_id(cart.id)
