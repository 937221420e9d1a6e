import pytest

from shopify_storefront.cart_actions import (
    CartSession,
    add_item,
    create_cart_and_set_cookie,
    redirect_to_checkout,
    remove_item,
    update_item_quantity,
)
from shopify_storefront.errors import CartError

CART_ID = "gid://shopify/Cart/abc"
VARIANT_ID = "gid://shopify/ProductVariant/1"


def cart_responses(cart_node):
    return {
        "getCart": {"cart": cart_node},
        "createCart": {"cartCreate": {"cart": cart_node}},
        "addToCart": {"cartLinesAdd": {"cart": cart_node}},
        "removeFromCart": {"cartLinesRemove": {"cart": cart_node}},
        "editCartItems": {"cartLinesUpdate": {"cart": cart_node}},
    }


@pytest.mark.asyncio
async def test_add_item_requires_variant(make_storefront):
    storefront, stub = make_storefront()
    assert await add_item(storefront, CartSession(), None) == "Error adding item to cart"
    assert stub.requests == []


@pytest.mark.asyncio
async def test_add_item_creates_cart_when_missing(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))
    session = CartSession()

    message = await add_item(storefront, session, VARIANT_ID)

    assert message == "Item added to cart successfully"
    assert stub.operations == ["createCart", "addToCart"]
    assert session.changed
    assert session.cart_id == CART_ID
    assert stub.requests[1]["variables"]["cartId"] == CART_ID


@pytest.mark.asyncio
async def test_add_item_to_existing_cart(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))
    session = CartSession(CART_ID)

    assert await add_item(storefront, session, VARIANT_ID) == "Item added to cart successfully"
    assert stub.operations == ["getCart", "addToCart"]
    assert not session.changed


@pytest.mark.asyncio
async def test_add_item_in_mock_mode(unreachable_storefront):
    storefront, _ = unreachable_storefront
    session = CartSession()

    assert await add_item(storefront, session, VARIANT_ID) == "Item added to cart successfully"
    assert session.cart_id == "mock-cart-id"


@pytest.mark.asyncio
async def test_line_edits_in_mock_mode_report_missing_cart(unreachable_storefront):
    storefront, _ = unreachable_storefront
    session = CartSession("mock-cart-id")

    assert await remove_item(storefront, session, VARIANT_ID) == "Error fetching cart"
    assert await update_item_quantity(storefront, session, VARIANT_ID, 2) == "Error fetching cart"


@pytest.mark.asyncio
async def test_add_item_reports_unexpected_errors(make_storefront):
    storefront, _ = make_storefront({"getCart": {"cart": {"unexpected": True}}})
    assert await add_item(storefront, CartSession(CART_ID), VARIANT_ID) == "Error adding item to cart"


@pytest.mark.asyncio
async def test_remove_item(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))

    assert await remove_item(storefront, CartSession(CART_ID), VARIANT_ID) is None
    assert stub.operations == ["getCart", "removeFromCart"]
    assert stub.requests[1]["variables"]["lineIds"] == ["gid://shopify/CartLine/1"]


@pytest.mark.asyncio
async def test_remove_item_not_in_cart(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))
    message = await remove_item(storefront, CartSession(CART_ID), "gid://shopify/ProductVariant/99")
    assert message == "Item not found in cart"
    assert stub.operations == ["getCart"]


@pytest.mark.asyncio
async def test_remove_item_without_cart(make_storefront):
    storefront, _ = make_storefront()
    assert await remove_item(storefront, CartSession(), VARIANT_ID) == "Error fetching cart"


@pytest.mark.asyncio
async def test_update_quantity_zero_removes_line(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))
    assert await update_item_quantity(storefront, CartSession(CART_ID), VARIANT_ID, 0) is None
    assert stub.operations == ["getCart", "removeFromCart"]


@pytest.mark.asyncio
async def test_update_quantity_edits_line(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))
    assert await update_item_quantity(storefront, CartSession(CART_ID), VARIANT_ID, 3) is None
    assert stub.operations == ["getCart", "editCartItems"]
    assert stub.requests[1]["variables"]["lines"] == [
        {"id": "gid://shopify/CartLine/1", "merchandiseId": VARIANT_ID, "quantity": 3}
    ]


@pytest.mark.asyncio
async def test_update_quantity_adds_missing_line(make_storefront, cart_node):
    storefront, stub = make_storefront(cart_responses(cart_node))
    other = "gid://shopify/ProductVariant/2"
    assert await update_item_quantity(storefront, CartSession(CART_ID), other, 2) is None
    assert stub.operations == ["getCart", "addToCart"]
    assert stub.requests[1]["variables"]["lines"] == [{"merchandiseId": other, "quantity": 2}]


@pytest.mark.asyncio
async def test_update_quantity_without_cart(make_storefront):
    storefront, _ = make_storefront()
    assert await update_item_quantity(storefront, CartSession(), VARIANT_ID, 1) == "Error fetching cart"


@pytest.mark.asyncio
async def test_redirect_to_checkout(make_storefront, cart_node):
    storefront, _ = make_storefront(cart_responses(cart_node))
    url = await redirect_to_checkout(storefront, CartSession(CART_ID))
    assert url == "https://test-store.myshopify.com/cart/c/abc"


@pytest.mark.asyncio
async def test_redirect_to_checkout_without_cart(unreachable_storefront):
    storefront, _ = unreachable_storefront
    with pytest.raises(CartError):
        await redirect_to_checkout(storefront, CartSession(CART_ID))


@pytest.mark.asyncio
async def test_create_cart_and_set_cookie(make_storefront, cart_node):
    storefront, _ = make_storefront(cart_responses(cart_node))
    session = CartSession()
    await create_cart_and_set_cookie(storefront, session)
    assert session.cart_id == CART_ID
    assert session.changed
