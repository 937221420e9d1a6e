"""FastAPI routes serving storefront page data as JSON."""

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, Field

from .cart_actions import (
    CartSession,
    add_item,
    create_cart_and_set_cookie,
    redirect_to_checkout,
    remove_item,
    update_item_quantity,
)
from .client import ShopifyStorefront
from .constants import CART_COOKIE, SORTING, find_sort
from .errors import CartError
from .metadata import (
    collection_metadata,
    collection_opengraph_title,
    page_metadata,
    page_opengraph_title,
    product_metadata,
)
from .revalidate import RevalidationHandler

logger = logging.getLogger(__name__)


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def _cart_response(session: CartSession, content: Any, status_code: int = 200) -> JSONResponse:
    response = JSONResponse(content=content, status_code=status_code)
    if session.changed and session.cart_id:
        response.set_cookie(CART_COOKIE, session.cart_id, httponly=True, samesite="lax")
    return response


def get_storefront_router(
    storefront: ShopifyStorefront,
    revalidation_handler: Optional[RevalidationHandler] = None,
) -> APIRouter:
    """
    Create a FastAPI router for the storefront pages.

    Args:
        storefront: Storefront client
        revalidation_handler: Webhook handler; built from the storefront config when omitted

    Returns:
        APIRouter with async endpoints
    """
    router = APIRouter(tags=["storefront"])
    handler = revalidation_handler or RevalidationHandler(storefront)

    class AddItemRequest(BaseModel):
        selected_variant_id: Optional[str] = None

    class RemoveItemRequest(BaseModel):
        merchandise_id: str

    class UpdateItemRequest(BaseModel):
        merchandise_id: str
        quantity: int = Field(ge=0)

    @router.post("/api/revalidate")
    async def revalidate(request: Request):
        """Shopify webhook endpoint invalidating cached collections and products."""
        topic = request.headers.get("x-shopify-topic") or "unknown"
        secret = request.query_params.get("secret")

        payload = {}
        body = await request.body()
        if body:
            try:
                payload = json.loads(body)
            except ValueError:
                logger.warning("Ignoring undecodable webhook payload for topic %s", topic)

        status_code, content = await handler.revalidate(topic, secret, payload)
        return JSONResponse(content=content, status_code=status_code)

    @router.get("/collections")
    async def list_collections():
        return _dump(await storefront.get_collections())

    @router.get("/menu/{handle}")
    async def get_menu(handle: str):
        return _dump(await storefront.get_menu(handle))

    @router.get("/search")
    async def search(q: Optional[str] = None, sort: Optional[str] = None):
        """Search all products."""
        sort_item = find_sort(sort)
        products = await storefront.get_products(query=q, reverse=sort_item.reverse, sort_key=sort_item.sort_key)
        return {
            "query": q,
            "sort": sort_item.model_dump(),
            "sorting": [item.model_dump() for item in SORTING],
            "products": _dump(products),
        }

    @router.get("/search/{collection}")
    async def collection_page(collection: str, sort: Optional[str] = None):
        """Products of one collection with the page metadata."""
        sort_item = find_sort(sort)
        metadata = await collection_metadata(storefront, collection)
        products = await storefront.get_collection_products(
            collection,
            reverse=sort_item.reverse,
            sort_key=sort_item.sort_key,
        )
        return {
            "metadata": _dump(metadata),
            "sort": sort_item.model_dump(),
            "products": _dump(products),
        }

    @router.get("/search/{collection}/opengraph-image")
    async def collection_opengraph(collection: str):
        return {"title": await collection_opengraph_title(storefront, collection)}

    @router.get("/product/{handle}")
    async def product_page(handle: str):
        product = await storefront.get_product(handle)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        recommendations = await storefront.get_product_recommendations(product.id)
        return {
            "product": _dump(product),
            "metadata": _dump(product_metadata(product)),
            "recommendations": _dump(recommendations),
        }

    @router.get("/cart")
    async def get_cart(request: Request):
        session = CartSession(request.cookies.get(CART_COOKIE))
        cart = await storefront.get_cart(session.cart_id)
        return {"cart": _dump(cart) if cart else None}

    @router.post("/cart/create")
    async def create_cart(request: Request):
        session = CartSession(request.cookies.get(CART_COOKIE))
        await create_cart_and_set_cookie(storefront, session)
        return _cart_response(session, {"cart_id": session.cart_id})

    @router.post("/cart/add")
    async def add_to_cart(body: AddItemRequest, request: Request):
        session = CartSession(request.cookies.get(CART_COOKIE))
        message = await add_item(storefront, session, body.selected_variant_id)
        return _cart_response(session, {"message": message})

    @router.post("/cart/remove")
    async def remove_from_cart(body: RemoveItemRequest, request: Request):
        session = CartSession(request.cookies.get(CART_COOKIE))
        message = await remove_item(storefront, session, body.merchandise_id)
        return _cart_response(session, {"message": message})

    @router.post("/cart/update")
    async def update_cart(body: UpdateItemRequest, request: Request):
        session = CartSession(request.cookies.get(CART_COOKIE))
        message = await update_item_quantity(storefront, session, body.merchandise_id, body.quantity)
        return _cart_response(session, {"message": message})

    @router.post("/cart/checkout")
    async def checkout(request: Request):
        session = CartSession(request.cookies.get(CART_COOKIE))
        try:
            url = await redirect_to_checkout(storefront, session)
        except CartError as e:
            logger.info("Checkout redirect unavailable: %s", e)
            url = "/cart"
        return RedirectResponse(url, status_code=303)

    # Catch-all page routes go last.

    @router.get("/{page}")
    async def content_page(page: str):
        result = await storefront.get_page(page)
        if not result:
            raise HTTPException(status_code=404, detail="Page not found")
        return {"page": _dump(result), "metadata": _dump(page_metadata(result))}

    @router.get("/{page}/opengraph-image")
    async def page_opengraph(page: str):
        return {"title": await page_opengraph_title(storefront, page)}

    return router
