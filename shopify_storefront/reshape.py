"""Convert Storefront API responses into the flattened storefront models."""

import re
from typing import Iterable, List, Optional, TypeVar
from urllib.parse import urlsplit

from .constants import HIDDEN_PRODUCT_TAG
from .models.shopify_models import (
    Connection,
    Image,
    Money,
    ShopifyCart,
    ShopifyCollection,
    ShopifyProduct,
)
from .models.storefront_models import Cart, CartCost, Collection, Product

T = TypeVar("T")

_FILENAME_RE = re.compile(r"^(.+)\.[^.]*$")


def remove_edges_and_nodes(connection: Connection[T]) -> List[T]:
    """Flatten a connection into its nodes, keeping their order."""
    return [edge.node for edge in connection.edges]


def reshape_cart(cart: ShopifyCart) -> Cart:
    """
    Flatten cart lines and make sure a tax amount is always present.

    Args:
        cart: Cart from the Storefront API

    Returns:
        Storefront cart
    """
    tax = cart.cost.total_tax_amount or Money(
        amount="0.0",
        currency_code=cart.cost.total_amount.currency_code,
    )
    cost = CartCost(
        subtotal_amount=cart.cost.subtotal_amount,
        total_amount=cart.cost.total_amount,
        total_tax_amount=tax,
    )
    return Cart(
        id=cart.id,
        checkout_url=cart.checkout_url,
        cost=cost,
        lines=remove_edges_and_nodes(cart.lines),
        total_quantity=cart.total_quantity,
    )


def reshape_collection(collection: Optional[ShopifyCollection]) -> Optional[Collection]:
    if not collection:
        return None
    return Collection(
        **collection.model_dump(),
        path=f"/search/{collection.handle}",
    )


def reshape_collections(collections: Iterable[Optional[ShopifyCollection]]) -> List[Collection]:
    reshaped = []
    for collection in collections:
        if collection:
            reshaped_collection = reshape_collection(collection)
            if reshaped_collection:
                reshaped.append(reshaped_collection)
    return reshaped


def image_filename(url: str) -> Optional[str]:
    """Last path segment of an image URL without its extension, or None if it has none."""
    segment = urlsplit(url).path.rsplit("/", 1)[-1]
    match = _FILENAME_RE.match(segment)
    return match.group(1) if match else None


def reshape_images(images: Connection[Image], product_title: str) -> List[Image]:
    """Flatten product images, deriving alt text from the file name when missing."""
    reshaped = []
    for image in remove_edges_and_nodes(images):
        if not image.alt_text:
            filename = image_filename(image.url)
            alt_text = f"{product_title} - {filename}" if filename else product_title
            image = image.model_copy(update={"alt_text": alt_text})
        reshaped.append(image)
    return reshaped


def reshape_product(product: Optional[ShopifyProduct], filter_hidden_products: bool = True) -> Optional[Product]:
    """
    Flatten a product's image and variant connections.

    Args:
        product: Product from the Storefront API
        filter_hidden_products: Drop products tagged as hidden from the storefront

    Returns:
        Storefront product, or None if absent or hidden
    """
    if not product or (filter_hidden_products and HIDDEN_PRODUCT_TAG in product.tags):
        return None

    rest = product.model_dump(exclude={"images", "variants"})
    return Product(
        **rest,
        images=reshape_images(product.images, product.title),
        variants=remove_edges_and_nodes(product.variants),
    )


def reshape_products(products: Iterable[Optional[ShopifyProduct]]) -> List[Product]:
    reshaped = []
    for product in products:
        if product:
            reshaped_product = reshape_product(product)
            if reshaped_product:
                reshaped.append(reshaped_product)
    return reshaped


def menu_path(url: str, domain: str) -> str:
    """Map a Shopify menu URL onto the storefront's own routes."""
    path = url.replace(domain, "") if domain else url
    return path.replace("/collections", "/search").replace("/pages", "")
