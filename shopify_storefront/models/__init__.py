"""Data models for Storefront API responses and the flattened storefront shapes."""

from .shopify_models import (
    Money,
    Image,
    SEO,
    SelectedOption,
    ProductOption,
    ProductVariant,
    PriceRange,
    Edge,
    Connection,
    ShopifyProduct,
    ShopifyCollection,
    ShopifyCart,
    CartItem,
    Page,
    ShopifyMenu,
)
from .storefront_models import (
    Product,
    Collection,
    Cart,
    Menu,
    PageMetadata,
    CartLineInput,
    CartLineUpdateInput,
)

__all__ = [
    "Money",
    "Image",
    "SEO",
    "SelectedOption",
    "ProductOption",
    "ProductVariant",
    "PriceRange",
    "Edge",
    "Connection",
    "ShopifyProduct",
    "ShopifyCollection",
    "ShopifyCart",
    "CartItem",
    "Page",
    "ShopifyMenu",
    "Product",
    "Collection",
    "Cart",
    "Menu",
    "PageMetadata",
    "CartLineInput",
    "CartLineUpdateInput",
]
