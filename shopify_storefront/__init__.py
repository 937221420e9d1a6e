"""
Shopify Storefront data layer

Fetches products, collections, carts and pages from the Shopify Storefront
GraphQL API, flattens its connection-shaped responses, and falls back to
generated mock data whenever the API cannot be reached.
"""

__version__ = "0.1.0"

from .client import ShopifyStorefront
from .config import StorefrontConfig
from .errors import StorefrontUnavailable
from .app import create_app
from .router import get_storefront_router
from .revalidate import RevalidationHandler

__all__ = [
    "ShopifyStorefront",
    "StorefrontConfig",
    "StorefrontUnavailable",
    "create_app",
    "get_storefront_router",
    "RevalidationHandler",
]
