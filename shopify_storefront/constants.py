"""Shared constants: cache tags, sort options and API defaults."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class Tags:
    """Cache tags invalidated by revalidation webhooks and cart actions."""
    collections = "collections"
    products = "products"
    cart = "cart"


TAGS = Tags()

HIDDEN_PRODUCT_TAG = "nextjs-frontend-hidden"

DEFAULT_API_VERSION = "2023-01"
SHOPIFY_GRAPHQL_API_PATH = "/api/{version}/graphql.json"

CART_COOKIE = "cartId"


class SortFilterItem(BaseModel):
    """A sort option offered on search and collection pages."""
    title: str
    slug: Optional[str] = None
    sort_key: str
    reverse: bool = False

    model_config = ConfigDict(frozen=True)


DEFAULT_SORT = SortFilterItem(title="Relevance", slug=None, sort_key="RELEVANCE", reverse=False)

SORTING: List[SortFilterItem] = [
    DEFAULT_SORT,
    SortFilterItem(title="Trending", slug="trending-desc", sort_key="BEST_SELLING", reverse=False),
    SortFilterItem(title="Latest arrivals", slug="latest-desc", sort_key="CREATED_AT", reverse=True),
    SortFilterItem(title="Price: Low to high", slug="price-asc", sort_key="PRICE", reverse=False),
    SortFilterItem(title="Price: High to low", slug="price-desc", sort_key="PRICE", reverse=True),
]


def find_sort(slug: Optional[str]) -> SortFilterItem:
    """Return the sort option for a slug, falling back to relevance."""
    for item in SORTING:
        if item.slug == slug:
            return item
    return DEFAULT_SORT
