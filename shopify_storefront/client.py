"""Storefront API client: fetching, reshaping and mock-data fallback."""

import hashlib
import json
import logging
from time import perf_counter
from typing import Any, Dict, Iterable, List, Optional, Sequence

import httpx

from .cache import TagCache
from .config import StorefrontConfig
from .constants import TAGS
from .errors import ShopifyGraphQLError, StorefrontUnavailable
from .mock_data import (
    all_collection,
    generate_mock_collections,
    generate_mock_products,
    get_mock_collection_products,
    get_mock_product_by_handle,
    mock_cart,
    mock_menu,
    mock_page,
    mock_pages,
)
from .models.shopify_models import (
    Connection,
    Page,
    ShopifyCart,
    ShopifyCollection,
    ShopifyMenu,
    ShopifyProduct,
)
from .models.storefront_models import (
    Cart,
    CartLineInput,
    CartLineUpdateInput,
    Collection,
    Menu,
    Product,
)
from .queries import (
    ADD_TO_CART_MUTATION,
    CREATE_CART_MUTATION,
    EDIT_CART_ITEMS_MUTATION,
    GET_CART_QUERY,
    GET_COLLECTION_PRODUCTS_QUERY,
    GET_COLLECTION_QUERY,
    GET_COLLECTIONS_QUERY,
    GET_MENU_QUERY,
    GET_PAGE_QUERY,
    GET_PAGES_QUERY,
    GET_PRODUCT_QUERY,
    GET_PRODUCT_RECOMMENDATIONS_QUERY,
    GET_PRODUCTS_QUERY,
    REMOVE_FROM_CART_MUTATION,
    operation_name,
)
from .reshape import (
    menu_path,
    remove_edges_and_nodes,
    reshape_cart,
    reshape_collection,
    reshape_collections,
    reshape_product,
    reshape_products,
)
from .telemetry import get_fetch_duration_histogram

logger = logging.getLogger(__name__)


class ShopifyStorefront:
    """
    Data layer behind the storefront pages.

    This class handles:
    - Posting GraphQL documents to the Storefront API
    - Caching tagged read operations until their tag is revalidated
    - Flattening connection-shaped responses into storefront models
    - Substituting mock data whenever the API cannot be reached
    """

    def __init__(
        self,
        config: StorefrontConfig,
        client: Optional[Any] = None,
        cache: Optional[TagCache] = None,
    ):
        """
        Initialize the storefront client.

        Args:
            config: Storefront configuration
            client: Optional HTTP client (e.g., an httpx.AsyncClient with a mock transport)
            cache: Optional cache; built from config when omitted
        """
        self.config = config

        if cache is not None:
            self.cache = cache
        elif config.cache.enabled:
            self.cache = TagCache(ttl=config.cache.ttl_seconds)
        else:
            self.cache = None

        self.fetch_duration = get_fetch_duration_histogram(config.telemetry.console_export)

        # HTTP client
        if client is not None:
            self.client = client
            self._owns_client = False
        else:
            self.client = httpx.AsyncClient(timeout=config.shopify.timeout_seconds)
            self._owns_client = True

    async def close(self):
        """Close HTTP client."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @staticmethod
    def _cache_key(payload: Dict[str, Any]) -> str:
        raw = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    def _record(self, started: float, operation: str, outcome: str) -> None:
        duration_ms = (perf_counter() - started) * 1000
        self.fetch_duration.record(duration_ms, attributes={"operation": operation, "outcome": outcome})

    async def shopify_fetch(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        tags: Sequence[str] = (),
    ) -> Dict[str, Any]:
        """
        Post a GraphQL document to the Storefront API.

        Args:
            query: GraphQL document
            variables: Operation variables; None values are dropped
            headers: Extra request headers
            tags: Cache tags; tagged calls are served from cache when possible

        Returns:
            Dict with the HTTP ``status`` and the decoded JSON ``body``

        Raises:
            StorefrontUnavailable: The call failed for any reason
        """
        started = perf_counter()
        operation = operation_name(query)

        payload: Dict[str, Any] = {}
        if query:
            payload["query"] = query
        variables = {k: v for k, v in (variables or {}).items() if v is not None}
        if variables:
            payload["variables"] = variables

        cache_key = None
        if self.cache is not None and tags:
            cache_key = self._cache_key(payload)
            cached = self.cache.get(cache_key)
            if cached is not None:
                self._record(started, operation, "cache")
                return cached

        try:
            response = await self.client.post(
                self.config.shopify.endpoint,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "X-Shopify-Storefront-Access-Token": self.config.shopify.storefront_access_token,
                    **(headers or {}),
                },
            )
            response.raise_for_status()
            body = response.json()
            errors = body.get("errors")
            if errors:
                first = errors[0] if isinstance(errors, list) else {"message": str(errors)}
                raise ShopifyGraphQLError.from_response(first)
        except Exception as e:
            self._record(started, operation, "fallback")
            logger.warning("Shopify API call failed, using mock data: %s: %s", operation, e)
            raise StorefrontUnavailable(e, query) from e

        result = {"status": response.status_code, "body": body}
        if cache_key is not None:
            self.cache.set(cache_key, result, tags)
        self._record(started, operation, "ok")
        return result

    def revalidate_tag(self, tag: str) -> int:
        """Invalidate cached responses carrying a tag."""
        if self.cache is None:
            return 0
        removed = self.cache.invalidate_tag(tag)
        logger.info("Revalidated tag %s (%d entries)", tag, removed)
        return removed

    # Cart

    async def create_cart(self) -> Cart:
        try:
            res = await self.shopify_fetch(CREATE_CART_MUTATION)
        except StorefrontUnavailable:
            logger.info("Using mock cart data for createCart")
            return mock_cart()
        return reshape_cart(ShopifyCart.model_validate(res["body"]["data"]["cartCreate"]["cart"]))

    async def add_to_cart(self, cart_id: Optional[str], lines: Iterable[CartLineInput]) -> Cart:
        try:
            res = await self.shopify_fetch(
                ADD_TO_CART_MUTATION,
                variables={
                    "cartId": cart_id,
                    "lines": [line.model_dump(by_alias=True) for line in lines],
                },
            )
        except StorefrontUnavailable:
            logger.info("Using mock cart data for addToCart")
            return mock_cart()
        return reshape_cart(ShopifyCart.model_validate(res["body"]["data"]["cartLinesAdd"]["cart"]))

    async def remove_from_cart(self, cart_id: Optional[str], line_ids: List[str]) -> Cart:
        try:
            res = await self.shopify_fetch(
                REMOVE_FROM_CART_MUTATION,
                variables={"cartId": cart_id, "lineIds": line_ids},
            )
        except StorefrontUnavailable:
            logger.info("Using mock cart data for removeFromCart")
            return mock_cart()
        return reshape_cart(ShopifyCart.model_validate(res["body"]["data"]["cartLinesRemove"]["cart"]))

    async def update_cart(self, cart_id: Optional[str], lines: Iterable[CartLineUpdateInput]) -> Cart:
        try:
            res = await self.shopify_fetch(
                EDIT_CART_ITEMS_MUTATION,
                variables={
                    "cartId": cart_id,
                    "lines": [line.model_dump(by_alias=True) for line in lines],
                },
            )
        except StorefrontUnavailable:
            logger.info("Using mock cart data for updateCart")
            return mock_cart()
        return reshape_cart(ShopifyCart.model_validate(res["body"]["data"]["cartLinesUpdate"]["cart"]))

    async def get_cart(self, cart_id: Optional[str]) -> Optional[Cart]:
        """
        Fetch the visitor's cart.

        Args:
            cart_id: Value of the cart cookie

        Returns:
            Cart, or None without a cart id, for a checked-out cart or in mock mode
        """
        if not cart_id:
            return None

        try:
            res = await self.shopify_fetch(GET_CART_QUERY, variables={"cartId": cart_id})
        except StorefrontUnavailable:
            logger.info("Using empty cart (mock mode)")
            return None

        # Carts become null once checked out.
        cart = res["body"]["data"].get("cart")
        if not cart:
            return None
        return reshape_cart(ShopifyCart.model_validate(cart))

    # Collections

    async def get_collection(self, handle: str) -> Optional[Collection]:
        try:
            res = await self.shopify_fetch(
                GET_COLLECTION_QUERY,
                variables={"handle": handle},
                tags=[TAGS.collections],
            )
        except StorefrontUnavailable:
            logger.info("Using mock collection data for: %s", handle)
            return None

        collection = res["body"]["data"].get("collection")
        if not collection:
            return None
        return reshape_collection(ShopifyCollection.model_validate(collection))

    async def get_collection_products(
        self,
        collection: str,
        reverse: Optional[bool] = None,
        sort_key: Optional[str] = None,
    ) -> List[Product]:
        """
        Fetch the products of a collection.

        Args:
            collection: Collection handle
            reverse: Reverse the sort order
            sort_key: Product sort key; CREATED_AT is sent as the collection key CREATED

        Returns:
            Visible products, in the order the API returned them
        """
        try:
            res = await self.shopify_fetch(
                GET_COLLECTION_PRODUCTS_QUERY,
                variables={
                    "handle": collection,
                    "reverse": reverse,
                    "sortKey": "CREATED" if sort_key == "CREATED_AT" else sort_key,
                },
                tags=[TAGS.collections, TAGS.products],
            )
        except StorefrontUnavailable:
            logger.info("Using mock collection products for: %s", collection)
            return get_mock_collection_products(collection, 8)

        data = res["body"]["data"].get("collection")
        if not data:
            logger.info("No collection found for `%s`", collection)
            return []

        products = Connection[ShopifyProduct].model_validate(data["products"])
        return reshape_products(remove_edges_and_nodes(products))

    async def get_collections(self) -> List[Collection]:
        """
        Fetch the browsable collections.

        The synthetic "All" collection always comes first; collections whose
        handle starts with ``hidden`` are left out.
        """
        try:
            res = await self.shopify_fetch(GET_COLLECTIONS_QUERY, tags=[TAGS.collections])
        except StorefrontUnavailable:
            logger.info("Using mock collections data")
            return [all_collection(), *generate_mock_collections()]

        connection = Connection[ShopifyCollection].model_validate(res["body"]["data"]["collections"])
        collections = reshape_collections(remove_edges_and_nodes(connection))
        return [
            all_collection(),
            *[c for c in collections if not c.handle.startswith("hidden")],
        ]

    # Menus and pages

    async def get_menu(self, handle: str) -> List[Menu]:
        try:
            res = await self.shopify_fetch(
                GET_MENU_QUERY,
                variables={"handle": handle},
                tags=[TAGS.collections],
            )
        except StorefrontUnavailable:
            logger.info("Using mock menu data for: %s", handle)
            return mock_menu()

        data = (res["body"].get("data") or {}).get("menu")
        if not data:
            return []
        menu = ShopifyMenu.model_validate(data)
        domain = self.config.shopify.domain
        return [Menu(title=item.title, path=menu_path(item.url, domain)) for item in menu.items]

    async def get_page(self, handle: str) -> Optional[Page]:
        try:
            res = await self.shopify_fetch(GET_PAGE_QUERY, variables={"handle": handle})
        except StorefrontUnavailable:
            logger.info("Using mock page data for: %s", handle)
            return mock_page(handle)

        page = res["body"]["data"].get("pageByHandle")
        return Page.model_validate(page) if page else None

    async def get_pages(self) -> List[Page]:
        try:
            res = await self.shopify_fetch(GET_PAGES_QUERY)
        except StorefrontUnavailable:
            logger.info("Using mock pages data")
            return mock_pages()

        return remove_edges_and_nodes(Connection[Page].model_validate(res["body"]["data"]["pages"]))

    # Products

    async def get_product(self, handle: str) -> Optional[Product]:
        try:
            res = await self.shopify_fetch(
                GET_PRODUCT_QUERY,
                variables={"handle": handle},
                tags=[TAGS.products],
            )
        except StorefrontUnavailable:
            logger.info("Using mock product data for handle: %s", handle)
            return get_mock_product_by_handle(handle)

        product = res["body"]["data"].get("product")
        if not product:
            return None
        # Hidden products stay reachable by direct link.
        return reshape_product(ShopifyProduct.model_validate(product), filter_hidden_products=False)

    async def get_product_recommendations(self, product_id: str) -> List[Product]:
        try:
            res = await self.shopify_fetch(
                GET_PRODUCT_RECOMMENDATIONS_QUERY,
                variables={"productId": product_id},
                tags=[TAGS.products],
            )
        except StorefrontUnavailable:
            logger.info("Using mock product recommendations for: %s", product_id)
            return generate_mock_products(4)

        recommendations = res["body"]["data"].get("productRecommendations") or []
        return reshape_products(ShopifyProduct.model_validate(p) for p in recommendations if p)

    async def get_products(
        self,
        query: Optional[str] = None,
        reverse: Optional[bool] = None,
        sort_key: Optional[str] = None,
    ) -> List[Product]:
        try:
            res = await self.shopify_fetch(
                GET_PRODUCTS_QUERY,
                variables={"query": query, "reverse": reverse, "sortKey": sort_key},
                tags=[TAGS.products],
            )
        except StorefrontUnavailable:
            logger.info("Using mock products data")
            return generate_mock_products(12)

        products = Connection[ShopifyProduct].model_validate(res["body"]["data"]["products"])
        return reshape_products(remove_edges_and_nodes(products))
