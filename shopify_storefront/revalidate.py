"""Webhook handler revalidating cached storefront data on Shopify events."""

import hmac
import logging
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from .client import ShopifyStorefront
from .constants import TAGS

logger = logging.getLogger(__name__)

COLLECTION_WEBHOOKS = ["collections/create", "collections/delete", "collections/update"]
PRODUCT_WEBHOOKS = ["products/create", "products/delete", "products/update"]

WebhookCallback = Callable[[Dict[str, Any]], Awaitable[None]]


class RevalidationHandler:
    """
    Handle Shopify webhooks by invalidating cache tags.

    Supports webhook topics:
    - collections/create, collections/update, collections/delete
    - products/create, products/update, products/delete

    Shopify retries any webhook not answered with 200, so every request with
    a valid secret is acknowledged, whatever its topic.
    """

    def __init__(self, storefront: ShopifyStorefront, secret: Optional[str] = None):
        """
        Initialize webhook handler.

        Args:
            storefront: Storefront client owning the cache
            secret: Shared secret expected in the ``secret`` query parameter
        """
        self.storefront = storefront
        self.secret = secret if secret is not None else storefront.config.shopify.revalidation_secret
        self._handlers: Dict[str, List[WebhookCallback]] = {}

    def verify_secret(self, secret: Optional[str]) -> bool:
        """Check the query-string secret; an unset configured secret rejects everything."""
        if not secret or not self.secret:
            return False
        return hmac.compare_digest(secret.encode("utf-8"), self.secret.encode("utf-8"))

    def on(self, topic: str):
        """
        Decorator to register extra webhook handlers.

        Args:
            topic: Webhook topic (e.g., 'products/update')

        Example:
            @handler.on('products/update')
            async def handle_product_update(payload):
                logger.info("Product updated: %s", payload.get("id"))
        """
        def decorator(func: WebhookCallback):
            self._handlers.setdefault(topic, []).append(func)
            return func
        return decorator

    async def revalidate(
        self,
        topic: Optional[str],
        secret: Optional[str],
        payload: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, Dict[str, Any]]:
        """
        Process a webhook.

        Args:
            topic: Value of the X-Shopify-Topic header
            secret: Value of the ``secret`` query parameter
            payload: Decoded webhook body

        Returns:
            HTTP status code and JSON body
        """
        topic = topic or "unknown"

        if not self.verify_secret(secret):
            logger.error("Invalid revalidation secret.")
            return 401, {"status": 401}

        is_collection_update = topic in COLLECTION_WEBHOOKS
        is_product_update = topic in PRODUCT_WEBHOOKS

        if not is_collection_update and not is_product_update:
            # Nothing to revalidate for other topics.
            return 200, {"status": 200}

        if is_collection_update:
            self.storefront.revalidate_tag(TAGS.collections)

        if is_product_update:
            self.storefront.revalidate_tag(TAGS.products)

        for handler in self._handlers.get(topic, []):
            try:
                await handler(payload or {})
            except Exception:
                logger.exception("Webhook handler failed for topic %s", topic)

        return 200, {"status": 200, "revalidated": True, "now": int(time.time() * 1000)}
