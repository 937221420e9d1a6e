"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .client import ShopifyStorefront
from .config import StorefrontConfig
from .revalidate import RevalidationHandler
from .router import get_storefront_router

logger = logging.getLogger(__name__)


def configure_logging(config: StorefrontConfig) -> None:
    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(config: StorefrontConfig, storefront: Optional[ShopifyStorefront] = None) -> FastAPI:
    """
    Create the storefront FastAPI app.

    Args:
        config: Storefront configuration
        storefront: Optional prebuilt storefront client (e.g., with a mock transport)

    Returns:
        FastAPI application

    Example:
        app = create_app(StorefrontConfig.from_env())

        # Run with uvicorn:
        # uvicorn app:app --host 0.0.0.0 --port 8000
    """
    configure_logging(config)
    storefront = storefront or ShopifyStorefront(config)
    handler = RevalidationHandler(storefront)

    if not config.shopify.store_domain:
        logger.warning("SHOPIFY_STORE_DOMAIN is not set; serving mock data")

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        await storefront.close()

    app = FastAPI(title=config.site_name, lifespan=lifespan)
    app.state.storefront = storefront
    app.state.revalidation_handler = handler

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "mock_mode": not config.shopify.store_domain}

    app.include_router(get_storefront_router(storefront, handler))
    return app


def create_app_from_env() -> FastAPI:
    """App factory for ``uvicorn --factory shopify_storefront.app:create_app_from_env``."""
    return create_app(StorefrontConfig.from_env())
