"""Configuration management for the Shopify storefront."""

import os
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .constants import DEFAULT_API_VERSION, SHOPIFY_GRAPHQL_API_PATH


def ensure_starts_with(value: str, prefix: str) -> str:
    """Prefix a string unless it already carries the prefix."""
    return value if value.startswith(prefix) else f"{prefix}{value}"


class ShopifyConfig(BaseModel):
    """Shopify Storefront API configuration."""
    store_domain: str = Field("", description="Shop domain (e.g., 'mystore.myshopify.com'); empty runs on mock data")
    storefront_access_token: str = Field("", description="Storefront API access token")
    api_version: str = Field(DEFAULT_API_VERSION, description="Storefront API version")
    revalidation_secret: Optional[str] = Field(None, description="Shared secret expected on revalidation webhooks")
    timeout_seconds: float = Field(30.0, gt=0, description="Timeout for Storefront API calls")

    @property
    def domain(self) -> str:
        if not self.store_domain:
            return ""
        return ensure_starts_with(self.store_domain, "https://")

    @property
    def endpoint(self) -> str:
        return f"{self.domain}{SHOPIFY_GRAPHQL_API_PATH.format(version=self.api_version)}"


class CacheConfig(BaseModel):
    """Tag cache configuration."""
    enabled: bool = Field(True, description="Cache tagged read operations")
    ttl_seconds: int = Field(86400, gt=0, description="Cache lifetime in seconds")


class TelemetryConfig(BaseModel):
    """Metrics configuration."""
    console_export: bool = Field(False, description="Print collected metrics to the console")


class StorefrontConfig(BaseModel):
    """Main configuration for the storefront application."""
    shopify: ShopifyConfig = Field(default_factory=ShopifyConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    site_name: str = Field("Acme Store", description="Site name used in page metadata")
    log_level: str = Field("INFO", description="Logging level")
    log_file: Optional[str] = Field(None, description="Write logs to this file instead of stderr")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "shopify": {
                    "store_domain": "mystore.myshopify.com",
                    "storefront_access_token": "xxxxxxxxxxxx",
                    "api_version": "2023-01",
                    "revalidation_secret": "change-me"
                },
                "cache": {
                    "enabled": True,
                    "ttl_seconds": 86400
                },
                "site_name": "My Store"
            }
        }
    )

    @classmethod
    def from_env(cls) -> "StorefrontConfig":
        """Build a configuration from SHOPIFY_* environment variables."""
        return cls(
            shopify=ShopifyConfig(
                store_domain=os.getenv("SHOPIFY_STORE_DOMAIN", ""),
                storefront_access_token=os.getenv("SHOPIFY_STOREFRONT_ACCESS_TOKEN", ""),
                api_version=os.getenv("SHOPIFY_API_VERSION", DEFAULT_API_VERSION),
                revalidation_secret=os.getenv("SHOPIFY_REVALIDATION_SECRET") or None,
            ),
            site_name=os.getenv("SITE_NAME", "Acme Store"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
