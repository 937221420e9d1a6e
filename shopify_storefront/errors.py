"""Exceptions raised by the storefront client."""

from typing import Any, Dict, List, Optional


class ShopifyGraphQLError(Exception):
    """First entry of a GraphQL ``errors`` array."""

    def __init__(
        self,
        message: str,
        locations: Optional[List[Dict[str, Any]]] = None,
        path: Optional[List[Any]] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.locations = locations or []
        self.path = path or []
        self.extensions = extensions or {}

    @classmethod
    def from_response(cls, error: Dict[str, Any]) -> "ShopifyGraphQLError":
        return cls(
            message=error.get("message", "Unknown GraphQL error"),
            locations=error.get("locations"),
            path=error.get("path"),
            extensions=error.get("extensions"),
        )


class StorefrontUnavailable(Exception):
    """
    Raised when a Storefront API call fails for any reason.

    Callers catch it and substitute mock data instead of failing the request.
    """

    use_mock_data = True

    def __init__(self, original_error: BaseException, query: Optional[str] = None):
        super().__init__(f"Shopify API call failed: {original_error}")
        self.original_error = original_error
        self.query = query


class CartError(Exception):
    """Raised when a cart action cannot complete."""
