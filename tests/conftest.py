import copy
import json

import httpx
import pytest

from shopify_storefront.client import ShopifyStorefront
from shopify_storefront.config import StorefrontConfig
from shopify_storefront.queries import operation_name


PRODUCT_NODE = {
    "id": "gid://shopify/Product/1",
    "handle": "t-shirt",
    "availableForSale": True,
    "title": "T-Shirt",
    "description": "Soft cotton",
    "descriptionHtml": "<p>Soft cotton</p>",
    "options": [
        {"id": "gid://shopify/ProductOption/1", "name": "Size", "values": ["Small", "Large"]}
    ],
    "priceRange": {
        "maxVariantPrice": {"amount": "39.99", "currencyCode": "USD"},
        "minVariantPrice": {"amount": "29.99", "currencyCode": "USD"},
    },
    "variants": {
        "edges": [
            {
                "node": {
                    "id": "gid://shopify/ProductVariant/1",
                    "title": "Small",
                    "availableForSale": True,
                    "selectedOptions": [{"name": "Size", "value": "Small"}],
                    "price": {"amount": "29.99", "currencyCode": "USD"},
                }
            },
            {
                "node": {
                    "id": "gid://shopify/ProductVariant/2",
                    "title": "Large",
                    "availableForSale": False,
                    "selectedOptions": [{"name": "Size", "value": "Large"}],
                    "price": {"amount": "39.99", "currencyCode": "USD"},
                }
            },
        ]
    },
    "featuredImage": {
        "url": "https://cdn.shopify.com/s/files/front.jpg",
        "altText": "Front",
        "width": 800,
        "height": 800,
    },
    "images": {
        "edges": [
            {
                "node": {
                    "url": "https://cdn.shopify.com/s/files/front.jpg",
                    "altText": "Front",
                    "width": 800,
                    "height": 800,
                }
            },
            {
                "node": {
                    "url": "https://cdn.shopify.com/s/files/back-view.png",
                    "altText": None,
                    "width": 800,
                    "height": 800,
                }
            },
        ]
    },
    "seo": {"title": "T-Shirt | Acme", "description": "Our best t-shirt"},
    "tags": ["apparel"],
    "updatedAt": "2024-01-01T00:00:00Z",
}

CART_NODE = {
    "id": "gid://shopify/Cart/abc",
    "checkoutUrl": "https://test-store.myshopify.com/cart/c/abc",
    "cost": {
        "subtotalAmount": {"amount": "29.99", "currencyCode": "USD"},
        "totalAmount": {"amount": "29.99", "currencyCode": "USD"},
        "totalTaxAmount": {"amount": "2.40", "currencyCode": "USD"},
    },
    "lines": {
        "edges": [
            {
                "node": {
                    "id": "gid://shopify/CartLine/1",
                    "quantity": 1,
                    "cost": {"totalAmount": {"amount": "29.99", "currencyCode": "USD"}},
                    "merchandise": {
                        "id": "gid://shopify/ProductVariant/1",
                        "title": "Small",
                        "selectedOptions": [{"name": "Size", "value": "Small"}],
                        "product": {
                            "id": "gid://shopify/Product/1",
                            "handle": "t-shirt",
                            "title": "T-Shirt",
                            "featuredImage": None,
                        },
                    },
                }
            }
        ]
    },
    "totalQuantity": 1,
}

COLLECTION_NODE = {
    "handle": "shirts",
    "title": "Shirts",
    "description": "All our shirts",
    "seo": {"title": "Shirts | Acme", "description": None},
    "updatedAt": "2024-01-01T00:00:00Z",
}


class GraphQLStub:
    """Mock transport handler answering Storefront operations by name."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append({"headers": request.headers, "url": str(request.url), **payload})

        if self.error is not None:
            raise self.error

        operation = operation_name(payload.get("query"))
        if operation not in self.responses:
            return httpx.Response(200, json={"errors": [{"message": f"No stub for {operation}"}]})

        data = self.responses[operation]
        if callable(data):
            data = data(payload.get("variables", {}))
        return httpx.Response(200, json={"data": data})

    @property
    def operations(self):
        return [operation_name(r["query"]) for r in self.requests]


@pytest.fixture
def config():
    return StorefrontConfig(
        shopify={
            "store_domain": "test-store.myshopify.com",
            "storefront_access_token": "token-123",
            "revalidation_secret": "s3cret",
        },
        site_name="Test Store",
    )


@pytest.fixture
def make_storefront(config):
    """Build a storefront whose HTTP calls are answered by a GraphQLStub."""

    def _make(responses=None, error=None):
        stub = GraphQLStub(responses, error=error)
        client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
        return ShopifyStorefront(config, client=client), stub

    return _make


@pytest.fixture
def unreachable_storefront(make_storefront):
    return make_storefront(error=httpx.ConnectError("connection refused"))


@pytest.fixture
def product_node():
    return copy.deepcopy(PRODUCT_NODE)


@pytest.fixture
def cart_node():
    return copy.deepcopy(CART_NODE)


@pytest.fixture
def collection_node():
    return copy.deepcopy(COLLECTION_NODE)
