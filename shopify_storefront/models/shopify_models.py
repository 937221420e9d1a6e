"""Pydantic models for Shopify Storefront API responses."""

from typing import Optional, List, Generic, TypeVar
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

T = TypeVar("T")


class ShopifyModel(BaseModel):
    """Base for immutable models mirroring the vendor schema."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Money(ShopifyModel):
    """Amount with currency."""
    amount: str
    currency_code: str = Field(alias="currencyCode")


class Image(ShopifyModel):
    """Shopify image data."""
    url: str
    alt_text: Optional[str] = Field(None, alias="altText")
    width: Optional[int] = None
    height: Optional[int] = None


class SEO(ShopifyModel):
    title: Optional[str] = None
    description: Optional[str] = None


class SelectedOption(ShopifyModel):
    name: str
    value: str


class ProductOption(ShopifyModel):
    id: str
    name: str
    values: List[str] = Field(default_factory=list)


class ProductVariant(ShopifyModel):
    """Shopify product variant."""
    id: str
    title: str
    available_for_sale: bool = Field(True, alias="availableForSale")
    selected_options: List[SelectedOption] = Field(default_factory=list, alias="selectedOptions")
    price: Money


class PriceRange(ShopifyModel):
    max_variant_price: Money = Field(alias="maxVariantPrice")
    min_variant_price: Money = Field(alias="minVariantPrice")


class Edge(ShopifyModel, Generic[T]):
    node: T


class Connection(ShopifyModel, Generic[T]):
    """Cursor-paginated list wrapper (``edges { node }``)."""
    edges: List[Edge[T]] = Field(default_factory=list)


class ShopifyProduct(ShopifyModel):
    """Product as returned by the Storefront API."""
    id: str
    handle: str
    available_for_sale: bool = Field(True, alias="availableForSale")
    title: str
    description: str = ""
    description_html: str = Field("", alias="descriptionHtml")
    options: List[ProductOption] = Field(default_factory=list)
    price_range: PriceRange = Field(alias="priceRange")
    variants: Connection[ProductVariant] = Field(default_factory=Connection[ProductVariant])
    featured_image: Optional[Image] = Field(None, alias="featuredImage")
    images: Connection[Image] = Field(default_factory=Connection[Image])
    seo: SEO = Field(default_factory=SEO)
    tags: List[str] = Field(default_factory=list)
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class ShopifyCollection(ShopifyModel):
    handle: str
    title: str
    description: str = ""
    seo: SEO = Field(default_factory=SEO)
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class CartProduct(ShopifyModel):
    id: str
    handle: str
    title: str
    featured_image: Optional[Image] = Field(None, alias="featuredImage")


class Merchandise(ShopifyModel):
    id: str
    title: str
    selected_options: List[SelectedOption] = Field(default_factory=list, alias="selectedOptions")
    product: CartProduct


class CartItemCost(ShopifyModel):
    total_amount: Money = Field(alias="totalAmount")


class CartItem(ShopifyModel):
    """A cart line."""
    id: Optional[str] = None
    quantity: int
    cost: CartItemCost
    merchandise: Merchandise


class CartCost(ShopifyModel):
    subtotal_amount: Money = Field(alias="subtotalAmount")
    total_amount: Money = Field(alias="totalAmount")
    total_tax_amount: Optional[Money] = Field(None, alias="totalTaxAmount")


class ShopifyCart(ShopifyModel):
    """Cart as returned by the Storefront API."""
    id: Optional[str] = None
    checkout_url: str = Field("", alias="checkoutUrl")
    cost: CartCost
    lines: Connection[CartItem] = Field(default_factory=Connection[CartItem])
    total_quantity: int = Field(0, alias="totalQuantity")


class Page(ShopifyModel):
    """Static content page."""
    id: str
    title: str
    handle: str
    body: str = ""
    body_summary: str = Field("", alias="bodySummary")
    seo: Optional[SEO] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class ShopifyMenuItem(ShopifyModel):
    title: str
    url: str


class ShopifyMenu(ShopifyModel):
    items: List[ShopifyMenuItem] = Field(default_factory=list)
