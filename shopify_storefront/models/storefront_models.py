"""Flattened models handed to the storefront pages."""

from typing import Optional, List, Dict, Any
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from .shopify_models import (
    ShopifyModel,
    Money,
    Image,
    SEO,
    ProductOption,
    ProductVariant,
    PriceRange,
    CartItem,
)


class Product(ShopifyModel):
    """Product with images and variants as plain lists."""
    id: str
    handle: str
    available_for_sale: bool = Field(True, alias="availableForSale")
    title: str
    description: str = ""
    description_html: str = Field("", alias="descriptionHtml")
    options: List[ProductOption] = Field(default_factory=list)
    price_range: PriceRange = Field(alias="priceRange")
    variants: List[ProductVariant] = Field(default_factory=list)
    featured_image: Optional[Image] = Field(None, alias="featuredImage")
    images: List[Image] = Field(default_factory=list)
    seo: SEO = Field(default_factory=SEO)
    tags: List[str] = Field(default_factory=list)
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class Collection(ShopifyModel):
    """Collection with the storefront path it is browsed under."""
    handle: str
    title: str
    description: str = ""
    seo: SEO = Field(default_factory=SEO)
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    path: str


class CartCost(ShopifyModel):
    subtotal_amount: Money = Field(alias="subtotalAmount")
    total_amount: Money = Field(alias="totalAmount")
    total_tax_amount: Money = Field(alias="totalTaxAmount")


class Cart(ShopifyModel):
    """Cart with its lines flattened and tax always present."""
    id: Optional[str] = None
    checkout_url: str = Field("", alias="checkoutUrl")
    cost: CartCost
    lines: List[CartItem] = Field(default_factory=list)
    total_quantity: int = Field(0, alias="totalQuantity")


class Menu(ShopifyModel):
    title: str
    path: str


class PageMetadata(BaseModel):
    """Title/description pair rendered into the document head."""
    title: str
    description: Optional[str] = None
    robots: Optional[Dict[str, Any]] = None
    open_graph: Optional[Dict[str, Any]] = Field(None, alias="openGraph")

    model_config = ConfigDict(populate_by_name=True)


class CartLineInput(BaseModel):
    merchandise_id: str = Field(alias="merchandiseId")
    quantity: int = Field(1, ge=1)

    model_config = ConfigDict(populate_by_name=True)


class CartLineUpdateInput(BaseModel):
    id: str
    merchandise_id: str = Field(alias="merchandiseId")
    quantity: int = Field(ge=0)

    model_config = ConfigDict(populate_by_name=True)
