"""Placeholder data served when the Storefront API cannot be reached."""

import random
import re
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .models.shopify_models import (
    Image,
    Money,
    Page,
    PriceRange,
    ProductOption,
    ProductVariant,
    SEO,
    SelectedOption,
)
from .models.storefront_models import Cart, CartCost, Collection, Menu, Product

PLACEHOLDER_IMAGES: Dict[str, List[str]] = {
    "electronics": [
        "https://images.unsplash.com/photo-1468495244123-6c6c332eeece?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1484704849700-f032a568e944?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=800&h=800&fit=crop",
    ],
    "clothing": [
        "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1434389677669-e08b4cac3105?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1445205170230-053b83016050?w=800&h=800&fit=crop",
    ],
    "accessories": [
        "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1572635196237-14b3f281503f?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1544966503-7cc5ac882d5f?w=800&h=800&fit=crop",
    ],
    "home": [
        "https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1555041469-a586c61ea9bc?w=800&h=800&fit=crop",
        "https://images.unsplash.com/photo-1567538096630-e0c55bd6374c?w=800&h=800&fit=crop",
    ],
}

PRODUCT_CATEGORIES = list(PLACEHOLDER_IMAGES)

PRODUCT_NAMES: Dict[str, List[str]] = {
    "electronics": ["Wireless Headphones", "Smart Watch", "Bluetooth Speaker", "Laptop Stand", "Phone Case"],
    "clothing": ["Cotton T-Shirt", "Denim Jacket", "Casual Sneakers", "Summer Dress", "Wool Sweater"],
    "accessories": ["Leather Wallet", "Sunglasses", "Watch", "Backpack", "Belt"],
    "home": ["Coffee Mug", "Throw Pillow", "Table Lamp", "Plant Pot", "Wall Art"],
}

COLLECTION_INFO = [
    ("electronics", "Electronics", "Latest electronic gadgets and accessories",
     "Discover our latest electronic gadgets and accessories"),
    ("clothing", "Clothing", "Trendy and comfortable clothing for all occasions",
     "Shop trendy and comfortable clothing for all occasions"),
    ("accessories", "Accessories", "Complete your look with our stylish accessories",
     "Complete your look with our stylish accessories"),
    ("home", "Home & Living", "Beautiful items to make your house a home",
     "Beautiful items to make your house a home"),
]

MOCK_CART_ID = "mock-cart-id"
MOCK_CURRENCY = "USD"

_HANDLE_RE = re.compile(r"^(.*)-([0-9]+)$")


def _slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def _category_for_slug(slug: str) -> Optional[str]:
    for category, names in PRODUCT_NAMES.items():
        if slug in (_slugify(name) for name in names):
            return category
    return None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _usd(amount: float) -> Money:
    return Money(amount=f"{amount:.2f}", currency_code=MOCK_CURRENCY)


def _random_image(rng: random.Random, category: str) -> Image:
    return Image(
        url=rng.choice(PLACEHOLDER_IMAGES[category]),
        alt_text=f"{category} product image",
        width=800,
        height=800,
    )


def generate_mock_product(index: int, category: Optional[str] = None) -> Product:
    """
    Build a placeholder product.

    The same index and category always produce the same product.

    Args:
        index: Position of the product; picks the category and name
        category: Force a category instead of rotating through them

    Returns:
        Storefront product
    """
    category = category or PRODUCT_CATEGORIES[index % len(PRODUCT_CATEGORIES)]
    names = PRODUCT_NAMES[category]
    name = names[index % len(names)]
    rng = random.Random(f"{category}:{index}")

    featured_image = _random_image(rng, category)
    additional_images = [_random_image(rng, category) for _ in range(2)]

    variant_price = _usd(rng.uniform(15, 165))
    slug = _slugify(name)

    return Product(
        id=f"mock-product-{category}-{index}",
        handle=f"{slug}-{index}",
        available_for_sale=True,
        title=name,
        description=(
            f"High-quality {name.lower()} perfect for everyday use. "
            "Made with premium materials and designed for comfort and durability."
        ),
        description_html=(
            f"<p>High-quality <strong>{name.lower()}</strong> perfect for everyday use.</p>"
            "<p>Made with premium materials and designed for comfort and durability.</p>"
        ),
        options=[
            ProductOption(id=f"option-{category}-{index}-1", name="Size", values=["Small", "Medium", "Large"]),
            ProductOption(id=f"option-{category}-{index}-2", name="Color", values=["Black", "White", "Gray"]),
        ],
        price_range=PriceRange(max_variant_price=variant_price, min_variant_price=variant_price),
        variants=[
            ProductVariant(
                id=f"variant-{category}-{index}-1",
                title="Default",
                available_for_sale=True,
                selected_options=[
                    SelectedOption(name="Size", value="Medium"),
                    SelectedOption(name="Color", value="Black"),
                ],
                price=variant_price,
            )
        ],
        featured_image=featured_image,
        images=[featured_image, *additional_images],
        seo=SEO(
            title=f"{name} - Premium Quality",
            description=f"Shop our {name.lower()} for the best quality and value. Free shipping available.",
        ),
        tags=[category, "featured", "bestseller"],
        updated_at=_now(),
    )


def generate_mock_products(count: int = 12) -> List[Product]:
    return [generate_mock_product(index) for index in range(count)]


def generate_mock_collections() -> List[Collection]:
    return [
        Collection(
            handle=handle,
            title=title,
            description=description,
            seo=SEO(title=f"{title} Collection", description=seo_description),
            updated_at=_now(),
            path=f"/search/{handle}",
        )
        for handle, title, description, seo_description in COLLECTION_INFO
    ]


def get_mock_product_by_handle(handle: str) -> Product:
    """
    Rebuild a mock product from its handle.

    The trailing number is the index and the name slug picks the category, so
    products listed in a mock collection open as themselves.
    """
    match = _HANDLE_RE.match(handle)
    if not match:
        return generate_mock_product(0)
    index = int(match.group(2))
    return generate_mock_product(index, _category_for_slug(match.group(1)))


def get_mock_collection_products(collection: str, count: int = 8) -> List[Product]:
    if collection in PLACEHOLDER_IMAGES:
        return [generate_mock_product(index, collection) for index in range(count)]
    return generate_mock_products(count)


def all_collection() -> Collection:
    """Synthetic collection listing every product; always first."""
    return Collection(
        handle="",
        title="All",
        description="All products",
        seo=SEO(title="All", description="All products"),
        path="/search",
        updated_at=_now(),
    )


def mock_cart() -> Cart:
    return Cart(
        id=MOCK_CART_ID,
        checkout_url="",
        cost=CartCost(
            subtotal_amount=_usd(0),
            total_amount=_usd(0),
            total_tax_amount=_usd(0),
        ),
        lines=[],
        total_quantity=0,
    )


def mock_menu() -> List[Menu]:
    return [
        Menu(title="All", path="/search"),
        Menu(title="Electronics", path="/search/electronics"),
        Menu(title="Clothing", path="/search/clothing"),
        Menu(title="Accessories", path="/search/accessories"),
        Menu(title="Home & Living", path="/search/home"),
    ]


def mock_page(handle: str) -> Page:
    title = handle[:1].upper() + handle[1:]
    return Page(
        id=f"mock-page-{handle}",
        title=title,
        handle=handle,
        body=f"This is a mock page for {handle}.",
        body_summary=f"Mock page summary for {handle}",
        seo=SEO(title=title, description=f"Mock page for {handle}"),
        created_at=_now(),
        updated_at=_now(),
    )


def mock_pages() -> List[Page]:
    pages = []
    for handle in ("about", "contact"):
        title = handle.capitalize()
        pages.append(
            Page(
                id=f"mock-page-{handle}",
                title=title,
                handle=handle,
                body=f"This is a mock {handle} page.",
                body_summary=f"Mock {handle} page summary",
                seo=SEO(title=title, description=f"Mock {handle} page"),
                created_at=_now(),
                updated_at=_now(),
            )
        )
    return pages
