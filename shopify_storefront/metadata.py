"""Document metadata and opengraph titles for storefront pages."""

from .client import ShopifyStorefront
from .constants import HIDDEN_PRODUCT_TAG
from .models.shopify_models import Page
from .models.storefront_models import PageMetadata, Product


async def collection_metadata(storefront: ShopifyStorefront, handle: str) -> PageMetadata:
    """Metadata for a collection page, with a generic fallback when the collection is unknown."""
    collection = await storefront.get_collection(handle)
    if not collection:
        return PageMetadata(
            title=f"{handle} Collection",
            description=f"Browse {handle} products",
        )

    return PageMetadata(
        title=collection.seo.title or collection.title,
        description=collection.seo.description or collection.description or f"{collection.title} products",
    )


async def collection_opengraph_title(storefront: ShopifyStorefront, handle: str) -> str:
    collection = await storefront.get_collection(handle)
    if not collection:
        return "Collection"
    return collection.seo.title or collection.title


async def page_opengraph_title(storefront: ShopifyStorefront, handle: str) -> str:
    page = await storefront.get_page(handle)
    if not page:
        return "Page"
    return (page.seo.title if page.seo else None) or page.title


def product_metadata(product: Product) -> PageMetadata:
    """Metadata for a product page; hidden products are kept out of search indexes."""
    indexable = HIDDEN_PRODUCT_TAG not in product.tags
    image = product.featured_image

    open_graph = None
    if image:
        open_graph = {
            "images": [
                {
                    "url": image.url,
                    "width": image.width,
                    "height": image.height,
                    "alt": image.alt_text,
                }
            ]
        }

    return PageMetadata(
        title=product.seo.title or product.title,
        description=product.seo.description or product.description,
        robots={
            "index": indexable,
            "follow": indexable,
            "googleBot": {"index": indexable, "follow": indexable},
        },
        open_graph=open_graph,
    )


def page_metadata(page: Page) -> PageMetadata:
    seo = page.seo
    return PageMetadata(
        title=(seo.title if seo else None) or page.title,
        description=(seo.description if seo else None) or page.body_summary,
        open_graph={
            "publishedTime": page.created_at.isoformat() if page.created_at else None,
            "modifiedTime": page.updated_at.isoformat() if page.updated_at else None,
            "type": "article",
        },
    )
