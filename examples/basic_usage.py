"""Example usage of the storefront data layer."""

import asyncio
import json
from shopify_storefront import ShopifyStorefront, StorefrontConfig


async def main():
    """Example: Fetch collections and products; falls back to mock data offline."""

    config = StorefrontConfig.from_env()

    async with ShopifyStorefront(config) as storefront:
        print("Fetching collections...")
        for collection in await storefront.get_collections():
            print(f"- {collection.title} ({collection.path})")

        print("\nFetching products...")
        products = await storefront.get_products(sort_key="PRICE", reverse=True)
        print(f"Fetched {len(products)} products")

        for product in products[:3]:
            price = product.price_range.min_variant_price
            print(f"\n- {product.title}: {price.amount} {price.currency_code}")
            for variant in product.variants[:3]:
                print(f"    • {variant.title}: {variant.price.amount}")

        if products:
            print("\nFirst product as JSON:")
            print(json.dumps(
                products[0].model_dump(mode='json', by_alias=True),
                indent=2,
                default=str
            ))


if __name__ == "__main__":
    asyncio.run(main())
