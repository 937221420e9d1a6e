from shopify_storefront import StorefrontConfig, create_app

config = StorefrontConfig(
    shopify={
        "store_domain": "mystore.myshopify.com",
        "storefront_access_token": "xxxxx",
        "revalidation_secret": "change-me",
    },
    site_name="My Store",
)

app = create_app(config)

# Run: uvicorn examples.simple_app:app --reload
