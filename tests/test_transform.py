from shopify_storefront.constants import HIDDEN_PRODUCT_TAG
from shopify_storefront.models.shopify_models import (
    Connection,
    ShopifyCart,
    ShopifyCollection,
    ShopifyProduct,
)
from shopify_storefront.reshape import (
    image_filename,
    menu_path,
    remove_edges_and_nodes,
    reshape_cart,
    reshape_collection,
    reshape_collections,
    reshape_product,
    reshape_products,
)


def test_remove_edges_and_nodes_keeps_order():
    connection = Connection[ShopifyCollection].model_validate(
        {
            "edges": [
                {"node": {"handle": "b", "title": "B"}},
                {"node": {"handle": "a", "title": "A"}},
                {"node": {"handle": "c", "title": "C"}},
            ]
        }
    )
    nodes = remove_edges_and_nodes(connection)
    assert [n.handle for n in nodes] == ["b", "a", "c"]


def test_remove_edges_and_nodes_empty_connection():
    assert remove_edges_and_nodes(Connection[ShopifyCollection].model_validate({"edges": []})) == []


def test_reshape_product_flattens_images_and_variants(product_node):
    product = reshape_product(ShopifyProduct.model_validate(product_node))
    assert [v.id for v in product.variants] == [
        "gid://shopify/ProductVariant/1",
        "gid://shopify/ProductVariant/2",
    ]
    assert len(product.images) == 2
    assert product.images[0].alt_text == "Front"
    assert product.title == "T-Shirt"
    assert product.price_range.min_variant_price.amount == "29.99"


def test_missing_alt_text_uses_filename(product_node):
    product = reshape_product(ShopifyProduct.model_validate(product_node))
    assert product.images[1].alt_text == "T-Shirt - back-view"


def test_image_filename():
    assert image_filename("https://cdn.shopify.com/s/files/front.jpg") == "front"
    assert image_filename("front") is None
    assert image_filename("https://cdn.shopify.com/s/files/front.jpg?v=1700") == "front"
    assert image_filename("https://cdn.shopify.com/s/files/front") is None
    assert image_filename("https://cdn.shopify.com") is None


def test_extensionless_image_url_falls_back_to_title(product_node):
    product_node["images"]["edges"][1]["node"]["url"] = "https://cdn.shopify.com/s/files/back-view"
    product = reshape_product(ShopifyProduct.model_validate(product_node))
    assert product.images[1].alt_text == "T-Shirt"


def test_hidden_products_are_filtered(product_node):
    product_node["tags"] = [HIDDEN_PRODUCT_TAG]
    product = ShopifyProduct.model_validate(product_node)
    assert reshape_product(product) is None
    assert reshape_product(product, filter_hidden_products=False) is not None


def test_reshape_products_skips_missing_and_hidden(product_node):
    visible = ShopifyProduct.model_validate(product_node)
    hidden_node = dict(product_node, id="gid://shopify/Product/2", tags=[HIDDEN_PRODUCT_TAG])
    hidden = ShopifyProduct.model_validate(hidden_node)
    products = reshape_products([visible, None, hidden])
    assert [p.id for p in products] == ["gid://shopify/Product/1"]


def test_reshape_cart_flattens_lines(cart_node):
    cart = reshape_cart(ShopifyCart.model_validate(cart_node))
    assert cart.id == "gid://shopify/Cart/abc"
    assert [line.id for line in cart.lines] == ["gid://shopify/CartLine/1"]
    assert cart.lines[0].merchandise.product.handle == "t-shirt"
    assert cart.cost.total_tax_amount.amount == "2.40"


def test_reshape_cart_defaults_missing_tax(cart_node):
    cart_node["cost"]["totalTaxAmount"] = None
    cart_node["cost"]["totalAmount"]["currencyCode"] = "EUR"
    cart = reshape_cart(ShopifyCart.model_validate(cart_node))
    assert cart.cost.total_tax_amount.amount == "0.0"
    assert cart.cost.total_tax_amount.currency_code == "EUR"


def test_reshape_collection_adds_search_path(collection_node):
    collection = reshape_collection(ShopifyCollection.model_validate(collection_node))
    assert collection.path == "/search/shirts"
    assert collection.seo.title == "Shirts | Acme"
    assert reshape_collection(None) is None


def test_reshape_collections_skips_empty(collection_node):
    collection = ShopifyCollection.model_validate(collection_node)
    assert [c.handle for c in reshape_collections([collection, None])] == ["shirts"]


def test_dump_uses_vendor_field_names(product_node):
    product = reshape_product(ShopifyProduct.model_validate(product_node))
    dumped = product.model_dump(mode="json", by_alias=True)
    assert dumped["priceRange"]["minVariantPrice"]["currencyCode"] == "USD"
    assert dumped["featuredImage"]["altText"] == "Front"
    assert isinstance(dumped["variants"], list)


def test_menu_path_maps_shopify_urls():
    domain = "https://test-store.myshopify.com"
    assert menu_path(f"{domain}/collections/shirts", domain) == "/search/shirts"
    assert menu_path(f"{domain}/pages/about", domain) == "/about"
    assert menu_path(f"{domain}/", domain) == "/"
    assert menu_path("/collections/all", "") == "/search/all"
