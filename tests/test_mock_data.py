from shopify_storefront.mock_data import (
    PLACEHOLDER_IMAGES,
    all_collection,
    generate_mock_collections,
    generate_mock_product,
    generate_mock_products,
    get_mock_collection_products,
    get_mock_product_by_handle,
    mock_cart,
    mock_page,
)


def test_mock_products_are_deterministic():
    first = generate_mock_product(3)
    second = generate_mock_product(3)
    assert first.price_range == second.price_range
    assert first.images == second.images


def test_mock_product_shape():
    product = generate_mock_product(0)
    assert product.id == "mock-product-electronics-0"
    assert product.handle == "wireless-headphones-0"
    assert product.tags == ["electronics", "featured", "bestseller"]
    assert [o.name for o in product.options] == ["Size", "Color"]
    assert product.featured_image == product.images[0]
    assert len(product.images) == 3
    assert all(image.url in PLACEHOLDER_IMAGES["electronics"] for image in product.images)
    assert product.variants[0].price == product.price_range.min_variant_price


def test_mock_products_rotate_categories():
    products = generate_mock_products(8)
    assert len(products) == 8
    assert [p.tags[0] for p in products[:4]] == ["electronics", "clothing", "accessories", "home"]
    assert len({p.handle for p in products}) == 8


def test_mock_product_by_handle_reads_trailing_index():
    assert get_mock_product_by_handle("cotton-t-shirt-5").id == "mock-product-clothing-5"
    assert get_mock_product_by_handle("unknown-thing-2").id == "mock-product-accessories-2"
    assert get_mock_product_by_handle("no-index").id == "mock-product-electronics-0"


def test_collection_products_open_as_themselves():
    for collection in ("electronics", "clothing", "accessories", "home"):
        for listed in get_mock_collection_products(collection):
            opened = get_mock_product_by_handle(listed.handle)
            assert opened.id == listed.id
            assert opened.title == listed.title
            assert opened.price_range == listed.price_range


def test_mock_product_ids_are_unique_across_categories():
    ids = {
        product.id
        for collection in ("electronics", "clothing", "accessories", "home")
        for product in get_mock_collection_products(collection)
    }
    assert len(ids) == 32


def test_collection_products_use_known_category():
    products = get_mock_collection_products("home", 3)
    assert [p.title for p in products] == ["Coffee Mug", "Throw Pillow", "Table Lamp"]
    assert all(p.tags[0] == "home" for p in products)


def test_collection_products_for_unknown_collection():
    products = get_mock_collection_products("sale")
    assert len(products) == 8
    assert products[1].tags[0] == "clothing"


def test_mock_collections():
    collections = generate_mock_collections()
    assert [c.handle for c in collections] == ["electronics", "clothing", "accessories", "home"]
    assert collections[3].title == "Home & Living"
    assert collections[0].seo.title == "Electronics Collection"
    assert all_collection().path == "/search"


def test_mock_cart_is_empty():
    cart = mock_cart()
    assert cart.total_quantity == 0
    assert cart.checkout_url == ""
    assert cart.cost.total_tax_amount.currency_code == "USD"


def test_mock_page_title_capitalizes_first_letter():
    page = mock_page("faq-shipping")
    assert page.title == "Faq-shipping"
    assert page.id == "mock-page-faq-shipping"
