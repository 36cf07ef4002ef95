"""Tests for formatting, routing and list helpers."""

from catalog_ui import utils


def test_format_rupiah_uses_dot_grouping():
    assert utils.format_rupiah(1250000) == "Rp 1.250.000"
    assert utils.format_rupiah(18500) == "Rp 18.500"
    assert utils.format_rupiah(0) == "Rp 0"


def test_price_label_falls_back_to_contact_sales():
    assert utils.price_label(None) == utils.CONTACT_SALES_LABEL
    assert utils.price_label(0) == utils.CONTACT_SALES_LABEL
    assert utils.price_label(425000) == "Rp 425.000"


def test_result_summary():
    assert utils.result_summary(3) == "3 produk"


def test_products_url_encodes_query():
    """Submitting a query routes to the results page with q set."""

    assert utils.products_url("s7-1500") == "/products?q=s7-1500"
    assert utils.products_url("kabel 2.5 mm") == "/products?q=kabel%202.5%20mm"
    assert utils.products_url("a&b/c") == "/products?q=a%26b%2Fc"


def test_products_url_without_query():
    """An empty or blank submit routes to the bare listing."""

    assert utils.products_url("") == "/products"
    assert utils.products_url("   ") == "/products"
    assert utils.products_url(None) == "/products"


def test_product_url():
    assert utils.product_url(1001) == "/product/1001"


def test_whatsapp_url_encodes_message():
    url = utils.whatsapp_url("Halo, stok S7-1500?", number="628111086180")

    assert url == "https://wa.me/628111086180?text=Halo%2C%20stok%20S7-1500%3F"


def test_stock_inquiry_message(make_product):
    message = utils.stock_inquiry_message(make_product(12, name="Omron Timer"))

    assert message.endswith("produk: Omron Timer (ID: 12)")


def test_matches_query_on_name_or_category(make_product):
    product = make_product(1, name="Schneider TeSys D", category="Contactor")

    assert utils.matches_query(product, "tesys")
    assert utils.matches_query(product, "CONTACT")
    assert not utils.matches_query(product, "schneider electric")


def test_sort_products_by_price_treats_missing_as_zero(make_product):
    products = [
        make_product(1, name="B", price=300),
        make_product(2, name="A", price=None),
        make_product(3, name="C", price=100),
    ]

    assert [p.id for p in utils.sort_products(products, "price-asc")] == [2, 3, 1]
    assert [p.id for p in utils.sort_products(products, "price-desc")] == [1, 3, 2]


def test_sort_products_by_name_is_case_insensitive(make_product):
    products = [make_product(1, name="omron"), make_product(2, name="Mitsubishi")]

    assert [p.id for p in utils.sort_products(products, "name-asc")] == [2, 1]
    assert [p.id for p in utils.sort_products(products, "name-desc")] == [1, 2]
    assert [p.id for p in utils.sort_products(products, "bogus")] == [2, 1]


def test_distinct_categories(make_product):
    products = [
        make_product(1, category="PLC"),
        make_product(2, category="Inverter"),
        make_product(3, category="PLC"),
        make_product(4),
    ]

    assert utils.distinct_categories(products) == ["Inverter", "PLC"]
