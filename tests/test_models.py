"""Tests for Product parsing and visibility rules."""

from catalog_ui.models.product import Product


def test_from_row_parses_complete_row(product_rows):
    """Every column of a Supabase row lands on the matching field."""

    product = Product.from_row(product_rows[0])

    assert product.id == 1
    assert product.name == "Siemens S7-1500 CPU"
    assert product.category == "PLC"
    assert product.price == 18750000
    assert product.stock_quantity == 4
    assert product.status == "active"
    assert product.is_published is True
    assert product.is_available_online is True


def test_from_row_tolerates_missing_and_null_columns():
    """Incomplete rows fall back to defaults instead of raising."""

    product = Product.from_row(
        {"id": "7", "name": "Kabel NYY", "price": None, "is_available_online": None}
    )

    assert product.id == 7
    assert product.price is None
    assert product.stock_quantity == 0
    assert product.category == ""
    assert product.brand == ""
    assert product.is_available_online is None


def test_from_row_clamps_negative_stock():
    product = Product.from_row({"id": 1, "name": "X", "stock_quantity": -3})

    assert product.stock_quantity == 0
    assert not product.in_stock


def test_is_searchable_excludes_suspended_and_offline(make_product):
    """Suspended or explicitly offline products never reach the dropdown."""

    assert make_product(1).is_searchable
    assert not make_product(2, status="suspended").is_searchable
    assert not make_product(3, is_available_online=False).is_searchable
    # A missing availability flag counts as online
    assert make_product(4, is_available_online=None).is_searchable


def test_zero_or_missing_price_means_contact_sales(make_product):
    assert not make_product(1, price=None).has_price
    assert not make_product(2, price=0).has_price
    assert make_product(3, price=1500).has_price


def test_display_code_falls_back_to_id(make_product):
    assert make_product(42, accurate_code="6ES7511").display_code == "6ES7511"
    assert make_product(42).display_code == "42"


def test_searchable_terms_cover_name_and_category(make_product):
    product = make_product(1, name="Omron Timer", category="Timer", brand="Omron")

    assert product.searchable_terms() == ["omron timer", "timer"]
