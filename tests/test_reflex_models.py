"""Tests for the Reflex product view model."""

from catalog_ui.models.reflex_models import to_product_model


def test_model_carries_display_strings(make_product):
    model = to_product_model(
        make_product(
            1001,
            name="Siemens S7-1500",
            category="PLC",
            price=18750000,
            stock_quantity=4,
            accurate_code="6ES7511",
        )
    )

    assert model.price_label == "Rp 18.750.000"
    assert model.meta_label == "ID: 6ES7511 | PLC"
    assert model.href == "/product/1001"
    assert model.in_stock
    assert model.inquiry_url.startswith("https://wa.me/")


def test_model_fallbacks_for_missing_data(make_product):
    model = to_product_model(make_product(7, name="Kabel"))

    assert model.price_label == "Hubungi sales"
    assert not model.has_price
    assert model.meta_label == "ID: 7 | Kategori tidak tersedia"
