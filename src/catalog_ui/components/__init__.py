"""
Reflex UI components for the Catalog UI.

This package provides:
- header: Site header with desktop and mobile search boxes
- search_box: Debounced product search with suggestions dropdown
- outside_click: Wrapper closing popups on clicks outside them
- results: Full search results page body
- product_card: Product card used on the results page
- product_detail: Product detail page body
"""

from catalog_ui.components.header import site_header
from catalog_ui.components.product_card import product_card
from catalog_ui.components.product_detail import product_detail
from catalog_ui.components.results import products_results
from catalog_ui.components.search_box import SearchBox, search_box

__all__ = [
    "SearchBox",
    "product_card",
    "product_detail",
    "products_results",
    "search_box",
    "site_header",
]
