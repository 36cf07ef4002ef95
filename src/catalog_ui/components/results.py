"""
Search results page body.

Handles the search form, category/sort controls, and the loading, error,
empty and result states of /products.
"""

import reflex as rx

from catalog_ui.components.product_card import product_card
from catalog_ui.state import ProductsState


def products_results() -> rx.Component:
    """
    Build the results page body.

    Returns:
        The results container component.
    """
    return rx.box(
        _search_form(),
        rx.cond(
            ProductsState.is_loading,
            _loader(),
            rx.cond(
                ProductsState.error != "",
                _error(),
                rx.cond(ProductsState.is_empty, _empty(), _results()),
            ),
        ),
        id="results-container",
    )


def _search_form() -> rx.Component:
    return rx.form(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Cari berdasarkan nama atau kategori produk...",
                value=ProductsState.search_input,
                on_change=ProductsState.update_search_input,
                class_name="search-input",
            ),
            rx.button("Cari", type="submit", class_name="search-submit-button"),
            class_name="input-with-icon",
        ),
        on_submit=lambda _: ProductsState.submit_search(),
        class_name="card search-card",
    )


def _results() -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(ProductsState.result_summary, class_name="muted"),
            rx.box(
                rx.select(
                    ProductsState.category_options,
                    value=ProductsState.selected_category,
                    on_change=ProductsState.choose_category,
                ),
                rx.select(
                    ProductsState.sort_labels,
                    value=ProductsState.sort_label,
                    on_change=ProductsState.choose_sort,
                ),
                class_name="results-controls",
            ),
            class_name="results-summary",
        ),
        rx.box(
            rx.foreach(ProductsState.products, product_card),
            class_name="product-grid",
        ),
        class_name="results",
    )


def _empty() -> rx.Component:
    """Build the empty state when no products are found."""
    return rx.box(
        rx.icon("search-x", class_name="empty-icon", size=60),
        rx.heading("Tidak ada produk ditemukan", size="3", as_="h3"),
        rx.cond(
            ProductsState.query != "",
            rx.text(
                rx.text.span('Tidak ada hasil untuk "'),
                rx.text.span(ProductsState.query),
                rx.text.span('". Coba kata kunci lain.'),
                class_name="muted",
            ),
            rx.text("Belum ada produk tersedia.", class_name="muted"),
        ),
        class_name="card empty-state",
    )


def _error() -> rx.Component:
    return rx.box(
        rx.icon("triangle-alert", class_name="empty-icon", size=60),
        rx.heading(ProductsState.error, size="3", as_="h3"),
        rx.text("Silakan coba lagi beberapa saat lagi.", class_name="muted"),
        class_name="card empty-state",
    )


def _loader() -> rx.Component:
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text("Mencari produk: ", ProductsState.query, class_name="muted"),
        class_name="card loading-state",
    )
