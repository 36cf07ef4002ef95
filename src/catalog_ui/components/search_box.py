"""
Header product search with a suggestions dropdown.

SearchBox is a ComponentState: every ``search_box(...)`` call creates an
independent state, so the desktop and mobile bars each own their query,
results and dropdown while sharing this code.

Dropdown rendering follows the search state machine:
- loading: spinner panel
- results: "N produk" header, one row per product, "view all" button
- empty: "no products found" panel
- hidden: nothing
"""

import reflex as rx

from catalog_ui.components.outside_click import OutsideClickHandler
from catalog_ui.lib import logs
from catalog_ui.models.common import SearchTransitions
from catalog_ui.models.reflex_models import ProductModel
from catalog_ui.search import debounced_search
from catalog_ui.state import fetch_product_models

LOG = logs.logger(__file__)

LOADING_TEXT = "Mencari produk..."
EMPTY_TEXT = "Tidak ada produk ditemukan"
VIEW_ALL_TEXT = "Lihat semua hasil"


class SearchBox(SearchTransitions, rx.ComponentState):
    """State of one header search surface."""

    query: str = ""
    results: list[ProductModel] = []
    loading: bool = False
    visible: bool = False

    _ticket: int = 0

    @rx.event(background=True)
    async def handle_change(self, value: str):
        """Debounce the input and refresh the dropdown."""
        await debounced_search(self, value, fetch_product_models)

    @rx.event
    def handle_key(self, key: str):
        """Enter submits the query, Escape closes the dropdown."""
        url = self.key_action(key)
        if url is not None:
            return rx.redirect(url)

    @rx.event
    def handle_submit(self):
        return rx.redirect(self.submit_search())

    @rx.event
    def handle_select(self, product_id: int):
        LOG.info("Search result selected: %s", product_id)
        return rx.redirect(self.select_result(product_id))

    @rx.event
    def handle_clear(self):
        self.clear_search()

    @rx.event
    def handle_dismiss(self):
        self.dismiss_dropdown()

    @classmethod
    def get_component(
        cls,
        surface: str = "desktop",
        placeholder: str = "Cari produk...",
        **props,
    ) -> rx.Component:
        """
        Build the search input and its dropdown.

        Args:
            surface: Name of the header surface ("desktop" or "mobile"),
                used for element ids and styling.
            placeholder: Input placeholder text.

        Returns:
            The search box wrapped in an outside click handler.
        """
        return OutsideClickHandler.create(
            rx.box(
                _input_row(cls, surface, placeholder),
                _dropdown(cls),
                id=f"search-{surface}",
                class_name=f"search-box search-box-{surface}",
            ),
            on_outside_click=cls.handle_dismiss,
            **props,
        )


search_box = SearchBox.create


def _input_row(cls, surface: str, placeholder: str) -> rx.Component:
    """Build the icon-prefixed input with its spinner/clear slot."""
    return rx.box(
        rx.icon("search", class_name="input-icon"),
        rx.input(
            placeholder=placeholder,
            value=cls.query,
            on_change=cls.handle_change,
            on_key_down=cls.handle_key,
            class_name="search-input",
            id=f"search-input-{surface}",
        ),
        rx.cond(
            cls.loading,
            rx.spinner(size="2", class_name="input-action"),
            rx.cond(
                cls.query != "",
                rx.el.button(
                    rx.icon("x", size=16),
                    on_click=cls.handle_clear,
                    class_name="input-action clear-button",
                    type="button",
                    title="Hapus pencarian",
                ),
            ),
        ),
        rx.el.button(
            rx.icon("search", size=16),
            on_click=cls.handle_submit,
            class_name="search-submit",
            type="button",
            title="Cari",
        ),
        class_name="input-with-icon",
    )


def _dropdown(cls) -> rx.Component:
    return rx.cond(
        cls.loading,
        _panel(
            rx.spinner(size="3"),
            rx.text(LOADING_TEXT, class_name="muted"),
            class_name="search-dropdown loading-state",
        ),
        rx.cond(
            cls.visible,
            rx.cond(
                cls.results.length() > 0,
                _results(cls),
                _panel(
                    rx.icon("search-x", size=32, class_name="empty-icon"),
                    rx.text(EMPTY_TEXT, class_name="muted"),
                    class_name="search-dropdown empty-state",
                ),
            ),
        ),
    )


def _results(cls) -> rx.Component:
    return _panel(
        rx.box(
            rx.text(cls.results.length(), " produk", class_name="muted"),
            class_name="results-summary",
        ),
        rx.box(
            rx.foreach(cls.results, lambda product: _result_row(cls, product)),
            class_name="search-results",
        ),
        rx.el.button(
            VIEW_ALL_TEXT,
            on_click=cls.handle_submit,
            class_name="view-all-button",
            type="button",
        ),
        class_name="search-dropdown",
    )


def _result_row(cls, product: ProductModel) -> rx.Component:
    """Build one clickable suggestion."""
    return rx.el.button(
        rx.box(
            rx.cond(
                product.thumbnail != "",
                rx.image(src=product.thumbnail, alt=product.name),
                rx.icon("package", size=24, class_name="muted"),
            ),
            class_name="result-thumb",
        ),
        rx.box(
            rx.text(product.name, class_name="result-name"),
            rx.text(product.meta_label, class_name="result-meta"),
            rx.text(
                product.price_label,
                class_name=rx.cond(
                    product.has_price, "result-price", "result-price muted"
                ),
            ),
            class_name="result-text",
        ),
        on_click=cls.handle_select(product.id),
        class_name="search-result",
        type="button",
    )


def _panel(*children: rx.Component, class_name: str) -> rx.Component:
    return rx.box(*children, class_name=class_name)
