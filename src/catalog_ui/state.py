"""
Reflex state for the Catalog UI pages.

This module contains the page states for the full search results page
(/products) and the product detail page (/product/[product_id]), and the
product fetch used by the header search boxes.
"""

import asyncio
from typing import Generator

import reflex as rx

from catalog_ui import config
from catalog_ui.lib import logs
from catalog_ui.models.product import Product
from catalog_ui.models.reflex_models import ProductModel, to_product_model
from catalog_ui.services import get_product_service
from catalog_ui.utils import (
    DEFAULT_SORT,
    SORT_OPTIONS,
    distinct_categories,
    products_url,
    result_summary as format_result_summary,
    sort_products,
)

LOG = logs.logger(__file__)

ALL_CATEGORIES = "Semua kategori"
LOAD_ERROR_MESSAGE = "Gagal mencari produk"

APP_TITLE = f"{config.BRAND_NAME} - Katalog Produk"
APP_SUBTITLE = "Distributor komponen otomasi dan kelistrikan industri."


def _get_service():
    """Get the configured product service (lazy loaded)."""
    return get_product_service(config.SERVICE_KIND)


async def fetch_product_models(query: str) -> list[ProductModel]:
    """
    Search products without blocking the event loop.

    The service client is synchronous, so the call runs in the default
    executor. Errors propagate to the caller.
    """
    products = await asyncio.get_running_loop().run_in_executor(
        None, _get_service().search_products, query
    )
    return [to_product_model(product) for product in products]


class ProductsState(rx.State):
    """
    State of the full search results page.

    Loads the product list for the ``q`` URL parameter, then filters by
    category and sorts on the client without another backend round trip.
    """

    query: str = ""
    search_input: str = ""
    products: list[ProductModel] = []
    categories: list[str] = []
    selected_category: str = ALL_CATEGORIES
    sort_by: str = DEFAULT_SORT
    is_loading: bool = True
    error: str = ""

    _catalog: list[Product] = []

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the listed products."""
        base = format_result_summary(len(self.products))
        if self.query:
            return f'{base} untuk "{self.query}"'
        return base

    @rx.var
    def is_empty(self) -> bool:
        """Check if the empty state should be shown."""
        return not self.is_loading and not self.error and len(self.products) == 0

    @rx.var
    def category_options(self) -> list[str]:
        return [ALL_CATEGORIES] + self.categories

    @rx.var
    def sort_labels(self) -> list[str]:
        return list(SORT_OPTIONS.values())

    @rx.var
    def sort_label(self) -> str:
        return SORT_OPTIONS.get(self.sort_by, SORT_OPTIONS[DEFAULT_SORT])

    @rx.event
    def on_load(self) -> Generator:
        """
        Event handler for page load.

        Yields the loading state, then fetches products for the URL query.
        """
        self.query = (self.router.page.params.get("q") or "").strip()
        self.search_input = self.query
        self.selected_category = ALL_CATEGORIES
        self.products = []
        self.error = ""
        self.is_loading = True
        yield

        try:
            catalog = _get_service().list_products(
                self.query or None, limit=config.PAGE_SIZE
            )
            LOG.info("Listed %d products for %r", len(catalog), self.query)
        except Exception as e:
            LOG.error("Product listing failed: %s", e, exc_info=True)
            catalog = []
            self.error = LOAD_ERROR_MESSAGE
        finally:
            self.is_loading = False

        self._catalog = catalog
        self.categories = distinct_categories(catalog)
        self._apply_view()

    def update_search_input(self, value: str):
        self.search_input = value

    def submit_search(self):
        """Navigate to the results of the text in the page's search form."""
        return rx.redirect(products_url(self.search_input))

    def choose_category(self, category: str):
        self.selected_category = category
        self._apply_view()

    def choose_sort(self, label: str):
        """Select a sort option by its display label."""
        for option, option_label in SORT_OPTIONS.items():
            if option_label == label:
                self.sort_by = option
                break
        self._apply_view()

    def _apply_view(self) -> None:
        """Rebuild the visible list from the loaded catalog."""
        products = self._catalog
        if self.selected_category != ALL_CATEGORIES:
            products = [p for p in products if p.category == self.selected_category]
        self.products = [
            to_product_model(p) for p in sort_products(products, self.sort_by)
        ]


class ProductDetailState(rx.State):
    """State of the product detail page."""

    product: ProductModel = ProductModel()
    found: bool = False
    is_loading: bool = True

    @rx.event
    def on_load(self) -> Generator:
        """Load the product named by the route's product_id."""
        self.is_loading = True
        self.found = False
        yield

        raw_id = self.router.page.params.get("product_id", "")
        try:
            product = _get_service().get_product(int(raw_id))
        except (TypeError, ValueError):
            LOG.warning("Invalid product id: %r", raw_id)
            product = None
        except Exception as e:
            LOG.error("Product lookup failed for %r: %s", raw_id, e, exc_info=True)
            product = None
        finally:
            self.is_loading = False

        if product is not None:
            self.product = to_product_model(product)
            self.found = True
