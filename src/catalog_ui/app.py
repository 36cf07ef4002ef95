"""
Reflex application entry point for the Catalog UI.

Pages:
- /: landing page with the header search
- /products: full search results (?q=<query>)
- /product/[product_id]: product detail
"""

import reflex as rx

from catalog_ui import config
from catalog_ui.components.header import site_header
from catalog_ui.components.product_detail import product_detail
from catalog_ui.components.results import products_results
from catalog_ui.lib import logs
from catalog_ui.state import (
    APP_SUBTITLE,
    APP_TITLE,
    ProductDetailState,
    ProductsState,
)

LOG = logs.logger(__file__)

LOG.info("CATALOG_UI_SERVICE: %s", config.SERVICE_KIND)
LOG.info("CATALOG_UI_PRODUCTS_TABLE: %s", config.PRODUCTS_TABLE)
LOG.info("CATALOG_UI_SEARCH_DEBOUNCE_MS: %s", config.SEARCH_DEBOUNCE_MS)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&family=Fira+Code:wght@400;500&display=swap"


def _shell(*children: rx.Component) -> rx.Component:
    """Wrap page content with the site header."""
    return rx.box(
        site_header(),
        rx.box(*children, class_name="app-container"),
        class_name="app-shell",
    )


def page_header() -> rx.Component:
    """Build the hero text area at the top of the landing page."""
    return rx.box(
        rx.heading(config.BRAND_NAME, size="7", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        rx.link("Lihat semua produk", href="/products", class_name="cta-link"),
        class_name="page-header",
    )


def index() -> rx.Component:
    return _shell(page_header())


def products() -> rx.Component:
    return _shell(products_results())


def product() -> rx.Component:
    return _shell(product_detail())


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
        accent_color="red",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(index, title=APP_TITLE)
app.add_page(
    products,
    route="/products",
    title=f"Cari Produk - {config.BRAND_NAME}",
    on_load=ProductsState.on_load,
)
app.add_page(
    product,
    route="/product/[product_id]",
    title=f"Produk - {config.BRAND_NAME}",
    on_load=ProductDetailState.on_load,
)


def main() -> None:
    """Entrypoint used by `catalog_ui`; production deployments use `reflex run`."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--port", str(config.APP_PORT)]
    )


if __name__ == "__main__":
    main()
