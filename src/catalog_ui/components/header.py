"""
Site header with the desktop and mobile product search bars.

Both bars are separate SearchBox instances; only one is visible at a time
depending on the viewport (see .desktop-only / .mobile-only in styles.css).
"""

import reflex as rx

from catalog_ui import config
from catalog_ui.components.search_box import search_box
from catalog_ui.utils import whatsapp_url

_GREETING = f"Halo saya tertarik dengan produk {config.BRAND_NAME}"


def site_header() -> rx.Component:
    """Build the sticky header with brand, search and WhatsApp button."""
    return rx.el.header(
        rx.box(
            rx.link(
                rx.heading(config.BRAND_NAME, size="5", as_="span"),
                href="/",
                class_name="brand",
            ),
            rx.box(
                search_box(surface="desktop"),
                class_name="header-search desktop-only",
            ),
            rx.link(
                rx.icon("message-circle", size=16),
                "WhatsApp",
                href=whatsapp_url(_GREETING),
                is_external=True,
                class_name="whatsapp-button",
            ),
            class_name="header-bar",
        ),
        rx.box(
            search_box(surface="mobile", placeholder="Cari produk, kategori..."),
            class_name="header-search mobile-only",
        ),
        class_name="site-header",
    )
