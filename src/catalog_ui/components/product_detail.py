"""Product detail page body."""

import reflex as rx

from catalog_ui.state import ProductDetailState


def product_detail() -> rx.Component:
    """Build the detail view, or a not-found panel for unknown ids."""
    return rx.cond(
        ProductDetailState.is_loading,
        rx.box(
            rx.box(class_name="spinner"),
            rx.text("Memuat produk...", class_name="muted"),
            class_name="card loading-state",
        ),
        rx.cond(ProductDetailState.found, _detail(), _not_found()),
    )


def _detail() -> rx.Component:
    product = ProductDetailState.product
    return rx.box(
        rx.box(
            rx.cond(
                product.thumbnail != "",
                rx.image(src=product.thumbnail, alt=product.name),
                rx.icon("package", size=96, class_name="muted"),
            ),
            class_name="detail-thumb",
        ),
        rx.box(
            rx.text(product.category, class_name="badge secondary"),
            rx.heading(product.name, size="6", as_="h1"),
            rx.text(product.meta_label, class_name="muted mono"),
            rx.cond(
                product.brand != "",
                _info_block("Merek", product.brand),
            ),
            rx.text(
                product.price_label,
                class_name=rx.cond(product.has_price, "price large", "price large muted"),
            ),
            _info_block(
                "Stok",
                rx.cond(
                    product.in_stock,
                    f"{product.stock_quantity} {product.unit}",
                    "Hubungi kami untuk ketersediaan",
                ),
            ),
            rx.cond(
                product.description != "",
                rx.text(product.description, class_name="description"),
            ),
            rx.link(
                rx.icon("message-circle", size=16),
                "Tanya via WhatsApp",
                href=product.inquiry_url,
                is_external=True,
                class_name="whatsapp-button",
            ),
            class_name="detail-text",
        ),
        class_name="card product-detail",
    )


def _not_found() -> rx.Component:
    return rx.box(
        rx.icon("package-x", class_name="empty-icon", size=60),
        rx.heading("Produk tidak ditemukan", size="3", as_="h3"),
        rx.link("Kembali ke katalog", href="/products"),
        class_name="card empty-state",
    )


def _info_block(label: str, value) -> rx.Component:
    """Build a small info block with label and value."""
    return rx.box(
        rx.text(label, class_name="label"),
        rx.text(value, class_name="value"),
        class_name="info-block",
    )
