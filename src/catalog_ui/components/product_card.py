"""
Product card for the search results page.

Out-of-stock products get a WhatsApp stock inquiry link instead of the
stock badge.
"""

import reflex as rx

from catalog_ui.models.reflex_models import ProductModel


def product_card(product: ProductModel) -> rx.Component:
    """
    Build a card component for displaying a product.

    Args:
        product: ProductModel instance.

    Returns:
        The product card component.
    """
    return rx.box(
        rx.link(
            rx.box(
                rx.cond(
                    product.thumbnail != "",
                    rx.image(src=product.thumbnail, alt=product.name),
                    rx.icon("package", size=48, class_name="muted"),
                ),
                class_name="product-thumb",
            ),
            rx.text(product.category, class_name="badge secondary"),
            rx.heading(product.name, size="3", as_="h3"),
            rx.text(product.meta_label, class_name="muted mono"),
            href=product.href,
            class_name="product-link",
        ),
        rx.box(
            rx.text(
                product.price_label,
                class_name=rx.cond(product.has_price, "price", "price muted"),
            ),
            rx.cond(
                product.in_stock,
                rx.text(
                    f"Stok: {product.stock_quantity} {product.unit}",
                    class_name="badge outline",
                ),
                rx.link(
                    rx.icon("message-circle", size=16),
                    "Tanya stok",
                    href=product.inquiry_url,
                    is_external=True,
                    class_name="whatsapp-link",
                ),
            ),
            class_name="product-footer",
        ),
        class_name="card product-card",
    )
