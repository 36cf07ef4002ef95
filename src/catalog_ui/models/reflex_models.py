"""
Reflex-compatible product model.

Reflex renders vars on the client, so display strings (price label, meta
line, links) are computed here in Python rather than inside components.
"""

import reflex as rx

from catalog_ui.models.product import Product
from catalog_ui.utils import (
    NO_CATEGORY_LABEL,
    price_label,
    product_url,
    stock_inquiry_message,
    whatsapp_url,
)


class ProductModel(rx.Base):
    """Product fields and precomputed display strings."""

    id: int = 0
    name: str = ""
    category: str = ""
    description: str = ""
    brand: str = ""
    code: str = ""
    unit: str = ""
    thumbnail: str = ""
    price: float = 0.0
    has_price: bool = False
    price_label: str = ""
    stock_quantity: int = 0
    in_stock: bool = False
    meta_label: str = ""
    href: str = ""
    inquiry_url: str = ""


def to_product_model(product: Product) -> ProductModel:
    """
    Convert a Product to a ProductModel.

    Args:
        product: Parsed product.

    Returns:
        ProductModel ready for rx.foreach.
    """
    category = product.category or NO_CATEGORY_LABEL
    return ProductModel(
        id=product.id,
        name=product.name,
        category=product.category,
        description=product.description,
        brand=product.brand,
        code=product.display_code,
        unit=product.unit,
        thumbnail=product.admin_thumbnail,
        price=product.price or 0.0,
        has_price=product.has_price,
        price_label=price_label(product.price),
        stock_quantity=product.stock_quantity,
        in_stock=product.in_stock,
        meta_label=f"ID: {product.display_code} | {category}",
        href=product_url(product.id),
        inquiry_url=whatsapp_url(stock_inquiry_message(product)),
    )
