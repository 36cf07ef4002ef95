"""
Formatting, routing and list helpers shared by the Catalog UI.

Provides helpers for:
- Rupiah price formatting and the "contact sales" fallback label
- Route building for product and search result pages
- WhatsApp hand-off links
- Query matching, sorting and category extraction for product lists
"""

from typing import TYPE_CHECKING, Sequence
from urllib.parse import quote, urlencode

from catalog_ui import config

if TYPE_CHECKING:
    from catalog_ui.models.product import Product

CONTACT_SALES_LABEL = "Hubungi sales"
NO_CATEGORY_LABEL = "Kategori tidak tersedia"

SORT_OPTIONS = {
    "name-asc": "Nama A-Z",
    "name-desc": "Nama Z-A",
    "price-asc": "Harga terendah",
    "price-desc": "Harga tertinggi",
}
DEFAULT_SORT = "name-asc"


def format_rupiah(value: float) -> str:
    """
    Format an amount as Indonesian Rupiah without decimals.

    Args:
        value: Amount in Rupiah.

    Returns:
        Formatted string like 'Rp 1.250.000'.
    """
    sign = "-" if value < 0 else ""
    return f"{sign}Rp {abs(value):,.0f}".replace(",", ".")


def price_label(price: float | None) -> str:
    """Return the display price, or the contact-sales label for null/zero prices."""
    if not price:
        return CONTACT_SALES_LABEL
    return format_rupiah(price)


def result_summary(count: int) -> str:
    """Header text for a list of search results."""
    return f"{count} produk"


def product_url(product_id: int) -> str:
    """Route of the product detail page."""
    return f"/product/{product_id}"


def products_url(query: str | None = None) -> str:
    """
    Route of the full search results page.

    Args:
        query: Search text; blank queries produce the bare listing route.

    Returns:
        '/products?q=<urlencoded query>' or '/products'.
    """
    query = query.strip() if query else ""
    if not query:
        return "/products"
    return "/products?" + urlencode({"q": query}, quote_via=quote)


def whatsapp_url(message: str, number: str | None = None) -> str:
    """Build a wa.me link that opens a chat with a pre-filled message."""
    number = number or config.WHATSAPP_NUMBER
    return f"https://wa.me/{number}?text={quote(message, safe='')}"


def stock_inquiry_message(product: "Product") -> str:
    """Message sent to sales when asking about an out-of-stock product."""
    return (
        "Halo, saya ingin menanyakan ketersediaan stok untuk produk: "
        f"{product.name} (ID: {product.id})"
    )


def matches_query(product: "Product", query: str) -> bool:
    """
    Check if a product name or category contains the query.

    Matching is case-insensitive substring matching, the same rule the
    database applies with ILIKE.
    """
    normalized = query.strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in product.searchable_terms())


def sort_products(products: Sequence["Product"], option: str) -> list["Product"]:
    """
    Sort products by one of SORT_OPTIONS.

    Products without a price sort as if priced at zero. Unknown options
    fall back to name ascending.
    """
    field, _, direction = option.partition("-")
    reverse = direction == "desc"
    if field == "price":
        return sorted(products, key=lambda p: p.price or 0, reverse=reverse)
    return sorted(products, key=lambda p: p.name.casefold(), reverse=reverse)


def distinct_categories(products: Sequence["Product"]) -> list[str]:
    """Return the sorted, de-duplicated non-empty categories of the products."""
    return sorted({p.category for p in products if p.category})
