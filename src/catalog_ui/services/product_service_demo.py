"""
Demo implementation of ProductService using static in-memory data.

Applies the same matching, ordering and visibility rules as the Supabase
service so the header search behaves the same without a backend.
"""

from typing import Sequence

from catalog_ui.data.demo_products import DEMO_PRODUCTS
from catalog_ui.models.product import ACTIVE_STATUS, Product
from catalog_ui.services.product_service import ProductService
from catalog_ui.utils import matches_query


class DemoProductService(ProductService):
    """In-memory product service backed by static demo data."""

    def __init__(self, products: Sequence[Product] | None = None) -> None:
        """
        Initialize with product data.

        Args:
            products: Custom product list, or None to use DEMO_PRODUCTS.
        """
        self._products: Sequence[Product] = (
            DEMO_PRODUCTS if products is None else products
        )

    def search_products(self, query: str) -> list[Product]:
        if not query or not query.strip():
            return []
        return [
            product
            for product in self._by_name(self._products)
            if matches_query(product, query) and product.is_searchable
        ]

    def list_products(self, query: str | None = None, limit: int = 48) -> list[Product]:
        listed = [
            product
            for product in self._by_name(self._products)
            if product.is_published
            and product.is_available_online is True
            and product.status == ACTIVE_STATUS
            and matches_query(product, query or "")
        ]
        if query and query.strip():
            return listed
        return listed[: max(limit, 1)]

    def get_product(self, product_id: int) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    @staticmethod
    def _by_name(products: Sequence[Product]) -> list[Product]:
        return sorted(products, key=lambda p: p.name.casefold())
