"""
Abstract base class defining the product data access contract.

Implementations:
- DemoProductService: Static in-memory catalogue for development/testing
- SupabaseProductService: Queries the Supabase products table
"""

from abc import ABC, abstractmethod

from catalog_ui.models.product import Product


class ProductServiceError(Exception):
    """Raised when the product backend cannot answer a request."""


class ProductService(ABC):
    """
    Abstract base class for product data access.

    Failures of the backend surface as ProductServiceError so callers can
    degrade without knowing which client library is underneath.
    """

    @abstractmethod
    def search_products(self, query: str) -> list[Product]:
        """
        Return products whose name or category contains the query.

        Results are ordered by name, are not truncated, and exclude
        suspended products and products marked as not available online.

        Args:
            query: Search text; blank text returns an empty list.
        """

    @abstractmethod
    def list_products(self, query: str | None = None, limit: int = 48) -> list[Product]:
        """
        Return published, active, online products for the results page.

        Args:
            query: Optional name/category search text. When given, all
                matches are returned.
            limit: Maximum number of products listed when there is no query.
        """

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None:
        """Return one product by id, or None if it does not exist."""
