"""
Supabase-backed implementation of ProductService.

The products table is exposed through PostgREST. Header search sends one
request of the form

    select ... from products
    where name ilike '%q%' or category ilike '%q%'
    order by name asc

and then drops suspended/offline rows on the client. The results page adds
the published/online/active filters server side instead.
"""

from typing import Any

from supabase import Client

from catalog_ui import config
from catalog_ui.lib import clients, logs
from catalog_ui.models.product import ACTIVE_STATUS, Product
from catalog_ui.services.product_service import ProductService, ProductServiceError

LOG = logs.logger(__file__)

_SEARCH_COLUMNS = (
    "id, name, description, price, stock_quantity, category, accurate_code, "
    "brand, status, is_published, is_available_online, admin_thumbnail, unit"
)


def _normalize(query: str | None) -> str:
    return query.strip() if query else ""


def _name_or_category_filter(query: str) -> str:
    """
    Build the PostgREST ``or`` filter matching name or category.

    The pattern is double quoted so commas, dots and parentheses typed by
    the user cannot break the filter syntax.
    """
    escaped = query.replace("\\", "\\\\").replace('"', '\\"')
    pattern = f'"%{escaped}%"'
    return f"name.ilike.{pattern},category.ilike.{pattern}"


class SupabaseProductService(ProductService):
    """
    Production product service reading the Supabase products table.

    Attributes:
        table_name: Name of the products table.
    """

    def __init__(self, client: Client | None = None, table_name: str | None = None) -> None:
        """
        Initialize the service.

        Args:
            client: Supabase client; the shared client is used when omitted.
            table_name: Products table, defaults to CATALOG_UI_PRODUCTS_TABLE.
        """
        self._client = client
        self.table_name = table_name or config.PRODUCTS_TABLE

    def search_products(self, query: str) -> list[Product]:
        query = _normalize(query)
        if not query:
            return []

        LOG.info("Searching products: %s", query)
        rows = self._execute(
            self._table()
            .select(_SEARCH_COLUMNS)
            .or_(_name_or_category_filter(query))
            .order("name"),
            f"search {query!r}",
        )
        products = [Product.from_row(row) for row in rows]
        visible = [product for product in products if product.is_searchable]
        LOG.info(
            "Search %r: %d rows, %d searchable", query, len(products), len(visible)
        )
        return visible

    def list_products(self, query: str | None = None, limit: int = 48) -> list[Product]:
        query = _normalize(query)
        request = (
            self._table()
            .select("*")
            .eq("is_published", True)
            .eq("is_available_online", True)
            .eq("status", ACTIVE_STATUS)
        )
        if query:
            request = request.or_(_name_or_category_filter(query))
        request = request.order("name")
        if not query:
            request = request.limit(max(limit, 1))

        rows = self._execute(request, f"list {query!r}")
        return [Product.from_row(row) for row in rows]

    def get_product(self, product_id: int) -> Product | None:
        rows = self._execute(
            self._table().select("*").eq("id", product_id).limit(1),
            f"get {product_id}",
        )
        return Product.from_row(rows[0]) if rows else None

    def _table(self) -> Any:
        client = self._client or clients.supabase_client()
        return client.table(self.table_name)

    def _execute(self, request: Any, description: str) -> list[dict]:
        """Run a request builder and return its rows."""
        try:
            response = request.execute()
        except Exception as exc:
            raise ProductServiceError(
                f"Product request failed ({description}): {exc}"
            ) from exc
        return list(response.data or [])
