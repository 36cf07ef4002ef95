"""
Product domain model.

A Product is a read-only projection of one row of the Supabase ``products``
table. Rows are parsed leniently: missing or mistyped columns fall back to
defaults instead of raising, because the table is also written by the ERP
sync job and not every row is complete.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from benedict import benedict

SUSPENDED_STATUS = "suspended"
ACTIVE_STATUS = "active"


@dataclass(frozen=True, slots=True)
class Product:
    """A catalog product as shown in search results and product pages."""

    id: int
    name: str
    category: str = ""
    description: str = ""
    price: float | None = None
    stock_quantity: int = 0
    brand: str = ""
    accurate_code: str = ""
    unit: str = ""
    status: str = ""
    is_published: bool = False
    is_available_online: bool | None = None
    admin_thumbnail: str = ""

    @property
    def has_price(self) -> bool:
        """False when the price is unknown or zero (sold via sales contact)."""
        return bool(self.price)

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0

    @property
    def is_searchable(self) -> bool:
        """
        Return True if the product may appear in header search results.

        Suspended products are hidden, as are products explicitly marked as
        not available online. A missing availability flag counts as online.
        """
        return (
            self.status != SUSPENDED_STATUS and self.is_available_online is not False
        )

    @property
    def display_code(self) -> str:
        """External product code, or the numeric id when the ERP code is missing."""
        return self.accurate_code or str(self.id)

    def searchable_terms(self) -> List[str]:
        """Return the lower-cased fields matched by text search."""
        return [value.lower() for value in (self.name, self.category) if value]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Product":
        """
        Parse a Supabase row into a Product.

        Args:
            row: Column mapping as returned by the PostgREST client.

        Returns:
            Product with defaults for any missing columns.
        """
        b = benedict(dict(row), keypath_separator=None)
        return cls(
            id=b.get_int("id"),
            name=b.get_str("name"),
            category=b.get_str("category"),
            description=b.get_str("description"),
            price=b.get_float("price") if b.get("price") is not None else None,
            stock_quantity=max(b.get_int("stock_quantity"), 0),
            brand=b.get_str("brand"),
            accurate_code=b.get_str("accurate_code"),
            unit=b.get_str("unit"),
            status=b.get_str("status").lower(),
            is_published=b.get_bool("is_published"),
            is_available_online=(
                b.get_bool("is_available_online")
                if b.get("is_available_online") is not None
                else None
            ),
            admin_thumbnail=b.get_str("admin_thumbnail"),
        )
