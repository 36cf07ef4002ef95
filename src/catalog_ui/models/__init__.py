"""
Data models for the Catalog UI.

This package provides:
- Product, the parsed row of the products table
- SearchSession and SearchTransitions, the header search state machine
- DropdownStatus, the modes of the search suggestions panel

The Reflex view model lives in models.reflex_models and is imported
directly by the UI layer.
"""

from catalog_ui.models.common import DropdownStatus, SearchSession, SearchTransitions
from catalog_ui.models.product import ACTIVE_STATUS, SUSPENDED_STATUS, Product

__all__ = [
    "ACTIVE_STATUS",
    "DropdownStatus",
    "Product",
    "SUSPENDED_STATUS",
    "SearchSession",
    "SearchTransitions",
]
