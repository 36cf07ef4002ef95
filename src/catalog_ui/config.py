"""
Environment configuration for the Catalog UI.

All settings are read once at import time. Every value has a default; only
the live service needs the Supabase credentials.

Environment variables:
- SUPABASE_URL / SUPABASE_KEY: Supabase project URL and anon key
- CATALOG_UI_SERVICE: Product service kind ("impl" or "demo")
- CATALOG_UI_PRODUCTS_TABLE: Name of the products table
- CATALOG_UI_SEARCH_DEBOUNCE_MS: Quiet period before a header search fires
- CATALOG_UI_PAGE_SIZE: Products listed on /products without a query
- CATALOG_UI_WHATSAPP_NUMBER: Sales number used for wa.me links
- CATALOG_UI_BRAND: Store name shown in the header
- CATALOG_UI_PORT: Port for `catalog_ui` entrypoint
"""

import os


def _env_int(key: str, default: int) -> int:
    """Read an integer environment variable, falling back on blank or bad values."""
    value = os.getenv(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "") or os.getenv("SUPABASE_ANON_KEY", "")

SERVICE_KIND = os.getenv("CATALOG_UI_SERVICE", "impl").lower()
PRODUCTS_TABLE = os.getenv("CATALOG_UI_PRODUCTS_TABLE", "products")

SEARCH_DEBOUNCE_MS = max(_env_int("CATALOG_UI_SEARCH_DEBOUNCE_MS", 300), 0)
PAGE_SIZE = max(_env_int("CATALOG_UI_PAGE_SIZE", 48), 1)

WHATSAPP_NUMBER = os.getenv("CATALOG_UI_WHATSAPP_NUMBER", "628111086180")
BRAND_NAME = os.getenv("CATALOG_UI_BRAND", "Hokiindo Raya")

APP_PORT = _env_int("CATALOG_UI_PORT", 8000)
