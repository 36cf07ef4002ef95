"""
Service factory for the Catalog UI.

Available Implementations:
- demo: In-memory service with static product data (no backend required)
- impl: Supabase-backed service (requires SUPABASE_URL and SUPABASE_KEY)

The service is cached per kind, so the same instance is reused across all
requests. Configure via CATALOG_UI_SERVICE.
"""

from functools import cache
from typing import Callable, Dict

from catalog_ui import config
from catalog_ui.lib import logs
from catalog_ui.services.product_service import ProductService, ProductServiceError
from catalog_ui.services.product_service_demo import DemoProductService
from catalog_ui.services.product_service_impl import SupabaseProductService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], ProductService]] = {
    "demo": lambda: DemoProductService(),
    "impl": lambda: SupabaseProductService(),
}


@cache
def get_product_service(kind: str | None = None) -> ProductService:
    """Return the configured product service implementation."""
    resolved_kind = (kind or config.SERVICE_KIND).lower()
    LOG.info("get_product_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown product service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoProductService",
    "ProductService",
    "ProductServiceError",
    "SupabaseProductService",
    "get_product_service",
]
