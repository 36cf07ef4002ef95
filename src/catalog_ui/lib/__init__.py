"""
Local helper modules for the Catalog UI.

Modules:
    logs: Logger factory
    clients: Supabase client factory
"""

from catalog_ui.lib import clients, logs

__all__ = ["clients", "logs"]
