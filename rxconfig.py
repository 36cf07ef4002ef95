"""Reflex configuration for the Catalog UI application."""

import reflex as rx

config = rx.Config(
    app_name="catalog_ui",
    # Use the src directory structure
    app_module_import="catalog_ui.app",
)
