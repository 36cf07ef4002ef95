"""
Catalog UI: A Reflex storefront for an industrial products catalog.

The header carries a debounced product search with a suggestions dropdown
backed by the Supabase products table. Selecting a suggestion opens the
product page; submitting the query opens the full results page.

Subpackages:
- components: Reflex UI components
- models: Product model and the header search state machine
- services: Product data access (demo and Supabase implementations)
- data: Demo product fixtures
- lib: Logging and client helpers

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
