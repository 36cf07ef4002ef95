"""
Static demo data for the Catalog UI.

Modules:
- demo_products: Product fixtures used by DemoProductService
"""
