"""
Top‑level package for the Product Catalog API.

All functionality lives in submodules under ``app``; import the
application factory from ``product_catalog_api.app.main``.
"""

__all__ = []
