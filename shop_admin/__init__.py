"""
Top-level package for the shop admin dashboard.

This package exposes the core architecture (grid engine, services, UI adapters).
Most code should import from submodules such as:
    shop_admin.core
    shop_admin.services
    shop_admin.ui
"""

__all__: list[str] = []
