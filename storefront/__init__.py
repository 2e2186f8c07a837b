"""Storefront service: users, catalog, orders, payments and Google login."""

__version__ = "1.0.0"
