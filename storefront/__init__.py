"""Storefront: catalog, cart engine and simulated checkout."""

__version__ = "0.1.0"
