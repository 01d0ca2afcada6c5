"""Storefront: business functions behind substitutable service ports."""

__version__ = "0.1.0"
