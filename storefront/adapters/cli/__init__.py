"""CLI adapter for storefront operations.

Provides a command-line interface that maps commands to the core
business functions and formats their results as dictionaries.
"""
