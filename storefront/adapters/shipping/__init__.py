"""Shipping-quote adapters."""
