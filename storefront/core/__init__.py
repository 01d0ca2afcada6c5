"""Core domain logic for the storefront.

This package contains zero external dependencies and holds the business
functions of the application. All integrations with outside services are
handled by the adapters package through the ports defined in ports.py.
"""

from .models import (
    ChargeResult,
    Coupon,
    EmailMessage,
    OneTimeCode,
    Order,
    OrderResult,
    PaymentMethod,
    Product,
    ProductError,
    ProductResult,
    ShippingQuote,
)

__all__ = [
    "ChargeResult",
    "Coupon",
    "EmailMessage",
    "OneTimeCode",
    "Order",
    "OrderResult",
    "PaymentMethod",
    "Product",
    "ProductError",
    "ProductResult",
    "ShippingQuote",
]
