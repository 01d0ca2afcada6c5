"""Coupons, discount codes and product publication."""

import asyncio
from numbers import Real

from .errors import FetchError
from .models import Coupon, Product, ProductError, ProductResult

DISCOUNT_CODES: dict[str, float] = {
    "SAVE10": 0.1,
    "SAVE20": 0.2,
}


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def get_coupons() -> list[Coupon]:
    return [
        Coupon(code="SAVE20NOW", discount=0.2),
        Coupon(code="DISCOUNT50OFF", discount=0.5),
    ]


def calculate_discount(price: object, discount_code: object) -> float | str:
    """Apply a discount code to a price.

    Returns:
        The discounted price, the unchanged price for an unknown code, or
        an "Invalid ..." message when an argument has the wrong type or
        the price is not positive.
    """
    if not _is_number(price) or price <= 0:
        return "Invalid price"
    if not isinstance(discount_code, str):
        return "Invalid discount code"

    discount = DISCOUNT_CODES.get(discount_code, 0)
    return price * (1 - discount)


def is_price_in_range(price: float, minimum: float, maximum: float) -> bool:
    return minimum <= price <= maximum


def create_product(product: Product) -> ProductResult:
    """Validate and publish a product."""
    if not product.name:
        return ProductResult(
            success=False,
            error=ProductError(code="invalid_name", message="Name is missing"),
        )
    if not _is_number(product.price) or product.price <= 0:
        return ProductResult(
            success=False,
            error=ProductError(code="invalid_price", message="Price is missing"),
        )
    return ProductResult(success=True, message="Product was successfully published")


async def fetch_data() -> list[int]:
    """Fetch product figures from the upstream feed.

    The feed is not wired up, so every call fails.

    Raises:
        FetchError: Always, with reason "Operation failed".
    """
    await asyncio.sleep(0)
    raise FetchError("Operation failed")
