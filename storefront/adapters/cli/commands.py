"""CLI command implementations for the storefront.

Maps CLI commands (price, shipping, order, signup, ...) to the core
services. Handles CLI-specific argument conversion and error reporting;
collaborator faults are reported as error results instead of ending the
session.
"""

import logging
from typing import Any

from storefront.core.accounts import AccountService
from storefront.core.checkout import CheckoutService
from storefront.core.errors import CollaboratorError
from storefront.core.models import Order, PaymentMethod
from storefront.core.opening_hours import OpeningHours
from storefront.core.pages import PageRenderer
from storefront.core.pricing import PricingService
from storefront.core.shipping import ShippingService

logger = logging.getLogger(__name__)


def _as_amount(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _as_text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


class CLICommandHandler:
    """Handles CLI commands by delegating to the core services."""

    def __init__(
        self,
        pricing: PricingService,
        shipping: ShippingService,
        pages: PageRenderer,
        checkout: CheckoutService,
        accounts: AccountService,
        opening_hours: OpeningHours,
    ):
        self.pricing = pricing
        self.shipping = shipping
        self.pages = pages
        self.checkout = checkout
        self.accounts = accounts
        self.opening_hours = opening_hours

    @staticmethod
    def _error(operation: str, error: Exception) -> dict[str, Any]:
        return {
            "status": "error",
            "operation": operation,
            "message": str(error),
        }

    def get_price(self, amount: float, currency: str) -> dict[str, Any]:
        """Convert amount into currency.

        Returns:
            Dictionary with the converted price, or an error result if no
            rate is available.
        """
        try:
            amount = _as_amount(amount, "amount")
            currency = _as_text(currency, "currency")
            price = self.pricing.get_price_in_currency(amount, currency)
        except (ValueError, CollaboratorError) as e:
            logger.error(f"Failed to price {amount} in {currency}: {e}")
            return self._error("price", e)

        return {
            "status": "success",
            "operation": "price",
            "amount": amount,
            "currency": currency.upper(),
            "price": price,
        }

    def get_shipping_info(self, destination: str) -> dict[str, Any]:
        try:
            destination = _as_text(destination, "destination")
        except ValueError as e:
            return self._error("shipping", e)

        return {
            "status": "success",
            "operation": "shipping",
            "destination": destination,
            "message": self.shipping.get_shipping_info(destination),
        }

    async def render_page(self) -> dict[str, Any]:
        content = await self.pages.render_page()
        return {"status": "success", "operation": "render", "content": content}

    async def submit_order(self, total_amount: float, card_number: str) -> dict[str, Any]:
        """Submit an order paid with card_number.

        Returns:
            Dictionary with the order result, or an error result if the
            input is invalid or the charger fails.
        """
        try:
            order = Order(total_amount=_as_amount(total_amount, "total_amount"))
            method = PaymentMethod(card_number=_as_text(card_number, "card_number"))
            result = await self.checkout.submit_order(order, method)
        except (ValueError, CollaboratorError) as e:
            logger.error(f"Failed to submit order: {e}")
            return self._error("order", e)

        return {
            "status": "success",
            "operation": "order",
            "result": result.to_dict(),
        }

    async def sign_up(self, email: str) -> dict[str, Any]:
        try:
            email = _as_text(email, "email")
        except ValueError as e:
            return self._error("signup", e)

        registered = await self.accounts.sign_up(email)
        return {
            "status": "success" if registered else "error",
            "operation": "signup",
            "email": email,
            "registered": registered,
        }

    async def login(self, email: str) -> dict[str, Any]:
        try:
            email = _as_text(email, "email")
            await self.accounts.login(email)
        except (ValueError, CollaboratorError) as e:
            logger.error(f"Failed to send login code to {email}: {e}")
            return self._error("login", e)

        return {
            "status": "success",
            "operation": "login",
            "email": email,
            "message": f"Login code sent to {email}",
        }

    def is_online(self) -> dict[str, Any]:
        return {
            "status": "success",
            "operation": "online",
            "online": self.opening_hours.is_online(),
        }

    def get_discount(self) -> dict[str, Any]:
        return {
            "status": "success",
            "operation": "discount",
            "discount": self.pricing.get_discount(),
        }
