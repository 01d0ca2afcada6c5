"""Shipping information for the storefront."""

import logging

from .models import ShippingQuote
from .ports import ShippingQuotePort

logger = logging.getLogger(__name__)

SHIPPING_UNAVAILABLE = "Shipping Unavailable"


def format_cost(cost: float) -> str:
    """Render a cost without a trailing ".0" for whole amounts."""
    if float(cost).is_integer():
        return str(int(cost))
    return str(cost)


def format_quote(quote: ShippingQuote) -> str:
    return f"Shipping Cost: ${format_cost(quote.cost)} ({quote.estimated_days} Days)"


class ShippingService:
    """Turns shipping quotes into customer-facing messages."""

    def __init__(self, quotes: ShippingQuotePort):
        self.quotes = quotes

    def get_shipping_info(self, destination: str) -> str:
        """Describe shipping to destination, or report it unavailable."""
        quote = self.quotes.get_quote(destination)
        if quote is None:
            logger.info(f"No shipping quote available for {destination}")
            return SHIPPING_UNAVAILABLE
        return format_quote(quote)
