"""Flat-rate shipping adapter.

Implements ShippingQuotePort from a fixed table of per-destination rates.
"""

from collections.abc import Mapping

from storefront.core.models import ShippingQuote
from storefront.core.ports import ShippingQuotePort


class FlatRateShippingAdapter(ShippingQuotePort):
    """Quotes a fixed cost and delivery time per destination.

    Destinations are matched case-insensitively. Unknown destinations
    get no quote.
    """

    def __init__(self, rates: Mapping[str, ShippingQuote]):
        self.rates = {
            destination.strip().casefold(): quote
            for destination, quote in rates.items()
        }

    def get_quote(self, destination: str) -> ShippingQuote | None:
        return self.rates.get(destination.strip().casefold())
