"""Static exchange-rate adapter.

Implements ExchangeRatePort from a fixed table of rates, typically
loaded from configuration.
"""

import logging
from collections.abc import Mapping

from storefront.core.errors import ExchangeRateError
from storefront.core.ports import ExchangeRatePort

logger = logging.getLogger(__name__)


class StaticExchangeRateAdapter(ExchangeRatePort):
    """Looks rates up in a table keyed by "BASE:TARGET".

    A pair that is missing but whose inverse is present is answered with
    the reciprocal of the inverse rate.
    """

    def __init__(self, rates: Mapping[str, float]):
        """Initialize the adapter.

        Args:
            rates: Rates keyed by "BASE:TARGET", e.g. {"USD:AUD": 1.5}.
        """
        self.rates = {pair.upper(): rate for pair, rate in rates.items()}

    def get_rate(self, base: str, target: str) -> float:
        base = base.upper()
        target = target.upper()

        if base == target:
            return 1.0

        rate = self.rates.get(f"{base}:{target}")
        if rate is not None:
            return rate

        inverse = self.rates.get(f"{target}:{base}")
        if inverse is not None:
            logger.debug(f"Using inverse of {target}:{base} for {base}:{target}")
            return 1 / inverse

        raise ExchangeRateError(f"No exchange rate for {base} to {target}")
