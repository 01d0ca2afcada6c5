"""Currency conversion and holiday discount rules."""

import logging
from datetime import UTC, tzinfo

from .clock import current_clock, to_reference_time
from .ports import ClockPort, ExchangeRatePort

logger = logging.getLogger(__name__)

CHRISTMAS = (12, 25)
CHRISTMAS_DISCOUNT = 0.2


class PricingService:
    """Prices goods in other currencies and applies date-based discounts.

    Uses ports but contains no adapter-specific logic.
    """

    def __init__(
        self,
        exchange_rates: ExchangeRatePort,
        base_currency: str = "USD",
        clock: ClockPort | None = None,
        zone: tzinfo = UTC,
    ):
        """Initialize the pricing service.

        Args:
            exchange_rates: Source of conversion rates.
            base_currency: Currency that store prices are expressed in.
            clock: Time source. If None, the process-wide clock is read
                on every call.
            zone: Reference timezone for calendar rules.
        """
        self.exchange_rates = exchange_rates
        self.base_currency = base_currency
        self.clock = clock
        self.zone = zone

    def get_price_in_currency(self, amount: float, target_currency: str) -> float:
        """Convert a store price into target_currency.

        The rate is looked up once and applied without rounding.
        """
        rate = self.exchange_rates.get_rate(self.base_currency, target_currency)
        logger.debug(
            f"Converting {amount} {self.base_currency} to {target_currency} "
            f"at rate {rate}"
        )
        return amount * rate

    def get_discount(self) -> float:
        """Return the discount in effect today: 0.2 on Christmas Day, else 0."""
        clock = self.clock if self.clock is not None else current_clock()
        today = to_reference_time(clock.now(), self.zone)
        if (today.month, today.day) == CHRISTMAS:
            return CHRISTMAS_DISCOUNT
        return 0
