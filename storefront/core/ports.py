"""Port interfaces for the storefront core.

These abstract base classes define the boundaries between the business
functions and the outside world. Implementations live in the adapters/
package; test doubles live in tests/fakes/.

Every port exposes a single capability so that a caller can replace one
collaborator without reimplementing the others:

- ExchangeRatePort: Currency conversion rates
- ShippingQuotePort: Shipping cost and delivery estimates
- AnalyticsPort: Page-view tracking
- PaymentPort: Charging a payment method
- EmailPort: Sending email
- CodeGeneratorPort: One-time login codes
- ClockPort: The current instant
"""

from abc import ABC, abstractmethod
from datetime import datetime

from .models import ChargeResult, OneTimeCode, PaymentMethod, ShippingQuote


class ExchangeRatePort(ABC):
    """Port for looking up currency exchange rates."""

    @abstractmethod
    def get_rate(self, base: str, target: str) -> float:
        """Return the rate converting one unit of base into target.

        Args:
            base: ISO 4217 code of the source currency (e.g. "USD").
            target: ISO 4217 code of the target currency (e.g. "AUD").

        Returns:
            A positive rate.

        Raises:
            Exception: If no rate is known for the pair.
        """


class ShippingQuotePort(ABC):
    """Port for requesting shipping quotes."""

    @abstractmethod
    def get_quote(self, destination: str) -> ShippingQuote | None:
        """Quote shipping to a destination.

        Args:
            destination: Destination name (e.g. "London").

        Returns:
            ShippingQuote, or None if the destination cannot be served.
        """


class AnalyticsPort(ABC):
    """Port for fire-and-forget usage tracking."""

    @abstractmethod
    def track_page_view(self, path: str) -> None:
        """Record a view of the page at path."""


class PaymentPort(ABC):
    """Port for charging customers.

    A declined charge is reported through ChargeResult.status. Raising is
    reserved for the charger being unable to attempt the charge at all.
    """

    @abstractmethod
    async def charge(self, method: PaymentMethod, amount: float) -> ChargeResult:
        """Charge amount to the given payment method.

        Args:
            method: Card details to charge.
            amount: Amount to charge, in the store currency.

        Returns:
            ChargeResult with status "success" or "failed".

        Raises:
            PaymentError: If the charge could not be attempted.
        """


class EmailPort(ABC):
    """Port for sending email."""

    @abstractmethod
    async def send(self, recipient: str, body: str) -> None:
        """Send body to recipient.

        Raises:
            EmailDeliveryError: If the message could not be delivered.
        """


class CodeGeneratorPort(ABC):
    """Port for producing one-time login codes."""

    @abstractmethod
    def generate_code(self) -> OneTimeCode:
        """Return a freshly generated code."""


class ClockPort(ABC):
    """Port for reading the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant.

        Timezone-aware readings are preferred. Naive readings are
        interpreted in the caller's reference timezone.
        """


__all__ = [
    "AnalyticsPort",
    "ClockPort",
    "CodeGeneratorPort",
    "EmailPort",
    "ExchangeRatePort",
    "PaymentPort",
    "ShippingQuotePort",
]
