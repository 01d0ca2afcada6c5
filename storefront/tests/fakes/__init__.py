"""Fake implementations of core ports for testing.

Each fake records every call it receives so tests can assert on call
counts and exact arguments, and can be configured to return canned
values or fail:

- FakeExchangeRatePort: Canned exchange rate
- FakeShippingQuotePort: Canned quote (or None)
- FakeAnalyticsPort: Captured page views
- FakePaymentPort: Canned charge status, optional failure
- FakeEmailPort: Captured messages, optional failure
- FakeCodeGeneratorPort: Scripted codes, captured results
- FakeClock: Settable, steppable time source
"""

from .analytics import FakeAnalyticsPort
from .clock import FakeClock
from .currency import FakeExchangeRatePort
from .email import FakeEmailPort
from .payment import FakePaymentPort
from .security import FakeCodeGeneratorPort
from .shipping import FakeShippingQuotePort

__all__ = [
    "FakeAnalyticsPort",
    "FakeClock",
    "FakeCodeGeneratorPort",
    "FakeEmailPort",
    "FakeExchangeRatePort",
    "FakePaymentPort",
    "FakeShippingQuotePort",
]
