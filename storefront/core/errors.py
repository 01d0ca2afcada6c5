"""Exception hierarchy for the storefront core.

Collaborator faults (a port failing to do its job) are raised as
exceptions. Business outcomes such as a declined charge or an invalid
email are returned as values and never raised.
"""


class CollaboratorError(Exception):
    """Base class for failures raised by a port implementation."""


class PaymentError(CollaboratorError):
    """The payment charger could not attempt the charge."""


class EmailDeliveryError(CollaboratorError):
    """The email sender could not deliver a message."""


class ExchangeRateError(CollaboratorError):
    """No exchange rate is available for a currency pair."""


class EmptyStackError(Exception):
    """Raised when reading from an empty Stack."""


class FetchError(Exception):
    """Raised when a data fetch fails.

    Attributes:
        reason: Human-readable failure reason.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


__all__ = [
    "CollaboratorError",
    "EmailDeliveryError",
    "EmptyStackError",
    "ExchangeRateError",
    "FetchError",
    "PaymentError",
]
