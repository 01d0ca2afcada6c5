"""Order submission for the storefront.

This module turns a payment attempt into an order outcome. A declined
charge becomes a failed OrderResult; a charger that raises is a
collaborator fault and the exception reaches the caller unchanged.
"""

import logging

from .models import Order, OrderResult, PaymentMethod
from .ports import PaymentPort

logger = logging.getLogger(__name__)


class CheckoutService:
    """Charges orders through the payment port."""

    def __init__(self, payments: PaymentPort):
        self.payments = payments

    async def submit_order(
        self, order: Order, payment_method: PaymentMethod
    ) -> OrderResult:
        """Charge the order total exactly once and report the outcome.

        Args:
            order: Order to pay for.
            payment_method: Card to charge.

        Returns:
            OrderResult.succeeded() if the charge went through, otherwise
            OrderResult.payment_failed().

        Raises:
            Any exception from PaymentPort.charge(). No retry is attempted.
        """
        charge_result = await self.payments.charge(payment_method, order.total_amount)

        if not charge_result.is_success:
            logger.warning(
                f"Charge of {order.total_amount} was declined "
                f"(status={charge_result.status})"
            )
            return OrderResult.payment_failed()

        return OrderResult.succeeded()
