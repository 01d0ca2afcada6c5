"""Sandbox payment adapter.

Implements PaymentPort without moving money. Charges succeed unless the
card is on the configured decline list, which makes every checkout path
reachable from the CLI.
"""

import logging
import math
from collections.abc import Iterable

from storefront.core.errors import PaymentError
from storefront.core.models import ChargeResult, PaymentMethod
from storefront.core.ports import PaymentPort

logger = logging.getLogger(__name__)


class SandboxPaymentAdapter(PaymentPort):
    """Approves or declines charges from a static decline list."""

    def __init__(self, declined_cards: Iterable[str] = ()):
        """Initialize the sandbox charger.

        Args:
            declined_cards: Card numbers whose charges come back "failed".
        """
        self.declined_cards = frozenset(declined_cards)

    async def charge(self, method: PaymentMethod, amount: float) -> ChargeResult:
        """Charge amount to method.

        Raises:
            PaymentError: If amount is negative or not a finite number.
        """
        if not math.isfinite(amount) or amount < 0:
            raise PaymentError(f"Cannot charge invalid amount: {amount}")

        if method.card_number in self.declined_cards:
            logger.info(f"Sandbox declined charge of {amount:.2f}")
            return ChargeResult(status="failed")

        logger.info(f"Sandbox approved charge of {amount:.2f}")
        return ChargeResult(status="success")
