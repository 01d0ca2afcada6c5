"""Stdout email adapter.

Implements EmailPort by printing each message to the terminal.
"""

import asyncio
import logging

from storefront.core.models import EmailMessage
from storefront.core.ports import EmailPort

logger = logging.getLogger(__name__)


class StdoutEmailAdapter(EmailPort):
    """Prints outgoing email with human-readable formatting."""

    def __init__(self, sender: str = "no-reply@storefront.local"):
        """Initialize stdout email adapter.

        Args:
            sender: Address shown in the From line.
        """
        self.sender = sender
        self.sent: list[EmailMessage] = []

    async def send(self, recipient: str, body: str) -> None:
        message = EmailMessage(recipient=recipient, body=body)
        await asyncio.to_thread(print, self._format_message(self.sender, message))
        self.sent.append(message)
        logger.debug(f"Printed email to {recipient}")

    @staticmethod
    def _format_message(sender: str, message: EmailMessage) -> str:
        """Format an email for the terminal."""
        lines = [
            "=" * 80,
            f"From: {sender}",
            f"To: {message.recipient}",
            "-" * 80,
            message.body,
            "=" * 80,
        ]
        return "\n".join(lines)
