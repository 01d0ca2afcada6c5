"""Account sign-up and passwordless login.

Both flows talk to the customer only through the email port. An invalid
address is a validation rejection and is returned as False; delivery
problems are collaborator faults.
"""

import logging
import re

from .errors import EmailDeliveryError
from .ports import CodeGeneratorPort, EmailPort

logger = logging.getLogger(__name__)

DEFAULT_EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
WELCOME_MESSAGE = "Welcome aboard!"


class AccountService:
    """Signs customers up and emails them one-time login codes."""

    def __init__(
        self,
        email: EmailPort,
        codes: CodeGeneratorPort,
        email_pattern: str = DEFAULT_EMAIL_PATTERN,
    ):
        """Initialize the account service.

        Args:
            email: Email sender.
            codes: One-time code generator.
            email_pattern: Regular expression an address must fully match.
        """
        self.email = email
        self.codes = codes
        self.email_pattern = re.compile(email_pattern)

    def is_valid_email(self, address: object) -> bool:
        return isinstance(address, str) and self.email_pattern.fullmatch(address) is not None

    async def sign_up(self, address: str) -> bool:
        """Register address and send a single welcome email.

        Returns:
            False if the address is not valid (nothing is sent), True
            otherwise. A failed welcome email is logged and does not
            change the result.
        """
        if not self.is_valid_email(address):
            logger.info(f"Rejected sign-up with invalid email {address!r}")
            return False

        try:
            await self.email.send(address, WELCOME_MESSAGE)
        except EmailDeliveryError as e:
            logger.warning(f"Welcome email to {address} was not delivered: {e}")

        return True

    async def login(self, address: str) -> None:
        """Email a freshly generated one-time code to address.

        Raises:
            Any exception from EmailPort.send().
        """
        code = self.codes.generate_code()
        await self.email.send(address, str(code))
        logger.debug(f"Sent one-time login code to {address}")
