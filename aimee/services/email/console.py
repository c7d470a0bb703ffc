"""Console email service: logs messages instead of delivering them."""

import logging
from typing import TYPE_CHECKING

from aimee.services.email.base import EmailService

if TYPE_CHECKING:
    from aimee.config import Settings

logger = logging.getLogger(__name__)


class ConsoleEmailService(EmailService):
    """Email service that logs emails to console instead of sending."""

    def __init__(self, settings: "Settings") -> None:
        super().__init__(settings)
        logger.debug("Using console email backend (emails will be logged, not sent)")

    async def send_email(self, recipient: str, subject: str, text_content: str) -> bool:
        """Log an email to the console instead of sending.

        Returns:
            Always returns True.
        """
        separator = "=" * 60
        logger.info(
            "\n%s\n"
            "EMAIL (console backend - not actually sent)\n"
            "%s\n"
            "From: %s\n"
            "To: %s\n"
            "Subject: %s\n"
            "%s\n"
            "%s\n"
            "%s",
            separator,
            separator,
            self.sender_name,
            recipient,
            subject,
            separator,
            text_content or "(no text content)",
            separator,
        )
        return True
