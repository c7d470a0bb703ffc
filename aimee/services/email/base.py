"""Base email service and factory."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aimee.config import Settings

logger = logging.getLogger(__name__)

DRAFT_SUBJECT = "A note from {app_name}"


class EmailService(ABC):
    """Abstract base class for email services."""

    def __init__(self, settings: "Settings") -> None:
        """Initialize the email service.

        Args:
            settings: Application settings.
        """
        self.settings = settings
        self.sender_name = settings.app_name

    @abstractmethod
    async def send_email(self, recipient: str, subject: str, text_content: str) -> bool:
        """Send an email.

        Args:
            recipient: Customer the message is addressed to.
            subject: Email subject.
            text_content: Plain text email body.

        Returns:
            True if the email was accepted, False otherwise.
        """
        pass

    async def send_draft(self, recipient: str, content: str) -> bool:
        """Send a draft produced by the query resolver."""
        return await self.send_email(
            recipient=recipient,
            subject=DRAFT_SUBJECT.format(app_name=self.sender_name),
            text_content=content,
        )


def get_email_service() -> EmailService:
    """Get the email service instance.

    Only the console backend exists; messages are logged, never delivered.
    """
    from aimee.config import settings
    from aimee.services.email.console import ConsoleEmailService

    return ConsoleEmailService(settings)
