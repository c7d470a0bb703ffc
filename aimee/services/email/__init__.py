"""Email outbox for Aimee."""

from aimee.services.email.base import EmailService, get_email_service
from aimee.services.email.console import ConsoleEmailService

__all__ = [
    "ConsoleEmailService",
    "EmailService",
    "get_email_service",
]
