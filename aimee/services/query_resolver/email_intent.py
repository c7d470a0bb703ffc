"""Recipient and body selection for email-draft requests."""

from collections.abc import Sequence

from aimee.models.wine import WineRecord

from .constants import (
    DEFAULT_RECIPIENT,
    DELIVERY_KEYWORDS,
    DELIVERY_TEMPLATE,
    EVENT_KEYWORDS,
    EVENT_TEMPLATE,
    FOLLOW_UP_KEYWORDS,
    FOLLOW_UP_TEMPLATE,
    GENERIC_TEMPLATE,
    KNOWN_RECIPIENTS,
    RESTOCK_KEYWORDS,
    RESTOCK_TEMPLATE,
)
from .matchers import contains_any, find_by_wine

# Checked top to bottom; the first group with a hit picks the template
CONTENT_TEMPLATES = (
    (FOLLOW_UP_KEYWORDS, FOLLOW_UP_TEMPLATE),
    (DELIVERY_KEYWORDS, DELIVERY_TEMPLATE),
    (RESTOCK_KEYWORDS, RESTOCK_TEMPLATE),
    (EVENT_KEYWORDS, EVENT_TEMPLATE),
)


def extract_recipient(text: str, inventory: Sequence[WineRecord]) -> str:
    """Work out who an email request is addressed to.

    Known customer fragments win, then the customer who last ordered a
    mentioned wine, then the default recipient.

    Args:
        text: Lower-cased query text.
        inventory: Current inventory snapshot.
    """
    for fragment, recipient in KNOWN_RECIPIENTS:
        if fragment in text:
            return recipient

    record = find_by_wine(text, inventory)
    if record is not None:
        return record.customer_last_ordered

    return DEFAULT_RECIPIENT


def select_template(text: str) -> str:
    for keywords, template in CONTENT_TEMPLATES:
        if contains_any(text, keywords):
            return template
    return GENERIC_TEMPLATE


def generate_email_content(text: str, recipient: str) -> str:
    """Fill the template matching the request's intent with the recipient."""
    return select_template(text).format(recipient=recipient)
