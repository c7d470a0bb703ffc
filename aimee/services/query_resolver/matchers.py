"""Substring matching helpers shared by the resolver rules."""

from collections.abc import Iterable, Sequence

from aimee.models.wine import WineRecord


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Check whether any keyword occurs in the (already lower-cased) text."""
    return any(keyword in text for keyword in keywords)


def name_matches(text: str, name: str) -> bool:
    """Check whether a name, or any single word of it, occurs in the text."""
    name_lower = name.lower()
    if name_lower in text:
        return True
    return any(word in text for word in name_lower.split())


def find_by_customer(text: str, inventory: Sequence[WineRecord]) -> WineRecord | None:
    """First record, in store order, whose customer is mentioned."""
    for record in inventory:
        if name_matches(text, record.customer_last_ordered):
            return record
    return None


def find_by_wine(text: str, inventory: Sequence[WineRecord]) -> WineRecord | None:
    """First record, in store order, whose wine name is mentioned."""
    for record in inventory:
        if name_matches(text, record.wine_name):
            return record
    return None
