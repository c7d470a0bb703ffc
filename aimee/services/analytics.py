"""Summary statistics over the inventory and the interaction log."""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from aimee.models.log_entry import LogEntry, LogEntryType
from aimee.models.wine import WineRecord
from aimee.services.interaction_log import InteractionLog
from aimee.services.inventory import InventoryStore

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_SIZE = 5


def parse_price(price: str) -> Decimal:
    """Parse a "$<number>" price into a Decimal.

    Unparsable and non-finite prices (NaN, Infinity) count as zero so one
    bad record does not break the whole summary.
    """
    try:
        value = Decimal(price.strip().lstrip("$").strip())
    except (InvalidOperation, AttributeError):
        value = None
    if value is None or not value.is_finite():
        logger.warning("Could not parse price %r, counting it as 0", price)
        return Decimal(0)
    return value


def total_value(wines: Sequence[WineRecord]) -> int:
    """Inventory value rounded to the nearest whole dollar."""
    value = sum((parse_price(w.price) * w.inventory for w in wines), Decimal(0))
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def summarize_records(
    wines: Sequence[WineRecord],
    entries: Sequence[LogEntry],
    recent: int = RECENT_ACTIVITY_SIZE,
) -> dict:
    """Build the analytics payload from plain sequences."""
    total_emails = sum(1 for e in entries if e.type == LogEntryType.EMAIL_SENT)

    return {
        "totalQueries": len(entries) - total_emails,
        "totalEmails": total_emails,
        "totalWines": len(wines),
        "totalBottles": sum(w.inventory for w in wines),
        "totalValue": total_value(wines),
        "recentActivity": list(entries[:recent]),
    }


def summarize(
    store: InventoryStore,
    log: InteractionLog,
    recent: int = RECENT_ACTIVITY_SIZE,
) -> dict:
    """Summarize the current store and log."""
    return summarize_records(store.snapshot(), log.list(), recent)
