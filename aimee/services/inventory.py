"""In-memory wine inventory store."""

import logging
import re
import threading
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from aimee.exceptions import WineNotFoundError, WineValidationError
from aimee.models.wine import DEFAULT_WINE_TYPE, WineRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("wine_name", "price", "inventory", "customer_last_ordered")

# "$<number>", e.g. "$18" or "$12.50"
PRICE_PATTERN = re.compile(r"\$[0-9]+(\.[0-9]+)?")

DEFAULT_INVENTORY: tuple[dict[str, Any], ...] = (
    {
        "wine_name": "Pinot Noir",
        "price": "$18",
        "inventory": 120,
        "customer_last_ordered": "Thompson Restaurant",
        "last_order_date": "2024-03-15",
        "wine_type": "Red Wine",
    },
    {
        "wine_name": "Cabernet Sauvignon",
        "price": "$35",
        "inventory": 12,
        "customer_last_ordered": "Johnson Winery",
        "last_order_date": "2024-02-28",
        "wine_type": "Red Wine",
    },
    {
        "wine_name": "Syrah",
        "price": "$25",
        "inventory": 0,
        "customer_last_ordered": "Westport Spirits",
        "last_order_date": "2024-01-10",
        "wine_type": "Red Wine",
    },
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _coerce_inventory(value: Any) -> int | None:
    """Coerce a bottle count to a non-negative int, or None if impossible."""
    if isinstance(value, bool):
        return None
    try:
        count = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return count if count >= 0 else None


def validate_wine_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Validate and normalize a create/update payload.

    Optional fields that are omitted fall back to their defaults:
    ``last_order_date`` to today's date and ``wine_type`` to "Red Wine".

    Raises:
        WineValidationError: Naming every missing or malformed required field.
    """
    invalid = []
    for name in REQUIRED_FIELDS:
        value = fields.get(name)
        if _is_blank(value):
            invalid.append(name)
        elif name == "price" and not PRICE_PATTERN.fullmatch(str(value).strip()):
            invalid.append(name)
        elif name == "inventory" and _coerce_inventory(value) is None:
            invalid.append(name)

    if invalid:
        raise WineValidationError(invalid)

    inventory = _coerce_inventory(fields["inventory"])

    last_order_date = fields.get("last_order_date")
    wine_type = fields.get("wine_type")

    return {
        "wine_name": str(fields["wine_name"]).strip(),
        "price": str(fields["price"]).strip(),
        "inventory": inventory,
        "customer_last_ordered": str(fields["customer_last_ordered"]).strip(),
        "last_order_date": (
            date.today().isoformat() if _is_blank(last_order_date) else str(last_order_date)
        ),
        "wine_type": DEFAULT_WINE_TYPE if _is_blank(wine_type) else str(wine_type),
    }


class InventoryStore:
    """Ordered, lock-guarded collection of wine records.

    Ids are assigned from a counter that only moves forward, so an id is
    never handed out twice within the store's lifetime, even after deletes.
    """

    def __init__(self, seed: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._lock = threading.Lock()
        self._records: list[WineRecord] = []
        self._next_id = 1
        if seed is not None:
            for fields in seed:
                self.create(fields)

    def list(self) -> list[WineRecord]:
        """Return all records in insertion order."""
        with self._lock:
            return list(self._records)

    def snapshot(self) -> tuple[WineRecord, ...]:
        """Return an immutable view of the store for read-only consumers."""
        with self._lock:
            return tuple(self._records)

    def get(self, wine_id: int) -> WineRecord | None:
        """Return the record with the given id, or None."""
        with self._lock:
            return next((r for r in self._records if r.id == wine_id), None)

    def create(self, fields: Mapping[str, Any]) -> WineRecord:
        """Validate fields and append a new record with the next id."""
        values = validate_wine_fields(fields)
        with self._lock:
            record = WineRecord(id=self._next_id, **values)
            self._next_id += 1
            self._records.append(record)
        logger.info("Added wine %d (%s)", record.id, record.wine_name)
        return record

    def update(self, wine_id: int, fields: Mapping[str, Any]) -> WineRecord:
        """Replace every mutable field of an existing record.

        Raises:
            WineNotFoundError: If no record has this id.
            WineValidationError: If required fields are missing or malformed.
        """
        with self._lock:
            index = self._index_of(wine_id)
            values = validate_wine_fields(fields)
            record = WineRecord(id=wine_id, **values)
            self._records[index] = record
        logger.info("Updated wine %d (%s)", wine_id, record.wine_name)
        return record

    def delete(self, wine_id: int) -> bool:
        """Remove a record.

        Raises:
            WineNotFoundError: If no record has this id.
        """
        with self._lock:
            index = self._index_of(wine_id)
            removed = self._records.pop(index)
        logger.info("Deleted wine %d (%s)", wine_id, removed.wine_name)
        return True

    def reset(self, seed: Iterable[Mapping[str, Any]] = DEFAULT_INVENTORY) -> None:
        """Drop all records and reload from a seed, restarting ids at 1."""
        with self._lock:
            self._records = []
            self._next_id = 1
        for fields in seed:
            self.create(fields)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, wine_id: int) -> int:
        # Caller holds the lock
        for index, record in enumerate(self._records):
            if record.id == wine_id:
                return index
        raise WineNotFoundError(wine_id)


# Process-wide store, seeded with the default inventory
inventory_store = InventoryStore(DEFAULT_INVENTORY)


def get_inventory_store() -> InventoryStore:
    """FastAPI dependency returning the process-wide inventory store."""
    return inventory_store
