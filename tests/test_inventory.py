"""Tests for the in-memory inventory store."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from aimee.exceptions import WineNotFoundError, WineValidationError
from aimee.services.inventory import (
    DEFAULT_INVENTORY,
    InventoryStore,
    validate_wine_fields,
)


def _payload(**overrides) -> dict:
    payload = {
        "wine_name": "Merlot",
        "price": "$22",
        "inventory": 30,
        "customer_last_ordered": "Harbor Bistro",
    }
    payload.update(overrides)
    return payload


class TestSeed:
    """The default seed inventory."""

    def test_seed_contents(self, store: InventoryStore) -> None:
        wines = store.list()
        assert [w.id for w in wines] == [1, 2, 3]
        assert [w.wine_name for w in wines] == ["Pinot Noir", "Cabernet Sauvignon", "Syrah"]
        assert [w.inventory for w in wines] == [120, 12, 0]
        assert all(w.wine_type == "Red Wine" for w in wines)

    def test_empty_store(self) -> None:
        assert len(InventoryStore()) == 0

    def test_snapshot_is_immutable(self, store: InventoryStore) -> None:
        snapshot = store.snapshot()
        assert isinstance(snapshot, tuple)
        store.create(_payload())
        assert len(snapshot) == 3


class TestValidation:
    """Field validation on create and update."""

    def test_defaults_applied(self) -> None:
        values = validate_wine_fields(_payload())
        assert values["last_order_date"] == date.today().isoformat()
        assert values["wine_type"] == "Red Wine"

    def test_inventory_string_coerced(self) -> None:
        assert validate_wine_fields(_payload(inventory="45"))["inventory"] == 45

    def test_zero_inventory_allowed(self) -> None:
        assert validate_wine_fields(_payload(inventory=0))["inventory"] == 0

    def test_lists_every_missing_field(self) -> None:
        with pytest.raises(WineValidationError) as exc_info:
            validate_wine_fields({"wine_name": "Merlot"})
        assert exc_info.value.fields == ["price", "inventory", "customer_last_ordered"]

    def test_blank_strings_are_missing(self) -> None:
        with pytest.raises(WineValidationError) as exc_info:
            validate_wine_fields(_payload(wine_name="  ", customer_last_ordered=""))
        assert exc_info.value.fields == ["wine_name", "customer_last_ordered"]

    @pytest.mark.parametrize("bad", [-1, "many", "3.5", True])
    def test_malformed_inventory(self, bad) -> None:
        with pytest.raises(WineValidationError) as exc_info:
            validate_wine_fields(_payload(inventory=bad))
        assert exc_info.value.fields == ["inventory"]

    def test_explicit_optional_fields_kept(self) -> None:
        values = validate_wine_fields(
            _payload(last_order_date="2024-06-01", wine_type="White Wine")
        )
        assert values["last_order_date"] == "2024-06-01"
        assert values["wine_type"] == "White Wine"

    @pytest.mark.parametrize("price", ["$18", "$12.50", " $7 ", "$0"])
    def test_valid_prices(self, price) -> None:
        assert validate_wine_fields(_payload(price=price))["price"] == price.strip()

    @pytest.mark.parametrize(
        "price",
        ["NaN", "$sNaN", "$Infinity", "$1e999999", "five dollars", "18", "$-3", "$1.", "$12.5.0"],
    )
    def test_malformed_price(self, price) -> None:
        with pytest.raises(WineValidationError) as exc_info:
            validate_wine_fields(_payload(price=price))
        assert exc_info.value.fields == ["price"]

    def test_fields_reported_in_order(self) -> None:
        with pytest.raises(WineValidationError) as exc_info:
            validate_wine_fields(_payload(wine_name="", price="cheap", inventory=-2))
        assert exc_info.value.fields == ["wine_name", "price", "inventory"]

    def test_malformed_price_not_stored(self, store: InventoryStore) -> None:
        with pytest.raises(WineValidationError):
            store.create(_payload(price="NaN"))
        assert len(store) == 3


class TestCrud:
    """Create, read, update and delete."""

    def test_create_assigns_next_id(self, store: InventoryStore) -> None:
        wine = store.create(_payload())
        assert wine.id == 4
        assert store.get(4) == wine
        assert len(store) == 4

    def test_create_invalid_leaves_store_untouched(self, store: InventoryStore) -> None:
        with pytest.raises(WineValidationError):
            store.create({"wine_name": "Merlot"})
        assert len(store) == 3
        assert store.create(_payload()).id == 4

    def test_get_missing(self, store: InventoryStore) -> None:
        assert store.get(99) is None

    def test_update_replaces_fields(self, store: InventoryStore) -> None:
        updated = store.update(2, _payload(inventory="6", last_order_date="2024-04-01"))
        assert updated.id == 2
        assert updated.wine_name == "Merlot"
        assert updated.inventory == 6
        assert updated.last_order_date == "2024-04-01"
        assert store.get(2) == updated
        assert [w.id for w in store.list()] == [1, 2, 3]

    def test_update_missing_wine_checked_before_fields(self, store: InventoryStore) -> None:
        with pytest.raises(WineNotFoundError):
            store.update(99, {})

    def test_update_invalid_fields(self, store: InventoryStore) -> None:
        before = store.get(1)
        with pytest.raises(WineValidationError):
            store.update(1, _payload(price=""))
        assert store.get(1) == before

    def test_delete(self, store: InventoryStore) -> None:
        assert store.delete(1) is True
        assert store.get(1) is None
        assert [w.id for w in store.list()] == [2, 3]

    def test_delete_missing(self, store: InventoryStore) -> None:
        with pytest.raises(WineNotFoundError) as exc_info:
            store.delete(42)
        assert str(exc_info.value) == "Wine with ID 42 not found"

    def test_ids_never_reused(self, store: InventoryStore) -> None:
        store.delete(3)
        first = store.create(_payload())
        store.delete(first.id)
        second = store.create(_payload(wine_name="Malbec"))
        assert first.id == 4
        assert second.id == 5
        ids = [w.id for w in store.list()]
        assert len(ids) == len(set(ids))

    def test_reset(self, store: InventoryStore) -> None:
        store.create(_payload())
        store.delete(1)
        store.reset()
        assert [w.id for w in store.list()] == [1, 2, 3]
        assert len(store) == len(DEFAULT_INVENTORY)


class TestConcurrency:
    """Shared-store access from many threads."""

    def test_concurrent_creates_get_unique_consecutive_ids(self, store: InventoryStore) -> None:
        with ThreadPoolExecutor(max_workers=16) as pool:
            created = list(
                pool.map(lambda i: store.create(_payload(wine_name=f"Wine {i}")), range(200))
            )

        ids = sorted(wine.id for wine in created)
        assert ids == list(range(4, 204))
        assert len(store) == 203

    def test_concurrent_updates_and_deletes(self, store: InventoryStore) -> None:
        for i in range(50):
            store.create(_payload(wine_name=f"Wine {i}"))

        def churn(wine_id: int) -> None:
            if wine_id % 2:
                store.delete(wine_id)
            else:
                store.update(wine_id, _payload(inventory=wine_id))

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(churn, range(4, 54)))

        remaining = store.list()
        ids = [wine.id for wine in remaining]
        assert ids == [1, 2, 3] + list(range(4, 54, 2))
        assert all(w.inventory == w.id for w in remaining if w.id >= 4)
