"""Tests for the in-memory entity store."""

import logging
import pytest
from dataclasses import replace
from datetime import date
from decimal import Decimal

from fleetledger.domain.entities import Expense, ExpenseType, Order
from fleetledger.domain.errors import (
    DuplicateNameError,
    EmptyNameError,
    NotFoundError,
    ValidationError,
)
from fleetledger.domain.store import DEFAULT_CLIENTS, LedgerStore


def make_expense(**overrides) -> Expense:
    fields = dict(
        date=date(2024, 5, 3),
        plate_number="KRT 1234",
        type=ExpenseType.DIESEL,
        cost=Decimal("80"),
        description="Fill up",
    )
    fields.update(overrides)
    return Expense(**fields)


class TestLoading:
    """Tests for loading collections when the store is created."""

    def test_defaults_when_nothing_saved(self, store):
        assert store.clients == DEFAULT_CLIENTS
        assert store.orders == ()
        assert store.expenses == ()

    def test_saved_empty_client_list_is_kept(self, empty_store):
        assert empty_store.clients == ()

    def test_loads_original_storage_format(self, memory_db):
        memory_db.collections = {
            "clients": [{"id": "1", "name": "Acme"}],
            "orders": [
                {
                    "id": "1715300000000",
                    "date": "2024-05-10",
                    "vehicle": "TRK-12",
                    "clientName": "Acme",
                    "orderType": "Towing",
                    "location": "Port",
                    "cost": 40,
                    "price": 100.5,
                    "paymentMethod": "Postpaid",
                    "paid": False,
                }
            ],
        }
        store = LedgerStore(memory_db)

        assert [c.name for c in store.clients] == ["Acme"]
        order = store.orders[0]
        assert order.id == "1715300000000"
        assert order.price == Decimal("100.5")
        assert order.date == date(2024, 5, 10)
        assert store.expenses == ()


class TestOrders:
    """Tests for saving and deleting orders."""

    def test_add_assigns_id_and_appends(self, store, order_factory):
        first = store.add_or_update(order_factory(vehicle="one"))
        second = store.add_or_update(order_factory(vehicle="two"))

        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id
        assert [o.vehicle for o in store.orders] == ["one", "two"]

    def test_ids_increase(self, store, order_factory):
        ids = [store.add_or_update(order_factory()).id for _ in range(5)]
        assert len(set(ids)) == 5
        assert [int(i) for i in ids] == sorted(int(i) for i in ids)

    def test_update_keeps_position(self, store, order_factory):
        first = store.add_or_update(order_factory(vehicle="one"))
        store.add_or_update(order_factory(vehicle="two"))
        store.add_or_update(order_factory(vehicle="three"))

        updated = store.add_or_update(replace(first, vehicle="one-edited", paid=True))

        assert updated.id == first.id
        assert [o.vehicle for o in store.orders] == ["one-edited", "two", "three"]
        assert store.get_order(first.id).paid is True
        assert len(store.orders) == 3

    def test_unknown_id_is_appended_with_new_id(self, store, order_factory):
        saved = store.add_or_update(order_factory(id="does-not-exist"))
        assert saved.id != "does-not-exist"
        assert store.orders == (saved,)

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"price": Decimal("0")}, "price"),
            ({"price": Decimal("-5")}, "price"),
            ({"date": None}, "date"),
            ({"client_name": ""}, "client_name"),
            ({"client_name": "   "}, "client_name"),
            ({"vehicle": ""}, "vehicle"),
            ({"cost": Decimal("-1")}, "cost"),
        ],
    )
    def test_invalid_order_rejected(self, store, order_factory, overrides, field):
        existing = store.add_or_update(order_factory())
        before = store.orders

        with pytest.raises(ValidationError) as exc_info:
            store.add_or_update(order_factory(**overrides))
        assert field in exc_info.value.fields
        assert store.orders == before

        with pytest.raises(ValidationError):
            store.add_or_update(replace(existing, **overrides))
        assert store.orders == before

    def test_error_names_every_failed_field(self, store, order_factory):
        with pytest.raises(ValidationError) as exc_info:
            store.add_or_update(order_factory(vehicle="", price=Decimal("0")))
        assert exc_info.value.fields == ("vehicle", "price")
        assert "vehicle, price" in str(exc_info.value)

    def test_zero_cost_allowed(self, store, order_factory):
        saved = store.add_or_update(order_factory(cost=Decimal("0")))
        assert saved.cost == Decimal("0")

    def test_delete(self, store, order_factory):
        first = store.add_or_update(order_factory(vehicle="one"))
        store.add_or_update(order_factory(vehicle="two"))

        store.delete("order", first.id)

        assert [o.vehicle for o in store.orders] == ["two"]
        assert store.get_order(first.id) is None

    def test_delete_by_class(self, store, order_factory):
        saved = store.add_or_update(order_factory())
        store.delete(Order, saved.id)
        assert store.orders == ()

    def test_delete_unknown(self, store):
        with pytest.raises(NotFoundError, match="Order 42 not found"):
            store.delete("order", "42")

    def test_delete_unknown_kind(self, store):
        with pytest.raises(ValueError, match="Unknown record kind"):
            store.delete("client", "1")

    def test_rejects_other_types(self, store):
        with pytest.raises(TypeError):
            store.add_or_update("not an order")


class TestExpenses:
    """Tests for saving and deleting expenses."""

    def test_add_and_update(self, store):
        saved = store.add_or_update(make_expense())
        store.add_or_update(make_expense(plate_number="KRT 9"))

        store.add_or_update(replace(saved, type=ExpenseType.MAINTENANCE, cost=Decimal("300")))

        assert [e.plate_number for e in store.expenses] == ["KRT 1234", "KRT 9"]
        assert store.get_expense(saved.id).type is ExpenseType.MAINTENANCE

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"cost": Decimal("0")}, "cost"),
            ({"date": None}, "date"),
            ({"plate_number": ""}, "plate_number"),
        ],
    )
    def test_invalid_expense_rejected(self, store, overrides, field):
        with pytest.raises(ValidationError) as exc_info:
            store.add_or_update(make_expense(**overrides))
        assert field in exc_info.value.fields
        assert store.expenses == ()

    def test_delete(self, store):
        saved = store.add_or_update(make_expense())
        store.delete("expense", saved.id)
        assert store.expenses == ()

    def test_delete_unknown(self, store):
        with pytest.raises(NotFoundError, match="Expense 7 not found"):
            store.delete(Expense, "7")


class TestClients:
    """Tests for adding and removing clients."""

    def test_add_client_trims(self, store):
        client = store.add_client("  Acme  ")
        assert client.name == "Acme"
        assert store.clients[-1] == client

    def test_duplicate_name_ignores_case(self, store):
        store.add_client("omar")
        before = store.clients

        with pytest.raises(DuplicateNameError):
            store.add_client("Omar")
        assert store.clients == before

    def test_duplicate_of_default_client(self, store):
        with pytest.raises(DuplicateNameError, match="already exists"):
            store.add_client("MUTWALI")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name(self, store, name):
        with pytest.raises(EmptyNameError) as exc_info:
            store.add_client(name)
        assert exc_info.value.fields == ("name",)
        assert store.clients == DEFAULT_CLIENTS

    def test_new_client_ids_are_unique(self, store):
        ids = {store.add_client(f"Client {i}").id for i in range(5)}
        existing = {c.id for c in DEFAULT_CLIENTS}
        assert len(ids) == 5
        assert not ids & existing

    def test_remove_client_keeps_orders(self, store, acme_orders):
        acme = store.find_client_by_name("acme")
        before = store.orders

        removed = store.remove_client(acme.id)

        assert removed == acme
        assert store.find_client_by_name("Acme") is None
        assert store.orders == before

    def test_remove_unknown_client(self, store):
        with pytest.raises(NotFoundError):
            store.remove_client("nope")

    def test_find_client_by_name(self, store):
        assert store.find_client_by_name(" hassan bobo ").id == "1"
        assert store.find_client_by_name("nobody") is None


class TestPersistence:
    """Tests for writing collections back to the database."""

    def test_each_mutation_saves_its_collection(self, memory_db, order_factory):
        store = LedgerStore(memory_db)
        store.add_client("Acme")
        order = store.add_or_update(order_factory())
        store.add_or_update(make_expense())
        store.delete("order", order.id)

        assert memory_db.save_calls == ["clients", "orders", "expenses", "orders"]

    def test_rejected_mutation_does_not_save(self, memory_db, order_factory):
        store = LedgerStore(memory_db)
        with pytest.raises(ValidationError):
            store.add_or_update(order_factory(price=Decimal("0")))
        with pytest.raises(DuplicateNameError):
            store.add_client("Mutwali")
        assert memory_db.save_calls == []

    def test_failed_save_keeps_change_in_memory(self, memory_db, order_factory, caplog):
        store = LedgerStore(memory_db)
        memory_db.fail_saves = True

        with caplog.at_level(logging.WARNING, logger="fleetledger.domain.store"):
            saved = store.add_or_update(order_factory())

        assert store.orders == (saved,)
        assert "disk full" in caplog.text
        assert "orders" not in memory_db.collections

    def test_next_save_writes_earlier_changes(self, memory_db, order_factory):
        store = LedgerStore(memory_db)
        memory_db.fail_saves = True
        store.add_or_update(order_factory(vehicle="one"))
        memory_db.fail_saves = False
        store.add_or_update(order_factory(vehicle="two"))

        assert [r["vehicle"] for r in memory_db.collections["orders"]] == ["one", "two"]

    def test_round_trip(self, temp_db, reload_store, order_factory):
        store = LedgerStore(temp_db)
        store.add_client("Acme")
        first = store.add_or_update(order_factory(price=Decimal("100.25")))
        store.add_or_update(order_factory(vehicle="second", paid=True))
        store.add_or_update(replace(first, location="Depot"))
        store.add_or_update(make_expense(type=ExpenseType.SPARE_PARTS))
        removed = store.remove_client("3")

        reloaded = reload_store()

        assert reloaded.clients == store.clients
        assert reloaded.orders == store.orders
        assert reloaded.expenses == store.expenses
        assert removed not in reloaded.clients
        assert reloaded.orders[0].price == Decimal("100.25")
        assert reloaded.orders[0].location == "Depot"

    def test_ids_after_reload_stay_unique(self, temp_db, reload_store, order_factory):
        store = LedgerStore(temp_db)
        store.add_client("Acme")
        saved = store.add_or_update(order_factory())

        reloaded = reload_store()
        again = reloaded.add_or_update(order_factory())

        assert int(again.id) > int(saved.id)
