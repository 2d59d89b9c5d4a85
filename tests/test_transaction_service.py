from dataclasses import asdict
from datetime import date, timedelta
from decimal import Decimal

import pytest

from fakes import make_tx
from services.transaction_service import TransactionStore
from utils.errors import NotFoundOrUnauthorized, TransportError, ValidationError


class TestCreate:
    def test_expense_category_stores_negative(self, store):
        tx = store.create("Lunch", "12.50", "Food", "2024-03-05")
        assert tx.amount == Decimal("-12.50")
        assert store.transactions == [tx]

    def test_income_category_stores_positive(self, store):
        tx = store.create("Salary", "3000", "Income", "2024-03-01")
        assert tx.amount == Decimal("3000")

    def test_unknown_category_defaults_to_expense(self, store):
        tx = store.create("Mystery", "5", "Deleted", "2024-03-01")
        assert tx.amount == Decimal("-5")
        assert tx.category == "Deleted"

    def test_appends_in_submission_order(self, store):
        a = store.create("a", "1", "Food", "2024-03-05")
        b = store.create("b", "2", "Food", "2024-01-05")
        assert [t.id for t in store.transactions] == [a.id, b.id]

    @pytest.mark.parametrize("text, amount, day", [
        ("", "1", "2024-03-05"),
        ("   ", "1", "2024-03-05"),
        ("x", "", "2024-03-05"),
        ("x", "1", ""),
        ("x", "abc", "2024-03-05"),
        ("x", "1", "05/03/2024"),
    ])
    def test_invalid_input_never_reaches_server(self, store, tx_api, text, amount, day):
        with pytest.raises(ValidationError):
            store.create(text, amount, "Food", day)
        assert tx_api.calls == []
        assert store.transactions == []

    def test_future_date_rejected(self, store):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        with pytest.raises(ValidationError):
            store.create("x", "1", "Food", tomorrow)

    def test_failed_create_leaves_store_untouched(self, store, tx_api):
        tx_api.fail = TransportError("boom", status=500)
        with pytest.raises(TransportError):
            store.create("Lunch", "12.50", "Food", "2024-03-05")
        assert store.transactions == []


class TestRoundTrip:
    def test_create_then_load_all(self, store, tx_api, registry):
        created = store.create("Lunch", "12.50", "Food", "2024-03-05")
        fresh = TransactionStore(tx_api, registry)
        fresh.load_all()
        loaded = [asdict(t) for t in fresh.transactions]
        expected = asdict(created)
        assert expected in loaded
        expected.pop("id")
        assert {k: v for k, v in loaded[0].items() if k != "id"} == expected

    def test_load_all_replaces_wholesale(self, store, tx_api):
        store.create("a", "1", "Food", "2024-03-05")
        tx_api.rows.clear()
        store.load_all()
        assert store.transactions == []


class TestUpdate:
    def test_category_change_flips_sign(self, registry):
        from fakes import FakeTransactionAPI
        api = FakeTransactionAPI([make_tx(7, -50, "Food", "2024-03-10")])
        store = TransactionStore(api, registry)
        store.load_all()
        tx = store.update(7, "item", "50", "Income", "2024-03-10")
        assert tx.amount == Decimal("50")
        assert store.get(7).amount == Decimal("50")

    def test_replaces_in_place(self, registry):
        from fakes import FakeTransactionAPI
        api = FakeTransactionAPI([make_tx(1, -1, date="2024-03-03"),
                                  make_tx(2, -2, date="2024-03-02"),
                                  make_tx(3, -3, date="2024-03-01")])
        store = TransactionStore(api, registry)
        store.load_all()
        store.update(2, "changed", "9", "Food", "2024-03-02")
        assert [t.id for t in store.transactions] == [1, 2, 3]
        assert store.get(2).text == "changed"

    def test_missing_target_leaves_store_untouched(self, store):
        with pytest.raises(NotFoundOrUnauthorized):
            store.update(404, "x", "1", "Food", "2024-03-01")
        assert store.transactions == []


class TestDelete:
    def test_delete_after_confirmation_from_server(self, store):
        tx = store.create("a", "1", "Food", "2024-03-05")
        store.delete(tx.id)
        assert store.transactions == []

    def test_failed_delete_keeps_record(self, store, tx_api):
        tx = store.create("a", "1", "Food", "2024-03-05")
        tx_api.fail = TransportError("offline")
        with pytest.raises(TransportError):
            store.delete(tx.id)
        assert store.get(tx.id) == tx

    def test_clear_all(self, store, tx_api):
        store.create("a", "1", "Food", "2024-03-05")
        store.create("b", "2", "Income", "2024-03-06")
        store.clear_all()
        assert store.transactions == []
        assert tx_api.rows == {}

    def test_failed_clear_all_keeps_records(self, store, tx_api):
        store.create("a", "1", "Food", "2024-03-05")
        tx_api.fail = TransportError("offline")
        with pytest.raises(TransportError):
            store.clear_all()
        assert len(store) == 1


class TestOrphanedCategories:
    def test_deleting_category_keeps_transactions(self, store, registry):
        tx = store.create("Membership", "40", "Gym", "2024-03-05")
        registry.remove(3)
        assert store.get(tx.id) == tx
        assert store.get(tx.id).amount == Decimal("-40")

        from services.report_service import by_category
        assert by_category(store.transactions) == {"Gym": Decimal("40")}
