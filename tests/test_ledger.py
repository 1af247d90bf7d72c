"""Tests for the local store, identities and the per-user expense ledger."""

from __future__ import annotations

import threading

import pytest

from core.auth import current_user, login, logout, register
from core.errors import AuthError, ExpenseValidationError, StorageError
from core.expenses import ExpenseLedger, parse_amount
from core.storage import CURRENT_USER_KEY, EXPENSES_KEY, USERS_KEY, JsonFileStore, MemoryStore


def test_memory_store_returns_copies():
    store = MemoryStore()
    value = {"a": [1, 2]}
    store.set("key", value)
    value["a"].append(3)

    fetched = store.get("key")
    fetched["a"].append(4)

    assert store.get("key") == {"a": [1, 2]}
    assert store.get("missing", "fallback") == "fallback"
    store.remove("missing")


def test_json_file_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    store = JsonFileStore(path)

    assert store.get("anything") is None
    store.set("app_users", {"a@example.com": "pw"})
    store.set(CURRENT_USER_KEY, "a@example.com")
    store.remove(CURRENT_USER_KEY)

    reopened = JsonFileStore(path)
    assert reopened.get("app_users") == {"a@example.com": "pw"}
    assert reopened.get(CURRENT_USER_KEY) is None


def test_json_file_store_rejects_corrupt_document(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        JsonFileStore(path).get("app_users")


def test_register_creates_user_and_empty_expense_list(store):
    email = register(store, "  sam@example.com ", "secret")

    assert email == "sam@example.com"
    assert store.get(USERS_KEY) == {"sam@example.com": "secret"}
    assert store.get(EXPENSES_KEY) == {"sam@example.com": []}
    assert current_user(store) == "sam@example.com"


def test_register_rejects_existing_email(store):
    register(store, "sam@example.com", "secret")

    with pytest.raises(AuthError, match="already exists"):
        register(store, "sam@example.com", "other")


def test_login_requires_exact_credentials(store):
    register(store, "sam@example.com", "secret")
    logout(store)
    assert current_user(store) is None

    with pytest.raises(AuthError, match="Invalid email or password."):
        login(store, "sam@example.com", "Secret")
    with pytest.raises(AuthError, match="Invalid email or password."):
        login(store, "nobody@example.com", "secret")
    with pytest.raises(AuthError, match="required"):
        login(store, "", "")

    assert login(store, "sam@example.com", "secret") == "sam@example.com"
    assert current_user(store) == "sam@example.com"


def test_current_user_forgets_unknown_identity(store):
    store.set(CURRENT_USER_KEY, "ghost@example.com")

    assert current_user(store) is None
    assert store.get(CURRENT_USER_KEY) is None


@pytest.mark.parametrize("amount", ["0", "-3", "abc", "", None, "nan", "inf", True])
def test_add_rejects_invalid_amounts(store, amount):
    ledger = ExpenseLedger(store, "sam@example.com")

    with pytest.raises(ExpenseValidationError, match="valid description and amount"):
        ledger.add("Coffee", amount)

    assert ledger.expenses == []
    assert store.get(EXPENSES_KEY) is None


def test_add_rejects_blank_description(store):
    ledger = ExpenseLedger(store, "sam@example.com")

    with pytest.raises(ExpenseValidationError):
        ledger.add("   ", "4.50")


def test_parse_amount_accepts_numeric_strings():
    assert parse_amount(" 4.50 ") == pytest.approx(4.5)
    assert parse_amount(12) == pytest.approx(12.0)


def test_ledger_add_delete_and_total(store):
    ledger = ExpenseLedger(store, "sam@example.com")

    coffee = ledger.add("Coffee", "4.50")
    bus = ledger.add("Bus", 2.25, "Transport")

    assert coffee.category == "Food"
    assert bus.id > coffee.id
    assert ledger.total() == pytest.approx(6.75)
    assert [expense.description for expense in ledger.expenses] == ["Coffee", "Bus"]

    assert ledger.delete(coffee.id) is True
    assert ledger.delete(coffee.id) is False
    assert [expense.id for expense in ledger.expenses] == [bus.id]
    assert store.get(EXPENSES_KEY)["sam@example.com"] == [bus.to_record()]


def test_ledgers_are_isolated_per_user_and_persist(tmp_path):
    path = tmp_path / "storage.json"
    store = JsonFileStore(path)
    register(store, "a@example.com", "pw")
    register(store, "b@example.com", "pw")

    ExpenseLedger(store, "a@example.com").add("Rent", "900", "Utilities")
    b_ledger = ExpenseLedger(store, "b@example.com")
    b_ledger.add("Pizza", "15")
    b_ledger.clear()

    reopened = JsonFileStore(path)
    a_expenses = ExpenseLedger(reopened, "a@example.com").expenses
    assert len(a_expenses) == 1
    assert a_expenses[0].description == "Rent"
    assert a_expenses[0].amount == pytest.approx(900.0)
    assert ExpenseLedger(reopened, "b@example.com").expenses == []


def test_concurrent_ledgers_on_shared_file_store_keep_every_write(tmp_path):
    store = JsonFileStore(tmp_path / "storage.json")
    users = [f"user{index}@example.com" for index in range(8)]

    def add_many(user: str) -> None:
        ledger = ExpenseLedger(store, user)
        for _ in range(20):
            ledger.add("Coffee", "3")

    threads = [threading.Thread(target=add_many, args=(user,)) for user in users]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stored = JsonFileStore(tmp_path / "storage.json").get(EXPENSES_KEY)
    assert {user: len(stored[user]) for user in users} == {user: 20 for user in users}


def test_concurrent_registrations_keep_every_user(tmp_path):
    store = JsonFileStore(tmp_path / "storage.json")
    emails = [f"user{index}@example.com" for index in range(8)]

    threads = [threading.Thread(target=register, args=(store, email, "pw")) for email in emails]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(store.get(USERS_KEY)) == emails
    assert sorted(store.get(EXPENSES_KEY)) == emails


def test_update_that_raises_writes_nothing(tmp_path):
    store = JsonFileStore(tmp_path / "storage.json")
    store.set(USERS_KEY, {"sam@example.com": "pw"})

    with pytest.raises(AuthError):
        register(store, "sam@example.com", "other")

    assert store.get(USERS_KEY) == {"sam@example.com": "pw"}


def test_json_file_store_wraps_unserialisable_values_and_cleans_up(tmp_path):
    store = JsonFileStore(tmp_path / "storage.json")
    store.set(USERS_KEY, {"sam@example.com": "pw"})

    with pytest.raises(StorageError, match="Could not write"):
        store.set("broken", object())

    assert [path.name for path in tmp_path.iterdir()] == ["storage.json"]
    assert store.get("broken") is None
    assert store.get(USERS_KEY) == {"sam@example.com": "pw"}


@pytest.mark.parametrize(
    "records",
    [
        [{"description": "No id", "amount": 3.0}],
        [{"id": 1, "description": "Coffee", "amount": "lots"}],
        ["not-a-record"],
    ],
)
def test_ledger_reports_malformed_records_as_storage_error(store, records):
    store.set(EXPENSES_KEY, {"sam@example.com": records})

    with pytest.raises(StorageError, match="malformed"):
        ExpenseLedger(store, "sam@example.com")
