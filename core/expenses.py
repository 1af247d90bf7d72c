"""Per-user expense ledger backed by the local store."""

from __future__ import annotations

import logging
import math
import time
from typing import Any

from core.errors import ExpenseValidationError, StorageError
from core.models import DEFAULT_CATEGORY, Expense
from core.storage import EXPENSES_KEY, KeyValueStore

__all__ = ["ExpenseLedger", "parse_amount"]

logger = logging.getLogger(__name__)

INVALID_EXPENSE_MESSAGE = "Please enter a valid description and amount."


def parse_amount(value: Any) -> float:
    """Return ``value`` as a positive float or raise ``ExpenseValidationError``."""

    if isinstance(value, bool):
        raise ExpenseValidationError(INVALID_EXPENSE_MESSAGE)
    try:
        amount = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError) as exc:
        raise ExpenseValidationError(INVALID_EXPENSE_MESSAGE) from exc
    if not math.isfinite(amount) or amount <= 0:
        raise ExpenseValidationError(INVALID_EXPENSE_MESSAGE)
    return amount


class ExpenseLedger:
    """Ordered, mutable list of one user's expenses.

    Every mutation writes the whole list back under the user's entry in
    ``app_expenses``; other users' lists are left untouched.
    """

    def __init__(self, store: KeyValueStore, user: str) -> None:
        self.store = store
        self.user = user
        records = store.get_mapping(EXPENSES_KEY).get(user) or []
        try:
            self._expenses: list[Expense] = [Expense.from_record(record) for record in records]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise StorageError(f"Stored expenses for {user} are malformed") from exc

    @property
    def expenses(self) -> list[Expense]:
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def _next_id(self) -> int:
        candidate = int(time.time() * 1000)
        if self._expenses:
            candidate = max(candidate, max(expense.id for expense in self._expenses) + 1)
        return candidate

    def _persist(self) -> None:
        records = [expense.to_record() for expense in self._expenses]
        self.store.update_mapping(EXPENSES_KEY, lambda all_expenses: all_expenses.update({self.user: records}))

    def add(self, description: str, amount: Any, category: str = DEFAULT_CATEGORY) -> Expense:
        if not description or not description.strip():
            raise ExpenseValidationError(INVALID_EXPENSE_MESSAGE)
        value = parse_amount(amount)

        expense = Expense(
            id=self._next_id(),
            description=description,
            amount=value,
            category=category or DEFAULT_CATEGORY,
        )
        self._expenses.append(expense)
        self._persist()
        logger.info("Added expense %s for %s (%s %.2f)", expense.id, self.user, expense.category, value)
        return expense

    def delete(self, expense_id: int) -> bool:
        remaining = [expense for expense in self._expenses if expense.id != expense_id]
        if len(remaining) == len(self._expenses):
            return False
        self._expenses = remaining
        self._persist()
        logger.info("Deleted expense %s for %s", expense_id, self.user)
        return True

    def clear(self) -> None:
        self._expenses = []
        self._persist()

    def total(self) -> float:
        return float(sum(expense.amount for expense in self._expenses))
