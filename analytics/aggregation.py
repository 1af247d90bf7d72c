"""Totals and category aggregation over a user's expense list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
import pandas as pd

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from core.models import Expense

__all__ = [
    "BREAKDOWN_COLUMNS",
    "build_category_breakdown",
    "category_totals",
    "expenses_frame",
    "largest_expense",
    "top_category",
    "total_spend",
]

EXPENSE_COLUMNS = ["id", "description", "amount", "category"]
BREAKDOWN_COLUMNS = ["Category", "Total", "Share", "Count", "Rank"]


def expenses_frame(expenses: Sequence[Expense]) -> pd.DataFrame:
    """Return the expenses as a DataFrame in insertion order."""

    if not expenses:
        frame = pd.DataFrame(columns=EXPENSE_COLUMNS)
        return frame.astype({"id": "int64", "amount": "float64"})

    frame = pd.DataFrame([expense.to_record() for expense in expenses], columns=EXPENSE_COLUMNS)
    frame["amount"] = frame["amount"].astype(float)
    return frame


def total_spend(expenses: Sequence[Expense]) -> float:
    return float(sum(expense.amount for expense in expenses))


def category_totals(expenses: Sequence[Expense]) -> pd.Series:
    """Return per-category totals ordered by each category's first appearance."""

    frame = expenses_frame(expenses)
    if frame.empty:
        return pd.Series(dtype=float, name="amount")
    return frame.groupby("category", sort=False)["amount"].sum().astype(float)


def top_category(expenses: Sequence[Expense]) -> tuple[str, float]:
    """Return the category with the greatest total; the earliest one wins ties."""

    totals = category_totals(expenses)
    totals = totals[totals > 0]
    if totals.empty:
        return "", 0.0
    label = totals.idxmax()
    return str(label), float(totals.loc[label])


def largest_expense(expenses: Sequence[Expense]) -> Expense | None:
    """Return the first expense holding the maximum amount."""

    if not expenses:
        return None
    amounts = np.array([expense.amount for expense in expenses], dtype=float)
    return expenses[int(np.argmax(amounts))]


def build_category_breakdown(expenses: Sequence[Expense]) -> pd.DataFrame:
    """Return a DataFrame describing category totals, shares and ranks."""

    frame = expenses_frame(expenses)
    if frame.empty:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)

    grouped = frame.groupby("category", sort=False)["amount"].agg(["sum", "count"])
    grouped = grouped[grouped["sum"] > 0]
    grouped = grouped.sort_values("sum", ascending=False, kind="stable")

    breakdown = grouped.reset_index().rename(
        columns={"category": "Category", "sum": "Total", "count": "Count"}
    )
    total_value = float(breakdown["Total"].sum())
    if total_value > 0:
        breakdown["Share"] = breakdown["Total"].astype(float) / total_value
    else:
        breakdown["Share"] = 0.0
    breakdown["Count"] = breakdown["Count"].astype(int)
    breakdown["Rank"] = np.arange(1, len(breakdown) + 1)

    return breakdown[BREAKDOWN_COLUMNS]
