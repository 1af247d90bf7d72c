"""Rule-based spending insights built from per-category totals."""

from __future__ import annotations

import logging
from typing import Sequence

from analytics.aggregation import largest_expense, top_category
from core.errors import InsightError
from core.formatting import format_currency, render_bold_markup
from core.models import Expense, InsightReport

__all__ = [
    "CATEGORY_TIPS",
    "DEFAULT_TIP",
    "build_insight_report",
    "render_insight_lines",
    "tip_for_category",
]

logger = logging.getLogger(__name__)

CATEGORY_TIPS: dict[str, str] = {
    "Food": (
        "Consider planning meals for the week or looking for deals at the grocery store "
        "to save on food costs."
    ),
    "Shopping": (
        "Try making a shopping list before you go out and stick to it to avoid impulse buys."
    ),
    "Entertainment": (
        "Look for free or low-cost entertainment options in your area, like parks or "
        "community events."
    ),
    "Transport": (
        "If possible, try using public transport, carpooling, or biking to reduce "
        "transportation expenses."
    ),
}
DEFAULT_TIP = (
    "Review your spending in this category to see if there are any non-essential items "
    "you can cut back on."
)

EMPTY_EXPENSES_MESSAGE = "Please add some expenses before getting insights."


def tip_for_category(category: str) -> str:
    return CATEGORY_TIPS.get(category, DEFAULT_TIP)


def build_insight_report(
    expenses: Sequence[Expense],
    currency_symbol: str = "$",
) -> InsightReport:
    """Summarise the top category, the largest expense and a matching tip."""

    if not expenses:
        raise InsightError(EMPTY_EXPENSES_MESSAGE)

    category, category_amount = top_category(expenses)
    largest = largest_expense(expenses)
    if largest is None:  # pragma: no cover - guarded by the empty check
        raise InsightError(EMPTY_EXPENSES_MESSAGE)

    tip = tip_for_category(category)
    lines = [
        "**Spending Summary:**",
        (
            f"Based on your entries, your top spending area is **{category}**, with a total of "
            f"**{format_currency(category_amount, currency_symbol)}**."
        ),
        "**Largest Expense:**",
        (
            f'Your single largest expense was for "**{largest.description}**" costing '
            f"**{format_currency(largest.amount, currency_symbol)}**."
        ),
        "**Actionable Tip:**",
        (
            f"Since a significant portion of your budget goes to **{category}**, "
            f"here's a suggestion: {tip}"
        ),
    ]

    logger.info("Built insights for %d expenses (top category %s)", len(expenses), category)
    return InsightReport(
        top_category=category,
        top_category_amount=category_amount,
        largest_expense=largest,
        tip=tip,
        text="\n".join(lines),
    )


def render_insight_lines(text: str) -> list[str]:
    """Return HTML paragraphs for each non-blank line of an insight text."""

    return [render_bold_markup(line.strip()) for line in text.splitlines() if line.strip()]
