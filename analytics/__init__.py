"""Analytics helpers shared across Pocketbook services."""

from analytics.aggregation import (
    BREAKDOWN_COLUMNS,
    build_category_breakdown,
    category_totals,
    expenses_frame,
    largest_expense,
    top_category,
    total_spend,
)

__all__ = [
    "BREAKDOWN_COLUMNS",
    "build_category_breakdown",
    "category_totals",
    "expenses_frame",
    "largest_expense",
    "top_category",
    "total_spend",
]
