"""Unit tests for the aggregation helpers and rule-based insights."""

from __future__ import annotations

import pytest

from analytics.aggregation import (
    build_category_breakdown,
    category_totals,
    expenses_frame,
    largest_expense,
    top_category,
    total_spend,
)
from core.errors import InsightError
from core.insights import DEFAULT_TIP, build_insight_report, render_insight_lines, tip_for_category
from core.models import Expense


def test_total_and_category_totals_keep_first_appearance_order(sample_expenses):
    assert total_spend(sample_expenses) == pytest.approx(167.5)

    totals = category_totals(sample_expenses)
    assert list(totals.index) == ["Food", "Transport", "Shopping", "Entertainment"]
    assert totals["Food"] == pytest.approx(44.5)
    assert totals["Transport"] == pytest.approx(55.5)


def test_top_category_prefers_first_category_on_ties():
    expenses = [
        Expense(id=1, description="Bus", amount=10.0, category="Transport"),
        Expense(id=2, description="Lunch", amount=6.0, category="Food"),
        Expense(id=3, description="Dinner", amount=4.0, category="Food"),
    ]

    assert top_category(expenses) == ("Transport", pytest.approx(10.0))


def test_top_category_and_largest_expense_on_empty_list():
    assert top_category([]) == ("", 0.0)
    assert largest_expense([]) is None
    assert total_spend([]) == 0.0
    assert category_totals([]).empty
    assert expenses_frame([]).empty


def test_largest_expense_returns_first_of_equal_amounts(sample_expenses):
    largest = largest_expense(sample_expenses)

    assert largest is not None
    assert largest.id == 2
    assert largest.description == "Train pass"


def test_build_category_breakdown_ranks_and_shares(sample_expenses):
    breakdown = build_category_breakdown(sample_expenses)

    assert list(breakdown.columns) == ["Category", "Total", "Share", "Count", "Rank"]
    assert breakdown["Category"].tolist() == ["Transport", "Shopping", "Food", "Entertainment"]
    assert breakdown["Rank"].tolist() == [1, 2, 3, 4]
    assert breakdown["Share"].sum() == pytest.approx(1.0)
    food = breakdown.loc[breakdown["Category"] == "Food"].iloc[0]
    assert food["Count"] == 2
    assert food["Total"] == pytest.approx(44.5)


def test_build_insight_report_text(sample_expenses):
    report = build_insight_report(sample_expenses)

    assert report.top_category == "Transport"
    assert report.top_category_amount == pytest.approx(55.5)
    assert report.largest_expense.description == "Train pass"
    assert report.text.splitlines() == [
        "**Spending Summary:**",
        "Based on your entries, your top spending area is **Transport**, with a total of **$55.50**.",
        "**Largest Expense:**",
        'Your single largest expense was for "**Train pass**" costing **$55.50**.',
        "**Actionable Tip:**",
        "Since a significant portion of your budget goes to **Transport**, here's a suggestion: "
        "If possible, try using public transport, carpooling, or biking to reduce transportation expenses.",
    ]


def test_build_insight_report_uses_generic_tip_for_other_categories():
    expenses = [Expense(id=1, description="Electricity", amount=80.0, category="Utilities")]

    report = build_insight_report(expenses, currency_symbol="£")

    assert report.tip == DEFAULT_TIP
    assert "**£80.00**" in report.text
    assert tip_for_category("Food").startswith("Consider planning meals")


def test_build_insight_report_rejects_empty_list():
    with pytest.raises(InsightError, match="Please add some expenses"):
        build_insight_report([])


def test_render_insight_lines_bolds_and_escapes():
    lines = render_insight_lines("**Title:**\n\n  Spent on **<Food>** today  \n")

    assert lines == [
        "<strong>Title:</strong>",
        "Spent on <strong>&lt;Food&gt;</strong> today",
    ]


def test_build_insight_report_amounts_have_no_thousands_separator():
    report = build_insight_report([Expense(id=1, description="Rent", amount=1500.0, category="Other")])

    lines = report.text.splitlines()
    assert lines[1].endswith("with a total of **$1500.00**.")
    assert lines[3] == 'Your single largest expense was for "**Rent**" costing **$1500.00**.'
