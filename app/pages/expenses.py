"""Expense tracker page: totals, the add form, the list and insights."""

from __future__ import annotations

import html
import logging
from typing import Sequence

import streamlit as st

from analytics import build_category_breakdown
from app.layout import card
from config import Settings
from core import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    SUMMARY_FAILURE_MESSAGE,
    AISummaryError,
    Expense,
    ExpenseLedger,
    ExpenseValidationError,
    InsightError,
    build_insight_report,
    generate_ai_summary,
    render_insight_lines,
)
from core.formatting import format_currency, render_bold_markup
from visualization import build_category_chart

logger = logging.getLogger(__name__)


def _insights_key(user: str) -> str:
    return f"insights::{user}"


def _fingerprint(expenses: Sequence[Expense]) -> tuple[tuple[int, float, str], ...]:
    return tuple((expense.id, expense.amount, expense.category) for expense in expenses)


def _render_total_card(ledger: ExpenseLedger, settings: Settings) -> None:
    with card("Total Expenses"):
        total = format_currency(ledger.total(), settings.currency_symbol)
        st.markdown(f"<p class='pb-total'>{total}</p>", unsafe_allow_html=True)


def _render_add_form(ledger: ExpenseLedger) -> None:
    with card("Add New Expense"):
        with st.form("add-expense", clear_on_submit=True):
            description = st.text_input(
                "Description",
                placeholder="Expense description (e.g., Coffee)",
            )
            amount = st.text_input("Amount", placeholder="Amount")
            category = st.selectbox(
                "Category",
                CATEGORIES,
                index=CATEGORIES.index(DEFAULT_CATEGORY),
            )
            submitted = st.form_submit_button("Add Expense")

        if submitted:
            try:
                ledger.add(description, amount, category)
            except ExpenseValidationError as exc:
                st.error(str(exc))
            else:
                st.rerun()


def _render_expense_list(ledger: ExpenseLedger, settings: Settings) -> None:
    with card("Your Expenses"):
        expenses = ledger.expenses
        if not expenses:
            st.caption("No expenses added yet.")
            return

        for expense in expenses:
            details_col, amount_col, action_col = st.columns((4, 2, 1))
            details_col.markdown(
                "<div class='pb-expense'>"
                f"<span>{html.escape(expense.description)}</span>"
                f"<span class='pb-expense__category'>{html.escape(expense.category)}</span>"
                "</div>",
                unsafe_allow_html=True,
            )
            amount_col.markdown(f"**{format_currency(expense.amount, settings.currency_symbol)}**")
            if action_col.button(
                "✕",
                key=f"delete-{expense.id}",
                help=f"Delete {expense.description}",
            ):
                ledger.delete(expense.id)
                st.rerun()


def _render_category_card(expenses: Sequence[Expense], settings: Settings) -> None:
    breakdown = build_category_breakdown(expenses)
    if breakdown.empty:
        return

    with card("Spend by category"):
        chart = build_category_chart(breakdown, currency_symbol=settings.currency_symbol)
        st.plotly_chart(chart, use_container_width=True, key="category-donut")


def _generate_insight_lines(expenses: Sequence[Expense], settings: Settings) -> list[str]:
    if settings.insights_mode == "ai":
        bullets = generate_ai_summary(expenses, settings=settings)
        return [render_bold_markup(bullet) for bullet in bullets]

    report = build_insight_report(expenses, currency_symbol=settings.currency_symbol)
    return render_insight_lines(report.text)


def _render_insights_card(ledger: ExpenseLedger, settings: Settings) -> None:
    expenses = ledger.expenses
    state_key = _insights_key(ledger.user)
    fingerprint = _fingerprint(expenses)

    cached = st.session_state.get(state_key)
    if cached and cached.get("fingerprint") != fingerprint:
        st.session_state.pop(state_key, None)
        cached = None

    suffix = "AI summary" if settings.insights_mode == "ai" else "Rule based"
    with card("Financial Insights", suffix=suffix):
        clicked = st.button("Get Insights", disabled=not expenses, key="get-insights")
        if clicked:
            with st.spinner("Analyzing your spending..."):
                try:
                    lines = _generate_insight_lines(expenses, settings)
                except InsightError as exc:
                    cached = {"fingerprint": fingerprint, "error": str(exc)}
                except AISummaryError:
                    logger.exception("AI summary failed for %s", ledger.user)
                    cached = {"fingerprint": fingerprint, "error": SUMMARY_FAILURE_MESSAGE}
                else:
                    cached = {"fingerprint": fingerprint, "lines": lines}
            st.session_state[state_key] = cached

        if cached and cached.get("error"):
            st.error(cached["error"])
        elif cached and cached.get("lines"):
            paragraphs = "".join(f"<p>{line}</p>" for line in cached["lines"])
            st.markdown(f"<div class='pb-insights'>{paragraphs}</div>", unsafe_allow_html=True)
        elif not expenses:
            st.caption("Please add some expenses before getting insights.")
        else:
            st.caption("Click the button to get insights on your spending.")


def render_page(ledger: ExpenseLedger, settings: Settings) -> None:
    """Render the expense tracker for the signed-in user."""

    st.title("Expense Tracker")
    st.caption("Track your spending and get smart financial insights.")

    _render_total_card(ledger, settings)
    _render_add_form(ledger)
    _render_expense_list(ledger, settings)
    _render_category_card(ledger.expenses, settings)
    _render_insights_card(ledger, settings)


__all__ = ["render_page"]
