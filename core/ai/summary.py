"""AI-assisted spending summary for Pocketbook."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from openai import APIError

from analytics.aggregation import build_category_breakdown, largest_expense, top_category, total_spend
from config import Settings, get_settings
from core.ai.client import AIServiceError, ClientFactory, resolve_openai_client
from core.models import Expense
from prompts import get_prompt_text

PROMPT_SUMMARY = "summary"
MAX_OUTPUT_TOKENS = 400
MAX_RECENT_EXPENSES = 20
SUMMARY_FAILURE_MESSAGE = "Failed to generate insights. Please try again."

__all__ = [
    "AISummaryError",
    "AISummaryRequest",
    "SUMMARY_FAILURE_MESSAGE",
    "build_ai_summary_request",
    "generate_ai_summary",
]

logger = logging.getLogger(__name__)


class AISummaryError(AIServiceError):
    """Raised when the AI summary cannot be generated."""


@dataclass(frozen=True, slots=True)
class AISummaryRequest:
    payload: Mapping[str, Any]
    expense_count: int
    model: str


def _category_records(expenses: Sequence[Expense]) -> list[dict[str, Any]]:
    breakdown = build_category_breakdown(expenses)
    records: list[dict[str, Any]] = []
    for row in breakdown.to_dict(orient="records"):
        records.append(
            {
                "category": str(row["Category"]),
                "total": round(float(row["Total"]), 2),
                "share": round(float(row["Share"]), 4),
                "count": int(row["Count"]),
                "rank": int(row["Rank"]),
            }
        )
    return records


def build_ai_summary_request(
    expenses: Sequence[Expense],
    settings: Settings | None = None,
) -> AISummaryRequest:
    """Create a JSON payload describing the expenses for the chat model."""

    settings = settings or get_settings()
    category, category_amount = top_category(expenses)
    largest = largest_expense(expenses)

    payload: dict[str, Any] = {
        "currency_symbol": settings.currency_symbol,
        "total": round(total_spend(expenses), 2),
        "expense_count": len(expenses),
        "categories": _category_records(expenses),
        "top_category": {"category": category, "total": round(category_amount, 2)},
        "largest_expense": (
            {
                "description": largest.description,
                "amount": round(largest.amount, 2),
                "category": largest.category,
            }
            if largest is not None
            else None
        ),
        "recent_expenses": [
            {
                "description": expense.description,
                "amount": round(expense.amount, 2),
                "category": expense.category,
            }
            for expense in list(expenses)[-MAX_RECENT_EXPENSES:]
        ],
    }

    return AISummaryRequest(payload=payload, expense_count=len(expenses), model=settings.openai_model)


def generate_ai_summary(
    expenses: Sequence[Expense],
    *,
    client_factory: ClientFactory | None = None,
    settings: Settings | None = None,
) -> list[str]:
    """Return bullet-point insights written by the chat model."""

    if not expenses:
        raise AISummaryError("Please add some expenses before getting insights.")

    settings = settings or get_settings()
    request = build_ai_summary_request(expenses, settings=settings)

    try:
        client = client_factory() if client_factory else resolve_openai_client(settings)
    except AIServiceError as exc:
        raise AISummaryError(str(exc)) from exc

    user_message = (
        f"Summarise these {request.expense_count} expenses.\n\n"
        "Data (JSON):\n"
        f"{json.dumps(request.payload, ensure_ascii=False, indent=2)}"
    )

    logger.info("Requesting AI summary for %d expenses with %s", request.expense_count, request.model)
    try:
        response = client.chat.completions.create(
            model=request.model,
            messages=[
                {"role": "system", "content": get_prompt_text(PROMPT_SUMMARY)},
                {"role": "user", "content": user_message},
            ],
            max_tokens=MAX_OUTPUT_TOKENS,
            temperature=0.2,
        )
    except APIError as exc:
        raise AISummaryError(f"OpenAI API error: {exc}") from exc

    try:
        text = response.choices[0].message.content or ""
    except (AttributeError, IndexError) as exc:  # pragma: no cover - unexpected SDK output
        raise AISummaryError("Unexpected response format from OpenAI API") from exc

    bullets = _normalise_output(text)
    if not bullets:
        raise AISummaryError("OpenAI response was empty")

    return bullets


def _normalise_output(response_text: str) -> list[str]:
    normalized: list[str] = []
    for line in response_text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(("- ", "• ", "* ")):
            stripped = stripped[2:].strip()
        normalized.append(stripped)
    return normalized
