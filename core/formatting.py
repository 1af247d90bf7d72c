"""Formatting helpers for Pocketbook amounts and insight text."""

from __future__ import annotations

import html

__all__ = ["format_currency", "render_bold_markup"]


def format_currency(amount: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{amount:.2f}"


def render_bold_markup(line: str) -> str:
    """Turn ``**text**`` segments into ``<strong>`` tags, escaping the rest.

    Segments are split on ``**``; odd segments are bold, so an unmatched
    marker bolds everything after it.
    """

    parts = line.split("**")
    rendered: list[str] = []
    for index, part in enumerate(parts):
        escaped = html.escape(part)
        rendered.append(f"<strong>{escaped}</strong>" if index % 2 == 1 else escaped)
    return "".join(rendered)
