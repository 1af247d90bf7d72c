"""Shared Plotly theme tokens for Pocketbook visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    category_palette: tuple[str, ...] = (
        "#0C6FFD",
        "#22C55E",
        "#F97316",
        "#7C3AED",
        "#FF3B30",
        "#F59E0B",
        "#5DA9FF",
        "#FACC15",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared, frozen visualization tokens."""

    return _TOKENS
