"""Visualization utilities for Pocketbook."""

from .charts import build_category_chart
from .theme import theme_tokens

__all__ = ["build_category_chart", "theme_tokens"]
