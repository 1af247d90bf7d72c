"""Shared fixtures for the Pocketbook test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings  # noqa: E402
from core.models import Expense  # noqa: E402
from core.storage import MemoryStore  # noqa: E402


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def sample_expenses() -> list[Expense]:
    return [
        Expense(id=1, description="Groceries", amount=40.0, category="Food"),
        Expense(id=2, description="Train pass", amount=55.5, category="Transport"),
        Expense(id=3, description="Coffee", amount=4.5, category="Food"),
        Expense(id=4, description="Headphones", amount=55.5, category="Shopping"),
        Expense(id=5, description="Cinema", amount=12.0, category="Entertainment"),
    ]
