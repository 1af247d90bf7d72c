"""Core domain package for the Pocketbook application."""

from .ai import (
    LOGO_FAILURE_MESSAGE,
    SUMMARY_FAILURE_MESSAGE,
    AIServiceError,
    AISummaryError,
    LogoGenerationError,
    generate_ai_summary,
    generate_logo,
)
from .auth import current_user, login, logout, register
from .errors import AuthError, ExpenseValidationError, InsightError, PocketbookError, StorageError
from .expenses import ExpenseLedger
from .insights import build_insight_report, render_insight_lines
from .models import CATEGORIES, DEFAULT_CATEGORY, LOGO_STYLES, Expense, GeneratedLogo, InsightReport, LogoRequest
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "AIServiceError",
    "AISummaryError",
    "AuthError",
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "Expense",
    "ExpenseLedger",
    "ExpenseValidationError",
    "GeneratedLogo",
    "InsightError",
    "InsightReport",
    "JsonFileStore",
    "KeyValueStore",
    "LOGO_FAILURE_MESSAGE",
    "LOGO_STYLES",
    "LogoGenerationError",
    "LogoRequest",
    "MemoryStore",
    "PocketbookError",
    "SUMMARY_FAILURE_MESSAGE",
    "StorageError",
    "build_insight_report",
    "current_user",
    "generate_ai_summary",
    "generate_logo",
    "login",
    "logout",
    "register",
    "render_insight_lines",
]
