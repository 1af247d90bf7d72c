"""Exception types raised by Pocketbook services."""

from __future__ import annotations

__all__ = [
    "AuthError",
    "ExpenseValidationError",
    "InsightError",
    "PocketbookError",
    "StorageError",
]


class PocketbookError(RuntimeError):
    """Base class for errors that carry a user-facing message."""


class StorageError(PocketbookError):
    """Raised when the local key-value store cannot be read or written."""


class AuthError(PocketbookError):
    """Raised when registration or login fails."""


class ExpenseValidationError(PocketbookError, ValueError):
    """Raised when an expense fails the description/amount checks."""


class InsightError(PocketbookError):
    """Raised when insights cannot be produced for the current expenses."""
