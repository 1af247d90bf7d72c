"""Shared data model definitions for Pocketbook."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, TypedDict

CATEGORIES: tuple[str, ...] = (
    "Food",
    "Transport",
    "Shopping",
    "Utilities",
    "Entertainment",
    "Other",
)
DEFAULT_CATEGORY = "Food"

LOGO_STYLES: tuple[str, ...] = (
    "Minimalist",
    "Modern",
    "Vintage",
    "Playful",
    "Geometric",
    "Hand-drawn",
)


class ExpenseRecord(TypedDict):
    id: int
    description: str
    amount: float
    category: str


@dataclass(frozen=True, slots=True)
class Expense:
    id: int
    description: str
    amount: float
    category: str

    def to_record(self) -> ExpenseRecord:
        return {
            "id": int(self.id),
            "description": self.description,
            "amount": float(self.amount),
            "category": self.category,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Expense":
        return cls(
            id=int(record["id"]),
            description=str(record["description"]),
            amount=float(record["amount"]),
            category=str(record.get("category") or DEFAULT_CATEGORY),
        )


@dataclass(frozen=True)
class InsightReport:
    top_category: str
    top_category_amount: float
    largest_expense: Expense
    tip: str
    text: str


@dataclass(frozen=True, slots=True)
class LogoRequest:
    """The brief filled in on the logo generator form."""

    brand_name: str
    industry: str = ""
    style: str = LOGO_STYLES[0]
    colors: str = ""
    tagline: str = ""

    def to_record(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "LogoRequest":
        return cls(
            brand_name=str(record.get("brand_name", "")),
            industry=str(record.get("industry", "")),
            style=str(record.get("style") or LOGO_STYLES[0]),
            colors=str(record.get("colors", "")),
            tagline=str(record.get("tagline", "")),
        )


@dataclass(frozen=True)
class GeneratedLogo:
    request: LogoRequest
    image_bytes: bytes = field(repr=False)
    prompt: str
    model: str
    revised_prompt: str | None = None


__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "LOGO_STYLES",
    "Expense",
    "ExpenseRecord",
    "GeneratedLogo",
    "InsightReport",
    "LogoRequest",
]
