"""AI-focused helpers for Pocketbook."""

from .client import AIServiceError, resolve_openai_client
from .logo import (
    LOGO_FAILURE_MESSAGE,
    LogoGenerationError,
    build_logo_prompt,
    generate_logo,
    recent_logo_briefs,
    remember_logo_brief,
)
from .summary import (
    SUMMARY_FAILURE_MESSAGE,
    AISummaryError,
    AISummaryRequest,
    build_ai_summary_request,
    generate_ai_summary,
)

__all__ = [
    "AIServiceError",
    "AISummaryError",
    "AISummaryRequest",
    "LOGO_FAILURE_MESSAGE",
    "LogoGenerationError",
    "SUMMARY_FAILURE_MESSAGE",
    "build_ai_summary_request",
    "build_logo_prompt",
    "generate_ai_summary",
    "generate_logo",
    "recent_logo_briefs",
    "remember_logo_brief",
    "resolve_openai_client",
]
