"""OpenAI client construction shared by the summary and logo services."""

from __future__ import annotations

import logging
from typing import Callable

from openai import OpenAI

from config import Settings, get_settings
from core.errors import PocketbookError

__all__ = ["AIServiceError", "ClientFactory", "resolve_openai_client"]

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], OpenAI]


class AIServiceError(PocketbookError):
    """Raised when a hosted generation call cannot produce a result."""


def resolve_openai_client(settings: Settings | None = None) -> OpenAI:
    """Construct an OpenAI client from settings (env vars and Streamlit secrets)."""

    settings = settings or get_settings()
    kwargs = settings.openai_client_kwargs
    if "api_key" not in kwargs:
        raise AIServiceError(
            "Missing OpenAI API key. Add it to .streamlit/secrets.toml under [openai] "
            "or set OPENAI_API_KEY."
        )

    logger.debug("Creating OpenAI client (custom base URL: %s)", "base_url" in kwargs)
    return OpenAI(**kwargs)
