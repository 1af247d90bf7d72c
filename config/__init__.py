"""Application configuration utilities."""

from .logging import configure_logging
from .settings import DEFAULT_IMAGE_MODEL, DEFAULT_OPENAI_MODEL, Settings, get_settings

__all__ = [
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_OPENAI_MODEL",
    "Settings",
    "configure_logging",
    "get_settings",
]
