"""Logo generation through the hosted image model."""

from __future__ import annotations

import base64
import binascii
import logging

from openai import APIError

from config import Settings, get_settings
from core.ai.client import AIServiceError, ClientFactory, resolve_openai_client
from core.models import GeneratedLogo, LogoRequest
from core.storage import LOGOS_KEY, KeyValueStore
from prompts import render_prompt

PROMPT_LOGO = "logo"
MAX_REMEMBERED_BRIEFS = 5
LOGO_FAILURE_MESSAGE = "Failed to generate logo. Please try again."

__all__ = [
    "LOGO_FAILURE_MESSAGE",
    "LogoGenerationError",
    "build_logo_prompt",
    "generate_logo",
    "recent_logo_briefs",
    "remember_logo_brief",
]

logger = logging.getLogger(__name__)


class LogoGenerationError(AIServiceError):
    """Raised when a logo image cannot be produced."""


def build_logo_prompt(request: LogoRequest) -> str:
    brand_name = request.brand_name.strip()
    if not brand_name:
        raise LogoGenerationError("Please enter a brand name.")

    tagline = request.tagline.strip()
    return render_prompt(
        PROMPT_LOGO,
        brand_name=brand_name,
        industry=request.industry.strip() or "general business",
        style=request.style.strip() or "Minimalist",
        colors=request.colors.strip() or "designer's choice, at most three colours",
        tagline_line=f'Tagline to reflect in the mood: "{tagline}".' if tagline else "",
    )


def _image_options(settings: Settings) -> dict[str, object]:
    options: dict[str, object] = {"model": settings.image_model, "size": settings.image_size, "n": 1}
    # gpt-image models always answer with base64 and reject response_format.
    if settings.image_model.startswith("dall-e"):
        options["response_format"] = "b64_json"
    return options


def generate_logo(
    request: LogoRequest,
    *,
    client_factory: ClientFactory | None = None,
    settings: Settings | None = None,
) -> GeneratedLogo:
    """Generate a single logo image for ``request``."""

    prompt = build_logo_prompt(request)
    settings = settings or get_settings()

    try:
        client = client_factory() if client_factory else resolve_openai_client(settings)
    except AIServiceError as exc:
        raise LogoGenerationError(str(exc)) from exc

    options = _image_options(settings)
    logger.info("Requesting logo for %r with %s", request.brand_name, options["model"])
    try:
        response = client.images.generate(prompt=prompt, **options)
    except APIError as exc:
        raise LogoGenerationError(f"OpenAI API error: {exc}") from exc

    try:
        image = response.data[0]
    except (AttributeError, IndexError, TypeError) as exc:
        raise LogoGenerationError("OpenAI returned no image") from exc

    encoded = getattr(image, "b64_json", None)
    if not encoded:
        raise LogoGenerationError("OpenAI returned an empty image")
    try:
        image_bytes = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise LogoGenerationError("OpenAI returned an undecodable image") from exc

    return GeneratedLogo(
        request=request,
        image_bytes=image_bytes,
        prompt=prompt,
        model=str(options["model"]),
        revised_prompt=getattr(image, "revised_prompt", None),
    )


def remember_logo_brief(store: KeyValueStore, user: str, request: LogoRequest) -> None:
    """Keep the most recent briefs per user, newest first, without repeats."""

    record = request.to_record()

    def push(all_briefs: dict) -> None:
        history = [item for item in all_briefs.get(user) or [] if item != record]
        all_briefs[user] = [record, *history][:MAX_REMEMBERED_BRIEFS]

    store.update_mapping(LOGOS_KEY, push)


def recent_logo_briefs(store: KeyValueStore, user: str) -> list[LogoRequest]:
    records = store.get_mapping(LOGOS_KEY).get(user) or []
    return [LogoRequest.from_record(record) for record in records if isinstance(record, dict)]
