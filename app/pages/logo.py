"""Logo generator page."""

from __future__ import annotations

import logging
import re

import streamlit as st

from app.layout import card
from config import Settings
from core import (
    LOGO_FAILURE_MESSAGE,
    LOGO_STYLES,
    KeyValueStore,
    LogoGenerationError,
    LogoRequest,
    generate_logo,
)
from core.ai.logo import build_logo_prompt, recent_logo_briefs, remember_logo_brief

logger = logging.getLogger(__name__)


def _logo_key(user: str) -> str:
    return f"logo::{user}"


def _file_name(brand_name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", brand_name.lower()).strip("-")
    return f"{slug or 'logo'}.png"


def _select_starting_brief(briefs: list[LogoRequest]) -> LogoRequest:
    if not briefs:
        return LogoRequest(brand_name="")

    labels = ["New brief"] + [f"{brief.brand_name} · {brief.style}" for brief in briefs]
    choice = st.selectbox("Start from", range(len(labels)), format_func=lambda index: labels[index])
    return briefs[choice - 1] if choice else LogoRequest(brand_name="")


def render_page(store: KeyValueStore, user: str, settings: Settings) -> None:
    """Render the logo brief form and the latest generated logo."""

    st.title("Logo Studio")
    st.caption("Describe your brand and generate a logo with AI.")

    state_key = _logo_key(user)

    with card("Brand brief", suffix=settings.image_model):
        start = _select_starting_brief(recent_logo_briefs(store, user))
        with st.form("logo-brief"):
            brand_name = st.text_input("Brand name", value=start.brand_name)
            industry = st.text_input(
                "Industry",
                value=start.industry,
                placeholder="e.g., Coffee shop, fintech, yoga studio",
            )
            style_index = LOGO_STYLES.index(start.style) if start.style in LOGO_STYLES else 0
            style = st.selectbox("Style", LOGO_STYLES, index=style_index)
            colors = st.text_input("Colours", value=start.colors, placeholder="e.g., navy and gold")
            tagline = st.text_input("Tagline (optional)", value=start.tagline)
            submitted = st.form_submit_button("Generate Logo")

    if submitted:
        request = LogoRequest(
            brand_name=brand_name,
            industry=industry,
            style=style,
            colors=colors,
            tagline=tagline,
        )
        try:
            build_logo_prompt(request)
        except LogoGenerationError as exc:
            st.error(str(exc))
        else:
            st.session_state.pop(state_key, None)
            with st.spinner("Generating your logo..."):
                try:
                    st.session_state[state_key] = generate_logo(request, settings=settings)
                except LogoGenerationError:
                    logger.exception("Logo generation failed for %s", user)
                    st.error(LOGO_FAILURE_MESSAGE)
                else:
                    remember_logo_brief(store, user, request)

    logo = st.session_state.get(state_key)
    if logo is None:
        return

    with card("Your logo", suffix=logo.model):
        st.image(logo.image_bytes, caption=logo.request.brand_name, use_container_width=True)
        st.download_button(
            "Download PNG",
            data=logo.image_bytes,
            file_name=_file_name(logo.request.brand_name),
            mime="image/png",
        )
        if logo.revised_prompt:
            with st.expander("Prompt used by the model"):
                st.write(logo.revised_prompt)


__all__ = ["render_page"]
