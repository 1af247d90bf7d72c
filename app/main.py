"""Pocketbook: expense tracker and logo studio behind one local login."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import NAV_LINKS, determine_active_page, inject_css, render_navbar
from app.pages import render_auth_page, render_expenses_page, render_logo_page
from config import configure_logging, get_settings
from core import ExpenseLedger, JsonFileStore, KeyValueStore, StorageError, current_user, logout

logger = logging.getLogger(__name__)

USER_STATE_KEY = "current_user"


@st.cache_resource(show_spinner=False)
def _load_store(path: str) -> KeyValueStore:
    """Share one file-backed store across reruns and sessions."""

    logger.info("Using local storage at %s", path)
    return JsonFileStore(path)


def _resolve_user(store: KeyValueStore) -> str | None:
    if USER_STATE_KEY not in st.session_state:
        st.session_state[USER_STATE_KEY] = current_user(store)
    return st.session_state[USER_STATE_KEY]


def _switch_user(user: str | None) -> None:
    previous = st.session_state.get(USER_STATE_KEY)
    if previous:
        for key in (f"insights::{previous}", f"logo::{previous}"):
            st.session_state.pop(key, None)
    st.session_state[USER_STATE_KEY] = user


def main() -> None:
    """Application entrypoint for Pocketbook."""

    st.set_page_config(
        page_title="Pocketbook",
        page_icon="💸",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    settings = get_settings()
    configure_logging(settings.log_level)
    inject_css()

    store = _load_store(str(settings.store_path))

    try:
        user = _resolve_user(store)
    except StorageError as exc:
        logger.error("Local storage unavailable: %s", exc)
        st.error(str(exc))
        return

    if not user:
        signed_in = render_auth_page(store)
        if signed_in:
            _switch_user(signed_in)
            st.rerun()
        return

    valid_pages = [link.slug for link in NAV_LINKS if link.enabled]
    active_page = determine_active_page(valid_pages)
    render_navbar(active_page, user)

    if st.button("Logout", key="logout"):
        logout(store)
        _switch_user(None)
        st.rerun()

    try:
        if active_page == "logo":
            render_logo_page(store, user, settings)
        else:
            render_expenses_page(ExpenseLedger(store, user), settings)
    except StorageError as exc:
        logger.error("Local storage unavailable: %s", exc)
        st.error(str(exc))


if __name__ == "__main__":
    main()
