"""Login and registration page."""

from __future__ import annotations

import streamlit as st

from app.layout import card
from core import AuthError, KeyValueStore, login, register

AUTH_VIEW_KEY = "auth_view"


def _toggle_view() -> None:
    current = st.session_state.get(AUTH_VIEW_KEY, "login")
    st.session_state[AUTH_VIEW_KEY] = "register" if current == "login" else "login"


def render_page(store: KeyValueStore) -> str | None:
    """Render the auth form and return the signed-in email on success."""

    view = st.session_state.get(AUTH_VIEW_KEY, "login")
    is_login = view == "login"
    title = "Login" if is_login else "Register"

    st.title("Expense Tracker")

    signed_in: str | None = None
    with card(title):
        with st.form(f"auth-{view}"):
            email = st.text_input("Email", placeholder="Email")
            password = st.text_input("Password", type="password", placeholder="Password")
            submitted = st.form_submit_button(title, use_container_width=True)

        if submitted:
            try:
                signed_in = login(store, email, password) if is_login else register(store, email, password)
            except AuthError as exc:
                st.error(str(exc))

        prompt = "Don't have an account?" if is_login else "Already have an account?"
        st.caption(prompt)
        st.button("Register" if is_login else "Login", on_click=_toggle_view, key="auth-toggle")

    return signed_in


__all__ = ["render_page"]
