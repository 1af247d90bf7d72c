"""Shared layout primitives for the Pocketbook Streamlit app."""

from __future__ import annotations

import html
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable

import streamlit as st
from streamlit.components.v1 import html as components_html


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    enabled: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("expenses", "Expenses", True),
    NavigationLink("logo", "Logo Studio", True),
)
DEFAULT_PAGE = "expenses"


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F4F6FB;
          }

          .block-container {
            max-width: 960px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .pb-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .pb-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #0B3FD6;
          }

          .pb-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .pb-nav__link,
          .pb-nav__link:visited {
            position: relative;
            font-weight: 600;
            color: #5C6478;
            text-decoration: none;
            transition: color 0.2s ease;
          }

          .pb-nav__link:hover,
          .pb-nav__link.is-active {
            color: #1D4ED8;
          }

          .pb-nav__link.is-active::after {
            content: "";
            position: absolute;
            left: 0;
            right: 0;
            bottom: -8px;
            height: 3px;
            border-radius: 999px;
            background: linear-gradient(90deg, #1D4ED8, #0EA5E9);
          }

          .pb-user {
            color: #4B5563;
            font-size: 0.9rem;
          }

          .pb-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .pb-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            gap: 12px;
          }

          .pb-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #111827;
            flex-wrap: wrap;
          }

          .pb-card__title {
            font-size: 1.05rem;
          }

          .pb-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
            white-space: nowrap;
          }

          .pb-total {
            font-size: 2.4rem;
            font-weight: 700;
            color: #111827;
            margin: 0;
          }

          .pb-expense {
            display: flex;
            flex-direction: column;
          }

          .pb-expense__category {
            font-size: 0.8rem;
            color: #6B7280;
          }

          .pb-insights p {
            margin: 0 0 0.5rem 0;
            color: #4B5563;
          }

          .pb-insights strong {
            color: #111827;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable Pocketbook card."""

    chip_html = f'<span class="pb-chip">{html.escape(suffix)}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="pb-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="pb-card__head"><span class="pb-card__title">{html.escape(title)}</span>'
            f'{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_navbar(active_page: str, user: str) -> None:
    """Render the navigation bar with the active page and signed-in user."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        if not link.enabled:
            continue
        css_class = "pb-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'
        link_markup.append(
            f'<a class="{css_class}" href="?page={link.slug}"{aria_current} '
            f'data-page="{link.slug}" target="_self">{link.label}</a>'
        )

    st.markdown(
        f"""
        <nav class="pb-nav">
            <div class="pb-nav__brand">Pocketbook</div>
            <div class="pb-nav__links">{''.join(link_markup)}</div>
        </nav>
        <p class="pb-user">Logged in as <strong>{html.escape(user)}</strong></p>
        """,
        unsafe_allow_html=True,
    )
    _enforce_same_tab_navigation()


def _enforce_same_tab_navigation() -> None:
    """Ensure navigation links stay within the same browser tab."""

    components_html(
        """
        <script>
        (function() {
          if (window.parent && !window.parent.__pbNavSameTab) {
            window.parent.__pbNavSameTab = true;
            const enforce = () => {
              const anchors = window.parent.document.querySelectorAll('a.pb-nav__link');
              anchors.forEach((anchor) => {
                if (anchor.target && anchor.target.toLowerCase() !== '_self') {
                  anchor.target = '_self';
                }
              });
            };
            enforce();
            const observer = new MutationObserver(enforce);
            observer.observe(window.parent.document.body, { childList: true, subtree: true });
          }
        })();
        </script>
        """,
        height=0,
        width=0,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", DEFAULT_PAGE)
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else DEFAULT_PAGE

    if st.session_state.get("active_page") != page:
        st.session_state["active_page"] = page

    if params.get("page") != page:
        st.query_params["page"] = page

    return page


__all__ = [
    "DEFAULT_PAGE",
    "NavigationLink",
    "NAV_LINKS",
    "card",
    "determine_active_page",
    "inject_css",
    "render_navbar",
]
