"""Page modules for the Pocketbook Streamlit application."""

from .auth import render_page as render_auth_page
from .expenses import render_page as render_expenses_page
from .logo import render_page as render_logo_page

__all__ = [
    "render_auth_page",
    "render_expenses_page",
    "render_logo_page",
]
