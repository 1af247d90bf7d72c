"""Streamlit application package for Pocketbook."""

from .main import main

__all__ = ["main"]
