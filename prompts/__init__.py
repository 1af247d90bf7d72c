"""Prompt templates and loaders for Pocketbook."""

from .base import PromptTemplate, get_prompt_text, load_prompt, render_prompt

__all__ = ["PromptTemplate", "get_prompt_text", "load_prompt", "render_prompt"]
