"""Prompt loading utilities for Pocketbook AI features."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from string import Template

__all__ = ["PromptTemplate", "get_prompt_text", "load_prompt", "render_prompt"]


@dataclass(frozen=True)
class PromptTemplate:
    """A prompt file with its text; ``$name`` placeholders are filled by ``render``."""

    name: str
    content: str

    def render(self, **values: str) -> str:
        return Template(self.content).safe_substitute(values)


PROMPTS_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=32)
def load_prompt(name: str) -> PromptTemplate:
    """Load a prompt template by stem name (without extension)."""

    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt template not found: {path}")

    content = path.read_text(encoding="utf-8").strip()
    return PromptTemplate(name=name, content=content)


def get_prompt_text(name: str) -> str:
    return load_prompt(name).content


def render_prompt(name: str, **values: str) -> str:
    return load_prompt(name).render(**values)
