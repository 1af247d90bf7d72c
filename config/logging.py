"""Logging setup shared by the Pocketbook app and its services."""

from __future__ import annotations

import logging

_HANDLER_NAME = "pocketbook-console"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a console handler to the root logger once per process.

    Streamlit reruns the script on every interaction, so the handler is looked
    up by name before a new one is added.
    """

    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if not any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - [%(name)s] - %(message)s")
        )
        root.addHandler(handler)

    return logging.getLogger("pocketbook")
