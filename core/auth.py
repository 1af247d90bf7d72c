"""Email/password identities kept in the local store.

Passwords are stored exactly as entered. This login only scopes data to an
identity on a single machine and is not meant to protect anything.
"""

from __future__ import annotations

import logging

from core.errors import AuthError
from core.storage import CURRENT_USER_KEY, EXPENSES_KEY, USERS_KEY, KeyValueStore

__all__ = ["current_user", "login", "logout", "register"]

logger = logging.getLogger(__name__)


def _normalise_credentials(email: str, password: str) -> tuple[str, str]:
    email = (email or "").strip()
    if not email or not password:
        raise AuthError("Email and password are required.")
    return email, password


def register(store: KeyValueStore, email: str, password: str) -> str:
    """Create an account, start an empty expense list and sign the user in."""

    email, password = _normalise_credentials(email, password)

    def add_user(users: dict) -> None:
        if email in users:
            raise AuthError("User with this email already exists.")
        users[email] = password

    store.update_mapping(USERS_KEY, add_user)
    store.update_mapping(EXPENSES_KEY, lambda all_expenses: all_expenses.update({email: []}))

    store.set(CURRENT_USER_KEY, email)
    logger.info("Registered user %s", email)
    return email


def login(store: KeyValueStore, email: str, password: str) -> str:
    email, password = _normalise_credentials(email, password)
    users = store.get_mapping(USERS_KEY)
    if email not in users or users[email] != password:
        logger.info("Rejected login for %s", email)
        raise AuthError("Invalid email or password.")

    store.set(CURRENT_USER_KEY, email)
    logger.info("User %s logged in", email)
    return email


def logout(store: KeyValueStore) -> None:
    user = store.get(CURRENT_USER_KEY)
    store.remove(CURRENT_USER_KEY)
    if user:
        logger.info("User %s logged out", user)


def current_user(store: KeyValueStore) -> str | None:
    """Return the remembered user, if that user still exists."""

    user = store.get(CURRENT_USER_KEY)
    if not isinstance(user, str) or not user:
        return None
    if user not in store.get_mapping(USERS_KEY):
        store.remove(CURRENT_USER_KEY)
        return None
    return user
