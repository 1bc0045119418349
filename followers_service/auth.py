"""Identification of the user behind a request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_DEFAULT_USER_ID = "user_id"
_USER_KEY = "user_id"


def get_user_from_context(context: Any = None) -> str:
    """Return the id of the requesting user.

    A mapping context carrying a non-empty ``user_id`` entry names the user;
    any other context resolves to the fixed default user id.
    """
    if isinstance(context, Mapping):
        user_id = context.get(_USER_KEY)
        if isinstance(user_id, str) and user_id:
            return user_id
    return _DEFAULT_USER_ID