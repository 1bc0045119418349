"""Core follow model, its errors and the repository contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol


class FollowError(Exception):
    """Base class for errors about follow relationships."""


class EmptyFollowedIdError(FollowError):
    """Raised when a follow names no user to be followed."""

    def __init__(self, message: str = "empty_followed") -> None:
        super().__init__(message)


class FollowNotFoundError(FollowError):
    """Raised when a requested follow relationship does not exist."""

    def __init__(self, message: str = "follow.not_found") -> None:
        super().__init__(message)


class FollowInternalError(FollowError):
    """Raised when the follow store fails unexpectedly."""

    def __init__(self, message: str = "follow.internal_error") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Follow:
    """A user following another user."""

    follower_id: str
    followed_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FollowRepository(Protocol):
    """Storage for follow relationships."""

    def create(self, follow: Follow) -> None:
        """Persist a follow relationship."""

    def find_followers(self, user_id: str) -> list[str]:
        """Return the ids of the users who follow ``user_id``."""

    def find_following(self, user_id: str) -> list[str]:
        """Return the ids of the users that ``user_id`` follows."""


def create_follow(follower_id: str, followed_id: str) -> Follow:
    """Build a new follow stamped with the current time."""
    if followed_id == "":
        raise EmptyFollowedIdError()
    return Follow(
        follower_id=follower_id,
        followed_id=followed_id,
        created_at=datetime.now(timezone.utc),
    )