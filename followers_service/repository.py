"""Follow repository backed by an SQL database."""

from __future__ import annotations

import logging

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .domain import Follow, FollowError, FollowInternalError

logger = logging.getLogger(__name__)

_SELECT_FOLLOWERS = text(
    "SELECT f.follower_id FROM follows f WHERE f.followed_id = :user_id"
)
_SELECT_FOLLOWING = text(
    "SELECT f.followed_id FROM follows f WHERE f.follower_id = :user_id"
)
_INSERT_FOLLOW = text(
    "INSERT INTO follows (follower_id, followed_id, created_at) "
    "VALUES (:follower_id, :followed_id, :created_at)"
).bindparams(bindparam("created_at", type_=DateTime(timezone=True)))


class SqlFollowRepository:
    """Stores follows in a ``follows`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_followers(self, user_id: str) -> list[str]:
        try:
            with self._engine.connect() as conn:
                return list(conn.execute(_SELECT_FOLLOWERS, {"user_id": user_id}).scalars())
        except SQLAlchemyError as exc:
            logger.error("error getting followers: %s", exc)
            raise FollowError(f"error finding followers: {exc}") from exc

    def find_following(self, user_id: str) -> list[str]:
        try:
            with self._engine.connect() as conn:
                return list(conn.execute(_SELECT_FOLLOWING, {"user_id": user_id}).scalars())
        except SQLAlchemyError as exc:
            logger.error("error getting followings: %s", exc)
            raise FollowInternalError() from exc

    def create(self, follow: Follow) -> None:
        params = {
            "follower_id": follow.follower_id,
            "followed_id": follow.followed_id,
            "created_at": follow.created_at,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(_INSERT_FOLLOW, params)
        except SQLAlchemyError as exc:
            logger.error("error creating follow: %s", exc)
            raise FollowError(f"error creating follow relationship: {exc}") from exc