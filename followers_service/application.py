"""Use cases for creating and listing follow relationships."""

from __future__ import annotations

from dataclasses import dataclass

from .domain import FollowRepository, create_follow


@dataclass
class CreateFollowCommand:
    """Request to make ``follower_id`` follow ``followed_id``."""

    followed_id: str
    follower_id: str = ""


@dataclass(frozen=True)
class CreateFollowResponse:
    """Result of a created follow."""

    follower_id: str
    followed_id: str

    def to_json(self) -> dict:
        """Return the JSON-ready representation."""
        return {"follower_id": self.follower_id, "followed_id": self.followed_id}


class CreateFollow:
    """Create a follow relationship and store it."""

    def __init__(self, follow_repository: FollowRepository) -> None:
        self._repository = follow_repository

    def execute(self, command: CreateFollowCommand) -> CreateFollowResponse:
        follow = create_follow(command.follower_id, command.followed_id)
        self._repository.create(follow)
        return CreateFollowResponse(
            follower_id=follow.follower_id, followed_id=follow.followed_id
        )


@dataclass(frozen=True)
class GetFollowersCommand:
    """Request for the followers of ``user_id``."""

    user_id: str


@dataclass(frozen=True)
class GetFollowersResponse:
    """The followers of a user."""

    followers: list[str]

    def to_json(self) -> dict:
        """Return the JSON-ready representation."""
        return {"followers": list(self.followers)}


class GetFollowers:
    """List the users who follow a given user."""

    def __init__(self, follow_repository: FollowRepository) -> None:
        self._repository = follow_repository

    def execute(self, command: GetFollowersCommand) -> GetFollowersResponse:
        return GetFollowersResponse(
            followers=self._repository.find_followers(command.user_id)
        )


@dataclass(frozen=True)
class GetFollowingsCommand:
    """Request for the users that ``user_id`` follows."""

    user_id: str


@dataclass(frozen=True)
class GetFollowingsResponse:
    """The users a user follows."""

    followings: list[str]

    def to_json(self) -> dict:
        """Return the JSON-ready representation."""
        return {"followings": list(self.followings)}


class GetFollowings:
    """List the users that a given user follows."""

    def __init__(self, follow_repository: FollowRepository) -> None:
        self._repository = follow_repository

    def execute(self, command: GetFollowingsCommand) -> GetFollowingsResponse:
        return GetFollowingsResponse(
            followings=self._repository.find_following(command.user_id)
        )