import pytest

from followers_service.application import (
    CreateFollow,
    CreateFollowCommand,
    CreateFollowResponse,
    GetFollowers,
    GetFollowersCommand,
    GetFollowersResponse,
    GetFollowings,
    GetFollowingsCommand,
    GetFollowingsResponse,
)
from followers_service.domain import EmptyFollowedIdError, FollowInternalError


class MemoryRepository:
    def __init__(self, fail=False):
        self.follows = []
        self.fail = fail

    def create(self, follow):
        if self.fail:
            raise FollowInternalError()
        self.follows.append(follow)

    def find_followers(self, user_id):
        if self.fail:
            raise FollowInternalError()
        return [f.follower_id for f in self.follows if f.followed_id == user_id]

    def find_following(self, user_id):
        if self.fail:
            raise FollowInternalError()
        return [f.followed_id for f in self.follows if f.follower_id == user_id]


def test_create_follow_stores_and_responds():
    repo = MemoryRepository()
    response = CreateFollow(repo).execute(
        CreateFollowCommand(followed_id="bob", follower_id="alice")
    )
    assert response == CreateFollowResponse(follower_id="alice", followed_id="bob")
    assert [(f.follower_id, f.followed_id) for f in repo.follows] == [("alice", "bob")]


def test_create_follow_empty_followed_stores_nothing():
    repo = MemoryRepository()
    with pytest.raises(EmptyFollowedIdError):
        CreateFollow(repo).execute(CreateFollowCommand(followed_id="", follower_id="alice"))
    assert repo.follows == []


def test_create_follow_propagates_repository_error():
    with pytest.raises(FollowInternalError):
        CreateFollow(MemoryRepository(fail=True)).execute(
            CreateFollowCommand(followed_id="bob", follower_id="alice")
        )


def test_create_response_json():
    response = CreateFollowResponse(follower_id="alice", followed_id="bob")
    assert response.to_json() == {"follower_id": "alice", "followed_id": "bob"}


def test_get_followers_and_followings_round_trip():
    repo = MemoryRepository()
    create = CreateFollow(repo)
    create.execute(CreateFollowCommand(followed_id="bob", follower_id="alice"))
    create.execute(CreateFollowCommand(followed_id="bob", follower_id="carol"))
    create.execute(CreateFollowCommand(followed_id="carol", follower_id="alice"))

    followers = GetFollowers(repo).execute(GetFollowersCommand(user_id="bob"))
    assert sorted(followers.followers) == ["alice", "carol"]

    followings = GetFollowings(repo).execute(GetFollowingsCommand(user_id="alice"))
    assert sorted(followings.followings) == ["bob", "carol"]


def test_unknown_user_has_empty_lists():
    repo = MemoryRepository()
    assert GetFollowers(repo).execute(GetFollowersCommand("nobody")).followers == []
    assert GetFollowings(repo).execute(GetFollowingsCommand("nobody")).followings == []


def test_list_responses_json():
    assert GetFollowersResponse(["a", "b"]).to_json() == {"followers": ["a", "b"]}
    assert GetFollowingsResponse(["c"]).to_json() == {"followings": ["c"]}


def test_get_followings_propagates_error():
    with pytest.raises(FollowInternalError):
        GetFollowings(MemoryRepository(fail=True)).execute(GetFollowingsCommand("alice"))