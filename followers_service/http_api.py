"""HTTP routes and handlers for the follow service."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from flask import Flask, Response, request

from .application import (
    CreateFollow,
    CreateFollowCommand,
    GetFollowers,
    GetFollowersCommand,
    GetFollowings,
    GetFollowingsCommand,
)
from .config import Config, Dependencies

logger = logging.getLogger(__name__)

_JSON = "application/json"


@dataclass(frozen=True)
class ErrorResponse:
    """Body sent back when a request fails."""

    status_code: int = 0
    message: str = ""
    code: str = ""

    def to_dict(self) -> dict:
        """Return the JSON body, leaving out empty fields."""
        body = {"status": self.status_code, "message": self.message, "code": self.code}
        return {key: value for key, value in body.items() if value}


_INTERNAL_ERROR = ErrorResponse(
    status_code=500, message="Internal server error", code="INTERNAL_ERROR"
)


def _json_response(payload: Any, status: int) -> Response:
    return Response(json.dumps(payload) + "\n", status=status, mimetype=_JSON)


def _error_response(error: Exception) -> Response:
    logger.error("request failed: %s", error)
    return Response(
        json.dumps(_INTERNAL_ERROR.to_dict()),
        status=_INTERNAL_ERROR.status_code,
        mimetype=_JSON,
    )


def _create_command(payload: Any, follower_id: str) -> CreateFollowCommand:
    if payload is None:
        return CreateFollowCommand(followed_id="", follower_id=follower_id)
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    followed_id = payload.get("followed_id")
    if followed_id is None:
        followed_id = ""
    if not isinstance(followed_id, str):
        raise ValueError("followed_id must be a string")
    return CreateFollowCommand(followed_id=followed_id, follower_id=follower_id)


def create_app(config: Config, dependencies: Dependencies) -> Flask:
    """Build the WSGI application with all routes."""
    app = Flask(__name__)
    app.config["SERVICE_NAME"] = config.service_name

    create_follow = CreateFollow(dependencies.follow_repository)
    get_followers = GetFollowers(dependencies.follow_repository)
    get_followings = GetFollowings(dependencies.follow_repository)

    @app.get("/health", strict_slashes=False)
    def health() -> Response:
        return Response(status=200)

    prefix = "/api/v1/follow/user/<user_id>"

    @app.post(f"{prefix}/follow")
    def follow(user_id: str) -> Response:
        try:
            payload = json.loads(request.get_data(as_text=True))
            result = create_follow.execute(_create_command(payload, user_id))
        except Exception as exc:  # every failure maps to the generic error body
            return _error_response(exc)
        return _json_response(result.to_json(), 201)

    @app.get(f"{prefix}/followings")
    def followings(user_id: str) -> Response:
        try:
            result = get_followings.execute(GetFollowingsCommand(user_id=user_id))
        except Exception as exc:
            return _error_response(exc)
        return _json_response(result.to_json(), 201)

    @app.get(f"{prefix}/followers")
    def followers(user_id: str) -> Response:
        try:
            result = get_followers.execute(GetFollowersCommand(user_id=user_id))
        except Exception as exc:
            return _error_response(exc)
        return _json_response(result.to_json(), 201)

    return app