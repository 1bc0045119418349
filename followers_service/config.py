"""Service configuration and the dependencies built from it."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, text

from .domain import FollowRepository
from .repository import SqlFollowRepository

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"", "0", "f", "F", "FALSE", "false", "False"}


def _lower_keys(data: Mapping) -> dict[str, Any]:
    return {str(key).lower(): value for key, value in data.items()}


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (bool, int, float)):
        return bool(value)
    if isinstance(value, str):
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
    raise ValueError(f"cannot read {value!r} as a boolean")


@dataclass(frozen=True)
class PostgresConfig:
    """Connection settings for the Postgres database."""

    host: str = ""
    port: str = ""
    password: str = ""
    database: str = ""
    user: str = ""
    use_ssl: bool = False


@dataclass(frozen=True)
class Config:
    """Settings for the whole service."""

    service_name: str = ""
    env: str = ""
    port: str = ""
    postgres: PostgresConfig = field(default_factory=PostgresConfig)

    @classmethod
    def from_mapping(cls, data: Mapping) -> Config:
        """Build a config from decoded JSON; keys are case-insensitive."""
        values = _lower_keys(data)
        pg_data = values.get("postgres") or {}
        if not isinstance(pg_data, Mapping):
            raise ValueError("'postgres' must be an object")
        pg = _lower_keys(pg_data)
        return cls(
            service_name=_as_str(values.get("service_name")),
            env=_as_str(values.get("env")),
            port=_as_str(values.get("port")),
            postgres=PostgresConfig(
                host=_as_str(pg.get("host")),
                port=_as_str(pg.get("port")),
                password=_as_str(pg.get("password")),
                database=_as_str(pg.get("database")),
                user=_as_str(pg.get("user")),
                use_ssl=_as_bool(pg.get("use_ssl")),
            ),
        )


def config_name() -> str:
    """Name of the config file to load, taken from ENVIRONMENT."""
    return os.environ.get("ENVIRONMENT") or "local"


def read_config(config_dir: str | os.PathLike | None = None) -> Config:
    """Read ``<config_name()>.json`` from ``config_dir`` (default: this package)."""
    directory = Path(config_dir) if config_dir is not None else Path(__file__).parent
    path = directory / f"{config_name()}.json"
    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, Mapping):
        raise ValueError(f"{path} does not hold a JSON object")
    return Config.from_mapping(data)


@dataclass(frozen=True)
class Dependencies:
    """Objects the HTTP layer needs."""

    follow_repository: FollowRepository


def postgres_url(config: Config) -> str:
    """Database URL for the configured Postgres server."""
    pg = config.postgres
    url = f"postgresql://{pg.user}:{pg.password}@{pg.host}:{pg.port}/{pg.database}"
    if not pg.use_ssl:
        url += "?sslmode=disable"
    return url


def build_dependencies(config: Config) -> Dependencies:
    """Connect to the database, check it answers, and wire the repository."""
    engine = create_engine(postgres_url(config))
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return Dependencies(follow_repository=SqlFollowRepository(engine))