"""Runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Any

from dotenv import find_dotenv, load_dotenv

from adventfeed.ingest import get_store
from adventfeed.ingest.advent_calendar import DEFAULT_USER_AGENT
from adventfeed.ingest.models import StoreProfile
from adventfeed.utils.dates import parse_duration

DEFAULT_STORE = "galaxus"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_CACHE = "5m"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class Settings:
    store: StoreProfile
    user_agent: str = DEFAULT_USER_AGENT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cache_duration: timedelta = timedelta(minutes=5)
    log_level: str = "INFO"

    def with_overrides(self, **overrides: Any) -> Settings:
        values = {key: value for key, value in overrides.items() if value is not None}
        if "store" in values:
            values["store"] = resolve_store(values["store"])
        if "cache_duration" in values:
            values["cache_duration"] = resolve_duration(values["cache_duration"])
        if "port" in values:
            values["port"] = resolve_port(values["port"])
        if "log_level" in values:
            values["log_level"] = values["log_level"].strip().upper()
        return replace(self, **values)


def resolve_store(value: str | StoreProfile) -> StoreProfile:
    if isinstance(value, StoreProfile):
        return value
    try:
        return get_store(value)
    except KeyError as exc:
        raise ConfigError(exc.args[0]) from exc


def resolve_duration(value: str | timedelta) -> timedelta:
    if isinstance(value, timedelta):
        return value
    try:
        duration = parse_duration(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid cache duration: {value!r}") from exc
    if duration <= timedelta(0):
        raise ConfigError(f"Cache duration must be positive: {value!r}")
    return duration


def resolve_port(value: str | int) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid port: {value!r}") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range: {port}")
    return port


def settings_from_env() -> Settings:
    """Resolve settings from the environment (and a .env file, if present)."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        store=resolve_store(os.environ.get("ADVENT_STORE", DEFAULT_STORE)),
        user_agent=os.environ.get("ADVENT_USER_AGENT", DEFAULT_USER_AGENT),
        host=os.environ.get("ADVENT_HOST", DEFAULT_HOST),
        port=resolve_port(os.environ.get("PORT", DEFAULT_PORT)),
        cache_duration=resolve_duration(os.environ.get("ADVENT_CACHE", DEFAULT_CACHE)),
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper(),
    )
