"""Datetime helpers."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pendulum

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_DURATION_RE = re.compile(r"(?:\d+(?:\.\d+)?(?:ms|h|m|s))+")
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def parse_timestamp(value: str | None) -> datetime:
    """Parse an RFC 3339 timestamp, falling back to ZERO_TIME."""
    if not value or not _RFC3339_RE.fullmatch(value):
        return ZERO_TIME
    try:
        parsed = pendulum.parse(value)
    except (ValueError, TypeError):
        return ZERO_TIME
    if not isinstance(parsed, datetime):
        return ZERO_TIME
    return parsed


def format_rfc3339(value: datetime) -> str:
    text = datetime.isoformat(value, timespec="seconds")
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


def parse_duration(value: str) -> timedelta:
    """Parse "5m", "1h30m", "PT5M" or a bare number of seconds."""
    text = value.strip()
    if not text:
        raise ValueError("empty duration")
    if _DURATION_RE.fullmatch(text):
        seconds = sum(
            float(amount) * _UNIT_SECONDS[unit] for amount, unit in _DURATION_PART_RE.findall(text)
        )
        return timedelta(seconds=seconds)
    try:
        return timedelta(seconds=float(text))
    except ValueError:
        pass
    parsed = pendulum.parse(text)
    if isinstance(parsed, pendulum.Duration):
        return timedelta(seconds=parsed.total_seconds())
    raise ValueError(f"not a duration: {value!r}")
