"""Fetch the advent calendar once and print the Atom feed."""

from __future__ import annotations

import asyncio
import sys

from adventfeed.atom.render import render_feed
from adventfeed.ingest.advent_calendar import UpstreamError, fetch_calendar
from adventfeed.logic.feed import build_feed
from adventfeed.settings import ConfigError, settings_from_env


async def main() -> None:
    try:
        settings = settings_from_env()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc
    try:
        calendar = await fetch_calendar(settings.store, settings.user_agent)
    except UpstreamError as exc:
        raise SystemExit(f"Fetch failed: {exc}") from exc
    sys.stdout.write(render_feed(build_feed(calendar, settings.store)))


if __name__ == "__main__":
    asyncio.run(main())
