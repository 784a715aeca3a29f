"""Run the advent calendar feed server."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from adventfeed.api.main import create_app
from adventfeed.ingest import load_stores
from adventfeed.service import build_context
from adventfeed.settings import ConfigError, Settings, settings_from_env

logger = logging.getLogger("adventfeed")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    stores = ", ".join(sorted(load_stores()))
    argp = argparse.ArgumentParser(prog="adventfeed", description="Serve a retailer advent calendar as an Atom feed")
    argp.add_argument("--store", help=f"Store to fetch from: {stores}")
    argp.add_argument("--ua", dest="user_agent", help="User-Agent header for upstream requests")
    argp.add_argument("--host", help="Address to listen on")
    argp.add_argument("--port", type=int, help="Port to listen on")
    argp.add_argument("--cache", dest="cache_duration", help="Cache duration (e.g. 5m, 1h)")
    argp.add_argument("--log-level", dest="log_level", help="Logging level")
    return argp.parse_args(argv)


def load_settings(argv: list[str] | None = None) -> Settings:
    args = parse_args(argv)
    return settings_from_env().with_overrides(**vars(args))


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings(argv)
    except ConfigError as exc:
        print(f"adventfeed: {exc}", file=sys.stderr)
        return 2

    _configure_logging(settings.log_level)
    context = build_context(settings)
    app = create_app(context)

    logger.info("Starting %s Advent Calendar server on %s:%s", settings.store.name, settings.host, settings.port)
    logger.info("Feed available at http://localhost:%s/feed", settings.port)
    logger.info("Cache duration: %s", settings.cache_duration)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
