"""FastAPI application serving the Atom feed."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from adventfeed.atom.render import CONTENT_TYPE, render_feed
from adventfeed.ingest.advent_calendar import UpstreamError
from adventfeed.service import AppContext, FeedService

logger = logging.getLogger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_service(context: AppContext = Depends(get_context)) -> FeedService:
    return context.service


def create_app(context: AppContext) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await context.close()

    app = FastAPI(
        title=f"{context.store.name} Advent Calendar Feed",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.context = context

    @app.get("/feed")
    async def feed(service: FeedService = Depends(get_service)) -> Response:
        try:
            document = await service.get_feed()
        except UpstreamError as exc:
            logger.error("Error fetching feed: %s", exc)
            return PlainTextResponse("Failed to fetch feed\n", status_code=500)
        return Response(content=render_feed(document), media_type=CONTENT_TYPE)

    @app.get("/", response_class=PlainTextResponse)
    async def index(context: AppContext = Depends(get_context)) -> str:
        return f"{context.store.name} Advent Calendar Feed\n\nGet the feed at /feed\n"

    return app
