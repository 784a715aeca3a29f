"""Atom rendering utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from adventfeed.atom.models import ATOM_NS, FeedDocument

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent
ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(enabled_extensions=("xml", "html")),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
CONTENT_TYPE = "application/atom+xml; charset=utf-8"


def render_entry_content(context: dict[str, Any]) -> str:
    """Render the HTML body of a single feed entry."""
    template = ENV.get_template("entry.html")
    return template.render(**context).strip()


def render_feed(document: FeedDocument) -> str:
    template = ENV.get_template("feed.xml")
    body = template.render(feed=document, xmlns=ATOM_NS)
    logger.debug("Rendered feed %s with %s entries", document.id, len(document.entries))
    return XML_DECLARATION + body
