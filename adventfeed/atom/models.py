"""Atom feed data models."""

from __future__ import annotations

from dataclasses import dataclass, field

ATOM_NS = "http://www.w3.org/2005/Atom"


@dataclass(frozen=True, slots=True)
class FeedAuthor:
    name: str
    uri: str = ""


@dataclass(frozen=True, slots=True)
class FeedEntry:
    title: str
    link: str
    id: str
    updated: str
    summary: str
    content: str


@dataclass(frozen=True, slots=True)
class FeedDocument:
    title: str
    subtitle: str
    link: str
    icon: str
    updated: str
    id: str
    author: FeedAuthor
    entries: tuple[FeedEntry, ...] = field(default_factory=tuple)
