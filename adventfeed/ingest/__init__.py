"""Ingestion helpers."""

from __future__ import annotations

import pathlib

import yaml

from adventfeed.ingest.models import StoreProfile

STORES_PATH = pathlib.Path(__file__).with_name("stores.yml")


def load_stores() -> dict[str, StoreProfile]:
    data = yaml.safe_load(STORES_PATH.read_text())
    return {slug: StoreProfile(slug=slug, **item) for slug, item in data.items()}


def get_store(slug: str) -> StoreProfile:
    stores = load_stores()
    try:
        return stores[slug.lower()]
    except KeyError:
        valid = ", ".join(sorted(stores))
        raise KeyError(f"Unknown store: {slug} (valid options: {valid})") from None
