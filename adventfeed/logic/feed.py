"""Build Atom feed documents from advent calendar snapshots."""

from __future__ import annotations

from datetime import datetime

from adventfeed.atom.models import FeedAuthor, FeedDocument, FeedEntry
from adventfeed.atom.render import render_entry_content
from adventfeed.ingest.models import CalendarSnapshot, ProductOffer, StoreProfile
from adventfeed.logic.pricing import (
    offer_discount,
    original_price,
    price_line,
    rating_line,
    stock_line,
)
from adventfeed.utils.dates import format_rfc3339, now_utc, parse_timestamp


def product_url(profile: StoreProfile, item: ProductOffer) -> str:
    return f"{profile.base_url}/product/{item.product.product_id}"


def entry_id(item: ProductOffer) -> str:
    return f"urn:advent:{item.product.product_id}"


def entry_title(item: ProductOffer) -> str:
    product = item.product
    title = f"{product.brand_name}: {product.name}"
    if product.name_properties:
        title += f" - {product.name_properties}"
    discount = offer_discount(item.offer)
    if discount > 0:
        title = f"[{discount}% off] {title}"
    return title


def icon_url(image_url: str) -> str:
    if len(image_url) > 2 and image_url.startswith("//"):
        return "https:" + image_url
    return image_url


def valid_from(item: ProductOffer) -> datetime:
    return parse_timestamp(item.offer.sales_information.valid_from)


def sort_products(products: list[ProductOffer]) -> list[ProductOffer]:
    """Newest offers first; unparseable dates sort last."""
    return sorted(products, key=valid_from, reverse=True)


def build_entry(item: ProductOffer, profile: StoreProfile) -> FeedEntry:
    product = item.product
    offer = item.offer
    link = product_url(profile, item)
    instead_of = original_price(offer)
    content = render_entry_content(
        {
            "image_url": product.images[0].url if product.images else "",
            "name": product.name,
            "brand": product.brand_name,
            "type_name": product.product_type_name,
            "price": f"{offer.price.amount_inclusive:.2f}",
            "currency": offer.price.currency,
            "instead_of": f"{instead_of:.2f}" if instead_of is not None else None,
            "stock": stock_line(offer),
            "rating": rating_line(product),
            "link": link,
            "store_name": profile.name,
        }
    )
    return FeedEntry(
        title=entry_title(item),
        link=link,
        id=entry_id(item),
        updated=format_rfc3339(valid_from(item)),
        summary=f"{product.brand_name} - {product.product_type_name} - {price_line(offer)}",
        content=content,
    )


def build_feed(
    calendar: CalendarSnapshot,
    profile: StoreProfile,
    *,
    now: datetime | None = None,
) -> FeedDocument:
    products = sort_products(list(calendar.products))
    header = calendar.header
    return FeedDocument(
        title=f"{header.title} - {profile.name}",
        subtitle=header.description,
        link=f"{profile.base_url}/advent-calendar",
        icon=icon_url(header.image_url),
        updated=format_rfc3339(now or now_utc()),
        id=f"urn:advent-calendar:{profile.name}",
        author=FeedAuthor(name=profile.name, uri=profile.base_url),
        entries=tuple(build_entry(item, profile) for item in products),
    )
