"""Price, stock and rating figures shown on feed entries."""

from __future__ import annotations

import math

from adventfeed.ingest.models import Offer, Product


def discount_percentage(price: float, instead_of: float | None) -> int:
    """Whole-percent discount of ``price`` against ``instead_of``, rounded down."""
    if instead_of is None or instead_of <= 0 or price >= instead_of:
        return 0
    return math.floor((instead_of - price) / instead_of * 100)


def original_price(offer: Offer) -> float | None:
    if offer.instead_of_price is None:
        return None
    return offer.instead_of_price.price.amount_inclusive


def offer_discount(offer: Offer) -> int:
    return discount_percentage(offer.price.amount_inclusive, original_price(offer))


def remaining_stock(offer: Offer) -> int:
    sales = offer.sales_information
    return sales.number_of_items - sales.number_of_items_sold


def stock_line(offer: Offer) -> str:
    return f"{remaining_stock(offer)}/{offer.sales_information.number_of_items} remaining"


def price_line(offer: Offer) -> str:
    amount = offer.price.amount_inclusive
    currency = offer.price.currency
    instead_of = original_price(offer)
    if instead_of is None:
        return f"{amount:.2f} {currency}"
    return f"<strong>{amount:.2f} {currency}</strong> <s>{instead_of:.2f} {currency}</s>"


def rating_line(product: Product) -> str:
    if product.total_ratings == 0:
        return ""
    return f"{product.average_rating:.1f}/5 ({product.total_ratings} reviews)"
