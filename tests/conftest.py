import asyncio
from pathlib import Path

import pytest

from adventfeed.ingest import get_store
from adventfeed.ingest.models import (
    CalendarHeader,
    CalendarSnapshot,
    InsteadOfPrice,
    Offer,
    Price,
    Product,
    ProductImage,
    ProductOffer,
    SalesInformation,
)

FIXTURES = Path(__file__).parent / "fixtures" / "http"


def load_fixture(path: str) -> str:
    return (FIXTURES / path).read_text()


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCalendarClient:
    """Stands in for AdventCalendarClient; counts fetches."""

    def __init__(self, calendar: CalendarSnapshot | None = None, error: Exception | None = None) -> None:
        self.calendar = calendar or CalendarSnapshot()
        self.error = error
        self.calls = 0
        self.closed = False

    async def fetch_calendar(self) -> CalendarSnapshot:
        self.calls += 1
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.calendar

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def profile():
    return get_store("galaxus")


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def make_offer():
    def factory(
        product_id: int = 1,
        *,
        brand: str = "Acme",
        name: str = "Widget",
        name_properties: str = "",
        type_name: str = "Gadget",
        price: float = 8.0,
        currency: str = "CHF",
        instead_of: float | None = None,
        total: int = 50,
        sold: int = 20,
        valid_from: str = "2025-12-01T00:00:00Z",
        images: tuple[str, ...] = (),
        rating: float = 0.0,
        ratings: int = 0,
    ) -> ProductOffer:
        return ProductOffer(
            product=Product(
                id=f"product-{product_id}",
                product_id=product_id,
                name=name,
                name_properties=name_properties,
                product_type_name=type_name,
                brand_name=brand,
                average_rating=rating,
                total_ratings=ratings,
                images=[ProductImage(url=url) for url in images],
            ),
            offer=Offer(
                price=Price(amount_inclusive=price, currency=currency),
                sales_information=SalesInformation(
                    number_of_items=total,
                    number_of_items_sold=sold,
                    valid_from=valid_from,
                ),
                instead_of_price=(
                    InsteadOfPrice(price=Price(amount_inclusive=instead_of, currency=currency))
                    if instead_of is not None
                    else None
                ),
            ),
        )

    return factory


@pytest.fixture()
def make_calendar():
    def factory(products=(), *, title="Adventskalender", description="Daily deals", image_url="") -> CalendarSnapshot:
        return CalendarSnapshot(
            current_date="2025-12-03",
            header=CalendarHeader(title=title, description=description, image_url=image_url),
            products=list(products),
        )

    return factory
