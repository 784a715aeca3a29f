"""Ingestion data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


@dataclass(frozen=True, slots=True)
class StoreProfile:
    slug: str
    name: str
    api_url: str
    base_url: str
    portal_id: str


class UpstreamModel(BaseModel):
    """Base for upstream GraphQL payloads: camelCase keys, nulls fall back to defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        if isinstance(value, list):
            # null list items decode as empty objects
            return [{} if item is None else item for item in value]
        return value


class CalendarHeader(UpstreamModel):
    title: str = ""
    description: str = ""
    image_url: str = ""


class ProductImage(UpstreamModel):
    url: str = ""


class Product(UpstreamModel):
    id: str = ""
    product_id: int = 0
    name: str = ""
    name_properties: str = ""
    product_type_name: str = ""
    brand_name: str = ""
    average_rating: float = 0.0
    total_ratings: int = 0
    images: list[ProductImage] = Field(default_factory=list)


class Price(UpstreamModel):
    amount_inclusive: float = 0.0
    currency: str = ""


class InsteadOfPrice(UpstreamModel):
    price: Price = Field(default_factory=Price)


class SalesInformation(UpstreamModel):
    number_of_items: int = 0
    number_of_items_sold: int = 0
    valid_from: str = ""


class Offer(UpstreamModel):
    price: Price = Field(default_factory=Price)
    sales_information: SalesInformation = Field(default_factory=SalesInformation)
    instead_of_price: InsteadOfPrice | None = None


class ProductOffer(UpstreamModel):
    product: Product = Field(default_factory=Product)
    offer: Offer = Field(default_factory=Offer)


class CalendarSnapshot(UpstreamModel):
    current_date: str = ""
    header: CalendarHeader = Field(default_factory=CalendarHeader)
    products: list[ProductOffer] = Field(default_factory=list)


class GraphQLError(UpstreamModel):
    message: str = ""


class EnvelopeData(UpstreamModel):
    advent_calendar: CalendarSnapshot = Field(default_factory=CalendarSnapshot)


class GraphQLEnvelope(UpstreamModel):
    data: EnvelopeData = Field(default_factory=EnvelopeData)
    errors: list[GraphQLError] = Field(default_factory=list)
