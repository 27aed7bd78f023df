"""Catalog Models - Pydantic models for records served by the catalog API."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from shopcart.services.money import parse_price


class CatalogProduct(BaseModel):
    """Product as listed in the catalog (no cart quantity)."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    title: str
    price: Decimal
    image: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return parse_price(v)


class StockRecord(BaseModel):
    """Maximum purchasable quantity for a product."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    amount: int
