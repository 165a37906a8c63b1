"""Pydantic request/response models for the JSON API."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class VariantUnitOption(BaseModel):
    label: str = Field(..., examples=["Weight (kg)"])
    value: str = Field(..., examples=["weight_1000"])


class ScaleResponse(BaseModel):
    family: Literal["weight", "volume"]
    value: float
    scale: float
    unit: str
    display: str


class UnitPriceRequest(BaseModel):
    price: Decimal = Field(..., examples=["12.50"])
    unit_value: Decimal | None = Field(default=None, examples=["500"])
    variant_unit: Literal["weight", "volume", "items"] | None = Field(default=None)
    variant_unit_scale: float | None = Field(default=None, examples=[1000])
    variant_unit_name: str | None = Field(default=None, examples=["bunch"])


class UnitPriceResponse(BaseModel):
    unit: str
    denominator: Decimal | None
    unit_price: Decimal | None


__all__ = [
    "ScaleResponse",
    "UnitPriceRequest",
    "UnitPriceResponse",
    "VariantUnitOption",
]
