"""Unit price helpers for the pricing display.

Prices are shown per kilogram, per litre, per pound for variants configured
in an imperial unit, or per item.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from .entities import Variant
from .errors import UnitScaleError
from .scales import get_unit_system

MeasurementSystem = Literal["metric", "imperial", "custom"]

_GRAMS_PER_POUND = Decimal("453.6")
_GRAMS_PER_KILOGRAM = Decimal("1000")
_CENTS = Decimal("0.01")


def system_of_measurement(variant: Variant) -> MeasurementSystem:
    if variant.variant_unit not in {"weight", "volume"} or variant.variant_unit_scale is None:
        return "custom"
    try:
        return get_unit_system(variant.variant_unit_scale, variant.variant_unit)
    except UnitScaleError:
        return "custom"


class UnitPrices:
    def __init__(self, variant: Variant) -> None:
        self.variant = variant

    def unit_price_unit(self) -> str:
        if system_of_measurement(self.variant) == "imperial":
            return "lb"
        if self.variant.variant_unit == "weight":
            return "kg"
        if self.variant.variant_unit == "volume":
            return "L"
        return self.variant.variant_unit_name or "item"

    def unit_price_denominator(self) -> Decimal | None:
        unit_value = self.variant.unit_value
        if unit_value is None:
            return None
        if self.variant.variant_unit == "items":
            return unit_value

        unit = self.unit_price_unit()
        if unit == "lb":
            return unit_value / _GRAMS_PER_POUND
        if unit == "kg":
            return unit_value / _GRAMS_PER_KILOGRAM
        # Litres are the volume base unit.
        return unit_value

    def unit_price(self, price: Decimal | int | float | str) -> Decimal | None:
        """Return ``price`` per unit, rounded to cents, or ``None`` when undefined."""
        denominator = self.unit_price_denominator()
        if not denominator:
            return None
        amount = Decimal(str(price))
        return (amount / denominator).quantize(_CENTS, rounding=ROUND_HALF_UP)


__all__ = ["MeasurementSystem", "UnitPrices", "system_of_measurement"]
