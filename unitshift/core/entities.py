import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Literal

VariantUnit = Literal["weight", "volume", "items"]

_VARIANT_UNITS = {"weight", "volume", "items"}


@dataclass
class Variant:
    unit_value: Decimal | None = None
    variant_unit: VariantUnit | None = None
    variant_unit_scale: float | None = None
    variant_unit_name: str | None = None

    def __post_init__(self) -> None:
        self.unit_value = _parse_decimal(self.unit_value)
        self.variant_unit = _normalize_variant_unit(self.variant_unit)
        self.variant_unit_scale = _parse_scale(self.variant_unit_scale)
        self.variant_unit_name = _clean_text(self.variant_unit_name)


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_decimal(value: Any) -> Decimal | None:
    if value is None:
        return None
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return None
    return value if value.is_finite() else None


def _parse_scale(value: Any) -> float | None:
    if value is None:
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed) or parsed <= 0:
        return None
    return parsed


def _normalize_variant_unit(value: Any) -> VariantUnit | None:
    text = (_clean_text(value) or "").lower()
    if text in _VARIANT_UNITS:
        return text  # type: ignore[return-value]
    return None
