"""Scale tables for variant units and the lookups built on them.

A scale is the multiplier of a unit relative to the family's base unit
(grams for weight, litres for volume). Tables are ascending and immutable.

Family arguments are matched after stripping whitespace and lower-casing, so
``" Weight "`` selects the weight table. Decimal inputs are compared against
the decimal spelling of each table scale and are never rounded through float.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, cast

from .errors import InvalidFamilyError, UnknownScaleError

UnitFamily = Literal["weight", "volume"]
UnitSystem = Literal["metric", "imperial"]
Number = int | float | Decimal


@dataclass(frozen=True)
class UnitScale:
    scale: float
    name: str
    system: UnitSystem = "metric"


SCALE_TABLE: dict[UnitFamily, tuple[UnitScale, ...]] = {
    "weight": (
        UnitScale(1.0, "g"),
        UnitScale(28.34952, "oz", "imperial"),
        UnitScale(453.6, "lb", "imperial"),
        UnitScale(1000.0, "kg"),
        UnitScale(1000000.0, "T"),
    ),
    "volume": (
        UnitScale(0.001, "mL"),
        UnitScale(1.0, "L"),
        UnitScale(1000.0, "kL"),
    ),
}

UNIT_FAMILIES: tuple[UnitFamily, ...] = tuple(SCALE_TABLE)


def normalize_family(family: str) -> UnitFamily:
    normalized = str(family or "").strip().lower()
    if normalized not in SCALE_TABLE:
        raise InvalidFamilyError(family)
    return cast(UnitFamily, normalized)


def _entries(family: str) -> tuple[UnitScale, ...]:
    return SCALE_TABLE[normalize_family(family)]


def _table_value(entry: UnitScale, like: Number) -> Number:
    if isinstance(like, Decimal):
        return Decimal(repr(entry.scale))
    return entry.scale


def _find_entry(scale: Number, family: str) -> UnitScale:
    entries = _entries(family)
    for entry in entries:
        if scale == _table_value(entry, scale):
            return entry
    raise UnknownScaleError(scale, normalize_family(family))


def unit_scales(family: str) -> list[float]:
    """Return a new list of the family's scale factors in ascending order."""
    return [entry.scale for entry in _entries(family)]


def get_scale(value: Number, family: str) -> float:
    """Pick the largest scale that keeps ``value`` at or above one unit.

    Values smaller than every scale fall back to the family's smallest scale,
    so ``0.4`` grams still reads in grams.
    """
    entries = _entries(family)
    if value < 0:
        raise ValueError(f"value must be non-negative (got {value!r})")

    chosen = entries[0]
    for entry in entries:
        if value >= _table_value(entry, value):
            chosen = entry
    return chosen.scale


def get_unit_name(scale: Number, family: str) -> str:
    """Return the unit symbol for a scale listed in the family's table.

    Matching is exact: ``453.6000001`` is not ``lb``.
    """
    return _find_entry(scale, family).name


def get_unit_system(scale: Number, family: str) -> UnitSystem:
    return _find_entry(scale, family).system


def scale_for_unit_value(value: Number, family: str) -> tuple[float, str]:
    scale = get_scale(value, family)
    return scale, get_unit_name(scale, family)


def format_scale(scale: Number) -> str:
    """Serialize a scale with the shortest text that parses back to it."""
    return format(Decimal(repr(float(scale))).normalize(), "f")


def format_unit_value(value: Number, family: str, *, decimals: int = 3) -> str:
    scale, name = scale_for_unit_value(value, family)
    scaled = float(value) / scale
    number = f"{scaled:.{decimals}f}"
    if "." in number:
        number = number.rstrip("0").rstrip(".")
    return f"{number}{name}"


__all__ = [
    "SCALE_TABLE",
    "UNIT_FAMILIES",
    "UnitFamily",
    "UnitScale",
    "UnitSystem",
    "format_scale",
    "format_unit_value",
    "get_scale",
    "get_unit_name",
    "get_unit_system",
    "normalize_family",
    "scale_for_unit_value",
    "unit_scales",
]
