"""Variant unit choices offered by the product form.

Option keys are submitted back by the form, so ``option_key`` and
``parse_option_key`` must stay exact inverses for every table scale.
"""

from __future__ import annotations

from typing import Literal

from .errors import InvalidOptionKeyError
from .scales import SCALE_TABLE, UnitFamily, format_scale, get_unit_name, normalize_family

ITEMS_KEY = "items"
ITEMS_LABEL = "Items"

# Display order, not magnitude order: imperial weights follow the metric ones.
_OPTION_UNIT_ORDER: dict[UnitFamily, tuple[str, ...]] = {
    "weight": ("g", "kg", "T", "oz", "lb"),
    "volume": ("mL", "L", "kL"),
}


def option_label(family: str, unit_name: str) -> str:
    return f"{normalize_family(family).capitalize()} ({unit_name})"


def option_key(family: str, scale: float) -> str:
    normalized = normalize_family(family)
    get_unit_name(scale, normalized)
    return f"{normalized}_{format_scale(scale)}"


def _ordered_scales(family: UnitFamily) -> list[float]:
    by_name = {entry.name: entry.scale for entry in SCALE_TABLE[family]}
    return [by_name[name] for name in _OPTION_UNIT_ORDER[family]]


def variant_unit_options() -> list[tuple[str, str]]:
    """Return a new list of ``(label, key)`` tuples, ending with ``("Items", "items")``."""
    options: list[tuple[str, str]] = []
    for family in _OPTION_UNIT_ORDER:
        for scale in _ordered_scales(family):
            options.append((option_label(family, get_unit_name(scale, family)), option_key(family, scale)))
    options.append((ITEMS_LABEL, ITEMS_KEY))
    return options


def parse_option_key(key: str) -> tuple[UnitFamily | Literal["items"], float | None]:
    """Decode a submitted option key into ``(family, scale)``.

    ``"items"`` decodes to ``("items", None)``. The scale must exactly match
    a table entry of the family.
    """
    cleaned = str(key or "").strip()
    if cleaned == ITEMS_KEY:
        return ITEMS_KEY, None

    family, sep, raw_scale = cleaned.partition("_")
    if not sep or not family or not raw_scale:
        raise InvalidOptionKeyError(key)
    normalized = normalize_family(family)

    try:
        scale = float(raw_scale)
    except ValueError as exc:
        raise InvalidOptionKeyError(key) from exc
    # Only the canonical spelling written by option_key is accepted.
    if raw_scale != format_scale(scale):
        raise InvalidOptionKeyError(key)

    get_unit_name(scale, normalized)
    return normalized, scale


__all__ = [
    "ITEMS_KEY",
    "ITEMS_LABEL",
    "option_key",
    "option_label",
    "parse_option_key",
    "variant_unit_options",
]
