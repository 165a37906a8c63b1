"""Core unit scale API.

The core layer is framework-agnostic and safe to import from scripts, tests,
and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "InvalidFamilyError": ("unitshift.core.errors", "InvalidFamilyError"),
    "InvalidOptionKeyError": ("unitshift.core.errors", "InvalidOptionKeyError"),
    "SCALE_TABLE": ("unitshift.core.scales", "SCALE_TABLE"),
    "UnitPrices": ("unitshift.core.unit_prices", "UnitPrices"),
    "UnitScaleError": ("unitshift.core.errors", "UnitScaleError"),
    "UnknownScaleError": ("unitshift.core.errors", "UnknownScaleError"),
    "Variant": ("unitshift.core.entities", "Variant"),
    "format_scale": ("unitshift.core.scales", "format_scale"),
    "format_unit_value": ("unitshift.core.scales", "format_unit_value"),
    "get_scale": ("unitshift.core.scales", "get_scale"),
    "get_unit_name": ("unitshift.core.scales", "get_unit_name"),
    "get_unit_system": ("unitshift.core.scales", "get_unit_system"),
    "option_key": ("unitshift.core.options", "option_key"),
    "parse_option_key": ("unitshift.core.options", "parse_option_key"),
    "scale_for_unit_value": ("unitshift.core.scales", "scale_for_unit_value"),
    "system_of_measurement": ("unitshift.core.unit_prices", "system_of_measurement"),
    "unit_scales": ("unitshift.core.scales", "unit_scales"),
    "variant_unit_options": ("unitshift.core.options", "variant_unit_options"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
