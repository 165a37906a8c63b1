"""Public package entrypoint for unitshift.

This package resolves display units for variant quantities measured by weight
or volume, plus an optional FastAPI adapter serving the same lookups.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "UnitPrices": ("unitshift.core", "UnitPrices"),
    "Variant": ("unitshift.core", "Variant"),
    "app": ("unitshift.server.main", "app"),
    "create_app": ("unitshift.server.main", "create_app"),
    "get_scale": ("unitshift.core", "get_scale"),
    "get_unit_name": ("unitshift.core", "get_unit_name"),
    "parse_option_key": ("unitshift.core", "parse_option_key"),
    "unit_scales": ("unitshift.core", "unit_scales"),
    "variant_unit_options": ("unitshift.core", "variant_unit_options"),
}

try:
    __version__ = version("unitshift")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "UnitPrices",
    "Variant",
    "__version__",
    "app",
    "create_app",
    "get_scale",
    "get_unit_name",
    "parse_option_key",
    "unit_scales",
    "variant_unit_options",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
