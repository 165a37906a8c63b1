"""JSON API routes: /health, /api/v1/*."""

import logging

from fastapi import APIRouter, HTTPException, Query

from ...config import get_settings
from ...core.entities import Variant
from ...core.errors import UnitScaleError
from ...core.options import parse_option_key, variant_unit_options
from ...core.scales import (
    format_unit_value,
    get_unit_name,
    get_unit_system,
    normalize_family,
    scale_for_unit_value,
    unit_scales,
)
from ...core.unit_prices import UnitPrices
from ..schemas import ScaleResponse, UnitPriceRequest, UnitPriceResponse, VariantUnitOption

settings = get_settings()
router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _unprocessable(exc: UnitScaleError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.get("/api/v1/units/options", response_model=list[VariantUnitOption])
def list_variant_unit_options() -> list[VariantUnitOption]:
    return [VariantUnitOption(label=label, value=value) for label, value in variant_unit_options()]


@router.get("/api/v1/units/option-key")
def decode_option_key(key: str = Query(..., description="Submitted variant unit option key")) -> dict:
    try:
        family, scale = parse_option_key(key)
    except UnitScaleError as exc:
        logger.debug("Rejected variant unit option key %r: %s", key, exc)
        raise _unprocessable(exc) from exc

    unit = get_unit_name(scale, family) if scale is not None else None
    return {"variant_unit": family, "variant_unit_scale": scale, "unit": unit}


@router.get("/api/v1/units/{family}/scales")
def list_unit_scales(family: str) -> dict:
    try:
        normalized = normalize_family(family)
    except UnitScaleError as exc:
        raise _unprocessable(exc) from exc

    scales = unit_scales(normalized)
    return {
        "family": normalized,
        "scales": list(scales),
        "units": [get_unit_name(scale, normalized) for scale in scales],
    }


@router.get("/api/v1/units/{family}/scale", response_model=ScaleResponse)
def resolve_scale(
    family: str,
    value: float = Query(..., ge=0, description="Quantity in the family's base unit"),
) -> ScaleResponse:
    try:
        normalized = normalize_family(family)
        scale, unit = scale_for_unit_value(value, normalized)
    except UnitScaleError as exc:
        raise _unprocessable(exc) from exc

    logger.debug("Resolved %s value=%s to scale=%s (%s)", normalized, value, scale, unit)
    return ScaleResponse(
        family=normalized,
        value=value,
        scale=scale,
        unit=unit,
        display=format_unit_value(value, normalized),
    )


@router.get("/api/v1/units/{family}/name")
def resolve_unit_name(
    family: str,
    scale: float = Query(..., gt=0, description="Scale factor listed in the family's table"),
) -> dict:
    try:
        normalized = normalize_family(family)
        unit = get_unit_name(scale, normalized)
        system = get_unit_system(scale, normalized)
    except UnitScaleError as exc:
        raise _unprocessable(exc) from exc
    return {"family": normalized, "scale": scale, "unit": unit, "system": system}


@router.post("/api/v1/unit-prices", response_model=UnitPriceResponse)
def unit_price(payload: UnitPriceRequest) -> UnitPriceResponse:
    variant = Variant(
        unit_value=payload.unit_value,
        variant_unit=payload.variant_unit,
        variant_unit_scale=payload.variant_unit_scale,
        variant_unit_name=payload.variant_unit_name,
    )
    prices = UnitPrices(variant)
    return UnitPriceResponse(
        unit=prices.unit_price_unit(),
        denominator=prices.unit_price_denominator(),
        unit_price=prices.unit_price(payload.price),
    )
