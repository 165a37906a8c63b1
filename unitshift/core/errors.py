"""Validation errors raised by the unit scale resolver."""


class UnitScaleError(ValueError):
    pass


class InvalidFamilyError(UnitScaleError):
    def __init__(self, family: object) -> None:
        self.family = family
        super().__init__(f"unit family must be one of: weight, volume (got {family!r})")


class UnknownScaleError(UnitScaleError):
    def __init__(self, scale: object, family: str) -> None:
        self.scale = scale
        self.family = family
        super().__init__(f"scale {scale!r} is not a known {family} scale")


class InvalidOptionKeyError(UnitScaleError):
    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"variant unit option key must look like '<family>_<scale>' or 'items' (got {key!r})")


__all__ = [
    "InvalidFamilyError",
    "InvalidOptionKeyError",
    "UnitScaleError",
    "UnknownScaleError",
]
