from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar

Q = TypeVar("Q", bound="Quantity")

DAYS_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Quantity:
    """A plain number tagged with the unit it is measured in.

    Every unit is its own subclass. Instances of different units never
    compare equal, even with the same payload, so ``Celsius(3.0)`` can not be
    mistaken for ``Mm(3.0)``.
    """

    value: float

    unit: ClassVar[str] = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls: Type[Q], text: str) -> Q:
        return cls.parse_float(text)

    @classmethod
    def parse_float(cls: Type[Q], text: str) -> Q:
        """Parse any finite number, skipping unit-specific checks.

        Aggregate tables go through here: their averages and quantiles of
        whole-valued units are fractional.
        """

        value = float(text.strip())
        if not math.isfinite(value):
            raise ValueError(f"{cls.__name__} must be finite, got {text!r}")
        return cls(value)

    def __float__(self) -> float:
        return self.value


class Meters(Quantity):
    unit = "m"


class Celsius(Quantity):
    unit = "Celsius"


class Mm(Quantity):
    unit = "mm"


class TenthsOfMm(Quantity):
    unit = "0.1 mm"


class Percentage(Quantity):
    unit = "%"


class TenthsOfHectoPascal(Quantity):
    unit = "0.1 hPa"


class Days(Quantity):
    """Day count.

    The tables print counts as floats ("12.0"), so the payload stays a float.
    ``parse`` rejects values that are not whole numbers; aggregate tables use
    ``parse_float`` since their averages and quantiles are fractional.
    """

    unit = "days"

    @classmethod
    def parse(cls, text: str) -> "Days":
        days = super().parse(text)
        if abs(days.value - round(days.value)) > DAYS_TOLERANCE:
            raise ValueError(f"day count must be integral, got {text!r}")
        return days


class Hours(Quantity):
    unit = "h"


class Kilometers(Quantity):
    unit = "km"


class KilometersPerHour(Quantity):
    unit = "km/h"


__all__ = [
    "Quantity",
    "Meters",
    "Celsius",
    "Mm",
    "TenthsOfMm",
    "Percentage",
    "TenthsOfHectoPascal",
    "Days",
    "Hours",
    "Kilometers",
    "KilometersPerHour",
    "DAYS_TOLERANCE",
]
