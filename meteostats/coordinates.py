"""Fixed-width station coordinates.

The station master prints coordinates as degrees, minutes and seconds, two
digits each (``"402400"``). Longitudes carry one extra digit for the
hemisphere: ``1`` for East and ``2`` for West. Latitudes in this dataset are
all northern and carry no hemisphere digit.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidComponent, InvalidDirection, InvalidLength

CARDINAL_POINT_WIDTH = 6
LONGITUDE_WIDTH = CARDINAL_POINT_WIDTH + 1


def _parse_component(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidComponent(f"Invalid component for cardinal point: {text!r}")
    return int(text)


@dataclass(frozen=True)
class CardinalPoint:
    degrees: int
    minutes: int
    seconds: int

    @classmethod
    def decode(cls, text: str) -> "CardinalPoint":
        if len(text) != CARDINAL_POINT_WIDTH:
            raise InvalidLength(f"Invalid length for cardinal point: {text!r}")
        return cls(
            degrees=_parse_component(text[0:2]),
            minutes=_parse_component(text[2:4]),
            seconds=_parse_component(text[4:6]),
        )

    def encode(self) -> str:
        return f"{self.degrees:02d}{self.minutes:02d}{self.seconds:02d}"

    def to_degrees(self) -> float:
        return self.degrees + self.minutes / 60 + self.seconds / 3600

    def __str__(self) -> str:
        return self.encode()


class LongitudeDirection(Enum):
    EAST = "1"
    WEST = "2"


@dataclass(frozen=True)
class Longitude:
    point: CardinalPoint
    direction: LongitudeDirection

    @classmethod
    def decode(cls, text: str) -> "Longitude":
        if len(text) != LONGITUDE_WIDTH:
            raise InvalidLength(f"Invalid length for longitude: {text!r}")
        point = CardinalPoint.decode(text[:CARDINAL_POINT_WIDTH])
        try:
            direction = LongitudeDirection(text[CARDINAL_POINT_WIDTH])
        except ValueError as exc:
            raise InvalidDirection(f"Invalid longitude direction: {text!r}") from exc
        return cls(point=point, direction=direction)

    def encode(self) -> str:
        return self.point.encode() + self.direction.value

    def to_degrees(self) -> float:
        """Signed decimal degrees, negative to the West."""

        magnitude = self.point.to_degrees()
        if self.direction is LongitudeDirection.WEST:
            return -magnitude
        return magnitude

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True)
class Latitude:
    point: CardinalPoint

    @classmethod
    def decode(cls, text: str) -> "Latitude":
        return cls(point=CardinalPoint.decode(text))

    def encode(self) -> str:
        return self.point.encode()

    def to_degrees(self) -> float:
        return self.point.to_degrees()

    def __str__(self) -> str:
        return self.encode()


__all__ = [
    "CardinalPoint",
    "Longitude",
    "LongitudeDirection",
    "Latitude",
    "CARDINAL_POINT_WIDTH",
    "LONGITUDE_WIDTH",
]
