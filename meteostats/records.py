"""Per-station monthly records.

Every statistical table in the dataset shares the same shape: one row per
station with a column per month plus a yearly summary. Plain tables ("F1")
hold the measured value; aggregate tables ("F4") hold one row per station and
statistical parameter over a reference period.
"""
from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, Dict, Generic, Iterator, Mapping, Optional, Tuple, TypeVar

from .errors import FormatError, InvalidParameter

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATION_COLUMN = "Indicativo"
PARAMETER_COLUMNS = ("Parametro", "Parámetro")

MONTH_COLUMNS: Dict[str, str] = {
    "january": "enero",
    "february": "febrero",
    "march": "marzo",
    "april": "abril",
    "may": "mayo",
    "june": "junio",
    "july": "julio",
    "august": "agosto",
    "september": "septiembre",
    "october": "octubre",
    "november": "noviembre",
    "december": "diciembre",
    "yearly": "anual",
}

# Cells that mean "no data" rather than a malformed number.
EMPTY_MARKERS = frozenset({"", "-", "--", "n/d", "s/d"})


def is_empty_cell(cell: Optional[str]) -> bool:
    return cell is None or cell.strip().lower() in EMPTY_MARKERS


def parse_slot(cell: Optional[str], parse: Callable[[str], T]) -> Optional[T]:
    """Parse one month cell, turning blanks and junk into ``None``."""

    if is_empty_cell(cell):
        return None
    try:
        return parse(cell.strip())  # type: ignore[union-attr]
    except ValueError:
        logger.debug("Treating unparseable cell %r as missing", cell)
        return None


def _fold(token: str) -> str:
    decomposed = unicodedata.normalize("NFKD", token.strip())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


class StatisticalParameter(Enum):
    SAMPLE_COUNT = "sample_count"
    MIN = "min"
    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    Q4 = "q4"
    MAX = "max"
    MEDIAN = "median"
    AVERAGE = "average"
    STD_DEV = "std_dev"
    CV = "cv"

    @property
    def human_name(self) -> str:
        return _HUMAN_NAMES[self]

    @classmethod
    def parse(cls, token: str) -> "StatisticalParameter":
        try:
            return _TOKENS[_fold(token)]
        except KeyError:
            raise InvalidParameter(f"Unknown statistical parameter: {token!r}") from None


_HUMAN_NAMES = {
    StatisticalParameter.SAMPLE_COUNT: "Sample count",
    StatisticalParameter.MIN: "Minimum",
    StatisticalParameter.Q1: "Q1",
    StatisticalParameter.Q2: "Q2",
    StatisticalParameter.Q3: "Q3",
    StatisticalParameter.Q4: "Q4",
    StatisticalParameter.MAX: "Maximum",
    StatisticalParameter.MEDIAN: "Median",
    StatisticalParameter.AVERAGE: "Average",
    StatisticalParameter.STD_DEV: "Standard deviation",
    StatisticalParameter.CV: "Coefficient of variation",
}

_ALIASES = {
    StatisticalParameter.SAMPLE_COUNT: ("N", "Número de datos", "Sample count"),
    StatisticalParameter.MIN: ("Mínimo", "Min", "Minimum"),
    StatisticalParameter.Q1: ("Q1",),
    StatisticalParameter.Q2: ("Q2",),
    StatisticalParameter.Q3: ("Q3",),
    StatisticalParameter.Q4: ("Q4",),
    StatisticalParameter.MAX: ("Máximo", "Max", "Maximum"),
    StatisticalParameter.MEDIAN: ("Mediana", "Median"),
    StatisticalParameter.AVERAGE: ("Media", "Average", "Mean"),
    StatisticalParameter.STD_DEV: ("Desviación típica", "DT", "Std dev", "Standard deviation"),
    StatisticalParameter.CV: ("Coeficiente de variación", "CV", "Coefficient of variation"),
}

_TOKENS = {
    _fold(token): parameter
    for parameter, tokens in _ALIASES.items()
    for token in (parameter.value,) + tokens
}


@dataclass
class PerYear(Generic[T]):
    january: Optional[T] = None
    february: Optional[T] = None
    march: Optional[T] = None
    april: Optional[T] = None
    may: Optional[T] = None
    june: Optional[T] = None
    july: Optional[T] = None
    august: Optional[T] = None
    september: Optional[T] = None
    october: Optional[T] = None
    november: Optional[T] = None
    december: Optional[T] = None
    yearly: Optional[T] = None

    @classmethod
    def from_row(cls, row: Mapping[str, str], parse: Callable[[str], T]) -> "PerYear[T]":
        return cls(
            **{
                slot: parse_slot(row.get(column), parse)
                for slot, column in MONTH_COLUMNS.items()
            }
        )

    def items(self) -> Iterator[Tuple[str, Optional[T]]]:
        for slot in fields(self):
            yield slot.name, getattr(self, slot.name)


def _station_id(row: Mapping[str, str]) -> str:
    station_id = (row.get(STATION_COLUMN) or "").strip()
    if not station_id:
        raise FormatError(f"Missing {STATION_COLUMN} column value", field=STATION_COLUMN)
    return station_id


@dataclass
class StationRecord(Generic[T]):
    """Format F1: the monthly values of one station."""

    station_id: str
    values: PerYear[T]

    @classmethod
    def from_row(cls, row: Mapping[str, str], parse: Callable[[str], T]) -> "StationRecord[T]":
        return cls(station_id=_station_id(row), values=PerYear.from_row(row, parse))


@dataclass
class AggregateRecord(Generic[T]):
    """Format F4: one statistical parameter of one station over a period."""

    station_id: str
    parameter: StatisticalParameter
    values: PerYear[T]

    @classmethod
    def from_row(cls, row: Mapping[str, str], parse: Callable[[str], T]) -> "AggregateRecord[T]":
        station_id = _station_id(row)
        token = next((row[c] for c in PARAMETER_COLUMNS if c in row), None)
        if token is None:
            raise InvalidParameter(f"Missing {PARAMETER_COLUMNS[0]} column", field=PARAMETER_COLUMNS[0])
        try:
            parameter = StatisticalParameter.parse(token)
        except InvalidParameter as exc:
            exc.field = PARAMETER_COLUMNS[0]
            raise
        return cls(
            station_id=station_id,
            parameter=parameter,
            values=PerYear.from_row(row, parse),
        )

    def split(self) -> Tuple[StationRecord[T], StatisticalParameter]:
        return StationRecord(station_id=self.station_id, values=self.values), self.parameter


__all__ = [
    "PerYear",
    "StationRecord",
    "AggregateRecord",
    "StatisticalParameter",
    "MONTH_COLUMNS",
    "EMPTY_MARKERS",
    "STATION_COLUMN",
    "PARAMETER_COLUMNS",
    "is_empty_cell",
    "parse_slot",
]
