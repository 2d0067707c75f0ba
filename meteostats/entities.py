from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import FormatError
from .ingest.schemas import Station
from .records import StationRecord, StatisticalParameter

_PERIOD_RE = re.compile(r"^\s*(\d{4})\s*-\s*(\d{4})\s*$")


@dataclass(frozen=True)
class AggregatePeriod:
    """Reference period covered by an aggregate table, e.g. 1981-2010."""

    from_year: int
    to_year: int

    @classmethod
    def parse(cls, text: str) -> "AggregatePeriod":
        match = _PERIOD_RE.match(text)
        if not match:
            raise FormatError(f"Invalid reference period: {text!r}")
        from_year, to_year = int(match.group(1)), int(match.group(2))
        if from_year > to_year:
            raise FormatError(f"Reference period is reversed: {text!r}")
        return cls(from_year, to_year)

    def __str__(self) -> str:
        return f"{self.from_year}-{self.to_year}"


def normalized_label(
    period: AggregatePeriod, parameter: StatisticalParameter, origin_year: str
) -> str:
    return f"{period.from_year} - {period.to_year} {parameter.human_name} ({origin_year} dataset)"


@dataclass
class NormalizedDataset:
    """Station records of one statistical parameter pulled out of an aggregate table."""

    label: str
    parameter: StatisticalParameter
    records: List[StationRecord[Any]]
    derived: bool = True


@dataclass
class YearlyData:
    """Everything published for one dataset year.

    A plain year holds :class:`StationRecord` lists. An aggregate dataset
    (``period`` set, ``derived`` false) holds
    :class:`~meteostats.records.AggregateRecord` lists over the reference
    period; normalizing it yields one derived dataset per parameter.
    """

    year: str
    stations: List[Station]
    metrics: Dict[str, List[Any]] = field(default_factory=dict)
    period: Optional[AggregatePeriod] = None
    derived: bool = False
    parameter: Optional[StatisticalParameter] = None
    label: Optional[str] = None

    @property
    def is_aggregate(self) -> bool:
        return self.period is not None and not self.derived

    @property
    def key(self) -> str:
        if self.period is None:
            return self.year
        if self.parameter is None:
            return f"{self.year}_{self.period}"
        return f"{self.year}_{self.period}_{self.parameter.value}"

    @property
    def title(self) -> str:
        return self.label or self.key


__all__ = ["AggregatePeriod", "NormalizedDataset", "YearlyData", "normalized_label"]
