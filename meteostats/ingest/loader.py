"""Turns raw table rows into typed stations and records.

Decode failures are reported as :class:`~meteostats.errors.RecordDecodeError`
with the file, row, field and station they came from. With
``ErrorPolicy.RAISE`` the first failure aborts the load; with
``ErrorPolicy.SKIP`` the failing row is logged, counted in the
:class:`~meteostats.ingest.report.IngestReport` and left out.
"""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Set, Tuple, TypeVar

from pydantic import ValidationError

from ..catalog import METRICS, STATION_MASTER, AGGREGATE_DIR, MetricSpec
from ..entities import AggregatePeriod, YearlyData
from ..errors import ConfigurationError, DuplicateAggregate, FormatError, RecordDecodeError
from ..records import (
    PARAMETER_COLUMNS,
    STATION_COLUMN,
    AggregateRecord,
    StationRecord,
    StatisticalParameter,
)
from .reader import read_table
from .report import IngestReport
from .schemas import Station

R = TypeVar("R")

# Header line is line 1 of the file.
FIRST_DATA_LINE = 2


class ErrorPolicy(Enum):
    RAISE = "raise"
    SKIP = "skip"


def _station_hint(row: Mapping[str, str]) -> Optional[str]:
    for column in (STATION_COLUMN, "INDICATIVO"):
        value = (row.get(column) or "").strip()
        if value:
            return value
    return None


def _unwrap_validation_error(exc: ValidationError) -> Tuple[Exception, Optional[str]]:
    """Pull the codec error (and the column it came from) out of pydantic's wrapper."""

    details = exc.errors()
    if not details:
        return exc, None
    location = details[0].get("loc") or ()
    column = str(location[0]) if location else None
    cause = (details[0].get("ctx") or {}).get("error")
    if isinstance(cause, Exception):
        return cause, column
    return exc, column


class RecordLoader:
    def __init__(
        self,
        *,
        policy: ErrorPolicy = ErrorPolicy.RAISE,
        report: Optional[IngestReport] = None,
        encoding: str = "utf-8",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.policy = policy
        self.report = report or IngestReport()
        self.encoding = encoding
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Tables -------------------------------------------------------------
    def load_stations(self, path: Path) -> List[Station]:
        return self._decode_rows(path, self._decode_station)

    def load_station_records(self, path: Path, metric: MetricSpec) -> List[StationRecord[Any]]:
        parse = metric.cell_parser()
        return self._decode_rows(path, lambda row: StationRecord.from_row(row, parse))

    def load_aggregate_records(self, path: Path, metric: MetricSpec) -> List[AggregateRecord[Any]]:
        parse = metric.cell_parser(aggregate=True)
        seen: Set[Tuple[str, StatisticalParameter]] = set()

        def decode(row: Mapping[str, str]) -> AggregateRecord[Any]:
            record = AggregateRecord.from_row(row, parse)
            key = (record.station_id, record.parameter)
            if key in seen:
                raise DuplicateAggregate(
                    f"Parameter {record.parameter.value} repeated for station {record.station_id}",
                    field=PARAMETER_COLUMNS[0],
                )
            seen.add(key)
            return record

        return self._decode_rows(path, decode)

    # Datasets -----------------------------------------------------------
    def load_year(
        self,
        directory: Path,
        year: str,
        period: Optional[AggregatePeriod] = None,
    ) -> List[YearlyData]:
        """Load one year directory.

        Returns the plain dataset first, followed by the aggregate dataset
        when the directory ships aggregate tables.
        """

        directory = Path(directory)
        stations = self.load_stations(directory / STATION_MASTER.format(year=year))
        result = [
            YearlyData(
                year=year,
                stations=stations,
                metrics=self._load_metrics(directory, year, METRICS, aggregate=False),
            )
        ]
        if (directory / AGGREGATE_DIR).is_dir():
            if period is None:
                raise ConfigurationError(f"No reference period configured for aggregates of {year}")
            aggregable = [metric for metric in METRICS if metric.aggregable]
            result.append(
                YearlyData(
                    year=year,
                    stations=stations,
                    metrics=self._load_metrics(directory, year, aggregable, aggregate=True),
                    period=period,
                )
            )
        return result

    # Helpers ------------------------------------------------------------
    def _load_metrics(self, directory: Path, year: str, metrics, *, aggregate: bool):
        loaded = {}
        for metric in metrics:
            relative = metric.aggregate_file(year) if aggregate else metric.monthly_file(year)
            path = directory / relative
            if not path.exists():
                self._log.warning("Missing table %s, skipping %s", path, metric.name)
                self.report.record_missing_table(str(path))
                continue
            if aggregate:
                loaded[metric.name] = self.load_aggregate_records(path, metric)
            else:
                loaded[metric.name] = self.load_station_records(path, metric)
        return loaded

    def _decode_station(self, row: Mapping[str, str]) -> Station:
        try:
            return Station.model_validate(row)
        except ValidationError as exc:
            cause, column = _unwrap_validation_error(exc)
            if isinstance(cause, FormatError):
                cause.field = cause.field or column
                raise cause from exc
            raise FormatError(str(exc), field=column) from exc

    def _decode_rows(self, path: Path, decode: Callable[[Mapping[str, str]], R]) -> List[R]:
        source = str(path)
        rows = read_table(path, encoding=self.encoding)
        decoded: List[R] = []
        for line, row in enumerate(rows, start=FIRST_DATA_LINE):
            try:
                decoded.append(decode(row))
            except FormatError as exc:
                error = RecordDecodeError(
                    exc,
                    source=source,
                    row=line,
                    field=exc.field,
                    station_id=_station_hint(row),
                )
                self._fail(error)
        self.report.record_loaded(source, len(decoded))
        self._log.info("Loaded %d records from %s", len(decoded), source)
        return decoded

    def _fail(self, error: RecordDecodeError) -> None:
        if self.policy is ErrorPolicy.RAISE:
            raise error from error.reason
        self._log.warning("Skipping record: %s", error)
        self.report.record_skipped(error)


__all__ = ["RecordLoader", "ErrorPolicy"]
