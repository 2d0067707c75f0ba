from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..entities import AggregatePeriod, NormalizedDataset, YearlyData, normalized_label
from ..records import AggregateRecord, StationRecord, StatisticalParameter

# Parameters measured in the unit of the table itself. Sample counts,
# standard deviations and coefficients of variation are left out.
SHAPE_PARAMETERS = (
    StatisticalParameter.MIN,
    StatisticalParameter.Q1,
    StatisticalParameter.Q2,
    StatisticalParameter.Q3,
    StatisticalParameter.Q4,
    StatisticalParameter.MAX,
    StatisticalParameter.MEDIAN,
    StatisticalParameter.AVERAGE,
)


def take_parameter(
    batch: List[AggregateRecord[Any]], parameter: StatisticalParameter
) -> List[StationRecord[Any]]:
    """Remove every record tagged ``parameter`` from ``batch`` and return them as station records."""

    taken: List[StationRecord[Any]] = []
    remaining: List[AggregateRecord[Any]] = []
    for record in batch:
        if record.parameter is parameter:
            station_record, _ = record.split()
            taken.append(station_record)
        else:
            remaining.append(record)
    batch[:] = remaining
    return taken


class AggregateNormalizer:
    """Splits aggregate tables into one station-shaped dataset per parameter.

    Records are moved out of the batch handed in: once a parameter has been
    processed its records are no longer in the source list, so none can end
    up in two datasets.
    """

    def __init__(
        self,
        parameters: Sequence[StatisticalParameter] = SHAPE_PARAMETERS,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        # dict.fromkeys keeps the declared order and drops repeats.
        self.parameters = tuple(dict.fromkeys(parameters))
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def normalize(
        self,
        batch: List[AggregateRecord[Any]],
        period: AggregatePeriod,
        origin_year: str,
    ) -> List[NormalizedDataset]:
        datasets = []
        for parameter in self.parameters:
            records = take_parameter(batch, parameter)
            datasets.append(
                NormalizedDataset(
                    label=normalized_label(period, parameter, origin_year),
                    parameter=parameter,
                    records=records,
                )
            )
        if batch:
            self._log.debug("%d aggregate records left for unrequested parameters", len(batch))
        return datasets

    def normalize_yearly(self, data: YearlyData) -> List[YearlyData]:
        if not data.is_aggregate:
            return [data]
        assert data.period is not None
        per_parameter: Dict[StatisticalParameter, Dict[str, List[StationRecord[Any]]]] = {
            parameter: {} for parameter in self.parameters
        }
        for metric, batch in data.metrics.items():
            for dataset in self.normalize(batch, data.period, data.year):
                per_parameter[dataset.parameter][metric] = dataset.records
        self._log.info(
            "Normalized %s aggregates of %s into %d datasets",
            data.period,
            data.year,
            len(per_parameter),
        )
        return [
            YearlyData(
                year=data.year,
                stations=data.stations,
                metrics=metrics,
                period=data.period,
                derived=True,
                parameter=parameter,
                label=normalized_label(data.period, parameter, data.year),
            )
            for parameter, metrics in per_parameter.items()
        ]


__all__ = ["AggregateNormalizer", "SHAPE_PARAMETERS", "take_parameter"]
