"""Static description of the monthly tables shipped with each yearly dataset.

Reference: "Estadísticas meteorofenológicas, formatos" (evmf_formatos.pdf)
and "parámetros" (evmf_parametros.pdf).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, Tuple, Type

from .units import (
    Celsius,
    Days,
    Hours,
    Kilometers,
    KilometersPerHour,
    Mm,
    Percentage,
    Quantity,
    TenthsOfHectoPascal,
    TenthsOfMm,
)
from .values import ValueWithDate

STATION_MASTER = "Maestro_Climatologico_{year}.csv"
MONTHLY_DIR = "mensuales"
AGGREGATE_DIR = "agregados"


class CellFormat(Enum):
    VALUE = "value"
    VALUE_WITH_DATE = "value_with_date"


@dataclass(frozen=True)
class MetricSpec:
    name: str
    file_prefix: str
    unit: Type[Quantity]
    cell_format: CellFormat = CellFormat.VALUE

    @property
    def aggregable(self) -> bool:
        return self.cell_format is CellFormat.VALUE

    def monthly_file(self, year: str) -> str:
        return f"{MONTHLY_DIR}/{self.file_prefix}_{year}.csv"

    def aggregate_file(self, year: str) -> str:
        return f"{AGGREGATE_DIR}/{self.file_prefix}_{year}.csv"

    def cell_parser(self, aggregate: bool = False) -> Callable[[str], Any]:
        if self.cell_format is CellFormat.VALUE_WITH_DATE:
            return partial(ValueWithDate.decode, unit=self.unit)
        if aggregate:
            return self.unit.parse_float
        return self.unit.parse


def _metric(name: str, prefix: str, unit: Type[Quantity]) -> MetricSpec:
    return MetricSpec(name=name, file_prefix=prefix, unit=unit)


def _dated(name: str, prefix: str, unit: Type[Quantity]) -> MetricSpec:
    return MetricSpec(name=name, file_prefix=prefix, unit=unit, cell_format=CellFormat.VALUE_WITH_DATE)


METRICS: Tuple[MetricSpec, ...] = (
    # Temperature
    _metric("average_temperature", "TM_MES", Celsius),
    _metric("average_max_temperature", "TM_MAX", Celsius),
    _metric("average_min_temperature", "TM_MIN", Celsius),
    _dated("absolute_max_temperature", "TA_MAX", Celsius),
    _dated("absolute_min_temperature", "TA_MIN", Celsius),
    _metric("higher_min_temperature", "TS_MIN", Celsius),
    _metric("lower_max_temperature", "TI_MAX", Celsius),
    _metric("number_of_days_gteq_30_celsius", "NT_30", Days),
    _metric("number_of_days_lteq_0_celsius", "NT_00", Days),
    # Rain
    _metric("total_rain", "P_MES", Mm),
    _dated("max_daily_rain", "P_MAX", Mm),
    _metric("days_with_appreciable_rain", "NP_001", Days),
    _metric("days_with_rain_gteq_1_mm", "NP_010", Days),
    _metric("days_with_rain_gteq_10_mm", "NP_100", Days),
    _metric("days_with_rain_gteq_30_mm", "NP_300", Days),
    # Humidity
    _metric("average_relative_humidity", "HR", Percentage),
    _metric("average_vapor_tension", "E", TenthsOfHectoPascal),
    # Weather days
    _metric("days_of_rain", "N_LLU", Days),
    _metric("days_of_snow", "N_NIE", Days),
    _metric("days_of_hail", "N_GRA", Days),
    _metric("days_of_storm", "N_TOR", Days),
    _metric("days_of_fog", "N_FOG", Days),
    _metric("clear_days", "N_DES", Days),
    _metric("cloudy_days", "N_NUB", Days),
    _metric("covered_days", "N_CUB", Days),
    # Sunshine
    _metric("hours_of_sun", "INSO", Hours),
    _metric("average_percentage_against_theoric_insolation", "P_SOL", Percentage),
    # Evaporation
    _metric("evaporation", "EVAP", TenthsOfMm),
    # Wind
    _metric("average_distance", "W_REC", Kilometers),
    _metric("days_with_wind_greater_than_55_km_per_hour", "NW_55", Days),
    _metric("days_with_wind_greater_than_91_km_per_hour", "NW_91", Days),
    _metric("average_wind_speed", "W_MED", KilometersPerHour),
    # Pressure
    _metric("average_pressure", "Q_MED", TenthsOfHectoPascal),
    _dated("max_pressure", "Q_MAX", TenthsOfHectoPascal),
    _dated("min_pressure", "Q_MIN", TenthsOfHectoPascal),
    _metric("average_pressure_sea_level", "Q_MAR", TenthsOfHectoPascal),
    # Soil temperature
    _metric("average_temperature_under_10_cm", "TS_10", Celsius),
    _metric("average_temperature_under_20_cm", "TS_20", Celsius),
    _metric("average_temperature_under_50_cm", "TS_50", Celsius),
    # Visibility
    _metric("days_with_visibility_lt_50_m", "NV_0050", Days),
    _metric("days_with_visibility_gteq_50_m_lt_100_m", "NV_0100", Days),
    _metric("days_with_visibility_gteq_100_m_lt_1000_m", "NV_1000", Days),
)

METRICS_BY_NAME: Dict[str, MetricSpec] = {metric.name: metric for metric in METRICS}


__all__ = [
    "CellFormat",
    "MetricSpec",
    "METRICS",
    "METRICS_BY_NAME",
    "STATION_MASTER",
    "MONTHLY_DIR",
    "AGGREGATE_DIR",
]
