from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest


MONTH_HEADERS = [
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
    "anual",
]

STATION_HEADER = ["INDICATIVO", "NOMBRE", "PROVINCIA", "MUNICIPIO", "ALTITUD", "LONGITUD", "LATITUD", "DATUM"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "METEOSTATS_DATA_DIR",
        "METEOSTATS_ENCODING",
        "METEOSTATS_ERROR_POLICY",
        "METEOSTATS_REFERENCE_PERIOD",
        "METEOSTATS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def write_table(tmp_path) -> Callable[..., Path]:
    def _write(relative: str, header: Sequence[str], rows: Sequence[Sequence[str]]) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [";".join(header)] + [";".join(row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def dataset_root(tmp_path, write_table) -> Path:
    """A single 2018 dataset with two stations and a few tables."""

    write_table(
        "data/2018/Maestro_Climatologico_2018.csv",
        STATION_HEADER,
        [
            ["3195", "MADRID RETIRO", "MADRID", "MADRID", "667", "0340412", "402443", "ETRS89"],
            ["0076", "BARCELONA AEROPUERTO", "BARCELONA", "EL PRAT DE LLOBREGAT", "4", "0204121", "411734", "ETRS89"],
        ],
    )
    write_table(
        "data/2018/mensuales/TM_MES_2018.csv",
        ["Indicativo"] + MONTH_HEADERS,
        [
            ["3195", "6.2", "5.1", "9.8", "13.0", "17.9", "23.6", "", "27.1", "22.4", "15.3", "9.7", "7.1", "15.1"],
            ["0076", "9.9", "8.4", "11.6", "15.1", "18.2", "22.6", "25.8", "26.3", "23.0", "18.5", "13.3", "11.5", "17.0"],
        ],
    )
    write_table(
        "data/2018/mensuales/TA_MAX_2018.csv",
        ["Indicativo"] + MONTH_HEADERS,
        [
            ["3195"] + ["15.5(20180115)"] * 12 + ["38.6(20180804)"],
        ],
    )
    write_table(
        "data/2018/agregados/TM_MES_2018.csv",
        ["Indicativo", "Parametro"] + MONTH_HEADERS,
        [
            ["3195", "N", *(["30.0"] * 13)],
            ["3195", "Mínimo", *(["3.1"] * 13)],
            ["3195", "Media", *(["6.3"] * 13)],
            ["3195", "Máximo", *(["9.4"] * 13)],
            ["0076", "Mínimo", *(["7.2"] * 13)],
            ["0076", "Media", *(["9.6"] * 13)],
            ["0076", "Máximo", *(["12.0"] * 13)],
        ],
    )
    return tmp_path / "data"
