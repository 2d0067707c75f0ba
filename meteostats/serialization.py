"""JSON tree form of the loaded datasets.

Quantities become bare numbers, absent slots become ``null`` and coordinates
keep their canonical fixed-width text, so the output can be fed back through
the codecs.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .coordinates import CardinalPoint, Latitude, Longitude
from .entities import NormalizedDataset, YearlyData
from .ingest.schemas import Station
from .records import AggregateRecord, PerYear, StationRecord
from .units import Quantity
from .values import ValueWithDate

logger = logging.getLogger(__name__)

SCHEMA_FILE = "schema.json"


def to_tree(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Quantity):
        return value.value
    if isinstance(value, ValueWithDate):
        return {"value": to_tree(value.value), "date": value.date}
    if isinstance(value, (CardinalPoint, Latitude, Longitude)):
        return value.encode()
    if isinstance(value, Station):
        return value.to_dict()
    if isinstance(value, PerYear):
        return {slot: to_tree(item) for slot, item in value.items()}
    if isinstance(value, StationRecord):
        return {"station_id": value.station_id, **to_tree(value.values)}
    if isinstance(value, AggregateRecord):
        return {
            "station_id": value.station_id,
            "parameter": value.parameter.value,
            **to_tree(value.values),
        }
    if isinstance(value, NormalizedDataset):
        return {
            "label": value.label,
            "parameter": value.parameter.value,
            "derived": value.derived,
            "records": [to_tree(record) for record in value.records],
        }
    if isinstance(value, YearlyData):
        return _yearly_tree(value)
    if isinstance(value, (list, tuple)):
        return [to_tree(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_tree(item) for key, item in value.items()}
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def _header(data: YearlyData) -> Dict[str, Any]:
    return {
        "year": data.year,
        "label": data.title,
        "is_aggregate": str(data.period) if data.period else None,
        "derived": data.derived,
        "parameter": data.parameter.value if data.parameter else None,
    }


def _yearly_tree(data: YearlyData) -> Dict[str, Any]:
    tree = _header(data)
    tree["stations"] = [to_tree(station) for station in data.stations]
    for metric, records in data.metrics.items():
        tree[metric] = [to_tree(record) for record in records]
    return tree


def schema_index(datasets: Iterable[YearlyData]) -> List[Dict[str, Any]]:
    index = []
    for data in datasets:
        entry = _header(data)
        entry["file"] = f"{data.key}.json"
        entry["metrics"] = sorted(data.metrics)
        entry["stations"] = [station.id for station in data.stations]
        index.append(entry)
    return index


def dumps(value: Any) -> str:
    return json.dumps(to_tree(value), indent=2, ensure_ascii=False)


def write_datasets(datasets: Iterable[YearlyData], out_dir: Path) -> List[Path]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    datasets = list(datasets)
    written = []
    for data in datasets:
        path = out_dir / f"{data.key}.json"
        path.write_text(dumps(data) + "\n", encoding="utf-8")
        logger.info("Wrote %s", path)
        written.append(path)
    schema_path = out_dir / SCHEMA_FILE
    schema_path.write_text(
        json.dumps(schema_index(datasets), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    written.append(schema_path)
    return written


__all__ = ["to_tree", "dumps", "schema_index", "write_datasets", "SCHEMA_FILE"]
