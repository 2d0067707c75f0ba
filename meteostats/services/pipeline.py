"""Loads every dataset year under a directory and returns the results.

Nothing is written from here; serializing the returned datasets is up to
the caller (see :mod:`meteostats.serialization`).
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..entities import AggregatePeriod, YearlyData
from ..ingest.loader import ErrorPolicy, RecordLoader
from ..ingest.report import IngestReport
from ..settings import DEFAULT_REFERENCE_PERIOD, Settings
from .normalizer import AggregateNormalizer

logger = logging.getLogger(__name__)

YEAR_DIR_RE = re.compile(r"^\d{4}$")


class AggregateDataProcessing(Enum):
    KEEP = "keep"
    NORMALIZE = "normalize"


def discover_years(root: Path) -> List[str]:
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Data directory not found: {root}")
    return sorted(path.name for path in root.iterdir() if path.is_dir() and YEAR_DIR_RE.match(path.name))


def process_all(
    root: Path,
    *,
    processing: AggregateDataProcessing = AggregateDataProcessing.NORMALIZE,
    policy: ErrorPolicy = ErrorPolicy.RAISE,
    period: Optional[AggregatePeriod] = None,
    encoding: str = "utf-8",
    report: Optional[IngestReport] = None,
    normalizer: Optional[AggregateNormalizer] = None,
) -> List[YearlyData]:
    loader = RecordLoader(policy=policy, report=report, encoding=encoding)
    normalizer = normalizer or AggregateNormalizer()
    results: List[YearlyData] = []
    default_period = AggregatePeriod.parse(DEFAULT_REFERENCE_PERIOD)
    years = discover_years(root)
    logger.info("Processing %d dataset years under %s", len(years), root)
    for year in years:
        for data in loader.load_year(Path(root) / year, year, period=period or default_period):
            if data.is_aggregate and processing is AggregateDataProcessing.NORMALIZE:
                results.extend(normalizer.normalize_yearly(data))
            else:
                results.append(data)
    if not loader.report.clean:
        logger.warning("Skipped %d invalid records", loader.report.skipped)
    return results


def process_from_settings(
    settings: Settings,
    *,
    processing: AggregateDataProcessing = AggregateDataProcessing.NORMALIZE,
    report: Optional[IngestReport] = None,
) -> List[YearlyData]:
    return process_all(
        settings.data_dir,
        processing=processing,
        policy=settings.error_policy,
        period=settings.reference_period,
        encoding=settings.encoding,
        report=report,
    )


__all__ = ["AggregateDataProcessing", "discover_years", "process_all", "process_from_settings"]
