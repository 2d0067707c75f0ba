"""Command line entry point: export every dataset year as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError, RecordDecodeError
from .ingest.loader import ErrorPolicy
from .ingest.report import IngestReport
from .serialization import write_datasets
from .services.pipeline import AggregateDataProcessing, process_all
from .settings import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meteostats-export",
        description="Convert the climatological tables into JSON datasets",
    )
    parser.add_argument("out_dir", type=Path, help="Directory the JSON files are written to")
    parser.add_argument("--data-dir", type=Path, help="Dataset root (defaults to METEOSTATS_DATA_DIR)")
    parser.add_argument(
        "--keep-aggregates",
        action="store_true",
        help="Emit aggregate tables as-is instead of one dataset per parameter",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip rows that fail to decode instead of aborting",
    )
    parser.add_argument("--log-level", help="Logging level (defaults to METEOSTATS_LOG_LEVEL)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        print(f"meteostats-export: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    policy = ErrorPolicy.SKIP if args.skip_invalid else settings.error_policy
    processing = AggregateDataProcessing.KEEP if args.keep_aggregates else AggregateDataProcessing.NORMALIZE
    report = IngestReport()
    try:
        datasets = process_all(
            args.data_dir or settings.data_dir,
            processing=processing,
            policy=policy,
            period=settings.reference_period,
            encoding=settings.encoding,
            report=report,
        )
    except (RecordDecodeError, ConfigurationError, FileNotFoundError) as exc:
        logger.error("Export failed: %s", exc)
        return 1

    write_datasets(datasets, args.out_dir)
    if not report.clean:
        print(json.dumps(report.snapshot(), indent=2), file=sys.stderr)
    logger.info("Exported %d datasets to %s", len(datasets), args.out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
