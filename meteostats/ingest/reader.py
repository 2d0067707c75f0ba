"""Reads the ``;``-separated tables into rows of raw text cells."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

logger = logging.getLogger(__name__)

SEPARATOR = ";"

Row = Dict[str, str]


def read_table(path: Path, encoding: str = "utf-8") -> List[Row]:
    # Every cell stays text; the codecs decide what is missing or malformed.
    frame = pd.read_csv(
        path,
        sep=SEPARATOR,
        encoding=encoding,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
    )
    frame.columns = [str(column).strip() for column in frame.columns]
    frame = frame.loc[:, [column for column in frame.columns if column and not column.startswith("Unnamed:")]]
    # Short rows still come back as NaN.
    frame = frame.fillna("")
    rows: List[Row] = frame.to_dict(orient="records")
    logger.debug("Read %d rows from %s", len(rows), path)
    return rows


__all__ = ["read_table", "Row", "SEPARATOR"]
