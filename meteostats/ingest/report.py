"""Bookkeeping of what an ingest run loaded and what it had to skip.

The report is filled by :class:`~meteostats.ingest.loader.RecordLoader` when
it runs with the ``skip`` policy, so a caller can tell a clean load from one
that silently dropped stations.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ..errors import RecordDecodeError


@dataclass(frozen=True)
class SourceStats:
    """Counters for a single table."""

    loaded: int = 0
    skipped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"loaded": self.loaded, "skipped": self.skipped}


class IngestReport:
    """Stores per-source counters and the errors behind each skip."""

    def __init__(self) -> None:
        self._sources: Dict[str, SourceStats] = {}
        self._missing: List[str] = []
        self.errors: List[RecordDecodeError] = []

    # -- Records ------------------------------------------------------------
    def record_loaded(self, source: str, count: int = 1) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        stats = self._sources.get(source, SourceStats())
        self._sources[source] = SourceStats(stats.loaded + count, stats.skipped)

    def record_skipped(self, error: RecordDecodeError) -> None:
        source = error.source or "<unknown>"
        stats = self._sources.get(source, SourceStats())
        self._sources[source] = SourceStats(stats.loaded, stats.skipped + 1)
        self.errors.append(error)

    # -- Tables ---------------------------------------------------------------
    def record_missing_table(self, source: str) -> None:
        self._missing.append(source)

    # -- Snapshot -------------------------------------------------------------
    @property
    def skipped(self) -> int:
        return sum(stats.skipped for stats in self._sources.values())

    @property
    def clean(self) -> bool:
        return not self.errors

    def snapshot(self) -> Dict[str, object]:
        return {
            "sources": {name: stats.as_dict() for name, stats in self._sources.items()},
            "missing_tables": list(self._missing),
            "skipped": self.skipped,
        }


__all__ = ["IngestReport", "SourceStats"]
