"""Runtime configuration read from ``METEOSTATS_*`` environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .entities import AggregatePeriod
from .errors import ConfigurationError, FormatError
from .ingest.loader import ErrorPolicy

DEFAULT_REFERENCE_PERIOD = "1981-2010"


def env(name: str, default: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    source = os.environ if environ is None else environ
    value = source.get(name, default)
    if value is None:
        raise ConfigurationError(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    data_dir: Path = Path("data")
    encoding: str = "utf-8"
    error_policy: ErrorPolicy = ErrorPolicy.RAISE
    reference_period: AggregatePeriod = AggregatePeriod.parse(DEFAULT_REFERENCE_PERIOD)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        policy = env("METEOSTATS_ERROR_POLICY", ErrorPolicy.RAISE.value, environ).lower()
        try:
            error_policy = ErrorPolicy(policy)
        except ValueError as exc:
            raise ConfigurationError(f"METEOSTATS_ERROR_POLICY must be raise or skip, got {policy!r}") from exc

        period = env("METEOSTATS_REFERENCE_PERIOD", DEFAULT_REFERENCE_PERIOD, environ)
        try:
            reference_period = AggregatePeriod.parse(period)
        except FormatError as exc:
            raise ConfigurationError(str(exc)) from exc

        log_level = env("METEOSTATS_LOG_LEVEL", "INFO", environ).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown log level {log_level!r}")

        return cls(
            data_dir=Path(env("METEOSTATS_DATA_DIR", "data", environ)),
            encoding=env("METEOSTATS_ENCODING", "utf-8", environ),
            error_policy=error_policy,
            reference_period=reference_period,
            log_level=log_level,
        )


__all__ = ["Settings", "env", "DEFAULT_REFERENCE_PERIOD"]
