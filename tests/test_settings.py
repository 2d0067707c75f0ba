from __future__ import annotations

from pathlib import Path

import pytest

from meteostats.entities import AggregatePeriod
from meteostats.errors import ConfigurationError, FormatError
from meteostats.ingest.loader import ErrorPolicy
from meteostats.settings import Settings, env


def test_defaults_without_environment():
    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.data_dir == Path("data")
    assert settings.error_policy is ErrorPolicy.RAISE
    assert settings.reference_period == AggregatePeriod(1981, 2010)


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("METEOSTATS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("METEOSTATS_ERROR_POLICY", "SKIP")
    monkeypatch.setenv("METEOSTATS_REFERENCE_PERIOD", "1971 - 2000")
    monkeypatch.setenv("METEOSTATS_ENCODING", "latin-1")
    monkeypatch.setenv("METEOSTATS_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.data_dir == tmp_path
    assert settings.error_policy is ErrorPolicy.SKIP
    assert settings.reference_period == AggregatePeriod(1971, 2000)
    assert settings.encoding == "latin-1"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("METEOSTATS_ERROR_POLICY", "ignore"),
        ("METEOSTATS_REFERENCE_PERIOD", "2010-1981"),
        ("METEOSTATS_REFERENCE_PERIOD", "recent"),
        ("METEOSTATS_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_raise_configuration_error(name, value):
    with pytest.raises(ConfigurationError):
        Settings.from_env({name: value})


def test_env_requires_value_without_default():
    with pytest.raises(ConfigurationError):
        env("METEOSTATS_UNSET", environ={})
    assert env("METEOSTATS_UNSET", "fallback", environ={}) == "fallback"


def test_period_parse():
    assert str(AggregatePeriod.parse("1981-2010")) == "1981-2010"
    with pytest.raises(FormatError):
        AggregatePeriod.parse("1981")
