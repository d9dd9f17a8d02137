# test_config.py

import logging

import pytest
from pydantic import ValidationError

from precise_calc.config import (
    ENV_FORMAT,
    ENV_LOG_LEVEL,
    ENV_PRECISION,
    CalculatorSettings,
    load_settings,
)


def test_default_settings():
    settings = load_settings(environ={})
    assert settings == CalculatorSettings()
    assert settings.precision == 0
    assert settings.output_format == "auto"
    assert settings.log_level == "WARNING"
    assert settings.numeric_log_level == logging.WARNING

def test_settings_from_environment():
    env = {ENV_PRECISION: "4", ENV_FORMAT: "Fraction", ENV_LOG_LEVEL: "debug"}
    settings = load_settings(environ=env)
    assert settings.precision == 4
    assert settings.output_format == "fraction"
    assert settings.log_level == "DEBUG"

def test_overrides_take_precedence():
    env = {ENV_PRECISION: "4", ENV_FORMAT: "decimal"}
    settings = load_settings(environ=env, precision=2, output_format=None)
    assert settings.precision == 2
    assert settings.output_format == "decimal"

def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "info")
    monkeypatch.delenv(ENV_PRECISION, raising=False)
    monkeypatch.delenv(ENV_FORMAT, raising=False)
    assert load_settings().log_level == "INFO"

@pytest.mark.parametrize("kwargs", [
    {"precision": -1},
    {"output_format": "hex"},
    {"log_level": "verbose"},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        load_settings(environ={}, **kwargs)

def test_invalid_precision_in_environment():
    with pytest.raises(ValidationError):
        load_settings(environ={ENV_PRECISION: "many"})
