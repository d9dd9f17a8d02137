# config.py

"""
Runtime settings for the command-line front end, read from PRECISE_CALC_* environment
variables and overridden by explicit command-line flags.
"""

import logging
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PRECISION = "PRECISE_CALC_PRECISION"
ENV_FORMAT = "PRECISE_CALC_FORMAT"
ENV_LOG_LEVEL = "PRECISE_CALC_LOG_LEVEL"

OUTPUT_FORMATS = ("auto", "fraction", "decimal")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalculatorSettings(BaseModel):
    """Validated settings for rendering results and logging."""
    precision: int = Field(0, ge=0, description="Fixed-point digits; 0 keeps the exact form")
    output_format: Literal["auto", "fraction", "decimal"] = "auto"
    log_level: str = "WARNING"

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides) -> CalculatorSettings:
    """
    Builds settings from the environment, then applies non-None overrides.
    Raises pydantic.ValidationError on invalid values.
    """
    env = os.environ if environ is None else environ
    values = {}
    if env.get(ENV_PRECISION):
        values['precision'] = env[ENV_PRECISION]
    if env.get(ENV_FORMAT):
        values['output_format'] = env[ENV_FORMAT].strip().lower()
    if env.get(ENV_LOG_LEVEL):
        values['log_level'] = env[ENV_LOG_LEVEL]

    values.update({k: v for k, v in overrides.items() if v is not None})
    return CalculatorSettings(**values)
