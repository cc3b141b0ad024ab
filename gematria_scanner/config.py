"""
Runtime settings, read from the environment (and an optional .env file).

    GEMATRIA_LOW        first integer to scan        (default 77)
    GEMATRIA_HIGH       last integer to scan         (default 777)
    GEMATRIA_WORKERS    parallel worker processes    (default 1)
    GEMATRIA_LOG_LEVEL  logging level name           (default WARNING)

Command-line flags override whatever is loaded here.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .bounds import DEFAULT_HIGH, DEFAULT_LOW
from .exceptions import InvalidInput

ENV_PREFIX = "GEMATRIA_"


class ScanSettings(BaseModel):
    """Validated scan settings."""

    low: int = Field(default=DEFAULT_LOW, ge=0)
    high: int = Field(default=DEFAULT_HIGH, ge=0)
    workers: int = Field(default=1, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(environ: dict[str, str] | None = None, dotenv: bool = True) -> ScanSettings:
    """Build ScanSettings from GEMATRIA_* variables.

    Args:
        environ: Mapping to read instead of os.environ (used by tests).
        dotenv: Load a .env file into os.environ first.

    Raises:
        InvalidInput: If any variable is present but invalid.
    """
    if dotenv:
        load_dotenv()
    source = os.environ if environ is None else environ

    raw: dict[str, str] = {}
    for name in ScanSettings.model_fields:
        value = source.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None and value.strip():
            raw[name] = value.strip()

    try:
        return ScanSettings(**raw)
    except ValidationError as e:
        raise InvalidInput(
            f"Invalid {ENV_PREFIX}* settings: {e.error_count()} error(s)",
            {"errors": [err["msg"] for err in e.errors()], "raw": raw},
        ) from e
