"""
Custom exception hierarchy for gematria scoring and scanning.

Each exception type maps to one category of failure so callers (and the CLI)
can report a machine-readable code instead of a stack trace.
"""

from __future__ import annotations


class GematriaError(Exception):
    """Base exception for all scoring and scanning failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidInput(GematriaError):
    """The value cannot be spelled or scored (negative, too large, not an int)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class EmptyRange(GematriaError):
    """The scan range is empty because low > high."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("EMPTY_RANGE", message, details)


class NoQualifyingValue(GematriaError):
    """The scan finished, but no value in range outscored itself."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NO_QUALIFYING_VALUE", message, details)
