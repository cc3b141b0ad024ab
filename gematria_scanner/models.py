"""
Pydantic models for scores and scan results.

Result objects are frozen: a score is a pure function of its integer, so once
computed nothing downstream may change it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ─── Result Pair ────────────────────────────────────────────────────


class ScoredValue(BaseModel):
    """An integer together with its word form and gematria score."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0)
    words: str
    score: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exceeds_value(self) -> bool:
        """True when the spelled-out name outscores the number."""
        return self.score > self.value


# ─── Scan Result ────────────────────────────────────────────────────


class ScanResult(BaseModel):
    """The outcome of scanning a closed integer range."""

    model_config = ConfigDict(frozen=True)

    low: int
    high: int
    evaluated: int
    qualifying: list[ScoredValue] = Field(default_factory=list)  # Ascending by value
    maximum: Optional[ScoredValue] = None
    workers: int = 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return self.maximum is not None


# ─── Bound Estimation ───────────────────────────────────────────────


class BoundSample(BaseModel):
    """One sampled value used to argue the search range is finite."""

    model_config = ConfigDict(frozen=True)

    value: int
    score: int
    ratio: float  # score / value; below 1.0 means the value has outgrown its name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exceeds_value(self) -> bool:
        return self.score > self.value


class BoundEstimate(BaseModel):
    """The scan range derived from repdigit growth sampling."""

    model_config = ConfigDict(frozen=True)

    digit: int  # Digit whose words score highest per position
    low: int  # Largest sampled repdigit that still outscores itself
    high: int  # First sampled repdigit that no longer does
    samples: list[BoundSample] = Field(default_factory=list)
