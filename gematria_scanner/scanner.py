"""
Range scanner: evaluate → filter → reduce.

Flow:
  ┌──────────────┐
  │ [low, high]  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Evaluate    │   ← score_value(n) for every n (serial or process pool)
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │   Filter     │   ← keep score > value
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │   Reduce     │   ← max by value (order-independent)
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  ScanResult  │
  └──────────────┘

Design principles:
  - Every evaluation is pure and independent; workers share nothing.
  - Evaluation order never changes the answer; `descending` is cosmetic.
  - An empty survivor set is a result (maximum=None), not a crash.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor

from .bounds import DEFAULT_HIGH, DEFAULT_LOW
from .exceptions import EmptyRange, InvalidInput, NoQualifyingValue
from .models import ScanResult, ScoredValue
from .number_to_words import MAX_SUPPORTED
from .scoring import score_value

logger = logging.getLogger(__name__)


class GematriaScanner:
    """Finds the largest integer in a range whose name outscores it.

    Usage:
        scanner = GematriaScanner()
        result = scanner.scan()            # [77, 777]
        if result.found:
            print(result.maximum.value)    # 279
    """

    def __init__(self, workers: int = 1, descending: bool = False):
        if workers < 1:
            raise InvalidInput(
                f"workers must be at least 1, got {workers}",
                {"workers": workers},
            )
        self.workers = workers
        self.descending = descending

    def scan(self, low: int = DEFAULT_LOW, high: int = DEFAULT_HIGH) -> ScanResult:
        """Score every integer in [low, high] and report the qualifying ones.

        Raises:
            InvalidInput: If either bound is negative or above MAX_SUPPORTED.
            EmptyRange: If low > high.
        """
        self._check_range(low, high)

        values = range(high, low - 1, -1) if self.descending else range(low, high + 1)
        logger.info(
            "Scanning [%d, %d] (%d values, %d worker(s))",
            low, high, len(values), self.workers,
        )

        scored = self._evaluate(values)
        qualifying = sorted(
            (s for s in scored if s.exceeds_value), key=lambda s: s.value
        )
        for s in qualifying:
            logger.debug("%d %r scores %d", s.value, s.words, s.score)

        maximum = _reduce_max(qualifying)
        if maximum is None:
            logger.info("No value in [%d, %d] outscores itself", low, high)
        else:
            logger.info(
                "Maximum qualifying value: %d (score %d, %d qualifying)",
                maximum.value, maximum.score, len(qualifying),
            )

        return ScanResult(
            low=low,
            high=high,
            evaluated=len(scored),
            qualifying=qualifying,
            maximum=maximum,
            workers=self.workers,
        )

    def find_maximum(self, low: int = DEFAULT_LOW, high: int = DEFAULT_HIGH) -> int:
        """Like scan(), but return only the maximum value.

        Raises:
            NoQualifyingValue: If nothing in the range outscores itself.
        """
        result = self.scan(low, high)
        if result.maximum is None:
            raise NoQualifyingValue(
                f"No integer in [{low}, {high}] has a score above its value",
                {"low": low, "high": high, "evaluated": result.evaluated},
            )
        return result.maximum.value

    # ─── Internals ───────────────────────────────────────────────────

    @staticmethod
    def _check_range(low: int, high: int) -> None:
        for name, bound in (("low", low), ("high", high)):
            if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
                raise InvalidInput(
                    f"Range bound '{name}' must be a non-negative integer, got {bound!r}",
                    {name: repr(bound)},
                )
            if bound > MAX_SUPPORTED:
                raise InvalidInput(
                    f"Range bound '{name}' ({bound}) exceeds the largest supported number "
                    f"({MAX_SUPPORTED:,})",
                    {name: bound, "max_supported": MAX_SUPPORTED},
                )
        if low > high:
            raise EmptyRange(
                f"Empty range: low ({low}) is greater than high ({high})",
                {"low": low, "high": high},
            )

    def _evaluate(self, values: range) -> list[ScoredValue]:
        if self.workers == 1:
            return [score_value(n) for n in values]

        chunksize = max(1, len(values) // (self.workers * 4))
        with ProcessPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(score_value, values, chunksize=chunksize))


def _reduce_max(candidates: list[ScoredValue]) -> ScoredValue | None:
    """Max by value; the same answer whatever order the candidates arrive in."""
    best: ScoredValue | None = None
    for candidate in candidates:
        if best is None or candidate.value > best.value:
            best = candidate
    return best
