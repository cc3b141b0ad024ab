"""
The bounding argument: why scanning [77, 777] is enough.

There are infinitely many integers, but a number's value grows ×10 per digit
while its name only grows by a roughly fixed number of points per digit.
Past some length the value must win, so the search is finite.

Argument (reproduced by estimate_bounds() and checked by verify_bound()):
  1. The digit whose words score highest in every position is 7
     ("seven" = 65 as ones/hundreds, "seventy" = 110 as tens).
  2. Repdigits of 7 are therefore the strongest candidates per length:
         7    → 65    outscores itself
         77   → 175   outscores itself
         777  → 314   does NOT (314 < 777)
         7777 → 481   nowhere close
  3. No three-digit group scores above 314, so every number above 777 is
     beaten by its own value: exhaustively up to 999, and for longer numbers
     because the best possible name is shorter than the smallest value.

The answer must be at least the largest qualifying 2-digit candidate (77)
and at most 777, so the scanner checks every integer in between.

These are DESIGN-TIME facts; the scanner just uses DEFAULT_LOW/DEFAULT_HIGH.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from .exceptions import InvalidInput
from .models import BoundEstimate, BoundSample
from .number_to_words import MAX_SUPPORTED, SCALES
from .scoring import gematria_score, score

logger = logging.getLogger(__name__)


# ─── Constants ───────────────────────────────────────────────────────

DEFAULT_LOW = 77
DEFAULT_HIGH = 777

# Representative values: single digit, multiple of ten, repdigits.
BOUND_SAMPLES: tuple[int, ...] = (7, 70, 77, 777, 7777)

MAX_DIGITS = len(str(MAX_SUPPORTED))


# ─── Sampling ────────────────────────────────────────────────────────


def maximizing_digit() -> int:
    """The digit 1-9 whose ones word plus tens word score highest.

    The tens word for 1 is "ten", so both words come from the converter.
    """
    return max(
        range(1, 10),
        key=lambda d: score(d) + score(d * 10),
    )


def repdigit(digit: int, length: int) -> int:
    """A number made of `length` copies of `digit`, e.g. repdigit(7, 3) == 777."""
    if not 1 <= digit <= 9 or length < 1:
        raise InvalidInput(
            f"Cannot build a repdigit from digit={digit}, length={length}",
            {"digit": digit, "length": length},
        )
    return int(str(digit) * length)


def sample(value: int) -> BoundSample:
    """Score one value and record how it compares against itself."""
    s = score(value)
    return BoundSample(value=value, score=s, ratio=s / value if value else 0.0)


def sample_bounds(values: tuple[int, ...] = BOUND_SAMPLES) -> list[BoundSample]:
    """Score each representative value, in the order given."""
    return [sample(v) for v in values]


def estimate_bounds(digit: int | None = None, max_length: int = 6) -> BoundEstimate:
    """Walk repdigits of the strongest digit until one fails to outscore itself.

    Returns:
        BoundEstimate(low=77, high=777) for the default digit 7.

    Raises:
        InvalidInput: If no repdigit up to max_length fails, or none qualifies.
    """
    digit = maximizing_digit() if digit is None else digit
    if max_length > MAX_DIGITS:
        raise InvalidInput(
            f"max_length {max_length} exceeds the {MAX_DIGITS} supported digits",
            {"max_length": max_length, "max_digits": MAX_DIGITS},
        )

    samples: list[BoundSample] = []
    low: int | None = None
    for length in range(1, max_length + 1):
        s = sample(repdigit(digit, length))
        samples.append(s)
        logger.debug("repdigit %d scores %d (ratio %.3f)", s.value, s.score, s.ratio)
        if s.exceeds_value:
            low = s.value
            continue
        if low is None:
            raise InvalidInput(
                f"Repdigits of {digit} never outscore themselves",
                {"digit": digit},
            )
        logger.info("Estimated scan range [%d, %d] from digit %d", low, s.value, digit)
        return BoundEstimate(digit=digit, low=low, high=s.value, samples=samples)

    raise InvalidInput(
        f"No repdigit of {digit} up to {max_length} digits falls below its value",
        {"digit": digit, "max_length": max_length},
    )


# ─── Verification ────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def group_score_ceiling() -> int:
    """Highest score any three-digit group (1-999) can contribute."""
    return max(score(n) for n in range(1, 1000))


def score_ceiling(digits: int) -> int:
    """Upper bound on the score of any integer with this many digits.

    Every non-empty group contributes at most group_score_ceiling() plus the
    name of its scale word.
    """
    if not 1 <= digits <= MAX_DIGITS:
        raise InvalidInput(
            f"Digit count must be between 1 and {MAX_DIGITS}, got {digits}",
            {"digits": digits},
        )
    groups = -(-digits // 3)
    scale_words = [name for _, name in reversed(SCALES)][: groups - 1]
    return groups * group_score_ceiling() + sum(gematria_score(w) for w in scale_words)


def verify_bound(high: int = DEFAULT_HIGH) -> bool:
    """Check that no supported integer above `high` outscores itself.

    Integers sharing high's digit count are checked one by one; every longer
    digit count is settled by score_ceiling() against its smallest value.
    """
    digits = len(str(high))
    for n in range(high + 1, 10**digits):
        if score(n) > n:
            logger.info("Bound %d is unsafe: %d scores %d", high, n, score(n))
            return False

    for d in range(digits + 1, MAX_DIGITS + 1):
        if score_ceiling(d) > 10 ** (d - 1):
            logger.info("Bound %d is unproven for %d-digit numbers", high, d)
            return False

    return True
