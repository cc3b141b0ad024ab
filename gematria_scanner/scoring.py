"""
Gematria scoring: letters → alphabet positions → sum.

Each function here:
  - Is pure (same input, same output, no side effects)
  - Scores only ASCII letters; everything else is dropped or rejected
  - Treats upper and lower case identically

    gematria_score("one")        → 15 + 14 + 5 = 34
    gematria_score("Seven-Up!")  → same as "sevenup"
    score(538)                   → gematria_score("five hundred thirty-eight") = 265
"""

from __future__ import annotations

import re
import string
from functools import lru_cache

from .exceptions import InvalidInput
from .models import ScoredValue
from .number_to_words import number_to_words

# ─── Constants ───────────────────────────────────────────────────────

ALPHABET = string.ascii_lowercase

_LETTER_VALUES: dict[str, int] = {ch: pos for pos, ch in enumerate(ALPHABET, start=1)}
_ANY_CASE_VALUES: dict[str, int] = {
    **_LETTER_VALUES,
    **{ch.upper(): pos for ch, pos in _LETTER_VALUES.items()},
}

_NON_LETTERS = re.compile(r"[^A-Za-z]")


# ─── Letter Level ────────────────────────────────────────────────────


def clean_letters(text: str) -> str:
    """Drop every character outside A-Z and a-z, then lowercase what is left."""
    return _NON_LETTERS.sub("", text).lower()


def letter_value(ch: str) -> int:
    """1-based alphabet position of a single ASCII letter (a=1 ... z=26).

    Raises:
        InvalidInput: If ch is not exactly one ASCII letter.
    """
    position = _ANY_CASE_VALUES.get(ch)
    if position is None:
        raise InvalidInput(
            f"Not a single ASCII letter: {ch!r}",
            {"character": ch},
        )
    return position


def gematria_score(text: str) -> int:
    """Sum the alphabet positions of every letter in text.

    Spaces, hyphens, digits and punctuation contribute nothing; an empty
    string scores 0.
    """
    return sum(_LETTER_VALUES[ch] for ch in clean_letters(text))


# ─── Number Level ────────────────────────────────────────────────────


# Bounded; a default scan needs 701 entries.
@lru_cache(maxsize=4096, typed=True)
def score(value: int) -> int:
    """Gematria score of an integer's English word form."""
    return gematria_score(number_to_words(value))


def score_value(value: int) -> ScoredValue:
    """Build the full (value, words, score) result for one integer."""
    words = number_to_words(value)
    return ScoredValue(value=value, words=words, score=score(value))
