"""
Gematria Scanner: find the largest integer whose spelled-out English name
outscores the number itself.

Architecture: Number → Words → Letters → Score → Bounded scan → Maximum
Philosophy:  Prove the search is finite. Then check every candidate.
"""

__version__ = "1.0.0"
