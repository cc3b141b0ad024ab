#!/usr/bin/env python3
"""
Gematria Scanner: Entry Point
=============================

Finds the largest integer whose English name outscores it (a=1 ... z=26).

Usage:
    python main.py                       # Scan the default range [77, 777]
    python main.py --low 1 --high 100    # Scan a custom range
    python main.py --all --workers 4     # List every qualifying value, in parallel
    python main.py --score 538           # Score a single integer
    python main.py --bounds              # Show why the range is finite

Exit codes:
    0  success
    1  the scan found no qualifying value
    2  invalid input or empty range
"""

from __future__ import annotations

import argparse
import logging
import sys

from gematria_scanner import __version__
from gematria_scanner.bounds import estimate_bounds, sample_bounds, verify_bound
from gematria_scanner.config import load_settings
from gematria_scanner.exceptions import GematriaError
from gematria_scanner.models import ScanResult
from gematria_scanner.scanner import GematriaScanner
from gematria_scanner.scoring import score_value

logger = logging.getLogger("gematria_scanner")


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_header(title: str) -> None:
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {title}{_RESET}")
    print(f"{'=' * _WIDTH}")


def _print_qualifying(result: ScanResult) -> None:
    """Print every qualifying value (compact format)."""
    print(f"\n  {_CYAN}QUALIFYING ({len(result.qualifying)}){_RESET}")
    for s in result.qualifying:
        print(f"    {s.value:>6}  {s.score:>4}  {_DIM}{s.words}{_RESET}")


def print_scan_report(result: ScanResult, show_all: bool = False) -> int:
    """Pretty-print a scan result.

    Returns:
        0 if a qualifying value was found, 1 otherwise.
    """
    _print_header("GEMATRIA SCAN REPORT")
    print(f"  Range:       [{result.low}, {result.high}]")
    print(f"  Evaluated:   {result.evaluated}")
    print(f"  Workers:     {result.workers}")
    print(f"  Qualifying:  {len(result.qualifying)}")
    print(f"{'─' * _WIDTH}")

    if show_all and result.qualifying:
        _print_qualifying(result)
        print(f"{'─' * _WIDTH}")

    if result.maximum is None:
        print(f"  {_YELLOW}{_BOLD}NO VALUE IN RANGE OUTSCORES ITSELF{_RESET}")
        print(f"{'=' * _WIDTH}\n")
        return 1

    best = result.maximum
    print(f"  Words:       {best.words}")
    print(f"  Score:       {best.score} > {best.value}")
    print(f"{'=' * _WIDTH}")
    print(f"  {_GREEN}{_BOLD}LARGEST QUALIFYING VALUE: {best.value}{_RESET}")
    print(f"{'=' * _WIDTH}\n")
    return 0


def print_score(value: int) -> int:
    """Print one integer's word form and score."""
    s = score_value(value)
    marker = f"{_GREEN}>{_RESET}" if s.exceeds_value else f"{_DIM}<={_RESET}"
    print(f"  {s.value}  {_DIM}{s.words}{_RESET}")
    print(f"  score {s.score} {marker} {s.value}")
    return 0


def print_bounds() -> int:
    """Print the sampled values behind the default scan range."""
    _print_header("BOUND ESTIMATION")
    for s in sample_bounds():
        verdict = f"{_GREEN}outscores{_RESET}" if s.exceeds_value else f"{_RED}falls short{_RESET}"
        print(f"  {s.value:>6} → {s.score:>4}  ratio {s.ratio:6.3f}  {verdict}")
    print(f"{'─' * _WIDTH}")

    estimate = estimate_bounds()
    safe = verify_bound(estimate.high)
    print(f"  Strongest digit:  {estimate.digit}")
    print(f"  Scan range:       [{estimate.low}, {estimate.high}]")
    status = f"{_GREEN}verified{_RESET}" if safe else f"{_RED}NOT verified{_RESET}"
    print(f"  Upper bound:      {status}")
    print(f"{'=' * _WIDTH}\n")
    return 0 if safe else 1


# ─── Argument Parsing ───────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gematria-scan",
        description="Find the largest integer whose English name outscores it.",
    )
    parser.add_argument("--low", type=int, help="first integer to scan (default 77)")
    parser.add_argument("--high", type=int, help="last integer to scan (default 777)")
    parser.add_argument("--workers", type=int, help="worker processes (default 1)")
    parser.add_argument(
        "--descending", action="store_true", help="evaluate from high to low"
    )
    parser.add_argument(
        "--all", dest="show_all", action="store_true", help="list every qualifying value"
    )
    parser.add_argument("--score", type=int, metavar="N", help="score a single integer")
    parser.add_argument(
        "--bounds", action="store_true", help="show the bound estimation table"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log at INFO")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the requested mode and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        logging.basicConfig(
            level=logging.INFO if args.verbose else settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if args.score is not None:
            return print_score(args.score)
        if args.bounds:
            return print_bounds()

        low = settings.low if args.low is None else args.low
        high = settings.high if args.high is None else args.high
        workers = settings.workers if args.workers is None else args.workers

        scanner = GematriaScanner(workers=workers, descending=args.descending)
        return print_scan_report(scanner.scan(low, high), show_all=args.show_all)

    except GematriaError as e:
        logger.debug("Rejected input: %s", e.details)
        print(f"{_RED}[{e.code}]{_RESET} {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
