#!/usr/bin/env python3
"""
Number Speller — Entry Point
============================

Spells sample numbers (or the numbers given on the command line) in every
registered grammar and prints a colour report.

Usage:
    python main.py                             # Built-in sample values
    python main.py 1002 -1.2 23380000000       # Your own values
    NUMBER_SPELLER_LOG_LEVEL=DEBUG python main.py
"""

from __future__ import annotations

import logging
import os
import sys

from number_speller.exceptions import SpellingError
from number_speller.speller import GRAMMARS

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Sample Values ───────────────────────────────────────────────────

SAMPLE_VALUES = ["0", "7", "127", "1002", "2427000", "-1.2", "23380000000"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(values: list[str]) -> int:
    """Spell every value in every grammar.

    Returns:
        0 if every value was spelled, 1 if any grammar rejected one.
    """
    failures = 0

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER SPELLING REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")

    for value in values:
        print(f"\n  {_BOLD}{value}{_RESET}")
        for name, grammar in GRAMMARS.items():
            try:
                text = grammar.to_text(value)
            except SpellingError as exc:
                failures += 1
                print(f"    {_DIM}{name}{_RESET}  {_RED}[{exc.code}] {exc}{_RESET}")
            else:
                print(f"    {_DIM}{name}{_RESET}  {text}")

    print(f"\n{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} value(s) could not be spelled{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL VALUES SPELLED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Configure logging, spell the values and exit with the report status."""
    logging.basicConfig(
        level=os.getenv("NUMBER_SPELLER_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    values = sys.argv[1:] or SAMPLE_VALUES
    sys.exit(print_report(values))


if __name__ == "__main__":
    main()
