"""Lexical patterns of the equation notation.

A token is the longest match at the cursor of:
  - an element symbol: one uppercase letter followed by lowercase letters
  - a run of decimal digits
  - one of the punctuation characters  e + - = ( ) { }

The typographic minus U+2212 is accepted wherever ``-`` is, so text rendered
by :mod:`chem_balance.equation` (``{2−}``, ``e−``) parses back.
"""

from __future__ import annotations

import re

MINUS_SIGN = "\u2212"
ELECTRON = "e"

SYMBOL = re.compile(r"[A-Z][a-z]*")
DIGITS = re.compile(r"[0-9]+")
SPACES = re.compile(r"\s+")
TOKEN = re.compile(rf"[A-Z][a-z]*|[0-9]+|[e+\-=(){{}}{MINUS_SIGN}]")


def is_symbol(token: str) -> bool:
    return SYMBOL.fullmatch(token) is not None


def is_digits(token: str) -> bool:
    return DIGITS.fullmatch(token) is not None
