"""Shared integer utilities for the balancing pipeline.

This module provides the exact-arithmetic helpers used across the package:
- GCD / LCM over lists of integers
- Sign of the first nonzero entry (row canonicalization)
"""

from __future__ import annotations

from functools import reduce
from math import gcd
from typing import Iterable


# =============================================================================
# Helper functions for integer operations
# =============================================================================
def _lcm(a: int, b: int) -> int:
    return abs(a * b) // gcd(a, b) if a and b else abs(a or b)


def lcm_list(xs: Iterable[int]) -> int:
    """Compute LCM of a list of integers (1 for an empty list)."""
    return reduce(_lcm, (int(x) for x in xs), 1)


def gcd_list(xs: Iterable[int]) -> int:
    """Compute GCD of a list of integers (0 when every entry is zero)."""
    return reduce(gcd, (abs(int(x)) for x in xs), 0)


# =============================================================================
# Sign conventions
# =============================================================================
def first_nonzero_sign(xs: Iterable[int]) -> int:
    """Return +1/-1 for the sign of the first nonzero entry, 0 if none."""
    for x in xs:
        if x != 0:
            return 1 if x > 0 else -1
    return 0
