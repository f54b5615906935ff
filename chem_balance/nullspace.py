"""Exact null space of an atom-balance matrix.

Given the element-by-entity matrix A (reactant columns positive, product
columns negative), the balancings of an equation are the vectors x with
A x = 0. A uniquely balanceable equation has a one-dimensional null space.

We provide:
- rational_nullspace(): rational basis via sympy
- nullity(): dimension of the null space
- primitive_integer_basis(): scale vectors to integer primitive form

The balancer itself never relies on this module for its answer; it is used to
explain rejections and, in the tests, as an independent exact oracle.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .utils import first_nonzero_sign, gcd_list, lcm_list


def _primitive_int(vec: Sequence[int]) -> NDArray[np.int64]:
    g = gcd_list(vec) or 1
    sign = first_nonzero_sign(vec) or 1
    return np.array([int(x) // (sign * g) for x in vec], dtype=np.int64)


def rational_nullspace(rows: Sequence[Sequence[int]]) -> list[list[Fraction]]:
    """Compute a rational basis for the null space of *rows*.

    Returns a list of vectors x (as Fractions) such that rows @ x = 0.
    """
    import sympy as sp

    A = sp.Matrix([[int(x) for x in row] for row in rows])
    out: list[list[Fraction]] = []
    for v in A.nullspace():
        out.append([Fraction(int(x.p), int(x.q)) for x in v])
    return out


def nullity(rows: Sequence[Sequence[int]]) -> int:
    """Number of independent balancings of the system *rows*."""
    return len(rational_nullspace(rows))


def primitive_integer_basis(rows: Sequence[Sequence[int]]) -> list[NDArray[np.int64]]:
    """Return a primitive integer basis for the null space of *rows*.

    Each rational vector is scaled by the lcm of its denominators, then divided
    by the gcd of its entries with the first nonzero entry made positive.
    """
    basis: list[NDArray[np.int64]] = []
    for v in rational_nullspace(rows):
        L = lcm_list(f.denominator for f in v)
        basis.append(_primitive_int([int(f * L) for f in v]))
    return basis
