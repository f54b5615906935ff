"""Test the exact null-space helpers on atom-balance systems."""

from __future__ import annotations

from fractions import Fraction

import numpy as np

from chem_balance.nullspace import nullity, primitive_integer_basis, rational_nullspace


def test_water_synthesis_basis():
    # H: 2 H2 - 2 H2O ; O: 2 O2 - H2O
    rows = [[2, 0, -2], [0, 2, -1]]
    basis = primitive_integer_basis(rows)
    assert len(basis) == 1
    assert np.array_equal(basis[0], np.array([2, 1, 2]))


def test_rational_nullspace_is_exact():
    rows = [[2, 0, -2], [0, 2, -1]]
    (v,) = rational_nullspace(rows)
    assert all(isinstance(x, Fraction) for x in v)
    assert all(sum(a * x for a, x in zip(row, v)) == 0 for row in rows)


def test_nullity():
    # H2 + O2 = H2O + H2O2 has two independent balancings
    rows = [[2, 0, -2, -2], [0, 2, -1, -2]]
    assert nullity(rows) == 2
    # H2 = O2 has none
    assert nullity([[2, 0], [0, -2]]) == 0


def test_primitive_sign_convention():
    basis = primitive_integer_basis([[1, 1]])
    assert np.array_equal(basis[0], np.array([1, -1]))
