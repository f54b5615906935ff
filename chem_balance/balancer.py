"""Balancing pipeline: text -> Equation -> atom-balance Matrix -> coefficients.

Matrix layout (built once per Balancer):
- one row per element name in discovery order (the electron name "e" counts
  charge), plus one extra row, initially zero
- one column per entity (reactants, then products), plus a solution column
- cells[element][reactant] = +count, cells[element][product] = -count

Solving:
1) eliminate; the first row with more than one nonzero entry marks where the
   pivoted block ends and a free variable remains
2) pin that variable to 1 through the extra row, eliminate again
3) coefficient_i = lcm(pivots) / pivot_i * solution_i
4) check conservation of every element and of charge
"""

from __future__ import annotations

import logging

from .equation import Equation
from .errors import (
    AllCoefficientsAreZero,
    CoefficientsAreIncorrectlyPlaced,
    MismatchInNumberOfCoefficients,
    ReactionCanBeEqualizedInInfiniteNumberOfWays,
)
from .matrix import Matrix
from .nullspace import nullity
from .parser import parse_equation
from .utils import lcm_list

logger = logging.getLogger(__name__)


def initial_matrix(equation: Equation) -> Matrix:
    """Atom-balance matrix of *equation* with the extra row and solution column."""
    names = equation.element_names()
    n_reactants = len(equation.reactants)
    matrix = Matrix(len(names) + 1, len(equation.entities) + 1)

    for i, name in enumerate(names):
        for j, reactant in enumerate(equation.reactants):
            matrix.cells[i, j] = reactant.count_element(name)
        for j, product in enumerate(equation.products):
            matrix.cells[i, j + n_reactants] = -product.count_element(name)

    return matrix


class Balancer:
    def __init__(self, text: str):
        self.equation = parse_equation(text)
        # built and solved by coefficients()
        self.matrix: Matrix | None = None

    def _solve_matrix(self) -> None:
        matrix = self.matrix
        matrix.eliminate()
        logger.debug("eliminated matrix:\n%s", matrix)

        row_index = 0
        while row_index < matrix.rows_count and matrix.count_nonzero(row_index) <= 1:
            row_index += 1

        if row_index >= matrix.rows_count - 1:
            raise AllCoefficientsAreZero()

        last_row = matrix.rows_count - 1
        matrix.cells[last_row, row_index] = 1
        matrix.cells[last_row, matrix.columns_count - 1] = 1
        matrix.eliminate()
        logger.debug("matrix with free variable %d pinned:\n%s", row_index, matrix)

    def _extract_coefficients(self) -> list[int]:
        matrix = self.matrix
        n = matrix.columns_count - 1

        if matrix.rows_count < n or any(pivot == 0 for pivot in matrix.diagonal(n)):
            if logger.isEnabledFor(logging.DEBUG):
                rows = [row[:n] for row in initial_matrix(self.equation).to_list()]
                logger.debug("under-determined reaction, nullity %d", nullity(rows))
            raise ReactionCanBeEqualizedInInfiniteNumberOfWays()

        pivots = matrix.diagonal(n)
        solution = matrix.column(n)
        L = lcm_list(pivots)
        return [L // pivots[i] * solution[i] for i in range(n)]

    def _check_answer(self, coefficients: list[int]) -> None:
        reactants = self.equation.reactants
        products = self.equation.products
        n_reactants = len(reactants)

        if len(reactants) + len(products) != len(coefficients):
            raise MismatchInNumberOfCoefficients()

        if all(c == 0 for c in coefficients):
            raise AllCoefficientsAreZero()

        for name in self.equation.element_names():
            total = sum(
                entity.count_element(name) * coefficients[i]
                for i, entity in enumerate(reactants)
            )
            total -= sum(
                entity.count_element(name) * coefficients[i + n_reactants]
                for i, entity in enumerate(products)
            )
            if total != 0:
                logger.error("element %s is off by %d with coefficients %s", name, total, coefficients)
                raise CoefficientsAreIncorrectlyPlaced()

    def coefficients(self) -> list[int]:
        """Solve and check; coefficients are ordered reactants first, then products."""
        self.matrix = initial_matrix(self.equation)
        logger.debug("initial matrix:\n%s", self.matrix)
        self._solve_matrix()
        coefficients = self._extract_coefficients()
        self._check_answer(coefficients)
        logger.debug("coefficients: %s", coefficients)
        return coefficients

    def balance_equation(self) -> str:
        return self.equation.format(self.coefficients())


def balance_equation(text: str) -> str:
    """Balance the equation in *text* and return it formatted.

    Raises:
      ParserError: malformed text (with the offending span)
      BalancerError: no unique integer balancing exists
    """
    return Balancer(text).balance_equation()
