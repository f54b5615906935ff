"""Dense integer matrix with fraction-free Gaussian elimination.

Cells are stored in a numpy array of dtype=object, so every entry is an exact
Python int and row operations never round or overflow.

Elimination keeps rows integral by scaling with gcds instead of dividing:
    row_j <- row_j * (pivot/g) - row_i * (row_j[c]/g),   g = gcd(pivot, row_j[c])
followed by simplify_row(), which divides a row by the gcd of its entries and
makes its first nonzero entry positive. The result is a reduced row-echelon
form with integer entries.
"""

from __future__ import annotations

from math import gcd
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .utils import first_nonzero_sign, gcd_list


class Matrix:
    def __init__(self, rows_count: int, columns_count: int):
        if rows_count < 1 or columns_count < 1:
            raise ValueError(f"matrix must be at least 1x1, got {rows_count}x{columns_count}")
        self.rows_count = rows_count
        self.columns_count = columns_count
        self.cells: NDArray[np.object_] = np.zeros((rows_count, columns_count), dtype=object)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Matrix:
        if not rows:
            raise ValueError("rows must be non-empty")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"rows have different lengths: {sorted(widths)}")

        matrix = cls(len(rows), widths.pop())
        for i, row in enumerate(rows):
            for j, x in enumerate(row):
                matrix.cells[i, j] = int(x)
        return matrix

    def to_list(self) -> list[list[int]]:
        return [[int(x) for x in row] for row in self.cells]

    def __str__(self) -> str:
        return "\n".join("[" + ", ".join(str(x) for x in row) + "]" for row in self.cells)

    # -------------------------------------------------------------------------
    # Row helpers
    # -------------------------------------------------------------------------
    @staticmethod
    def add_rows(row_1: NDArray[np.object_], row_2: NDArray[np.object_]) -> NDArray[np.object_]:
        if len(row_1) != len(row_2):
            raise ValueError("rows are not of equal length")
        return np.asarray(row_1, dtype=object) + np.asarray(row_2, dtype=object)

    @staticmethod
    def gcd_of_row(row: Sequence[int]) -> int:
        return gcd_list(row)

    @staticmethod
    def simplify_row(row: Sequence[int]) -> NDArray[np.object_]:
        """Divide *row* by sign(first nonzero) * gcd(row); zero rows are returned as is."""
        row = np.array(row, dtype=object)
        sign = first_nonzero_sign(row)
        if sign == 0:
            return row
        return row // (sign * Matrix.gcd_of_row(row))

    def count_nonzero(self, row_index: int) -> int:
        return sum(1 for x in self.cells[row_index] if x != 0)

    def pivot_column(self, row_index: int) -> int | None:
        """Column of the first nonzero entry of a row, None for a zero row."""
        for j, x in enumerate(self.cells[row_index]):
            if x != 0:
                return j
        return None

    def diagonal(self, n: int | None = None) -> list[int]:
        n = min(self.rows_count, self.columns_count) if n is None else n
        return [int(self.cells[i, i]) for i in range(n)]

    def column(self, j: int) -> list[int]:
        return [int(x) for x in self.cells[:, j]]

    def swap_rows(self, a: int, b: int) -> None:
        self.cells[[a, b]] = self.cells[[b, a]]

    def _eliminate_entry(self, target: int, source: int, column: int) -> None:
        """Zero cells[target, column] using the pivot of row *source* in that column."""
        value = self.cells[target, column]
        if value == 0:
            return
        pivot = self.cells[source, column]
        g = gcd(pivot, value)
        self.cells[target] = self.simplify_row(self.add_rows(
            self.cells[target] * (pivot // g),
            self.cells[source] * (-value // g),
        ))

    # -------------------------------------------------------------------------
    # Elimination
    # -------------------------------------------------------------------------
    def eliminate(self) -> None:
        """Bring the matrix to integer reduced row-echelon form, in place."""
        for i in range(self.rows_count):
            self.cells[i] = self.simplify_row(self.cells[i])

        # forward: pivot each column left to right
        pivots_count = 0
        for column in range(self.columns_count):
            pivot_row = pivots_count
            while pivot_row < self.rows_count and self.cells[pivot_row, column] == 0:
                pivot_row += 1
            if pivot_row == self.rows_count:
                continue

            if pivot_row != pivots_count:
                self.swap_rows(pivots_count, pivot_row)

            for j in range(pivots_count + 1, self.rows_count):
                self._eliminate_entry(j, pivots_count, column)
            pivots_count += 1

        # backward: clear each pivot column above its row, bottom to top
        for i in reversed(range(1, self.rows_count)):
            column = self.pivot_column(i)
            if column is None:
                continue
            for j in reversed(range(i)):
                self._eliminate_entry(j, i, column)
