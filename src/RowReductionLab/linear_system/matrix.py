""" Augmented square matrices and the elementary row operations.

Rows are numbered from 1 in every public method, the way they are written
on paper (`R1`, `R2`, ...). Each operation changes the coefficient row and
its result value together and returns the matrix, so steps chain:

    m.mul_to(1, -4, 2).div(2, -600)
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from RowReductionLab.config import DEFAULT_PRECISION
from RowReductionLab.exporters.excalidraw import ExcalidrawFile
from RowReductionLab.exporters.layout import draw_matrix
from RowReductionLab.linear_system.formatting import (
    parse_precision, render_text,
)

logger = logging.getLogger(__name__)


class RowIndexError(IndexError):
    """ A row number outside `1..size`. """


def describe_number(value: float) -> str:
    return f"{value:g}"


class LineMatrix:
    """ N×N coefficients with an augmented result column. """

    def __init__(self, values: ArrayLike, result: ArrayLike) -> None:
        values = np.array(values, dtype=np.float64)
        result = np.array(result, dtype=np.float64)

        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(
                f"Coefficients must be a square matrix, got {values.shape}"
            )
        if values.shape[0] == 0:
            raise ValueError("Matrix must have at least one row")
        if result.shape != (values.shape[0],):
            raise ValueError(
                f"Result column must have {values.shape[0]} entries,"
                f" got {result.shape}"
            )

        self.values: NDArray = values
        self.result: NDArray = result

    @property
    def size(self) -> int:
        return self.values.shape[0]

    def _index(self, row: Any) -> int:
        if (
            isinstance(row, bool)
            or not isinstance(row, (int, np.integer))
            or not 1 <= row <= self.size
        ):
            raise RowIndexError(
                f"Row {row!r} is out of range 1..{self.size}"
            )
        return int(row) - 1

    def mul(self, row: int, value: float) -> LineMatrix:
        """ R_row <- R_row * value """
        i = self._index(row)
        self.values[i] *= value
        self.result[i] *= value
        logger.debug(describe_mul(row, value))
        return self

    def div(self, row: int, value: float) -> LineMatrix:
        """ R_row <- R_row / value """
        i = self._index(row)
        if value == 0:
            raise ZeroDivisionError(f"Cannot divide R{row} by zero")
        self.values[i] /= value
        self.result[i] /= value
        logger.debug(describe_div(row, value))
        return self

    def add_to(self, row: int, target_row: int) -> LineMatrix:
        """ R_target <- R_target + R_row """
        i, t = self._index(row), self._index(target_row)
        self.values[t] += self.values[i]
        self.result[t] += self.result[i]
        logger.debug(describe_add_to(row, target_row))
        return self

    def sub_to(self, row: int, target_row: int) -> LineMatrix:
        """ R_target <- R_target - R_row """
        i, t = self._index(row), self._index(target_row)
        self.values[t] -= self.values[i]
        self.result[t] -= self.result[i]
        logger.debug(describe_sub_to(row, target_row))
        return self

    def mul_to(self, row: int, value: float, target_row: int) -> LineMatrix:
        """ R_target <- R_target + value * R_row """
        i, t = self._index(row), self._index(target_row)
        # a copy, row and target_row may be the same
        source, source_result = self.values[i].copy(), self.result[i]
        self.values[t] += source * value
        self.result[t] += source_result * value
        logger.debug(describe_mul_to(row, value, target_row))
        return self

    def div_to(self, row: int, value: float, target_row: int) -> LineMatrix:
        """ R_target <- R_target + R_row / value """
        i, t = self._index(row), self._index(target_row)
        if value == 0:
            raise ZeroDivisionError(f"Cannot divide R{row} by zero")
        source, source_result = self.values[i].copy(), self.result[i]
        self.values[t] += source / value
        self.result[t] += source_result / value
        logger.debug(describe_div_to(row, value, target_row))
        return self

    def swap(self, row: int, other_row: int) -> LineMatrix:
        """ R_row <-> R_other """
        i, j = self._index(row), self._index(other_row)
        self.values[[i, j]] = self.values[[j, i]]
        self.result[[i, j]] = self.result[[j, i]]
        logger.debug(describe_swap(row, other_row))
        return self

    def copy(self) -> LineMatrix:
        clone = LineMatrix.__new__(type(self))
        clone.values = self.values.copy()
        clone.result = self.result.copy()
        return clone

    def solution(self) -> NDArray:
        """ The result column. Meaningful once `is_reduced()` holds. """
        return self.result.copy()

    def is_reduced(self, tol: float = 1e-9) -> bool:
        return bool(np.allclose(self.values, np.eye(self.size), atol=tol))

    def draw(
        self,
        file: ExcalidrawFile,
        x: int,
        y: int,
        locked: bool,
        precision: int = DEFAULT_PRECISION,
    ) -> tuple[int, int]:
        return draw_matrix(file, self, x, y, locked, precision)

    def __format__(self, format_spec: str) -> str:
        return render_text(self, parse_precision(format_spec))

    def __str__(self) -> str:
        return render_text(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"{self.values.tolist()!r}, {self.result.tolist()!r})"
        )


class Matrix2x2(LineMatrix):
    SIZE = 2

    def __init__(self, values: ArrayLike, result: ArrayLike) -> None:
        super().__init__(values, result)
        if self.size != self.SIZE:
            raise ValueError(f"Matrix2x2 needs 2 rows, got {self.size}")


class Matrix3x3(LineMatrix):
    SIZE = 3

    def __init__(self, values: ArrayLike, result: ArrayLike) -> None:
        super().__init__(values, result)
        if self.size != self.SIZE:
            raise ValueError(f"Matrix3x3 needs 3 rows, got {self.size}")


# Step descriptions, shared by the debug log and the reduction history

def describe_mul(row: int, value: float) -> str:
    return f"R{row} *= {describe_number(value)}"


def describe_div(row: int, value: float) -> str:
    return f"R{row} /= {describe_number(value)}"


def describe_add_to(row: int, target_row: int) -> str:
    return f"R{target_row} += R{row}"


def describe_sub_to(row: int, target_row: int) -> str:
    return f"R{target_row} -= R{row}"


def describe_mul_to(row: int, value: float, target_row: int) -> str:
    return f"R{target_row} += {describe_number(value)} * R{row}"


def describe_div_to(row: int, value: float, target_row: int) -> str:
    return f"R{target_row} += R{row} / {describe_number(value)}"


def describe_swap(row: int, other_row: int) -> str:
    return f"R{row} <-> R{other_row}"


def make_matrix(values: ArrayLike, result: ArrayLike) -> LineMatrix:
    """ The fixed-size class for 2×2 and 3×3 input, LineMatrix otherwise. """
    matrix = LineMatrix(values, result)
    for cls in (Matrix2x2, Matrix3x3):
        if matrix.size == cls.SIZE:
            return cls(matrix.values, matrix.result)
    return matrix
