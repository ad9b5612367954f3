import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from RowReductionLab.config import PIVOT_TOLERANCE
from RowReductionLab.linear_system.matrix import (
    LineMatrix, describe_div, describe_mul_to, describe_swap,
)
from RowReductionLab.linear_system.utils import LinearSystem

logger = logging.getLogger(__name__)


@dataclass
class Step:
    """ One entry of a reduction history: what was done and the result. """
    description: str
    matrix: LineMatrix


def record(steps: list[Step] | None, description: str, matrix: LineMatrix):
    if steps is not None:
        steps.append(Step(description, matrix.copy()))


def gauss_jordan(
    matrix: LineMatrix,
    steps: list[Step] | None = None,
    tol: float = PIVOT_TOLERANCE,
) -> NDArray:
    """
    Reduces `matrix` in place to `[I | x]` and returns `x`.

    Uses partial pivoting: in every column the row with the largest
    coefficient on or below the diagonal becomes the pivot row. Every row
    operation performed is appended to `steps` when given.

    Raises numpy.linalg.LinAlgError when no pivot exceeds `tol` times the
    largest coefficient magnitude.
    """
    n = matrix.size
    threshold = tol * np.abs(matrix.values).max()
    for col in range(1, n + 1):
        candidates = np.abs(matrix.values[col - 1:, col - 1])
        pivot_row = col + int(np.argmax(candidates))
        if candidates.max() <= threshold:
            raise np.linalg.LinAlgError(
                f"Singular matrix: no pivot in column {col}"
            )

        if pivot_row != col:
            matrix.swap(col, pivot_row)
            record(steps, describe_swap(col, pivot_row), matrix)

        pivot = float(matrix.values[col - 1, col - 1])
        if pivot != 1.0:
            matrix.div(col, pivot)
            record(steps, describe_div(col, pivot), matrix)

        for target in range(1, n + 1):
            factor = float(matrix.values[target - 1, col - 1])
            if target == col or factor == 0.0:
                continue
            matrix.mul_to(col, -factor, target)
            record(steps, describe_mul_to(col, -factor, target), matrix)

    logger.info(f"Reduced {n}x{n} matrix.")
    return matrix.solution()


def row_reduction(ls: LinearSystem) -> NDArray:
    solution = gauss_jordan(ls.to_line_matrix())

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "row reduction must match"

    return solution


def recommended(ls: LinearSystem) -> NDArray:
    solution = linalg.solve(ls.matrix, ls.rhs)

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "solve must match"

    return solution
