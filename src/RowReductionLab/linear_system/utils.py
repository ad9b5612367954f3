from dataclasses import dataclass

from numpy.typing import NDArray

from RowReductionLab.linear_system.matrix import LineMatrix, make_matrix


@dataclass
class LinearSystem:
    matrix: NDArray
    rhs: NDArray
    solution: NDArray | None = None

    def to_line_matrix(self) -> LineMatrix:
        return make_matrix(self.matrix, self.rhs)
