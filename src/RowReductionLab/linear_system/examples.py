""" Ready-made systems for the command line and the tests. """

import numpy as np
from numpy.random import Generator

from RowReductionLab.linear_system.matrix import (
    Matrix2x2, describe_div, describe_mul_to,
)
from RowReductionLab.linear_system.solvers import Step, record
from RowReductionLab.linear_system.utils import LinearSystem


def build_capacitor_demo() -> Matrix2x2:
    return Matrix2x2(
        [[90_000., 300.], [360_000., 600.]],
        [620., 0.],
    )


def demo_reduction(steps: list[Step] | None = None) -> Matrix2x2:
    """ Reduces the capacitor demo by hand, one textbook step at a time. """
    m = build_capacitor_demo()
    record(steps, "m", m)

    m.mul_to(1, -4., 2)
    record(steps, describe_mul_to(1, -4., 2), m)
    m.div(2, -600.)
    record(steps, describe_div(2, -600.), m)
    m.mul_to(2, -300., 1)
    record(steps, describe_mul_to(2, -300., 1), m)
    m.div(1, 90_000.)
    record(steps, describe_div(1, 90_000.), m)
    return m


def build_atomic_energy() -> LinearSystem:
    # Solution of this linear systems gives the expression for the atomic
    # energy
    matrix = np.array([
        [1, 0, 1, 1],
        [0, 0, 2, 3],
        [0, 1, -1, -4],
        [0, 1, 0, -2],
    ])
    rhs = np.array([1, 2, -2, 0])
    solution = np.array([1, 4, -2, 2])
    return LinearSystem(matrix=matrix, rhs=rhs, solution=solution)


def build_random_linear_system(
    n: int,
    seed: int = 20250508,
) -> LinearSystem:
    """
    Generates a linear system problem `matrix @ solution = rhs`.

    Args:
    - n (int): Size of the square matrix A.
    - seed (int): Optional random seed.

    Returns:
    - ls (LinearSystem): a dataclass with `matrix`, `rhs`, and `solution`
    """
    if n < 1:
        raise ValueError(f"System size must be positive, got {n}")
    rng: Generator = np.random.default_rng(seed=seed)

    matrix = rng.random(size=(n, n))
    solution = rng.random(size=(n))
    rhs = np.dot(matrix, solution)

    return LinearSystem(matrix=matrix, solution=solution, rhs=rhs)
