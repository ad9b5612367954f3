import numpy as np
import pytest
from RowReductionLab.linear_system.examples import (
    build_capacitor_demo, build_random_linear_system, demo_reduction,
)
from RowReductionLab.linear_system.matrix import Matrix2x2


def test_demo_reduction():
    steps = []
    m = demo_reduction(steps)

    assert isinstance(m, Matrix2x2)
    assert m.is_reduced()
    assert np.allclose(m.solution(), [-620 / 90_000, 2480 / 600])
    assert [step.description for step in steps] == [
        "m",
        "R2 += -4 * R1",
        "R2 /= -600",
        "R1 += -300 * R2",
        "R1 /= 90000",
    ]
    assert np.array_equal(steps[0].matrix.values,
                          build_capacitor_demo().values)


def test_demo_solves_the_system():
    m = build_capacitor_demo()
    solution = demo_reduction().solution()
    assert np.allclose(m.values @ solution, m.result)


def test_random_is_reproducible():
    first = build_random_linear_system(4, seed=3)
    second = build_random_linear_system(4, seed=3)
    assert np.array_equal(first.matrix, second.matrix)
    assert np.allclose(first.matrix @ first.solution, first.rhs)
    with pytest.raises(ValueError):
        build_random_linear_system(0)
