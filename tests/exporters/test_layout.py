import numpy as np
from RowReductionLab.exporters.excalidraw import ExcalidrawFile
from RowReductionLab.exporters.layout import draw_matrix, draw_steps
from RowReductionLab.linear_system.matrix import Matrix2x2
from RowReductionLab.linear_system.solvers import Step
from RowReductionLab.linear_system.examples import (
    build_capacitor_demo, demo_reduction,
)


def elements_of(file, kind):
    return [e for e in file.elements if e.type == kind]


def test_draw_matrix():
    file = ExcalidrawFile()
    width, height = draw_matrix(file, build_capacitor_demo(), 0, 0)

    assert (width, height) == (173, 40)
    texts = elements_of(file, "text")
    assert [t.text for t in texts] == [
        "90000", "360000", "300", "600", "620", "0",
    ]
    # right aligned inside a six character column
    assert texts[0].x == 28
    assert texts[1].x == 19
    assert texts[0].y == 0
    assert texts[1].y == 20

    lines = elements_of(file, "line")
    assert len(lines) == 3
    separator, left, right = lines
    assert separator.x == 118
    assert separator.points == [[0, 0], [0, 40]]
    assert (left.x, left.width, left.height) == (10, 10, 40)
    assert right.x + right.width == width


def test_draw_matrix_offset():
    file = ExcalidrawFile()
    size = draw_matrix(file, build_capacitor_demo(), 100, 60, locked=True)
    reference = ExcalidrawFile()
    assert size == draw_matrix(reference, build_capacitor_demo(), 0, 0)
    for moved, placed in zip(file.elements, reference.elements):
        assert moved.x == placed.x + 100
        assert moved.y == placed.y + 60
        assert moved.locked


def test_matrix_is_drawable():
    file = ExcalidrawFile()
    assert file.draw(build_capacitor_demo(), 0, 0) == (173, 40)
    assert len(file.elements) == 9


def test_draw_steps():
    steps = []
    demo_reduction(steps)
    file = ExcalidrawFile()

    width, height = draw_steps(file, steps, 0, 0)

    texts = [t.text for t in elements_of(file, "text")]
    assert texts.count("=>") == len(steps) - 1
    assert "R2 += -4 * R1" in texts
    rectangles = elements_of(file, "rectangle")
    assert len(rectangles) == 1
    frame = rectangles[0]
    assert frame.x + frame.width <= width
    assert frame.y + frame.height <= height
    assert all(e.x + e.width <= width for e in file.elements)


def test_draw_no_steps():
    file = ExcalidrawFile()
    assert draw_steps(file, [], 0, 0) == (0, 0)
    assert file.elements == []


def test_draw_single_step_stays_right_of_origin():
    file = ExcalidrawFile()
    steps = [Step("m", Matrix2x2(np.eye(2), [1, 2]))]

    width, height = draw_steps(file, steps, 0, 0)

    assert min(e.x for e in file.elements) >= 0
    assert min(e.y for e in file.elements) >= 0
    assert all(e.x + e.width <= width for e in file.elements)
    assert all(e.y + e.height <= height for e in file.elements)
