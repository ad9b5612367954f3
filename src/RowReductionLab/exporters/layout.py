""" Lays matrices out on the Excalidraw grid.

A matrix is drawn as

    [ c11  c12 | r1 ]
    [ c21  c22 | r2 ]

with one monospaced text element per cell, line elements for the brackets
and for the separator in front of the result column. Columns are as wide as
their longest formatted number, cells are right aligned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from RowReductionLab.config import DEFAULT_PRECISION, GRID_SIZE
from RowReductionLab.exporters.excalidraw import (
    CHAR_WIDTH, LINE_HEIGHT, ExcalidrawFile, Line, Rectangle, Text,
)
from RowReductionLab.linear_system.formatting import column_strings

if TYPE_CHECKING:
    from RowReductionLab.linear_system.matrix import LineMatrix
    from RowReductionLab.linear_system.solvers import Step

logger = logging.getLogger(__name__)

ROW_HEIGHT = GRID_SIZE
BRACKET_WIDTH = GRID_SIZE // 2
CELL_GAP = CHAR_WIDTH
ARROW = "=>"
FRAME_PADDING = GRID_SIZE // 2


def draw_matrix(
    file: ExcalidrawFile,
    matrix: LineMatrix,
    x: int,
    y: int,
    locked: bool = False,
    precision: int = DEFAULT_PRECISION,
) -> tuple[int, int]:
    """
    Adds the brackets, cells and separator of `matrix` to `file` with the
    top left corner at (x, y).

    Returns the width and height of the drawn matrix.
    """
    cells, col_widths, results, result_width = column_strings(
        matrix, precision
    )
    height = matrix.size * ROW_HEIGHT

    def column(texts: list[str], chars: int, left: int) -> int:
        for row, text in enumerate(texts):
            shift = (chars - len(text)) * CHAR_WIDTH
            file.add(Text.small_monospaced(
                left + shift, y + row * ROW_HEIGHT, locked, text
            ))
        return left + chars * CHAR_WIDTH

    cursor = x + BRACKET_WIDTH + CELL_GAP
    for col, chars in enumerate(col_widths):
        texts = [cells[row][col] for row in range(matrix.size)]
        cursor = column(texts, chars, cursor) + CELL_GAP

    file.add(Line.simple(cursor, y, locked, [[0, 0], [0, height]]))
    cursor = column(results, result_width, cursor + CELL_GAP) + CELL_GAP

    file.add(Line.simple(
        x + BRACKET_WIDTH, y, locked,
        [[0, 0], [-BRACKET_WIDTH, 0], [-BRACKET_WIDTH, height], [0, height]],
    ))
    file.add(Line.simple(
        cursor, y, locked,
        [[0, 0], [BRACKET_WIDTH, 0], [BRACKET_WIDTH, height], [0, height]],
    ))

    width = cursor + BRACKET_WIDTH - x
    logger.debug(f"Drew {matrix.size}x{matrix.size} matrix at ({x}, {y}), "
                 f"size {width}x{height}")
    return width, height


def draw_steps(
    file: ExcalidrawFile,
    steps: Sequence[Step],
    x: int,
    y: int,
    locked: bool = False,
    precision: int = DEFAULT_PRECISION,
) -> tuple[int, int]:
    """
    Draws a reduction history left to right. Each matrix gets its step
    description as a caption, consecutive matrices are joined by `=>` and
    the last one is framed.

    Returns the width and height of the whole drawing.
    """
    if not steps:
        return 0, 0

    top = y + ROW_HEIGHT + FRAME_PADDING
    # a lone step is also the framed one, its frame needs the left padding
    cursor = x + FRAME_PADDING if len(steps) == 1 else x
    height = 0
    for index, step in enumerate(steps):
        if index > 0:
            arrow = file.add(Text.small_monospaced(
                cursor, top, locked, ARROW
            ))
            cursor += arrow.width + GRID_SIZE

        caption = file.add(Text.small_monospaced(
            cursor, y, locked, step.description
        ))
        width, matrix_height = draw_matrix(
            file, step.matrix, cursor, top, locked, precision
        )
        step_width = max(width, caption.width)
        height = max(height, matrix_height)

        if index == len(steps) - 1:
            file.add(Rectangle.simple(
                cursor - FRAME_PADDING,
                top - FRAME_PADDING,
                width + 2 * FRAME_PADDING,
                matrix_height + 2 * FRAME_PADDING,
                locked,
            ))
            cursor += max(width + FRAME_PADDING, step_width)
        else:
            cursor += step_width + GRID_SIZE

    return cursor - x, top - y + height + FRAME_PADDING
