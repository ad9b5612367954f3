""" Text rendering of an augmented matrix """

from __future__ import annotations

from typing import TYPE_CHECKING

from RowReductionLab.config import DEFAULT_PRECISION

if TYPE_CHECKING:
    from RowReductionLab.linear_system.matrix import LineMatrix


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Fixed-precision string without trailing zeros.

    >>> format_number(0.5)
    '0.5'
    >>> format_number(-0.0001)
    '0'
    """
    text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == "-0":
        return "0"
    return text


def column_strings(
    matrix: LineMatrix,
    precision: int = DEFAULT_PRECISION,
) -> tuple[list[list[str]], list[int], list[str], int]:
    """
    Formats every cell of the matrix.

    Returns:
    - cells: `cells[row][col]` strings of the coefficient block
    - col_widths: the longest string of each coefficient column
    - results: strings of the result column
    - result_width: the longest string of the result column
    """
    cells = [
        [format_number(value, precision) for value in row]
        for row in matrix.values
    ]
    col_widths = [
        max(len(cells[row][col]) for row in range(matrix.size))
        for col in range(matrix.size)
    ]
    results = [format_number(value, precision) for value in matrix.result]
    result_width = max(len(text) for text in results)
    return cells, col_widths, results, result_width


def render_text(matrix: LineMatrix, precision: int = DEFAULT_PRECISION) -> str:
    """ Box-drawn rendering with the result column split off by `│`. """
    cells, col_widths, results, result_width = column_strings(
        matrix, precision
    )
    width = sum(col_widths) + result_width + matrix.size

    lines = [f"┌╴{'':{width}}╶┐"]
    for row in range(matrix.size):
        line = "│"
        for col, col_width in enumerate(col_widths):
            line += f" {cells[row][col]:>{col_width}}"
        line += f"│{results[row]:>{result_width}} │"
        lines.append(line)
    lines.append(f"└╴{'':{width}}╶┘")
    return "\n".join(lines)


def parse_precision(format_spec: str) -> int:
    """ Reads the precision out of a `.N` format spec, empty means default. """
    if not format_spec:
        return DEFAULT_PRECISION
    if not format_spec.startswith('.') or not format_spec[1:].isdigit():
        raise ValueError(
            f"Invalid format specifier {format_spec!r}, expected '.N'"
        )
    return int(format_spec[1:])
