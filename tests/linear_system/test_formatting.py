import pytest
from RowReductionLab.linear_system.examples import (
    build_capacitor_demo, demo_reduction,
)
from RowReductionLab.linear_system.formatting import (
    column_strings, format_number, parse_precision, render_text,
)


def test_format_number_trims_trailing_zeros():
    assert format_number(1.0) == "1"
    assert format_number(10.0) == "10"
    assert format_number(0.5) == "0.5"
    assert format_number(2.0 / 3.0) == "0.667"
    assert format_number(-4.13333, 2) == "-4.13"


def test_format_number_negative_zero():
    assert format_number(-0.0) == "0"
    assert format_number(-0.0001) == "0"
    assert format_number(-0.0004, 3) == "0"
    assert format_number(-0.0006, 3) == "-0.001"


def test_format_number_without_decimal_point():
    assert format_number(100.0, 0) == "100"
    assert format_number(-0.2, 0) == "0"


def test_column_strings():
    cells, col_widths, results, result_width = column_strings(
        build_capacitor_demo()
    )
    assert cells == [["90000", "300"], ["360000", "600"]]
    assert col_widths == [6, 3]
    assert results == ["620", "0"]
    assert result_width == 3


def test_render_initial_demo():
    expected = "\n".join([
        "┌╴              ╶┐",
        "│  90000 300│620 │",
        "│ 360000 600│  0 │",
        "└╴              ╶┘",
    ])
    assert render_text(build_capacitor_demo()) == expected
    assert str(build_capacitor_demo()) == expected


def test_render_reduced_demo():
    expected = "\n".join([
        "┌╴          ╶┐",
        "│ 1 0│-0.007 │",
        "│ 0 1│ 4.133 │",
        "└╴          ╶┘",
    ])
    assert render_text(demo_reduction()) == expected


def test_format_spec_selects_precision():
    reduced = demo_reduction()
    assert f"{reduced:.1}" == render_text(reduced, 1)
    assert f"{reduced}" == render_text(reduced)
    assert "-0.00689" in f"{reduced:.5}"


def test_lines_have_equal_width():
    for precision in range(5):
        lines = render_text(demo_reduction(), precision).splitlines()
        assert len({len(line) for line in lines}) == 1


def test_parse_precision():
    assert parse_precision(".4") == 4
    with pytest.raises(ValueError):
        parse_precision("4f")
    with pytest.raises(ValueError):
        parse_precision(".")
