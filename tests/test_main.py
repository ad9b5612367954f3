import json
import logging
import sys

from RowReductionLab.logging_config import setup_logging
from RowReductionLab.main import build_parser, main


def test_demo_text(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out

    assert out.startswith("m =\n┌╴")
    assert "=> R2 += -4 * R1" in out
    assert "=> R1 /= 90000" in out
    assert out.rstrip().endswith("\n".join([
        "│ 1 0│-0.007 │",
        "│ 0 1│ 4.133 │",
        "└╴          ╶┘",
    ]))


def test_precision_option(capsys):
    assert main(["--precision", "1"]) == 0
    out = capsys.readouterr().out
    assert "│ 0 1│4.1 │" in out


def test_auto_reduction(capsys):
    assert main(["--system", "atomic-energy", "--precision", "2"]) == 0
    out = capsys.readouterr().out
    assert "=> R" in out
    assert out.count("┌╴") == out.count("└╴")


def test_excalidraw_output(capsys):
    assert main(["--system", "random", "--size", "3", "--excalidraw"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert data["type"] == "excalidraw"
    assert data["appState"]["gridSize"] == 20
    kinds = {element["type"] for element in data["elements"]}
    assert kinds == {"text", "line", "rectangle"}


def test_failures_exit_with_error(capsys):
    assert main(["--system", "random", "--size", "0"]) == 1
    assert main(["--precision", "-1"]) == 1
    assert capsys.readouterr().out == ""


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.system == "demo"
    assert args.auto is False
    assert args.excalidraw is False


def test_setup_logging_uses_stderr(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))

    logger = logging.getLogger("RowReductionLab")
    assert len(logger.handlers) == 2
    assert logger.handlers[0].stream is sys.stderr

    logging.getLogger("RowReductionLab.test").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    setup_logging(logging.WARNING)
    assert len(logger.handlers) == 1


def test_setup_logging_closes_replaced_handlers(tmp_path):
    setup_logging(logging.DEBUG, str(tmp_path / "first.log"))
    logger = logging.getLogger("RowReductionLab")
    file_handler = logger.handlers[1]

    setup_logging(logging.WARNING)

    assert file_handler not in logger.handlers
    assert file_handler.stream is None
