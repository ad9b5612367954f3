"""
Command-line interface.

Reduces one of the bundled systems and prints every intermediate matrix,
either as box-drawn text or as an Excalidraw drawing.

Usage examples
--------------
$ row-reduce
      # the capacitor demo, reduced by hand
$ row-reduce --system atomic-energy --precision 2
$ row-reduce --system random --size 3 --seed 7 --excalidraw > steps.excalidraw
"""
import argparse
import logging
import sys

import numpy as np

from RowReductionLab.config import (
    DEFAULT_LOG_LEVEL, DEFAULT_PRECISION, LOG_LEVELS,
)
from RowReductionLab.exporters.excalidraw import ExcalidrawFile
from RowReductionLab.exporters.layout import draw_steps
from RowReductionLab.linear_system.examples import (
    build_atomic_energy, build_capacitor_demo, build_random_linear_system,
    demo_reduction,
)
from RowReductionLab.linear_system.matrix import LineMatrix, RowIndexError
from RowReductionLab.linear_system.solvers import Step, gauss_jordan, record
from RowReductionLab.logging_config import setup_logging

logger = logging.getLogger(__name__)

SYSTEMS = ("demo", "atomic-energy", "random")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="row-reduce",
        description="Gauss-Jordan row reduction, step by step.",
    )
    parser.add_argument("-s", "--system", choices=SYSTEMS, default="demo")
    parser.add_argument("-n", "--size", type=int, default=3,
                        help="size of the random system")
    parser.add_argument("--seed", type=int, default=20250508,
                        help="seed of the random system")
    parser.add_argument("--auto", action="store_true",
                        help="reduce the demo with partial pivoting instead "
                             "of the hand-written steps")
    parser.add_argument("-p", "--precision", type=int,
                        default=DEFAULT_PRECISION)
    parser.add_argument("--excalidraw", action="store_true",
                        help="print an Excalidraw drawing instead of text")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=LOG_LEVELS)
    parser.add_argument("--log-file", default=None)
    return parser


def initial_matrix(args: argparse.Namespace) -> LineMatrix:
    if args.system == "demo":
        return build_capacitor_demo()
    if args.system == "atomic-energy":
        return build_atomic_energy().to_line_matrix()
    return build_random_linear_system(args.size, seed=args.seed).to_line_matrix()


def reduce(args: argparse.Namespace) -> list[Step]:
    steps: list[Step] = []
    if args.system == "demo" and not args.auto:
        demo_reduction(steps)
        return steps

    matrix = initial_matrix(args)
    record(steps, "m", matrix)
    gauss_jordan(matrix, steps)
    return steps


def print_steps(steps: list[Step], precision: int) -> None:
    for index, step in enumerate(steps):
        if index == 0:
            print(f"{step.description} =")
        else:
            print(f"=> {step.description}")
        print(f"{step.matrix:.{precision}}")


def print_excalidraw(steps: list[Step], precision: int) -> None:
    file = ExcalidrawFile()
    draw_steps(file, steps, 0, 0, precision=precision)
    print(file.to_json())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.precision < 0:
        logger.error(f"Precision must not be negative, got {args.precision}")
        return 1

    try:
        steps = reduce(args)
    except (RowIndexError, ZeroDivisionError, ValueError,
            np.linalg.LinAlgError) as e:
        logger.error(f"Reduction failed: {e}")
        return 1

    logger.info(f"Solution: {steps[-1].matrix.solution()}")
    if args.excalidraw:
        print_excalidraw(steps, args.precision)
    else:
        print_steps(steps, args.precision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
