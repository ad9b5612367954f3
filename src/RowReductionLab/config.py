"""
Configuration
=============
Global defaults shared by the text formatter, the solvers and the drawing
exporter. Every value can be overridden with a `ROWREDUCTION_*` environment
variable, which is read once at import time.

Exports:
    DEFAULT_PRECISION (int): Digits after the decimal point when formatting.
    PIVOT_TOLERANCE (float): Pivots smaller than this count as zero.
    GRID_SIZE (int): Excalidraw grid size in pixels.
    VIEW_BACKGROUND_COLOR (str): Excalidraw canvas background.
    DEFAULT_LOG_LEVEL (str): Level name used by the CLI.
"""
import os


def get_env(name: str, default: str) -> str:
    """ Read `ROWREDUCTION_<name>` from the environment. """
    return os.environ.get(f"ROWREDUCTION_{name}", default)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_log_level(name: str) -> str:
    level = name.upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {name!r}, expected one of {LOG_LEVELS}"
        )
    return level


DEFAULT_PRECISION: int = int(get_env("PRECISION", "3"))
PIVOT_TOLERANCE: float = float(get_env("PIVOT_TOLERANCE", "1e-12"))
GRID_SIZE: int = int(get_env("GRID_SIZE", "20"))
VIEW_BACKGROUND_COLOR: str = get_env("BACKGROUND", "#ffffff")
DEFAULT_LOG_LEVEL: str = parse_log_level(get_env("LOG_LEVEL", "WARNING"))
