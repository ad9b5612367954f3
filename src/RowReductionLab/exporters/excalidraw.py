""" Excalidraw drawing file: elements, app state and JSON serialization.

Only the subset of the schema needed to draw matrices is modelled:
rectangles, lines and text. Keys are written in camelCase.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Protocol

from RowReductionLab.config import GRID_SIZE, VIEW_BACKGROUND_COLOR

logger = logging.getLogger(__name__)

ANGLE = 0
STROKE_COLOR = "#000000"
BACKGROUND_COLOR = "transparent"
FILL_STYLE = "hachure"
STROKE_WIDTH = 1
STROKE_STYLE = "solid"
ROUGHNESS = 0
OPACITY = 100
STROKE_SHARPNESS = "sharp"
LOCKED = False
FONT_SIZE_SMALL = 16
FONT_SIZE_MEDIUM = 20
FONT_SIZE_LARGE = 28
FONT_SIZE_EXTRA_LARGE = 36
FONT_FAMILY_HAND_DRAWN = 1
FONT_FAMILY_NORMAL = 2
FONT_FAMILY_MONOSPACE = 3
TEXT_ALIGN_LEFT = "left"
TEXT_ALIGN_CENTER = "center"
TEXT_ALIGN_RIGHT = "right"
VERTICAL_ALIGN_TOP = "top"
VERTICAL_ALIGN_CENTER = "center"
VERTICAL_ALIGN_BOTTOM = "bottom"
BASELINE = 15

# Metrics of FONT_SIZE_SMALL in FONT_FAMILY_MONOSPACE
CHAR_WIDTH = 9
LINE_HEIGHT = 19
TEXT_PADDING = 4


def camel_case(name: str) -> str:
    head, *tail = name.split('_')
    return head + ''.join(word.capitalize() for word in tail)


def camel_case_dict(data: dict[str, Any]) -> dict[str, Any]:
    return {camel_case(key): value for key, value in data.items()}


@dataclass
class Element:
    """ Fields every Excalidraw element carries. """
    type: ClassVar[str]

    x: int
    y: int
    width: int
    height: int
    angle: int = ANGLE
    stroke_color: str = STROKE_COLOR
    background_color: str = BACKGROUND_COLOR
    fill_style: str = FILL_STYLE
    stroke_width: int = STROKE_WIDTH
    stroke_style: str = STROKE_STYLE
    roughness: int = field(default=ROUGHNESS, init=False)
    opacity: int = OPACITY
    stroke_sharpness: str = STROKE_SHARPNESS
    locked: bool = LOCKED

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **camel_case_dict(asdict(self))}


@dataclass
class Text(Element):
    type: ClassVar[str] = "text"

    text: str = ""
    font_size: int = FONT_SIZE_SMALL
    font_family: int = FONT_FAMILY_MONOSPACE
    text_align: str = TEXT_ALIGN_LEFT
    vertical_align: str = VERTICAL_ALIGN_TOP
    baseline: int = field(default=BASELINE, init=False)

    @classmethod
    def small_monospaced(cls, x: int, y: int, locked: bool, text: str) -> Text:
        """ Left/top aligned 16px monospace text sized to its content. """
        lines = text.splitlines()
        longest = max((len(line) for line in lines), default=0)
        return cls(
            x=x,
            y=y,
            width=TEXT_PADDING + longest * CHAR_WIDTH,
            height=len(lines) * LINE_HEIGHT,
            locked=locked,
            text=text,
            font_size=FONT_SIZE_SMALL,
            font_family=FONT_FAMILY_MONOSPACE,
            text_align=TEXT_ALIGN_LEFT,
            vertical_align=VERTICAL_ALIGN_TOP,
        )


@dataclass
class Line(Element):
    type: ClassVar[str] = "line"

    points: list[list[int]] = field(default_factory=list)

    @classmethod
    def simple(
        cls, x: int, y: int, locked: bool, points: list[list[int]]
    ) -> Line:
        """ Polyline from (x, y); `points` are offsets relative to it. """
        xs = [0] + [p[0] for p in points]
        ys = [0] + [p[1] for p in points]
        return cls(
            x=x,
            y=y,
            width=abs(min(xs)) + abs(max(xs)),
            height=abs(min(ys)) + abs(max(ys)),
            locked=locked,
            points=[list(p) for p in points],
        )


@dataclass
class Rectangle(Element):
    type: ClassVar[str] = "rectangle"

    @classmethod
    def simple(
        cls, x: int, y: int, width: int, height: int, locked: bool
    ) -> Rectangle:
        return cls(x=x, y=y, width=width, height=height, locked=locked)


@dataclass
class AppState:
    grid_size: int = GRID_SIZE
    view_background_color: str = VIEW_BACKGROUND_COLOR

    def to_dict(self) -> dict[str, Any]:
        return camel_case_dict(asdict(self))


class Drawable(Protocol):

    def draw(
        self, file: ExcalidrawFile, x: int, y: int, locked: bool
    ) -> tuple[int, int]:
        """ Draw the element onto a file

        Returns the width and height of the drawn element
        """
        ...


@dataclass
class ExcalidrawFile:
    type: str = "excalidraw"
    version: int = 2
    source: str | None = None
    elements: list[Element] = field(default_factory=list)
    app_state: AppState = field(default_factory=AppState)
    files: dict[str, Any] = field(default_factory=dict)

    def add(self, element: Element) -> Element:
        self.elements.append(element)
        return element

    def draw(
        self, element: Drawable, x: int, y: int, locked: bool = LOCKED
    ) -> tuple[int, int]:
        return element.draw(self, x, y, locked)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "version": self.version,
            "source": self.source,
            "elements": [element.to_dict() for element in self.elements],
            "appState": self.app_state.to_dict(),
            "files": dict(self.files),
        }

    def to_json(self, indent: int | None = 2) -> str:
        logger.debug(f"Serializing {len(self.elements)} elements.")
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
