"""Drawing-context style options and the enumerations they take."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class StyleKey(IntEnum):
    """Identifies which property of the drawing context a style option sets."""

    FILL_STYLE = 0
    LINE_CAP = 1
    LINE_WIDTH = 2
    STROKE_STYLE = 3
    FONT_FACE = 4
    FONT_SIZE = 5
    FONT_STYLE = 6
    FONT_WEIGHT = 7
    TEXT_BASELINE = 8
    TEXT_ALIGN = 9
    RADIUS = 10
    LINE_DASH_OFFSET = 11
    LINE_JOIN = 12
    PATTERN = 13


class FontStyle(IntEnum):
    NORMAL = 0
    ITALIC = 1


class FontWeight(IntEnum):
    W100 = 0
    W200 = 1
    W300 = 2
    W400 = 3
    W500 = 4
    W600 = 5
    W700 = 6
    W800 = 7
    W900 = 8


class LineCap(IntEnum):
    BUTT = 0
    ROUND = 1
    SQUARE = 2


class LineJoin(IntEnum):
    ROUND = 0
    BEVEL = 1
    MITER = 2


class TextAlign(IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    START = 3
    END = 4


class TextBaseline(IntEnum):
    TOP = 0
    HANGING = 1
    MIDDLE = 2
    ALPHABETIC = 3
    IDEOGRAPHIC = 4
    BOTTOM = 5


@dataclass(frozen=True)
class StyleOption:
    """A single key/value setting for the drawing context."""

    key: StyleKey
    value: Any


def fill_style(value: str) -> StyleOption:
    return StyleOption(StyleKey.FILL_STYLE, value)


def line_cap(value: LineCap) -> StyleOption:
    return StyleOption(StyleKey.LINE_CAP, value)


def line_width(value: float) -> StyleOption:
    return StyleOption(StyleKey.LINE_WIDTH, value)


def stroke_style(value: str) -> StyleOption:
    return StyleOption(StyleKey.STROKE_STYLE, value)


def font_face(value: str) -> StyleOption:
    return StyleOption(StyleKey.FONT_FACE, value)


def font_size(value: float) -> StyleOption:
    return StyleOption(StyleKey.FONT_SIZE, value)


def font_style(value: FontStyle) -> StyleOption:
    return StyleOption(StyleKey.FONT_STYLE, value)


def font_weight(value: FontWeight) -> StyleOption:
    return StyleOption(StyleKey.FONT_WEIGHT, value)


def text_baseline(value: TextBaseline) -> StyleOption:
    return StyleOption(StyleKey.TEXT_BASELINE, value)


def text_align(value: TextAlign) -> StyleOption:
    return StyleOption(StyleKey.TEXT_ALIGN, value)


def radius(value: float) -> StyleOption:
    return StyleOption(StyleKey.RADIUS, value)


def line_dash_offset(value: float) -> StyleOption:
    return StyleOption(StyleKey.LINE_DASH_OFFSET, value)


def line_join(value: LineJoin) -> StyleOption:
    return StyleOption(StyleKey.LINE_JOIN, value)


def pattern(value: str) -> StyleOption:
    return StyleOption(StyleKey.PATTERN, value)


def match_style_option(a: StyleOption, b: StyleOption) -> bool:
    """Return True when both options set the same key to the same value."""
    return a.key == b.key and a.value == b.value