"""A queue of canvas-style render commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable

from gorana.style import StyleOption, match_style_option


class Command(IntEnum):
    """Render command codes."""

    ARC = 0
    ARC_TO = 1
    BEGIN_PATH = 2
    BEZIER_CURVE_TO = 3
    CLEAR_RECT = 4
    CLIP = 5
    CLOSE_PATH = 6
    DRAW_IMAGE = 7
    DRAW_SPRITE = 8
    FILL = 9
    FILL_TEXT = 10
    LINE_TO = 11
    MOVE_TO = 12
    PASTE_BITMAP = 13
    QUADRATIC_CURVE_TO = 14
    RECT = 15
    RESET = 16
    RESET_TRANSFORM = 17
    RESTORE = 18
    ROTATE = 19
    ROUNDED_RECT = 20
    SAVE = 21
    SCALE = 22
    SET_LINE_DASH = 23
    SET_TRANSFORM = 24
    SET_CTX = 25
    STROKE = 26
    STROKE_TEXT = 27
    TRANSFORM = 28
    TRANSLATE = 29
    ELLIPSE = 30
    TICK = 31


@dataclass(frozen=True)
class Box:
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class RenderCommand:
    command: Command
    options: Any = None


@dataclass(frozen=True)
class ArcOptions:
    r: float
    x: float
    y: float
    start: float
    end: float
    counter_clockwise: bool = False


@dataclass(frozen=True)
class EllipseOptions:
    p: Point
    r: Point
    rotation: float
    start: float
    end: float
    counterclockwise: bool = False


@dataclass(frozen=True)
class DrawImageOptions:
    img: str
    box: Box


@dataclass(frozen=True)
class DrawSpriteOptions:
    img: str
    source: Box
    destination: Box


@dataclass(frozen=True)
class PasteBitmapOptions:
    bitmap: bytes
    length: int
    channels: int


@dataclass(frozen=True)
class ArcToOptions:
    a: Point
    b: Point
    r: float


@dataclass(frozen=True)
class BezierCurveToOptions:
    c1: Point
    c2: Point
    p: Point


@dataclass(frozen=True)
class QuadraticCurveToOptions:
    c: Point
    p: Point


@dataclass(frozen=True)
class RoundedRectOptions:
    box: Box
    r: float


@dataclass(frozen=True)
class TextOptions:
    text: str
    point: Point
    max_width: float = 0.0


def match_set_ctx(a: RenderCommand, b: RenderCommand) -> bool:
    """Return True when both are set-context commands with matching options."""
    if a.command != Command.SET_CTX or b.command != Command.SET_CTX:
        return False
    if len(a.options) != len(b.options):
        return False
    return all(match_style_option(x, y) for x, y in zip(a.options, b.options))


@dataclass
class RenderQueue:
    """Collects render commands in the order they are issued."""

    commands: list[RenderCommand] = field(default_factory=list)

    def _push(self, command: Command, options: Any = None) -> None:
        self.commands.append(RenderCommand(command, options))

    def dedupe_ctx(self) -> list[RenderCommand]:
        """Return the commands without empty or repeated set-context commands.

        A set-context command is dropped when it matches the previous
        set-context command, even if other commands lie between them.
        """
        result: list[RenderCommand] = []
        previous: RenderCommand | None = None
        for cmd in self.commands:
            if cmd.command != Command.SET_CTX:
                result.append(cmd)
                continue
            if not cmd.options:
                continue
            if previous is not None and match_set_ctx(previous, cmd):
                previous = cmd
                continue
            result.append(cmd)
            previous = cmd
        return result

    def set_ctx(self, *args: StyleOption) -> None:
        """Queue a set-context command with options sorted by key.

        When several options share a key, only the first given is kept.
        """
        kept: list[StyleOption] = []
        for option in sorted(args, key=lambda o: o.key):
            if kept and kept[-1].key == option.key:
                continue
            kept.append(option)
        self._push(Command.SET_CTX, kept)

    def arc(self, opts: ArcOptions) -> None:
        self._push(Command.ARC, opts)

    def ellipse(self, opts: EllipseOptions) -> None:
        self._push(Command.ELLIPSE, opts)

    def draw_image(self, opts: DrawImageOptions) -> None:
        self._push(Command.DRAW_IMAGE, opts)

    def draw_sprite(self, opts: DrawSpriteOptions) -> None:
        self._push(Command.DRAW_SPRITE, opts)

    def paste_bitmap(self, opts: PasteBitmapOptions) -> None:
        self._push(Command.PASTE_BITMAP, opts)

    def arc_to(self, opts: ArcToOptions) -> None:
        self._push(Command.ARC_TO, opts)

    def bezier_curve_to(self, opts: BezierCurveToOptions) -> None:
        self._push(Command.BEZIER_CURVE_TO, opts)

    def move_to(self, p: Point) -> None:
        self._push(Command.MOVE_TO, p)

    def line_to(self, p: Point) -> None:
        self._push(Command.LINE_TO, p)

    def quadratic_curve_to(self, opts: QuadraticCurveToOptions) -> None:
        self._push(Command.QUADRATIC_CURVE_TO, opts)

    def rect(self, b: Box) -> None:
        self._push(Command.RECT, b)

    def clear_rect(self, b: Box) -> None:
        self._push(Command.CLEAR_RECT, b)

    def rounded_rect(self, opts: RoundedRectOptions) -> None:
        self._push(Command.ROUNDED_RECT, opts)

    def begin_path(self) -> None:
        self._push(Command.BEGIN_PATH)

    def clip(self) -> None:
        self._push(Command.CLIP)

    def close_path(self) -> None:
        self._push(Command.CLOSE_PATH)

    def fill(self) -> None:
        self._push(Command.FILL)

    def reset(self) -> None:
        self._push(Command.RESET)

    def reset_transform(self) -> None:
        self._push(Command.RESET_TRANSFORM)

    def restore(self) -> None:
        self._push(Command.RESTORE)

    def rotate(self, angle: float) -> None:
        self._push(Command.ROTATE, angle)

    def save(self) -> None:
        self._push(Command.SAVE)

    def scale(self, p: Point) -> None:
        # Recorded under the rotate code, as the renderer expects.
        self._push(Command.ROTATE, p)

    def set_line_dash(self, opts: Iterable[float]) -> None:
        self._push(Command.SET_LINE_DASH, list(opts))

    def set_transform(self, matrix: Iterable[float]) -> None:
        self._push(Command.SET_TRANSFORM, list(matrix))

    def transform(self, matrix: Iterable[float]) -> None:
        self._push(Command.TRANSFORM, list(matrix))

    def translate(self, p: Point) -> None:
        # Recorded under the transform code, as the renderer expects.
        self._push(Command.TRANSFORM, p)

    def stroke(self) -> None:
        self._push(Command.STROKE)

    def tick(self) -> None:
        self._push(Command.TICK)

    def fill_text(self, opts: TextOptions) -> None:
        self._push(Command.FILL_TEXT, opts)

    def stroke_text(self, opts: TextOptions) -> None:
        self._push(Command.STROKE_TEXT, opts)