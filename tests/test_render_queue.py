import pytest

from gorana import style
from gorana.render_queue import (
    ArcOptions,
    ArcToOptions,
    BezierCurveToOptions,
    Box,
    Command,
    DrawImageOptions,
    DrawSpriteOptions,
    EllipseOptions,
    PasteBitmapOptions,
    Point,
    QuadraticCurveToOptions,
    RenderCommand,
    RenderQueue,
    RoundedRectOptions,
    TextOptions,
    match_set_ctx,
)
from gorana.style import LineCap, StyleKey, StyleOption


def test_set_ctx_command_constructor():
    q = RenderQueue()
    q.set_ctx(
        style.fill_style("#000"),
        style.line_cap(LineCap.BUTT),
        style.fill_style("asd"),
        style.fill_style("asd"),
        style.fill_style("asd"),
    )
    result = q.commands[0]
    expected = RenderCommand(
        Command.SET_CTX,
        [StyleOption(StyleKey.FILL_STYLE, "#000"), StyleOption(StyleKey.LINE_CAP, LineCap.BUTT)],
    )
    assert match_set_ctx(result, expected)


def test_set_ctx_sorts_by_key():
    q = RenderQueue()
    q.set_ctx(style.pattern("p"), style.line_width(2.0), style.fill_style("#fff"))
    keys = [o.key for o in q.commands[0].options]
    assert keys == [StyleKey.FILL_STYLE, StyleKey.LINE_WIDTH, StyleKey.PATTERN]


def test_match_set_ctx_rejects_other_commands():
    a = RenderCommand(Command.SET_CTX, [])
    b = RenderCommand(Command.FILL)
    assert not match_set_ctx(a, b)
    assert not match_set_ctx(b, a)


def test_match_set_ctx_rejects_different_lengths_and_values():
    a = RenderCommand(Command.SET_CTX, [style.fill_style("#000")])
    b = RenderCommand(Command.SET_CTX, [style.fill_style("#000"), style.line_width(1.0)])
    c = RenderCommand(Command.SET_CTX, [style.fill_style("#fff")])
    assert not match_set_ctx(a, b)
    assert not match_set_ctx(a, c)
    assert match_set_ctx(a, a)


def test_dedupe_ctx_drops_empty_and_repeated():
    q = RenderQueue()
    q.set_ctx()
    q.set_ctx(style.fill_style("#000"))
    q.fill()
    q.set_ctx(style.fill_style("#000"))
    q.stroke()
    q.set_ctx(style.fill_style("#fff"))
    result = q.dedupe_ctx()
    assert [c.command for c in result] == [
        Command.SET_CTX,
        Command.FILL,
        Command.STROKE,
        Command.SET_CTX,
    ]
    assert result[-1].options == [style.fill_style("#fff")]
    assert len(q.commands) == 6


def test_dedupe_ctx_keeps_changed_then_reverted():
    q = RenderQueue()
    q.set_ctx(style.fill_style("a"))
    q.set_ctx(style.fill_style("b"))
    q.set_ctx(style.fill_style("a"))
    assert len(q.dedupe_ctx()) == 3


@pytest.mark.parametrize(
    "method, command",
    [
        ("begin_path", Command.BEGIN_PATH),
        ("clip", Command.CLIP),
        ("close_path", Command.CLOSE_PATH),
        ("fill", Command.FILL),
        ("reset", Command.RESET),
        ("reset_transform", Command.RESET_TRANSFORM),
        ("restore", Command.RESTORE),
        ("save", Command.SAVE),
        ("stroke", Command.STROKE),
        ("tick", Command.TICK),
    ],
)
def test_simple_commands(method, command):
    q = RenderQueue()
    getattr(q, method)()
    assert q.commands == [RenderCommand(command, None)]


@pytest.mark.parametrize(
    "method, command, options",
    [
        ("arc", Command.ARC, ArcOptions(5, 1, 2, 0, 3.14, True)),
        ("ellipse", Command.ELLIPSE, EllipseOptions(Point(1, 2), Point(3, 4), 0.5, 0, 1)),
        ("draw_image", Command.DRAW_IMAGE, DrawImageOptions("img", Box(1, 2, 3, 4))),
        ("draw_sprite", Command.DRAW_SPRITE, DrawSpriteOptions("s", Box(0, 0, 8, 8), Box(1, 1, 8, 8))),
        ("paste_bitmap", Command.PASTE_BITMAP, PasteBitmapOptions(b"\x00\x01", 2, 1)),
        ("arc_to", Command.ARC_TO, ArcToOptions(Point(0, 0), Point(1, 1), 2)),
        ("bezier_curve_to", Command.BEZIER_CURVE_TO, BezierCurveToOptions(Point(0, 1), Point(1, 0), Point(2, 2))),
        ("move_to", Command.MOVE_TO, Point(3, 4)),
        ("line_to", Command.LINE_TO, Point(5, 6)),
        ("quadratic_curve_to", Command.QUADRATIC_CURVE_TO, QuadraticCurveToOptions(Point(1, 1), Point(2, 2))),
        ("rect", Command.RECT, Box(0, 0, 10, 10)),
        ("clear_rect", Command.CLEAR_RECT, Box(1, 1, 5, 5)),
        ("rounded_rect", Command.ROUNDED_RECT, RoundedRectOptions(Box(0, 0, 4, 4), 1)),
        ("rotate", Command.ROTATE, 0.75),
        ("fill_text", Command.FILL_TEXT, TextOptions("hi", Point(1, 2), 100)),
        ("stroke_text", Command.STROKE_TEXT, TextOptions("hi", Point(1, 2))),
    ],
)
def test_commands_with_options(method, command, options):
    q = RenderQueue()
    getattr(q, method)(options)
    assert q.commands == [RenderCommand(command, options)]


def test_scale_and_translate_codes():
    q = RenderQueue()
    q.scale(Point(2, 2))
    q.translate(Point(3, 4))
    assert q.commands == [
        RenderCommand(Command.ROTATE, Point(2, 2)),
        RenderCommand(Command.TRANSFORM, Point(3, 4)),
    ]


def test_matrix_and_dash_commands():
    q = RenderQueue()
    q.set_line_dash((4, 2))
    q.set_transform([1, 0, 0, 1, 0, 0])
    q.transform([1, 0, 0, 1, 5, 5])
    assert [c.command for c in q.commands] == [
        Command.SET_LINE_DASH,
        Command.SET_TRANSFORM,
        Command.TRANSFORM,
    ]
    assert q.commands[0].options == [4, 2]
    assert q.commands[2].options == [1, 0, 0, 1, 5, 5]


def test_commands_keep_issue_order():
    q = RenderQueue()
    q.begin_path()
    q.move_to(Point(0, 0))
    q.line_to(Point(1, 1))
    q.close_path()
    assert [c.command for c in q.commands] == [
        Command.BEGIN_PATH,
        Command.MOVE_TO,
        Command.LINE_TO,
        Command.CLOSE_PATH,
    ]


def test_command_codes_follow_declared_order():
    q = RenderQueue()
    q.arc(ArcOptions(1, 0, 0, 0, 1, False))
    q.set_ctx(style.fill_style("#000"))
    q.tick()
    assert [c.command for c in q.commands] == [0, 25, 31]