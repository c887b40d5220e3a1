# gorana

Two small building blocks for drawing user interfaces on a 2D canvas:

- **`gorana.render_queue`**: a queue of canvas drawing commands such as paths,
  rectangles, text, images and drawing-context style changes. The commands
  are recorded in order, so you can hand them to whatever renderer you use.
- **`gorana.style`**: the style options that a set-context command carries,
  such as fill and stroke style, line width and cap, and font settings. It
  also holds the enumerations those options take.
- **`gorana.layout`**: a box layout engine in the style of flexbox. A node's
  size can be fixed, can fit its content, or can grow into the space that is
  left. Gaps, padding, direction and alignment are supported.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Render queue

```python
from gorana.render_queue import RenderQueue, Box, Point, TextOptions
from gorana import style

queue = RenderQueue()
queue.set_ctx(style.fill_style("#000"), style.line_cap(style.LineCap.BUTT))
queue.begin_path()
queue.move_to(Point(0, 0))
queue.line_to(Point(10, 10))
queue.stroke()
queue.rect(Box(0, 0, 100, 50))
queue.fill_text(TextOptions(text="hello", point=Point(10, 20), max_width=100))

for command in queue.dedupe_ctx():
    print(command.command.name, command.options)
```

Every method appends one `RenderCommand` to `queue.commands`. A
`RenderCommand` pairs a `Command` code with its options: an options
dataclass such as `ArcOptions`, `EllipseOptions`, `DrawImageOptions`,
`DrawSpriteOptions`, `PasteBitmapOptions`, `ArcToOptions`,
`BezierCurveToOptions`, `QuadraticCurveToOptions`, `RoundedRectOptions` or
`TextOptions`, or else a `Box`, a `Point`, a number, a list of numbers, or
`None`.

- `set_ctx(*options)` sorts the style options by key. When several options
  share a key, only the first one given is kept.
- `dedupe_ctx()` returns a new list of commands and leaves the queue as it
  is. Set-context commands with no options are dropped. A set-context command
  is also dropped when it matches the previous set-context command, even if
  other commands lie between them.
- `match_set_ctx(a, b)` tells whether two commands are both set-context
  commands carrying the same options.
- `scale(p)` records its point under the `Command.ROTATE` code, and
  `translate(p)` records its point under `Command.TRANSFORM`.

`gorana.style` builds `StyleOption` values through `fill_style`, `line_cap`,
`line_width`, `stroke_style`, `font_face`, `font_size`, `font_style`,
`font_weight`, `text_baseline`, `text_align`, `radius`, `line_dash_offset`,
`line_join` and `pattern`. `match_style_option(a, b)` compares two options.

## Layout

```python
from gorana.layout import (
    node, node_id, row, width, height, fix, grow, maximum, gap, padding,
    children, layout, export,
)

root = node(
    node_id("root"), row(),
    width(fix(640)), height(fix(480)),
    gap(16), padding(2),
    children(
        node(node_id("a"), width(grow(1)), height(grow(1))),
        node(node_id("b"), width(grow(2), maximum(150)), height(grow(1))),
    ),
)

layout(root)
tree = export(root)
for child in tree.children:
    print(child.id, child.x, child.y, child.w, child.h)
```

You build nodes with `node(...)` from these arguments:

- `row()` or `column()` set the direction.
- `align(Alignment...)` sets the alignment.
- `gap(value)` sets the gap between children.
- `padding(...)` takes one value for all sides, two values (vertical, then
  horizontal), or four values (top, right, bottom, left).
- `node_id(value)` sets the node's id.
- `children(...)` sets the child nodes.
- `width(...)` and `height(...)` set the size on one axis (or use
  `size(axis, ...)`). They take `fix(v)`, `fit()` or `grow(share)`, together
  with `minimum(v)` and `maximum(v)`.

An axis with no size given fits its content. A node with no id gets a random
eight-character id.

`layout(root)` computes the sizes and then the positions on both axes. You
can also run the passes one at a time with `compute_size(axis, root)` and
`compute_position(axis, root)`. `export(root)` returns an `OutputItem` tree
holding each node's `x`, `y`, `w` and `h`.

`layout` raises `LayoutError` in one case. That is when the node it starts
from is sized to fit its content and has a child that grows along the same
axis.

## What it does not do

The package only records drawing commands. It has no renderer and draws
nothing itself.