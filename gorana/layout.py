"""A box layout engine with fixed, fitting and growing sizes."""

from __future__ import annotations

import random
import string
from contextlib import suppress
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

NODE_ID_LENGTH = 8
_ID_ALPHABET = string.ascii_letters + string.digits


class Axis(IntEnum):
    X = 0
    Y = 1


class ArgumentKey(IntEnum):
    PADDING = 0
    GAP = 1
    SIZE = 2
    DIRECTION = 3
    ALIGNMENT = 4
    CHILDREN = 5
    ID = 6


class SizeKey(IntEnum):
    GROW = 0
    FIT = 1
    FIX = 2
    MIN = 3
    MAX = 4


class Alignment(IntEnum):
    START = 0
    CENTER = 1
    END = 2


class Direction(IntEnum):
    ROW = 0
    COLUMN = 1


class LayoutError(Exception):
    """Raised when a node tree cannot be laid out."""


@dataclass
class Box:
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Argument:
    """A single setting passed to :func:`node`."""

    key: ArgumentKey
    value: Any


@dataclass(frozen=True)
class PaddingValue:
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class SizeArgument:
    key: SizeKey
    value: float = 0.0


@dataclass
class AxisSize:
    """How a node is sized along one axis."""

    min: float = 0.0
    max: float = 0.0
    value: float = 0.0
    kind: SizeKey = SizeKey.GROW
    axis: Axis = Axis.X


@dataclass(eq=False)
class NodeItem:
    """A node of the layout tree together with its computed box."""

    id: str = ""
    parent: Optional[NodeItem] = field(default=None, repr=False)
    children: list[NodeItem] = field(default_factory=list)
    padding: Optional[PaddingValue] = None
    gap: float = 0.0
    sizes: dict[Axis, AxisSize] = field(default_factory=dict)
    box: Box = field(default_factory=Box)
    direction: Direction = Direction.ROW
    alignment: Alignment = Alignment.START
    computed: dict[Axis, bool] = field(default_factory=dict)

    def is_root(self) -> bool:
        return self.parent is None

    def is_computed(self, axis: Axis) -> bool:
        return self.computed.get(axis, False)

    def is_along_axis(self, axis: Axis) -> bool:
        """Return True when children are laid out one after another on ``axis``."""
        if axis == Axis.X:
            return self.direction == Direction.ROW
        if axis == Axis.Y:
            return self.direction == Direction.COLUMN
        return False

    def padding_by_axis(self, axis: Axis) -> float:
        """Total padding on both ends of ``axis``."""
        if self.padding is None:
            return 0.0
        if axis == Axis.X:
            return self.padding.left + self.padding.right
        return self.padding.bottom + self.padding.top

    def initial_padding_by_axis(self, axis: Axis) -> float:
        """Padding at the start of ``axis``."""
        if self.padding is None:
            return 0.0
        if axis == Axis.X:
            return self.padding.left
        return self.padding.top

    def position(self, axis: Axis) -> float:
        if axis == Axis.X:
            return self.box.x
        if axis == Axis.Y:
            return self.box.y
        return 0.0

    def set_position(self, axis: Axis, value: float) -> None:
        if axis == Axis.X:
            self.box.x = value
        elif axis == Axis.Y:
            self.box.y = value

    def side(self, axis: Axis) -> float:
        if axis == Axis.X:
            return self.box.w
        if axis == Axis.Y:
            return self.box.h
        return 0.0

    def set_side(self, axis: Axis, value: float) -> None:
        if axis == Axis.X:
            self.box.w = value
        elif axis == Axis.Y:
            self.box.h = value

    def _has_kind(self, axis: Axis, kind: SizeKey) -> bool:
        s = self.sizes.get(axis)
        return s is not None and s.kind == kind

    def is_fix(self, axis: Axis) -> bool:
        return self._has_kind(axis, SizeKey.FIX)

    def is_fit(self, axis: Axis) -> bool:
        return self._has_kind(axis, SizeKey.FIT)

    def is_grow(self, axis: Axis) -> bool:
        return self._has_kind(axis, SizeKey.GROW)

    def has_grow_children(self, axis: Axis) -> bool:
        return any(child.is_grow(axis) for child in self.children)


@dataclass(eq=False)
class OutputItem:
    """The exported geometry of a laid-out node."""

    id: str
    parent: Optional[OutputItem] = field(default=None, repr=False)
    children: list[OutputItem] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


# Arguments


def row() -> Argument:
    return Argument(ArgumentKey.DIRECTION, Direction.ROW)


def column() -> Argument:
    return Argument(ArgumentKey.DIRECTION, Direction.COLUMN)


def align(value: Alignment) -> Argument:
    return Argument(ArgumentKey.ALIGNMENT, Alignment(value))


def gap(value: float) -> Argument:
    return Argument(ArgumentKey.GAP, value)


def node_id(value: str) -> Argument:
    return Argument(ArgumentKey.ID, value)


def children(*args: NodeItem) -> Argument:
    return Argument(ArgumentKey.CHILDREN, list(args))


def padding(*args: float) -> Argument:
    """Padding from one value (all sides), two (vertical, horizontal)
    or four (top, right, bottom, left); any other count gives no padding."""
    value: Optional[PaddingValue] = None
    if len(args) == 1:
        (p,) = args
        value = PaddingValue(top=p, bottom=p, left=p, right=p)
    elif len(args) == 2:
        vertical, horizontal = args
        value = PaddingValue(
            top=vertical, bottom=vertical, left=horizontal, right=horizontal
        )
    elif len(args) == 4:
        top, right, bottom, left = args
        value = PaddingValue(top=top, right=right, bottom=bottom, left=left)
    return Argument(ArgumentKey.PADDING, value)


def grow(value: float) -> SizeArgument:
    return SizeArgument(SizeKey.GROW, value)


def fix(value: float) -> SizeArgument:
    return SizeArgument(SizeKey.FIX, value)


def fit() -> SizeArgument:
    return SizeArgument(SizeKey.FIT)


def minimum(value: float) -> SizeArgument:
    return SizeArgument(SizeKey.MIN, value)


def maximum(value: float) -> SizeArgument:
    return SizeArgument(SizeKey.MAX, value)


def size(axis: Axis, *args: SizeArgument) -> Argument:
    """Build a size setting for ``axis``; the last sizing kind given wins."""
    s = AxisSize(axis=axis)
    for arg in args:
        if arg.key == SizeKey.MIN:
            s.min = arg.value
        elif arg.key == SizeKey.MAX:
            s.max = arg.value
        else:
            s.kind = arg.key
            s.value = arg.value
    return Argument(ArgumentKey.SIZE, s)


def width(*args: SizeArgument) -> Argument:
    return size(Axis.X, *args)


def height(*args: SizeArgument) -> Argument:
    return size(Axis.Y, *args)


def _random_id() -> str:
    return "".join(random.choices(_ID_ALPHABET, k=NODE_ID_LENGTH))


def node(*args: Argument) -> NodeItem:
    """Create a node from arguments; unset sizes fit their content."""
    item = NodeItem()
    for arg in args:
        if arg.key == ArgumentKey.GAP:
            item.gap = arg.value
        elif arg.key == ArgumentKey.PADDING:
            item.padding = arg.value
        elif arg.key == ArgumentKey.CHILDREN:
            for child in arg.value:
                child.parent = item
            item.children = list(arg.value)
        elif arg.key == ArgumentKey.SIZE:
            item.sizes[arg.value.axis] = arg.value
        elif arg.key == ArgumentKey.DIRECTION:
            item.direction = arg.value
        elif arg.key == ArgumentKey.ALIGNMENT:
            item.alignment = arg.value
        elif arg.key == ArgumentKey.ID:
            item.id = arg.value

    for axis in Axis:
        item.sizes.setdefault(axis, AxisSize(kind=SizeKey.FIT, axis=axis))

    if not item.id:
        item.id = _random_id()
    return item


# Sizing


def _clamp_side(axis: Axis, item: NodeItem, value: float) -> float:
    s = item.sizes.get(axis)
    if s is None:
        return 0.0
    v = value
    if s.max != 0 and v > s.max:
        v = s.max
    if s.min > value:
        v = s.min
    return v


def compute_size(axis: Axis, root: NodeItem) -> None:
    """Compute the sides of every node in the tree along ``axis``."""
    _compute_fix(axis, root)
    _compute_fit(axis, root)
    _compute_grow(axis, root)


def _compute_fix(axis: Axis, item: NodeItem) -> None:
    if item.is_fix(axis):
        item.set_side(axis, item.sizes[axis].value)
        item.computed[axis] = True
    for child in item.children:
        _compute_fix(axis, child)


def _fit_descendant(axis: Axis, item: NodeItem) -> None:
    # Only the node a fit pass starts from reports an invalid fit node;
    # below it such nodes are left uncomputed.
    with suppress(LayoutError):
        _compute_fit(axis, item)


def _compute_fit(axis: Axis, item: NodeItem) -> None:
    if item.is_computed(axis) or not item.is_fit(axis):
        for child in item.children:
            _fit_descendant(axis, child)
        return

    if item.has_grow_children(axis):
        raise LayoutError("fit node can't have grow children")

    p = item.padding_by_axis(axis)

    if not item.children:
        item.set_side(axis, p)
        item.computed[axis] = True
        return

    max_child = 0.0
    total_children = 0.0
    for child in item.children:
        _fit_descendant(axis, child)
        if child.is_computed(axis):
            cs = child.side(axis)
            max_child = max(max_child, cs)
            total_children += cs

    if item.is_along_axis(axis):
        side = p + item.gap * (len(item.children) - 1) + total_children
    else:
        side = p + max_child

    item.set_side(axis, side)
    item.computed[axis] = True


def _compute_grow(axis: Axis, item: NodeItem) -> None:
    if item.is_along_axis(axis):
        _grow_children_along_axis(axis, item)
    else:
        _grow_children_cross_axis(axis, item)
    for child in item.children:
        _compute_grow(axis, child)


def _pending_growers(axis: Axis, item: NodeItem) -> list[NodeItem]:
    return [
        child
        for child in item.children
        if child.is_grow(axis) and not child.is_computed(axis)
    ]


def _grow_children_along_axis(axis: Axis, item: NodeItem) -> None:
    taken = item.padding_by_axis(axis) + (len(item.children) - 1) * item.gap
    total_share = 0.0
    for child in item.children:
        if child.is_grow(axis):
            total_share += child.sizes[axis].value
        else:
            taken += child.side(axis)

    available = item.side(axis) - taken

    # Cap growers at their maximum until the remaining shares fit.
    changed = True
    while changed:
        if total_share == 0:
            return
        changed = False
        for child in _pending_growers(axis, item):
            if total_share == 0:
                break
            s = child.sizes[axis]
            side = s.value / total_share * available
            if s.max > 0 and side > s.max:
                child.set_side(axis, s.max)
                available -= s.max
                total_share -= s.value
                child.computed[axis] = True
                changed = True

    for child in _pending_growers(axis, item):
        s = child.sizes[axis]
        child.set_side(axis, s.value / total_share * available)
        child.computed[axis] = True


def _grow_children_cross_axis(axis: Axis, item: NodeItem) -> None:
    for child in _pending_growers(axis, item):
        child.set_side(axis, _clamp_side(axis, child, _grow_cross_axis(axis, child)))
        child.computed[axis] = True


def _grow_cross_axis(axis: Axis, item: NodeItem) -> float:
    parent = item.parent
    if parent is None or not parent.is_computed(axis):
        return 0.0
    return parent.side(axis) - parent.padding_by_axis(axis)


# Positioning


def compute_position(axis: Axis, node: NodeItem) -> None:
    """Place every node of the subtree along ``axis``."""
    if node.is_root():
        node.set_position(axis, 0.0)
    _compute_children_positions(axis, node)
    for child in node.children:
        compute_position(axis, child)


def _compute_children_positions(axis: Axis, item: NodeItem) -> None:
    total_side = sum(child.side(axis) for child in item.children)
    initial_offset = _initial_offset(axis, item, total_side)
    along = item.is_along_axis(axis)

    offset = initial_offset
    for index, child in enumerate(item.children):
        child.set_position(axis, offset if along and index > 0 else initial_offset)
        offset += item.gap + child.side(axis)


def _initial_offset(axis: Axis, item: NodeItem, total: float) -> float:
    total_gap = (len(item.children) - 1) * item.gap
    p = item.position(axis)
    if item.alignment == Alignment.CENTER:
        return p - item.side(axis) - (total / 2 + total_gap)
    if item.alignment == Alignment.END:
        return p - item.side(axis) - (total + total_gap)
    return p + item.initial_padding_by_axis(axis)


def layout(root: NodeItem) -> None:
    """Compute sizes and then positions of the whole tree on both axes."""
    compute_size(Axis.X, root)
    compute_size(Axis.Y, root)
    compute_position(Axis.X, root)
    compute_position(Axis.Y, root)


def export(root: NodeItem) -> OutputItem:
    """Return the computed geometry of the tree rooted at ``root``."""
    out = OutputItem(
        id=root.id, x=root.box.x, y=root.box.y, w=root.box.w, h=root.box.h
    )
    for child in root.children:
        exported = export(child)
        exported.parent = out
        out.children.append(exported)
    return out