"""Input events, keyboard keys, modifier keys and the targets input is aimed at."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from cognitheon.buttons import PointerButton
from cognitheon.geometry import Pos2, Vec2


class Key(Enum):
    """Keyboard keys the canvas knows about."""

    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    ESCAPE = "Escape"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    ENTER = "Enter"
    SPACE = "Space"
    INSERT = "Insert"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    NUM0 = "0"
    NUM1 = "1"
    NUM2 = "2"
    NUM3 = "3"
    NUM4 = "4"
    NUM5 = "5"
    NUM6 = "6"
    NUM7 = "7"
    NUM8 = "8"
    NUM9 = "9"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"


@dataclass(frozen=True)
class Modifiers:
    """Modifier keys held at the time of an event."""

    alt: bool = False
    ctrl: bool = False
    shift: bool = False
    mac_cmd: bool = False
    command: bool = False

    def is_none(self) -> bool:
        """Whether no modifier key is held."""
        return not (self.alt or self.ctrl or self.shift or self.mac_cmd or self.command)


# One-shot events: each fires once.


@dataclass(frozen=True)
class MouseDown:
    button: PointerButton
    pos: Pos2
    modifiers: Modifiers = Modifiers()


@dataclass(frozen=True)
class MouseUp:
    button: PointerButton
    pos: Pos2
    modifiers: Modifiers = Modifiers()


@dataclass(frozen=True)
class Click:
    """A press followed by a release."""

    button: PointerButton
    pos: Pos2
    modifiers: Modifiers = Modifiers()


@dataclass(frozen=True)
class DoubleClick:
    button: PointerButton
    pos: Pos2
    modifiers: Modifiers = Modifiers()


@dataclass(frozen=True)
class KeyDown:
    key: Key
    modifiers: Modifiers = Modifiers()


@dataclass(frozen=True)
class KeyUp:
    key: Key
    modifiers: Modifiers = Modifiers()


# Continuous events: may fire on every frame.


@dataclass(frozen=True)
class MouseMove:
    pos: Pos2
    delta: Vec2


@dataclass(frozen=True)
class Drag:
    """Pointer movement while a button is held."""

    button: PointerButton
    pos: Pos2
    delta: Vec2
    modifiers: Modifiers = Modifiers()


@dataclass(frozen=True)
class Scroll:
    delta: Vec2


@dataclass(frozen=True)
class Zoom:
    """A pinch, or the wheel turned with a modifier held."""

    delta: float
    center: Pos2


OneShotEvent = Union[MouseDown, MouseUp, Click, DoubleClick, KeyDown, KeyUp]
ContinuousEvent = Union[MouseMove, Drag, Scroll, Zoom]
InputEvent = Union[OneShotEvent, ContinuousEvent]


class TargetKind(Enum):
    CANVAS = "canvas"
    NODE = "node"
    EDGE = "edge"
    CONTROL_POINT = "control_point"
    UI = "ui"


@dataclass(frozen=True)
class InputTarget:
    """What the pointer is over: the canvas, a node, an edge, a control point or other UI."""

    kind: TargetKind
    node_index: Optional[int] = None
    edge_index: Optional[int] = None
    point_index: Optional[int] = None

    @classmethod
    def canvas(cls) -> InputTarget:
        return cls(TargetKind.CANVAS)

    @classmethod
    def node(cls, node_index: int) -> InputTarget:
        return cls(TargetKind.NODE, node_index=node_index)

    @classmethod
    def edge(cls, edge_index: int) -> InputTarget:
        return cls(TargetKind.EDGE, edge_index=edge_index)

    @classmethod
    def control_point(cls, edge_index: int, point_index: int) -> InputTarget:
        """A control point of a Bézier edge."""
        return cls(TargetKind.CONTROL_POINT, edge_index=edge_index, point_index=point_index)

    @classmethod
    def ui(cls) -> InputTarget:
        return cls(TargetKind.UI)