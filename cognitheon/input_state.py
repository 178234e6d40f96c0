"""The states of the canvas input state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cognitheon.geometry import Pos2


class InputState:
    """Base of all input states."""

    _HANDLES_MOTION: ClassVar[bool] = False
    _DRAGGING: ClassVar[bool] = False

    def is_busy(self) -> bool:
        """Whether this state keeps other input from being handled."""
        return not isinstance(self, Idle)

    def handles_mouse_motion(self) -> bool:
        """Whether this state reacts to continuous pointer movement."""
        return self._HANDLES_MOTION

    def is_dragging(self) -> bool:
        """Whether this state is a drag operation."""
        return self._DRAGGING


@dataclass(frozen=True)
class Idle(InputState):
    """Waiting for new input."""


@dataclass(frozen=True)
class Panning(InputState):
    """Moving the view of the canvas."""

    _HANDLES_MOTION = True

    last_cursor_pos: Pos2
    dragging: bool


@dataclass(frozen=True)
class Zooming(InputState):
    """Zooming the canvas around a point."""

    center: Pos2
    start_scale: float


@dataclass(frozen=True)
class DraggingNode(InputState):
    """Dragging one node, or every selected node."""

    _HANDLES_MOTION = True
    _DRAGGING = True

    node_index: int
    start_pos: Pos2
    is_selection_drag: bool
    selected_indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected_indices", tuple(self.selected_indices))


@dataclass(frozen=True)
class EditingNode(InputState):
    """Editing the text of a node."""

    node_index: int


@dataclass(frozen=True)
class CreatingEdge(InputState):
    """Drawing a new edge out of a source node."""

    _HANDLES_MOTION = True

    source_node: int
    current_cursor_pos: Pos2


@dataclass(frozen=True)
class DraggingControlPoint(InputState):
    """Adjusting a control point of a Bézier edge."""

    _HANDLES_MOTION = True
    _DRAGGING = True

    edge_index: int
    point_index: int
    start_pos: Pos2


@dataclass(frozen=True)
class Selecting(InputState):
    """Drawing a selection rectangle."""

    _HANDLES_MOTION = True
    _DRAGGING = True

    start_pos: Pos2
    current_pos: Pos2
    add_to_selection: bool


@dataclass(frozen=True)
class MovingSelection(InputState):
    """Moving the selected content of the canvas."""

    _HANDLES_MOTION = True
    _DRAGGING = True

    start_pos: Pos2
    nodes: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))