"""Per-frame input snapshot and the context the input state machine works with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from cognitheon.buttons import ButtonState, PointerButton
from cognitheon.canvas import CanvasState
from cognitheon.events import Key, Modifiers
from cognitheon.geometry import Pos2, Vec2
from cognitheon.graph import Graph
from cognitheon.render_info import NodeRenderInfo
from cognitheon.resource import Resource


@dataclass(frozen=True)
class FrameInput:
    """Everything the user did during one frame, plus where nodes were last drawn."""

    hover_pos: Optional[Pos2] = None
    modifiers: Modifiers = Modifiers()
    stable_dt: float = 0.0
    keys_down: frozenset[Key] = frozenset()
    keys_pressed: frozenset[Key] = frozenset()
    keys_released: frozenset[Key] = frozenset()
    buttons_down: frozenset[PointerButton] = frozenset()
    buttons_pressed: frozenset[PointerButton] = frozenset()
    buttons_released: frozenset[PointerButton] = frozenset()
    buttons_double_clicked: frozenset[PointerButton] = frozenset()
    pointer_delta: Vec2 = Vec2()
    smooth_scroll_delta: Vec2 = Vec2()
    zoom_delta: float = 1.0
    node_render_infos: Mapping[int, NodeRenderInfo] = field(default_factory=dict)
    animation_offset: float = 0.0


class InputContext:
    """Data that input handling needs, refreshed every frame."""

    def __init__(
        self,
        graph_resource: Resource[Graph],
        canvas_state_resource: Resource[CanvasState],
    ) -> None:
        self.canvas_state_resource = canvas_state_resource
        self.graph_resource = graph_resource
        self.current_mouse_pos = Pos2()
        self.prev_mouse_pos = Pos2()
        self.modifiers = Modifiers()
        self.pressed_buttons = ButtonState()
        self.pressed_keys: dict[Key, bool] = {}
        self.delta_time = 0.0
        self.node_render_infos: dict[int, NodeRenderInfo] = {}

    def __repr__(self) -> str:
        return (
            f"InputContext(current_mouse_pos={self.current_mouse_pos}, "
            f"modifiers={self.modifiers}, pressed_buttons={self.pressed_buttons})"
        )

    def update(self, frame: FrameInput) -> None:
        """Take over the state of the new frame."""
        self.prev_mouse_pos = self.current_mouse_pos
        if frame.hover_pos is not None:
            self.current_mouse_pos = frame.hover_pos
        self.modifiers = frame.modifiers
        self.delta_time = frame.stable_dt
        self.pressed_keys = {key: key in frame.keys_down for key in Key}
        for button in PointerButton:
            self.pressed_buttons.set(button, button in frame.buttons_down)
        self.node_render_infos = dict(frame.node_render_infos)

    def hit_test_node(self, screen_pos: Pos2) -> Optional[int]:
        """The first node whose drawn rectangle holds the screen position, if any."""

        def find(graph: Graph) -> Optional[int]:
            for node_index in graph.node_indices():
                info = self.node_render_infos.get(node_index)
                if info is not None and info.screen_rect(self.canvas_state_resource).contains(
                    screen_pos
                ):
                    return node_index
            return None

        return self.graph_resource.read_resource(find)

    def screen_to_canvas(self, screen_pos: Pos2) -> Pos2:
        return self.canvas_state_resource.read_resource(lambda state: state.to_canvas(screen_pos))

    def canvas_to_screen(self, canvas_pos: Pos2) -> Pos2:
        return self.canvas_state_resource.read_resource(lambda state: state.to_screen(canvas_pos))


def detect_drag_canvas(frame: FrameInput) -> bool:
    """Space held with no modifiers while the primary button is pressed."""
    return (
        Key.SPACE in frame.keys_down
        and frame.modifiers.is_none()
        and PointerButton.PRIMARY in frame.buttons_pressed
    )


def detect_select_node(frame: FrameInput) -> bool:
    """Space held with no modifiers while the secondary button is pressed."""
    return (
        Key.SPACE in frame.keys_down
        and frame.modifiers.is_none()
        and PointerButton.SECONDARY in frame.buttons_pressed
    )