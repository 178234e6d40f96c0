"""The input state machine that turns each frame's input into canvas and graph changes."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from cognitheon.buttons import PointerButton
from cognitheon.canvas import CanvasState
from cognitheon.colors import Color32
from cognitheon.context import FrameInput, InputContext
from cognitheon.edge import Edge
from cognitheon.events import InputTarget, Key, TargetKind
from cognitheon.geometry import Pos2, Rect, TSTransform, Vec2
from cognitheon.graph import Graph
from cognitheon.input_state import (
    CreatingEdge,
    DraggingNode,
    EditingNode,
    Idle,
    InputState,
    Panning,
    Selecting,
)
from cognitheon.node import Node
from cognitheon.resource import Resource
from cognitheon.selection import GraphSelection, SelectionKind

_log = logging.getLogger(__name__)

_ORANGE = Color32(255, 165, 0)
_YELLOW = Color32(255, 255, 0)
_MIN_SCALING = 0.1
_MAX_SCALING = 100.0
_ARROW_LENGTH = 10.0
_ARROW_ANGLE = math.radians(30.0)


@dataclass(frozen=True)
class SelectionRectOverlay:
    """A dashed selection rectangle in screen coordinates."""

    rect: Rect
    offset: float = 0.0
    stroke_width: float = 1.0
    color: Color32 = _ORANGE
    dash_length: float = 10.0
    gap_length: float = 5.0


@dataclass(frozen=True)
class TempEdgeOverlay:
    """An arrow from a source node to the pointer, drawn while an edge is created."""

    start: Pos2
    end: Pos2
    arrow_left: Pos2
    arrow_right: Pos2
    stroke_width: float = 2.0
    color: Color32 = _YELLOW


Overlay = Union[SelectionRectOverlay, TempEdgeOverlay]


class InputStateManager:
    """Tracks the current input state and applies each frame's input to it.

    After every update, ``cursor`` names the cursor to show and ``overlays``
    lists what should be drawn on top of the canvas for this frame.
    """

    def __init__(
        self,
        graph_resource: Resource[Graph],
        canvas_state_resource: Resource[CanvasState],
    ) -> None:
        self.current_state: InputState = Idle()
        self.context = InputContext(graph_resource, canvas_state_resource)
        self.last_target: Optional[InputTarget] = None
        self.cursor = "default"
        self.overlays: list[Overlay] = []

    def __repr__(self) -> str:
        return f"InputStateManager(current_state={self.current_state!r})"

    @property
    def _graph(self) -> Resource[Graph]:
        return self.context.graph_resource

    @property
    def _canvas(self) -> Resource[CanvasState]:
        return self.context.canvas_state_resource

    def transition_to(self, new_state: InputState) -> None:
        """Switch to a new state."""
        _log.debug("input state transition: %r -> %r", self.current_state, new_state)
        self.current_state = new_state

    def update(self, frame: FrameInput) -> None:
        """Process one frame of input."""
        self.cursor = "default"
        self.overlays = []
        self.context.update(frame)

        target = self.determine_target(frame)
        self.last_target = target

        self._handle_one_shot_events(frame, target)
        self._handle_continuous_events(frame)
        self._handle_state_specific_updates(frame)

    def determine_target(self, frame: FrameInput) -> InputTarget:
        """What the pointer is over in this frame: a node if it hits one, else the canvas."""
        cursor_pos = frame.hover_pos if frame.hover_pos is not None else Pos2()

        def find(graph: Graph) -> Optional[int]:
            for node_index in graph.node_indices():
                info = frame.node_render_infos.get(node_index)
                if info is not None and info.screen_rect(self._canvas).contains(cursor_pos):
                    return node_index
            return None

        node_index = self._graph.read_resource(find)
        if node_index is not None:
            return InputTarget.node(node_index)
        return InputTarget.canvas()

    # Event dispatch

    def _handle_one_shot_events(self, frame: FrameInput, target: InputTarget) -> None:
        if PointerButton.PRIMARY in frame.buttons_pressed:
            self._handle_primary_button_press(frame, target)
        if PointerButton.SECONDARY in frame.buttons_pressed:
            self._handle_secondary_button_press(target)
        if PointerButton.PRIMARY in frame.buttons_released:
            self._handle_primary_button_release()
        if PointerButton.SECONDARY in frame.buttons_released:
            self._handle_secondary_button_release(target)

        if Key.SPACE in frame.keys_pressed:
            self._handle_space_key_press()
        if Key.SPACE in frame.keys_released:
            self._handle_space_key_release()
        if Key.ESCAPE in frame.keys_pressed:
            self._handle_escape_key()
        if Key.DELETE in frame.keys_pressed or Key.BACKSPACE in frame.keys_pressed:
            self._handle_delete_key()

        if PointerButton.PRIMARY in frame.buttons_double_clicked:
            self._handle_double_click(target)

    def _handle_continuous_events(self, frame: FrameInput) -> None:
        if self.current_state.handles_mouse_motion() and frame.pointer_delta != Vec2():
            self._handle_mouse_motion(frame.pointer_delta)
        if frame.smooth_scroll_delta != Vec2():
            self._handle_scroll(frame.smooth_scroll_delta)
        if frame.zoom_delta != 1.0:
            self._handle_zoom(frame.zoom_delta)

    def _handle_state_specific_updates(self, frame: FrameInput) -> None:
        state = self.current_state
        if isinstance(state, Idle):
            self.cursor = "default"

            def stop_editing(graph: Graph) -> None:
                graph.editing_node = None

            self._graph.with_resource(stop_editing)
        elif isinstance(state, Panning):
            self.cursor = "grabbing"
        elif isinstance(state, Selecting):
            self._update_selection_preview(
                state.start_pos, state.current_pos, state.add_to_selection
            )
            self.overlays.append(
                SelectionRectOverlay(
                    Rect.from_two_pos(state.start_pos, state.current_pos),
                    offset=frame.animation_offset,
                )
            )
        elif isinstance(state, CreatingEdge):
            overlay = self._temp_edge(frame, state.source_node, state.current_cursor_pos)
            if overlay is not None:
                self.overlays.append(overlay)

    # Pointer buttons

    def _handle_primary_button_press(self, frame: FrameInput, target: InputTarget) -> None:
        mouse_pos = self.context.current_mouse_pos
        shift_pressed = frame.modifiers.shift

        if target.kind is TargetKind.NODE and target.node_index is not None:
            if isinstance(self.current_state, EditingNode):
                return
            node_index = target.node_index
            already_selected = self._graph.read_resource(
                lambda graph: graph.is_node_selected(node_index)
            )
            if shift_pressed:
                self._graph.with_resource(lambda graph: graph.select_node(node_index))
            elif already_selected:
                selected = self._graph.read_resource(lambda graph: graph.get_selected_nodes())
                self.transition_to(DraggingNode(node_index, mouse_pos, True, tuple(selected)))
            else:

                def select_only(graph: Graph) -> None:
                    graph.selected.clear()
                    graph.select_node(node_index)

                self._graph.with_resource(select_only)
                self.transition_to(DraggingNode(node_index, mouse_pos, False, (node_index,)))
        elif target.kind is TargetKind.CANVAS:
            if isinstance(self.current_state, EditingNode):
                self.transition_to(Idle())
            else:
                if not shift_pressed:
                    self._graph.with_resource(lambda graph: graph.selected.clear())
                if Key.SPACE in frame.keys_down:
                    self.transition_to(Panning(mouse_pos, True))
                else:
                    self.transition_to(Selecting(mouse_pos, mouse_pos, shift_pressed))

        self.context.pressed_buttons.set(PointerButton.PRIMARY, True)

    def _handle_secondary_button_press(self, target: InputTarget) -> None:
        if not isinstance(self.current_state, Idle):
            return
        if target.kind is TargetKind.NODE and target.node_index is not None:
            self.transition_to(CreatingEdge(target.node_index, self.context.current_mouse_pos))
        self.context.pressed_buttons.set(PointerButton.SECONDARY, True)

    def _handle_primary_button_release(self) -> None:
        state = self.current_state
        if isinstance(state, Panning):
            if state.dragging:
                self.transition_to(Panning(state.last_cursor_pos, False))
            else:
                self.transition_to(Idle())
        elif isinstance(state, DraggingNode):
            self.transition_to(Idle())
        elif isinstance(state, Selecting):
            self._update_selection_preview(
                state.start_pos, state.current_pos, state.add_to_selection
            )
            self.transition_to(Idle())
        self.context.pressed_buttons.set(PointerButton.PRIMARY, False)

    def _handle_secondary_button_release(self, target: InputTarget) -> None:
        state = self.current_state
        if isinstance(state, CreatingEdge):
            source = state.source_node
            if target.kind is TargetKind.NODE and target.node_index is not None:
                if target.node_index != source:
                    self._create_edge(source, target.node_index)
            elif target.kind is TargetKind.CANVAS:
                canvas_pos = self.context.screen_to_canvas(self.context.current_mouse_pos)
                self._create_node_with_edge(source, canvas_pos)
            self.transition_to(Idle())
        self.context.pressed_buttons.set(PointerButton.SECONDARY, False)

    # Pointer motion, scrolling and zooming

    def _handle_mouse_motion(self, delta: Vec2) -> None:
        state = self.current_state
        mouse_pos = self.context.current_mouse_pos
        if isinstance(state, Panning):
            if state.dragging:
                self._translate_view(delta)
                self.transition_to(Panning(mouse_pos, True))
        elif isinstance(state, DraggingNode):
            scaling = self._canvas.read_resource(lambda canvas: canvas.transform.scaling)
            scaled_delta = delta / scaling
            indices = state.selected_indices if state.is_selection_drag else (state.node_index,)

            def move(graph: Graph) -> None:
                for index in indices:
                    node = graph.get_node(index)
                    if node is not None:
                        node.position = node.position + scaled_delta

            self._graph.with_resource(move)
        elif isinstance(state, Selecting):
            self.transition_to(Selecting(state.start_pos, mouse_pos, state.add_to_selection))
        elif isinstance(state, CreatingEdge):
            self.transition_to(CreatingEdge(state.source_node, mouse_pos))

    def _translate_view(self, delta: Vec2) -> None:
        def translate(canvas: CanvasState) -> None:
            canvas.transform.translation = canvas.transform.translation + delta

        self._canvas.with_resource(translate)

    def _handle_scroll(self, delta: Vec2) -> None:
        if isinstance(self.current_state, Idle):
            self._translate_view(delta)

    def _handle_zoom(self, delta: float) -> None:
        if not isinstance(self.current_state, Idle):
            return
        mouse_pos = self.context.current_mouse_pos

        def zoom(canvas: CanvasState) -> None:
            scaling = canvas.transform.scaling
            if (scaling <= _MIN_SCALING and delta < 1.0) or (
                scaling >= _MAX_SCALING and delta > 1.0
            ):
                return
            pointer_in_layer = (canvas.transform.inverse() * mouse_pos).to_vec2()
            transform = (
                canvas.transform
                * TSTransform.from_translation(pointer_in_layer)
                * TSTransform.from_scaling(delta)
                * TSTransform.from_translation(-pointer_in_layer)
            )
            transform.scaling = min(max(transform.scaling, _MIN_SCALING), _MAX_SCALING)
            canvas.transform = transform

        self._canvas.with_resource(zoom)

    # Keys

    def _handle_space_key_press(self) -> None:
        if isinstance(self.current_state, Idle):
            self.transition_to(Panning(self.context.current_mouse_pos, False))

    def _handle_space_key_release(self) -> None:
        if isinstance(self.current_state, Panning):
            self.transition_to(Idle())

    def _handle_escape_key(self) -> None:
        if isinstance(self.current_state, Idle):
            return
        self.transition_to(Idle())

        def reset_selection(graph: Graph) -> None:
            graph.selected.clear()
            graph.editing_node = None

        self._graph.with_resource(reset_selection)

    def _handle_delete_key(self) -> None:
        if isinstance(self.current_state, EditingNode):
            return

        def delete_selected(graph: Graph) -> None:
            nodes = list(graph.selected.indices) if graph.selected.is_nodes() else []
            for node_index in nodes:
                graph.remove_node(node_index)
            graph.selected.clear()

        self._graph.with_resource(delete_selected)

    def _handle_double_click(self, target: InputTarget) -> None:
        if target.kind is TargetKind.NODE and target.node_index is not None:
            node_index = target.node_index

            def start_editing(graph: Graph) -> None:
                graph.editing_node = node_index

            self._graph.with_resource(start_editing)
            self.transition_to(EditingNode(node_index))
        elif target.kind is TargetKind.CANVAS:
            canvas_pos = self.context.screen_to_canvas(self.context.current_mouse_pos)
            node_id = self._canvas.read_resource(lambda canvas: canvas.new_node_id())
            node = Node(node_id, canvas_pos, "", "")

            def add(graph: Graph) -> int:
                index = graph.add_node(node)
                graph.select_node(index)
                graph.editing_node = index
                return index

            new_index = self._graph.with_resource(add)
            self.transition_to(EditingNode(new_index))

    # Helpers

    def _update_selection_preview(
        self, start_pos: Pos2, current_pos: Pos2, add_to_selection: bool
    ) -> None:
        selection_rect = Rect.from_two_pos(
            self.context.screen_to_canvas(start_pos),
            self.context.screen_to_canvas(current_pos),
        )

        def select(graph: Graph) -> None:
            inside = [
                index
                for index in graph.node_indices()
                if (node := graph.get_node(index)) is not None
                and selection_rect.contains(node.position)
            ]
            if add_to_selection and graph.selected.is_nodes():
                graph.selected.indices.extend(
                    index for index in inside if index not in graph.selected.indices
                )
            else:
                graph.selected = GraphSelection(SelectionKind.NODE, inside)

        self._graph.with_resource(select)

    def _temp_edge(
        self, frame: FrameInput, source_node: int, target_pos: Pos2
    ) -> Optional[TempEdgeOverlay]:
        info = frame.node_render_infos.get(source_node)
        if info is None:
            return None
        source_screen = self.context.canvas_to_screen(info.canvas_center())
        direction = (target_pos - source_screen).normalized()
        cos_a = math.cos(_ARROW_ANGLE)
        sin_a = math.sin(_ARROW_ANGLE)
        left = target_pos - _ARROW_LENGTH * Vec2(
            direction.x * cos_a - direction.y * sin_a,
            direction.x * sin_a + direction.y * cos_a,
        )
        right = target_pos - _ARROW_LENGTH * Vec2(
            direction.x * cos_a + direction.y * sin_a,
            -direction.x * sin_a + direction.y * cos_a,
        )
        return TempEdgeOverlay(source_screen, target_pos, left, right)

    def _create_edge(self, source: int, target: int) -> None:
        if self._graph.read_resource(lambda graph: graph.edge_exists(source, target)):
            return

        def positions(graph: Graph) -> tuple[Pos2, Pos2]:
            src = graph.get_node(source)
            dst = graph.get_node(target)
            return (
                src.position if src is not None else Pos2(),
                dst.position if dst is not None else Pos2(),
            )

        source_pos, target_pos = self._graph.read_resource(positions)
        edge = Edge.create(source, target, source_pos, target_pos, self._canvas)
        self._graph.with_resource(lambda graph: graph.add_edge(edge))

    def _create_node_with_edge(self, source: int, canvas_pos: Pos2) -> None:
        node_id = self._canvas.read_resource(lambda canvas: canvas.new_node_id())
        node = Node(node_id, canvas_pos, "", "")
        self._graph.with_resource(
            lambda graph: graph.add_node_with_edge(node, source, self._canvas)
        )