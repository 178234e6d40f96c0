"""Where nodes were last drawn, and observers of node changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cognitheon.canvas import CanvasState
from cognitheon.geometry import Pos2, Rect
from cognitheon.resource import Resource


@dataclass(frozen=True)
class NodeRenderInfo:
    """The rectangle a node occupied on the canvas."""

    canvas_rect: Rect

    def canvas_center(self) -> Pos2:
        return self.canvas_rect.center()

    def screen_rect(self, canvas_state: Resource[CanvasState]) -> Rect:
        """The node's rectangle in screen coordinates."""
        return canvas_state.read_resource(lambda state: state.to_screen_rect(self.canvas_rect))


@dataclass(frozen=True)
class EdgeRenderInfo:
    """The rectangle an edge occupied on the canvas."""

    canvas_rect: Rect


class NodeObserver(ABC):
    """Told whenever a node has been laid out anew."""

    @abstractmethod
    def on_node_changed(self, node_index: int, render_info: NodeRenderInfo) -> None:
        """Called with the node's index and its new render information."""