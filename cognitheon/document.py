"""The application document: the graph, the canvas view and how they are saved."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Union

from cognitheon.canvas import CanvasState
from cognitheon.edge import EdgeType
from cognitheon.graph import Graph
from cognitheon.manager import InputStateManager
from cognitheon.resource import Resource

FILE_EXTENSION = "cnt"
FILE_FILTER_NAME = "Cognitheon"

_DEFAULT_LABEL = "Hello World!"
_DEFAULT_VALUE = 2.7
_ANIMATION_SPEED = 20.0
_MAX_FRAME_TIME = 0.1


class Document:
    """The state of the application that is kept between sessions.

    The graph and the canvas view are shared resources; the input manager
    works on the same resources and is rebuilt whenever they are replaced.
    """

    def __init__(
        self,
        label: str = _DEFAULT_LABEL,
        graph_resource: Resource[Graph] | None = None,
        canvas_resource: Resource[CanvasState] | None = None,
    ) -> None:
        self.label = label
        self.value = _DEFAULT_VALUE
        self.graph_resource: Resource[Graph] = (
            graph_resource if graph_resource is not None else Resource(Graph())
        )
        self.canvas_resource: Resource[CanvasState] = (
            canvas_resource if canvas_resource is not None else Resource(CanvasState())
        )
        self.input_manager = InputStateManager(self.graph_resource, self.canvas_resource)

    def __repr__(self) -> str:
        return (
            f"Document(label={self.label!r}, graph={self.graph_resource!r}, "
            f"canvas={self.canvas_resource!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain data suitable for JSON; the transient value is left out."""
        return {
            "label": self.label,
            "canvas_resource": self.canvas_resource.read_resource(lambda c: c.to_dict()),
            "graph_resource": self.graph_resource.read_resource(lambda g: g.to_dict()),
        }

    def to_json(self) -> str:
        """The document as JSON text."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> Document:
        """Rebuild a document from JSON; fields that are missing take their defaults."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("document must be a JSON object")
        label = data.get("label", _DEFAULT_LABEL)
        if not isinstance(label, str):
            raise ValueError("document label must be a string")
        graph = Graph.from_dict(data["graph_resource"]) if "graph_resource" in data else Graph()
        canvas = (
            CanvasState.from_dict(data["canvas_resource"])
            if "canvas_resource" in data
            else CanvasState()
        )
        return cls(label, Resource(graph), Resource(canvas))

    def save(self, path: Union[str, PathLike[str]]) -> None:
        """Write the document to a file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: Union[str, PathLike[str]]) -> Document:
        """Read a document from a file."""
        return cls.from_json(Path(path).read_bytes())

    def replace_with(self, other: Document) -> None:
        """Take over the graph and canvas of another document."""
        self.graph_resource = other.graph_resource
        self.canvas_resource = other.canvas_resource
        self.input_manager = InputStateManager(self.graph_resource, self.canvas_resource)

    def new_file(self) -> None:
        """Clear the graph."""
        self.graph_resource.with_resource(lambda graph: graph.reset())

    def set_edge_type(self, edge_type: EdgeType) -> None:
        """Choose how edges are drawn."""

        def apply(graph: Graph) -> None:
            graph.edge_type = edge_type

        self.graph_resource.with_resource(apply)


def next_animation_offset(last_offset: float, stable_dt: float) -> float:
    """Advance the dash animation by one frame; long frames count as 0.1 s."""
    return last_offset - _ANIMATION_SPEED * min(stable_dt, _MAX_FRAME_TIME)


def format_zoom(canvas_state: CanvasState) -> str:
    """The zoom read-out shown in the status bar."""
    return f"zoom: {canvas_state.transform.scaling:.2f}"


def format_fps(stable_dt: float) -> str:
    """The frame-rate read-out shown in the status bar."""
    fps = float("inf") if stable_dt == 0 else 1.0 / stable_dt
    return f"fps: {fps!r}"