"""Edges between nodes and the styles they are drawn in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from cognitheon.anchor import BezierAnchor, LineAnchor
from cognitheon.canvas import CanvasState
from cognitheon.geometry import Pos2
from cognitheon.resource import Resource


class EdgeType(Enum):
    """How edges are drawn."""

    LINE = "Line"
    BEZIER = "Bezier"

    def __str__(self) -> str:
        return self.value


def _pos_to_dict(pos: Pos2) -> dict[str, float]:
    return {"x": pos.x, "y": pos.y}


def _pos_from_dict(data: dict[str, Any]) -> Pos2:
    return Pos2(float(data["x"]), float(data["y"]))


def _bezier_to_dict(anchor: BezierAnchor) -> dict[str, Any]:
    return {
        "canvas_pos": _pos_to_dict(anchor.canvas_pos),
        "handle_in_canvas_pos": _pos_to_dict(anchor.handle_in_canvas_pos),
        "handle_out_canvas_pos": _pos_to_dict(anchor.handle_out_canvas_pos),
        "is_smooth": anchor.is_smooth,
    }


def _bezier_from_dict(data: dict[str, Any]) -> BezierAnchor:
    return BezierAnchor(
        _pos_from_dict(data["canvas_pos"]),
        _pos_from_dict(data["handle_in_canvas_pos"]),
        _pos_from_dict(data["handle_out_canvas_pos"]),
        bool(data["is_smooth"]),
    )


@dataclass
class Edge:
    """A directed edge with the anchors used to draw it in either style."""

    id: int
    source: int
    target: int
    bezier_anchors: tuple[BezierAnchor, BezierAnchor]
    line_anchors: tuple[LineAnchor, LineAnchor]
    text: Optional[str] = None

    @classmethod
    def create(
        cls,
        source: int,
        target: int,
        source_canvas_pos: Pos2,
        target_canvas_pos: Pos2,
        canvas_state_resource: Resource[CanvasState],
    ) -> Edge:
        """A new edge with a fresh id and smooth anchors at both ends."""
        edge_id = canvas_state_resource.read_resource(lambda state: state.new_edge_id())
        return cls(
            id=edge_id,
            source=source,
            target=target,
            bezier_anchors=(
                BezierAnchor.new_smooth(source_canvas_pos),
                BezierAnchor.new_smooth(target_canvas_pos),
            ),
            line_anchors=(LineAnchor(source_canvas_pos), LineAnchor(target_canvas_pos)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain data suitable for JSON."""
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "text": self.text,
            "bezier_edge": {
                "source": _bezier_to_dict(self.bezier_anchors[0]),
                "target": _bezier_to_dict(self.bezier_anchors[1]),
            },
            "line_edge": {
                "source": _pos_to_dict(self.line_anchors[0].canvas_pos),
                "target": _pos_to_dict(self.line_anchors[1].canvas_pos),
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Edge:
        """Rebuild an edge from what to_dict produced."""
        try:
            bezier = data["bezier_edge"]
            line = data["line_edge"]
            text = data["text"]
            return cls(
                id=int(data["id"]),
                source=int(data["source"]),
                target=int(data["target"]),
                bezier_anchors=(
                    _bezier_from_dict(bezier["source"]),
                    _bezier_from_dict(bezier["target"]),
                ),
                line_anchors=(
                    LineAnchor(_pos_from_dict(line["source"])),
                    LineAnchor(_pos_from_dict(line["target"])),
                ),
                text=None if text is None else str(text),
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r} in edge") from exc
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"malformed edge: {exc}") from exc