"""View state of the canvas: the canvas-to-screen transform and id counters."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from cognitheon.geometry import Pos2, Rect, TSTransform, Vec2


def _vec_to_dict(v: Vec2) -> dict[str, float]:
    return {"x": v.x, "y": v.y}


def _vec_from_dict(data: dict[str, Any]) -> Vec2:
    return Vec2(float(data["x"]), float(data["y"]))


@dataclass
class CanvasState:
    """Transform from canvas to screen coordinates and counters for new ids."""

    offset: Vec2 = field(default_factory=Vec2)
    scale: float = 1.0
    transform: TSTransform = field(default_factory=TSTransform)
    global_node_id: int = 0
    global_edge_id: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def new_node_id(self) -> int:
        """Return the next node id and advance the counter."""
        with self._lock:
            value = self.global_node_id
            self.global_node_id += 1
        return value

    def new_edge_id(self) -> int:
        """Return the next edge id and advance the counter."""
        with self._lock:
            value = self.global_edge_id
            self.global_edge_id += 1
        return value

    def to_screen(self, canvas_pos: Pos2) -> Pos2:
        return self.transform.mul_pos(canvas_pos)

    def to_screen_rect(self, canvas_rect: Rect) -> Rect:
        return self.transform.mul_rect(canvas_rect)

    def to_canvas_rect(self, screen_rect: Rect) -> Rect:
        return self.transform.inverse().mul_rect(screen_rect)

    def to_canvas(self, screen_pos: Pos2) -> Pos2:
        return self.transform.inverse().mul_pos(screen_pos)

    def to_screen_vec2(self, canvas_vec: Vec2) -> Vec2:
        return self.transform.mul_pos(Pos2(canvas_vec.x, canvas_vec.y)).to_vec2()

    def to_canvas_vec2(self, screen_vec: Vec2) -> Vec2:
        return self.transform.inverse().mul_pos(Pos2(screen_vec.x, screen_vec.y)).to_vec2()

    def to_dict(self) -> dict[str, Any]:
        """Plain data suitable for JSON."""
        return {
            "offset": _vec_to_dict(self.offset),
            "scale": self.scale,
            "transform": {
                "scaling": self.transform.scaling,
                "translation": _vec_to_dict(self.transform.translation),
            },
            "global_node_id": self.global_node_id,
            "global_edge_id": self.global_edge_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CanvasState:
        """Rebuild a state from what to_dict produced."""
        try:
            transform = data["transform"]
            return cls(
                offset=_vec_from_dict(data["offset"]),
                scale=float(data["scale"]),
                transform=TSTransform(
                    float(transform["scaling"]),
                    _vec_from_dict(transform["translation"]),
                ),
                global_node_id=int(data["global_node_id"]),
                global_edge_id=int(data["global_edge_id"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r} in canvas state") from exc
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"malformed canvas state: {exc}") from exc