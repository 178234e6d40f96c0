"""Nodes of the mind-map graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cognitheon.geometry import Pos2


@dataclass
class Node:
    """A node placed on the canvas, with its text and a free-form note."""

    id: int
    position: Pos2
    text: str = ""
    note: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Plain data suitable for JSON."""
        return {
            "id": self.id,
            "position": {"x": self.position.x, "y": self.position.y},
            "text": self.text,
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Node:
        """Rebuild a node from what to_dict produced."""
        try:
            position = data["position"]
            return cls(
                id=int(data["id"]),
                position=Pos2(float(position["x"]), float(position["y"])),
                text=str(data["text"]),
                note=str(data["note"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r} in node") from exc
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"malformed node: {exc}") from exc