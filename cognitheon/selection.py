"""What is currently selected in the graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SelectionKind(Enum):
    NONE = "none"
    NODE = "node"
    EDGE = "edge"


@dataclass
class GraphSelection:
    """Either nothing, a list of node indices or a list of edge indices."""

    kind: SelectionKind = SelectionKind.NONE
    indices: list[int] = field(default_factory=list)

    def clear(self) -> None:
        self.kind = SelectionKind.NONE
        self.indices = []

    def is_nodes(self) -> bool:
        return self.kind is SelectionKind.NODE

    def is_edge(self) -> bool:
        return self.kind is SelectionKind.EDGE