"""The mind-map graph: nodes and edges with stable indices, plus selection."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

from cognitheon.canvas import CanvasState
from cognitheon.edge import Edge, EdgeType
from cognitheon.node import Node
from cognitheon.resource import Resource
from cognitheon.selection import GraphSelection, SelectionKind


class Graph:
    """A directed graph whose indices stay valid when other items are removed.

    Freed slots are reused, the most recently freed first.
    """

    def __init__(self, edge_type: EdgeType = EdgeType.LINE) -> None:
        self.edge_type = edge_type
        self.selected = GraphSelection()
        self.editing_node: Optional[int] = None
        self._nodes: list[Optional[Node]] = []
        self._edges: list[Optional[Edge]] = []
        self._free_nodes: list[int] = []
        self._free_edges: list[int] = []

    def __repr__(self) -> str:
        return (
            f"Graph(edge_type={self.edge_type}, nodes={len(list(self.node_indices()))}, "
            f"edges={len(list(self.edge_indices()))})"
        )

    # Nodes

    def add_node(self, node: Node) -> int:
        if self._free_nodes:
            index = self._free_nodes.pop()
            self._nodes[index] = node
        else:
            index = len(self._nodes)
            self._nodes.append(node)
        return index

    def add_node_with_edge(
        self, node: Node, src_node_index: int, canvas_state_resource: Resource[CanvasState]
    ) -> int:
        """Add a node and an edge to it from an existing node."""
        src_node = self.get_node(src_node_index)
        if src_node is None:
            raise KeyError(f"no node at index {src_node_index}")
        dst_node_index = self.add_node(node)
        self.add_edge(
            Edge.create(
                src_node_index,
                dst_node_index,
                src_node.position,
                node.position,
                canvas_state_resource,
            )
        )
        return dst_node_index

    def get_node(self, node_index: int) -> Optional[Node]:
        if 0 <= node_index < len(self._nodes):
            return self._nodes[node_index]
        return None

    def node_indices(self) -> Iterator[int]:
        return (i for i, node in enumerate(self._nodes) if node is not None)

    def edge_indices(self) -> Iterator[int]:
        return (i for i, edge in enumerate(self._edges) if edge is not None)

    def get_selected_nodes(self) -> list[int]:
        if self.selected.kind is SelectionKind.NODE:
            return list(self.selected.indices)
        return []

    def is_node_selected(self, node_index: int) -> bool:
        return self.selected.kind is SelectionKind.NODE and node_index in self.selected.indices

    def select_node(self, node_index: int) -> None:
        if self.selected.kind is SelectionKind.NODE:
            self.selected.indices.append(node_index)
        else:
            self.selected = GraphSelection(SelectionKind.NODE, [node_index])

    def select_nodes(self, nodes: Sequence[int]) -> None:
        if self.selected.kind is SelectionKind.NODE:
            self.selected.indices.extend(nodes)
        else:
            self.selected = GraphSelection(SelectionKind.NODE, list(nodes))

    def remove_node(self, node_index: int) -> Optional[Node]:
        """Remove a node and every edge touching it; return the node if there was one."""
        node = self.get_node(node_index)
        if node is not None:
            for edge_index in list(self.edge_indices()):
                edge = self._edges[edge_index]
                if edge is not None and node_index in (edge.source, edge.target):
                    self.remove_edge(edge_index)
            self._nodes[node_index] = None
            self._free_nodes.append(node_index)
        self.editing_node = None
        return node

    # Edges

    def select_edge(self, edge_index: int) -> None:
        if self.selected.kind is SelectionKind.EDGE:
            self.selected.indices.append(edge_index)
        else:
            self.selected = GraphSelection(SelectionKind.EDGE, [edge_index])

    def add_edge(self, edge: Edge) -> int:
        for end in (edge.source, edge.target):
            if self.get_node(end) is None:
                raise KeyError(f"no node at index {end}")
        if self._free_edges:
            index = self._free_edges.pop()
            self._edges[index] = edge
        else:
            index = len(self._edges)
            self._edges.append(edge)
        return index

    def get_edge(self, edge_index: int) -> Optional[Edge]:
        if 0 <= edge_index < len(self._edges):
            return self._edges[edge_index]
        return None

    def remove_edge(self, edge_index: int) -> Optional[Edge]:
        edge = self.get_edge(edge_index)
        if edge is not None:
            self._edges[edge_index] = None
            self._free_edges.append(edge_index)
        return edge

    def edge_exists(self, src_node_index: int, dst_node_index: int) -> bool:
        """Whether an edge runs from the first node to the second."""
        return any(
            edge.source == src_node_index and edge.target == dst_node_index
            for edge in self._edges
            if edge is not None
        )

    def edge_count_undirected(self, node1_index: int, node2_index: int) -> int:
        """Number of edges between two nodes in either direction."""
        pair = {(node1_index, node2_index), (node2_index, node1_index)}
        return sum(
            1 for edge in self._edges if edge is not None and (edge.source, edge.target) in pair
        )

    def reset(self) -> None:
        """Drop all nodes, edges, the selection and the node being edited."""
        self._nodes = []
        self._edges = []
        self._free_nodes = []
        self._free_edges = []
        self.selected = GraphSelection()
        self.editing_node = None

    # Serialisation

    def to_dict(self) -> dict[str, Any]:
        """Plain data suitable for JSON; removed slots are kept as None."""
        return {
            "edge_type": self.edge_type.value,
            "nodes": [None if node is None else node.to_dict() for node in self._nodes],
            "edges": [None if edge is None else edge.to_dict() for edge in self._edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Graph:
        """Rebuild a graph from what to_dict produced, indices included."""
        try:
            graph = cls(EdgeType(data["edge_type"]))
            graph._nodes = [
                None if item is None else Node.from_dict(item) for item in data["nodes"]
            ]
            graph._edges = [
                None if item is None else Edge.from_dict(item) for item in data["edges"]
            ]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r} in graph") from exc
        except TypeError as exc:
            raise ValueError(f"malformed graph: {exc}") from exc
        for edge in graph._edges:
            if edge is not None and (
                graph.get_node(edge.source) is None or graph.get_node(edge.target) is None
            ):
                raise ValueError(f"edge {edge.id} refers to a missing node")
        graph._free_nodes = [i for i, node in enumerate(graph._nodes) if node is None]
        graph._free_edges = [i for i, edge in enumerate(graph._edges) if edge is None]
        return graph