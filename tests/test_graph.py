import pytest

from cognitheon.canvas import CanvasState
from cognitheon.edge import Edge, EdgeType
from cognitheon.geometry import Pos2
from cognitheon.graph import Graph
from cognitheon.node import Node
from cognitheon.resource import Resource
from cognitheon.selection import GraphSelection, SelectionKind


@pytest.fixture
def canvas():
    return Resource(CanvasState())


def make_node(i, x=0.0, y=0.0):
    return Node(id=i, position=Pos2(x, y), text=f"n{i}")


def connect(graph, canvas, a, b):
    return graph.add_edge(
        Edge.create(a, b, graph.get_node(a).position, graph.get_node(b).position, canvas)
    )


def test_add_and_get_node():
    graph = Graph()
    index = graph.add_node(make_node(1))
    assert graph.get_node(index) == make_node(1)
    assert graph.get_node(99) is None


def test_default_edge_type_is_line():
    assert Graph().edge_type is EdgeType.LINE


def test_indices_stable_after_removal():
    graph = Graph()
    a, b, c = (graph.add_node(make_node(i)) for i in range(3))
    graph.remove_node(b)
    assert list(graph.node_indices()) == [a, c]
    assert graph.get_node(c) == make_node(2)


def test_removed_slot_is_reused():
    graph = Graph()
    for i in range(3):
        graph.add_node(make_node(i))
    graph.remove_node(1)
    assert graph.add_node(make_node(9)) == 1


def test_remove_node_drops_edges_and_editing(canvas):
    graph = Graph()
    a, b, c = (graph.add_node(make_node(i)) for i in range(3))
    connect(graph, canvas, a, b)
    kept = connect(graph, canvas, b, c)
    graph.editing_node = b
    removed = graph.remove_node(a)
    assert removed == make_node(0)
    assert list(graph.edge_indices()) == [kept]
    assert graph.editing_node is None


def test_remove_missing_node_returns_none():
    assert Graph().remove_node(5) is None


def test_edge_exists_is_directed(canvas):
    graph = Graph()
    a, b = graph.add_node(make_node(0)), graph.add_node(make_node(1))
    connect(graph, canvas, a, b)
    assert graph.edge_exists(a, b)
    assert not graph.edge_exists(b, a)


def test_edge_count_undirected(canvas):
    graph = Graph()
    a, b, c = (graph.add_node(make_node(i)) for i in range(3))
    connect(graph, canvas, a, b)
    connect(graph, canvas, b, a)
    connect(graph, canvas, a, c)
    assert graph.edge_count_undirected(a, b) == 2
    assert graph.edge_count_undirected(b, a) == 2
    assert graph.edge_count_undirected(b, c) == 0


def test_get_and_remove_edge(canvas):
    graph = Graph()
    a, b = graph.add_node(make_node(0)), graph.add_node(make_node(1))
    index = connect(graph, canvas, a, b)
    edge = graph.get_edge(index)
    assert (edge.source, edge.target) == (a, b)
    assert graph.remove_edge(index) == edge
    assert graph.get_edge(index) is None
    assert not graph.edge_exists(a, b)


def test_add_edge_to_missing_node_raises(canvas):
    graph = Graph()
    a = graph.add_node(make_node(0))
    with pytest.raises(KeyError):
        graph.add_edge(Edge.create(a, 7, Pos2(), Pos2(), canvas))


def test_add_node_with_edge(canvas):
    graph = Graph()
    src = graph.add_node(make_node(0, 1.0, 2.0))
    dst = graph.add_node_with_edge(make_node(1, 5.0, 6.0), src, canvas)
    assert graph.get_node(dst) == make_node(1, 5.0, 6.0)
    assert graph.edge_exists(src, dst)
    edge = graph.get_edge(next(graph.edge_indices()))
    assert edge.line_anchors[0].canvas_pos == Pos2(1.0, 2.0)
    assert edge.line_anchors[1].canvas_pos == Pos2(5.0, 6.0)


def test_add_node_with_edge_missing_source(canvas):
    graph = Graph()
    with pytest.raises(KeyError):
        graph.add_node_with_edge(make_node(0), 3, canvas)
    assert list(graph.node_indices()) == []


def test_select_nodes_accumulate():
    graph = Graph()
    graph.select_node(1)
    graph.select_nodes([2, 3])
    assert graph.get_selected_nodes() == [1, 2, 3]
    assert graph.is_node_selected(2)
    assert not graph.is_node_selected(4)


def test_select_edge_replaces_node_selection():
    graph = Graph()
    graph.select_node(1)
    graph.select_edge(0)
    graph.select_edge(2)
    assert graph.selected == GraphSelection(SelectionKind.EDGE, [0, 2])
    assert graph.get_selected_nodes() == []
    assert not graph.is_node_selected(1)


def test_select_node_replaces_edge_selection():
    graph = Graph()
    graph.select_edge(0)
    graph.select_nodes([5])
    assert graph.selected == GraphSelection(SelectionKind.NODE, [5])


def test_get_selected_nodes_is_copy():
    graph = Graph()
    graph.select_node(1)
    graph.get_selected_nodes().append(9)
    assert graph.get_selected_nodes() == [1]


def test_reset(canvas):
    graph = Graph(EdgeType.BEZIER)
    a, b = graph.add_node(make_node(0)), graph.add_node(make_node(1))
    connect(graph, canvas, a, b)
    graph.select_node(a)
    graph.editing_node = a
    graph.reset()
    assert list(graph.node_indices()) == []
    assert list(graph.edge_indices()) == []
    assert graph.selected == GraphSelection()
    assert graph.editing_node is None
    assert graph.edge_type is EdgeType.BEZIER


def test_round_trip_keeps_indices(canvas):
    graph = Graph(EdgeType.BEZIER)
    a, b, c = (graph.add_node(make_node(i, i, -i)) for i in range(3))
    connect(graph, canvas, a, c)
    graph.remove_node(b)
    graph.select_node(a)
    restored = Graph.from_dict(graph.to_dict())
    assert restored.edge_type is EdgeType.BEZIER
    assert list(restored.node_indices()) == [a, c]
    assert restored.get_node(c) == graph.get_node(c)
    assert restored.edge_exists(a, c)
    assert restored.selected == GraphSelection()
    assert restored.to_dict() == graph.to_dict()
    assert restored.add_node(make_node(8)) == b


def test_from_dict_rejects_dangling_edge(canvas):
    graph = Graph()
    a, b = graph.add_node(make_node(0)), graph.add_node(make_node(1))
    connect(graph, canvas, a, b)
    data = graph.to_dict()
    data["nodes"][b] = None
    with pytest.raises(ValueError):
        Graph.from_dict(data)


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        Graph.from_dict({"edge_type": "Line", "nodes": []})