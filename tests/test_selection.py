from cognitheon.selection import GraphSelection, SelectionKind


def test_default_is_empty():
    selection = GraphSelection()
    assert selection.kind is SelectionKind.NONE
    assert selection.indices == []
    assert not selection.is_nodes()
    assert not selection.is_edge()


def test_node_selection():
    selection = GraphSelection(SelectionKind.NODE, [1, 2])
    assert selection.is_nodes()
    assert not selection.is_edge()


def test_edge_selection():
    selection = GraphSelection(SelectionKind.EDGE, [0])
    assert selection.is_edge()
    assert not selection.is_nodes()


def test_clear():
    selection = GraphSelection(SelectionKind.NODE, [3])
    selection.clear()
    assert selection == GraphSelection()


def test_defaults_not_shared():
    a, b = GraphSelection(), GraphSelection()
    a.indices.append(1)
    assert b.indices == []