import pytest

from cognitheon.buttons import PointerButton
from cognitheon.canvas import CanvasState
from cognitheon.context import (
    FrameInput,
    InputContext,
    detect_drag_canvas,
    detect_select_node,
)
from cognitheon.events import Key, Modifiers
from cognitheon.geometry import Pos2, Rect, TSTransform, Vec2
from cognitheon.graph import Graph
from cognitheon.node import Node
from cognitheon.render_info import NodeRenderInfo
from cognitheon.resource import Resource


@pytest.fixture
def setup():
    graph = Graph()
    first = graph.add_node(Node(0, Pos2(5.0, 5.0)))
    second = graph.add_node(Node(1, Pos2(50.0, 50.0)))
    canvas = CanvasState()
    context = InputContext(Resource(graph), Resource(canvas))
    infos = {
        first: NodeRenderInfo(Rect(Pos2(0.0, 0.0), Pos2(10.0, 10.0))),
        second: NodeRenderInfo(Rect(Pos2(40.0, 40.0), Pos2(60.0, 60.0))),
    }
    return context, canvas, first, second, infos


def test_update_tracks_mouse_positions(setup):
    context, *_ = setup
    context.update(FrameInput(hover_pos=Pos2(3.0, 4.0)))
    context.update(FrameInput(hover_pos=Pos2(7.0, 8.0)))
    assert context.prev_mouse_pos == Pos2(3.0, 4.0)
    assert context.current_mouse_pos == Pos2(7.0, 8.0)


def test_update_without_hover_keeps_position(setup):
    context, *_ = setup
    context.update(FrameInput(hover_pos=Pos2(3.0, 4.0)))
    context.update(FrameInput())
    assert context.current_mouse_pos == Pos2(3.0, 4.0)
    assert context.prev_mouse_pos == Pos2(3.0, 4.0)


def test_update_copies_keys_buttons_and_timing(setup):
    context, *_ = setup
    mods = Modifiers(ctrl=True)
    context.update(
        FrameInput(
            modifiers=mods,
            stable_dt=0.25,
            keys_down=frozenset({Key.SPACE}),
            buttons_down=frozenset({PointerButton.PRIMARY}),
        )
    )
    assert context.modifiers == mods
    assert context.delta_time == 0.25
    assert context.pressed_keys[Key.SPACE] is True
    assert context.pressed_keys[Key.ESCAPE] is False
    assert set(context.pressed_keys) == set(Key)
    assert context.pressed_buttons.get(PointerButton.PRIMARY) is True
    assert context.pressed_buttons.get(PointerButton.SECONDARY) is False


def test_update_releases_buttons(setup):
    context, *_ = setup
    context.update(FrameInput(buttons_down=frozenset({PointerButton.MIDDLE})))
    context.update(FrameInput())
    assert context.pressed_buttons.get(PointerButton.MIDDLE) is False


def test_hit_test_finds_node(setup):
    context, _, first, second, infos = setup
    context.update(FrameInput(node_render_infos=infos))
    assert context.hit_test_node(Pos2(5.0, 5.0)) == first
    assert context.hit_test_node(Pos2(45.0, 55.0)) == second
    assert context.hit_test_node(Pos2(25.0, 25.0)) is None


def test_hit_test_without_render_info_misses(setup):
    context, _, _, _, _ = setup
    assert context.hit_test_node(Pos2(5.0, 5.0)) is None


def test_hit_test_uses_screen_transform(setup):
    context, canvas, first, _, infos = setup
    canvas.transform = TSTransform(2.0, Vec2())
    context.update(FrameInput(node_render_infos=infos))
    assert context.hit_test_node(Pos2(15.0, 15.0)) == first


def test_hit_test_skips_removed_node(setup):
    context, _, first, _, infos = setup
    context.graph_resource.with_resource(lambda graph: graph.remove_node(first))
    context.update(FrameInput(node_render_infos=infos))
    assert context.hit_test_node(Pos2(5.0, 5.0)) is None


def test_screen_canvas_round_trip(setup):
    context, canvas, *_ = setup
    canvas.transform = TSTransform(2.0, Vec2(10.0, -4.0))
    point = Pos2(3.0, 7.0)
    back = context.screen_to_canvas(context.canvas_to_screen(point))
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_identity_transform_leaves_points(setup):
    context, *_ = setup
    assert context.canvas_to_screen(Pos2(1.0, 2.0)) == Pos2(1.0, 2.0)


def test_detect_drag_canvas():
    frame = FrameInput(
        keys_down=frozenset({Key.SPACE}),
        buttons_pressed=frozenset({PointerButton.PRIMARY}),
    )
    assert detect_drag_canvas(frame) is True
    assert detect_select_node(frame) is False


def test_detect_select_node():
    frame = FrameInput(
        keys_down=frozenset({Key.SPACE}),
        buttons_pressed=frozenset({PointerButton.SECONDARY}),
    )
    assert detect_select_node(frame) is True
    assert detect_drag_canvas(frame) is False


def test_detectors_need_space_and_no_modifiers():
    no_space = FrameInput(buttons_pressed=frozenset({PointerButton.PRIMARY}))
    with_shift = FrameInput(
        keys_down=frozenset({Key.SPACE}),
        modifiers=Modifiers(shift=True),
        buttons_pressed=frozenset({PointerButton.PRIMARY}),
    )
    assert detect_drag_canvas(no_space) is False
    assert detect_drag_canvas(with_shift) is False