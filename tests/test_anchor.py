import pytest

from cognitheon.anchor import BezierAnchor, LineAnchor
from cognitheon.geometry import Pos2, Vec2


def test_line_anchor_keeps_position():
    p = Pos2(4.0, 5.0)
    assert LineAnchor(p).canvas_pos == p


def test_new_smooth_handles_are_horizontal_and_symmetric():
    p = Pos2(100.0, 50.0)
    anchor = BezierAnchor.new_smooth(p)
    assert anchor.is_smooth
    assert anchor.handle_in_canvas_pos == p - Vec2(30.0, 0.0)
    assert anchor.handle_out_canvas_pos == p + Vec2(30.0, 0.0)


def test_new_sharp_same_handles_but_not_smooth():
    p = Pos2(-7.0, 3.0)
    sharp = BezierAnchor.new_sharp(p)
    smooth = BezierAnchor.new_smooth(p)
    assert not sharp.is_smooth
    assert sharp.handle_in_canvas_pos == smooth.handle_in_canvas_pos
    assert sharp.handle_out_canvas_pos == smooth.handle_out_canvas_pos


def test_with_handles_returns_updated_copy():
    original = BezierAnchor.new_sharp(Pos2(0.0, 0.0))
    h_in = Pos2(-5.0, 8.0)
    h_out = Pos2(12.0, -1.0)
    updated = original.with_handles(h_in, h_out)
    assert updated.handle_in_canvas_pos == h_in
    assert updated.handle_out_canvas_pos == h_out
    assert updated.canvas_pos == original.canvas_pos
    assert original.handle_in_canvas_pos != h_in


def test_enforce_smooth_makes_anchor_the_midpoint():
    anchor = BezierAnchor.new_sharp(Pos2(10.0, 20.0)).with_handles(
        Pos2(3.0, 14.0), Pos2(50.0, 50.0)
    )
    anchor.enforce_smooth()
    mid_x = (anchor.handle_in_canvas_pos.x + anchor.handle_out_canvas_pos.x) / 2
    mid_y = (anchor.handle_in_canvas_pos.y + anchor.handle_out_canvas_pos.y) / 2
    assert mid_x == pytest.approx(anchor.canvas_pos.x)
    assert mid_y == pytest.approx(anchor.canvas_pos.y)


def test_set_smooth_and_set_sharp():
    anchor = BezierAnchor.new_sharp(Pos2(0.0, 0.0)).with_handles(
        Pos2(-4.0, -4.0), Pos2(9.0, 1.0)
    )
    anchor.set_smooth()
    assert anchor.is_smooth
    assert anchor.canvas_pos - anchor.handle_in_canvas_pos == (
        anchor.handle_out_canvas_pos - anchor.canvas_pos
    )
    out_before = anchor.handle_out_canvas_pos
    anchor.set_sharp()
    assert not anchor.is_smooth
    assert anchor.handle_out_canvas_pos == out_before