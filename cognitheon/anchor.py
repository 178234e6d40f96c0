"""Anchor points at the ends of straight and Bézier edges."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from cognitheon.geometry import Pos2, Vec2

_HANDLE_OFFSET = Vec2(30.0, 0.0)


@dataclass
class LineAnchor:
    """End point of a straight edge."""

    canvas_pos: Pos2


@dataclass
class BezierAnchor:
    """End point of a Bézier edge with an incoming and an outgoing handle."""

    canvas_pos: Pos2
    handle_in_canvas_pos: Pos2
    handle_out_canvas_pos: Pos2
    is_smooth: bool

    @classmethod
    def new_smooth(cls, canvas_pos: Pos2) -> BezierAnchor:
        """A smooth anchor with horizontal, symmetric handles."""
        return cls(canvas_pos, canvas_pos - _HANDLE_OFFSET, canvas_pos + _HANDLE_OFFSET, True)

    @classmethod
    def new_sharp(cls, canvas_pos: Pos2) -> BezierAnchor:
        """A sharp anchor whose handles move independently."""
        return cls(canvas_pos, canvas_pos + -_HANDLE_OFFSET, canvas_pos + _HANDLE_OFFSET, False)

    def with_handles(self, handle_in: Pos2, handle_out: Pos2) -> BezierAnchor:
        """A copy of this anchor with the given handle positions."""
        return dataclasses.replace(
            self, handle_in_canvas_pos=handle_in, handle_out_canvas_pos=handle_out
        )

    def set_smooth(self) -> None:
        self.is_smooth = True
        self.enforce_smooth()

    def set_sharp(self) -> None:
        self.is_smooth = False

    def enforce_smooth(self) -> None:
        """Mirror the incoming handle to place the outgoing one."""
        in_vec = self.canvas_pos - self.handle_in_canvas_pos
        self.handle_out_canvas_pos = self.canvas_pos + in_vec