"""Plane geometry used by the canvas: vectors, points, rectangles and transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

_F32_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: object) -> Vec2:
        if isinstance(factor, (int, float)):
            return Vec2(self.x * factor, self.y * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> Vec2:
        if isinstance(divisor, (int, float)):
            return Vec2(self.x / divisor, self.y / divisor)
        return NotImplemented

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length <= 0.0:
            return self
        return self / length

    def rot90(self) -> Vec2:
        """The vector rotated by a quarter turn."""
        return Vec2(self.y, -self.x)


@dataclass(frozen=True)
class Pos2:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Pos2:
        if isinstance(other, Vec2):
            return Pos2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Pos2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec2):
            return Pos2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def to_vec2(self) -> Vec2:
        """The vector from the origin to this point."""
        return Vec2(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Pos2
    max: Pos2

    @classmethod
    def from_min_max(cls, min_pos: Pos2, max_pos: Pos2) -> Rect:
        return cls(min_pos, max_pos)

    @classmethod
    def from_two_pos(cls, a: Pos2, b: Pos2) -> Rect:
        """The rectangle spanned by two opposite corners in any order."""
        return cls(
            Pos2(min(a.x, b.x), min(a.y, b.y)),
            Pos2(max(a.x, b.x), max(a.y, b.y)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Pos2:
        return Pos2((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    def contains(self, pos: Pos2) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.min.x <= pos.x <= self.max.x and self.min.y <= pos.y <= self.max.y


@dataclass
class TSTransform:
    """Uniform scaling followed by a translation."""

    scaling: float = 1.0
    translation: Vec2 = field(default_factory=Vec2)

    @classmethod
    def from_translation(cls, translation: Vec2) -> TSTransform:
        return cls(1.0, translation)

    @classmethod
    def from_scaling(cls, scaling: float) -> TSTransform:
        return cls(scaling, Vec2())

    def inverse(self) -> TSTransform:
        return TSTransform(1.0 / self.scaling, -self.translation / self.scaling)

    def mul_pos(self, pos: Pos2) -> Pos2:
        return Pos2(
            self.scaling * pos.x + self.translation.x,
            self.scaling * pos.y + self.translation.y,
        )

    def mul_rect(self, rect: Rect) -> Rect:
        return Rect(self.mul_pos(rect.min), self.mul_pos(rect.max))

    def __mul__(self, other: object):
        if isinstance(other, TSTransform):
            return TSTransform(
                self.scaling * other.scaling,
                self.translation + other.translation * self.scaling,
            )
        if isinstance(other, Pos2):
            return self.mul_pos(other)
        if isinstance(other, Rect):
            return self.mul_rect(other)
        return NotImplemented


class IntersectDirection(Enum):
    """Which side of a rectangle a ray leaves through."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


def widget_screen_pos(window_pos: Pos2, widget_rect: Rect) -> Pos2:
    """Position relative to the top-left corner of a widget."""
    offset = window_pos - widget_rect.min
    return Pos2(offset.x, offset.y)


def _first_hit(
    rect: Rect, origin: Pos2, dx: float, dy: float
) -> tuple[Pos2, IntersectDirection] | None:
    if abs(dx) < _F32_EPSILON and abs(dy) < _F32_EPSILON:
        return None

    candidates: list[tuple[float, Pos2]] = []

    if dx != 0.0:
        edge_x = rect.max.x if dx > 0.0 else rect.min.x
        t = (edge_x - origin.x) / dx
        if t >= 0.0:
            y_on_edge = origin.y + t * dy
            if rect.min.y <= y_on_edge <= rect.max.y:
                candidates.append((t, Pos2(edge_x, y_on_edge)))

    if dy != 0.0:
        edge_y = rect.max.y if dy > 0.0 else rect.min.y
        t = (edge_y - origin.y) / dy
        if t >= 0.0:
            x_on_edge = origin.x + t * dx
            if rect.min.x <= x_on_edge <= rect.max.x:
                candidates.append((t, Pos2(x_on_edge, edge_y)))

    if not candidates:
        return None

    _, pos = min(candidates, key=lambda candidate: candidate[0])
    if pos.x == rect.max.x:
        direction = IntersectDirection.RIGHT
    elif pos.x == rect.min.x:
        direction = IntersectDirection.LEFT
    elif pos.y == rect.max.y:
        direction = IntersectDirection.BOTTOM
    elif pos.y == rect.min.y:
        direction = IntersectDirection.TOP
    else:
        direction = IntersectDirection.LEFT
    return pos, direction


def intersect_rect_simple(
    canvas_rect: Rect, canvas_pos: Pos2
) -> tuple[Pos2, IntersectDirection] | None:
    """Where the ray from the rectangle's centre towards a point leaves the rectangle."""
    center = canvas_rect.center()
    return _first_hit(canvas_rect, center, canvas_pos.x - center.x, canvas_pos.y - center.y)


def intersect_rect_with_pos(
    canvas_rect: Rect, src_canvas_pos: Pos2, dst_canvas_pos: Pos2
) -> tuple[Pos2, IntersectDirection] | None:
    """Where the ray from one point towards another meets the rectangle's far edges."""
    return _first_hit(
        canvas_rect,
        src_canvas_pos,
        dst_canvas_pos.x - src_canvas_pos.x,
        dst_canvas_pos.y - src_canvas_pos.y,
    )


def edge_offset_direction(source_canvas_pos: Pos2, target_canvas_pos: Pos2) -> Vec2:
    """Unit vector perpendicular to the line between two points."""
    return (target_canvas_pos - source_canvas_pos).normalized().rot90()