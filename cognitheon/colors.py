"""Node colours for the light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Color32:
    """An RGBA colour with premultiplied alpha, one byte per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


def node_border(theme: Theme) -> Color32:
    if theme is Theme.LIGHT:
        return Color32(19, 90, 155, 200)
    return Color32(66, 144, 218, 200)


def node_border_selected(theme: Theme) -> Color32:
    return Color32(222, 78, 78, 200)


def node_background(theme: Theme) -> Color32:
    if theme is Theme.LIGHT:
        return Color32(180, 180, 180, 200)
    return Color32(70, 70, 70, 200)