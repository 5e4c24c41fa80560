"""Window placement geometry: anchoring windows to corners and keeping popups in bounds."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "Vec2",
    "WindowPos",
    "Placement",
    "is_point_in_rect",
    "next_window_placement",
    "placement_in_window",
    "adjust_popup_to_bounds",
]


@dataclass(frozen=True)
class Vec2:
    """Immutable two-component vector supporting element-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


class WindowPos(enum.IntEnum):
    """Where a window is anchored."""

    CENTER = 0
    CUSTOM = 1
    TOP_LEFT = 2
    TOP_RIGHT = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5

    @property
    def is_right(self) -> bool:
        return self in (WindowPos.TOP_RIGHT, WindowPos.BOTTOM_RIGHT)

    @property
    def is_bottom(self) -> bool:
        return self in (WindowPos.BOTTOM_LEFT, WindowPos.BOTTOM_RIGHT)

    @property
    def is_corner(self) -> bool:
        return self >= WindowPos.TOP_LEFT


@dataclass(frozen=True)
class Placement:
    """Position of a window together with the pivot it is anchored by (0..1 per axis)."""

    pos: Vec2
    pivot: Vec2


_CENTER_PIVOT = Vec2(0.5, 0.5)


def is_point_in_rect(point: Vec2, rect_pos: Vec2, rect_size: Vec2) -> bool:
    """Return True if *point* lies inside the rectangle, edges included."""
    return (
        rect_pos.x <= point.x <= rect_pos.x + rect_size.x
        and rect_pos.y <= point.y <= rect_pos.y + rect_size.y
    )


def _corner_placement(
    location: WindowPos,
    pos: Vec2,
    size: Vec2,
    padding: float,
    top_offset: float,
) -> Placement:
    x = pos.x + size.x - padding if location.is_right else pos.x + padding
    y = pos.y + size.y - padding if location.is_bottom else pos.y + padding + top_offset
    pivot = Vec2(1.0 if location.is_right else 0.0, 1.0 if location.is_bottom else 0.0)
    return Placement(Vec2(x, y), pivot)


def next_window_placement(
    location: WindowPos,
    work_pos: Vec2,
    work_size: Vec2,
    padding: float = 10.0,
) -> Placement | None:
    """Placement of a window anchored within a work area.

    Returns None for ``WindowPos.CUSTOM``, where the window keeps its own position.
    """
    location = WindowPos(location)
    if location is WindowPos.CENTER:
        return Placement(work_pos + work_size / 2, _CENTER_PIVOT)
    if not location.is_corner:
        return None
    return _corner_placement(location, work_pos, work_size, padding, 0.0)


def placement_in_window(
    location: WindowPos,
    pos: Vec2,
    size: Vec2,
    padding: float = 10.0,
    title_bar_height: float = 0.0,
) -> Placement | None:
    """Placement of a window anchored inside another window.

    Top-anchored placements are moved down by *title_bar_height*. Returns
    None for ``WindowPos.CUSTOM``.
    """
    location = WindowPos(location)
    if location is WindowPos.CENTER:
        return Placement(Vec2(pos.x + size.x / 2, pos.y + size.y / 2), _CENTER_PIVOT)
    if not location.is_corner:
        return None
    return _corner_placement(location, pos, size, padding, title_bar_height)


def adjust_popup_to_bounds(
    popup_pos: Vec2,
    popup_size: Vec2,
    window_pos: Vec2,
    window_size: Vec2,
) -> Vec2:
    """Move a popup left and up so it does not extend past the window's right or bottom edge."""
    x, y = popup_pos.x, popup_pos.y
    right = window_pos.x + window_size.x
    bottom = window_pos.y + window_size.y
    if x + popup_size.x > right:
        x = right - popup_size.x
    if y + popup_size.y > bottom:
        y = bottom - popup_size.y
    return Vec2(x, y)