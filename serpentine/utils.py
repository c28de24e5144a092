"""Direction and angle helpers for snake segments."""

from __future__ import annotations

from typing import Protocol

from serpentine.constants import Direction

_ANGLES = {
    Direction.UP: 270,
    Direction.DOWN: 90,
    Direction.LEFT: 180,
    Direction.RIGHT: 0,
}


class _Point(Protocol):
    x: int
    y: int


def _half(value: int) -> int:
    return int(value / 2)


def direction_from_to(start: _Point, end: _Point, segment_size: int) -> Direction:
    """Return the grid direction leading from ``start`` to ``end``.

    A direction is reported only when the move is clearly along one axis:
    at least half a segment along it and less than half a segment across it.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    half = _half(segment_size)

    if abs(dx) >= half and abs(dy) < half:
        if dx > 0:
            return Direction.RIGHT
        if dx < 0:
            return Direction.LEFT
    elif abs(dy) >= half and abs(dx) < half:
        if dy > 0:
            return Direction.DOWN
        if dy < 0:
            return Direction.UP
    return Direction.UNKNOWN


def direction_to_angle(direction: Direction) -> int:
    """Clockwise drawing angle in degrees for a direction; 0 when unknown."""
    return _ANGLES.get(direction, 0)


def angle_to_direction(angle: int) -> Direction:
    """Direction for a stored drawing angle, or UNKNOWN for any other angle."""
    if angle == -90:
        return Direction.UP
    for direction, value in _ANGLES.items():
        if value == angle:
            return direction
    return Direction.UNKNOWN