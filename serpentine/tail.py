"""Body and tail segments that follow the snake's head."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from serpentine.constants import GRID_SIZE, Direction
from serpentine.utils import angle_to_direction, direction_from_to, direction_to_angle
from serpentine.vector2d import Vector2D

if TYPE_CHECKING:
    from pathlib import Path

    import pygame

    from serpentine.textures import TextureManager

logger = logging.getLogger(__name__)

Rect = tuple[int, int, int, int]

_NO_PIVOT = Vector2D(-1, -1)


@dataclass(frozen=True)
class SegmentSprite:
    """What to draw for one segment: texture, place, rotation and sheet cell."""

    texture_id: str
    position: Vector2D
    angle: float = 0.0
    src_rect: Rect | None = None


class Tails:
    """The chain of segments behind the head, with their stored angles."""

    def __init__(self, segment_size: int = GRID_SIZE) -> None:
        self.segment_size = segment_size
        self._segments: list[Vector2D] = []
        self._angles: list[int] = []
        self._count = 0
        self._curve_pivot = _NO_PIVOT
        self._curve_src: Rect = (0, 0, 0, 0)
        self.body_id = ""
        self.last_tail_id = ""
        self.curve_id = ""
        self.curve_tail_id = ""

    def setup(
        self,
        textures: TextureManager,
        body_path: str | Path,
        body_id: str,
        last_tail_path: str | Path,
        last_tail_id: str,
        curve_path: str | Path,
        curve_id: str,
        curve_tail_path: str | Path,
        curve_tail_id: str,
        initial_segments: int,
        segment_size: int,
    ) -> None:
        """Load the segment textures and create the initial segments at the origin."""
        for path, texture_id in (
            (body_path, body_id),
            (last_tail_path, last_tail_id),
            (curve_path, curve_id),
            (curve_tail_path, curve_tail_id),
        ):
            if not textures.load(path, texture_id):
                logger.error("Failed to load tail texture: %s", path)
        self.body_id = body_id
        self.last_tail_id = last_tail_id
        self.curve_id = curve_id
        self.curve_tail_id = curve_tail_id

        self.segment_size = segment_size
        self._count = initial_segments if initial_segments > 0 else 1
        self._curve_pivot = _NO_PIVOT
        self._segments = [Vector2D(0, 0)] * self._count
        self._angles = [0] * self._count

    def initialize_body(
        self, leader_pos: Vector2D, leader_angle: int, num_segments: int, segment_size: int
    ) -> None:
        """Lay the segments out in a straight line behind the leader."""
        self.segment_size = segment_size
        self._count = num_segments if num_segments > 0 else 1

        def place(step: int) -> Vector2D:
            offset = step * segment_size
            if leader_angle == 0:
                return Vector2D(leader_pos.x - offset, leader_pos.y)
            if leader_angle == 180:
                return Vector2D(leader_pos.x + offset, leader_pos.y)
            if leader_angle in (-90, 270):
                return Vector2D(leader_pos.x, leader_pos.y + offset)
            if leader_angle == 90:
                return Vector2D(leader_pos.x, leader_pos.y - offset)
            return leader_pos

        self._segments = [place(i + 1) for i in range(self._count)]
        self._angles = [leader_angle] * self._count

    def move_body(self, old_head_position: Vector2D, old_head_angle: int) -> None:
        """Shift every segment into its predecessor's place; the first takes the head's."""
        if not self._segments:
            return
        self._segments = [old_head_position, *self._segments[:-1]]
        self._angles = [old_head_angle, *self._angles[:-1]]

    def grow(self) -> None:
        """Add a segment duplicating the current last one."""
        if not self._segments:
            logger.warning("Tails.grow() called with no segments; nothing to extend.")
            return
        self._segments.append(self._segments[-1])
        self._angles.append(self._angles[-1])
        self._count += 1

    @property
    def total_segments(self) -> int:
        """Number of segments behind the head."""
        return self._count

    def segment_position(self, index: int) -> Vector2D:
        """Pixel position of a segment; raises IndexError outside 0..total-1."""
        if not 0 <= index < min(self._count, len(self._segments)):
            raise IndexError(f"segment index out of range: {index}")
        return self._segments[index]

    def _curve_cell(self, dir_in: Direction, dir_out: Direction) -> Rect | None:
        size = self.segment_size
        turns = {
            (Direction.RIGHT, Direction.UP): 0,
            (Direction.DOWN, Direction.LEFT): 0,
            (Direction.LEFT, Direction.UP): 1,
            (Direction.DOWN, Direction.RIGHT): 1,
            (Direction.RIGHT, Direction.DOWN): 2,
            (Direction.UP, Direction.LEFT): 2,
            (Direction.LEFT, Direction.DOWN): 3,
            (Direction.UP, Direction.RIGHT): 3,
        }
        cell = turns.get((dir_in, dir_out))
        if cell is None:
            return None
        return (size * cell, 0, size, size)

    def _body_sprite(self, index: int) -> SegmentSprite:
        current = self._segments[index]
        if index == 0:
            dir_in = angle_to_direction(self._angles[0])
        else:
            dir_in = direction_from_to(self._segments[index - 1], current, self.segment_size)
        dir_out = direction_from_to(current, self._segments[index + 1], self.segment_size)
        straight = SegmentSprite(self.body_id, current, float(direction_to_angle(dir_in)))

        if Direction.UNKNOWN in (dir_in, dir_out) or dir_in == dir_out:
            return straight
        cell = self._curve_cell(dir_in, dir_out)
        if cell is None:
            return straight
        if index == self._count - 2:
            self._curve_pivot = current
            self._curve_src = cell
        return SegmentSprite(self.curve_id, current, 0.0, cell)

    def _last_sprite(self) -> SegmentSprite:
        last = self._count - 1
        position = self._segments[last]
        if self._count == 1:
            direction = angle_to_direction(self._angles[last])
        else:
            direction = direction_from_to(self._segments[last - 1], position, self.segment_size)
        if (
            self._count > 1
            and self._segments[last - 1] == self._curve_pivot
            and self._curve_pivot.x != -1
        ):
            return SegmentSprite(self.curve_tail_id, position, 0.0, self._curve_src)
        return SegmentSprite(self.last_tail_id, position, float(direction_to_angle(direction)))

    def sprites(self) -> list[SegmentSprite]:
        """Work out how each segment is drawn, from the first behind the head to the tail.

        A curve just before the tail is remembered, so the tail end is drawn
        with the matching curved-tail cell.
        """
        if self._count == 0 or not self._segments:
            return []
        body = [self._body_sprite(i) for i in range(self._count - 1)]
        return [*body, self._last_sprite()]

    def render(self, surface: pygame.Surface, textures: TextureManager) -> None:
        """Draw every segment that has a texture id."""
        size = self.segment_size
        for sprite in self.sprites():
            if not sprite.texture_id:
                continue
            textures.draw(
                sprite.texture_id,
                surface,
                sprite.position.x,
                sprite.position.y,
                size,
                size,
                sprite.src_rect,
                sprite.angle,
            )