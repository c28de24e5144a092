"""The player's snake: head movement, steering, growth and speed boost."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pygame

from serpentine.constants import (
    GRID_HEIGHT,
    GRID_SIZE,
    GRID_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Direction,
)
from serpentine.tail import Tails
from serpentine.utils import direction_to_angle
from serpentine.vector2d import Vector2D

if TYPE_CHECKING:
    from serpentine.textures import TextureManager

logger = logging.getLogger(__name__)

HEAD_TEXTURE_ID = "snake_head"
INITIAL_TAIL_SEGMENTS = 3
START_CELL = 5
FRAME_STEP = 0.016
NORMAL_DELAY = 0.2
BOOSTED_DELAY = 0.1
BOOST_DURATION_MS = 3000
_HEAD_FALLBACK_COLOR = (255, 0, 0)

_KEY_TURNS = {
    pygame.K_UP: (Direction.UP, Direction.DOWN),
    pygame.K_DOWN: (Direction.DOWN, Direction.UP),
    pygame.K_LEFT: (Direction.LEFT, Direction.RIGHT),
    pygame.K_RIGHT: (Direction.RIGHT, Direction.LEFT),
}

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Snake:
    """A head moving on the grid with a chain of tail segments behind it."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock: Callable[[], int] = clock if clock is not None else pygame.time.get_ticks
        self._grid_size = GRID_SIZE
        self._head = Vector2D(0, 0)
        self._direction = Direction.RIGHT
        self._next_direction = Direction.RIGHT
        self._move_timer = 0.0
        self._speed_boosted = False
        self._boost_started = 0
        self._tails = Tails(GRID_SIZE)
        self._head_texture_id = ""

    def setup(
        self,
        textures: TextureManager,
        head_path: str | Path,
        body_path: str | Path,
        last_tail_path: str | Path,
        curve_path: str | Path,
        curve_tail_path: str | Path,
    ) -> None:
        """Load the head and segment textures, then put the snake at its start."""
        self._grid_size = GRID_SIZE
        self._head_texture_id = HEAD_TEXTURE_ID
        if not textures.load(head_path, self._head_texture_id):
            logger.error("Failed to load snake head texture: %s", head_path)
        self._tails.setup(
            textures,
            body_path,
            "tails_body_straight",
            last_tail_path,
            "tails_last_straight",
            curve_path,
            "tails_body_curve",
            curve_tail_path,
            "tails_curve_end",
            INITIAL_TAIL_SEGMENTS,
            self._grid_size,
        )
        self.reset()

    def reset(self) -> None:
        """Return to the starting cell heading right with a fresh tail."""
        self._direction = Direction.RIGHT
        self._next_direction = Direction.RIGHT
        self._speed_boosted = False
        self._boost_started = 0
        self._move_timer = 0.0
        start = START_CELL * self._grid_size
        self._head = Vector2D(start, start)
        self._tails.initialize_body(
            self._head,
            direction_to_angle(self._direction),
            INITIAL_TAIL_SEGMENTS,
            self._grid_size,
        )

    def handle_key(self, key: int) -> None:
        """Queue a turn for an arrow key, ignoring a reversal onto the body."""
        turn = _KEY_TURNS.get(key)
        if turn is None:
            return
        wanted, opposite = turn
        if self._direction != opposite:
            self._next_direction = wanted

    def update(self) -> None:
        """Advance one frame: move a cell when the step delay has passed."""
        self._move_timer += FRAME_STEP
        delay = BOOSTED_DELAY if self._speed_boosted else NORMAL_DELAY

        if self._move_timer >= delay:
            self._move_timer = 0.0
            self._direction = self._next_direction
            old_head = self._head
            old_angle = direction_to_angle(self._direction)

            dx, dy = _STEPS.get(self._direction, (0, 0))
            x = self._head.x + dx * self._grid_size
            y = self._head.y + dy * self._grid_size
            if x < 0:
                x = (GRID_WIDTH - 1) * self._grid_size
            elif x >= SCREEN_WIDTH:
                x = 0
            if y < 0:
                y = (GRID_HEIGHT - 1) * self._grid_size
            elif y >= SCREEN_HEIGHT:
                y = 0
            self._head = Vector2D(x, y)
            self._tails.move_body(old_head, old_angle)

        if self._speed_boosted and self._clock() - self._boost_started > BOOST_DURATION_MS:
            self.reset_speed()

    def render(self, surface: pygame.Surface, textures: TextureManager) -> None:
        """Draw the tail, then the head on top of it."""
        self._tails.render(surface, textures)
        size = self._grid_size
        if self._head_texture_id:
            textures.draw(
                self._head_texture_id,
                surface,
                self._head.x,
                self._head.y,
                size,
                size,
                None,
                float(direction_to_angle(self._direction)),
            )
        else:
            surface.fill(
                _HEAD_FALLBACK_COLOR, pygame.Rect(self._head.x, self._head.y, size, size)
            )

    def grow(self) -> None:
        """Lengthen the tail by one segment."""
        self._tails.grow()

    def check_collision_with_self(self) -> bool:
        """Whether the head occupies the same place as any tail segment."""
        for index in range(self._tails.total_segments):
            segment = self._tails.segment_position(index)
            if segment == self._head:
                logger.debug("Head %s hit tail segment %d", self._head, index)
                return True
        return False

    def check_food_collision(self, food_pos: tuple[int, int]) -> bool:
        """Whether the head's grid cell is the given food cell."""
        head_cell = (int(self._head.x / GRID_SIZE), int(self._head.y / GRID_SIZE))
        return head_cell == tuple(food_pos)

    @property
    def head_position(self) -> Vector2D:
        """Pixel position of the head."""
        return self._head

    @property
    def direction(self) -> Direction:
        """The direction the head last moved in."""
        return self._direction

    @property
    def tails(self) -> Tails:
        """The segments behind the head."""
        return self._tails

    def increase_speed(self) -> None:
        """Start a speed boost now."""
        self._speed_boosted = True
        self._boost_started = self._clock()
        logger.debug("Speed boost started at %d", self._boost_started)

    def reset_speed(self) -> None:
        """End the speed boost."""
        self._speed_boosted = False
        logger.debug("Speed boost ended")

    @property
    def is_speed_boosted(self) -> bool:
        """Whether the snake is currently boosted."""
        return self._speed_boosted

    @property
    def speed_boost_timer(self) -> int:
        """Clock ticks at which the last boost started."""
        return self._boost_started