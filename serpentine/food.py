"""Food items placed on the grid."""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING

from serpentine.constants import GRID_SIZE

if TYPE_CHECKING:
    import pygame

    from serpentine.textures import TextureManager


class FoodType(Enum):
    """Kinds of food and the texture each is drawn with."""

    BALL = "ball"
    SPEED_BOOST = "speed_food"


class Food:
    """A single piece of food at a grid cell."""

    def __init__(
        self, grid_width: int, grid_height: int, rng: random.Random | None = None
    ) -> None:
        self.grid_width = grid_width
        self.grid_height = grid_height
        self._rng = rng if rng is not None else random.Random()
        self.position: tuple[int, int] = (0, 0)
        self.is_active = False
        self.is_speed_food = False
        self.food_type = FoodType.BALL
        self.generate_food()

    def _place(self) -> None:
        self.position = (
            self._rng.randrange(self.grid_width),
            self._rng.randrange(self.grid_height),
        )
        self.is_active = True

    def generate_food(self) -> None:
        """Place an ordinary food item at a random cell."""
        self._place()
        self.is_speed_food = False
        self.food_type = FoodType.BALL

    def generate_speed_food(self) -> None:
        """Place a speed-boost food item at a random cell."""
        self._place()
        self.is_speed_food = True
        self.food_type = FoodType.SPEED_BOOST

    def render(self, surface: pygame.Surface, textures: TextureManager) -> None:
        """Draw the food if it is active."""
        if not self.is_active:
            return
        x, y = self.position
        textures.draw(
            self.food_type.value, surface, x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE, GRID_SIZE
        )