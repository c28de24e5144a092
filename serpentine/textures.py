"""Named images and drawing them onto surfaces."""

from __future__ import annotations

from pathlib import Path

import pygame

RectLike = pygame.Rect | tuple[int, int, int, int]


class TextureManager:
    """A registry of images addressed by id."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def load(self, file_path: str | Path, texture_id: str) -> bool:
        """Load an image file under ``texture_id``, replacing any earlier one."""
        try:
            image = pygame.image.load(str(file_path))
        except (pygame.error, OSError):
            return False
        self._textures[texture_id] = image
        return True

    def add(self, texture_id: str, image: pygame.Surface) -> None:
        """Register an already created image under ``texture_id``."""
        self._textures[texture_id] = image

    def draw(
        self,
        texture_id: str,
        surface: pygame.Surface,
        x: int,
        y: int,
        width: int,
        height: int,
        src_rect: RectLike | None = None,
        angle: float = 0.0,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> bool:
        """Draw a texture into the given rectangle.

        ``src_rect`` selects part of the texture, ``angle`` rotates clockwise
        in degrees about the rectangle's centre. Returns False when the id is
        unknown.
        """
        image = self._textures.get(texture_id)
        if image is None:
            return False
        if src_rect is not None:
            area = pygame.Rect(src_rect).clip(image.get_rect())
            if area.width == 0 or area.height == 0:
                return True
            image = image.subsurface(area)
        if image.get_size() != (width, height):
            image = pygame.transform.scale(image, (width, height))
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        if angle % 360:
            image = pygame.transform.rotate(image, -angle)
        dest = pygame.Rect(x, y, width, height)
        surface.blit(image, image.get_rect(center=dest.center))
        return True

    def draw_frame(
        self,
        texture_id: str,
        surface: pygame.Surface,
        x: int,
        y: int,
        width: int,
        height: int,
        row: int,
        frame: int,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> bool:
        """Draw one cell of a sprite sheet; rows count from 1, frames from 0."""
        src = (width * frame, height * (row - 1), width, height)
        return self.draw(
            texture_id, surface, x, y, width, height, src, 0.0, flip_x, flip_y
        )

    def clear(self) -> None:
        """Forget every texture."""
        self._textures.clear()

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures