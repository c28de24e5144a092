"""Layout and drawing of the menus, overlays and HUD."""

from __future__ import annotations

import logging
from typing import NamedTuple

import pygame

from serpentine.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from serpentine.snake import BOOST_DURATION_MS
from serpentine.textures import TextureManager

logger = logging.getLogger(__name__)

Color = tuple[int, int, int] | tuple[int, int, int, int]

BACKGROUND_COLOR = (144, 238, 144)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
FALLBACK_BUTTON_COLOR = (100, 100, 100)

ICON_BUTTON_SIZE = 40
ICON_PADDING = 10

PAUSE_MENU_BG = (30, 30, 50, 210)
PAUSE_BUTTON_COLOR = (70, 80, 100)
PAUSE_BORDER_COLOR = (120, 130, 150)
PAUSE_TEXT_COLOR = (220, 220, 220)

OPTIONS_MENU_BG = (40, 40, 60, 230)
OPTIONS_BUTTON_COLOR = (80, 90, 110)
OPTIONS_BORDER_COLOR = (130, 140, 160)
OPTIONS_TEXT_COLOR = (230, 230, 230)
OPTIONS_VALUE_COLOR = (255, 220, 100)

BOOST_OUTLINE_COLOR = (200, 200, 200)
BOOST_FILL_COLOR = (255, 100, 100)

_PAUSE_MENU_SIZE = (350, 300)
_OPTIONS_MENU_SIZE = (400, 300)
_BOOST_BAR_SIZE = (200, 20)


class PauseMenuButtons(NamedTuple):
    """Clickable areas of the pause menu."""

    resume: pygame.Rect
    replay: pygame.Rect
    options: pygame.Rect


class OptionsMenuButtons(NamedTuple):
    """Clickable areas of the options menu."""

    music_down: pygame.Rect
    music_up: pygame.Rect
    sfx_down: pygame.Rect
    sfx_up: pygame.Rect
    back: pygame.Rect


def _half(value: int) -> int:
    return int(value / 2)


def _centered_rect(width: int, height: int) -> pygame.Rect:
    return pygame.Rect(
        _half(SCREEN_WIDTH - width), _half(SCREEN_HEIGHT - height), width, height
    )


def mute_button_rect() -> pygame.Rect:
    """The sound toggle in the top-right corner of the main menu."""
    return pygame.Rect(
        SCREEN_WIDTH - ICON_BUTTON_SIZE - ICON_PADDING,
        ICON_PADDING,
        ICON_BUTTON_SIZE,
        ICON_BUTTON_SIZE,
    )


def pause_button_rect() -> pygame.Rect:
    """The pause button in the top-right corner while playing."""
    return pygame.Rect(
        SCREEN_WIDTH - ICON_BUTTON_SIZE - ICON_PADDING,
        ICON_PADDING,
        ICON_BUTTON_SIZE,
        ICON_BUTTON_SIZE,
    )


def _pause_menu_rect() -> pygame.Rect:
    return _centered_rect(*_PAUSE_MENU_SIZE)


def pause_menu_buttons() -> PauseMenuButtons:
    """Resume, replay and options buttons stacked inside the pause menu."""
    menu = _pause_menu_rect()
    width = menu.w - 60
    height = 50
    top_padding = 80
    spacing = 15
    x = menu.x + _half(menu.w - width)
    resume = pygame.Rect(x, menu.y + top_padding, width, height)
    replay = pygame.Rect(x, resume.y + height + spacing, width, height)
    options = pygame.Rect(x, replay.y + height + spacing, width, height)
    return PauseMenuButtons(resume, replay, options)


def _options_menu_rect() -> pygame.Rect:
    return _centered_rect(*_OPTIONS_MENU_SIZE)


_OPTIONS_ITEM_HEIGHT = 40
_OPTIONS_SPACING = 10
_OPTIONS_BUTTON_SIZE = 35
_OPTIONS_VALUE_WIDTH = 70


def _options_rows() -> tuple[int, int, int]:
    """Top y of the music row, the effects row and the back button."""
    menu = _options_menu_rect()
    music_y = menu.y + 70
    sfx_y = music_y + _OPTIONS_ITEM_HEIGHT + _OPTIONS_SPACING
    back_y = sfx_y + _OPTIONS_ITEM_HEIGHT + _OPTIONS_SPACING * 3
    return music_y, sfx_y, back_y


def options_menu_buttons() -> OptionsMenuButtons:
    """Volume up/down buttons for music and effects, and the back button."""
    menu = _options_menu_rect()
    control_x = menu.x + 200
    size = _OPTIONS_BUTTON_SIZE
    music_y, sfx_y, back_y = _options_rows()

    def pair(row_y: int) -> tuple[pygame.Rect, pygame.Rect]:
        y = row_y + _half(_OPTIONS_ITEM_HEIGHT - size)
        down = pygame.Rect(control_x + _OPTIONS_VALUE_WIDTH + _OPTIONS_SPACING, y, size, size)
        up = pygame.Rect(down.x + size + _OPTIONS_SPACING, y, size, size)
        return down, up

    music_down, music_up = pair(music_y)
    sfx_down, sfx_up = pair(sfx_y)
    back_width, back_height = 120, 40
    back = pygame.Rect(menu.x + _half(menu.w - back_width), back_y, back_width, back_height)
    return OptionsMenuButtons(music_down, music_up, sfx_down, sfx_up, back)


def game_over_restart_rect() -> pygame.Rect:
    """The restart button on the game-over screen."""
    width, height = 200, 50
    return pygame.Rect(_half(SCREEN_WIDTH - width), SCREEN_HEIGHT // 2 + 40, width, height)


def speed_boost_fraction(elapsed_ms: float) -> float | None:
    """Share of the speed boost still left, or None once it has run out."""
    if elapsed_ms >= BOOST_DURATION_MS:
        return None
    return max(0.0, 1.0 - elapsed_ms / BOOST_DURATION_MS)


class ScreenRenderer:
    """Draws the game's screens onto a surface with a font and textures."""

    def __init__(
        self, surface: pygame.Surface, font: pygame.font.Font, textures: TextureManager
    ) -> None:
        self.surface = surface
        self.font = font
        self.textures = textures

    def _text(self, text: str, color: Color) -> pygame.Surface | None:
        if not text:
            return None
        try:
            return self.font.render(text, False, color)
        except pygame.error as exc:
            logger.error("Cannot render text %r: %s", text, exc)
            return None

    def _blit_centered_x(self, text: str, color: Color, y: int) -> None:
        image = self._text(text, color)
        if image is not None:
            self.surface.blit(image, (_half(SCREEN_WIDTH - image.get_width()), y))

    def _panel(self, rect: pygame.Rect, background: Color, border: Color) -> None:
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(background)
        self.surface.blit(overlay, rect.topleft)
        pygame.draw.rect(self.surface, border, rect, 1)

    def _title_in(self, rect: pygame.Rect, text: str, color: Color) -> None:
        image = self._text(text, color)
        if image is not None:
            self.surface.blit(image, (rect.x + _half(rect.w - image.get_width()), rect.y + 20))

    def text_on_button(
        self, text: str, rect: pygame.Rect, color: Color
    ) -> pygame.Rect | None:
        """Draw text centred in ``rect``; return where it went, None for empty text."""
        image = self._text(text, color)
        if image is None:
            return None
        width, height = self.font.size(text)
        target = pygame.Rect(
            rect.x + _half(rect.w - width), rect.y + _half(rect.h - height), width, height
        )
        if image.get_size() != target.size:
            image = pygame.transform.scale(image, target.size)
        self.surface.blit(image, target.topleft)
        return target

    def render_menu(self, muted: bool, sound_on_id: str, sound_off_id: str) -> None:
        """Title, start prompt and the sound toggle icon."""
        self._blit_centered_x("SNAKE GAME", BLACK, SCREEN_HEIGHT // 4)
        self._blit_centered_x("Press ENTER to Start", BLACK, SCREEN_HEIGHT // 2 + 50)
        rect = mute_button_rect()
        icon_id = sound_off_id if muted else sound_on_id
        if not self.textures.draw(icon_id, self.surface, rect.x, rect.y, rect.w, rect.h):
            self.surface.fill(FALLBACK_BUTTON_COLOR, rect)

    def render_pause_button(self, pause_icon_id: str) -> None:
        """The pause icon, or a drawn two-bar symbol when it has no texture."""
        rect = pause_button_rect()
        if self.textures.draw(pause_icon_id, self.surface, rect.x, rect.y, rect.w, rect.h):
            return
        self.surface.fill(FALLBACK_BUTTON_COLOR, rect)
        bar_width = rect.w // 6
        bar_height = rect.h // 2
        bar_padding = rect.w // 5
        bar_y = rect.y + _half(rect.h - bar_height)
        self.surface.fill(WHITE, pygame.Rect(rect.x + bar_padding, bar_y, bar_width, bar_height))
        self.surface.fill(
            WHITE,
            pygame.Rect(rect.right - bar_padding - bar_width, bar_y, bar_width, bar_height),
        )

    def render_score(self, score: int) -> pygame.Rect | None:
        """The score in the top-left corner; returns where it was drawn."""
        text = f"Score: {score}"
        image = self._text(text, BLACK)
        if image is None:
            return None
        width, height = self.font.size(text)
        target = pygame.Rect(10, 10, width, height)
        if image.get_size() != target.size:
            image = pygame.transform.scale(image, target.size)
        self.surface.blit(image, target.topleft)
        return target

    def render_speed_boost_bar(self, elapsed_ms: float) -> pygame.Rect | None:
        """The shrinking boost bar; returns its filled part, None when the boost is over."""
        fraction = speed_boost_fraction(elapsed_ms)
        if fraction is None:
            return None
        bar_width, bar_height = _BOOST_BAR_SIZE
        padding = 10
        outline = pygame.Rect(
            SCREEN_WIDTH - bar_width - padding,
            SCREEN_HEIGHT - bar_height - padding,
            bar_width,
            bar_height,
        )
        pygame.draw.rect(self.surface, BOOST_OUTLINE_COLOR, outline, 1)
        fill = pygame.Rect(
            outline.x + 2, outline.y + 2, int((bar_width - 4) * fraction), bar_height - 4
        )
        self.surface.fill(BOOST_FILL_COLOR, fill)
        return fill

    def render_game_over(self, score: int) -> pygame.Rect:
        """Game-over title, final score and the restart button; returns the button."""
        self._blit_centered_x("GAME OVER", BLACK, SCREEN_HEIGHT // 3)
        self._blit_centered_x(f"Score: {score}", BLACK, SCREEN_HEIGHT // 2 - 30)
        button = game_over_restart_rect()
        self.surface.fill(PAUSE_BUTTON_COLOR, button)
        pygame.draw.rect(self.surface, PAUSE_BORDER_COLOR, button, 1)
        self.text_on_button("CHOI LAI", button, WHITE)
        return button

    def render_pause_menu(self) -> PauseMenuButtons:
        """The translucent pause panel with its buttons; returns the buttons."""
        menu = _pause_menu_rect()
        self._panel(menu, PAUSE_MENU_BG, PAUSE_BORDER_COLOR)
        self._title_in(menu, "PAUSED", PAUSE_TEXT_COLOR)
        buttons = pause_menu_buttons()
        for rect, label in zip(buttons, ("RESUME", "REPLAY", "OPTIONS")):
            self.surface.fill(PAUSE_BUTTON_COLOR, rect)
            pygame.draw.rect(self.surface, PAUSE_BORDER_COLOR, rect, 1)
            self.text_on_button(label, rect, PAUSE_TEXT_COLOR)
        return buttons

    def _label(self, text: str, x: int, row_y: int, color: Color) -> None:
        width, height = self.font.size(text)
        rect = pygame.Rect(x, row_y + _half(_OPTIONS_ITEM_HEIGHT - height), width, height)
        self.text_on_button(text, rect, color)

    def render_options_menu(self, music_volume: int, sfx_volume: int) -> OptionsMenuButtons:
        """The volume panel showing both percentages; returns its buttons."""
        menu = _options_menu_rect()
        self._panel(menu, OPTIONS_MENU_BG, OPTIONS_BORDER_COLOR)
        self._title_in(menu, "OPTIONS", OPTIONS_TEXT_COLOR)

        label_x = menu.x + 30
        control_x = menu.x + 200
        music_y, sfx_y, _ = _options_rows()
        buttons = options_menu_buttons()

        rows = (
            ("Music Volume:", music_volume, music_y, buttons.music_down, buttons.music_up),
            ("SFX Volume:", sfx_volume, sfx_y, buttons.sfx_down, buttons.sfx_up),
        )
        for label, value, row_y, down, up in rows:
            self._label(label, label_x, row_y, OPTIONS_TEXT_COLOR)
            self._label(f"{value}%", control_x, row_y, OPTIONS_VALUE_COLOR)
            for rect, sign in ((down, "-"), (up, "+")):
                self.surface.fill(OPTIONS_BUTTON_COLOR, rect)
                self.text_on_button(sign, rect, OPTIONS_TEXT_COLOR)

        self.surface.fill(OPTIONS_BUTTON_COLOR, buttons.back)
        self.text_on_button("Back", buttons.back, OPTIONS_TEXT_COLOR)
        return buttons