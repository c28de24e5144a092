"""The game loop: states, input, scoring and drawing."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable, Sequence

import pygame

from serpentine.audio import MIX_MAX_VOLUME, AudioManager
from serpentine.constants import GRID_HEIGHT, GRID_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH, GameState
from serpentine.food import Food, FoodType
from serpentine.highscores import HighScoreManager
from serpentine.screens import (
    BACKGROUND_COLOR,
    ScreenRenderer,
    game_over_restart_rect,
    mute_button_rect,
    options_menu_buttons,
    pause_button_rect,
    pause_menu_buttons,
)
from serpentine.snake import Snake
from serpentine.textures import TextureManager

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"
FONT_PATH = "font.ttf"
FONT_SIZE = 24
DEFAULT_VOLUME_PERCENT = 80
VOLUME_STEP = 10
MAX_VOLUME_PERCENT = 100
NORMAL_FOOD_POINTS = 10
SPEED_FOOD_POINTS = 20
SPEED_FOOD_ODDS = 7
TARGET_FRAME_TIME = 1.0 / 60.0

PAUSE_ICON_ID = "pause_icon_id"
SOUND_ON_ICON_ID = "sound_on_icon_id"
SOUND_OFF_ICON_ID = "sound_off_icon_id"

_TEXTURES = (
    ("background.png", "background"),
    ("normalfood.png", FoodType.BALL.value),
    ("speedfood.png", FoodType.SPEED_BOOST.value),
    ("Mute Button unmuted1.png", SOUND_ON_ICON_ID),
    ("Mute Button muted1.png", SOUND_OFF_ICON_ID),
    ("pause_icon.png", PAUSE_ICON_ID),
)
_SOUNDS = (
    ("eat_food.wav", "eat_sound"),
    ("game_over.wav", "gameover_sound"),
    ("click.wav", "click_sound"),
)
_MUSIC = ("background_music.mp3", "bg_music")
_SNAKE_IMAGES = ("snake.png", "body.png", "last_tail.png", "curve.png", "curve_tail.png")


class Game:
    """Owns the snake, the food and the screens, and switches between states."""

    def __init__(
        self,
        audio: AudioManager | None = None,
        highscores: HighScoreManager | None = None,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.audio = audio
        self.highscores = highscores
        self._clock: Callable[[], int] = clock if clock is not None else pygame.time.get_ticks
        self._rng = rng if rng is not None else random.Random()
        self.textures = TextureManager()
        self.food = Food(GRID_WIDTH, GRID_HEIGHT, self._rng)
        self.snake = Snake(self._clock)
        self.snake.reset()
        self.state = GameState.MENU
        self.score = 0
        self.running = True
        self.music_volume = DEFAULT_VOLUME_PERCENT
        self.sfx_volume = DEFAULT_VOLUME_PERCENT
        self._surface: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._screens: ScreenRenderer | None = None

    def _play(self, sound_id: str) -> None:
        if self.audio is not None:
            self.audio.play_sound(sound_id, 0)

    def init(self) -> bool:
        """Open the window, load font, images and sounds; return whether it worked."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            logger.error("Display could not initialize: %s", exc)
            return False
        if not pygame.image.get_extended():
            logger.error("PNG image loading is not available")
            pygame.quit()
            return False

        self._surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        pygame.font.init()
        try:
            self._font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            logger.error("Failed to load font %s: %s", FONT_PATH, exc)
            return False

        if self.audio is None:
            self.audio = AudioManager()
        self.audio.set_global_volume(self.music_volume, self.sfx_volume)

        for path, texture_id in _TEXTURES:
            if not self.textures.load(path, texture_id):
                logger.error("Failed to load: %s", path)

        music_path, music_id = _MUSIC
        if not self.audio.load_music(music_path, music_id):
            logger.error("Failed to load music: %s", music_path)
        for path, sound_id in _SOUNDS:
            if not self.audio.load_sound(path, sound_id):
                logger.error("Failed to load sound: %s", path)
        self.audio.play_music(music_id, -1)

        self.snake.setup(self.textures, *_SNAKE_IMAGES)
        self._screens = ScreenRenderer(self._surface, self._font, self.textures)
        logger.info("Game initialized")
        return True

    def run(self) -> None:
        """Process events, update and draw at about sixty frames a second until quit."""
        target_ms = TARGET_FRAME_TIME * 1000.0
        last = self._clock()
        while self.running:
            frame_start = self._clock()
            for event in pygame.event.get():
                self.handle_event(event)

            now = self._clock()
            delta = (now - last) / 1000.0
            if delta <= 0.0:
                delta = TARGET_FRAME_TIME
            last = now

            self.update(delta)
            self.render()

            frame_time = self._clock() - frame_start
            if frame_time < target_ms:
                pygame.time.delay(int(target_ms - frame_time))

    def clean(self) -> None:
        """Release textures, the font and the window, and shut pygame down."""
        self.textures.clear()
        self._screens = None
        self._font = None
        self._surface = None
        pygame.font.quit()
        pygame.quit()

    def reset_game(self) -> None:
        """Start a fresh round in the playing state."""
        self.snake.reset()
        self.score = 0
        self.food.generate_food()
        self.state = GameState.PLAYING

    def _change_music(self, step: int) -> None:
        self.music_volume = max(0, min(MAX_VOLUME_PERCENT, self.music_volume + step))
        if self.audio is not None:
            self.audio.set_music_volume(self.music_volume * MIX_MAX_VOLUME // 100)

    def _change_sfx(self, step: int) -> None:
        self.sfx_volume = max(0, min(MAX_VOLUME_PERCENT, self.sfx_volume + step))
        if self.audio is not None:
            self.audio.set_sound_volume(self.sfx_volume * MIX_MAX_VOLUME // 100)

    def handle_click(self, pos: tuple[int, int]) -> None:
        """React to a mouse press at ``pos`` according to the current state."""
        if self.state is GameState.PLAYING:
            if pause_button_rect().collidepoint(pos):
                self.state = GameState.PAUSED
                self._play("click_sound")
        elif self.state is GameState.PAUSED:
            buttons = pause_menu_buttons()
            if buttons.resume.collidepoint(pos):
                self.state = GameState.PLAYING
                self._play("click_sound")
            elif buttons.replay.collidepoint(pos):
                self.reset_game()
                self._play("click_sound")
            elif buttons.options.collidepoint(pos):
                self.state = GameState.OPTIONS_MENU
                self._play("click_sound")
        elif self.state is GameState.OPTIONS_MENU:
            buttons = options_menu_buttons()
            actions = (
                (buttons.music_up, lambda: self._change_music(VOLUME_STEP)),
                (buttons.music_down, lambda: self._change_music(-VOLUME_STEP)),
                (buttons.sfx_up, lambda: self._change_sfx(VOLUME_STEP)),
                (buttons.sfx_down, lambda: self._change_sfx(-VOLUME_STEP)),
                (buttons.back, self._back_to_pause),
            )
            for rect, action in actions:
                if rect.collidepoint(pos):
                    action()
                    self._play("click_sound")
                    break
        elif self.state is GameState.GAME_OVER:
            if game_over_restart_rect().collidepoint(pos):
                self.reset_game()
                self._play("click_sound")
        elif self.state is GameState.MENU:
            if mute_button_rect().collidepoint(pos):
                if self.audio is not None:
                    self.audio.toggle_mute_all()
                self._play("click_sound")

    def _back_to_pause(self) -> None:
        self.state = GameState.PAUSED

    def handle_key(self, key: int) -> None:
        """React to a key press according to the current state."""
        if self.state is GameState.MENU:
            if key == pygame.K_RETURN:
                self.state = GameState.PLAYING
                self._play("start_game_sound")
        elif self.state is GameState.PLAYING:
            if key == pygame.K_p:
                self.state = GameState.PAUSED
                self._play("pause_sound")
            else:
                self.snake.handle_key(key)
        elif self.state is GameState.PAUSED:
            if key == pygame.K_p:
                self.state = GameState.PLAYING
                self._play("resume_sound")
            elif key == pygame.K_ESCAPE:
                self.state = GameState.OPTIONS_MENU
                self._play("click_sound")
        elif self.state is GameState.GAME_OVER:
            if key == pygame.K_m:
                self.reset_game()
                self.state = GameState.MENU
                self._play("click_sound")
        elif self.state is GameState.OPTIONS_MENU:
            if key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
                self.state = GameState.PAUSED
                self._play("click_sound")

    def handle_event(self, event: pygame.event.Event) -> None:
        """Dispatch one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.handle_click(event.pos)
        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)

    def update(self, delta_time: float) -> None:
        """Advance the round: move, detect collisions and eat food."""
        if self.state is not GameState.PLAYING:
            return

        self.snake.update()
        logger.debug("Snake head at %s", self.snake.head_position)

        if self.snake.check_collision_with_self():
            self.state = GameState.GAME_OVER
            self._play("gameover_sound")
            if self.highscores is None:
                self.highscores = HighScoreManager()
            self.highscores.add_score(self.score)
            return

        if self.food.is_active and self.snake.check_food_collision(self.food.position):
            boost = self.food.food_type is FoodType.SPEED_BOOST
            self.snake.grow()
            self.score += SPEED_FOOD_POINTS if boost else NORMAL_FOOD_POINTS
            if boost:
                self.snake.increase_speed()
            self._play("eat_sound")
            if self._rng.randrange(SPEED_FOOD_ODDS) == 0:
                self.food.generate_speed_food()
            else:
                self.food.generate_food()

    def render(self) -> None:
        """Draw the current state and show the frame."""
        if self._surface is None or self._screens is None:
            raise RuntimeError("Game.init() must succeed before rendering")
        surface = self._surface
        screens = self._screens
        surface.fill(BACKGROUND_COLOR)

        if self.state is GameState.MENU:
            muted = self.audio.is_muted if self.audio is not None else False
            screens.render_menu(muted, SOUND_ON_ICON_ID, SOUND_OFF_ICON_ID)
        elif self.state is GameState.GAME_OVER:
            screens.render_score(self.score)
            screens.render_game_over(self.score)
        else:
            self.food.render(surface, self.textures)
            self.snake.render(surface, self.textures)
            screens.render_score(self.score)
            if self.snake.is_speed_boosted:
                screens.render_speed_boost_bar(self._clock() - self.snake.speed_boost_timer)
            screens.render_pause_button(PAUSE_ICON_ID)
            if self.state is GameState.PAUSED:
                screens.render_pause_menu()
            elif self.state is GameState.OPTIONS_MENU:
                screens.render_options_menu(self.music_volume, self.sfx_volume)

        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="serpentine", description="Play the snake game.")
    parser.parse_args(argv)
    game = Game()
    try:
        if not game.init():
            return 1
        game.run()
        return 0
    finally:
        game.clean()


if __name__ == "__main__":
    raise SystemExit(main())