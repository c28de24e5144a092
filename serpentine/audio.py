"""Sound effects and background music with mute and volume control."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

MIX_MAX_VOLUME = 128
_DEFAULT_PERCENT = 80


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _percent_to_volume(percent: int) -> int:
    return _trunc_div(percent * MIX_MAX_VOLUME, 100)


class AudioManager:
    """Holds named sounds and music tracks and applies volume and mute."""

    def __init__(self, enable_mixer: bool = True) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._music: dict[str, Path] = {}
        self._muted = False
        self._music_percent = _DEFAULT_PERCENT
        self._sfx_percent = _DEFAULT_PERCENT
        self._mixer_ready = False
        if enable_mixer:
            try:
                pygame.mixer.init(44100, -16, 2, 2048)
            except pygame.error as exc:
                logger.warning("Audio mixer unavailable: %s", exc)
            else:
                self._mixer_ready = True

    def _set_music_level(self, volume: int) -> None:
        if self._mixer_ready:
            pygame.mixer.music.set_volume(volume / MIX_MAX_VOLUME)

    def _set_sounds_level(self, volume: int) -> None:
        for sound in self._sounds.values():
            sound.set_volume(volume / MIX_MAX_VOLUME)

    def load_sound(self, file_path: str | Path, sound_id: str) -> bool:
        """Load a sound effect under ``sound_id``; return whether it succeeded."""
        if not self._mixer_ready:
            return False
        try:
            self._sounds[sound_id] = pygame.mixer.Sound(str(file_path))
        except (pygame.error, OSError):
            return False
        return True

    def load_music(self, file_path: str | Path, music_id: str) -> bool:
        """Register a music file under ``music_id``; return whether it exists."""
        path = Path(file_path)
        if not self._mixer_ready or not path.is_file():
            return False
        self._music[music_id] = path
        return True

    def play_sound(self, sound_id: str, loops: int = 0) -> None:
        """Play a loaded sound unless muted; unknown ids are logged."""
        sound = self._sounds.get(sound_id)
        if sound is None:
            logger.error("Sound with id '%s' not found.", sound_id)
            return
        if not self._muted:
            sound.set_volume(_percent_to_volume(self._sfx_percent) / MIX_MAX_VOLUME)
            sound.play(loops)

    def play_music(self, music_id: str, loops: int = -1) -> None:
        """Start a registered track, stopping whatever music is playing."""
        path = self._music.get(music_id)
        if path is None:
            logger.error("Music with id '%s' not found.", music_id)
            return
        if pygame.mixer.music.get_busy():
            pygame.mixer.music.stop()
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops)
        except pygame.error as exc:
            logger.error("Cannot play music '%s': %s", music_id, exc)

    def set_sound_volume(self, volume: int) -> None:
        """Set effect volume on the 0..128 scale."""
        self._sfx_percent = _trunc_div(volume * 100, MIX_MAX_VOLUME)
        if not self._muted:
            self._set_sounds_level(volume)

    def set_music_volume(self, volume: int) -> None:
        """Set music volume on the 0..128 scale."""
        self._music_percent = _trunc_div(volume * 100, MIX_MAX_VOLUME)
        if not self._muted:
            self._set_music_level(volume)

    def toggle_mute_all(self) -> None:
        """Silence or restore all music and effects."""
        self._muted = not self._muted
        if self._muted:
            self._set_music_level(0)
            self._set_sounds_level(0)
            logger.info("Sound muted")
        else:
            self._set_music_level(_percent_to_volume(self._music_percent))
            self._set_sounds_level(_percent_to_volume(self._sfx_percent))
            logger.info("Sound unmuted")

    @property
    def is_muted(self) -> bool:
        """Whether all audio is muted."""
        return self._muted

    def set_global_volume(self, music_percent: int, sfx_percent: int) -> None:
        """Set both volumes as percentages, clamped to 0..100."""
        self._music_percent = max(0, min(100, music_percent))
        self._sfx_percent = max(0, min(100, sfx_percent))
        if not self._muted:
            self._set_music_level(_percent_to_volume(self._music_percent))

    @property
    def music_volume_percent(self) -> int:
        """Current music volume percentage."""
        return self._music_percent

    @property
    def sfx_volume_percent(self) -> int:
        """Current effects volume percentage."""
        return self._sfx_percent