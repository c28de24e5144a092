import logging

from serpentine.audio import MIX_MAX_VOLUME, AudioManager


def _manager():
    return AudioManager(enable_mixer=False)


def test_defaults():
    audio = _manager()
    assert audio.music_volume_percent == 80
    assert audio.sfx_volume_percent == 80
    assert audio.is_muted is False


def test_toggle_mute_flips_state():
    audio = _manager()
    audio.toggle_mute_all()
    assert audio.is_muted is True
    audio.toggle_mute_all()
    assert audio.is_muted is False


def test_mute_keeps_percentages():
    audio = _manager()
    audio.set_global_volume(30, 40)
    audio.toggle_mute_all()
    assert (audio.music_volume_percent, audio.sfx_volume_percent) == (30, 40)


def test_global_volume_is_clamped():
    audio = _manager()
    audio.set_global_volume(150, -5)
    assert audio.music_volume_percent == 100
    assert audio.sfx_volume_percent == 0


def test_global_volume_in_range_kept():
    audio = _manager()
    audio.set_global_volume(35, 65)
    assert (audio.music_volume_percent, audio.sfx_volume_percent) == (35, 65)


def test_music_volume_scale():
    audio = _manager()
    audio.set_music_volume(MIX_MAX_VOLUME)
    assert audio.music_volume_percent == 100
    audio.set_music_volume(0)
    assert audio.music_volume_percent == 0


def test_sound_volume_scale():
    audio = _manager()
    audio.set_sound_volume(MIX_MAX_VOLUME)
    assert audio.sfx_volume_percent == 100


def test_load_fails_without_mixer(tmp_path):
    audio = _manager()
    path = tmp_path / "click.wav"
    path.write_bytes(b"RIFF")
    assert audio.load_sound(path, "click") is False
    assert audio.load_music(path, "bg") is False


def test_unknown_sound_is_logged(caplog):
    audio = _manager()
    with caplog.at_level(logging.ERROR, logger="serpentine.audio"):
        audio.play_sound("nope")
    assert "nope" in caplog.text


def test_unknown_music_is_logged(caplog):
    audio = _manager()
    with caplog.at_level(logging.ERROR, logger="serpentine.audio"):
        audio.play_music("missing_track")
    assert "missing_track" in caplog.text