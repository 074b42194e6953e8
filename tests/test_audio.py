"""
Tests for audio playback.

Real playback is hard to test, so the pygame mixer is mocked and the
tests check which handles come back and how they are driven.
"""

from unittest.mock import MagicMock, patch

import pygame
import pytest

from pong.game.audio import (
    NullAudio,
    NullSoundHandle,
    PygameAudio,
    PygameSoundHandle,
)
from pong.game.world import World


@pytest.fixture
def mock_mixer():
    """Mock pygame.mixer so no audio device is opened."""
    with patch('pong.game.audio.pygame.mixer.init') as mock_init, \
         patch('pong.game.audio.pygame.mixer.Sound') as mock_sound:
        yield {
            'init': mock_init,
            'sound': mock_sound,
        }


@pytest.fixture
def mock_generators():
    """Replace the procedural sound generators with mocks."""
    with patch('pong.game.audio._generate_hit_sound') as hit, \
         patch('pong.game.audio._generate_score_sound') as score, \
         patch('pong.game.audio._generate_music_loop') as music:
        yield {'hit': hit, 'score': score, 'music': music}


class TestNullAudio:
    """Test the silent player."""

    def test_records_played_sounds(self):
        audio = NullAudio()

        audio.play_sound('hit')
        audio.play_sound('score')

        assert audio.played == ['hit', 'score']

    def test_no_autostart_is_not_recorded(self):
        audio = NullAudio()

        handle = audio.play_sound('music', loop=True, autostart=False)

        assert audio.played == []
        assert handle.is_playing is False
        assert handle.loop is True

    def test_autostarted_handle_is_playing(self):
        assert NullAudio().play_sound('hit').is_playing is True


class TestNullSoundHandle:
    """Test the silent handle."""

    def test_play_pause(self):
        handle = NullSoundHandle('music', loop=True)

        handle.play()
        assert handle.is_playing is True

        handle.pause()
        assert handle.is_playing is False

    def test_pause_when_not_playing(self):
        handle = NullSoundHandle()
        handle.pause()
        assert handle.is_playing is False

    def test_volume(self):
        handle = NullSoundHandle()
        handle.set_volume(0.3)
        assert handle.volume == 0.3


class TestPygameSoundHandle:
    """Test the handle around a pygame Sound."""

    @pytest.fixture
    def sound(self):
        sound = MagicMock()
        sound.play.return_value.get_busy.return_value = True
        return sound

    def test_play_once(self, sound):
        handle = PygameSoundHandle(sound)

        handle.play()

        sound.play.assert_called_once_with(loops=0)
        assert handle.is_playing is True

    def test_play_looped(self, sound):
        PygameSoundHandle(sound, loop=True).play()
        sound.play.assert_called_once_with(loops=-1)

    def test_pause_and_resume_use_channel(self, sound):
        handle = PygameSoundHandle(sound, loop=True)
        channel = sound.play.return_value

        handle.play()
        handle.pause()
        assert handle.is_playing is False
        channel.pause.assert_called_once()

        handle.play()
        channel.unpause.assert_called_once()
        assert sound.play.call_count == 1
        assert handle.is_playing is True

    def test_pause_before_play(self, sound):
        handle = PygameSoundHandle(sound)

        handle.pause()

        assert handle.is_playing is False
        sound.play.assert_not_called()

    def test_set_volume(self, sound):
        PygameSoundHandle(sound).set_volume(0.5)
        sound.set_volume.assert_called_once_with(0.5)


class TestPygameAudio:
    """Test mixer setup and sound lookup."""

    def test_disabled_audio_skips_mixer(self, mock_mixer):
        audio = PygameAudio(audio_enabled=False)

        assert audio.audio_enabled is False
        assert audio.sounds == {}
        mock_mixer['init'].assert_not_called()

    def test_disabled_audio_returns_silent_handles(self):
        audio = PygameAudio(audio_enabled=False)

        handle = audio.play_sound('hit')

        assert isinstance(handle, NullSoundHandle)

    def test_mixer_failure_disables_audio(self, capsys):
        with patch('pong.game.audio.pygame.mixer.init',
                   side_effect=pygame.error("no audio device")):
            audio = PygameAudio()

        assert audio.audio_enabled is False
        assert isinstance(audio.play_sound('score'), NullSoundHandle)
        assert "Audio initialization failed" in capsys.readouterr().out

    def test_generates_missing_sounds(self, mock_mixer, mock_generators):
        audio = PygameAudio(sfx_volume=0.5)

        assert set(audio.sounds) == {'hit', 'score', 'music'}
        for generate in mock_generators.values():
            generate.assert_called_once()
            generate.return_value.set_volume.assert_called_once_with(0.5)
        mock_mixer['sound'].assert_not_called()

    def test_loads_configured_files(self, mock_mixer, mock_generators):
        audio = PygameAudio(sound_files={'hit': 'media/hit.wav'})

        mock_mixer['sound'].assert_called_once_with('media/hit.wav')
        assert audio.sounds['hit'] is mock_mixer['sound'].return_value
        mock_generators['hit'].assert_not_called()

    def test_unloadable_file_is_silent(self, mock_mixer, mock_generators):
        mock_mixer['sound'].side_effect = FileNotFoundError("media/hit.wav")

        audio = PygameAudio(sound_files={'hit': 'media/hit.wav'})

        assert audio.sounds['hit'] is None
        assert isinstance(audio.play_sound('hit'), NullSoundHandle)

    def test_play_sound_starts_pygame_handle(self, mock_mixer, mock_generators):
        audio = PygameAudio()

        handle = audio.play_sound('hit')

        assert isinstance(handle, PygameSoundHandle)
        mock_generators['hit'].return_value.play.assert_called_once_with(loops=0)

    def test_music_without_autostart(self, mock_mixer, mock_generators):
        audio = PygameAudio()

        handle = audio.play_sound('music', loop=True, autostart=False)

        assert handle.is_playing is False
        mock_generators['music'].return_value.play.assert_not_called()

    def test_playback_error_is_logged(self, mock_mixer, mock_generators, capsys):
        mock_generators['hit'].return_value.play.side_effect = pygame.error("busy")
        audio = PygameAudio()

        audio.play_sound('hit')

        assert "Could not play hit sound" in capsys.readouterr().out

    def test_unknown_sound_id(self, mock_mixer, mock_generators):
        audio = PygameAudio()
        assert isinstance(audio.play_sound('boing'), NullSoundHandle)

    def test_audio_drives_world_music(self, mock_mixer, mock_generators):
        """The world's music handle follows the pause/mute gate."""
        world = World(audio=PygameAudio())
        music = mock_generators['music'].return_value

        world.dismiss_start()
        world.toggle_music()
        music.play.assert_called_once_with(loops=-1)

        world.toggle_pause()
        music.play.return_value.pause.assert_called_once()
