"""
Audio playback for Pong.

The simulation only ever calls ``play_sound(sound_id, loop, autostart)``
and keeps the returned handle when it needs to pause and resume a sound
later (the ambient music). Playback is fire-and-forget: nothing waits
for a sound to finish.

Classes:
    SoundHandle: A started (or startable) sound that can be paused
    AudioPlayer: Creates handles for sound ids
    NullAudio: Silent player for headless runs and tests
    PygameAudio: pygame.mixer player with generated placeholder sounds
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import numpy as np
import pygame

from pong.config import (
    SFX_VOLUME,
    SOUND_HIT,
    SOUND_MUSIC,
    SOUND_SCORE,
)
from pong.logging import get_logger

log = get_logger('audio')

SAMPLE_RATE = 22050


class SoundHandle(ABC):
    """A sound instance that can be played, paused and resumed."""

    @abstractmethod
    def play(self) -> None:
        """Start playback, or resume it if paused."""
        pass

    @abstractmethod
    def pause(self) -> None:
        """Pause playback. Safe to call when not playing."""
        pass

    @abstractmethod
    def set_volume(self, volume: float) -> None:
        """Set volume in [0, 1]."""
        pass

    @property
    @abstractmethod
    def is_playing(self) -> bool:
        """True while the sound is audible."""
        pass


class AudioPlayer(ABC):
    """Plays sounds by identifier."""

    @abstractmethod
    def play_sound(
        self,
        sound_id: str,
        loop: bool = False,
        autostart: bool = True,
    ) -> SoundHandle:
        """Create a handle for a sound and optionally start it.

        Args:
            sound_id: One of the known sound identifiers
            loop: Repeat until paused
            autostart: Start playing immediately

        Returns:
            Handle for later pause/resume
        """
        pass


class NullSoundHandle(SoundHandle):
    """Silent handle that only tracks whether it would be playing."""

    def __init__(self, sound_id: str = "", loop: bool = False):
        self.sound_id = sound_id
        self.loop = loop
        self.volume = 1.0
        self._playing = False

    def play(self) -> None:
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    def set_volume(self, volume: float) -> None:
        self.volume = volume

    @property
    def is_playing(self) -> bool:
        return self._playing


class NullAudio(AudioPlayer):
    """Audio player that makes no sound.

    Keeps the ids it was asked to play, oldest first.
    """

    def __init__(self) -> None:
        self.played: List[str] = []

    def play_sound(
        self,
        sound_id: str,
        loop: bool = False,
        autostart: bool = True,
    ) -> SoundHandle:
        handle = NullSoundHandle(sound_id, loop)
        if autostart:
            self.played.append(sound_id)
            handle.play()
        return handle


class PygameSoundHandle(SoundHandle):
    """Handle around a pygame Sound and the channel it plays on."""

    def __init__(self, sound: pygame.mixer.Sound, loop: bool = False):
        self._sound = sound
        self._loop = loop
        self._channel: Optional[pygame.mixer.Channel] = None
        self._paused = False

    def play(self) -> None:
        if self._channel is not None and self._paused:
            self._channel.unpause()
        else:
            self._channel = self._sound.play(loops=-1 if self._loop else 0)
        self._paused = False

    def pause(self) -> None:
        if self._channel is not None:
            self._channel.pause()
        self._paused = True

    def set_volume(self, volume: float) -> None:
        self._sound.set_volume(volume)

    @property
    def is_playing(self) -> bool:
        return (self._channel is not None
                and not self._paused
                and self._channel.get_busy())


class PygameAudio(AudioPlayer):
    """Plays sounds through pygame.mixer.

    Sounds are loaded from the configured files; ids without a file get
    a procedurally generated placeholder. If the mixer cannot be
    initialised, audio is disabled and silent handles are returned.

    Examples:
        >>> audio = PygameAudio({'hit': 'media/hit_01.wav'})
        >>> audio.play_sound('hit')
    """

    def __init__(
        self,
        sound_files: Optional[Dict[str, str]] = None,
        sfx_volume: float = SFX_VOLUME,
        audio_enabled: bool = True,
    ):
        """Initialize the mixer and prepare every sound.

        Args:
            sound_files: Optional sound id -> file path overrides
            sfx_volume: Volume applied to every sound
            audio_enabled: False to stay silent without touching the mixer
        """
        self.audio_enabled = audio_enabled
        self.sfx_volume = sfx_volume
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}

        if self.audio_enabled:
            self._init_audio(sound_files or {})

    def _init_audio(self, sound_files: Dict[str, str]) -> None:
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            log.warning("Audio initialization failed: %s", e)
            self.audio_enabled = False
            self.sounds = {}
            return

        generators = {
            SOUND_HIT: _generate_hit_sound,
            SOUND_SCORE: _generate_score_sound,
            SOUND_MUSIC: _generate_music_loop,
        }
        for sound_id, generate in generators.items():
            path = sound_files.get(sound_id)
            self.sounds[sound_id] = _load_sound(path) if path else generate()

        for sound in self.sounds.values():
            if sound is not None:
                sound.set_volume(self.sfx_volume)

    def play_sound(
        self,
        sound_id: str,
        loop: bool = False,
        autostart: bool = True,
    ) -> SoundHandle:
        sound = self.sounds.get(sound_id) if self.audio_enabled else None
        if sound is None:
            return NullSoundHandle(sound_id, loop)

        log.debug("Playing %s", sound_id)
        handle = PygameSoundHandle(sound, loop)
        if autostart:
            try:
                handle.play()
            except pygame.error as e:
                log.warning("Could not play %s sound: %s", sound_id, e)
        return handle


def _load_sound(path: str) -> Optional[pygame.mixer.Sound]:
    log.debug("Loading %s", path)
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError) as e:
        log.warning("Could not load sound %s: %s", path, e)
        return None


def _to_sound(wave: np.ndarray, gain: float) -> Optional[pygame.mixer.Sound]:
    """Scale a [-1, 1] mono wave to 16-bit stereo and wrap it."""
    try:
        samples = (wave * 32767 * gain).astype(np.int16)
        stereo = np.column_stack((samples, samples))
        return pygame.sndarray.make_sound(stereo)
    except (pygame.error, ValueError) as e:
        log.warning("Could not generate sound: %s", e)
        return None


def _envelope(num_samples: int, fade_in: float, fade_out: float) -> np.ndarray:
    env = np.ones(num_samples)
    fade_in_samples = int(num_samples * fade_in)
    fade_out_samples = int(num_samples * fade_out)
    if fade_in_samples:
        env[:fade_in_samples] = np.linspace(0, 1, fade_in_samples)
    if fade_out_samples:
        env[-fade_out_samples:] = np.linspace(1, 0, fade_out_samples)
    return env


def _generate_hit_sound() -> Optional[pygame.mixer.Sound]:
    """Short square-wave blip, the classic paddle sound."""
    duration = 0.06
    num_samples = int(SAMPLE_RATE * duration)
    t = np.linspace(0, duration, num_samples, False)

    wave = np.sign(np.sin(2.0 * np.pi * 480.0 * t))
    wave *= _envelope(num_samples, 0.05, 0.3)
    return _to_sound(wave, 0.25)


def _generate_score_sound() -> Optional[pygame.mixer.Sound]:
    """Falling tone over decaying noise."""
    duration = 0.4
    num_samples = int(SAMPLE_RATE * duration)

    frequencies = np.linspace(330.0, 110.0, num_samples)
    phase = np.cumsum(2.0 * np.pi * frequencies / SAMPLE_RATE)
    noise = np.random.default_rng(0).uniform(-1, 1, num_samples)
    decay = np.exp(-np.linspace(0, 6, num_samples))

    wave = (0.6 * np.sin(phase) + 0.4 * noise) * decay
    return _to_sound(wave, 0.35)


def _generate_music_loop() -> Optional[pygame.mixer.Sound]:
    """Two-bar arpeggio that loops seamlessly."""
    notes = [220.00, 261.63, 329.63, 261.63, 196.00, 246.94, 293.66, 246.94]
    note_duration = 0.25
    samples_per_note = int(SAMPLE_RATE * note_duration)
    t = np.linspace(0, note_duration, samples_per_note, False)

    parts = []
    for freq in notes:
        note = np.sign(np.sin(2.0 * np.pi * freq * t)) * 0.5
        note += np.sin(2.0 * np.pi * freq / 2 * t) * 0.5
        parts.append(note * _envelope(samples_per_note, 0.02, 0.2))

    return _to_sound(np.concatenate(parts), 0.15)
