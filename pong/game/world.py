"""
World: the single owner of all game state for one session.

Holds the entities, the score and the session flags, and drives one
tick of update-then-draw. It contains no physics of its own.

Music follows a two-flag gate: it plays only while the game is neither
paused nor muted. Every transition re-evaluates that gate.
"""

import random
from typing import List, Optional

from pong.config import (
    FIELD_CENTER,
    FIELD_SIZE,
    MUSIC_VOLUME,
    PAUSE_MESSAGE,
    SOUND_MUSIC,
    START_MESSAGE,
    GameSettings,
)
from pong.logging import get_logger
from pong.models import ScoreData, Side

from .audio import AudioPlayer, NullAudio
from .entities.ball import Ball
from .entities.base import Entity
from .entities.paddle import Paddle
from .skins.base import NullSkin, PongSkin

log = get_logger('world')


class World:
    """Session aggregate: entities, score and pause/start/music flags.

    Attributes:
        entities: Registered entities in draw order
        score: Current score pair
        paused: Simulation frozen
        started: True until the first key press dismisses the start screen
        music_muted: Player muted the ambient music

    Examples:
        >>> world = World()
        >>> world.dismiss_start()
        >>> world.tick(16.0)
    """

    def __init__(
        self,
        skin: Optional[PongSkin] = None,
        audio: Optional[AudioPlayer] = None,
        music_volume: float = MUSIC_VOLUME,
    ):
        """Initialize an empty, paused world on its start screen.

        Args:
            skin: Renderer, NullSkin when omitted
            audio: Audio player, NullAudio when omitted
            music_volume: Volume of the ambient music loop
        """
        self.skin: PongSkin = skin if skin is not None else NullSkin()
        self.audio: AudioPlayer = audio if audio is not None else NullAudio()

        self.entities: List[Entity] = []
        self.score = ScoreData()

        self.paused = True
        self.started = True
        self.music_muted = True

        self.music = self.audio.play_sound(
            SOUND_MUSIC, loop=True, autostart=not self.music_muted,
        )
        self.music.set_volume(music_volume)

        self.skin.show_score(*self.score.as_tuple)
        self.skin.show_message(START_MESSAGE)

    # =========================================================================
    # Entities
    # =========================================================================

    def register(self, entity: Entity) -> Entity:
        """Add an entity; it is updated and drawn from the next tick on."""
        entity.bind(self)
        self.entities.append(entity)
        return entity

    @property
    def paddles(self) -> List[Paddle]:
        """Registered paddles in registration order."""
        return [e for e in self.entities if isinstance(e, Paddle)]

    @property
    def balls(self) -> List[Ball]:
        """Registered balls in registration order."""
        return [e for e in self.entities if isinstance(e, Ball)]

    # =========================================================================
    # Tick
    # =========================================================================

    def tick(self, dt: float) -> None:
        """Advance every entity by dt, then draw them all.

        Does nothing while paused: entity timers do not advance and
        nothing is drawn.

        Args:
            dt: Elapsed time in milliseconds
        """
        if self.paused:
            return

        for entity in self.entities:
            entity.update(dt)

        self.skin.begin_frame()
        for entity in self.entities:
            entity.draw(self.skin)
        self.skin.end_frame()

    # =========================================================================
    # Session transitions
    # =========================================================================

    def toggle_pause(self) -> None:
        """Pause or resume the simulation and the ambient music."""
        self.paused = not self.paused

        if self.paused:
            self.skin.show_message(PAUSE_MESSAGE)
            log.info("Paused")
        else:
            self.skin.show_message("")
            log.info("Resumed")

        self._sync_music()

    def dismiss_start(self) -> None:
        """Leave the start screen. Only the first call has an effect."""
        if not self.started:
            return

        self.started = False
        self.paused = False
        self.music_muted = True
        self.skin.show_message("")
        self._sync_music()
        log.info("Game started")

    def toggle_music(self) -> None:
        """Mute or unmute the ambient music."""
        self.music_muted = not self.music_muted
        self._sync_music()
        log.debug("Music %s", "muted" if self.music_muted else "unmuted")

    def _sync_music(self) -> None:
        if self.music_should_play:
            self.music.play()
        else:
            self.music.pause()

    @property
    def music_should_play(self) -> bool:
        return not self.paused and not self.music_muted

    # =========================================================================
    # Effects requested by entities
    # =========================================================================

    def award_point(self, side: Side) -> None:
        """Add exactly one point for ``side`` and refresh the score board."""
        self.score = self.score.increment(side)
        self.skin.show_score(*self.score.as_tuple)
        log.info("Point %s, score %d : %d", side.value, self.score.left, self.score.right)

    def play_sound(self, sound_id: str) -> None:
        """Fire-and-forget sound effect."""
        self.audio.play_sound(sound_id)


def build_world(
    settings: Optional[GameSettings] = None,
    screen_width: float = 16.0,
    screen_height: float = 9.0,
    skin: Optional[PongSkin] = None,
    audio: Optional[AudioPlayer] = None,
    rng: Optional[random.Random] = None,
) -> World:
    """Create a world with the standard left paddle, right paddle and ball.

    Paddle width is chosen so it looks the same on any aspect ratio, and
    the ball height is corrected so it is square on screen.

    Args:
        settings: Game settings, defaults when omitted
        screen_width: Window width (any unit, only the ratio matters)
        screen_height: Window height
        skin: Renderer
        audio: Audio player
        rng: Random source for the ball's serves

    Returns:
        World with entities registered as [left paddle, right paddle, ball]
    """
    settings = settings if settings is not None else GameSettings()
    world = World(skin=skin, audio=audio, music_volume=settings.music_volume)

    bar_width = settings.resolve_paddle_width(screen_width, screen_height)
    bar_height = settings.paddle_height
    center_x, center_y = FIELD_CENTER

    world.register(Paddle(
        x=2 * bar_width,
        y=center_y,
        width=bar_width,
        height=bar_height,
        difficulty=settings.difficulty_left,
    ))
    world.register(Paddle(
        x=FIELD_SIZE - 2 * bar_width,
        y=center_y,
        width=bar_width,
        height=bar_height,
        difficulty=settings.difficulty_right,
    ))
    world.register(Ball(
        x=center_x,
        y=center_y,
        width=bar_width,
        height=bar_width * screen_width / screen_height,
        speed_base=settings.ball_speed_base,
        speed_growth=settings.ball_speed_growth,
        reset_duration=settings.ball_reset_duration,
        flash_speed=settings.ball_flash_speed,
        rng=rng,
    ))

    return world
