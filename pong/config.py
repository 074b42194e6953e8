"""Configuration for Pong.

Contains field geometry, physics constants, difficulty presets, key
bindings, colors, and the validated GameSettings model that can be
loaded from YAML.

All positions and sizes are percentages of the play field (0-100 on
both axes). Times are in milliseconds.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pong.logging import get_logger

log = get_logger('config')

# Window defaults (can be overridden from the CLI)
SCREEN_WIDTH: int = 1280
SCREEN_HEIGHT: int = 720
FPS: int = 60

# Field geometry
FIELD_SIZE: float = 100.0
FIELD_CENTER: Tuple[float, float] = (50.0, 50.0)
PADDLE_HEIGHT: float = 20.0

# Ball physics
BALL_SPEED_BASE: float = 0.04      # field % per millisecond
BALL_SPEED_GROWTH: float = 1.03    # vx multiplier per paddle hit
BALL_RESET_DURATION: float = 600.0  # wait and flash after a score
BALL_FLASH_SPEED: float = 100.0    # length of one blink interval
PADDLE_MOMENTUM_TRANSFER: float = 0.2

# Audio
MUSIC_VOLUME: float = 0.7
SFX_VOLUME: float = 1.0

# Sound identifiers
SOUND_HIT = 'hit'
SOUND_SCORE = 'score'
SOUND_MUSIC = 'music'

# Messages
START_MESSAGE = "Press any key to PONG!"
PAUSE_MESSAGE = "Paused"

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
FOREGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)

# Key bindings (pygame key names)
LEFT_PADDLE_KEYS: Tuple[str, str] = ('w', 's')
RIGHT_PADDLE_KEYS: Tuple[str, str] = ('up', 'down')
PAUSE_KEYS: Tuple[str, ...] = ('p', 'space')
MUSIC_KEYS: Tuple[str, ...] = ('m',)


@dataclass(frozen=True)
class DifficultyPreset:
    """Paddle handling for one difficulty level.

    Attributes:
        name: Preset name
        max_speed: Maximum paddle speed (field % per ms)
        acceleration: Speed added per tick while a button is held
        drag: 1 - drag coefficient per ms (1: no drag, 0: most drag)
        bounciness: Momentum kept when bouncing off a wall
    """

    name: str
    max_speed: float
    acceleration: float
    drag: float
    bounciness: float


_BABY = DifficultyPreset(
    name='baby', max_speed=0.2, acceleration=0.1, drag=0.9, bounciness=0.1,
)
_HARD = DifficultyPreset(
    name='hard', max_speed=0.2, acceleration=0.01, drag=0.999, bounciness=0.9,
)
_DEFAULT = DifficultyPreset(
    name='default', max_speed=0.15, acceleration=0.05, drag=0.995, bounciness=0.3,
)

DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    'baby': _BABY,
    'easy': _BABY,
    'hard': _HARD,
    'difficult': _HARD,
    'default': _DEFAULT,
}

_MODE_NAMES: Dict[str, str] = {
    'baby': "Baby mode",
    'hard': "Hard mode",
    'default': "Default mode",
}


def get_difficulty_preset(name: str) -> DifficultyPreset:
    """Get difficulty preset by name, with fallback to default.

    Names are case-sensitive; an unrecognised name is not an error.
    """
    preset = DIFFICULTY_PRESETS.get(name, _DEFAULT)
    log.info(_MODE_NAMES[preset.name])
    return preset


def paddle_width_for(screen_width: float, screen_height: float) -> float:
    """Paddle width in field % that is 2% of the field height on screen."""
    return 2 * screen_height / screen_width


class KeyBindings(BaseModel):
    """Key names for both paddles and the session commands."""

    left: Tuple[str, str] = LEFT_PADDLE_KEYS
    right: Tuple[str, str] = RIGHT_PADDLE_KEYS
    pause: Tuple[str, ...] = PAUSE_KEYS
    music: Tuple[str, ...] = MUSIC_KEYS

    model_config = ConfigDict(frozen=True)


class GameSettings(BaseModel):
    """Validated game settings.

    The simulation itself assumes these invariants without checking
    them, so they are enforced here, before any entity is built.

    Examples:
        >>> settings = GameSettings(difficulty_left='hard')
        >>> settings.ball_speed_growth
        1.03
    """

    difficulty_left: str = 'default'
    difficulty_right: str = 'default'

    paddle_height: float = Field(PADDLE_HEIGHT, gt=0, le=FIELD_SIZE)
    # Derived from the window aspect ratio when not given
    paddle_width: Optional[float] = Field(None, gt=0)

    ball_speed_base: float = Field(BALL_SPEED_BASE, gt=0)
    ball_speed_growth: float = Field(BALL_SPEED_GROWTH, gt=1)
    ball_reset_duration: float = Field(BALL_RESET_DURATION, ge=0)
    ball_flash_speed: float = Field(BALL_FLASH_SPEED, gt=0)

    keys: KeyBindings = Field(default_factory=KeyBindings)

    music_volume: float = Field(MUSIC_VOLUME, ge=0, le=1)
    sfx_volume: float = Field(SFX_VOLUME, ge=0, le=1)
    # Optional audio files; placeholder tones are generated when unset
    sounds: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator('sounds')
    @classmethod
    def validate_sound_ids(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Only the known sound identifiers can be overridden."""
        known = {SOUND_HIT, SOUND_SCORE, SOUND_MUSIC}
        unknown = set(v) - known
        if unknown:
            raise ValueError(f'Unknown sound ids: {sorted(unknown)}')
        return v

    def resolve_paddle_width(self, screen_width: float, screen_height: float) -> float:
        """Configured paddle width, or the aspect-ratio default."""
        if self.paddle_width is not None:
            return self.paddle_width
        return paddle_width_for(screen_width, screen_height)


def load_settings(path: Union[str, Path]) -> GameSettings:
    """Load and validate settings from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Validated GameSettings

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a value breaks a constraint
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    settings = GameSettings.model_validate(data)
    log.debug("Loaded settings from %s", path)
    return settings
