"""Paddle entity with button-driven acceleration and drag.

Holding a button accelerates the paddle up to its maximum speed. Released,
it keeps gliding and slows down through drag. Walls bounce it back unless
the player holds the button pushing into the wall.
"""

from enum import Enum
from typing import Optional

from pong.config import FIELD_SIZE, DifficultyPreset, get_difficulty_preset
from pong.models import EntityKind, EntityView

from .base import Entity


class Control(Enum):
    """Paddle buttons."""
    UP = "up"
    DOWN = "down"


class Paddle(Entity):
    """Player paddle moving along the y axis at a fixed x."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        difficulty: str = 'default',
        preset: Optional[DifficultyPreset] = None,
    ):
        """Initialize paddle.

        Args:
            x: Center X in field %
            y: Center Y in field %
            width: Width in field %
            height: Height in field %
            difficulty: Preset name, unknown names fall back to default
            preset: Explicit handling values, overrides difficulty
        """
        super().__init__()
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.width = width
        self.height = height

        self.preset = preset if preset is not None else get_difficulty_preset(difficulty)

        # Written by the input router only
        self.pressed_up = False
        self.pressed_down = False

    @property
    def max_speed(self) -> float:
        return self.preset.max_speed

    @property
    def acceleration(self) -> float:
        return self.preset.acceleration

    @property
    def drag(self) -> float:
        return self.preset.drag

    @property
    def bounciness(self) -> float:
        return self.preset.bounciness

    @property
    def top_limit(self) -> float:
        """Smallest y the paddle center can take."""
        return self.height / 2

    @property
    def bottom_limit(self) -> float:
        """Largest y the paddle center can take."""
        return FIELD_SIZE - self.height / 2

    def set_input(self, control: Control, pressed: bool) -> None:
        """Press or release one of the paddle buttons.

        Args:
            control: Which button
            pressed: True on press, False on release
        """
        if control is Control.UP:
            self.pressed_up = pressed
        elif control is Control.DOWN:
            self.pressed_down = pressed

    def update(self, dt: float) -> None:
        """Accelerate, move, resolve walls, then apply drag.

        Args:
            dt: Delta time in milliseconds
        """
        if self.pressed_up:
            self.vy = max(self.vy - self.acceleration, -self.max_speed)
        if self.pressed_down:
            self.vy = min(self.vy + self.acceleration, self.max_speed)

        self.y += self.vy * dt

        # Upper border: hold against it while pushing, otherwise bounce
        if self.y <= self.top_limit:
            if self.pressed_up:
                self.y = self.top_limit
            else:
                self.y = self.height - self.y
            self.vy *= -self.bounciness

        # Lower border
        if self.y >= self.bottom_limit:
            if self.pressed_down:
                self.y = self.bottom_limit
            else:
                self.y = 2 * FIELD_SIZE - self.height - self.y
            self.vy *= -self.bounciness

        # A single mirror is not enough after a very long frame
        self.y = min(max(self.y, self.top_limit), self.bottom_limit)

        # drag is per millisecond, so decay is frame-rate independent
        self.vy *= self.drag ** dt

    def view(self) -> EntityView:
        return EntityView(
            kind=EntityKind.PADDLE,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
        )

    def __repr__(self) -> str:
        return f"Paddle(x={self.x:.2f}, y={self.y:.2f}, vy={self.vy:.4f})"
