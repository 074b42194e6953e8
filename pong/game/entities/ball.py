"""Ball entity with swept paddle collisions, scoring and round resets.

After a point the ball waits, inert, and blinks for ``reset_duration``
milliseconds, then reappears at the field center and serves towards the
player who scored. Every paddle hit reverses and speeds up its
horizontal motion.
"""

import math
import random
from typing import Optional

from pong.config import (
    BALL_FLASH_SPEED,
    BALL_RESET_DURATION,
    BALL_SPEED_BASE,
    BALL_SPEED_GROWTH,
    FIELD_CENTER,
    FIELD_SIZE,
    PADDLE_MOMENTUM_TRANSFER,
    SOUND_HIT,
    SOUND_SCORE,
)
from pong.logging import get_logger
from pong.models import EntityKind, EntityView, Side

from ..physics.collision import (
    bounce_off_walls,
    check_paddle_collision,
    reflect_off_paddle,
)
from .base import Entity

log = get_logger('ball')


def random_sign(rng: random.Random) -> int:
    """Return -1 or +1 with equal probability."""
    return rng.choice((-1, 1))


class Ball(Entity):
    """Ball with a Waiting/Active state and a Flashing overlay.

    States:
        Waiting: wait_timer > 0, the ball neither moves nor collides
        Active: wait_timer == 0
        Flashing: flash_timer > 0, visibility blinks regardless of state
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        speed_base: float = BALL_SPEED_BASE,
        speed_growth: float = BALL_SPEED_GROWTH,
        reset_duration: float = BALL_RESET_DURATION,
        flash_speed: float = BALL_FLASH_SPEED,
        rng: Optional[random.Random] = None,
    ):
        """Initialize ball.

        The ball starts hidden and waiting, exactly as after a point.

        Args:
            x: Center X in field %
            y: Center Y in field %
            width: Width in field %
            height: Height in field %
            speed_base: Serve speed on each axis (field % per ms)
            speed_growth: vx multiplier per paddle hit, must be > 1
            reset_duration: Wait and flash time after a point (ms)
            flash_speed: Length of one blink interval (ms)
            rng: Random source for serve directions
        """
        super().__init__()
        self._rng = rng if rng is not None else random.Random()

        self.speed_base = speed_base
        self.speed_growth = speed_growth
        self.reset_duration = reset_duration
        self.flash_speed = flash_speed

        self.x = x
        self.y = y
        self.vx = random_sign(self._rng) * speed_base
        self.vy = random_sign(self._rng) * speed_base
        self.width = width
        self.height = height

        self.visible = False
        self.flash_timer = reset_duration
        self.wait_timer = reset_duration

    @property
    def is_waiting(self) -> bool:
        """True while the ball is inert after a point."""
        return self.wait_timer > 0

    @property
    def is_flashing(self) -> bool:
        return self.flash_timer > 0

    def update(self, dt: float) -> None:
        """Advance timers or motion, then the blink overlay.

        Args:
            dt: Delta time in milliseconds
        """
        if self.is_waiting:
            self._update_waiting(dt)
        else:
            self._update_active(dt)

        if self.flash_timer > 0:
            self.flash_timer = max(0.0, self.flash_timer - dt)
            self.visible = self._visible_at(self.flash_timer)

    def _visible_at(self, flash_timer: float) -> bool:
        # Visible in two of every three blink intervals
        return (math.floor(flash_timer / self.flash_speed) + 1) % 3 != 0

    def _update_waiting(self, dt: float) -> None:
        self.wait_timer = max(0.0, self.wait_timer - dt)

        if self.wait_timer == 0:
            self.x, self.y = FIELD_CENTER
            log.debug("Ball back in play, v=(%.4f, %.4f)", self.vx, self.vy)

    def _update_active(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

        for paddle in self._paddles():
            if check_paddle_collision(self, paddle, dt):
                self._hit_paddle(paddle)

        if self.x < self.width / 2:
            self._score(Side.RIGHT)
        elif self.x > FIELD_SIZE - self.width / 2:
            self._score(Side.LEFT)

        self.y, bounced = bounce_off_walls(self.y, self.height)
        if bounced:
            self.vy = -self.vy

    def _paddles(self):
        if self._world is None:
            return ()
        return self._world.paddles

    def _hit_paddle(self, paddle) -> None:
        self.x = reflect_off_paddle(self, paddle)
        self.vx *= -self.speed_growth
        self.vy += PADDLE_MOMENTUM_TRANSFER * paddle.vy
        log.trace("Paddle hit, vx=%.4f", self.vx)

        if self._world is not None:
            self._world.play_sound(SOUND_HIT)

    def _score(self, scorer: Side) -> None:
        """Award a point and start the wait/flash reset."""
        if self._world is not None:
            self._world.award_point(scorer)

        self.wait_timer = self.reset_duration
        self.flash_timer = self.reset_duration

        # Serve towards the player who scored
        self.vy = random_sign(self._rng) * self.speed_base
        if scorer is Side.RIGHT:
            self.vx = self.speed_base
        else:
            self.vx = -self.speed_base

        if self._world is not None:
            self._world.play_sound(SOUND_SCORE)

    def view(self) -> EntityView:
        return EntityView(
            kind=EntityKind.BALL,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            visible=self.visible,
        )

    def __repr__(self) -> str:
        return (f"Ball(x={self.x:.2f}, y={self.y:.2f}, "
                f"vx={self.vx:.4f}, vy={self.vy:.4f}, wait={self.wait_timer:.0f})")
