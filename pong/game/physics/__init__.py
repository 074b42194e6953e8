"""Pong physics and collision detection."""

from .collision import (
    check_paddle_collision,
    reflect_off_paddle,
    bounce_off_walls,
)

__all__ = [
    'check_paddle_collision',
    'reflect_off_paddle',
    'bounce_off_walls',
]
