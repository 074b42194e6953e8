"""Pong game entities."""

from .base import Entity
from .paddle import Paddle, Control
from .ball import Ball, random_sign

__all__ = [
    'Entity',
    'Paddle', 'Control',
    'Ball', 'random_sign',
]
