"""Pong simulation: entities, physics, world, input, loop, audio and skins."""

from .world import World
from .loop import GameLoop
from .input import InputRouter, build_default_router

__all__ = [
    'World',
    'GameLoop',
    'InputRouter', 'build_default_router',
]
