"""Shared fixtures for the Pong tests."""

import random

import pytest

from pong import logging as pong_logging
from pong.game.audio import NullAudio
from pong.game.entities import Ball, Paddle
from pong.game.skins import NullSkin
from pong.game.world import World


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration changes made by a test."""
    saved_default = pong_logging._config["default_level"]
    saved_modules = dict(pong_logging._config["module_levels"])
    yield
    pong_logging._config["default_level"] = saved_default
    pong_logging._config["module_levels"].clear()
    pong_logging._config["module_levels"].update(saved_modules)


@pytest.fixture
def skin():
    return NullSkin()


@pytest.fixture
def audio():
    return NullAudio()


@pytest.fixture
def world(skin, audio):
    """Empty world, still on its start screen."""
    return World(skin=skin, audio=audio)


@pytest.fixture
def running_world(world):
    """Empty world past the start screen."""
    world.dismiss_start()
    return world


@pytest.fixture
def left_paddle(world):
    """Left paddle at x=4, registered with the world."""
    return world.register(Paddle(x=4.0, y=50.0, width=2.0, height=20.0))


@pytest.fixture
def right_paddle(world):
    """Right paddle at x=96, registered with the world."""
    return world.register(Paddle(x=96.0, y=50.0, width=2.0, height=20.0))


@pytest.fixture
def active_ball(world):
    """Factory for a registered 2x2 ball in play (no wait, no flash)."""
    def make(**state):
        ball = Ball(x=50.0, y=50.0, width=2.0, height=2.0, rng=random.Random(0))
        ball.wait_timer = 0.0
        ball.flash_timer = 0.0
        ball.vx = 0.0
        ball.vy = 0.0
        for name, value in state.items():
            setattr(ball, name, value)
        world.register(ball)
        return ball
    return make
