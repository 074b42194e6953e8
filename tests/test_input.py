"""
Tests for keyboard routing.
"""

import pytest

from pong.config import KeyBindings
from pong.game.entities import Control
from pong.game.input import InputRouter, build_default_router
from pong.game.world import build_world


@pytest.fixture
def game(skin, audio):
    world = build_world(skin=skin, audio=audio)
    return world, build_default_router(world)


class TestStartScreen:
    """Test the first key press."""

    def test_any_key_dismisses_start(self, game):
        world, router = game

        router.press('x')

        assert world.started is False
        assert world.paused is False

    def test_first_press_also_moves_paddle(self, game):
        world, router = game

        router.press('w')

        assert world.started is False
        assert world.paddles[0].pressed_up is True

    def test_first_pause_key_only_starts(self, game):
        """The key that leaves the start screen does not pause as well."""
        world, router = game

        router.press('p')

        assert world.paused is False

    def test_first_music_key_only_starts(self, game):
        world, router = game

        router.press('m')

        assert world.music_muted is True


class TestSessionKeys:
    """Test pause and music keys after the start screen."""

    @pytest.mark.parametrize("key", ['p', 'space'])
    def test_pause_keys(self, game, key):
        world, router = game
        router.press('x')

        router.press(key)
        assert world.paused is True

        router.press(key)
        assert world.paused is False

    def test_music_key(self, game):
        world, router = game
        router.press('x')

        router.press('m')

        assert world.music_muted is False
        assert world.music.is_playing is True

    def test_release_of_session_keys_does_nothing(self, game):
        world, router = game
        router.press('x')

        router.release('p')
        router.release('m')

        assert world.paused is False
        assert world.music_muted is True

    def test_unknown_key_is_ignored(self, game):
        world, router = game
        router.press('x')

        router.press('q')

        assert world.paused is False
        assert world.music_muted is True
        assert all(not p.pressed_up and not p.pressed_down for p in world.paddles)


class TestPaddleKeys:
    """Test paddle bindings."""

    def test_left_paddle_keys(self, game):
        world, router = game
        left = world.paddles[0]

        router.press('w')
        router.press('s')
        assert left.pressed_up is True
        assert left.pressed_down is True

        router.release('w')
        assert left.pressed_up is False
        assert left.pressed_down is True

    def test_right_paddle_keys(self, game):
        world, router = game
        right = world.paddles[1]

        router.press('up')
        router.press('down')
        router.release('down')

        assert right.pressed_up is True
        assert right.pressed_down is False
        assert world.paddles[0].pressed_up is False

    def test_press_takes_effect_on_next_tick(self, game):
        world, router = game
        left = world.paddles[0]

        router.press('s')
        assert left.vy == 0.0

        world.tick(0.0)
        assert left.vy > 0

    def test_binding_for(self, game):
        world, router = game

        assert router.binding_for('w') == (world.paddles[0], Control.UP)
        assert router.binding_for('down') == (world.paddles[1], Control.DOWN)
        assert router.binding_for('p') is None


class TestCustomBindings:
    """Test routers built from other key sets."""

    def test_custom_key_bindings(self, skin, audio):
        world = build_world(skin=skin, audio=audio)
        keys = KeyBindings(left=('a', 'z'), right=('k', 'm'), pause=('escape',), music=('n',))
        router = build_default_router(world, keys)

        router.press('x')
        router.press('a')
        router.press('m')
        router.press('n')
        router.press('escape')

        assert world.paddles[0].pressed_up is True
        assert world.paddles[1].pressed_down is True
        assert world.music_muted is False
        assert world.paused is True

    def test_manual_router(self, world):
        router = InputRouter(world)
        router.press('p')
        router.press('p')

        assert world.started is False
        assert world.paused is False
