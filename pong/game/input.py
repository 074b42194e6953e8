"""
Keyboard routing for Pong.

One dispatcher looks every key up in a binding table instead of each
paddle listening to the keyboard on its own. Keys are identified by
name (pygame.key.name() values such as 'w', 'up', 'space').

Key presses only flip flags or session state; the paddles read their
flags on the next tick.
"""

from typing import Dict, Iterable, Optional, Tuple, TYPE_CHECKING

from pong.config import KeyBindings
from pong.logging import get_logger

from .entities.paddle import Control, Paddle

if TYPE_CHECKING:
    from .world import World

log = get_logger('input')


class InputRouter:
    """Routes key presses to paddle buttons and session commands.

    The first press of any key leaves the start screen. Afterwards the
    pause and music keys toggle their session flags. Paddle bindings
    apply to every press and release, the first one included.

    Examples:
        >>> router = InputRouter(world)
        >>> router.bind_paddle(world.paddles[0], up='w', down='s')
        >>> router.press('w')
    """

    def __init__(
        self,
        world: 'World',
        pause_keys: Iterable[str] = (),
        music_keys: Iterable[str] = (),
    ):
        """Initialize router.

        Args:
            world: World whose session commands the keys trigger
            pause_keys: Keys that toggle pause
            music_keys: Keys that toggle the music
        """
        self._world = world
        self._paddle_bindings: Dict[str, Tuple[Paddle, Control]] = {}
        self._pause_keys = frozenset(pause_keys)
        self._music_keys = frozenset(music_keys)

    def bind_paddle(self, paddle: Paddle, up: str, down: str) -> None:
        """Bind two keys to a paddle's up and down buttons."""
        self._paddle_bindings[up] = (paddle, Control.UP)
        self._paddle_bindings[down] = (paddle, Control.DOWN)

    def binding_for(self, key: str):
        """(paddle, control) bound to key, or None."""
        return self._paddle_bindings.get(key)

    def press(self, key: str) -> None:
        """Handle a key going down."""
        if self._world.started:
            self._world.dismiss_start()
        elif key in self._pause_keys:
            self._world.toggle_pause()
        elif key in self._music_keys:
            self._world.toggle_music()

        self._set_paddle(key, True)

    def release(self, key: str) -> None:
        """Handle a key going up."""
        self._set_paddle(key, False)

    def _set_paddle(self, key: str, pressed: bool) -> None:
        binding = self._paddle_bindings.get(key)
        if binding is None:
            return
        paddle, control = binding
        paddle.set_input(control, pressed)
        log.trace("%s %s -> %s", key, "down" if pressed else "up", control.value)


def build_default_router(
    world: 'World',
    keys: Optional[KeyBindings] = None,
) -> InputRouter:
    """Router for a world built by build_world: left, then right paddle.

    Args:
        world: World with at least two paddles
        keys: Key names to use

    Returns:
        Configured InputRouter
    """
    keys = keys if keys is not None else KeyBindings()
    router = InputRouter(world, pause_keys=keys.pause, music_keys=keys.music)
    left, right = world.paddles[:2]
    router.bind_paddle(left, *keys.left)
    router.bind_paddle(right, *keys.right)
    return router
