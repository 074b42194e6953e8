"""
Frame loop driver.

Called once per display refresh. Reads the time source, works out how
much time passed since the previous frame, and ticks the world unless
it is paused. The loop itself never stops on pause, so the elapsed time
is correct again on the first frame after resuming.
"""

from typing import Callable, Optional, TYPE_CHECKING

from pong.logging import get_logger

if TYPE_CHECKING:
    from .world import World

log = get_logger('loop')


class GameLoop:
    """Drives a World from an injected millisecond clock.

    Examples:
        >>> times = iter([0.0, 16.0, 33.0])
        >>> loop = GameLoop(world, time_source=lambda: next(times))
        >>> loop.step()
        0.0
        >>> loop.step()
        16.0
    """

    def __init__(self, world: 'World', time_source: Callable[[], float]):
        """Initialize loop.

        Args:
            world: World to drive
            time_source: Returns the current time in milliseconds
        """
        self._world = world
        self._time_source = time_source
        self._last_timestamp: Optional[float] = None
        self.frame_count = 0

    def frame(self, timestamp: float) -> float:
        """Run one frame for the given timestamp.

        Args:
            timestamp: Current time in milliseconds

        Returns:
            Elapsed time since the previous frame (0 on the first frame)
        """
        if self._last_timestamp is None:
            progress = 0.0
        else:
            progress = timestamp - self._last_timestamp
        self._last_timestamp = timestamp
        self.frame_count += 1

        if not self._world.paused:
            self._world.tick(progress)

        return progress

    def step(self) -> float:
        """Run one frame at the time source's current time."""
        return self.frame(self._time_source())

    def run(
        self,
        should_continue: Callable[[], bool],
        before_frame: Optional[Callable[[], None]] = None,
        after_frame: Optional[Callable[[], None]] = None,
    ) -> int:
        """Keep running frames until should_continue() returns False.

        Args:
            should_continue: Checked before every frame
            before_frame: Called before each frame (event polling)
            after_frame: Called after each frame (display flip, frame cap)

        Returns:
            Number of frames run
        """
        frames = 0
        log.debug("Loop started")
        while should_continue():
            if before_frame is not None:
                before_frame()
            self.step()
            if after_frame is not None:
                after_frame()
            frames += 1
        log.debug("Loop stopped after %d frames", frames)
        return frames
