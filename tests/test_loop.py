"""
Tests for the frame loop driver.
"""

from unittest.mock import Mock

import pytest

from pong.game.loop import GameLoop


@pytest.fixture
def mock_world():
    world = Mock()
    world.paused = False
    return world


class TestGameLoopFrame:
    """Test elapsed time and ticking."""

    def test_first_frame_has_zero_dt(self, mock_world):
        loop = GameLoop(mock_world, time_source=lambda: 0.0)

        assert loop.frame(1234.0) == 0.0
        mock_world.tick.assert_called_once_with(0.0)

    def test_dt_is_time_since_previous_frame(self, mock_world):
        loop = GameLoop(mock_world, time_source=lambda: 0.0)

        loop.frame(100.0)
        assert loop.frame(116.0) == 16.0
        assert loop.frame(150.0) == 34.0

        mock_world.tick.assert_called_with(34.0)
        assert loop.frame_count == 3

    def test_paused_world_is_not_ticked(self, mock_world):
        loop = GameLoop(mock_world, time_source=lambda: 0.0)
        loop.frame(0.0)
        mock_world.tick.reset_mock()

        mock_world.paused = True
        loop.frame(16.0)
        loop.frame(32.0)

        mock_world.tick.assert_not_called()

        mock_world.paused = False
        assert loop.frame(48.0) == 16.0
        mock_world.tick.assert_called_once_with(16.0)

    def test_resume_uses_one_frame_of_time(self, mock_world):
        """Time spent paused is not replayed after resuming."""
        loop = GameLoop(mock_world, time_source=lambda: 0.0)
        loop.frame(0.0)

        mock_world.paused = True
        for t in range(16, 10000, 16):
            loop.frame(float(t))

        mock_world.paused = False
        mock_world.tick.reset_mock()
        loop.frame(10000.0)

        mock_world.tick.assert_called_once()
        assert mock_world.tick.call_args[0][0] < 20.0


class TestGameLoopRun:
    """Test time source driven stepping."""

    def test_step_reads_time_source(self, mock_world):
        times = iter([0.0, 16.0, 33.0])
        loop = GameLoop(mock_world, time_source=lambda: next(times))

        assert loop.step() == 0.0
        assert loop.step() == 16.0
        assert loop.step() == 17.0

    def test_run_until_stopped(self, mock_world):
        times = iter(float(t) for t in range(0, 1000, 10))
        loop = GameLoop(mock_world, time_source=lambda: next(times))
        remaining = [5]

        def should_continue():
            remaining[0] -= 1
            return remaining[0] >= 0

        before = Mock()
        after = Mock()
        frames = loop.run(should_continue, before_frame=before, after_frame=after)

        assert frames == 5
        assert before.call_count == 5
        assert after.call_count == 5
        assert mock_world.tick.call_count == 5

    def test_run_drives_real_world(self, world):
        world.dismiss_start()
        times = iter([0.0, 100.0, 200.0])
        loop = GameLoop(world, time_source=lambda: next(times))
        calls = iter([True, True, True, False])

        loop.run(lambda: next(calls))

        assert world.skin.frames_drawn == 3
