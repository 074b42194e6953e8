"""Base class for Pong skins.

Skins handle ALL rendering - the game only manages state. A skin
receives one EntityView per entity per unpaused tick, the score after
every point, and the current message line.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from pong.models import EntityView


def format_score(left: int, right: int) -> str:
    """Render the score board text, padded so the colon stays centred.

    Examples:
        >>> format_score(10, 2)
        '10 : 2 '
    """
    score_left = str(left)
    score_right = str(right)

    width = max(len(score_left), len(score_right))
    pad_left = " " * (width - len(score_left))
    pad_right = " " * (width - len(score_right))

    return f"{pad_left}{score_left} : {score_right}{pad_right}"


class PongSkin(ABC):
    """Base class for game skins (rendering only)."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def begin_frame(self) -> None:
        """Called before the entities of one tick are drawn."""
        pass

    def end_frame(self) -> None:
        """Called after the entities of one tick are drawn."""
        pass

    @abstractmethod
    def draw_entity(self, view: EntityView) -> None:
        """Draw one paddle or ball.

        Args:
            view: Entity geometry and visibility in field %
        """
        pass

    @abstractmethod
    def show_score(self, left: int, right: int) -> None:
        """Refresh the score board."""
        pass

    @abstractmethod
    def show_message(self, text: str) -> None:
        """Replace the message line. Empty text hides it."""
        pass


class NullSkin(PongSkin):
    """Skin that draws nothing and remembers what it was given.

    Used for headless runs; the last frame's views, the score text and
    the message stay inspectable.
    """

    NAME = "null"
    DESCRIPTION = "Draws nothing"

    def __init__(self) -> None:
        self.frame: List[EntityView] = []
        self.score: Tuple[int, int] = (0, 0)
        self.score_text = format_score(0, 0)
        self.message = ""
        self.frames_drawn = 0

    def begin_frame(self) -> None:
        self.frame = []

    def end_frame(self) -> None:
        self.frames_drawn += 1

    def draw_entity(self, view: EntityView) -> None:
        self.frame.append(view)

    def show_score(self, left: int, right: int) -> None:
        self.score = (left, right)
        self.score_text = format_score(left, right)

    def show_message(self, text: str) -> None:
        self.message = text
