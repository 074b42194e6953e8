"""Geometric skin - white rectangles on black, drawn with pygame."""

from typing import List, Optional, Tuple

import pygame

from pong.config import BACKGROUND_COLOR, FIELD_SIZE, FOREGROUND_COLOR
from pong.models import EntityView

from .base import PongSkin, format_score


def field_rect(
    view: EntityView,
    screen_width: int,
    screen_height: int,
) -> Tuple[int, int, int, int]:
    """Map an entity's field-% geometry to a pixel rectangle.

    Returns:
        Tuple of (left, top, width, height) in pixels
    """
    sx = screen_width / FIELD_SIZE
    sy = screen_height / FIELD_SIZE
    return (
        round(view.left * sx),
        round(view.top * sy),
        max(1, round(view.width * sx)),
        max(1, round(view.height * sy)),
    )


class GeometricSkin(PongSkin):
    """Renders the game as plain rectangles.

    - Paddles and ball: filled foreground rectangles
    - Score: centred at the top, monospace
    - Message: centred in the field
    """

    NAME = "geometric"
    DESCRIPTION = "Plain rectangles, classic arcade look"

    def __init__(self, screen: pygame.Surface):
        """Initialize geometric skin.

        Args:
            screen: Surface the game is drawn on
        """
        self._screen = screen
        self._font: Optional[pygame.font.Font] = None
        self._score_text = format_score(0, 0)
        self._message = ""

        # HUD currently on screen: (score text, message) and where it was drawn
        self._hud_drawn: Optional[Tuple[str, str]] = None
        self._hud_rects: List[pygame.Rect] = []

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            # Font size follows the window size
            width, height = self._screen.get_size()
            size = int(min(width / 30, height / 5))
            self._font = pygame.font.SysFont('monospace', size)
        return self._font

    def begin_frame(self) -> None:
        self._screen.fill(BACKGROUND_COLOR)
        self._hud_drawn = None
        self._hud_rects = []

    def end_frame(self) -> None:
        self._render_hud()

    def draw_entity(self, view: EntityView) -> None:
        if not view.visible:
            return
        width, height = self._screen.get_size()
        pygame.draw.rect(self._screen, FOREGROUND_COLOR, field_rect(view, width, height))

    def show_score(self, left: int, right: int) -> None:
        self._score_text = format_score(left, right)

    def show_message(self, text: str) -> None:
        self._message = text

    def render_static(self) -> None:
        """Refresh the HUD over the last frame (used while paused).

        Only redraws when the score or message changed, erasing the old
        text first.
        """
        if self._hud_drawn == (self._score_text, self._message):
            return
        for rect in self._hud_rects:
            self._screen.fill(BACKGROUND_COLOR, rect)
        self._render_hud()

    def _render_hud(self) -> None:
        font = self._ensure_font()
        width, height = self._screen.get_size()

        score = font.render(self._score_text, True, FOREGROUND_COLOR)
        rects = [self._screen.blit(score, score.get_rect(midtop=(width // 2, height // 40)))]

        if self._message:
            message = font.render(self._message, True, FOREGROUND_COLOR)
            rects.append(self._screen.blit(
                message, message.get_rect(center=(width // 2, height // 2)),
            ))

        self._hud_rects = rects
        self._hud_drawn = (self._score_text, self._message)
