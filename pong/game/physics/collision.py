"""Collision detection and response for Pong.

Handles ball-paddle and ball-wall collisions. The paddle test is swept
along the x axis: it compares the ball's position before and after the
step against the paddle face, so it fires once per crossing in the
direction of travel and never again while the two overlap.

Vertical overlap is only checked at the end of the step, so a fast ball
with a large vy can graze past a paddle corner. That is accepted.
"""

from typing import Tuple, TYPE_CHECKING

from pong.config import FIELD_SIZE

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle


def paddle_border(ball: 'Ball', paddle: 'Paddle') -> float:
    """X coordinate the ball center must cross to touch the paddle face.

    The face is the one turned towards the incoming ball.
    """
    avg_width = (paddle.width + ball.width) / 2
    if ball.vx < 0:
        return paddle.x + avg_width
    return paddle.x - avg_width


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle', dt: float) -> bool:
    """Check if the ball crossed the paddle face during the last step.

    Must be called after the ball has been moved by ``vx * dt``.

    Args:
        ball: Ball already advanced by dt
        paddle: Paddle to check against
        dt: Step length in milliseconds

    Returns:
        True if the ball hits the paddle
    """
    avg_height = (paddle.height + ball.height) / 2
    border = paddle_border(ball, paddle)
    previous_x = ball.x - ball.vx * dt

    if ball.vx < 0:
        crossed = ball.x <= border and previous_x > border
    else:
        crossed = ball.x >= border and previous_x < border

    return crossed and abs(ball.y - paddle.y) <= avg_height


def reflect_off_paddle(ball: 'Ball', paddle: 'Paddle') -> float:
    """Mirror the ball's x at the paddle face it passed.

    Moving the ball back out by the penetration depth keeps it from
    being drawn inside the paddle.

    Returns:
        New ball x
    """
    if ball.vx < 0:
        return 2 * paddle.x + paddle.width - ball.x + ball.width
    return 2 * paddle.x - paddle.width - ball.x - ball.width


def bounce_off_walls(position: float, size: float) -> Tuple[float, bool]:
    """Reflect a coordinate off the field borders on one axis.

    Args:
        position: Center coordinate
        size: Extent of the body on this axis

    Returns:
        Tuple of (corrected position, True if a border was hit)
    """
    if position < size / 2:
        return size - position, True
    if position > FIELD_SIZE - size / 2:
        return 2 * FIELD_SIZE - size - position, True
    return position, False
