"""
Collision detection and paddle reflection for Wrap Pong
"""

from wrap_pong.core.entities import Ball, Paddle, Rect2, Vector2D

RIGHTWARD = Vector2D(1.0, 0.0)
LEFTWARD = Vector2D(-1.0, 0.0)


def rects_intersect(a: Rect2, b: Rect2, include_borders: bool = True) -> bool:
    """Axis-aligned overlap test, touching edges count by default"""
    return a.intersects(b, include_borders)


def ball_hits_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Checks if the ball overlaps a paddle (closed intervals)"""
    return rects_intersect(ball.rect, paddle.rect, include_borders=True)


def left_bounce_angle(ball: Ball, paddle_left: Paddle) -> float:
    """Deflection angle (radians) after hitting the left paddle"""
    y_dist = paddle_left.position.y - ball.position.y
    return y_dist / paddle_left.size.y


def right_bounce_angle(ball: Ball, paddle_right: Paddle, paddle_left: Paddle) -> float:
    """
    Deflection angle (radians) after hitting the right paddle.

    Normalized by twice the *left* paddle's height, so the right paddle
    deflects half as much as the left one for the same offset.
    """
    y_dist = paddle_right.position.y - ball.position.y
    return y_dist / (paddle_left.size.y * 2)


def apply_left_bounce(ball: Ball, paddle_left: Paddle) -> float:
    """Sends the ball rightward, tilted by the hit offset. Returns the angle."""
    angle = left_bounce_angle(ball, paddle_left)
    ball.direction = RIGHTWARD.rotated(angle)
    return angle


def apply_right_bounce(ball: Ball, paddle_right: Paddle, paddle_left: Paddle) -> float:
    """Sends the ball leftward, tilted by the hit offset. Returns the angle."""
    angle = right_bounce_angle(ball, paddle_right, paddle_left)
    ball.direction = LEFTWARD.rotated(angle)
    return angle
