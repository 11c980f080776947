from . import config
from .core import clamp


class OpponentController:
    """Proportional controller for the CPU paddle.

    Chases the ball while it is coming over (or has passed the commit line),
    otherwise drifts back toward the middle. The paddle's own speed caps every
    step, so the CPU can be beaten by steep returns.
    """

    def __init__(self, chase_gain=config.AI_CHASE_GAIN, return_gain=config.AI_RETURN_GAIN,
                 chase_fraction=config.AI_CHASE_FRACTION):
        self.chase_gain = chase_gain
        self.return_gain = return_gain
        self.chase_fraction = chase_fraction

    def should_chase(self, ball, field_width):
        return ball.vx > 0 or ball.x > field_width * self.chase_fraction

    def update(self, paddle, ball, field_width, field_height) -> float:
        center = paddle.center_y()
        if self.should_chase(ball, field_width):
            move = clamp((ball.y - center) * self.chase_gain, -paddle.speed, paddle.speed)
        else:
            move = clamp((field_height / 2.0 - center) * self.return_gain, -paddle.speed, paddle.speed)
        paddle.move_by(move, field_height)
        return move
