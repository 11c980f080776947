import logging
import math
import random

from . import config
from .core import velocity_from_angle

logger = logging.getLogger(__name__)


class Ball:
    def __init__(self, field_width, field_height, radius=config.BALL_RADIUS,
                 base_speed=config.BALL_BASE_SPEED, max_speed=config.BALL_MAX_SPEED,
                 rng=None):
        self.field_width = field_width
        self.field_height = field_height
        self.r = radius

        # Speeds are in units per tick (tuned for ~60 ticks/sec)
        self.base_speed = base_speed
        self.max_speed = max_speed
        self.speed_increase = config.BALL_SPEED_GROWTH  # on paddle hit
        self.rng = rng or random.Random()

        self.x = field_width / 2.0
        self.y = field_height / 2.0
        self.speed = base_speed
        self.vx = 0.0
        self.vy = 0.0

        self._on_wall_bounce = None
        self._on_paddle_bounce = None

    def set_callbacks(self, on_wall_bounce=None, on_paddle_bounce=None):
        self._on_wall_bounce = on_wall_bounce
        self._on_paddle_bounce = on_paddle_bounce

    def serve(self, toward=None):
        """Put the ball back in the middle and send it toward one side.

        `toward` is config.SIDE_PLAYER (left), config.SIDE_OPPONENT (right)
        or None for a coin flip. Speed goes back to the base speed.
        """
        if toward is None:
            toward = self.rng.choice((config.SIDE_PLAYER, config.SIDE_OPPONENT))
        if toward == config.SIDE_PLAYER:
            direction = -1
        elif toward == config.SIDE_OPPONENT:
            direction = 1
        else:
            raise ValueError(f"unknown serve direction: {toward!r}")

        self.x = self.field_width / 2.0
        self.y = self.field_height / 2.0
        self.speed = self.base_speed
        angle = self.rng.uniform(-config.SERVE_ANGLE, config.SERVE_ANGLE)
        self.vx, self.vy = velocity_from_angle(self.speed, angle, direction)
        logger.debug("Serve toward %s at %.1f deg", toward, math.degrees(angle))

    def overlaps(self, paddle):
        # Bounding box of the ball against the paddle rect. Corners of the box
        # count as hits even though the circle itself would miss.
        return (self.x - self.r < paddle.x + paddle.width and
                self.x + self.r > paddle.x and
                self.y + self.r > paddle.y and
                self.y - self.r < paddle.y + paddle.height)

    def exited_left(self):
        return self.x + self.r < 0

    def exited_right(self):
        return self.x - self.r > self.field_width

    def _wall_bounce(self):
        if self.y - self.r <= 0:
            self.y = self.r
            self.vy = -self.vy
        elif self.y + self.r >= self.field_height:
            self.y = self.field_height - self.r
            self.vy = -self.vy
        else:
            return
        if self._on_wall_bounce:
            self._on_wall_bounce()

    def _paddle_bounce(self, paddle, out_dir, side):
        # Deflection based on where we hit relative to paddle center.
        # Not clamped: a deep corner overlap can push past +/-1.
        rel = (self.y - paddle.center_y()) / (paddle.height / 2.0)
        angle = rel * config.MAX_BOUNCE_ANGLE

        self.speed = min(self.speed * self.speed_increase, self.max_speed)
        self.vx, self.vy = velocity_from_angle(self.speed, angle, out_dir)

        # Place ball just outside the paddle face so it can't re-trigger
        if out_dir > 0:
            self.x = paddle.x + paddle.width + self.r + config.PADDLE_PUSH_EPSILON
        else:
            self.x = paddle.x - self.r - config.PADDLE_PUSH_EPSILON

        if self._on_paddle_bounce:
            self._on_paddle_bounce(side)

    def advance(self, player, opponent):
        # One step per tick, no substepping
        self.x += self.vx
        self.y += self.vy

        self._wall_bounce()

        # Both paddles are checked independently
        if self.overlaps(player):
            self._paddle_bounce(player, +1, config.SIDE_PLAYER)
        if self.overlaps(opponent):
            self._paddle_bounce(opponent, -1, config.SIDE_OPPONENT)
