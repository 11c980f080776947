import math
import random

import pytest

from pong import config
from pong.ball import Ball
from pong.paddle import Paddle

W, H = config.FIELD_WIDTH, config.FIELD_HEIGHT
R = config.BALL_RADIUS


@pytest.fixture
def player():
    return Paddle(20, 200, 14, 100, 8)


@pytest.fixture
def opponent():
    return Paddle(W - 34, 200, 14, 100, 5)


@pytest.fixture
def ball():
    return Ball(W, H, rng=random.Random(7))


def test_hit_on_player_paddle_face(ball, player, opponent):
    ball.x, ball.y = 47.0, 250.0
    ball.vx, ball.vy = -5.0, 0.0

    ball.advance(player, opponent)

    assert ball.speed == pytest.approx(5.25)
    assert ball.vx == pytest.approx(5.25)
    assert ball.vy == pytest.approx(0.0)
    assert ball.x == pytest.approx(34 + R + 0.5)


def test_hit_on_opponent_sends_ball_left(ball, player, opponent):
    ball.x, ball.y = opponent.x - R - 2.0, opponent.center_y()
    ball.vx, ball.vy = 5.0, 0.0

    ball.advance(player, opponent)

    assert ball.vx < 0
    assert ball.x == pytest.approx(opponent.x - R - 0.5)


def test_bounce_angle_follows_hit_position(ball, player, opponent):
    # Ball meets the paddle half way between center and bottom edge
    ball.x, ball.y = 47.0, 275.0
    ball.vx, ball.vy = -5.0, 0.0

    ball.advance(player, opponent)

    angle = 0.5 * config.MAX_BOUNCE_ANGLE
    assert ball.vx == pytest.approx(5.25 * math.cos(angle))
    assert ball.vy == pytest.approx(5.25 * math.sin(angle))


def test_speed_is_capped(ball, player, opponent):
    ball.x, ball.y = 47.0, 250.0
    ball.speed = 14.9
    ball.vx, ball.vy = -5.0, 0.0

    ball.advance(player, opponent)

    assert ball.speed == config.BALL_MAX_SPEED


def test_top_wall_reflection(ball, player, opponent):
    ball.x, ball.y = 400.0, 12.0
    ball.vx, ball.vy = 3.0, -5.0

    ball.advance(player, opponent)

    assert ball.y == R
    assert ball.vx == 3.0
    assert ball.vy == 5.0


def test_bottom_wall_reflection(ball, player, opponent):
    ball.x, ball.y = 400.0, H - 12.0
    ball.vx, ball.vy = -2.5, 4.0

    ball.advance(player, opponent)

    assert ball.y == H - R
    assert ball.vx == -2.5
    assert ball.vy == -4.0


def test_corner_counts_as_hit_even_when_circle_misses(ball, player):
    # Center diagonally off the paddle's top-right corner: farther than the
    # radius from it, but the bounding boxes still overlap.
    ball.x, ball.y = 41.0, 193.0
    assert math.hypot(ball.x - 34, ball.y - 200) > R
    assert ball.overlaps(player)


def test_hit_above_paddle_edge_bends_past_max_angle(ball, player, opponent):
    # Center 5 units above the top edge still overlaps; the hit fraction is
    # -1.1, so the bounce is steeper than MAX_BOUNCE_ANGLE.
    ball.x, ball.y = 47.0, 195.0
    ball.vx, ball.vy = -5.0, 0.0

    ball.advance(player, opponent)

    angle = -1.1 * config.MAX_BOUNCE_ANGLE
    assert abs(angle) > config.MAX_BOUNCE_ANGLE
    assert ball.vy == pytest.approx(5.25 * math.sin(angle))
    assert ball.vx == pytest.approx(5.25 * math.cos(angle))
    assert ball.vx > 0


def test_no_overlap_when_clear(ball, player):
    ball.x, ball.y = 34 + R + 0.5, 250.0
    assert not ball.overlaps(player)


def test_serve_resets_speed_and_angle(ball):
    for toward, sign in ((config.SIDE_PLAYER, -1), (config.SIDE_OPPONENT, 1)):
        for _ in range(50):
            ball.speed = 12.0
            ball.serve(toward)
            assert (ball.x, ball.y) == (W / 2, H / 2)
            assert ball.speed == config.BALL_BASE_SPEED
            assert math.copysign(1, ball.vx) == sign
            angle = math.atan2(ball.vy, abs(ball.vx))
            assert abs(angle) <= config.SERVE_ANGLE + 1e-9
            assert math.hypot(ball.vx, ball.vy) == pytest.approx(config.BALL_BASE_SPEED)


def test_serve_rejects_unknown_side(ball):
    with pytest.raises(ValueError):
        ball.serve("left")


def test_exit_checks(ball):
    ball.x = -R - 0.1
    assert ball.exited_left()
    ball.x = -R + 0.1
    assert not ball.exited_left()
    ball.x = W + R + 0.1
    assert ball.exited_right()


def test_callbacks_fire(ball, player, opponent):
    hits, walls = [], []
    ball.set_callbacks(on_wall_bounce=lambda: walls.append(True),
                       on_paddle_bounce=hits.append)
    ball.x, ball.y = 47.0, 250.0
    ball.vx, ball.vy = -5.0, 0.0
    ball.advance(player, opponent)
    ball.x, ball.y = 400.0, 5.0
    ball.vy = -1.0
    ball.advance(player, opponent)

    assert hits == [config.SIDE_PLAYER]
    assert walls == [True]
