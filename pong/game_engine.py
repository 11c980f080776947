import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from . import config
from .ball import Ball
from .input_state import InputState
from .match import Match
from .opponent import OpponentController
from .paddle import Paddle
from .renderer import Renderer

logger = logging.getLogger(__name__)

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)
DEBUG_KEY = pygame.K_F3


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the renderer."""
    width: int
    height: int
    player_rect: Tuple[float, float, float, float]
    opponent_rect: Tuple[float, float, float, float]
    ball_pos: Tuple[float, float]
    ball_radius: float
    ball_velocity: Tuple[float, float]
    ball_speed: float
    state: str
    running: bool
    player_score: int
    opponent_score: int
    winner: Optional[str]
    message: Optional[str]
    show_debug: bool
    dt: float
    frame_scale: float


# ----------------- Game Engine -----------------
class GameEngine:
    def __init__(self, width=config.FIELD_WIDTH, height=config.FIELD_HEIGHT, rng=None):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

        # Entities
        start_y = (height - config.PADDLE_HEIGHT) / 2.0
        self.player = Paddle(config.PADDLE_INSET, start_y,
                             config.PADDLE_WIDTH, config.PADDLE_HEIGHT, config.PLAYER_SPEED)
        self.opponent = Paddle(width - config.PADDLE_INSET - config.PADDLE_WIDTH, start_y,
                               config.PADDLE_WIDTH, config.PADDLE_HEIGHT, config.OPPONENT_SPEED)
        self.ball = Ball(width, height, rng=self.rng)
        self.ball.set_callbacks(on_wall_bounce=self._log_wall_bounce,
                                on_paddle_bounce=self._log_paddle_bounce)

        # --- Rules / control ---
        self.match = Match(config.MAX_SCORE)
        self.opponent_ai = OpponentController()
        self.input = InputState()
        self._score_listeners = []

        # Frame timing (reported only, motion is per tick)
        self.last_dt = 0.0
        self.frame_scale = 1.0
        self.show_debug = False
        self.request_quit = False

        self.renderer = None

        self.ball.serve()
        logger.info("Match started (first to %d)", self.match.max_score)

    # ---------- Helpers ----------
    def add_score_listener(self, listener):
        """`listener(side, score)` runs every time a score changes."""
        self._score_listeners.append(listener)

    def _notify_score(self, side):
        for listener in self._score_listeners:
            listener(side, self.match.scores[side])

    def _log_wall_bounce(self):
        logger.debug("Wall bounce at y=%.1f", self.ball.y)

    def _log_paddle_bounce(self, side):
        logger.debug("Paddle hit by %s, speed now %.2f", side, self.ball.speed)

    def _toggle(self):
        transition = self.match.toggle()
        if transition == "restart":
            self.ball.serve()
            for side in self.match.scores:
                self._notify_score(side)

    # ---------- Input ----------
    def handle_input(self, events):
        for event in events:
            if event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                self.request_quit = True
            elif event.type == pygame.KEYDOWN and event.key == DEBUG_KEY:
                self.show_debug = not self.show_debug
            self.input.handle_event(event)

        if self.input.take_toggle():
            self._toggle()

    # ---------- Update ----------
    def update(self, dt: float):
        self.last_dt = dt
        self.frame_scale = dt * config.TARGET_FPS

        if not self.match.running:
            return

        # Player: pointer target first, then held keys
        pointer_y = self.input.take_pointer()
        if pointer_y is not None:
            self.player.move_to_center_on(pointer_y, self.height)
        intent = self.input.vertical_intent()
        if intent:
            self.player.move_by(intent * self.player.speed, self.height)

        self.opponent_ai.update(self.opponent, self.ball, self.width, self.height)

        self.ball.advance(self.player, self.opponent)

        self._check_score()

    def _check_score(self):
        if self.ball.exited_left():
            scorer, serve_to = config.SIDE_OPPONENT, config.SIDE_OPPONENT
        elif self.ball.exited_right():
            scorer, serve_to = config.SIDE_PLAYER, config.SIDE_PLAYER
        else:
            return

        game_over = self.match.score_point(scorer)
        self._notify_score(scorer)
        if not game_over:
            self.ball.serve(serve_to)

    # ---------- Render ----------
    def snapshot(self) -> Snapshot:
        p, o, b = self.player, self.opponent, self.ball
        return Snapshot(
            width=self.width,
            height=self.height,
            player_rect=(p.x, p.y, p.width, p.height),
            opponent_rect=(o.x, o.y, o.width, o.height),
            ball_pos=(b.x, b.y),
            ball_radius=b.r,
            ball_velocity=(b.vx, b.vy),
            ball_speed=b.speed,
            state=self.match.state,
            running=self.match.running,
            player_score=self.match.scores[config.SIDE_PLAYER],
            opponent_score=self.match.scores[config.SIDE_OPPONENT],
            winner=self.match.winner,
            message=self.match.overlay_message(),
            show_debug=self.show_debug,
            dt=self.last_dt,
            frame_scale=self.frame_scale,
        )

    def render(self, screen):
        if self.renderer is None:
            self.renderer = Renderer(self.width, self.height)
            self.renderer.scoreboard.sync(self.match.scores)
            self.add_score_listener(self.renderer.scoreboard.update)
        self.renderer.draw(screen, self.snapshot())

    def frame(self, events, dt: float, screen):
        """One display refresh: input, then simulation, then drawing."""
        self.handle_input(events)
        self.update(dt)
        self.render(screen)
