import logging

from . import config

logger = logging.getLogger(__name__)

STATE_PLAYING = "PLAYING"
STATE_PAUSED = "PAUSED"
STATE_GAME_OVER = "GAME_OVER"

WIN_MESSAGES = {
    config.SIDE_PLAYER: "You win! (Space to restart)",
    config.SIDE_OPPONENT: "CPU wins! (Space to restart)",
}


class Match:
    """Scores plus the Playing / Paused / GameOver state machine.

    Legal transitions:
      PLAYING   -> PAUSED     toggle
      PAUSED    -> PLAYING    toggle
      PLAYING   -> GAME_OVER  a side reaches max_score
      GAME_OVER -> PLAYING    toggle, scores reset to 0
    """

    def __init__(self, max_score=config.MAX_SCORE):
        self.max_score = max_score
        self.scores = {config.SIDE_PLAYER: 0, config.SIDE_OPPONENT: 0}
        self.state = STATE_PLAYING
        self.winner = None

    @property
    def running(self):
        return self.state == STATE_PLAYING

    def score_point(self, side) -> bool:
        """Credit a point. Returns True if it ended the match."""
        if side not in self.scores:
            raise ValueError(f"unknown side: {side!r}")
        if self.state != STATE_PLAYING:
            return False

        self.scores[side] += 1
        logger.info("Point %s: player %d - %d cpu", side,
                    self.scores[config.SIDE_PLAYER], self.scores[config.SIDE_OPPONENT])
        if self.scores[side] >= self.max_score:
            self.winner = side
            self.state = STATE_GAME_OVER
            logger.info("Game over, %s wins", side)
            return True
        return False

    def toggle(self) -> str:
        if self.state == STATE_GAME_OVER:
            for side in self.scores:
                self.scores[side] = 0
            self.winner = None
            self.state = STATE_PLAYING
            logger.info("Match restarted")
            return "restart"
        if self.state == STATE_PLAYING:
            self.state = STATE_PAUSED
            logger.info("Paused")
            return "pause"
        self.state = STATE_PLAYING
        logger.info("Resumed")
        return "resume"

    def overlay_message(self):
        if self.state == STATE_PAUSED:
            return "Paused"
        if self.state == STATE_GAME_OVER:
            return WIN_MESSAGES[self.winner]
        return None
