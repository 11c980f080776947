import pygame

from . import config


def _int_rect(rect):
    x, y, w, h = rect
    return pygame.Rect(int(x), int(y), int(w), int(h))


class Scoreboard:
    """Score text per side; re-rendered only when a score changes."""

    def __init__(self, font):
        self.font = font
        self._surfaces = {}
        self.sync({config.SIDE_PLAYER: 0, config.SIDE_OPPONENT: 0})

    def update(self, side, score):
        self._surfaces[side] = self.font.render(str(score), True, config.WHITE)

    def sync(self, scores):
        for side, score in scores.items():
            self.update(side, score)

    def surface(self, side):
        return self._surfaces[side]


class Renderer:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, config.OVERLAY_FONT_SIZE)
        self.small_font = pygame.font.Font(None, config.DEBUG_FONT_SIZE)
        self.scoreboard = Scoreboard(pygame.font.Font(None, config.SCORE_FONT_SIZE))

    def draw(self, screen, snap):
        screen.fill(config.BACKGROUND)
        self._draw_center_line(screen)

        # Field & entities
        pygame.draw.rect(screen, config.ACCENT, _int_rect(snap.player_rect), border_radius=6)
        pygame.draw.rect(screen, config.ACCENT, _int_rect(snap.opponent_rect), border_radius=6)
        bx, by = snap.ball_pos
        pygame.draw.circle(screen, config.WHITE, (int(bx), int(by)), int(snap.ball_radius))

        # HUD: points
        player_text = self.scoreboard.surface(config.SIDE_PLAYER)
        cpu_text = self.scoreboard.surface(config.SIDE_OPPONENT)
        screen.blit(player_text, player_text.get_rect(midtop=(self.width // 4, 16)))
        screen.blit(cpu_text, cpu_text.get_rect(midtop=(self.width * 3 // 4, 16)))

        if snap.message:
            self._draw_overlay(screen, snap.message)

        if snap.show_debug:
            self._draw_debug(screen, snap)

    def _draw_center_line(self, screen):
        x = self.width // 2
        y = 10
        while y < self.height - 10:
            end = min(y + 10, self.height - 10)
            pygame.draw.line(screen, config.CENTER_LINE, (x, y), (x, end), 2)
            y += 24

    def _draw_overlay(self, screen, message):
        panel = pygame.Surface((320, 80), pygame.SRCALPHA)
        panel.fill(config.OVERLAY_DARK)
        screen.blit(panel, (self.width // 2 - 160, self.height // 2 - 40))
        text = self.font.render(message, True, config.WHITE)
        screen.blit(text, text.get_rect(center=(self.width // 2, self.height // 2)))

    def _draw_debug(self, screen, snap):
        fps = 1.0 / snap.dt if snap.dt > 0 else 0.0
        vx, vy = snap.ball_velocity
        lines = [
            f"FPS: {fps:5.1f}   frame scale: {snap.frame_scale:4.2f}   state: {snap.state}",
            f"BALL  x={snap.ball_pos[0]:7.1f} y={snap.ball_pos[1]:7.1f}",
            f"      vx={vx:6.2f} vy={vy:6.2f} speed={snap.ball_speed:5.2f}",
        ]
        y = self.height - 20 * len(lines) - 8
        for line in lines:
            surf = self.small_font.render(line, True, config.DEBUG_TEXT)
            screen.blit(surf, (10, y))
            y += 20
