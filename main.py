import argparse
import logging

import pygame

from pong import config
from pong.game_engine import GameEngine

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Paddle rally against a scripted CPU.")
    parser.add_argument("--fps", type=int, default=config.TARGET_FPS,
                        help="frame cap (0 = uncapped); motion is tuned for 60")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Initialize pygame/Start application
    pygame.init()
    try:
        # SCALED keeps logical coordinates at FIELD_WIDTH x FIELD_HEIGHT
        # whatever the window size or display density
        screen = pygame.display.set_mode((config.FIELD_WIDTH, config.FIELD_HEIGHT),
                                         pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption("Pong - mouse or Up/Down, Space to pause")
        clock = pygame.time.Clock()
        engine = GameEngine(config.FIELD_WIDTH, config.FIELD_HEIGHT)

        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0  # seconds since last frame
            events = pygame.event.get()

            # Window close
            for event in events:
                if event.type == pygame.QUIT:
                    running = False

            engine.frame(events, dt, screen)
            pygame.display.flip()

            if engine.request_quit:
                running = False
    finally:
        logger.info("Shutting down")
        pygame.quit()


if __name__ == "__main__":
    main()
