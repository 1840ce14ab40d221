# main.py
import argparse
import logging

import pygame # type: ignore

from .config import WIDTH, HEIGHT, Config
from .controls import handle_input
from .driver import TickDriver
from .game import GameEngine
from .render import draw_game

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement (random if omitted).")
    parser.add_argument("--tick-ms", type=positive_int, default=150, help="Milliseconds between snake moves.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, tick_ms=args.tick_ms)

    pygame.init()
    font = pygame.font.SysFont(None, 26)
    small = pygame.font.SysFont(None, 20)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    engine = GameEngine(cfg)
    logger.info("Starting: tick=%d ms, seed=%s", cfg.tick_ms, cfg.seed)

    running = True
    try:
        with TickDriver(engine) as driver:
            while running:
                # input and ticks share this loop, so they never interleave
                for event in pygame.event.get():
                    if driver.handle(event):
                        continue
                    if not handle_input(engine, [event]):
                        running = False
                        break

                draw_game(screen, font, engine.snapshot(), small)
                pygame.display.flip()
                clock.tick(cfg.fps)
    finally:
        pygame.quit()
    logger.info("Bye")

if __name__ == "__main__":
    main()
