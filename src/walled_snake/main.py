# main.py
import logging
import pygame # type: ignore

from .config import Config, FPS, HUD_HEIGHT, MIN_WINDOW_WIDTH
from .controls import handle_input
from .game import SnakeGame
from .hud import Hud, draw_game_over
from .render import render
from .storage import HighScoreStore, JsonFileStore

logger = logging.getLogger(__name__)


def run(cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    width = max(cfg.board_px, MIN_WINDOW_WIDTH)
    screen = pygame.display.set_mode((width, cfg.board_px + HUD_HEIGHT))
    pygame.display.set_caption("Snake with walls")
    clock = pygame.time.Clock()

    # Narrow boards are centered above the HUD
    board = screen.subsurface(pygame.Rect((width - cfg.board_px) // 2, 0, cfg.board_px, cfg.board_px))
    hud = Hud(top=cfg.board_px, width=width)

    game = SnakeGame(cfg, store=HighScoreStore(JsonFileStore(cfg.store_path), cfg.store_key))
    logger.info("Grid %dx%d at %d ticks/s, high score %d",
                cfg.grid_size, cfg.grid_size, game.tick_rate, game.high_score)

    running = True
    while running:
        # 1) input
        running = handle_input(game, pygame.event.get(), hud)
        if not running:
            break

        # 2) update (movement gated inside tick)
        game.tick(pygame.time.get_ticks())

        # 3) render
        screen.fill((0, 0, 0))
        render(board, game.state, cfg.grid_size, cfg.cell_size)
        if game.is_game_over:
            draw_game_over(board, font, game)
        hud.draw(screen, font, game)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()

def main():
    cfg = Config.from_env()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(cfg)

if __name__ == "__main__":
    main()
