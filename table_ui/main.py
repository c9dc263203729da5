"""Main entry point for the pygame blackjack table."""

import logging
import sys

import pygame

from config import AppConfig, config as app_config
from table_ui.core.engine_adapter import EngineAdapter
from table_ui.scenes.table_scene import TableScene

logger = logging.getLogger(__name__)


def configure_logging(cfg: AppConfig) -> None:
    logging.basicConfig(
        level=cfg.effective_log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )


class Application:
    """Main application class running the fixed-rate game loop."""

    def __init__(self, cfg: AppConfig = app_config):
        pygame.init()
        pygame.display.set_caption("Blackjack")

        self.config = cfg
        display = cfg.display
        self.screen = pygame.display.set_mode((display.width, display.height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.engine = EngineAdapter(
            width=display.width,
            height=display.height,
            card_speed=display.card_speed,
            starting_balance=cfg.game.starting_balance,
            seed=cfg.game.seed,
        )
        self.scene = TableScene(
            self.engine,
            default_bet=cfg.game.default_bet,
            bet_step=cfg.game.bet_step,
        )
        self.scene.resize(*self.screen.get_size())
        self.scene.on_enter()
        logger.info("Table open at %s, %d ticks/s", self.screen.get_size(), display.fps)

    def handle_events(self) -> None:
        """Process pygame events between ticks."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue
            if event.type == pygame.VIDEORESIZE:
                self.scene.resize(event.w, event.h)
                continue
            self.scene.handle_event(event)

    def run(self) -> None:
        """Main loop: one update and one draw per tick."""
        while self.running:
            dt = self.clock.tick(self.config.display.fps) / 1000.0

            self.handle_events()
            self.scene.update(dt)
            self.scene.draw(self.screen)
            pygame.display.flip()

        self.scene.on_exit()
        logger.info("Leaving with balance %d", self.engine.table.player.balance)
        pygame.quit()
        sys.exit()


def main() -> None:
    """Entry point for the pygame UI."""
    configure_logging(app_config)
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
