"""
Maze of Shadows
Torchlit maze game - pygame front-end over the GameSession core
"""

import logging

import pygame

from config import GAME_TITLE, GAME_VERSION, LOG_LEVEL, GameConfig
from game.controls import direction_from_keys, is_pause_key
from game.game_state import GameState
from game.session import GameSession
from game.torchlight import TorchLight, draw_flame
from game.ui_manager import UIManager
from utils.colors import COLOR_BG
from utils.constants import FPS, PANEL_H
from utils.log_setup import setup_logging

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Main game class
    Owns the window and forwards input to the session
    """
    def __init__(self, config=None, seed=None):
        pygame.init()

        self.config = config or GameConfig()
        self.session = GameSession(self.config, seed=seed)
        self.ui_manager = UIManager()
        self.torch = TorchLight()

        self.maze_h = self.config.height
        self.screen = pygame.display.set_mode((self.config.width, self.maze_h + PANEL_H))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Process window, keyboard and mouse events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if is_pause_key(event.key):
                    self.session.toggle_pause()
                elif event.key == pygame.K_ESCAPE:
                    if self.session.state == GameState.MENU:
                        self.running = False
                    elif not self.session.back():
                        self.session.return_to_menu()
                elif event.key == pygame.K_RETURN and self.session.state == GameState.MENU:
                    self.session.start()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.ui_manager.handle_click(*event.pos)

    def update(self, dt):
        """Advance the session while playing"""
        if self.session.state != GameState.PLAYING or self.session.paused:
            return
        direction = direction_from_keys(pygame.key.get_pressed())
        self.session.tick(dt, direction)

    def draw(self):
        """Draw the current screen"""
        self.screen.fill(COLOR_BG)
        state = self.session.state

        if state == GameState.MENU:
            self.ui_manager.draw_menu(self.screen, self.session)
        elif state == GameState.INFO:
            self.ui_manager.draw_info(self.screen, self.session)
        elif state == GameState.CREDITS:
            self.ui_manager.draw_credits(self.screen, self.session)
        else:
            self._draw_play()

        pygame.display.flip()

    def _draw_play(self):
        snap = self.session.snapshot()
        cell_size = self.config.cell_size
        px, py = snap['player']

        self.ui_manager.draw_maze(self.screen, snap['grid'], cell_size)
        self.ui_manager.draw_entities(self.screen, snap, cell_size)
        draw_flame(self.screen, px, py, cell_size)

        if not snap['illum_active']:
            self.torch.render(self.screen, px, py)

        if snap['notice'] and snap['state'] == GameState.PLAYING:
            self.ui_manager.draw_notice(self.screen, self.maze_h)

        self.ui_manager.draw_hud(self.screen, snap, self.maze_h)

        if snap['game_over']:
            self.ui_manager.draw_game_over(self.screen, self.session)
        elif snap['paused']:
            self.ui_manager.draw_paused(self.screen, self.session)
        else:
            self.ui_manager.buttons = []

    def run(self):
        """Main loop"""
        logger.info("%s v%s started", GAME_TITLE, GAME_VERSION)
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()
            self.update(dt)
            self.draw()

        pygame.quit()
        logger.info("Game closed")


def main():
    setup_logging(LOG_LEVEL)
    MazeGame().run()


if __name__ == "__main__":
    main()
