"""
UI Manager - handles all UI rendering (maze, entities, HUD, menus, screens)
"""

import pygame

from game.game_state import GameState
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_NOTICE,
    COLOR_WALL, COLOR_PLAYER, COLOR_ENEMY, COLOR_TRAP, COLOR_EXIT,
    COLOR_PANEL_BG, COLOR_BUTTON, COLOR_BUTTON_BORDER, COLOR_OVERLAY,
    POWERUP_COLORS
)
from utils.constants import WALL_THICK, PLAYER_SIZE_FACTOR, MSG_NEW_MAZE
from utils.helpers import format_time, format_score, rect_contains
from config import GAME_TITLE

INFO_LINES = [
    "Game Info:",
    "- Navigate by torchlight.",
    "- Red traps flip walls.",
    "- Enemies patrol in circles, avoid them!",
    "- Speed Potion doubles speed for 5s.",
    "- Illumination Potion reveals full maze for 10s.",
    "- Every 90s maze & entities regenerate.",
    "- P pauses the game.",
]

CREDITS_LINES = [
    "Maze of Shadows",
    "Powered by pygame",
]


class Button:
    """Clickable labelled rectangle, positioned by its center"""
    def __init__(self, cx, cy, label, callback, w=160, h=40):
        self.x = cx - w // 2
        self.y = cy - h // 2
        self.w = w
        self.h = h
        self.label = label
        self.callback = callback

    def hit(self, mx, my):
        return rect_contains(self.x, self.y, self.w, self.h, mx, my)


class UIManager:
    """
    Manages all UI rendering
    Buttons are rebuilt every frame for the current screen
    """
    def __init__(self):
        self.buttons = []

        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("couriernew", 16)
        self.font_medium = pygame.font.SysFont("couriernew", 20)
        self.font_large = pygame.font.SysFont("couriernew", 32, bold=True)
        self.font_title = pygame.font.SysFont("couriernew", 44, bold=True)

    # ========== BUTTONS ==========

    def add_button(self, screen, cx, cy, label, callback):
        """Register and draw a button"""
        button = Button(cx, cy, label, callback)
        self.buttons.append(button)

        rect = pygame.Rect(button.x, button.y, button.w, button.h)
        pygame.draw.rect(screen, COLOR_BUTTON, rect, border_radius=6)
        pygame.draw.rect(screen, COLOR_BUTTON_BORDER, rect, 1, border_radius=6)
        text = self.font_medium.render(label, True, COLOR_TEXT)
        screen.blit(text, text.get_rect(center=rect.center))
        return button

    def handle_click(self, mx, my):
        """
        Dispatch a mouse click to the button under the cursor

        Returns:
            True if a button was clicked
        """
        for button in self.buttons:
            if button.hit(mx, my):
                button.callback()
                return True
        return False

    # ========== SCREENS ==========

    def draw_menu(self, screen, session):
        """Draw the main menu"""
        self.buttons = []
        screen_w, screen_h = screen.get_size()

        title = self.font_title.render(GAME_TITLE, True, COLOR_TEXT)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 4)))

        cx, sy, gap = screen_w // 2, screen_h // 2 - 30, 50
        self.add_button(screen, cx, sy, "Start", session.start)
        self.add_button(screen, cx, sy + gap, "Info", session.show_info)
        self.add_button(screen, cx, sy + 2 * gap, "Credits", session.show_credits)

    def draw_info(self, screen, session):
        """Draw the info screen"""
        self.buttons = []
        screen_w, screen_h = screen.get_size()

        for i, line in enumerate(INFO_LINES):
            text = self.font_medium.render(line, True, COLOR_TEXT)
            screen.blit(text, (40, 40 + i * 30))

        self.add_button(screen, screen_w // 2, screen_h - 40, "Back", session.back)

    def draw_credits(self, screen, session):
        """Draw the credits screen"""
        self.buttons = []
        screen_w, screen_h = screen.get_size()

        for i, line in enumerate(CREDITS_LINES):
            text = self.font_large.render(line, True, COLOR_TEXT)
            screen.blit(text, text.get_rect(center=(screen_w // 2, 60 + i * 40)))

        self.add_button(screen, screen_w // 2, screen_h - 40, "Back", session.back)

    # ========== PLAY ==========

    def draw_maze(self, screen, grid, cell_size):
        """Draw maze walls"""
        for cell in grid:
            x0 = cell.i * cell_size
            y0 = cell.j * cell_size
            x1 = x0 + cell_size
            y1 = y0 + cell_size
            top, right, bottom, left = cell.walls

            if top:
                pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x1, y0), WALL_THICK)
            if right:
                pygame.draw.line(screen, COLOR_WALL, (x1, y0), (x1, y1), WALL_THICK)
            if bottom:
                pygame.draw.line(screen, COLOR_WALL, (x0, y1), (x1, y1), WALL_THICK)
            if left:
                pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x0, y1), WALL_THICK)

    def draw_entities(self, screen, snap, cell_size):
        """Draw exit, traps, power-ups, enemies and the player"""
        size = int(cell_size * PLAYER_SIZE_FACTOR)

        ex, ey = snap['exit']
        pygame.draw.rect(screen, COLOR_EXIT, (int(ex - size / 2), int(ey - size / 2), size, size))

        for trap in snap['traps']:
            if trap['active']:
                i, j = trap['cell']
                pygame.draw.rect(screen, COLOR_TRAP, (i * cell_size, j * cell_size, cell_size, cell_size))

        for powerup in snap['powerups']:
            if powerup['active']:
                i, j = powerup['cell']
                center = (i * cell_size + cell_size // 2, j * cell_size + cell_size // 2)
                pygame.draw.circle(screen, POWERUP_COLORS[powerup['kind']], center, size // 2)

        for x, y in snap['enemies']:
            pygame.draw.circle(screen, COLOR_ENEMY, (int(x), int(y)), size // 2)

        px, py = snap['player']
        pygame.draw.circle(screen, COLOR_PLAYER, (int(px), int(py)), size // 2)

    def draw_hud(self, screen, snap, panel_y):
        """Draw time, score and active buffs in the bottom panel"""
        screen_w, screen_h = screen.get_size()
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, screen_h - panel_y))

        line = f"Time: {format_time(snap['elapsed'])}   Score: {format_score(snap['score'])}"
        screen.blit(self.font_medium.render(line, True, COLOR_TEXT), (10, panel_y + 10))

        labels = {'speed': "SPEED", 'illum': "LIGHT", 'jump': f"JUMP x{snap['jump_charges']}"}
        buffs = [labels[name] for name in snap['buffs']]
        if buffs:
            text = self.font_small.render("  ".join(buffs), True, COLOR_TEXT_HIGHLIGHT)
            screen.blit(text, text.get_rect(topright=(screen_w - 10, panel_y + 12)))

    def draw_notice(self, screen, maze_h):
        screen_w = screen.get_width()
        text = self.font_large.render(MSG_NEW_MAZE, True, COLOR_NOTICE)
        screen.blit(text, text.get_rect(center=(screen_w // 2, maze_h // 2)))

    def _draw_overlay(self, screen):
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        screen.blit(overlay, (0, 0))

    def draw_paused(self, screen, session):
        """Draw paused overlay with a resume button"""
        self.buttons = []
        screen_w, screen_h = screen.get_size()
        self._draw_overlay(screen)

        title = self.font_title.render("Paused", True, COLOR_TEXT)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2)))
        self.add_button(screen, screen_w // 2, screen_h // 2 + 60, "Resume", session.toggle_pause)

    def draw_game_over(self, screen, session):
        """Draw win/lose overlay with restart and menu buttons"""
        self.buttons = []
        screen_w, screen_h = screen.get_size()
        self._draw_overlay(screen)

        title = self.font_title.render(session.message, True, COLOR_TEXT)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2 - 80)))

        if session.state == GameState.WIN:
            stats = f"Time: {format_time(session.elapsed)}  Score: {format_score(session.score)}"
            text = self.font_medium.render(stats, True, COLOR_TEXT_DIM)
            screen.blit(text, text.get_rect(center=(screen_w // 2, screen_h // 2 - 35)))

        self.add_button(screen, screen_w // 2, screen_h // 2 + 20, "Restart", session.restart)
        self.add_button(screen, screen_w // 2, screen_h // 2 + 80, "Menu", session.return_to_menu)
