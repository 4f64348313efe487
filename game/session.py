"""
Game session - owns the maze, player and entities and advances them per tick
"""

import logging
import random

from config import GameConfig
from entities.player import Player
from game.collision import CollisionHandler
from game.game_state import GameState, GameStateManager
from maze.generator import generate_maze
from maze.maze_core import MazeGrid
from maze.placement import cell_center, place_entities
from utils.constants import MSG_CAUGHT, MSG_ESCAPED

logger = logging.getLogger(__name__)


def compute_score(elapsed, max_score, decrement, interval):
    """
    Score after elapsed seconds of play

    Drops by decrement for every full interval, never below zero.
    """
    steps = int(elapsed // interval)
    return max(0, max_score - steps * decrement)


class GameSession:
    """
    Single-player session controller

    Session time only advances inside tick() while playing and unpaused,
    so pausing freezes buffs, score decay and the regeneration timer.
    """
    def __init__(self, config=None, seed=None, rng=None):
        """
        Args:
            config: GameConfig, defaults used when None
            seed: Seed for a private random.Random
            rng: Explicit random source, overrides seed
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random(seed)

        self.state_manager = GameStateManager()
        self.collision_handler = CollisionHandler()

        self.grid = MazeGrid(self.config.cols, self.config.rows)
        self.player = None
        self.entities = {'enemies': [], 'traps': [], 'powerups': []}

        # Clock (session seconds)
        self.now = 0.0
        self.start_time = 0.0
        self.last_regen = 0.0
        self.notice_start = None

        self.paused = False
        self.message = ''
        self.regenerations = 0

        # A maze is ready behind the menu before the first start
        generate_maze(self.grid, self.rng)
        self.player = self._new_player()
        self._replace_entities()

    # ========== SETUP ==========

    def _new_player(self):
        x, y = cell_center(*self.config.start_cell, self.config.cell_size)
        return Player(x, y, self.config.player_speed)

    def _replace_entities(self):
        self.entities = place_entities(self.grid, self.rng, self.config)

    @property
    def exit_pos(self):
        return cell_center(*self.config.exit_cell, self.config.cell_size)

    @property
    def state(self):
        return self.state_manager.current_state

    @property
    def game_over(self):
        return self.state_manager.is_game_over()

    # ========== COMMANDS ==========

    def start(self):
        """Start a fresh run: new maze, new player, new entities"""
        if not self.state_manager.transition_to(GameState.PLAYING):
            return False

        self.start_time = self.now
        self.last_regen = self.now
        self.notice_start = None
        self.paused = False
        self.message = ''
        self.regenerations = 0

        generate_maze(self.grid, self.rng)
        self.player = self._new_player()
        self._replace_entities()
        logger.info("Session started")
        return True

    def restart(self):
        """Start again after a win or loss"""
        return self.start()

    def return_to_menu(self):
        if self.state_manager.transition_to(GameState.MENU):
            self.paused = False
            return True
        return False

    def show_info(self):
        return self.state_manager.transition_to(GameState.INFO)

    def show_credits(self):
        return self.state_manager.transition_to(GameState.CREDITS)

    def back(self):
        """Leave the info or credits screen"""
        if self.state in (GameState.INFO, GameState.CREDITS):
            return self.state_manager.transition_to(GameState.MENU)
        return False

    def toggle_pause(self):
        """
        Toggle pause while playing

        Returns:
            New paused flag, or None when pausing is not possible
        """
        if not self.state_manager.is_state(GameState.PLAYING):
            logger.debug("Pause ignored in state %s", self.state.name)
            return None
        self.paused = not self.paused
        logger.info("Paused" if self.paused else "Resumed")
        return self.paused

    # ========== SIMULATION ==========

    def regenerate(self):
        """
        Rebuild the maze and replace all non-player entities
        The player keeps its position and buffs.
        """
        generate_maze(self.grid, self.rng)
        self._replace_entities()
        self.last_regen = self.now
        self.notice_start = self.now
        self.regenerations += 1
        logger.info("Maze regenerated (%d)", self.regenerations)

    def tick(self, dt, direction=(0, 0)):
        """
        Advance the simulation by one frame

        Args:
            dt: Delta time in seconds
            direction: Held input as (dx, dy), each -1, 0 or 1

        Returns:
            Collision result dict, or None if the session did not advance
        """
        if not self.state_manager.is_state(GameState.PLAYING) or self.paused:
            return None

        dt = min(dt, self.config.max_tick)
        self.now += dt

        if self.now - self.last_regen > self.config.regen_interval:
            self.regenerate()
        elif self.notice_start is not None and not self.notice_active:
            self.notice_start = None

        for enemy in self.entities['enemies']:
            enemy.update(dt)

        dx, dy = direction
        if dx or dy:
            step = self.player.current_speed(self.now) * dt
            self.player.move(self.grid, dx * step, dy * step, self.config.cell_size)

        result = self.collision_handler.check_player_position(
            self.player, self.entities, self.grid, self.exit_pos, self.now, self.config
        )

        if result['caught']:
            self._finish(GameState.LOSE, MSG_CAUGHT)
        elif result['escaped']:
            self._finish(GameState.WIN, MSG_ESCAPED)

        return result

    def _finish(self, state, message):
        self.message = message
        self.state_manager.transition_to(state)
        logger.info("%s time=%.1fs score=%d", message, self.elapsed, self.score)

    # ========== QUERIES ==========

    @property
    def elapsed(self):
        """Play time of the current run in seconds"""
        return self.now - self.start_time

    @property
    def score(self):
        return compute_score(
            self.elapsed, self.config.max_score,
            self.config.score_decrement, self.config.score_interval
        )

    @property
    def notice_active(self):
        """True while the 'new maze' notice should be shown"""
        if self.notice_start is None:
            return False
        return self.now - self.notice_start < self.config.notice_duration

    def snapshot(self):
        """
        Per-frame view of the session for the presentation layer

        Returns:
            Dictionary of plain values plus the live MazeGrid
        """
        now = self.now
        return {
            'state': self.state,
            'paused': self.paused,
            'game_over': self.game_over,
            'message': self.message,
            'grid': self.grid,
            'player': (self.player.x, self.player.y),
            'speed_active': self.player.is_speed_boosted(now),
            'illum_active': self.player.is_illuminated(now),
            'jump_charges': self.player.jump_charges,
            'buffs': self.player.get_active_buffs(now),
            'enemies': [e.position for e in self.entities['enemies']],
            'traps': [{'cell': (t.i, t.j), 'active': t.active} for t in self.entities['traps']],
            'powerups': [
                {'cell': (p.i, p.j), 'kind': p.kind, 'active': p.active}
                for p in self.entities['powerups']
            ],
            'exit': self.exit_pos,
            'elapsed': self.elapsed,
            'score': self.score,
            'notice': self.notice_active,
        }

    def __repr__(self):
        return f"GameSession(state={self.state.name}, elapsed={self.elapsed:.1f}, score={self.score})"
