"""
Game configuration
Session-level settings with defaults taken from utils.constants
"""

from utils.constants import (
    COLS, ROWS, CELL_SIZE,
    PLAYER_BASE_SPEED,
    ENEMY_COUNT, ENEMY_ANGULAR_SPEED, ENEMY_PATROL_RANGE, ENEMY_REACH_FACTOR,
    TRAP_COUNT,
    POWERUP_KINDS, POWERUP_REACH_FACTOR,
    SPEED_BOOST_MULTIPLIER, SPEED_BOOST_DURATION, ILLUM_DURATION,
    EXIT_REACH_FACTOR,
    REGEN_INTERVAL, NOTICE_DURATION, MAX_TICK,
    MAX_SCORE, SCORE_DECREMENT, SCORE_INTERVAL,
)

GAME_TITLE = "Maze of Shadows"
GAME_VERSION = "1.0.0"
LOG_LEVEL = "INFO"


class GameConfig:
    """Configuration for a single game session"""
    def __init__(self, **kwargs):
        # Maze dimensions
        self.cols = kwargs.get('cols', COLS)
        self.rows = kwargs.get('rows', ROWS)
        self.cell_size = kwargs.get('cell_size', CELL_SIZE)

        # Player
        self.player_speed = kwargs.get('player_speed', PLAYER_BASE_SPEED)

        # Enemies
        self.enemy_count = kwargs.get('enemy_count', ENEMY_COUNT)
        self.enemy_angular_speed = kwargs.get('enemy_angular_speed', ENEMY_ANGULAR_SPEED)
        self.patrol_range = kwargs.get('patrol_range', ENEMY_PATROL_RANGE)
        self.enemy_reach = kwargs.get('enemy_reach', self.cell_size * ENEMY_REACH_FACTOR)

        # Traps
        self.trap_count = kwargs.get('trap_count', TRAP_COUNT)

        # Power-ups
        self.powerup_kinds = tuple(kwargs.get('powerup_kinds', POWERUP_KINDS))
        self.pickup_reach = kwargs.get('pickup_reach', self.cell_size * POWERUP_REACH_FACTOR)
        self.speed_boost = kwargs.get('speed_boost', SPEED_BOOST_MULTIPLIER)
        self.speed_duration = kwargs.get('speed_duration', SPEED_BOOST_DURATION)
        self.illum_duration = kwargs.get('illum_duration', ILLUM_DURATION)

        # Exit
        self.exit_reach = kwargs.get('exit_reach', self.cell_size * EXIT_REACH_FACTOR)

        # Timing (seconds)
        self.regen_interval = kwargs.get('regen_interval', REGEN_INTERVAL)
        self.notice_duration = kwargs.get('notice_duration', NOTICE_DURATION)
        self.max_tick = kwargs.get('max_tick', MAX_TICK)

        # Score
        self.max_score = kwargs.get('max_score', MAX_SCORE)
        self.score_decrement = kwargs.get('score_decrement', SCORE_DECREMENT)
        self.score_interval = kwargs.get('score_interval', SCORE_INTERVAL)

    @property
    def start_cell(self):
        return (0, 0)

    @property
    def exit_cell(self):
        return (self.cols - 1, self.rows - 1)

    @property
    def width(self):
        return self.cols * self.cell_size

    @property
    def height(self):
        return self.rows * self.cell_size

    def __repr__(self):
        return f"GameConfig(size={self.cols}x{self.rows}, cell={self.cell_size})"
