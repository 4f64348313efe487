"""
Global constants for Maze of Shadows
"""

# Screen settings
CELL_SIZE = 30
COLS = 20
ROWS = 20
FPS = 60
WALL_THICK = 2

# HUD panel height (below the maze)
PANEL_H = 40

# Wall indices into Cell.walls
TOP = 0
RIGHT = 1
BOTTOM = 2
LEFT = 3

# Direction vectors with wall indices (this cell, neighbor)
DIRS = [
    (0, -1, TOP, BOTTOM),    # up
    (1, 0, RIGHT, LEFT),     # right
    (0, 1, BOTTOM, TOP),     # down
    (-1, 0, LEFT, RIGHT),    # left
]

# Direction to wall mapping
DIR_TO_WALLS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Player settings (speeds in pixels per second)
PLAYER_BASE_SPEED = 120.0
PLAYER_SIZE_FACTOR = 0.6

# Enemy settings
ENEMY_COUNT = 4
ENEMY_ANGULAR_SPEED = 1.2  # radians per second
ENEMY_PATROL_RANGE = (1, 3)  # patrol radius in cells, inclusive
ENEMY_REACH_FACTOR = 0.6  # catch distance as a fraction of CELL_SIZE

# Traps
TRAP_COUNT = 5

# Power-ups
POWERUP_KINDS = ('speed', 'illum')
SUPPORTED_POWERUP_KINDS = ('speed', 'illum', 'jump')
POWERUP_REACH_FACTOR = 0.3
SPEED_BOOST_MULTIPLIER = 2.0
SPEED_BOOST_DURATION = 5.0
ILLUM_DURATION = 10.0

# Exit
EXIT_REACH_FACTOR = 0.3

# Timing (seconds)
REGEN_INTERVAL = 90.0
NOTICE_DURATION = 2.0
MAX_TICK = 0.1

# Score
MAX_SCORE = 100000
SCORE_DECREMENT = 1000
SCORE_INTERVAL = 2.0

# Torchlight
LIGHT_RADIUS = 75
TORCH_DARKNESS = 235  # alpha outside the torch radius

# Messages
MSG_CAUGHT = "Caught by Enemy!"
MSG_ESCAPED = "You Escaped!"
MSG_NEW_MAZE = "New Maze Generated!"
