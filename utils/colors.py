"""
Color palette for Maze of Shadows
"""

# Background colors
COLOR_BG = (0, 0, 0)              # Main background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# UI colors
COLOR_WALL = (255, 255, 255)      # Maze walls
COLOR_TEXT = (255, 255, 255)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text
COLOR_NOTICE = (255, 255, 0)      # "New maze" notice

# Entity colors
COLOR_PLAYER = (255, 0, 0)        # Player
COLOR_ENEMY = (0, 0, 255)         # Patrolling enemy
COLOR_TRAP = (200, 50, 50)        # Wall-flip trap
COLOR_EXIT = (0, 255, 0)          # Exit

# Power-up colors
POWERUP_COLORS = {
    'speed': (0, 255, 255),
    'jump': (255, 0, 255),
    'illum': (255, 255, 0),
}

# Torch
COLOR_FOG = (0, 0, 0)             # Darkness outside the torchlight
COLOR_TORCH_HANDLE = (100, 100, 100)

# Buttons and overlays
COLOR_BUTTON = (50, 50, 50)
COLOR_BUTTON_BORDER = (255, 255, 255)
COLOR_OVERLAY = (0, 0, 0, 150)    # Pause / game over overlay
