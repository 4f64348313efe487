"""
Trap entities
Stepping on a trap flips every wall of its cell
"""

import logging

from maze.maze_core import toggle_cell_walls

logger = logging.getLogger(__name__)


class Trap:
    """
    Single-use wall-flipping trap
    """
    def __init__(self, i, j):
        """
        Args:
            i, j: Grid position
        """
        self.i = i
        self.j = j
        self.active = True

    def contains(self, px, py, cell_size):
        """Check if a pixel position lies strictly inside the trap cell"""
        return (self.i * cell_size < px < (self.i + 1) * cell_size and
                self.j * cell_size < py < (self.j + 1) * cell_size)

    def trigger(self, grid):
        """
        Invert all walls of the trap cell and deactivate

        Returns:
            True if the trap fired
        """
        if not self.active:
            return False

        toggle_cell_walls(grid, self.i, self.j)
        self.active = False
        logger.debug("Trap at (%d,%d) triggered", self.i, self.j)
        return True

    def __repr__(self):
        return f"Trap(pos=({self.i},{self.j}), active={self.active})"
