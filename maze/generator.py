"""
Maze generation - randomized depth-first recursive backtracker
"""

import logging
import random

from maze.maze_core import unvisited_neighbors, carve_passage

logger = logging.getLogger(__name__)


def gen_recursive_backtracker(grid, rng=None):
    """
    Recursive backtracker over an existing grid - animated generator

    Resets the grid first, so the same MazeGrid can be reused across
    regenerations. Yields one step dict per carve or backtrack.
    """
    rng = rng or random
    grid.reset()

    current = grid.cell_at(0, 0)
    current.visited = True
    stack = [current]

    yield {"current": (current.i, current.j), "carved": None, "done": False}

    while stack:
        # Candidates change as the walk proceeds, so recompute every step
        neighbors = unvisited_neighbors(grid, current)

        if neighbors:
            nxt = rng.choice(neighbors)
            nxt.visited = True
            stack.append(current)
            carve_passage(current, nxt)
            carved = ((current.i, current.j), (nxt.i, nxt.j))
            current = nxt
            yield {"current": (current.i, current.j), "carved": carved, "done": False}
        else:
            current = stack.pop()
            yield {"current": (current.i, current.j), "carved": None, "done": False}

    yield {"current": (0, 0), "carved": None, "done": True}


def generate_maze(grid, rng=None):
    """
    Generate instantly

    Returns:
        Number of passages carved (cols * rows - 1 for a perfect maze)
    """
    carved = 0
    for step in gen_recursive_backtracker(grid, rng):
        if step["carved"]:
            carved += 1

    logger.info("Generated %dx%d maze, %d passages carved", grid.cols, grid.rows, carved)
    return carved
