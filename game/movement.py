"""
Movement resolver - per-axis wall collision for continuous player positions
"""

from collections import namedtuple

from utils.constants import DIR_TO_WALLS


MoveResult = namedtuple('MoveResult', ['x', 'y', 'jumps_used', 'blocked_x', 'blocked_y'])


def cell_coords(x, y, cell_size):
    """Grid cell containing a pixel position"""
    return int(x // cell_size), int(y // cell_size)


def _sign(v):
    return (v > 0) - (v < 0)


def wall_state(grid, x, y, direction, cell_size):
    """
    Look up the wall the player would cross moving in direction

    Returns:
        (wall_present, jumpable) tuple. A position outside the grid, or a
        wall on the outer boundary, is present and never jumpable.
    """
    i, j = cell_coords(x, y, cell_size)
    cell = grid.cell_at(i, j)
    if cell is None:
        return True, False

    # Outer boundary holds even when a trap has flipped its flag
    if grid.neighbor(i, j, direction) is None:
        return True, False

    wall, _ = DIR_TO_WALLS[direction]
    if not cell.walls[wall]:
        return False, True
    return True, True


def resolve_axis(grid, x, y, direction, cell_size, jump_charges):
    """
    Resolve a move along one axis

    Returns:
        (allowed, jump_used) tuple
    """
    present, jumpable = wall_state(grid, x, y, direction, cell_size)
    if not present:
        return True, False
    if jumpable and jump_charges > 0:
        return True, True
    return False, False


def resolve_movement(grid, x, y, vx, vy, cell_size, jump_charges=0):
    """
    Resolve a movement delta against the current cell's walls

    X is resolved before Y, each against the cell that holds the position at
    that moment, so a blocked axis does not stop the other (wall sliding).
    An open wall lets the full delta through; deltas are assumed smaller
    than one cell.

    Args:
        grid: MazeGrid
        x, y: Current position in pixels
        vx, vy: Desired delta in pixels for this tick
        cell_size: Cell size in pixels
        jump_charges: Charges available for passing through walls

    Returns:
        MoveResult
    """
    jumps_used = 0
    blocked_x = blocked_y = False

    if vx:
        allowed, jumped = resolve_axis(grid, x, y, (_sign(vx), 0), cell_size, jump_charges)
        if allowed:
            x += vx
            if jumped:
                jumps_used += 1
                jump_charges -= 1
        else:
            blocked_x = True

    if vy:
        allowed, jumped = resolve_axis(grid, x, y, (0, _sign(vy)), cell_size, jump_charges)
        if allowed:
            y += vy
            if jumped:
                jumps_used += 1
        else:
            blocked_y = True

    return MoveResult(x, y, jumps_used, blocked_x, blocked_y)
