"""
Core maze data - cells, grid lookups, and symmetric wall manipulation
"""

from collections import deque
from utils.constants import DIRS, DIR_TO_WALLS


class Cell:
    """
    A single maze cell
    walls is indexed TOP, RIGHT, BOTTOM, LEFT; True means the wall is present
    """
    __slots__ = ('i', 'j', 'walls', 'visited')

    def __init__(self, i, j):
        self.i = i
        self.j = j
        self.walls = [True, True, True, True]
        self.visited = False

    def reset(self):
        """Close all walls and clear the visited flag"""
        self.walls = [True, True, True, True]
        self.visited = False

    def __repr__(self):
        return f"Cell(({self.i},{self.j}), walls={self.walls})"


class MazeGrid:
    """
    Fixed-size grid of cells addressed by index(i, j) = i + j * cols
    Out-of-bounds lookups return None
    """
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        self.cells = [Cell(i, j) for j in range(rows) for i in range(cols)]

    def in_bounds(self, i, j):
        """Check if coordinates are within grid bounds"""
        return 0 <= i < self.cols and 0 <= j < self.rows

    def index_of(self, i, j):
        """Convert 2D coordinates to 1D index, None when out of bounds"""
        if not self.in_bounds(i, j):
            return None
        return i + j * self.cols

    def cell_at(self, i, j):
        """Get cell at coordinates, None when out of bounds"""
        index = self.index_of(i, j)
        if index is None:
            return None
        return self.cells[index]

    def neighbor(self, i, j, direction):
        """Get the neighbor of (i, j) in direction (dx, dy)"""
        dx, dy = direction
        return self.cell_at(i + dx, j + dy)

    def reset(self):
        """Close every wall and mark every cell unvisited"""
        for cell in self.cells:
            cell.reset()

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows})"


def unvisited_neighbors(grid, cell):
    """Get grid-adjacent neighbors of cell that are not yet visited"""
    res = []
    for dx, dy, _, _ in DIRS:
        n = grid.cell_at(cell.i + dx, cell.j + dy)
        if n is not None and not n.visited:
            res.append(n)
    return res


def carve_passage(a, b):
    """Remove the wall shared by two adjacent cells, on both sides"""
    walls = DIR_TO_WALLS.get((b.i - a.i, b.j - a.j))
    if walls is None:
        return False
    wall, opp = walls
    a.walls[wall] = False
    b.walls[opp] = False
    return True


def toggle_cell_walls(grid, i, j):
    """
    Invert all four walls of a cell
    Each shared wall is mirrored onto the neighbor so both sides stay consistent
    """
    cell = grid.cell_at(i, j)
    if cell is None:
        return False

    for dx, dy, wall, opp in DIRS:
        cell.walls[wall] = not cell.walls[wall]
        n = grid.cell_at(i + dx, j + dy)
        if n is not None:
            n.walls[opp] = cell.walls[wall]
    return True


def is_open_between(grid, ai, aj, bi, bj):
    """Check if passage is open between two adjacent cells"""
    walls = DIR_TO_WALLS.get((bi - ai, bj - aj))
    a = grid.cell_at(ai, aj)
    if walls is None or a is None or grid.cell_at(bi, bj) is None:
        return False
    return not a.walls[walls[0]]


def neighbors_open(grid, i, j):
    """Get list of neighbor coordinates reachable without crossing a wall"""
    res = []
    for dx, dy, _, _ in DIRS:
        if is_open_between(grid, i, j, i + dx, j + dy):
            res.append((i + dx, j + dy))
    return res


def count_passages(grid):
    """Count open wall pairs between adjacent cells"""
    total = 0
    for cell in grid:
        if cell.i + 1 < grid.cols and is_open_between(grid, cell.i, cell.j, cell.i + 1, cell.j):
            total += 1
        if cell.j + 1 < grid.rows and is_open_between(grid, cell.i, cell.j, cell.i, cell.j + 1):
            total += 1
    return total


def reachable_from(grid, start=(0, 0)):
    """BFS over open passages, returns the set of reachable coordinates"""
    q = deque([start])
    seen = {start}

    while q:
        i, j = q.popleft()
        for n in neighbors_open(grid, i, j):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen
