"""Tests for the per-axis movement resolver and Player.move."""

import random

from entities.player import Player
from game.movement import cell_coords, resolve_movement
from maze.generator import generate_maze
from maze.maze_core import MazeGrid, carve_passage, toggle_cell_walls
from utils.constants import DIRS

CELL = 30


def _grid(cols: int = 3, rows: int = 3) -> MazeGrid:
    return MazeGrid(cols, rows)


def _center(i: int, j: int):
    return i * CELL + CELL / 2, j * CELL + CELL / 2


class TestBlocking:
    def test_left_at_origin_is_blocked(self):
        g = _grid()
        x, y = _center(0, 0)
        res = resolve_movement(g, x, y, -2, 0, CELL)
        assert res.x == x
        assert res.blocked_x

    def test_closed_right_wall_blocks(self):
        g = _grid()
        x, y = _center(1, 1)
        res = resolve_movement(g, x, y, 2, 0, CELL)
        assert (res.x, res.y) == (x, y)

    def test_open_wall_applies_full_delta(self):
        g = _grid()
        carve_passage(g.cell_at(0, 0), g.cell_at(1, 0))
        x, y = _center(0, 0)
        res = resolve_movement(g, x, y, 4, 0, CELL)
        assert res.x == x + 4
        assert not res.blocked_x

    def test_vertical_uses_bottom_and_top(self):
        g = _grid()
        carve_passage(g.cell_at(1, 1), g.cell_at(1, 2))
        x, y = _center(1, 1)
        assert resolve_movement(g, x, y, 0, 3, CELL).y == y + 3
        assert resolve_movement(g, x, y, 0, -3, CELL).y == y

    def test_wall_sliding(self):
        g = _grid()
        carve_passage(g.cell_at(1, 1), g.cell_at(1, 2))
        x, y = _center(1, 1)
        res = resolve_movement(g, x, y, 2, 2, CELL)
        assert res.x == x
        assert res.y == y + 2
        assert res.blocked_x and not res.blocked_y

    def test_no_motion_is_noop(self):
        g = _grid()
        res = resolve_movement(g, 15, 15, 0, 0, CELL)
        assert res == (15, 15, 0, False, False)

    def test_position_outside_grid_is_blocked(self):
        g = _grid()
        res = resolve_movement(g, -5, 15, 1, 0, CELL)
        assert res.x == -5

    def test_flipped_boundary_still_blocks(self):
        g = _grid()
        toggle_cell_walls(g, 0, 0)
        assert not g.cell_at(0, 0).walls[3]
        p = Player(*_center(0, 0))
        for _ in range(20):
            p.move(g, -2, 0, CELL)
            p.move(g, 0, -2, CELL)
        assert (p.x, p.y) == _center(0, 0)

    def test_flipped_far_corner_still_blocks(self):
        g = _grid()
        toggle_cell_walls(g, 2, 2)
        x, y = _center(2, 2)
        res = resolve_movement(g, x, y, 20, 20, CELL, jump_charges=3)
        assert (res.x, res.y) == (x, y)
        assert res.blocked_x and res.blocked_y
        assert res.jumps_used == 0


class TestJumpCharges:
    def test_charge_passes_through_wall(self):
        g = _grid()
        x, y = _center(1, 1)
        res = resolve_movement(g, x, y, 2, 0, CELL, jump_charges=1)
        assert res.x == x + 2
        assert res.jumps_used == 1

    def test_open_wall_does_not_use_charge(self):
        g = _grid()
        carve_passage(g.cell_at(1, 1), g.cell_at(2, 1))
        x, y = _center(1, 1)
        res = resolve_movement(g, x, y, 2, 0, CELL, jump_charges=1)
        assert res.jumps_used == 0

    def test_single_charge_covers_one_axis(self):
        g = _grid()
        x, y = _center(1, 1)
        res = resolve_movement(g, x, y, 2, 2, CELL, jump_charges=1)
        assert res.x == x + 2
        assert res.y == y
        assert res.jumps_used == 1
        assert res.blocked_y

    def test_boundary_cannot_be_jumped(self):
        g = _grid()
        x, y = _center(0, 0)
        res = resolve_movement(g, x, y, -2, -2, CELL, jump_charges=5)
        assert (res.x, res.y) == (x, y)
        assert res.jumps_used == 0

    def test_player_move_consumes_charge(self):
        g = _grid()
        p = Player(*_center(1, 1))
        p.add_jump_charge()
        p.move(g, 2, 0, CELL)
        assert p.jump_charges == 0
        p.move(g, 2, 0, CELL)
        assert p.x == _center(1, 1)[0] + 2


class TestContainment:
    def test_generated_maze_walls_always_block(self):
        g = MazeGrid(10, 10)
        generate_maze(g, random.Random(17))
        for cell in g:
            x, y = _center(cell.i, cell.j)
            assert cell_coords(x, y, CELL) == (cell.i, cell.j)
            for dx, dy, wall, _ in DIRS:
                res = resolve_movement(g, x, y, dx * 3, dy * 3, CELL)
                if cell.walls[wall]:
                    assert (res.x, res.y) == (x, y)
                else:
                    assert (res.x, res.y) == (x + dx * 3, y + dy * 3)
