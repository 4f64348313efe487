"""Tests for random entity placement."""

import random

from config import GameConfig
from maze.maze_core import MazeGrid
from maze.placement import cell_center, place_entities


def _place(seed: int = 0, **overrides):
    cfg = GameConfig(**overrides)
    grid = MazeGrid(cfg.cols, cfg.rows)
    return cfg, place_entities(grid, random.Random(seed), cfg)


class TestPlacement:
    def test_default_counts(self):
        _, ents = _place()
        assert len(ents['enemies']) == 4
        assert len(ents['traps']) == 5
        assert [p.kind for p in ents['powerups']] == ['speed', 'illum']

    def test_one_powerup_per_kind(self):
        _, ents = _place(powerup_kinds=('speed', 'illum', 'jump'))
        assert sorted(p.kind for p in ents['powerups']) == ['illum', 'jump', 'speed']

    def test_enemies_anchor_on_cell_centers(self):
        cfg, ents = _place(seed=3, enemy_count=30)
        for e in ents['enemies']:
            assert (e.start_x - cfg.cell_size / 2) % cfg.cell_size == 0
            assert (e.start_y - cfg.cell_size / 2) % cfg.cell_size == 0
            assert e.radius in (30, 60, 90)
            assert e.angle == 0.0

    def test_everything_in_bounds(self):
        cfg, ents = _place(seed=9, trap_count=50)
        for t in ents['traps'] + ents['powerups']:
            assert 0 <= t.i < cfg.cols
            assert 0 <= t.j < cfg.rows
            assert t.active

    def test_seeded_placement_is_reproducible(self):
        _, a = _place(seed=21)
        _, b = _place(seed=21)
        assert [(t.i, t.j) for t in a['traps']] == [(t.i, t.j) for t in b['traps']]
        assert [e.position for e in a['enemies']] == [e.position for e in b['enemies']]

    def test_cell_center(self):
        assert cell_center(0, 0, 30) == (15, 15)
        assert cell_center(19, 19, 30) == (585, 585)
