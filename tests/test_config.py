"""Tests for GameConfig defaults and overrides."""

import pytest

from config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert (cfg.cols, cfg.rows, cfg.cell_size) == (20, 20, 30)
        assert cfg.regen_interval == 90.0
        assert cfg.notice_duration == 2.0
        assert cfg.max_score == 100000
        assert cfg.powerup_kinds == ('speed', 'illum')
        assert cfg.exit_cell == (19, 19)
        assert (cfg.width, cfg.height) == (600, 600)

    def test_reach_scales_with_cell_size(self):
        cfg = GameConfig(cell_size=50)
        assert cfg.enemy_reach == pytest.approx(30)
        assert cfg.pickup_reach == pytest.approx(15)
        assert cfg.exit_reach == pytest.approx(15)

    def test_overrides(self):
        cfg = GameConfig(cols=5, rows=4, enemy_count=0, powerup_kinds=['jump'])
        assert cfg.exit_cell == (4, 3)
        assert cfg.enemy_count == 0
        assert cfg.powerup_kinds == ('jump',)
