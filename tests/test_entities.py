"""Tests for player buffs, enemy patrols, traps and power-ups."""

import math

import pytest

from config import GameConfig
from entities.enemy import Enemy
from entities.player import Player
from entities.powerup import PowerUp
from entities.trap import Trap
from maze.maze_core import MazeGrid, carve_passage


class TestPlayerBuffs:
    def test_speed_boost_window(self):
        p = Player(15, 15)
        t = 12.0
        p.add_speed_boost(2.0, 5.0, t)
        assert p.speed_multiplier(t + 4.999) == 2.0
        assert p.speed_multiplier(t + 5.001) == 1.0
        assert p.current_speed(t + 1) == p.speed * 2

    def test_boost_expires_exactly_at_deadline(self):
        p = Player(15, 15)
        p.add_speed_boost(2.0, 5.0, 0.0)
        assert not p.is_speed_boosted(5.0)

    def test_illumination_window(self):
        p = Player(15, 15)
        p.add_illumination(10.0, 3.0)
        assert p.is_illuminated(12.9)
        assert not p.is_illuminated(13.0)

    def test_active_buffs(self):
        p = Player(15, 15)
        assert p.get_active_buffs(0.0) == []
        p.add_speed_boost(2.0, 5.0, 0.0)
        p.add_jump_charge()
        assert p.get_active_buffs(1.0) == ['speed', 'jump']


class TestEnemy:
    def test_position_is_function_of_angle(self):
        e = Enemy(100, 100, 30, angular_speed=1.0)
        assert e.position == pytest.approx((130, 100))
        e.update(math.pi / 2)
        assert e.position == pytest.approx((100, 130))

    def test_stays_on_patrol_circle(self):
        e = Enemy(45, 75, 60, angular_speed=1.2)
        for _ in range(50):
            e.update(0.37)
            assert math.hypot(e.x - 45, e.y - 75) == pytest.approx(60)

    def test_collision_reach(self):
        e = Enemy(100, 100, 0)
        assert e.collides_with(110, 100, 18)
        assert not e.collides_with(120, 100, 18)


class TestTrap:
    def test_contains_is_strict(self):
        t = Trap(1, 2)
        assert t.contains(45, 75, 30)
        assert not t.contains(30, 75, 30)
        assert not t.contains(45, 90, 30)

    def test_trigger_flips_walls_once(self):
        g = MazeGrid(3, 3)
        carve_passage(g.cell_at(1, 1), g.cell_at(1, 0))
        t = Trap(1, 1)
        assert t.trigger(g)
        assert g.cell_at(1, 1).walls == [True, False, False, False]
        assert not t.active
        assert not t.trigger(g)
        assert g.cell_at(1, 1).walls == [True, False, False, False]


class TestPowerUp:
    def test_speed_potion(self):
        cfg = GameConfig()
        p = Player(15, 15)
        pu = PowerUp(0, 0, 'speed')
        assert pu.apply(p, 7.0, cfg)
        assert not pu.active
        assert p.speed_multiplier(7.0 + 4.999) == 2.0
        assert p.speed_multiplier(7.0 + 5.001) == 1.0

    def test_illumination_potion(self):
        p = Player(15, 15)
        PowerUp(0, 0, 'illum').apply(p, 1.0, GameConfig())
        assert p.is_illuminated(10.9)
        assert not p.is_illuminated(11.0)

    def test_jump_charge(self):
        p = Player(15, 15)
        PowerUp(0, 0, 'jump').apply(p, 0.0, GameConfig())
        assert p.jump_charges == 1

    def test_inactive_does_nothing(self):
        p = Player(15, 15)
        pu = PowerUp(0, 0, 'jump')
        pu.apply(p, 0.0, GameConfig())
        assert not pu.apply(p, 0.0, GameConfig())
        assert p.jump_charges == 1

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            PowerUp(0, 0, 'xray')
