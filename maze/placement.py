"""
Entity placement - random enemies, traps, and power-ups
Placement ignores maze topology; entities may overlap each other,
the start cell, or the exit cell.
"""

import logging
import random

from entities.enemy import Enemy
from entities.trap import Trap
from entities.powerup import PowerUp

logger = logging.getLogger(__name__)


def random_cell(grid, rng=None):
    """Get random cell coordinates"""
    rng = rng or random
    return rng.randrange(grid.cols), rng.randrange(grid.rows)


def cell_center(i, j, cell_size):
    """Pixel coordinates of a cell's center"""
    return i * cell_size + cell_size / 2, j * cell_size + cell_size / 2


def place_enemies(grid, rng, config):
    """Enemies at random cell centers, each with a small circular patrol"""
    enemies = []
    low, high = config.patrol_range
    for _ in range(config.enemy_count):
        i, j = random_cell(grid, rng)
        x, y = cell_center(i, j, config.cell_size)
        radius = config.cell_size * rng.randint(low, high)
        enemies.append(Enemy(x, y, radius, config.enemy_angular_speed))
    return enemies


def place_traps(grid, rng, config):
    """Traps at random cells"""
    return [Trap(*random_cell(grid, rng)) for _ in range(config.trap_count)]


def place_powerups(grid, rng, config):
    """Exactly one power-up per configured kind"""
    powerups = []
    for kind in config.powerup_kinds:
        i, j = random_cell(grid, rng)
        powerups.append(PowerUp(i, j, kind))
    return powerups


def place_entities(grid, rng, config):
    """
    Create a fresh set of non-player entities

    Returns:
        Dictionary with 'enemies', 'traps' and 'powerups' lists
    """
    entities = {
        'enemies': place_enemies(grid, rng, config),
        'traps': place_traps(grid, rng, config),
        'powerups': place_powerups(grid, rng, config),
    }
    logger.debug(
        "Placed %d enemies, %d traps, %d power-ups",
        len(entities['enemies']), len(entities['traps']), len(entities['powerups'])
    )
    return entities
