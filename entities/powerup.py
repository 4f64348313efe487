"""
Power-up entities
Players can collect power-ups for temporary boosts
"""

import logging

from utils.constants import SUPPORTED_POWERUP_KINDS

logger = logging.getLogger(__name__)


class PowerUp:
    """
    Collectible power-up
    """
    def __init__(self, i, j, kind):
        """
        Args:
            i, j: Grid position
            kind: 'speed', 'illum' or 'jump'
        """
        if kind not in SUPPORTED_POWERUP_KINDS:
            raise ValueError(f"Unknown power-up kind: {kind}")
        self.i = i
        self.j = j
        self.kind = kind
        self.active = True

    def get_name(self):
        """Get human-readable name"""
        names = {
            'speed': 'Speed Potion',
            'illum': 'Illumination Potion',
            'jump': 'Jump Charge',
        }
        return names[self.kind]

    def apply(self, player, now, config):
        """
        Apply effect to player and deactivate

        Args:
            player: Player object
            now: Session time in seconds
            config: GameConfig with boost strengths and durations

        Returns:
            True if applied
        """
        if not self.active:
            return False

        self.active = False

        if self.kind == 'speed':
            player.add_speed_boost(config.speed_boost, config.speed_duration, now)
        elif self.kind == 'illum':
            player.add_illumination(config.illum_duration, now)
        elif self.kind == 'jump':
            player.add_jump_charge()

        logger.debug("Picked up %s at (%d,%d)", self.get_name(), self.i, self.j)
        return True

    def __repr__(self):
        return f"PowerUp(pos=({self.i},{self.j}), kind={self.kind}, active={self.active})"
