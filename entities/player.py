"""
Player entity with timed buffs and jump charges
"""

from utils.constants import PLAYER_BASE_SPEED
from game.movement import resolve_movement


class Player:
    """
    Player entity

    Buffs are stored as expiry timestamps in session seconds; a buff is
    active while now < expiry.
    """
    def __init__(self, x, y, speed=PLAYER_BASE_SPEED):
        self.x = x
        self.y = y
        self.speed = speed  # pixels per second

        # Buffs
        self.speed_boost = 1.0
        self.speed_expires = 0.0
        self.illum_expires = 0.0
        self.jump_charges = 0

    def speed_multiplier(self, now):
        """Active speed multiplier at session time now"""
        if now < self.speed_expires:
            return self.speed_boost
        return 1.0

    def current_speed(self, now):
        return self.speed * self.speed_multiplier(now)

    def is_speed_boosted(self, now):
        return now < self.speed_expires

    def is_illuminated(self, now):
        return now < self.illum_expires

    def add_speed_boost(self, multiplier, duration, now):
        """Speed boost that expires duration seconds after now"""
        self.speed_boost = multiplier
        self.speed_expires = now + duration

    def add_illumination(self, duration, now):
        """Full-maze illumination that expires duration seconds after now"""
        self.illum_expires = now + duration

    def add_jump_charge(self, count=1):
        self.jump_charges += count

    def get_active_buffs(self, now):
        """Get list of active buff names"""
        buffs = []
        if self.is_speed_boosted(now):
            buffs.append('speed')
        if self.is_illuminated(now):
            buffs.append('illum')
        if self.jump_charges:
            buffs.append('jump')
        return buffs

    def move(self, grid, vx, vy, cell_size):
        """
        Move by (vx, vy) pixels, resolving collisions against maze walls
        Consumes jump charges when passing through walls

        Returns:
            MoveResult
        """
        result = resolve_movement(grid, self.x, self.y, vx, vy, cell_size, self.jump_charges)
        self.x, self.y = result.x, result.y
        self.jump_charges -= result.jumps_used
        return result

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), charges={self.jump_charges})"
