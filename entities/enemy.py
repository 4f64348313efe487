"""
Enemy entities
Enemies patrol a fixed circle around their anchor point
"""

import math

from utils.constants import ENEMY_ANGULAR_SPEED
from utils.helpers import distance


class Enemy:
    """
    Circular patrol enemy

    Position is derived from the phase angle alone; the patrol ignores
    maze walls.
    """
    def __init__(self, x, y, radius, angular_speed=ENEMY_ANGULAR_SPEED):
        """
        Args:
            x, y: Anchor point in pixels
            radius: Patrol radius in pixels
            angular_speed: Radians per second
        """
        self.start_x = x
        self.start_y = y
        self.radius = radius
        self.angular_speed = angular_speed
        self.angle = 0.0

    @property
    def x(self):
        return self.start_x + math.cos(self.angle) * self.radius

    @property
    def y(self):
        return self.start_y + math.sin(self.angle) * self.radius

    @property
    def position(self):
        return self.x, self.y

    def update(self, dt):
        """
        Advance along the patrol circle

        Args:
            dt: Delta time in seconds
        """
        self.angle += self.angular_speed * dt

    def collides_with(self, px, py, reach):
        """Check if a point is within reach of this enemy"""
        return distance(self.x, self.y, px, py) < reach

    def __repr__(self):
        return f"Enemy(pos=({self.x:.1f},{self.y:.1f}), radius={self.radius}, angle={self.angle:.2f})"
