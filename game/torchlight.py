"""
Torchlight - darkness mask around the player and a flickering torch flame
"""

import random

import pygame

from utils.colors import COLOR_FOG, COLOR_TORCH_HANDLE
from utils.constants import LIGHT_RADIUS, TORCH_DARKNESS
from utils.helpers import lerp


class TorchLight:
    """
    Darkness overlay with a soft circular hole at the player
    """
    def __init__(self, radius=LIGHT_RADIUS, darkness=TORCH_DARKNESS, rings=24):
        """
        Args:
            radius: Light radius in pixels
            darkness: Alpha of the unlit area (0-255)
            rings: Number of gradient rings between 70% and 100% of radius
        """
        self.radius = radius
        self.darkness = darkness
        self.rings = rings
        self.mask = None

    def _build_mask(self, size):
        self.mask = pygame.Surface(size, pygame.SRCALPHA)

    def render(self, screen, px, py):
        """
        Render darkness everywhere except around (px, py)

        Args:
            screen: Pygame screen
            px, py: Light center in pixels
        """
        size = screen.get_size()
        if self.mask is None or self.mask.get_size() != size:
            self._build_mask(size)

        self.mask.fill((*COLOR_FOG[:3], self.darkness))
        center = (int(px), int(py))

        # Fully lit up to 70% of the radius, then fade out to full darkness
        inner = self.radius * 0.7
        for k in range(self.rings, -1, -1):
            t = k / self.rings
            radius = int(inner + (self.radius - inner) * t)
            alpha = int(self.darkness * t)
            pygame.draw.circle(self.mask, (*COLOR_FOG[:3], alpha), center, radius)

        screen.blit(self.mask, (0, 0))


def draw_flame(screen, px, py, cell_size, rng=None):
    """
    Draw a handle and three flickering flame layers above the player

    Args:
        screen: Pygame screen
        px, py: Player center in pixels
        cell_size: Cell size in pixels (scales the torch)
        rng: Random source for the flicker
    """
    rng = rng or random

    # Handle, angled down to the right
    start = (int(px), int(py + cell_size * 0.2))
    end = (int(px + cell_size * 0.5), int(py + cell_size * 0.7))
    pygame.draw.line(screen, COLOR_TORCH_HANDLE, start, end, 4)

    # Flame layers, yellow to red
    for i in range(3):
        offset_x = rng.uniform(-4, 4)
        offset_y = rng.uniform(-20, -8)
        size = rng.uniform(cell_size * 0.3, cell_size * 0.5)
        alpha = int(rng.uniform(150, 255))
        g = int(lerp(200, 50, i / 2))

        w, h = int(size), int(size * 1.2)
        layer = pygame.Surface((max(w, 1), max(h, 1)), pygame.SRCALPHA)
        pygame.draw.ellipse(layer, (255, g, 0, alpha), layer.get_rect())
        screen.blit(layer, (int(px + offset_x - w / 2), int(py + offset_y - h / 2)))
