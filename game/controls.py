"""
Keyboard input mapping
"""

import pygame


def direction_from_keys(pressed):
    """
    Convert held arrow keys into a movement direction

    Args:
        pressed: Result of pygame.key.get_pressed() or any mapping indexable
                 by pygame key constants

    Returns:
        (dx, dy) with each component -1, 0 or 1; right wins over left and
        down wins over up when both are held
    """
    dx = dy = 0
    if pressed[pygame.K_LEFT]:
        dx = -1
    if pressed[pygame.K_RIGHT]:
        dx = 1
    if pressed[pygame.K_UP]:
        dy = -1
    if pressed[pygame.K_DOWN]:
        dy = 1
    return dx, dy


def is_pause_key(key):
    return key == pygame.K_p
