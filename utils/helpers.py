"""
Helper utility functions for Maze of Shadows
"""

import math


def lerp(a, b, t):
    """Linear interpolation between a and b by factor t (0-1)"""
    return a + (b - a) * t


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def format_time(seconds):
    """Format seconds as zero-padded whole seconds, e.g. 007s"""
    return f"{int(seconds):03d}s"


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"


def rect_contains(rect_x, rect_y, rect_w, rect_h, point_x, point_y):
    """Check if a point is inside a rectangle"""
    return (rect_x <= point_x <= rect_x + rect_w and
            rect_y <= point_y <= rect_y + rect_h)
