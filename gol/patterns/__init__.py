"""Seed patterns and world seeding."""

from .library import (
    BLINKER, BLOCK, GLIDER, GOSPER_GLIDER_GUN, PATTERNS,
    get_pattern, pattern_size, seed, default_world
)

__all__ = [
    'BLINKER',
    'BLOCK',
    'GLIDER',
    'GOSPER_GLIDER_GUN',
    'PATTERNS',
    'get_pattern',
    'pattern_size',
    'seed',
    'default_world',
]
