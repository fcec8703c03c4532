#!/usr/bin/env python3
"""
noisy: Checkerboard Generator (MIT License)
===========================================

Outputs a check pattern: -1.0 on cells whose integer coordinates have odd
parity, 1.0 elsewhere. No randomness and no state.

License: MIT
"""

from .base import NoiseGen
from .utils import fast_floor, if_else


class Checkerboard(NoiseGen):
    """A check pattern generator"""

    __slots__ = ()

    def noise1d(self, x: float) -> float:
        ix = fast_floor(x)
        return if_else(ix & 1 == 1, -1.0, 1.0)

    def noise2d(self, x: float, y: float) -> float:
        ix = fast_floor(x)
        iy = fast_floor(y)
        return if_else((ix & 1) ^ (iy & 1) == 1, -1.0, 1.0)

    def noise3d(self, x: float, y: float, z: float) -> float:
        ix = fast_floor(x)
        iy = fast_floor(y)
        iz = fast_floor(z)
        return if_else((ix & 1) ^ (iy & 1) ^ (iz & 1) == 1, -1.0, 1.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Checkerboard):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Checkerboard)

    def __repr__(self) -> str:
        return "Checkerboard()"
