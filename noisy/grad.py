#!/usr/bin/env python3
"""
noisy: Gradient Functions (MIT License)
=======================================

Gradient-dot-residual helpers for 1D to 3D lattice noise.

Gradients are not stored as a vector table; the low bits of the hash byte
select the direction and sign directly.

    grad1: 16 gradients, magnitudes 1..8 with a random sign
    grad2: 8 directions (+-1, +-2) / (+-2, +-1)
    grad3: 12 cube-edge directions (hashes 12..15 repeat four of them)

License: MIT
"""

from .utils import if_else


def grad1(hash_value: int, x: float) -> float:
    """Compute 1D gradient-dot-residual"""
    h = hash_value & 15
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


def grad2(hash_value: int, x: float, y: float) -> float:
    """Compute 2D gradient-dot-residual"""
    h = hash_value & 7
    u = if_else(h < 4, x, y)
    v = if_else(h < 4, y, x)
    return if_else(h & 1 != 0, -u, u) + if_else(h & 2 != 0, -2.0 * v, 2.0 * v)


def grad3(hash_value: int, x: float, y: float, z: float) -> float:
    """Compute 3D gradient-dot-residual"""
    h = hash_value & 15
    u = if_else(h < 8, x, y)
    # h == 12 and h == 14 would otherwise repeat the (y, z) plane
    v = if_else(h < 4, y, if_else(h == 12 or h == 14, x, z))
    return if_else(h & 1 != 0, -u, u) + if_else(h & 2 != 0, -v, v)
