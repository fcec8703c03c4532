#!/usr/bin/env python3
"""
noisy: Scalar Utilities (MIT License)
=====================================

Small helpers shared by the lattice generators: flooring, interpolation,
the quintic fade curve and a two-way select.

License: MIT
"""


def fast_floor(x: float) -> int:
    """
    Floor a float to an int.

    Truncates toward zero and steps down one for negative non-integers,
    so fast_floor(-0.5) == -1 and fast_floor(-2.0) == -2.
    """
    i = int(x)
    return i - 1 if x < i else i


def lerp(t: float, a: float, b: float) -> float:
    """Linear interpolation between a and b (t is not clamped)"""
    return a + t * (b - a)


def fade(t: float) -> float:
    """6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def if_else(cond: bool, if_true: float, if_false: float) -> float:
    return if_true if cond else if_false
