#!/usr/bin/env python3
"""
noisy: Simplex Noise (MIT License)
==================================

Simplex noise for 1D, 2D and 3D, after Stefan Gustavson's speed-improved
reference (with Peter Eastman's optimisations and the 2012 rank ordering).

The input is skewed onto a simplex lattice, the containing simplex is
found, and each corner contributes t^4 * grad where t is a radial falloff
that reaches zero before the neighbouring cells.

License: MIT
"""

from .base import LatticeNoiseGen
from .grad import grad1, grad2, grad3
from .utils import fast_floor

# Skew / unskew factors: F2 = (sqrt(3) - 1) / 2, G2 = (3 - sqrt(3)) / 6
F2 = 0.366025403784
G2 = 0.211324865405
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0

# Max of the 1D sum is 8 * (3/4)^4 = 2.53125; 0.395 scales it into [-1, 1]
SCALE_1D = 0.395
SCALE_2D = 40.0
SCALE_3D = 32.0


class Simplex(LatticeNoiseGen):
    """
    Simplex noise generator.

    Example:
        >>> simplex = Simplex.from_seed(1337)
        >>> value = simplex.noise3d(123.0 * 0.02, 231.0 * 0.02, 321.0 * 0.02)
    """

    __slots__ = ()

    def noise1d(self, x: float) -> float:
        p = self._perm

        i0 = fast_floor(x)
        i1 = i0 + 1
        x0 = x - i0
        x1 = x0 - 1.0

        gi0 = p[i0 & 255]
        gi1 = p[i1 & 255]

        # |x0|, |x1| <= 1 so neither falloff goes negative
        t0 = 1.0 - x0 * x0
        t0 *= t0
        n0 = t0 * t0 * grad1(gi0, x0)

        t1 = 1.0 - x1 * x1
        t1 *= t1
        n1 = t1 * t1 * grad1(gi1, x1)

        return SCALE_1D * (n0 + n1)

    def noise2d(self, x: float, y: float) -> float:
        p = self._perm

        # Skew the input space to find the containing cell
        s = (x + y) * F2
        i = fast_floor(x + s)
        j = fast_floor(y + s)
        t = (i + j) * G2

        # Distances from the unskewed cell origin
        x0 = x - (i - t)
        y0 = y - (j - t)

        # Lower triangle (0,0)->(1,0)->(1,1) or upper (0,0)->(0,1)->(1,1)
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        ii = i & 255
        jj = j & 255
        gi0 = p[ii + p[jj]]
        gi1 = p[ii + i1 + p[jj + j1]]
        gi2 = p[ii + 1 + p[jj + 1]]

        t0 = 0.5 - x0 * x0 - y0 * y0
        if t0 < 0.0:
            n0 = 0.0
        else:
            t0 *= t0
            n0 = t0 * t0 * grad2(gi0, x0, y0)

        t1 = 0.5 - x1 * x1 - y1 * y1
        if t1 < 0.0:
            n1 = 0.0
        else:
            t1 *= t1
            n1 = t1 * t1 * grad2(gi1, x1, y1)

        t2 = 0.5 - x2 * x2 - y2 * y2
        if t2 < 0.0:
            n2 = 0.0
        else:
            t2 *= t2
            n2 = t2 * t2 * grad2(gi2, x2, y2)

        return SCALE_2D * (n0 + n1 + n2)

    def noise3d(self, x: float, y: float, z: float) -> float:
        p = self._perm

        s = (x + y + z) * F3
        i = fast_floor(x + s)
        j = fast_floor(y + s)
        k = fast_floor(z + s)
        t = (i + j + k) * G3

        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)

        # Rank x0, y0, z0 to pick the tetrahedron; (i1, j1, k1) and
        # (i2, j2, k2) are the second and third corners in lattice steps
        if x0 >= y0:
            if y0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0  # X Y Z
            elif x0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1  # X Z Y
            else:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1  # Z X Y
        else:
            if y0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1  # Z Y X
            elif x0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1  # Y Z X
            else:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0  # Y X Z

        x1 = x0 - i1 + G3
        y1 = y0 - j1 + G3
        z1 = z0 - k1 + G3
        x2 = x0 - i2 + 2.0 * G3
        y2 = y0 - j2 + 2.0 * G3
        z2 = z0 - k2 + 2.0 * G3
        x3 = x0 - 1.0 + 3.0 * G3
        y3 = y0 - 1.0 + 3.0 * G3
        z3 = z0 - 1.0 + 3.0 * G3

        ii = i & 255
        jj = j & 255
        kk = k & 255
        gi0 = p[ii + p[jj + p[kk]]]
        gi1 = p[ii + i1 + p[jj + j1 + p[kk + k1]]]
        gi2 = p[ii + i2 + p[jj + j2 + p[kk + k2]]]
        gi3 = p[ii + 1 + p[jj + 1 + p[kk + 1]]]

        t0 = 0.6 - x0 * x0 - y0 * y0 - z0 * z0
        if t0 < 0.0:
            n0 = 0.0
        else:
            t0 *= t0
            n0 = t0 * t0 * grad3(gi0, x0, y0, z0)

        t1 = 0.6 - x1 * x1 - y1 * y1 - z1 * z1
        if t1 < 0.0:
            n1 = 0.0
        else:
            t1 *= t1
            n1 = t1 * t1 * grad3(gi1, x1, y1, z1)

        t2 = 0.6 - x2 * x2 - y2 * y2 - z2 * z2
        if t2 < 0.0:
            n2 = 0.0
        else:
            t2 *= t2
            n2 = t2 * t2 * grad3(gi2, x2, y2, z2)

        t3 = 0.6 - x3 * x3 - y3 * y3 - z3 * z3
        if t3 < 0.0:
            n3 = 0.0
        else:
            t3 *= t3
            n3 = t3 * t3 * grad3(gi3, x3, y3, z3)

        return SCALE_3D * (n0 + n1 + n2 + n3)
