#!/usr/bin/env python3
"""
noisy: Improved Perlin Noise (MIT License)
==========================================

Improved Perlin noise for 1D, 2D and 3D, after Ken Perlin's Siggraph 2002
reference with Stefan Gustavson's optimisations.

Each lattice corner is hashed through the permutation table, its gradient
is dotted with the residual vector, and the corner values are blended with
the quintic fade curve along each axis in turn.

License: MIT
"""

from .base import LatticeNoiseGen
from .grad import grad1, grad2, grad3
from .utils import fade, fast_floor, lerp

# Empirical scale factors keeping the output just inside [-1, 1]
SCALE_1D = 0.188
SCALE_2D = 0.507
SCALE_3D = 0.936


class Perlin(LatticeNoiseGen):
    """
    Improved Perlin noise generator.

    Example:
        >>> perlin = Perlin.from_seed(1337)
        >>> value = perlin.noise2d(123.0 * 0.04, 132.0 * 0.04)
    """

    __slots__ = ()

    def noise1d(self, x: float) -> float:
        p = self._perm

        ix0 = fast_floor(x)
        fx0 = x - ix0
        fx1 = fx0 - 1.0
        ix1 = ix0 + 1

        # Wrap at 256 so perm[] lookups stay in bounds
        ii = ix0 & 255
        jj = ix1 & 255

        s = fade(fx0)

        gi0 = p[ii]
        gi1 = p[jj]

        nx0 = grad1(gi0, fx0)
        nx1 = grad1(gi1, fx1)

        return SCALE_1D * lerp(s, nx0, nx1)

    def noise2d(self, x: float, y: float) -> float:
        p = self._perm

        ix0 = fast_floor(x)
        iy0 = fast_floor(y)
        fx0 = x - ix0
        fy0 = y - iy0
        fx1 = fx0 - 1.0
        fy1 = fy0 - 1.0

        ix1 = (ix0 + 1) & 255
        iy1 = (iy0 + 1) & 255
        ii = ix0 & 255
        jj = iy0 & 255

        t = fade(fy0)
        s = fade(fx0)

        gi0 = p[ii + p[jj]]
        gi1 = p[ii + p[iy1]]
        gi2 = p[ix1 + p[jj]]
        gi3 = p[ix1 + p[iy1]]

        nx0 = grad2(gi0, fx0, fy0)
        nx1 = grad2(gi1, fx0, fy1)
        nx2 = grad2(gi2, fx1, fy0)
        nx3 = grad2(gi3, fx1, fy1)

        n0 = lerp(t, nx0, nx1)
        n1 = lerp(t, nx2, nx3)

        return SCALE_2D * lerp(s, n0, n1)

    def noise3d(self, x: float, y: float, z: float) -> float:
        p = self._perm

        ix0 = fast_floor(x)
        iy0 = fast_floor(y)
        iz0 = fast_floor(z)
        fx0 = x - ix0
        fy0 = y - iy0
        fz0 = z - iz0
        fx1 = fx0 - 1.0
        fy1 = fy0 - 1.0
        fz1 = fz0 - 1.0

        ix1 = (ix0 + 1) & 255
        iy1 = (iy0 + 1) & 255
        iz1 = (iz0 + 1) & 255
        ii = ix0 & 255
        jj = iy0 & 255
        kk = iz0 & 255

        r = fade(fz0)
        t = fade(fy0)
        s = fade(fx0)

        gi0 = p[ii + p[jj + p[kk]]]
        gi1 = p[ii + p[jj + p[iz1]]]
        gi2 = p[ii + p[iy1 + p[kk]]]
        gi3 = p[ii + p[iy1 + p[iz1]]]
        gi4 = p[ix1 + p[jj + p[kk]]]
        gi5 = p[ix1 + p[jj + p[iz1]]]
        gi6 = p[ix1 + p[iy1 + p[kk]]]
        gi7 = p[ix1 + p[iy1 + p[iz1]]]

        nxy0 = grad3(gi0, fx0, fy0, fz0)
        nxy1 = grad3(gi1, fx0, fy0, fz1)
        nxy2 = grad3(gi2, fx0, fy1, fz0)
        nxy3 = grad3(gi3, fx0, fy1, fz1)
        nxy4 = grad3(gi4, fx1, fy0, fz0)
        nxy5 = grad3(gi5, fx1, fy0, fz1)
        nxy6 = grad3(gi6, fx1, fy1, fz0)
        nxy7 = grad3(gi7, fx1, fy1, fz1)

        nx0 = lerp(r, nxy0, nxy1)
        nx1 = lerp(r, nxy2, nxy3)
        nx2 = lerp(r, nxy4, nxy5)
        nx3 = lerp(r, nxy6, nxy7)

        n0 = lerp(t, nx0, nx1)
        n1 = lerp(t, nx2, nx3)

        return SCALE_3D * lerp(s, n0, n1)


# Both names refer to the same algorithm
ImprovedPerlin = Perlin
