#!/usr/bin/env python3
"""
noisy: Generator Base Classes (MIT License)
===========================================

The capability every noise generator shares: map a 1D, 2D or 3D coordinate
to a scalar in [-1, 1]. Evaluation is pure; a generator never changes
after construction, so instances can be shared between threads freely.

License: MIT
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

import numpy as np

from .permutation import PermutationTable


# ============================================================================
# Generator Interface
# ============================================================================

class NoiseGen(ABC):
    """
    Base class for procedural noise generators.

    Subclasses implement noise1d/noise2d/noise3d. The sampling helpers
    evaluate those point by point over a regular grid.
    """

    __slots__ = ()

    @abstractmethod
    def noise1d(self, x: float) -> float:
        """For a given x coordinate, return a value in [-1, 1]"""

    @abstractmethod
    def noise2d(self, x: float, y: float) -> float:
        """For a given (x, y) coordinate, return a value in [-1, 1]"""

    @abstractmethod
    def noise3d(self, x: float, y: float, z: float) -> float:
        """For a given (x, y, z) coordinate, return a value in [-1, 1]"""

    def noise(self, *coords: float) -> float:
        """Evaluate with 1, 2 or 3 coordinates"""
        if len(coords) == 1:
            return self.noise1d(*coords)
        if len(coords) == 2:
            return self.noise2d(*coords)
        if len(coords) == 3:
            return self.noise3d(*coords)
        raise ValueError(f"Expected 1 to 3 coordinates, got {len(coords)}")

    def sample_line(self, width: int, origin: float = 0.0, step: float = 1.0) -> np.ndarray:
        """
        Sample noise1d at `width` evenly spaced points.

        Returns:
            1D float64 array of shape (width,)
        """
        result = np.zeros(width, dtype=np.float64)
        for i in range(width):
            result[i] = self.noise1d(origin + i * step)
        return result

    def sample_grid(
        self,
        width: int,
        height: int,
        origin: Tuple[float, float] = (0.0, 0.0),
        step: float = 1.0
    ) -> np.ndarray:
        """
        Sample noise2d over a width x height grid.

        Args:
            width: Number of columns (x direction)
            height: Number of rows (y direction)
            origin: (x, y) coordinate of the first sample
            step: Coordinate distance between neighbouring samples

        Returns:
            2D float64 array of shape (height, width)
        """
        x0, y0 = origin
        result = np.zeros((height, width), dtype=np.float64)
        for row in range(height):
            y = y0 + row * step
            for col in range(width):
                result[row, col] = self.noise2d(x0 + col * step, y)
        return result


# ============================================================================
# Lattice Generators
# ============================================================================

class LatticeNoiseGen(NoiseGen):
    """
    Base class for generators hashing lattice corners through a
    PermutationTable.

    Construct with default entropy (no arguments), an explicit table,
    any byte-producing random source (from_rng) or an integer seed
    (from_seed).
    """

    __slots__ = ('_permutation', '_perm')

    def __init__(self, permutation: Optional[PermutationTable] = None):
        if permutation is None:
            permutation = PermutationTable.random()
        elif not isinstance(permutation, PermutationTable):
            permutation = PermutationTable(permutation)
        self._permutation = permutation
        self._perm = permutation.values

    @classmethod
    def from_rng(cls, rng: Any) -> 'LatticeNoiseGen':
        """Initialize from a random source; draws exactly 256 bytes"""
        return cls(PermutationTable.from_rng(rng))

    @classmethod
    def from_seed(cls, seed: int) -> 'LatticeNoiseGen':
        """Initialize reproducibly from an integer seed"""
        return cls(PermutationTable.from_seed(seed))

    @property
    def permutation(self) -> PermutationTable:
        return self._permutation

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._permutation == other._permutation

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._permutation))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._permutation!r})"
