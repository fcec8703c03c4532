"""
noisy: Procedural Noise Generation
==================================

Deterministic scalar noise fields for textures, terrain and effects.

Generators map 1D, 2D or 3D coordinates to a value in [-1, 1]:
- Checkerboard: parity check pattern
- Perlin (ImprovedPerlin): improved Perlin lattice noise
- Simplex: simplex lattice noise

Example:
    >>> from noisy import Simplex
    >>> simplex = Simplex()                 # fresh OS-entropy table
    >>> value = simplex.noise3d(1.0, 2.0, 3.0)
    >>> seeded = Simplex.from_seed(1337)    # reproducible table

License: MIT
"""

from .utils import fast_floor, lerp, fade, if_else
from .grad import grad1, grad2, grad3
from .permutation import PermutationTable, draw_bytes, BASE_SIZE, TABLE_SIZE
from .base import NoiseGen, LatticeNoiseGen
from .checkerboard import Checkerboard
from .perlin import Perlin, ImprovedPerlin
from .simplex import Simplex
from .generators import (
    GeneratorType,
    GeneratorParameters,
    GeneratorFactory,
    get_generator,
)

__all__ = [
    # Utilities
    'fast_floor',
    'lerp',
    'fade',
    'if_else',
    'grad1',
    'grad2',
    'grad3',

    # Permutation table
    'PermutationTable',
    'draw_bytes',
    'BASE_SIZE',
    'TABLE_SIZE',

    # Generators
    'NoiseGen',
    'LatticeNoiseGen',
    'Checkerboard',
    'Perlin',
    'ImprovedPerlin',
    'Simplex',

    # Registry
    'GeneratorType',
    'GeneratorParameters',
    'GeneratorFactory',
    'get_generator',
]

__version__ = '0.1.0'
__license__ = 'MIT'
