#!/usr/bin/env python3
"""
noisy: Generator Registry (MIT License)
=======================================

Selects and builds noise generators by type. Consumers that do not care
which concrete generator they get (fractal combinators, samplers, tools)
go through get_generator() and work against the NoiseGen interface.

License: MIT

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from .base import LatticeNoiseGen, NoiseGen
from .checkerboard import Checkerboard
from .perlin import Perlin
from .simplex import Simplex

logger = logging.getLogger(__name__)


# ============================================================================
# Enums
# ============================================================================

class GeneratorType(Enum):
    """Noise generator types"""
    CHECKERBOARD = "checkerboard"
    PERLIN = "perlin"
    IMPROVED_PERLIN = "improved_perlin"
    SIMPLEX = "simplex"


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class GeneratorParameters:
    """Parameters for building a generator"""
    generator_type: GeneratorType
    seed: Optional[int] = None  # None draws a fresh table from OS entropy


# ============================================================================
# Generator Factory
# ============================================================================

class GeneratorFactory:
    """
    Factory for creating noise generators.

    Uses a registry so new generators can be added with the register()
    decorator without touching existing code.
    """
    _registry: Dict[GeneratorType, type] = {}

    @classmethod
    def register(cls, generator_type: GeneratorType):
        """Decorator to register a generator class for a type"""
        def decorator(generator_class: type):
            cls._registry[generator_type] = generator_class
            return generator_class
        return decorator

    @classmethod
    def get(cls, params: GeneratorParameters) -> NoiseGen:
        """
        Build the generator described by `params`.

        Lattice generators are seeded from params.seed when given;
        stateless generators ignore the seed.
        """
        generator_type = params.generator_type
        if generator_type not in cls._registry:
            raise ValueError(f"Unknown generator type: {generator_type}")

        generator_class = cls._registry[generator_type]
        if issubclass(generator_class, LatticeNoiseGen) and params.seed is not None:
            generator = generator_class.from_seed(params.seed)
        else:
            generator = generator_class()

        logger.debug(
            f"Created {generator_class.__name__} for {generator_type.value} (seed={params.seed})"
        )
        return generator

    @classmethod
    def register_defaults(cls):
        """Register all default generators"""
        cls._registry[GeneratorType.CHECKERBOARD] = Checkerboard
        cls._registry[GeneratorType.PERLIN] = Perlin
        cls._registry[GeneratorType.IMPROVED_PERLIN] = Perlin
        cls._registry[GeneratorType.SIMPLEX] = Simplex


# Initialize default registrations
GeneratorFactory.register_defaults()


def get_generator(
    generator_type: Union[GeneratorType, str],
    seed: Optional[int] = None
) -> NoiseGen:
    """
    Get a generator instance by type.

    Args:
        generator_type: GeneratorType or its string value (e.g. "simplex")
        seed: Optional seed for a reproducible permutation table

    Raises:
        ValueError: If the type is unknown
    """
    if not isinstance(generator_type, GeneratorType):
        generator_type = GeneratorType(generator_type)
    return GeneratorFactory.get(GeneratorParameters(generator_type=generator_type, seed=seed))
