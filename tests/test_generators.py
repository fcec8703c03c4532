#!/usr/bin/env python3
"""
noisy Generators Test Suite
===========================

Tests for the generator registry and the shared NoiseGen helpers.
"""

import logging

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from noisy import (
    NoiseGen,
    Checkerboard,
    Perlin,
    Simplex,
    GeneratorType,
    GeneratorParameters,
    GeneratorFactory,
    get_generator,
)


class TestGeneratorFactory:
    """Test GeneratorFactory"""

    def test_get_each_type(self):
        expected = {
            GeneratorType.CHECKERBOARD: Checkerboard,
            GeneratorType.PERLIN: Perlin,
            GeneratorType.IMPROVED_PERLIN: Perlin,
            GeneratorType.SIMPLEX: Simplex,
        }
        for generator_type, cls in expected.items():
            generator = GeneratorFactory.get(GeneratorParameters(generator_type=generator_type))
            assert type(generator) is cls
            assert isinstance(generator, NoiseGen)

    def test_seeded_get_is_reproducible(self):
        params = GeneratorParameters(generator_type=GeneratorType.SIMPLEX, seed=12345)
        assert GeneratorFactory.get(params) == GeneratorFactory.get(params)
        assert GeneratorFactory.get(params) == Simplex.from_seed(12345)

    def test_checkerboard_ignores_seed(self):
        params = GeneratorParameters(generator_type=GeneratorType.CHECKERBOARD, seed=7)
        assert GeneratorFactory.get(params) == Checkerboard()

    def test_register_custom(self):
        """Test a new generator can be plugged in with the decorator"""
        saved = dict(GeneratorFactory._registry)
        try:
            @GeneratorFactory.register(GeneratorType.CHECKERBOARD)
            class Constant(NoiseGen):
                def noise1d(self, x):
                    return 0.25

                def noise2d(self, x, y):
                    return 0.25

                def noise3d(self, x, y, z):
                    return 0.25

            generator = get_generator(GeneratorType.CHECKERBOARD)
            assert isinstance(generator, Constant)
            assert generator.noise(1.0, 2.0) == 0.25
        finally:
            GeneratorFactory._registry.clear()
            GeneratorFactory._registry.update(saved)

    def test_unregistered_type(self):
        saved = dict(GeneratorFactory._registry)
        try:
            del GeneratorFactory._registry[GeneratorType.SIMPLEX]
            with pytest.raises(ValueError, match="Unknown generator type"):
                get_generator(GeneratorType.SIMPLEX)
        finally:
            GeneratorFactory._registry.clear()
            GeneratorFactory._registry.update(saved)

    def test_logs_creation(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="noisy.generators"):
            get_generator("perlin", seed=1)
        assert "Perlin" in caplog.text


class TestGetGenerator:
    """Test get_generator"""

    def test_by_string(self):
        assert isinstance(get_generator("simplex"), Simplex)
        assert isinstance(get_generator("improved_perlin"), Perlin)

    def test_seeded(self):
        assert get_generator("perlin", seed=9) == Perlin.from_seed(9)

    def test_unknown_string(self):
        with pytest.raises(ValueError):
            get_generator("worley")


class TestNoiseGenHelpers:
    """Test the helpers shared through NoiseGen"""

    def setup_method(self):
        self.simplex = Simplex.from_seed(5)

    def test_noise_dispatch(self):
        assert self.simplex.noise(0.3) == self.simplex.noise1d(0.3)
        assert self.simplex.noise(0.3, 0.6) == self.simplex.noise2d(0.3, 0.6)
        assert self.simplex.noise(0.3, 0.6, 0.9) == self.simplex.noise3d(0.3, 0.6, 0.9)

    def test_noise_bad_arity(self):
        with pytest.raises(ValueError):
            self.simplex.noise()
        with pytest.raises(ValueError):
            self.simplex.noise(1.0, 2.0, 3.0, 4.0)

    def test_sample_line(self):
        line = self.simplex.sample_line(10, origin=1.0, step=0.25)
        assert line.shape == (10,)
        assert line.dtype == np.float64
        assert line[3] == self.simplex.noise1d(1.0 + 3 * 0.25)

    def test_sample_grid_shape_and_values(self):
        grid = self.simplex.sample_grid(7, 3, origin=(-2.0, 4.0), step=0.5)
        assert grid.shape == (3, 7)
        assert grid[2, 5] == self.simplex.noise2d(-2.0 + 5 * 0.5, 4.0 + 2 * 0.5)
        assert np.all(np.abs(grid) <= 1.0)

    def test_abstract_base(self):
        with pytest.raises(TypeError):
            NoiseGen()
