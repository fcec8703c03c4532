#!/usr/bin/env python3
"""
noisy Perlin Test Suite
=======================

Tests for improved Perlin noise construction and evaluation.
"""

import random

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from noisy.perlin import Perlin, ImprovedPerlin


class TestPerlinConstruction:
    """Test the Perlin constructors"""

    def test_new(self):
        perlin = Perlin()
        assert len(perlin.permutation) == 512

    def test_from_numpy_generator(self):
        Perlin.from_rng(np.random.default_rng())

    def test_from_random_state(self):
        Perlin.from_rng(np.random.RandomState(2024))

    def test_from_python_random(self):
        Perlin.from_rng(random.Random())

    def test_from_system_random(self):
        Perlin.from_rng(random.SystemRandom())

    def test_from_table(self, fixed_table):
        assert Perlin(fixed_table).permutation is fixed_table

    def test_from_raw_sequence(self, fixed_table):
        assert Perlin(list(fixed_table)) == Perlin(fixed_table)

    def test_rejects_malformed_table(self):
        with pytest.raises(ValueError):
            Perlin(list(range(256)))

    def test_improved_perlin_alias(self):
        assert ImprovedPerlin is Perlin

    def test_seeded_instances_equal(self):
        assert Perlin.from_seed(1337) == Perlin.from_seed(1337)
        assert hash(Perlin.from_seed(1337)) == hash(Perlin.from_seed(1337))

    def test_default_instances_differ(self):
        """Test independent default tables practically never collide"""
        collisions = sum(Perlin() == Perlin() for _ in range(10000))
        assert collisions == 0

    def test_immutable(self):
        perlin = Perlin.from_seed(1)
        with pytest.raises(AttributeError):
            perlin.extra = 1


class TestPerlinNoise:
    """Test Perlin evaluation"""

    def setup_method(self):
        self.perlin = Perlin.from_seed(1337)
        self.rng = np.random.default_rng(2718)

    def test_noise1d_range(self):
        for x in self.rng.uniform(-1e6, 1e6, size=10000):
            value = self.perlin.noise1d(float(x))
            assert np.isfinite(value)
            assert -1.0 <= value <= 1.0

    def test_noise2d_range(self):
        for x, y in self.rng.uniform(-1e6, 1e6, size=(10000, 2)):
            value = self.perlin.noise2d(float(x), float(y))
            assert np.isfinite(value)
            assert -1.0 <= value <= 1.0

    def test_noise3d_range(self):
        for x, y, z in self.rng.uniform(-1e6, 1e6, size=(10000, 3)):
            value = self.perlin.noise3d(float(x), float(y), float(z))
            assert np.isfinite(value)
            assert -1.0 <= value <= 1.0

    def test_zero_on_lattice(self):
        """Test noise vanishes at integer coordinates"""
        assert self.perlin.noise1d(5.0) == 0.0
        assert self.perlin.noise2d(3.0, -7.0) == 0.0
        assert self.perlin.noise3d(-2.0, 0.0, 11.0) == 0.0

    def test_wraps_every_256(self):
        """Test the lattice repeats with period 256"""
        for x, y, z in self.rng.uniform(-100.0, 100.0, size=(100, 3)):
            assert self.perlin.noise1d(x) == pytest.approx(self.perlin.noise1d(x + 256.0), abs=1e-9)
            assert self.perlin.noise2d(x, y) == pytest.approx(self.perlin.noise2d(x + 256.0, y), abs=1e-9)
            assert self.perlin.noise3d(x, y, z) == pytest.approx(
                self.perlin.noise3d(x, y, z - 256.0), abs=1e-9
            )

    def test_continuity(self):
        """Test small steps give small changes"""
        for x, y in self.rng.uniform(-50.0, 50.0, size=(200, 2)):
            a = self.perlin.noise2d(x, y)
            b = self.perlin.noise2d(x + 1e-7, y + 1e-7)
            assert abs(a - b) < 1e-5

    def test_seeded_outputs_identical(self):
        other = Perlin.from_seed(1337)
        for x, y, z in self.rng.uniform(-1e3, 1e3, size=(500, 3)):
            assert self.perlin.noise1d(x) == other.noise1d(x)
            assert self.perlin.noise2d(x, y) == other.noise2d(x, y)
            assert self.perlin.noise3d(x, y, z) == other.noise3d(x, y, z)


class TestPerlinGolden:
    """Golden values for a fixed table"""

    @pytest.fixture(autouse=True)
    def _fixed(self, fixed_table):
        self.perlin = Perlin(fixed_table)

    def test_noise1d(self):
        assert self.perlin.noise1d(0.5) == pytest.approx(-0.517, abs=1e-12)

    def test_noise2d(self):
        assert self.perlin.noise2d(0.3, 0.7) == pytest.approx(-0.28249079328288002, abs=1e-12)
        assert self.perlin.noise2d(-4.25, 17.5) == pytest.approx(-0.27974121093749998, abs=1e-12)

    def test_noise3d(self):
        assert self.perlin.noise3d(0.3, 0.7, 0.2) == pytest.approx(0.087217667204884053, abs=1e-12)
        assert self.perlin.noise3d(-1.5, 2.25, -3.75) == pytest.approx(-0.11742578887939453, abs=1e-12)
