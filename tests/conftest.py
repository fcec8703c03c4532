"""Shared fixtures for the noisy test suite"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from noisy.permutation import PermutationTable


def linear_base():
    """Fixed 256-entry base: (167 * i + 13) mod 256"""
    return [(167 * i + 13) & 255 for i in range(256)]


@pytest.fixture
def fixed_table():
    """Deterministic table used by the golden-value tests"""
    return PermutationTable.from_base(linear_base())
