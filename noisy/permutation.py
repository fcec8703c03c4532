#!/usr/bin/env python3
"""
noisy: Permutation Table (MIT License)
======================================

The hash table shared by the lattice generators.

A 256-entry base of uniformly random bytes is duplicated once into a
512-entry table, so lookups of the form perm[i + small_offset] with
i in [0, 255] never need a second wrap. The base is NOT a shuffle of
0..255: entries are independent draws and duplicate values are expected.

Randomness sources:
    - objects with .bytes(n)      (numpy Generator / RandomState)
    - objects with .randbytes(n)  (random.Random)
    - callables f(n) -> bytes     (os.urandom, secrets.token_bytes)

License: MIT
"""

import logging
from typing import Any, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

BASE_SIZE = 256
TABLE_SIZE = 2 * BASE_SIZE


def draw_bytes(rng: Any, count: int) -> bytes:
    """
    Draw `count` uniformly distributed bytes from a random source.

    Args:
        rng: numpy Generator/RandomState, random.Random, or a callable
             taking a byte count
        count: Number of bytes to draw

    Returns:
        Exactly `count` bytes

    Raises:
        TypeError: If the source cannot produce bytes
        ValueError: If the source returned the wrong number of bytes
    """
    if hasattr(rng, 'bytes'):
        data = rng.bytes(count)
    elif hasattr(rng, 'randbytes'):
        data = rng.randbytes(count)
    elif callable(rng):
        data = rng(count)
    else:
        raise TypeError(f"Unsupported random source: {type(rng).__name__}")

    data = bytes(data)
    if len(data) != count:
        raise ValueError(
            f"Random source returned {len(data)} bytes (expected {count})"
        )
    return data


class PermutationTable:
    """
    Immutable 512-entry byte table (a 256-entry base duplicated once).

    The table is validated on construction; a malformed table is a
    programming error and raises ValueError immediately.
    """

    __slots__ = ('_array', '_values')

    def __init__(self, table: Union[Sequence[int], np.ndarray, bytes]):
        array = np.asarray(
            list(table) if isinstance(table, (bytes, bytearray)) else table
        )
        if array.ndim != 1 or array.shape[0] != TABLE_SIZE:
            raise ValueError(
                f"Permutation table must have {TABLE_SIZE} entries, got shape {array.shape}"
            )
        if not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"Permutation table must hold integers, got {array.dtype}")
        if array.min() < 0 or array.max() > 255:
            raise ValueError("Permutation table values must be in [0, 255]")
        if not np.array_equal(array[:BASE_SIZE], array[BASE_SIZE:]):
            raise ValueError(
                "Permutation table must repeat its first 256 entries in the second half"
            )

        array = array.astype(np.uint8)
        array.setflags(write=False)
        self._array = array
        # Python ints for scalar lookups (uint8 arithmetic would wrap)
        self._values = tuple(array.tolist())

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_base(cls, base: Union[Sequence[int], np.ndarray, bytes]) -> 'PermutationTable':
        """Build the table by duplicating a 256-entry base"""
        base = np.asarray(list(base) if isinstance(base, (bytes, bytearray)) else base)
        if base.ndim != 1 or base.shape[0] != BASE_SIZE:
            raise ValueError(
                f"Base table must have {BASE_SIZE} entries, got shape {base.shape}"
            )
        return cls(np.concatenate([base, base]))

    @classmethod
    def from_rng(cls, rng: Any) -> 'PermutationTable':
        """
        Build a table from 256 bytes drawn from `rng`.

        Any error raised by the source propagates to the caller.
        """
        data = draw_bytes(rng, BASE_SIZE)
        logger.debug(f"Built permutation table from {type(rng).__name__}")
        return cls.from_base(np.frombuffer(data, dtype=np.uint8))

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> 'PermutationTable':
        """Build a reproducible table from a numpy PCG64 generator"""
        return cls.from_rng(np.random.default_rng(seed))

    @classmethod
    def random(cls) -> 'PermutationTable':
        """Build a table from a fresh generator seeded with OS entropy"""
        return cls.from_rng(np.random.default_rng())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    @property
    def base(self) -> np.ndarray:
        return self._array[:BASE_SIZE]

    def as_array(self) -> np.ndarray:
        """Read-only uint8 view of the full table"""
        return self._array

    def __len__(self) -> int:
        return TABLE_SIZE

    def __getitem__(self, index):
        return self._values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        head = ', '.join(str(v) for v in self._values[:4])
        return f"PermutationTable([{head}, ...])"
