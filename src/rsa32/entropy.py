"""Secure randomness for key generation, primality witnesses and padding.

Wraps a single capability, "produce N secure random bytes", so callers (and tests) can swap the underlying generator
for a deterministic one. Every draw goes through `RandomSource.read`, which refuses to hand out short or failed reads.

Typical usage example:

    src = RandomSource()
    p_candidate = src.random16()
    pad_byte = src.random_nonzero_byte()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets
from typing import Callable


class EntropyFailure(RuntimeError):
    """The secure random source failed to deliver the requested bytes."""


class RandomSource:
    """Injectable source of cryptographically secure random values.

    Attributes:
        generator: Callable returning exactly `count` random bytes.
    """

    def __init__(self, generator: Callable[[int], bytes] | None = None) -> None:
        self.generator = generator if generator is not None else secrets.token_bytes

    def read(self, count: int) -> bytes:
        """Reads `count` bytes from the generator.

        Args:
            count: Number of bytes to read. Must be positive.

        Returns:
            Exactly `count` random bytes.

        Raises:
            EntropyFailure: The generator errored or returned the wrong amount of bytes.
        """
        try:
            data = self.generator(count)
        except OSError as exc:
            raise EntropyFailure(f"Entropy source failed: {exc}") from exc
        if not isinstance(data, bytes) or len(data) != count:
            raise EntropyFailure(f"Entropy source returned a short read, expected {count} bytes.")
        return data

    def random16(self) -> int:
        """Uniform integer in [0, 65535]."""
        return int.from_bytes(self.read(2), byteorder="big", signed=False)

    def random_nonzero_byte(self) -> int:
        """Uniform integer in [1, 255], discarding zero draws."""
        while True:
            r = self.read(1)[0]
            if r:
                return r

    def randbelow(self, bound: int) -> int:
        """Uniform integer in [0, `bound`) using rejection sampling.

        Args:
            bound: Exclusive upper bound. Must be >= 1.

        Returns:
            The drawn integer.

        Raises:
            ValueError: If `bound` is smaller than 1.
        """
        if bound < 1:
            raise ValueError("bound must be >= 1")
        bits = (bound - 1).bit_length()
        if bits == 0:
            return 0
        msk = (1 << bits) - 1
        nbytes = (bits + 7) // 8
        while True:
            candidate = int.from_bytes(self.read(nbytes), byteorder="big", signed=False) & msk
            if candidate < bound:
                return candidate
