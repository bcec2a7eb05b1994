"""Truncated PKCS#1 v1.5 style envelope for a single byte.

A padded block is one 32-bit word made of four byte fields, most significant first:

    0x02 | nonzero random byte | 0x00 | payload

There is no hashing and no minimum padding length, the block exists only to catch gross corruption or a key mismatch
after decryption.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from rsa32 import arith
from rsa32.entropy import RandomSource

BLOCK_TYPE: int = 0x02
SEPARATOR: int = 0x00


class PaddingError(ValueError):
    """The decrypted block is not a well-formed envelope."""


class PaddedBlock(typing.NamedTuple):
    tag: int
    padding: int
    separator: int
    payload: int

    def to_int(self) -> int:
        """Packs the fields into a word, tag in the top byte.

        Raises:
            ValueError: If any field does not fit in one byte.
        """
        for name, value in zip(self._fields, self):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be a single byte")
        return (self.tag << 24) | (self.padding << 16) | (self.separator << 8) | self.payload

    @classmethod
    def from_int(cls, block: int) -> "PaddedBlock":
        """Splits a word into its four byte fields."""
        arith.check_word(block, "block")
        return cls((block >> 24) & 0xFF, (block >> 16) & 0xFF, (block >> 8) & 0xFF, block & 0xFF)


def pad(payload: int, source: RandomSource | None = None) -> int:
    """Wraps a payload byte into a padded block.

    Args:
        payload: The byte to wrap, in [0, 255].
        source: Random source for the padding byte. Defaults to a fresh secure source.

    Returns:
        The padded block as a word.

    Raises:
        ValueError: If `payload` is not a byte.
    """
    if not 0 <= payload <= 0xFF:
        raise ValueError("payload must be a single byte")
    source = source if source is not None else RandomSource()
    return PaddedBlock(BLOCK_TYPE, source.random_nonzero_byte(), SEPARATOR, payload).to_int()


def unpad(block: int) -> int:
    """Validates a padded block and extracts its payload byte.

    Args:
        block: The padded block as a word.

    Returns:
        The payload byte.

    Raises:
        PaddingError: If the block type, random byte or separator is malformed.
    """
    fields = PaddedBlock.from_int(block)
    if fields.tag != BLOCK_TYPE:
        raise PaddingError(f"Unexpected block type 0x{fields.tag:02x}.")
    if fields.padding == 0x00:
        raise PaddingError("Random padding byte is zero.")
    if fields.separator != SEPARATOR:
        raise PaddingError(f"Unexpected separator 0x{fields.separator:02x}.")
    return fields.payload
