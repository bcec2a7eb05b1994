"""Provides core RSA functionalities, encryption and decryption of single padded bytes.

Facilitates 32-bit "textbook" RSA with the truncated padding envelope from `rsa32.padding`. Handles key pairs as plain
modulus/exponent holders, exponentiation goes through the fixed-width `rsa32.arith.pow_mod`.

Typical usage example:

    kp = KeyPair.generate()
    c = kp.public.encrypt(ord("L"))
    r = kp.private.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from rsa32 import arith
from rsa32 import keygen
from rsa32 import padding
from rsa32.entropy import RandomSource


class RSAKey:
    """The overall RSA key class implementation.

    Acts mostly as a template for the "core" components of an RSA Key that are strictly mandatory in both a public
    and a private key.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
    """

    __slots__ = ("mod", "expo")

    def __init__(self, mod: int, expo: int) -> None:
        object.__setattr__(self, "mod", arith.check_word(mod, "mod"))
        object.__setattr__(self, "expo", arith.check_word(expo, "expo"))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mod={self.mod})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAKey):
            return NotImplemented
        return type(self) is type(other) and (self.mod, self.expo) == (other.mod, other.expo)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.mod, self.expo))

    def c_rsa(self, message: int) -> int:
        """Performs core RSA operation. (Encrypt/Decrypt).

        Args:
            message: The word to exponentiate.

        Returns:
            `message ** expo % mod`

        Raises:
            ValueError: If the message is out of range for the current key.
        """
        if not 0 <= message < self.mod:
            raise ValueError("Message representative must be in range [0, mod-1]")
        return arith.pow_mod(message, self.expo, self.mod)


class RSAPubKey(RSAKey):
    """Public half of a key pair, (n, e)."""

    __slots__ = ()

    def encrypt(self, payload: int, source: RandomSource | None = None) -> int:
        """Pads and encrypts a single byte.

        Args:
            payload: The byte to encrypt.
            source: Random source for the padding byte.

        Returns:
            The ciphertext word.
        """
        return self.c_rsa(padding.pad(payload, source))


class RSAPrivKey(RSAKey):
    """Private half of a key pair, (n, d)."""

    __slots__ = ()

    def decrypt(self, ciphertext: int) -> int:
        """Decrypts a ciphertext word and strips its padding.

        Raises:
            PaddingError: If the decrypted block is malformed, typically a ciphertext for another key.
        """
        return padding.unpad(self.c_rsa(ciphertext))


class KeyPair:
    """Both halves of a 32-bit RSA key, sharing one modulus.

    Attributes:
        public: The public key (n, e).
        private: The private key (n, d).
    """

    __slots__ = ("public", "private")

    def __init__(self, public: RSAPubKey, private: RSAPrivKey) -> None:
        """Initialize the key pair.

        Raises:
            ValueError: If the two halves do not share a modulus.
        """
        if public.mod != private.mod:
            raise ValueError("Public and private keys must share the same modulus")
        object.__setattr__(self, "public", public)
        object.__setattr__(self, "private", private)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("KeyPair is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("KeyPair is immutable")

    def __iter__(self) -> typing.Iterator[RSAKey]:
        return iter((self.public, self.private))

    def __repr__(self) -> str:
        return f"KeyPair(mod={self.public.mod})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return (self.public, self.private) == (other.public, other.private)

    def __hash__(self) -> int:
        return hash((self.public, self.private))

    @classmethod
    def generate(cls, source: RandomSource | None = None, rounds: int = keygen.DEFAULT_ROUNDS) -> "KeyPair":
        """Generates a fresh key pair.

        Args:
            source: Random source for key generation.
            rounds: Number of Miller-Rabin iterations per prime candidate.

        Returns:
            A new KeyPair.
        """
        (n, e), (_, d) = keygen.generate_key_pair(source, rounds)
        return cls(RSAPubKey(n, e), RSAPrivKey(n, d))


def encrypt(payload: int, public_key: RSAPubKey, source: RandomSource | None = None) -> int:
    return public_key.encrypt(payload, source)


def decrypt(ciphertext: int, private_key: RSAPrivKey) -> int:
    return private_key.decrypt(ciphertext)
