"""Core Key Generation Utility, focusing on the generation of random 16-bit primes.

This module is responsible for generating 32-bit RSA key pairs: two probable primes are drawn from the secure random
source and checked with Miller-Rabin, then a random public exponent coprime to the totient is chosen and inverted.

Typical usage example:

    check_prime(65521)
    p, q = generate_primes(RandomSource())
    (n, e), (n, d) = generate_key_pair()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from rsa32 import arith
from rsa32.entropy import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS: int = 5
PRIME_BITS: int = 16
# Caps are far above the expected ~6 draws per prime (odd candidates) and ~2 per exponent.
_PRIME_DRAW_CAP: int = 1000
_EXPONENT_DRAW_CAP: int = 1000


def miller_rabin(n: int, rounds: int = DEFAULT_ROUNDS, source: RandomSource | None = None) -> bool:
    """Perform Miller-Rabin primality test.

    Composites are rejected on the first failing round, primes are never rejected. A composite survives all rounds
    with probability at most 4**-rounds.

    Args:
        n: Word to be tested.
        rounds: Number of Miller-Rabin iterations to perform. Must be >= 1.
        source: Random source for the witnesses. Defaults to a fresh secure source.

    Returns:
        True if `n` is probably prime, False otherwise.

    Raises:
        ValueError: If `rounds` is smaller than 1 or `n` is not a word.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    arith.check_word(n, "n")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n & 1 == 0:
        return False
    source = source if source is not None else RandomSource()
    d = n - 1
    s = 0
    while d & 1 == 0:
        d >>= 1
        s += 1
    for _ in range(rounds):
        a = source.randbelow(n - 3) + 2
        x = arith.pow_mod(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(1, s):
            x = arith.pow_mod(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def check_prime(candidate: int, rounds: int = DEFAULT_ROUNDS) -> bool:
    """Convenience wrapper over `miller_rabin` with a secure source."""
    return miller_rabin(candidate, rounds)


def generate_prime(source: RandomSource, rounds: int = DEFAULT_ROUNDS) -> int:
    """Generate a probable 16-bit prime.

    Draws odd 16-bit candidates with both top bits set, so the product of two such primes always lies in
    [0xC000**2, 2**32) and can hold any padded block.

    Args:
        source: Random source for candidates and witnesses.
        rounds: Number of Miller-Rabin iterations per candidate.

    Returns:
        A probable prime number.

    Raises:
        RuntimeError: If generation loops way beyond a reasonable time and a bit.
    """
    msk = (1 << PRIME_BITS - 1) | (1 << PRIME_BITS - 2) | 1
    for draws in range(1, _PRIME_DRAW_CAP + 1):
        candidate = source.random16() | msk
        if miller_rabin(candidate, rounds, source):
            logger.debug("Found a probable prime after %d draws.", draws)
            return candidate
    raise RuntimeError(
        f"Run an improbable {_PRIME_DRAW_CAP} amount of loops with no prime found. Check the random source.")


def generate_primes(source: RandomSource, rounds: int = DEFAULT_ROUNDS) -> tuple[int, int]:
    """Generates a pair of distinct probable primes."""
    p = generate_prime(source, rounds)
    q = generate_prime(source, rounds)
    while p == q:  # (Un)Likely story.
        q = generate_prime(source, rounds)
    return p, q


def choose_public_exponent(phi: int, source: RandomSource) -> int:
    """Picks a public exponent uniformly from [2, phi-1] that is coprime to `phi`.

    Args:
        phi: The totient of the modulus. Must be > 2.
        source: Random source for the exponent.

    Returns:
        The public exponent.

    Raises:
        ValueError: If `phi` leaves no room for an exponent.
        RuntimeError: If no coprime exponent is found after an improbable number of draws.
    """
    if phi <= 2:
        raise ValueError("phi must be > 2")
    for _ in range(_EXPONENT_DRAW_CAP):
        e = source.randbelow(phi - 2) + 2
        if arith.gcd(e, phi) == 1:
            return e
    raise RuntimeError(
        f"Run an improbable {_EXPONENT_DRAW_CAP} amount of loops with no exponent found. Check the random source.")


def generate_key_pair(source: RandomSource | None = None,
                      rounds: int = DEFAULT_ROUNDS) -> tuple[tuple[int, int], tuple[int, int]]:
    """Generates an RSA key pair.

    Fully generates a valid 32-bit RSA Key, including generating the private exponent and public exponent.

    Args:
        source: Random source for primes and the public exponent. Defaults to a fresh secure source.
        rounds: Number of Miller-Rabin iterations per prime candidate.

    Returns:
        A tuple of (public, private) sub-tuples (modulus, exponent).

    Raises:
        EntropyFailure: If the random source fails.
    """
    source = source if source is not None else RandomSource()
    p, q = generate_primes(source, rounds)
    n = arith.check_word(p * q, "n")
    phi = (p - 1) * (q - 1)
    e = choose_public_exponent(phi, source)
    d = arith.mod_inverse(e, phi)
    del p, q
    logger.debug("Generated key pair with modulus %d.", n)
    return (n, e), (n, d)
