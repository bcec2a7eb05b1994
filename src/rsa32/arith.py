"""Fixed-width modular arithmetic primitives.

All operands are unsigned 32-bit words. Products are reduced after every multiplication, so no intermediate value
ever needs more than 64 bits.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
WORD_BITS: int = 32
WORD_MAX: int = (1 << WORD_BITS) - 1


def check_word(value: int, name: str = "value") -> int:
    """Checks that `value` fits an unsigned 32-bit word.

    Args:
        value: The integer to check.
        name: Name used in the error message.

    Returns:
        `value`, unchanged.

    Raises:
        ValueError: If `value` is negative or wider than 32 bits.
    """
    if not 0 <= value <= WORD_MAX:
        raise ValueError(f"{name} must fit in an unsigned {WORD_BITS}-bit word")
    return value


def gcd(a: int, b: int) -> int:
    """Greatest common divisor via the iterative Euclidean algorithm. `gcd(a, 0) == a`."""
    check_word(a, "a")
    check_word(b, "b")
    while b != 0:
        a, b = b, a % b
    return a


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply modular exponentiation.

    Args:
        base: The base word.
        exponent: The exponent word.
        modulus: The modulus word. Must be >= 2.

    Returns:
        `base ** exponent % modulus`

    Raises:
        ValueError: If any operand is not a word, or `modulus` < 2.
    """
    check_word(base, "base")
    check_word(exponent, "exponent")
    check_word(modulus, "modulus")
    if modulus < 2:
        raise ValueError("modulus must be >= 2")
    result = 1
    b = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * b) % modulus
        b = (b * b) % modulus
        exponent >>= 1
    return result


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Iterative form of the textbook recursion: the base case `b == 0` yields `(a, 1, 0)` and each step back up maps
    the sub-result `(u1, v1)` to `(v1, u1 - (a // b) * v1)`. Such that a*u + b*v = g = gcd(a, b).

    Args:
        a: The first word.
        b: The second word.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    check_word(a, "a")
    check_word(b, "b")
    quotients = []
    while b != 0:
        quotients.append(a // b)
        a, b = b, a % b
    u, v = 1, 0
    for q in reversed(quotients):
        u, v = v, u - q * v
    return a, u, v


def mod_inverse(a: int, m: int) -> int:
    """Inverse of `a` modulo `m`, normalized into [0, m).

    Raises:
        ValueError: If `m` < 2 or `a` and `m` are not coprime.
    """
    if m < 2:
        raise ValueError("m must be >= 2")
    g, u, _ = extended_euclid(a, m)
    if g != 1:
        raise ValueError("No modular inverse exists")
    return u % m
