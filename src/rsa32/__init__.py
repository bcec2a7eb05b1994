"""32-bit RSA in an Academic Sense.

Provides a deliberately small, insecure RSA for teaching purposes: Miller-Rabin prime generation over 16-bit
candidates, key pair derivation via the Extended Euclidean Algorithm, fixed-width modular exponentiation and a
truncated PKCS#1 v1.5 style envelope around single bytes.

Typical usage example:

    kp = KeyPair.generate()
    c = kp.public.encrypt(ord("L"))
    r = kp.private.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsa32.arith import extended_euclid
from rsa32.arith import gcd
from rsa32.arith import mod_inverse
from rsa32.arith import pow_mod
from rsa32.entropy import EntropyFailure
from rsa32.entropy import RandomSource
from rsa32.keygen import check_prime
from rsa32.keygen import generate_key_pair
from rsa32.keygen import generate_primes
from rsa32.keygen import miller_rabin
from rsa32.padding import pad
from rsa32.padding import PaddedBlock
from rsa32.padding import PaddingError
from rsa32.padding import unpad
from rsa32.rsa import decrypt
from rsa32.rsa import encrypt
from rsa32.rsa import KeyPair
from rsa32.rsa import RSAPrivKey
from rsa32.rsa import RSAPubKey

__version__ = "0.0.1"
__all__ = [
    "EntropyFailure",
    "KeyPair",
    "PaddedBlock",
    "PaddingError",
    "RSAPrivKey",
    "RSAPubKey",
    "RandomSource",
    "check_prime",
    "decrypt",
    "encrypt",
    "extended_euclid",
    "gcd",
    "generate_key_pair",
    "generate_primes",
    "miller_rabin",
    "mod_inverse",
    "pad",
    "pow_mod",
    "unpad",
]
