"""The Command Line demonstration of a single RSA round trip.

Generates key pairs for Alice and Bob, encrypts one character under Bob's public key and decrypts it with Bob's private
key, printing every intermediate value.

Typical usage example:

    rsa32
    OR
    python -m rsa32 --message A --rounds 10
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys

import rsa32
from rsa32 import keygen
from rsa32 import padding


def payload_char(value: str) -> str:
    """Accept a single character that fits in one byte."""
    if len(value) != 1 or ord(value) > 0xFF:
        raise argparse.ArgumentTypeError("message must be a single character with a code point <= 255")
    return value


def rounds_count(value: str) -> int:
    """Accept a positive Miller-Rabin round count."""
    try:
        rounds = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid round count: {value!r}") from exc
    if rounds < 1:
        raise argparse.ArgumentTypeError("rounds must be >= 1")
    return rounds


corep = argparse.ArgumentParser(prog="rsa32", description="32-bit RSA round-trip demonstration.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsa32.__version__}")
corep.add_argument("--message", "-m", type=payload_char, default="L", help="Character Alice sends to Bob.")
corep.add_argument("--rounds",
                   "-k",
                   type=rounds_count,
                   default=keygen.DEFAULT_ROUNDS,
                   help="Miller-Rabin rounds per prime candidate.")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging.")


def main(argv: list[str] | None = None) -> None:
    """Runs the Alice-to-Bob demonstration."""
    args = corep.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s: %(message)s")
    source = rsa32.RandomSource()
    try:
        # Alice's pair only shows up in the transcript, the flow is one-way.
        alice = rsa32.KeyPair.generate(source, args.rounds)
        bob = rsa32.KeyPair.generate(source, args.rounds)
        value = ord(args.message)
        block = padding.pad(value, source)
        cipher = bob.public.c_rsa(block)
    except rsa32.EntropyFailure as exc:
        print(f"Entropy error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Alice public key: n={alice.public.mod} e={alice.public.expo}")
    print(f"Bob public key: n={bob.public.mod} e={bob.public.expo}")
    print(f"Value encrypted by Alice: {args.message}")
    print(f"Original padded block: {block}")
    print(f"Encrypted block: {cipher}")
    try:
        decrypted = bob.private.decrypt(cipher)
    except rsa32.PaddingError as exc:
        print(f"Unpadding error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Value decrypted by Bob: {chr(decrypted)}")


if __name__ == "__main__":
    main()
