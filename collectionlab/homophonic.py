"""A homophonic substitution cipher with randomly drawn homophones."""

from __future__ import annotations

import argparse
import random
import string
from typing import Sequence

DEMO_PLAINTEXT = "the quick brown fox jumps over the lazy dog"


def build_mapping(rng: random.Random | None = None) -> dict[str, list[str]]:
    """Give each lowercase letter two or three random lowercase homophones."""
    rng = rng or random.Random()
    return {
        letter: [rng.choice(string.ascii_lowercase) for _ in range(rng.randrange(2, 4))]
        for letter in string.ascii_lowercase
    }


def homophonic_cipher(
    plaintext: str, rng: random.Random | None = None
) -> tuple[str, dict[str, list[str]]]:
    """Encrypt ``plaintext``; characters that are not letters are dropped.

    Returns the ciphertext and the mapping used to produce it.
    """
    rng = rng or random.Random()
    mapping = build_mapping(rng)
    ciphertext = []
    for char in plaintext:
        homophones = mapping.get(char.lower()[:1])
        if homophones:
            ciphertext.append(rng.choice(homophones))
    return "".join(ciphertext), mapping


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt a message and print it with its homophone mapping."""
    parser = argparse.ArgumentParser(description="Homophonic cipher demo.")
    parser.add_argument("plaintext", nargs="?", default=DEMO_PLAINTEXT)
    args = parser.parse_args(argv)
    ciphertext, mapping = homophonic_cipher(args.plaintext)
    print(f"Plaintext: {args.plaintext}")
    print(f"Ciphertext: {ciphertext}")
    print(f"Mapping: {mapping}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())