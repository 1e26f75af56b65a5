"""Caesar shift cipher over ASCII letters, with a small command line."""

from __future__ import annotations

import argparse
import string
from typing import Sequence

ALPHABET_SIZE = 26
MAX_SHIFT = 255
DEMO_PLAINTEXT = "the quick brown fox jumps over the lazy dog"
DEMO_SHIFT = 3


def _shift_char(char: str, shift: int) -> str:
    if char in string.ascii_lowercase:
        base = ord("a")
    elif char in string.ascii_uppercase:
        base = ord("A")
    else:
        return char
    return chr(base + (ord(char) - base + shift) % ALPHABET_SIZE)


def encrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter forward by ``shift``, keeping its case."""
    if not 0 <= shift <= MAX_SHIFT:
        raise ValueError(f"shift must be between 0 and {MAX_SHIFT}, got {shift}")
    return "".join(_shift_char(char, shift) for char in text)


def decrypt(text: str, shift: int) -> str:
    """Undo :func:`encrypt` for the same ``shift``."""
    if not 0 <= shift <= ALPHABET_SIZE:
        raise ValueError(f"shift must be between 0 and {ALPHABET_SIZE}, got {shift}")
    return encrypt(text, ALPHABET_SIZE - shift)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encrypt and decrypt messages using the Caesar cipher."
    )
    parser.add_argument("-e", "--encrypt", action="store_true", help="encrypt the message")
    parser.add_argument("-d", "--decrypt", action="store_true", help="decrypt the message")
    parser.add_argument("-m", "--message", help="the message to encrypt or decrypt")
    parser.add_argument(
        "-s",
        "--shift",
        type=int,
        default=DEMO_SHIFT,
        help="the shift to use, between 1 and 25 (default 3)",
    )
    return parser


def _print_demo(shift: int) -> None:
    ciphertext = encrypt(DEMO_PLAINTEXT, shift)
    print(f"Plaintext: {DEMO_PLAINTEXT}")
    print(f"Ciphertext: {ciphertext}")
    print(f"Decrypted text: {decrypt(ciphertext, shift)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; without a message, show a round-trip demo."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.message is None:
            _print_demo(args.shift)
        elif args.encrypt:
            print(encrypt(args.message, args.shift))
        elif args.decrypt:
            print(decrypt(args.message, args.shift))
        else:
            print("Please specify either --encrypt or --decrypt")
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())