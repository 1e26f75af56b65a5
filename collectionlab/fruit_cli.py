"""Command lines that shuffle, pick and save fruit salads."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from pathlib import Path
from typing import Iterable, Sequence

FRUITS = (
    "banana",
    "apple",
    "orange",
    "pear",
    "pineapple",
    "grape",
    "strawberry",
    "raspberry",
    "blueberry",
    "blackberry",
)
DEFAULT_FRUIT_FILE = "fruits.csv"


def shuffle_fruits(fruits: Iterable[str], rng: random.Random | None = None) -> list[str]:
    """Return the fruits in a random order; the input is left untouched."""
    rng = rng or random.Random()
    salad = list(fruits)
    rng.shuffle(salad)
    return salad


def parse_fruit_list(text: str) -> list[str]:
    """Split comma separated fruits, trimming whitespace around each one."""
    return [item.strip() for item in text.split(",")]


def read_fruits_from_file(path: str | Path) -> list[str]:
    """Read comma separated fruits from every line of a file.

    Raises OSError when the file cannot be read.
    """
    fruits: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fruits.extend(parse_fruit_list(line.rstrip("\n")))
    return fruits


def get_fruits(count: int, rng: random.Random | None = None) -> list[str]:
    """Pick ``count`` fruits at random, repeats allowed."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    rng = rng or random.Random()
    return [rng.choice(FRUITS) for _ in range(count)]


def write_fruits(fruits: Iterable[str], path: str | Path) -> None:
    """Write one fruit per line to ``path``, creating or replacing the file."""
    with open(path, "w", encoding="utf-8") as handle:
        for fruit in fruits:
            handle.write(f"{fruit}\n")


def _debug_list(items: Iterable[str]) -> str:
    quoted = (
        '"' + item.replace("\\", "\\\\").replace('"', '\\"') + '"' for item in items
    )
    return "[" + ", ".join(quoted) + "]"


def salad_main(argv: Sequence[str] | None = None) -> int:
    """Shuffle fruits given on the command line or read from a CSV file."""
    parser = argparse.ArgumentParser(description="Make a Fruit Salad")
    parser.add_argument(
        "-f", "--fruits", help="fruits input as a string of comma separated values"
    )
    parser.add_argument("csvfile", nargs="?", help="file of comma separated fruits")
    args = parser.parse_args(argv)

    if args.csvfile is not None:
        try:
            text = Path(args.csvfile).read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"Could not read file: {exc}")
        fruit_list = parse_fruit_list(text)
    else:
        fruit_list = parse_fruit_list(args.fruits or "")

    print("Your fruit salad contains:")
    for fruit in shuffle_fruits(fruit_list):
        print(fruit)
    return 0


def portugal_main(argv: Sequence[str] | None = None) -> int:
    """Print random fruits and optionally save them to a file."""
    parser = argparse.ArgumentParser(description="Return random fruits.")
    parser.add_argument(
        "-c", "--count", type=int, default=1, help="the quantity of fruits to return"
    )
    parser.add_argument("-o", "--output", help="the path to the output file")
    args = parser.parse_args(argv)

    try:
        fruits = get_fruits(args.count)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"fruits: {_debug_list(fruits)}")

    if args.output is not None:
        try:
            write_fruits(fruits, args.output)
        except OSError as exc:
            print(f"Failed to create file: {args.output} ({exc})", file=sys.stderr)
            return 1
        print(f"Output written to file: {args.output}")
    return 0


def lowmem_main(argv: Sequence[str] | None = None) -> int:
    """Repeatedly read a fruit file and shuffle it into a salad."""
    parser = argparse.ArgumentParser(description="Make fruit salads from a file.")
    parser.add_argument("--path", default=DEFAULT_FRUIT_FILE, help="file of fruits")
    parser.add_argument(
        "--iterations", type=int, default=None, help="rounds to run (default: forever)"
    )
    args = parser.parse_args(argv)

    rounds = itertools.count() if args.iterations is None else range(args.iterations)
    for _ in rounds:
        try:
            fruits = read_fruits_from_file(args.path)
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        salad = shuffle_fruits(fruits)
        print(f"Created Fruit salad with {len(salad)} fruits: {_debug_list(salad)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(salad_main())