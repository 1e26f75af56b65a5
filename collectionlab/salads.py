"""Fruit salads built with lists, sets, deques and heaps."""

from __future__ import annotations

import argparse
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

FIG_SALAD_CHOICES = (
    "Apple", "Orange", "Pear", "Peach", "Banana", "Fig", "Fig", "Fig", "Fig",
)
SET_FRUITS = (
    "apple", "banana", "cherry", "date", "elderberry", "fig", "grape", "honeydew",
)
SET_AMOUNTS = (1, 3, 5, 7, 9)
DEQUE_FRUITS = ("Arbutus", "Loquat", "Strawberry Tree Berry")
VECTOR_FRUITS = ("Orange", "Fig", "Pomegranate", "Cherry", "Apple", "Pear", "Peach")
BASE_SALAD = ("apple", "banana", "cherry", "dates", "elderberries")
RANDOM_FRUITS = (
    "Apple", "Banana", "Cherry", "Date", "Elderberry", "Fig", "Grape", "Honeydew",
)
SALAD_FRUITS = (
    "Arbutus", "Loquat", "Strawberry Tree Berry", "Pomegranate", "Fig",
    "Cherry", "Orange", "Pear", "Peach", "Apple",
)
FIG = "Fig"


@dataclass(frozen=True)
class Fruit:
    """A fruit in a priority salad; figs outrank every other fruit."""

    name: str

    @property
    def is_fig(self) -> bool:
        return self.name == FIG

    def __lt__(self, other: Fruit) -> bool:
        return not self.is_fig and other.is_fig

    def __str__(self) -> str:
        return self.name


def generate_fig_salad(rng: random.Random | None = None) -> list[Fruit]:
    """Draw fruits until two figs are in; return them lowest priority first."""
    rng = rng or random.Random()
    salad: list[Fruit] = []
    figs = 0
    while figs < 2:
        fruit = Fruit(rng.choice(FIG_SALAD_CHOICES))
        figs += fruit.is_fig
        salad.append(fruit)
    return sorted(salad)


def random_fruit_sets(
    amounts: Iterable[int] = SET_AMOUNTS, rng: random.Random | None = None
) -> list[tuple[int, list[str]]]:
    """For each amount, collect that many shuffled fruits into a sorted set."""
    rng = rng or random.Random()
    results = []
    for amount in amounts:
        shuffled = list(SET_FRUITS)
        rng.shuffle(shuffled)
        chosen: set[str] = set()
        for fruit in shuffled:
            chosen.add(fruit)
            if len(chosen) >= amount:
                break
        results.append((amount, sorted(chosen)))
    return results


def deque_salad(rng: random.Random | None = None) -> list[str]:
    """Shuffle three fruits, then add Pomegranate in front and Fig, Cherry behind."""
    rng = rng or random.Random()
    shuffled = list(DEQUE_FRUITS)
    rng.shuffle(shuffled)
    salad = deque(shuffled)
    salad.appendleft("Pomegranate")
    salad.append("Fig")
    salad.append("Cherry")
    return list(salad)


def vector_salad(rng: random.Random | None = None) -> list[str]:
    """A shuffled copy of the standard fruit list."""
    rng = rng or random.Random()
    salad = list(VECTOR_FRUITS)
    rng.shuffle(salad)
    return salad


def add_figs(fruits: Iterable[str]) -> list[str]:
    """A new salad with figs appended."""
    return [*fruits, "figs"]


def random_fruit(rng: random.Random | None = None) -> str:
    """One fruit picked at random."""
    return (rng or random.Random()).choice(RANDOM_FRUITS)


def unique_fruit_count(draws: int, rng: random.Random | None = None) -> int:
    """How many distinct fruits appear in ``draws`` random picks."""
    rng = rng or random.Random()
    return len({random_fruit(rng) for _ in range(draws)})


def create_fruit_salad(num_fruits: int, rng: random.Random | None = None) -> list[str]:
    """Up to ``num_fruits`` distinct fruits in random order."""
    if num_fruits < 0:
        raise ValueError(f"number of fruits must not be negative, got {num_fruits}")
    rng = rng or random.Random()
    fruits = list(SALAD_FRUITS)
    rng.shuffle(fruits)
    return fruits[:num_fruits]


def _debug_str(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _debug_list(items: Iterable[str]) -> str:
    return "[" + ", ".join(_debug_str(item) for item in items) + "]"


def _debug_set(items: Iterable[str]) -> str:
    return "{" + ", ".join(_debug_str(item) for item in items) + "}"


def _print_salad(fruits: Sequence[str]) -> None:
    print("Fruit Salad:")
    print(", ".join(fruits))


def main(argv: Sequence[str] | None = None) -> int:
    """Make one of the fruit salads chosen on the command line."""
    parser = argparse.ArgumentParser(description="Make fruit salads.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("heap", help="a salad with two servings of figs")
    commands.add_parser("sets", help="sorted sets of random fruits")
    commands.add_parser("deque", help="a salad built at both ends of a deque")
    commands.add_parser("linked-list", help="a salad built at both ends of a list")
    commands.add_parser("vector", help="a shuffled salad")
    commands.add_parser("mutable", help="a salad with figs added")
    commands.add_parser("hashset", help="count unique fruits in 100 draws")
    salad = commands.add_parser("salad", help="a salad of a given size")
    salad.add_argument("-n", "--number", type=int, required=True)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    if args.command == "heap":
        print("Random Fruit Salad With Two Servings of Figs:")
        for fruit in generate_fig_salad(rng):
            print(fruit)
    elif args.command == "sets":
        for amount, fruits in random_fruit_sets(SET_AMOUNTS, rng):
            print(f"{amount}: {_debug_set(fruits)}")
    elif args.command in ("deque", "linked-list"):
        _print_salad(deque_salad(rng))
    elif args.command == "vector":
        _print_salad(vector_salad(rng))
    elif args.command == "mutable":
        print(f"Original fruit salad: {_debug_list(BASE_SALAD)}")
        print(f"Modified fruit salad: {_debug_list(add_figs(BASE_SALAD))}")
    elif args.command == "hashset":
        print("Generating 100 random fruits...")
        print(f"Number of unique fruits generated: {unique_fruit_count(100, rng)}")
    else:
        try:
            fruits = create_fruit_salad(args.number, rng)
        except ValueError as exc:
            parser.error(str(exc))
        print(f"Created Fruit salad with {args.number} fruits: {_debug_list(fruits)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())