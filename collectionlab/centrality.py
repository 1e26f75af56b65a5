"""Degree-based centrality of fighters in a network of bouts."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Fighter:
    """A fighter in the network."""

    name: str

    def __str__(self) -> str:
        return self.name


FIGHTERS = (
    Fighter("Dustin Poirier"),
    Fighter("Khabib Nurmagomedov"),
    Fighter("Jose Aldo"),
    Fighter("Conor McGregor"),
    Fighter("Nate Diaz"),
)

FIGHTS = (
    (0, 1),  # Dustin Poirier vs. Khabib Nurmagomedov
    (1, 3),  # Khabib Nurmagomedov vs. Conor McGregor
    (3, 0),  # Conor McGregor vs. Dustin Poirier
    (3, 2),  # Conor McGregor vs. Jose Aldo
    (3, 4),  # Conor McGregor vs. Nate Diaz
    (0, 4),  # Dustin Poirier vs. Nate Diaz
    (2, 4),  # Jose Aldo vs. Nate Diaz
)


def closeness_centrality(
    fighters: Sequence[Fighter], fights: Iterable[tuple[int, int]]
) -> list[tuple[Fighter, float]]:
    """Return each fighter with ``1 / number of fights``; infinity for no fights.

    ``fights`` holds index pairs into ``fighters``; a bad index raises IndexError.
    """
    degrees: Counter[int] = Counter()
    for a, b in fights:
        for index in (a, b):
            if not 0 <= index < len(fighters):
                raise IndexError(f"fighter index {index} out of range")
        degrees[a] += 1
        if b != a:
            degrees[b] += 1
    return [
        (fighter, 1.0 / degrees[i] if degrees[i] else float("inf"))
        for i, fighter in enumerate(fighters)
    ]


def explain(name: str, closeness: float) -> str | None:
    """A sentence interpreting the centrality of a known fighter, else None."""
    if name == "Conor McGregor":
        return (
            f"{name} has the lowest centrality because he has fought with all other "
            "fighters in the network. In this context, a lower centrality value means "
            "a higher number of fights."
        )
    if name in ("Dustin Poirier", "Nate Diaz"):
        return (
            f"{name} has a centrality of {closeness:.2f}, implying they had less fights "
            "compared to Conor McGregor but more than Khabib Nurmagomedov and Jose Aldo."
        )
    if name in ("Khabib Nurmagomedov", "Jose Aldo"):
        return (
            f"{name} has the highest centrality of {closeness:.2f} as they have fought "
            "with the least number of fighters."
        )
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Print the centrality of every fighter with an explanation."""
    parser = argparse.ArgumentParser(description="Centrality of UFC fighters.")
    parser.parse_args(argv)
    for fighter, closeness in closeness_centrality(FIGHTERS, FIGHTS):
        print(f"The closeness centrality of {fighter} is {closeness:.2f}")
        sentence = explain(fighter.name, closeness)
        if sentence is not None:
            print(sentence)
        print("-----------------")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())