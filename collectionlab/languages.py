"""Weight programming languages from 1 to 100 by how long they have been around."""

from __future__ import annotations

import argparse
from typing import Mapping, Sequence

REFERENCE_YEAR = 2024
MIN_WEIGHT = 1
WEIGHT_SPAN = 99

_CREATION_YEARS = (
    ("JavaScript", 1995),
    ("HTML/CSS", 1990),
    ("Python", 1991),
    ("SQL", 1974),
    ("TypeScript", 2012),
    ("Bash/Shell", 1989),
    ("Java", 1995),
    ("C#", 2000),
    ("C++", 1985),
    ("C", 1972),
    ("PHP", 1995),
    ("PowerShell", 2006),
    ("Go", 2007),
    ("Rust", 2010),
)


def init_languages() -> dict[str, int]:
    """Popular languages mapped to the year they were created, sorted by name."""
    return dict(sorted(_CREATION_YEARS))


def calculate_weights(languages: Mapping[str, int]) -> dict[str, int]:
    """Map each language to a weight: 1 for the newest up to 100 for the oldest.

    The input is left untouched; the result is sorted by language name.
    """
    years_active = {name: REFERENCE_YEAR - year for name, year in sorted(languages.items())}
    if not years_active:
        return {}
    youngest = min(years_active.values())
    span = max(years_active.values()) - youngest
    weights = {}
    for name, active in years_active.items():
        normalized = (active - youngest) / span if span else 0.0
        weights[name] = int(normalized * WEIGHT_SPAN) + MIN_WEIGHT
    return weights


def main(argv: Sequence[str] | None = None) -> int:
    """Print the weight of every known language."""
    parser = argparse.ArgumentParser(description="Weigh programming languages by age.")
    parser.parse_args(argv)
    print("Language weighing from 1-100 by age (1 is newest and 100 is oldest):")
    for name, weight in calculate_weights(init_languages()).items():
        print(f"{name}: {weight}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())