"""Detect duplicate phrases by their SHA3-256 digests."""

from __future__ import annotations

import argparse
import hashlib
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

PHRASES = (
    "man can be destroyed but not defeated",
    "but man is not made for defeat",
    "a man can be destroyed but not defeated",
    "the old man was thin and gaunt",
    "everything about him was old",
    "the sail was patched with flour sacks",
    "he was an old man who fished alone",
    "the old man had taught the boy to fish",
    "the old man looked at him with his sun burned confident loving eyes",
    "his eyes were cheerful and undefeated",
)


@dataclass(frozen=True)
class DuplicateReport:
    """Summary of a phrase list; ``duplicates`` holds (hex digest, count, phrase)."""

    total_phrases: int
    unique_phrases: int
    duplicates: tuple[tuple[str, int, str], ...]

    @property
    def unique_duplicates(self) -> int:
        return len(self.duplicates)

    @property
    def combined_duplicates(self) -> int:
        return sum(count - 1 for _, count, _ in self.duplicates)


def generate_random_phrases(rng: random.Random | None = None) -> list[str]:
    """Repeat each known phrase one to three times and shuffle the result."""
    rng = rng or random.Random()
    phrases = [phrase for phrase in PHRASES for _ in range(rng.randint(1, 3))]
    rng.shuffle(phrases)
    return phrases


def analyze_duplicates(phrases: Iterable[str]) -> DuplicateReport:
    """Group phrases by SHA3-256 digest and report those seen more than once."""
    seen: dict[str, list] = {}
    total = 0
    for phrase in phrases:
        total += 1
        digest = hashlib.sha3_256(phrase.encode("utf-8")).hexdigest()
        entry = seen.setdefault(digest, [0, phrase])
        entry[0] += 1
    duplicates = tuple(
        (digest, count, phrase)
        for digest, (count, phrase) in seen.items()
        if count > 1
    )
    return DuplicateReport(total, len(seen), duplicates)


def format_report(report: DuplicateReport) -> str:
    """Render a report as printable lines."""
    lines = [f"Total number of phrases: {report.total_phrases}"]
    lines.extend(
        f"{digest} - {count} times: {phrase}"
        for digest, count, phrase in report.duplicates
    )
    lines.append(f"Total Unique Phrases: {report.unique_phrases}")
    lines.append(f"Total Unique Duplicates: {report.unique_duplicates}")
    lines.append(f"Total Combined Duplicates: {report.combined_duplicates}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate random duplicated phrases and print the duplicate report."""
    parser = argparse.ArgumentParser(description="Detect duplicate phrases.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    phrases = generate_random_phrases(random.Random(args.seed))
    print(format_report(analyze_duplicates(phrases)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())