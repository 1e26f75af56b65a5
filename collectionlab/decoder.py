"""Statistical breaking of Caesar ciphers by English letter frequencies."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from collectionlab.caesar import encrypt

_ENGLISH_FREQUENCIES = {
    "e": 12.7,
    "t": 9.1,
    "a": 8.2,
    "o": 7.5,
    "i": 7.0,
    "n": 6.7,
    "s": 6.3,
    "h": 6.1,
    "r": 6.0,
    "d": 4.3,
}


@dataclass(frozen=True)
class LetterStats:
    """Occurrence statistics for one character of a text."""

    letter: str
    count: int
    frequency: float
    english_frequency: float | None
    english_difference: float


@dataclass(frozen=True)
class ShiftGuess:
    """The outcome of trying every shift below ``depth``."""

    depth: int
    shift: int
    decrypted: str
    score: float
    scores: tuple[float, ...]


def english_frequencies() -> dict[str, float]:
    """Percentages of the ten most common English letters."""
    return dict(_ENGLISH_FREQUENCIES)


def stats_analysis(text: str) -> list[LetterStats]:
    """Count each character and compare its share with English usage."""
    counts = Counter(text)
    total = sum(counts.values())
    reference = english_frequencies()
    results = []
    for letter, count in counts.items():
        frequency = count / total * 100.0
        english = reference.get(letter.lower()) if letter.isascii() else None
        difference = abs(frequency - english) if english is not None else 0.0
        results.append(LetterStats(letter, count, frequency, english, difference))
    return results


def _fmt(value: float) -> str:
    return str(int(value)) if value == int(value) else repr(value)


def print_stats_analysis(text: str) -> None:
    """Print one line of statistics per distinct character."""
    for stats in stats_analysis(text):
        print(
            f"{stats.letter}: {stats.count} ({_fmt(stats.frequency)}%), "
            f"English Freq: {_fmt(stats.english_frequency or 0.0)} "
            f"({_fmt(stats.english_difference)}%)"
        )


def decrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter forward by ``shift``."""
    return encrypt(text, shift)


def _score(text: str) -> float:
    return sum(
        (1.0 - stats.english_difference / stats.english_frequency) * stats.frequency
        for stats in stats_analysis(text)
        if stats.english_frequency is not None
    )


def guess_shift(text: str, depth: int) -> ShiftGuess:
    """Try shifts ``0..depth-1`` and keep the one that reads most like English."""
    max_score = 0.0
    best_shift = 0
    decrypted = ""
    scores = []
    for shift in range(depth):
        candidate = decrypt(text, shift)
        score = _score(candidate)
        scores.append(score)
        if score > max_score:
            max_score = score
            best_shift = shift
            decrypted = candidate
    return ShiftGuess(depth, best_shift, decrypted, max_score, tuple(scores))


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: print statistics and/or guess the shift of a message."""
    parser = argparse.ArgumentParser(description="Reverse engineer a Caesar cipher.")
    parser.add_argument("-m", "--message", required=True, help="the message to decrypt")
    parser.add_argument("-s", "--stats", action="store_true", help="print letter statistics")
    parser.add_argument("-g", "--guess", action="store_true", help="guess the shift")
    args = parser.parse_args(argv)

    if args.stats:
        print_stats_analysis(args.message)
    if args.guess:
        guess = guess_shift(args.message, 26)
        for shift, score in enumerate(guess.scores):
            print(f"Shift: {shift}, Score: {_fmt(score)}")
        print(
            f"Best shift: {guess.shift} (out of {guess.depth}), "
            f"score: {_fmt(guess.score)}"
        )
        print(f"Decrypted message: {guess.decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())