"""Counting numbers, summing a fixed vector and reading CSV records."""

from __future__ import annotations

import argparse
import csv
import sys
from collections import Counter
from typing import Iterable, Iterator, Sequence, TextIO

DEMO_NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1, 3)
V = (1, 2, 3)


def count_frequencies(numbers: Iterable[int]) -> list[tuple[int, int]]:
    """Pair each distinct number with how often it occurs, in first-seen order."""
    return list(Counter(numbers).items())


def add() -> int:
    """The sum of the fixed vector ``V``."""
    return sum(V)


def read_csv_records(stream: TextIO) -> Iterator[list[str]]:
    """Yield the records after the header row; blank lines are skipped.

    Raises ValueError when a record has a different number of fields than
    the one before it.
    """
    reader = csv.reader(stream)
    expected: int | None = None
    for row in reader:
        if not row:
            continue
        if expected is None:
            expected = len(row)
            continue
        if len(row) != expected:
            raise ValueError(
                f"record on line {reader.line_num}: found record with {len(row)} "
                f"fields, but the previous record has {expected} fields"
            )
        yield row


def _debug_record(record: Sequence[str]) -> str:
    fields = ", ".join(
        '"' + field.replace("\\", "\\\\").replace('"', '\\"') + '"' for field in record
    )
    return f"StringRecord([{fields}])"


def main(argv: Sequence[str] | None = None) -> int:
    """Count numbers, sum the fixed vector, or echo CSV records from stdin."""
    parser = argparse.ArgumentParser(description="Small counting tools.")
    commands = parser.add_subparsers(dest="command", required=True)
    count = commands.add_parser("count", help="count each number's frequency")
    count.add_argument("numbers", nargs="*", type=int, default=list(DEMO_NUMBERS))
    commands.add_parser("add", help="sum the fixed vector")
    commands.add_parser("csv", help="print CSV records read from stdin")
    args = parser.parse_args(argv)

    if args.command == "count":
        result = count_frequencies(args.numbers)
        print(f"The frequency of each number in the vector is: {result}")
    elif args.command == "add":
        print(f"The sum of the elements in the vector is: {add()}")
    else:
        try:
            for record in read_csv_records(sys.stdin):
                print(_debug_record(record))
        except (ValueError, csv.Error) as exc:
            print(f"error running example: {exc}")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())