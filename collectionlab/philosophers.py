"""Dining philosophers sharing too few forks without deadlocking."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Sequence

FORK_COUNT = 4

SEATING = (
    ("Jürgen Habermas", 0, 1),
    ("Friedrich Engels", 1, 2),
    ("Karl Marx", 2, 3),
    ("Thomas Piketty", 3, 0),
    ("Michel Foucault", 0, 1),
    ("Socrates", 1, 2),
    ("Plato", 2, 3),
    ("Aristotle", 3, 0),
    ("Pythagoras", 0, 1),
    ("Heraclitus", 1, 2),
    ("Democritus", 2, 3),
    ("Diogenes", 3, 0),
    ("Epicurus", 0, 1),
    ("Zeno of Citium", 1, 2),
    ("Thales of Miletus", 2, 3),
)

_output_lock = threading.Lock()


def _say(message: str) -> None:
    with _output_lock:
        sys.stdout.write(message + "\n")
        sys.stdout.flush()


@dataclass(eq=False)
class Fork:
    """A fork that only one philosopher may hold at a time."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(frozen=True)
class Philosopher:
    """A philosopher who needs both neighbouring forks to eat."""

    id: int
    name: str
    left_fork: Fork
    right_fork: Fork
    eat_seconds: float = 1.0
    say: Callable[[str], None] = field(default=_say, repr=False, compare=False)

    def eat(self) -> None:
        """Pick up both forks, eat, and put them down again.

        Even-numbered philosophers take the left fork first, odd ones the
        right, which breaks the circular wait.
        """
        if self.id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork

        with first.lock:
            self.say(f"{self.name} picked up fork {first.id}.")
            with second.lock:
                self.say(f"{self.name} picked up fork {second.id}.")
                self.say(f"{self.name} is eating.")
                time.sleep(self.eat_seconds)
                self.say(f"{self.name} finished eating.")
                self.say(f"{self.name} put down fork {first.id}.")
                self.say(f"{self.name} put down fork {second.id}.")


def seat_philosophers(forks: Sequence[Fork]) -> list[Philosopher]:
    """Seat the fifteen philosophers between the given forks.

    Raises IndexError when fewer than four forks are given.
    """
    return [
        Philosopher(index, name, forks[left], forks[right])
        for index, (name, left, right) in enumerate(SEATING)
    ]


def dine(philosophers: Sequence[Philosopher]) -> float:
    """Let every philosopher eat concurrently; return the elapsed seconds."""
    start = time.perf_counter()
    if philosophers:
        with ThreadPoolExecutor(max_workers=len(philosophers)) as pool:
            futures = [pool.submit(philosopher.eat) for philosopher in philosophers]
            for future in futures:
                future.result()
    return time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dinner of fifteen philosophers at a table with four forks."""
    parser = argparse.ArgumentParser(description="Dining philosophers simulation.")
    parser.add_argument(
        "--eat-seconds", type=float, default=1.0, help="how long each meal takes"
    )
    args = parser.parse_args(argv)
    if args.eat_seconds < 0:
        parser.error("eat seconds must not be negative")

    print("Dining Philosophers Problem:  15 Philosophers, 4 Forks...Yikes!!")
    forks = [Fork(fork_id) for fork_id in range(FORK_COUNT)]
    philosophers = [
        Philosopher(p.id, p.name, p.left_fork, p.right_fork, args.eat_seconds)
        for p in seat_philosophers(forks)
    ]
    elapsed = dine(philosophers)
    print(f"Total time: {elapsed:.6f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())