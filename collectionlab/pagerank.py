"""Iterative PageRank over an adjacency-list graph."""

from __future__ import annotations

import argparse
import textwrap
from dataclasses import dataclass
from typing import Sequence

SPORTS_GRAPH = (
    (1, 2),  # ESPN links to NFL, NBA
    (0,),  # NFL links to ESPN
    (0, 3),  # NBA links to ESPN, UFC
    (0,),  # UFC links to ESPN
    (0, 1),  # MLB links to ESPN, NFL
)
SPORTS_NAMES = ("ESPN", "NFL", "NBA", "UFC", "MLB")

EXPLANATION = (
    "PageRank is a link analysis algorithm used by Google that uses the hyperlink "
    "structure of the web to determine a quality ranking for each web page. It works "
    "by counting the number and quality of links to a page to determine a rough "
    "estimate of how important the website is."
)


@dataclass(frozen=True)
class PageRank:
    """PageRank with a fixed damping factor and number of iterations."""

    damping: float = 0.85
    iterations: int = 100

    def rank(self, graph: Sequence[Sequence[int]]) -> list[float]:
        """Return the rank of every node; ``graph[i]`` lists the nodes ``i`` links to."""
        n = len(graph)
        if n == 0:
            return []
        ranks = [1.0 / n] * n
        teleport = (1.0 - self.damping) / n
        for _ in range(self.iterations):
            new_ranks = [0.0] * n
            for node, edges in enumerate(graph):
                if not edges:
                    continue
                contribution = ranks[node] / len(edges)
                for target in edges:
                    new_ranks[target] += contribution
            ranks = [rank * self.damping + teleport for rank in new_ranks]
        return ranks


def main(argv: Sequence[str] | None = None) -> int:
    """Rank a small graph of sports websites and explain the algorithm."""
    parser = argparse.ArgumentParser(description="PageRank of sports websites.")
    parser.add_argument("--damping", type=float, default=0.85)
    parser.add_argument("--iterations", type=int, default=100)
    args = parser.parse_args(argv)

    ranks = PageRank(args.damping, args.iterations).rank(SPORTS_GRAPH)
    for name, rank in zip(SPORTS_NAMES, ranks):
        print(f"The PageRank of {name} is {rank}")
    print(textwrap.fill(EXPLANATION, 78))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())