"""Shortest walking distances between Lisbon landmarks using Dijkstra."""

from __future__ import annotations

import argparse
import heapq
from typing import Mapping, Sequence

Graph = Mapping[str, Mapping[str, float]]

BELEM_TOWER = "Belem Tower"
MONASTERY = "Jerónimos Monastery"
LX_FACTORY = "LX Factory"
COMMERCE_SQUARE = "Commerce Square"
LISBON_CATHEDRAL = "Lisbon Cathedral"

_LISBON_EDGES = (
    (BELEM_TOWER, MONASTERY, 1),
    (BELEM_TOWER, LX_FACTORY, 3),
    (BELEM_TOWER, COMMERCE_SQUARE, 7),
    (MONASTERY, LX_FACTORY, 3),
    (MONASTERY, COMMERCE_SQUARE, 6),
    (LX_FACTORY, COMMERCE_SQUARE, 5),
    (COMMERCE_SQUARE, LISBON_CATHEDRAL, 1),
)


def build_lisbon_graph() -> dict[str, dict[str, int]]:
    """Undirected graph of landmarks with distances in kilometres."""
    graph: dict[str, dict[str, int]] = {
        name: {}
        for name in (BELEM_TOWER, MONASTERY, LX_FACTORY, COMMERCE_SQUARE, LISBON_CATHEDRAL)
    }
    for a, b, km in _LISBON_EDGES:
        graph[a][b] = km
        graph[b][a] = km
    return graph


def dijkstra(graph: Graph, start: str, goal: str | None = None) -> dict[str, float]:
    """Distances from ``start``; stops early once ``goal`` is settled.

    Raises KeyError if ``start`` is not a node of ``graph``.
    """
    if start not in graph:
        raise KeyError(start)
    distances: dict[str, float] = {start: 0}
    settled: set[str] = set()
    queue: list[tuple[float, str]] = [(0, start)]
    while queue:
        distance, node = heapq.heappop(queue)
        if node in settled:
            continue
        settled.add(node)
        if node == goal:
            break
        for neighbour, weight in graph.get(node, {}).items():
            if neighbour in settled:
                continue
            candidate = distance + weight
            if candidate < distances.get(neighbour, float("inf")):
                distances[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return distances


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shortest distance from Belem Tower to Lisbon Cathedral."""
    parser = argparse.ArgumentParser(description="Shortest path across Lisbon.")
    parser.parse_args(argv)
    distances = dijkstra(build_lisbon_graph(), BELEM_TOWER, LISBON_CATHEDRAL)
    if LISBON_CATHEDRAL in distances:
        print(
            f"The shortest distance from Belem Tower to Lisbon Cathedral is "
            f"{distances[LISBON_CATHEDRAL]} km"
        )
    else:
        print("No route found from Belem Tower to Lisbon Cathedral.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())