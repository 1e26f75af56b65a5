"""Community detection in a mention graph via strongly connected components."""

from __future__ import annotations

import argparse
from itertools import pairwise
from typing import Iterable, Mapping, Sequence

TWITTER_USERNAMES = (
    "blackmattersus", "bleepthepolice", "jenn_abrams", "leroylovesusa",
    "missourinewsus", "rightnpr", "ten_gop", "traceyhappymom", "trayneshacole",
    "traceyhappymom", "ten_gop", "leroylovesusa", "leroylovesusa", "traceyhappymom",
    "traceyhappymom", "traceyhappymom", "ten_gop", "traceyhappymom", "jenn_abrams",
    "ten_gop", "rightnpr", "traceyhappymom", "leroylovesusa", "ten_gop", "ten_gop",
    "jenn_abrams", "leroylovesusa", "leroylovesusa", "ten_gop", "traceyhappymom",
    "ten_gop", "leroylovesusa", "ten_gop", "traceyhappymom", "jenn_abrams",
    "trayneshacole", "ten_gop", "ten_gop", "leroylovesusa", "leroylovesusa",
    "leroylovesusa", "leroylovesusa", "ten_gop", "ten_gop", "leroylovesusa",
    "ten_gop", "ten_gop", "traceyhappymom", "traceyhappymom", "ten_gop",
    "traceyhappymom", "ten_gop", "jenn_abrams", "ten_gop", "ten_gop",
    "leroylovesusa", "worldofhashtags", "traceyhappymom", "ten_gop", "leroylovesusa",
    "ten_gop", "traceyhappymom", "traceyhappymom", "ten_gop", "traceyhappymom",
    "traceyhappymom", "worldofhashtags", "ten_gop", "traceyhappymom", "ten_gop",
    "ten_gop", "ten_gop", "rightnpr", "ten_gop", "leroylovesusa", "traceyhappymom",
    "leroylovesusa", "leroylovesusa", "traceyhappymom", "traceyhappymom",
    "traceyhappymom", "ten_gop", "leroylovesusa", "traceyhappymom", "ten_gop",
    "blackmattersus", "ten_gop", "leroylovesusa", "ten_gop", "traceyhappymom",
    "jenn_abrams", "trayneshacole", "ten_gop", "ten_gop", "leroylovesusa",
    "leroylovesusa", "leroylovesusa", "leroylovesusa", "ten_gop", "ten_gop",
    "leroylovesusa", "ten_gop", "ten_gop", "traceyhappymom", "traceyhappymom",
    "worldofhashtags", "blackmattersus", "jenn_abrams", "traceyhappymom",
    "leroylovesusa", "jenn_abrams", "leroylovesusa", "traceyhappymom",
    "leroylovesusa", "jenn_abrams", "ten_gop", "leroylovesusa", "ten_gop", "ten_gop",
    # The fake community of journalists
    "journalist1", "journalist2", "journalist3", "journalist1", "journalist2",
    "journalist1", "journalist3", "journalist2", "journalist1", "journalist3",
    "journalist2", "journalist3", "journalist1", "journalist2", "journalist1",
    "journalist3", "journalist2", "journalist1", "journalist3", "journalist2",
    "journalist3",
)

Graph = Mapping[str, Sequence[str]]


def build_graph(usernames: Iterable[str]) -> dict[str, list[str]]:
    """Link each user to the next one in the sequence (one edge per pair)."""
    graph: dict[str, list[str]] = {}
    for user, mention in pairwise(usernames):
        graph.setdefault(user, [])
        graph.setdefault(mention, [])
        graph[user].append(mention)
    return graph


def _all_nodes(graph: Graph) -> list[str]:
    nodes = dict.fromkeys(graph)
    for targets in graph.values():
        nodes.update(dict.fromkeys(targets))
    return list(nodes)


def kosaraju_scc(graph: Graph) -> list[list[str]]:
    """Return the strongly connected components of a directed graph."""
    nodes = _all_nodes(graph)
    reverse: dict[str, list[str]] = {node: [] for node in nodes}
    for source, targets in graph.items():
        for target in targets:
            reverse[target].append(source)

    finished: list[str] = []
    visited: set[str] = set()
    for root in reversed(nodes):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(reverse[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, iter(reverse[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)

    components: list[list[str]] = []
    assigned: set[str] = set()
    for root in reversed(finished):
        if root in assigned:
            continue
        assigned.add(root)
        component = []
        pending = [root]
        while pending:
            node = pending.pop()
            component.append(node)
            for neighbour in graph.get(node, ()):
                if neighbour not in assigned:
                    assigned.add(neighbour)
                    pending.append(neighbour)
        components.append(component)
    return components


def main(argv: Sequence[str] | None = None) -> int:
    """Print the communities found in the built-in mention data."""
    parser = argparse.ArgumentParser(description="Detect communities of users.")
    parser.parse_args(argv)
    for component in kosaraju_scc(build_graph(TWITTER_USERNAMES)):
        print(f"{len(component)} nodes in community discovered")
        print(component)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())