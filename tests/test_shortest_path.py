import pytest

from collectionlab.shortest_path import (
    BELEM_TOWER,
    LISBON_CATHEDRAL,
    build_lisbon_graph,
    dijkstra,
    main,
)


def test_graph_is_symmetric():
    graph = build_lisbon_graph()
    for a, neighbours in graph.items():
        for b, km in neighbours.items():
            assert graph[b][a] == km


def test_belem_to_cathedral():
    distances = dijkstra(build_lisbon_graph(), BELEM_TOWER, LISBON_CATHEDRAL)
    assert distances[LISBON_CATHEDRAL] == 8


def test_start_is_zero_and_distances_obey_edges():
    graph = build_lisbon_graph()
    distances = dijkstra(graph, BELEM_TOWER)
    assert distances[BELEM_TOWER] == 0
    assert set(distances) == set(graph)
    for a, neighbours in graph.items():
        for b, km in neighbours.items():
            assert distances[b] <= distances[a] + km


def test_distances_are_symmetric():
    graph = build_lisbon_graph()
    there = dijkstra(graph, BELEM_TOWER)[LISBON_CATHEDRAL]
    back = dijkstra(graph, LISBON_CATHEDRAL)[BELEM_TOWER]
    assert there == back


def test_unreachable_node_is_absent():
    graph = {"a": {"b": 2}, "b": {"a": 2}, "c": {}}
    assert dijkstra(graph, "a", "c") == {"a": 0, "b": 2}


def test_unknown_start_raises():
    with pytest.raises(KeyError):
        dijkstra(build_lisbon_graph(), "Nowhere")


def test_main_prints_distance(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The shortest distance from Belem Tower to Lisbon Cathedral is")