from collectionlab.community import TWITTER_USERNAMES, build_graph, kosaraju_scc, main


def _as_sets(components):
    return {frozenset(component) for component in components}


def test_build_graph_links_consecutive_names():
    graph = build_graph(["a", "b", "a", "c"])
    assert graph == {"a": ["b", "c"], "b": ["a"], "c": []}


def test_build_graph_with_single_name_is_empty():
    assert build_graph(["only"]) == {}


def test_cycle_and_singleton():
    graph = build_graph(["a", "b", "a", "c"])
    assert _as_sets(kosaraju_scc(graph)) == {frozenset({"a", "b"}), frozenset({"c"})}


def test_chain_has_one_component_per_node():
    graph = {"x": ["y"], "y": ["z"], "z": []}
    components = kosaraju_scc(graph)
    assert sorted(len(c) for c in components) == [1, 1, 1]


def test_components_partition_nodes():
    graph = build_graph(TWITTER_USERNAMES)
    components = kosaraju_scc(graph)
    flat = [node for component in components for node in component]
    assert sorted(flat) == sorted(set(TWITTER_USERNAMES))


def test_journalists_form_their_own_community():
    components = _as_sets(kosaraju_scc(build_graph(TWITTER_USERNAMES)))
    journalists = frozenset({"journalist1", "journalist2", "journalist3"})
    assert journalists in components


def test_targets_missing_as_keys_are_included():
    components = kosaraju_scc({"a": ["b"]})
    assert _as_sets(components) == {frozenset({"a"}), frozenset({"b"})}


def test_main_prints_communities(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "3 nodes in community discovered" in out