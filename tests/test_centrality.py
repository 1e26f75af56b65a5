import math

import pytest

from collectionlab.centrality import (
    FIGHTERS,
    FIGHTS,
    Fighter,
    closeness_centrality,
    explain,
    main,
)


def test_fighter_str_is_name():
    assert str(Fighter("Nate Diaz")) == "Nate Diaz"


def test_centrality_is_inverse_of_fight_count():
    results = closeness_centrality(FIGHTERS, FIGHTS)
    assert [fighter for fighter, _ in results] == list(FIGHTERS)
    for index, (_, closeness) in enumerate(results):
        fights = sum(index in pair for pair in FIGHTS)
        assert closeness == pytest.approx(1 / fights)


def test_mcgregor_is_most_central():
    results = closeness_centrality(FIGHTERS, FIGHTS)
    fighter, closeness = min(results, key=lambda item: item[1])
    assert fighter.name == "Conor McGregor"
    assert closeness == pytest.approx(0.25)


def test_fighter_without_fights_is_infinite():
    fighters = [Fighter("A"), Fighter("B"), Fighter("C")]
    results = closeness_centrality(fighters, [(0, 1)])
    assert math.isinf(results[2][1])
    assert results[0][1] == results[1][1] == 1.0


def test_bad_index_raises():
    with pytest.raises(IndexError):
        closeness_centrality([Fighter("A")], [(0, 1)])


def test_explanations():
    assert explain("Conor McGregor", 0.25).startswith(
        "Conor McGregor has the lowest centrality"
    )
    assert "centrality of 0.33" in explain("Nate Diaz", 1 / 3)
    assert explain("Jose Aldo", 0.5).startswith("Jose Aldo has the highest centrality of 0.50")
    assert explain("Somebody Else", 1.0) is None


def test_main_prints_each_fighter(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for fighter in FIGHTERS:
        assert f"The closeness centrality of {fighter.name} is" in out
    assert out.count("-----------------") == len(FIGHTERS)