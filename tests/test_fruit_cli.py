import random

import pytest

from collectionlab.fruit_cli import (
    FRUITS,
    get_fruits,
    lowmem_main,
    parse_fruit_list,
    portugal_main,
    read_fruits_from_file,
    salad_main,
    shuffle_fruits,
    write_fruits,
)


def test_get_fruits():
    fruits = get_fruits(5)
    assert len(fruits) == 5


def test_get_fruits_only_known_fruits():
    fruits = get_fruits(50, random.Random(7))
    assert set(fruits) <= set(FRUITS)


def test_get_fruits_zero():
    assert get_fruits(0) == []


def test_get_fruits_negative_raises():
    with pytest.raises(ValueError):
        get_fruits(-1)


def test_get_fruits_seeded_is_repeatable():
    first = get_fruits(8, random.Random(3))
    assert len(first) == 8
    assert set(first) <= set(FRUITS)
    second = get_fruits(8, random.Random(3))
    assert second == first


def test_parse_fruit_list_trims():
    assert parse_fruit_list("apple, pear") == ["apple", "pear"]


def test_parse_fruit_list_empty_gives_one_empty_item():
    assert parse_fruit_list("") == [""]


def test_shuffle_fruits_is_permutation_and_keeps_input():
    original = ["apple", "pear", "fig", "kiwi"]
    shuffled = shuffle_fruits(original, random.Random(1))
    assert sorted(shuffled) == sorted(original)
    assert original == ["apple", "pear", "fig", "kiwi"]


def test_read_fruits_from_file_splits_every_line(tmp_path):
    path = tmp_path / "fruits.csv"
    path.write_text("apple, pear\nfig ,kiwi\n", encoding="utf-8")
    assert read_fruits_from_file(path) == ["apple", "pear", "fig", "kiwi"]


def test_read_fruits_from_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_fruits_from_file(tmp_path / "missing.csv")


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    write_fruits(["apple", "grape"], path)
    assert path.read_text(encoding="utf-8").splitlines() == ["apple", "grape"]
    assert read_fruits_from_file(path) == ["apple", "grape"]


def test_salad_main_with_fruits_option(capsys):
    assert salad_main(["--fruits", "apple, pear"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Your fruit salad contains:"
    assert sorted(lines[1:]) == ["apple", "pear"]


def test_salad_main_with_csv_file(tmp_path, capsys):
    path = tmp_path / "fruits.csv"
    path.write_text("fig, kiwi, plum", encoding="utf-8")
    assert salad_main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines[1:]) == ["fig", "kiwi", "plum"]


def test_salad_main_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as info:
        salad_main([str(tmp_path / "nope.csv")])
    assert info.value.code == 2


def test_portugal_main_writes_output(tmp_path, capsys):
    path = tmp_path / "out.txt"
    assert portugal_main(["--count", "3", "--output", str(path)]) == 0
    written = path.read_text(encoding="utf-8").splitlines()
    assert len(written) == 3
    assert set(written) <= set(FRUITS)
    out = capsys.readouterr().out
    assert out.startswith("fruits: [")
    assert f"Output written to file: {path}" in out


def test_portugal_main_bad_output_path(tmp_path, capsys):
    target = tmp_path / "missing_dir" / "out.txt"
    assert portugal_main(["--output", str(target)]) == 1
    assert "Failed to create file" in capsys.readouterr().err


def test_lowmem_main_runs_given_rounds(tmp_path, capsys):
    path = tmp_path / "fruits.csv"
    path.write_text("apple,pear\n", encoding="utf-8")
    assert lowmem_main(["--path", str(path), "--iterations", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("Created Fruit salad with 2 fruits: [") for line in lines)


def test_lowmem_main_missing_file(tmp_path, capsys):
    assert lowmem_main(["--path", str(tmp_path / "nope.csv"), "--iterations", "1"]) == 1
    assert capsys.readouterr().err.startswith("Error:")