import pytest

from puzzledays.day01 import (
    appearances,
    main,
    parse_lists,
    read_lists,
    similarity,
    total_distance,
)

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists_splits_columns():
    assert parse_lists("3   4\n4   3\n") == ([3, 4], [4, 3])


def test_parse_lists_rejects_single_space():
    with pytest.raises(ValueError):
        parse_lists("3 4\n")


def test_parse_lists_rejects_negative():
    with pytest.raises(ValueError):
        parse_lists("-1   2\n")


def test_parse_lists_rejects_overflow():
    with pytest.raises(ValueError):
        parse_lists("4294967296   1\n")


def test_example_distance():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == 11


def test_example_similarity():
    left, right = parse_lists(EXAMPLE)
    assert similarity(left, right) == 31


def test_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_distance_of_permutation_is_zero():
    assert total_distance([5, 1, 9, 3], [9, 3, 5, 1]) == 0


def test_appearances_counts_sum_to_length():
    values = [4, 3, 5, 3, 9, 3]
    counts = appearances(values)
    assert sum(counts.values()) == len(values)
    assert set(counts) == set(values)


def test_similarity_without_overlap_is_zero():
    assert similarity([1, 2, 3], [7, 8, 9]) == 0


def test_read_lists_matches_parse(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert read_lists(path) == parse_lists(EXAMPLE)


@pytest.mark.parametrize("part", ["1", "2"])
def test_main_prints_answer(tmp_path, capsys, part):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([part, str(path)]) == 0
    left, right = parse_lists(EXAMPLE)
    expected = total_distance(left, right) if part == "1" else similarity(left, right)
    assert capsys.readouterr().out.strip() == str(expected)