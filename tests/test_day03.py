import pytest

from puzzledays.day03 import (
    do_indices,
    dont_indices,
    enabled_muls,
    find_muls,
    main,
    read_memory,
    switch_indices,
)

PART1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
PART2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_find_muls_example():
    assert find_muls(PART1) == [(2, 4), (5, 5), (11, 8), (8, 5)]


def test_find_muls_rejects_malformed():
    assert find_muls("mul(1, 2) mul(3,4 mul[5,6]") == []


def test_enabled_muls_example():
    assert enabled_muls(PART2) == [(2, 4), (8, 5)]


def test_enabled_without_switches_equals_all():
    assert enabled_muls(PART1) == find_muls(PART1)


def test_do_indices_point_after_instruction():
    mem = "abcdo()xyz"
    assert do_indices(mem) == [mem.index("do()") + len("do()")]


def test_dont_indices_point_at_instruction():
    mem = "xxdon't()yy"
    assert dont_indices(mem) == [mem.index("don't()")]


def test_do_is_not_counted_inside_dont():
    assert do_indices("don't()") == []


def test_switch_indices_start_at_zero_and_increase():
    mem = PART2 + "don't()mul(1,1)do()don't()do()"
    switches = switch_indices(mem)
    assert switches[0] == 0
    assert all(a < b for a, b in zip(switches, switches[1:]))


def test_switch_indices_without_dont():
    assert switch_indices("do()mul(1,2)") == [0]


def test_disabled_tail_is_skipped():
    assert enabled_muls("mul(1,2)don't()mul(3,4)") == [(1, 2)]


def test_read_memory(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(PART2)
    assert read_memory(path) == PART2


@pytest.mark.parametrize("part, finder", [("1", find_muls), ("2", enabled_muls)])
def test_main(tmp_path, capsys, part, finder):
    path = tmp_path / "input.txt"
    path.write_text(PART2)
    assert main([part, str(path)]) == 0
    expected = sum(a * b for a, b in finder(PART2))
    assert capsys.readouterr().out.strip() == str(expected)