from collections import Counter

import pytest

from puzzledays.day09 import (
    checksum,
    defrag,
    main,
    parse_disk,
    read_input,
    refrag,
    refrag_checksum,
)

EXAMPLE = "2333133121414131402"
INPUTS = ["12345", EXAMPLE, "2112", "14113", "9953877292941"]


@pytest.mark.parametrize("text", INPUTS)
def test_parse_layout(text):
    disk = parse_disk(text)
    assert len(disk.blocks) == sum(int(c) for c in text)
    assert all(
        disk.blocks[k] == file_id
        for file_id, (lo, hi) in enumerate(disk.files)
        for k in range(lo, hi + 1)
    )
    assert all(disk.blocks[k] is None for lo, hi in disk.gaps for k in range(lo, hi + 1))


@pytest.mark.parametrize("text", INPUTS)
def test_parse_pointers(text):
    disk = parse_disk(text)
    assert disk.next_gap == disk.blocks.index(None)
    assert disk.blocks[disk.last_block] is not None
    assert all(b is None for b in disk.blocks[disk.last_block + 1:])


def test_zero_length_entries_are_skipped_but_keep_ids():
    disk = parse_disk("10213")
    assert len(disk.gaps) == 1
    assert disk.blocks[1:3] == [1, 1]


@pytest.mark.parametrize("text", ["12a", "1", "10203", "0", ""])
def test_parse_errors(text):
    with pytest.raises(ValueError):
        parse_disk(text)


def test_read_input_matches_parse(tmp_path):
    path = tmp_path / "disk.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert read_input(path) == parse_disk(EXAMPLE)


@pytest.mark.parametrize("text", INPUTS)
def test_refrag_compacts(text):
    disk = parse_disk(text)
    before = Counter(b for b in disk.blocks if b is not None)
    refrag(disk)
    used = [i for i, b in enumerate(disk.blocks) if b is not None]
    free = [i for i, b in enumerate(disk.blocks) if b is None]
    assert max(used) < min(free)
    assert Counter(b for b in disk.blocks if b is not None) == before
    assert disk.next_gap >= disk.last_block


@pytest.mark.parametrize("text", INPUTS)
def test_refrag_checksum_matches_refrag(text):
    disk = parse_disk(text)
    original = list(disk.blocks)
    expected = refrag_checksum(disk)
    assert disk.blocks == original
    refrag(disk)
    assert checksum(disk) == expected


@pytest.mark.parametrize("text", INPUTS)
def test_defrag_keeps_files_whole(text):
    disk = parse_disk(text)
    files = list(disk.files)
    defrag(disk)
    for file_id, (lo, hi) in enumerate(files):
        positions = [i for i, b in enumerate(disk.blocks) if b == file_id]
        assert positions == list(range(positions[0], positions[-1] + 1))
        assert len(positions) == hi - lo + 1
        assert positions[0] <= lo


@pytest.mark.parametrize("text", INPUTS)
def test_defrag_never_raises_checksum(text):
    disk = parse_disk(text)
    before = checksum(disk)
    defrag(disk)
    assert checksum(disk) <= before


def test_worked_example():
    assert refrag_checksum(parse_disk(EXAMPLE)) == 1928
    disk = parse_disk(EXAMPLE)
    defrag(disk)
    assert checksum(disk) == 2858


def test_main_part1(tmp_path, capsys):
    path = tmp_path / "disk.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main(["1", str(path)])
    assert capsys.readouterr().out.strip() == str(refrag_checksum(parse_disk(EXAMPLE)))


def test_main_part2(tmp_path, capsys):
    path = tmp_path / "disk.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    disk = parse_disk(EXAMPLE)
    defrag(disk)
    main(["2", str(path)])
    assert capsys.readouterr().out.startswith(f"got {checksum(disk)} in ")