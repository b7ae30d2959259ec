import pytest

from puzzledays.day05 import (
    Rule,
    correct_revision,
    main,
    parse_input,
    parse_rule,
    read_input,
    relevant_pages,
    valid_revision,
)

EXAMPLE = (
    "47|53\n97|13\n97|61\n97|47\n75|29\n61|13\n75|53\n29|13\n97|29\n53|29\n"
    "61|53\n97|53\n61|29\n47|13\n75|47\n97|75\n47|61\n75|61\n47|29\n75|13\n53|13\n"
    "\n"
    "75,47,61,53,29\n"
    "97,61,53,29,13\n"
    "75,29,13\n"
    "75,97,47,61,53\n"
    "61,13,29\n"
    "97,13,75,29,47\n"
)


def test_parse_rule():
    assert parse_rule("47|53") == Rule(47, 53)


@pytest.mark.parametrize("text", ["47", "a|1", "1|b", "1|70000", "|2"])
def test_parse_rule_errors(text):
    with pytest.raises(ValueError):
        parse_rule(text)


def test_parse_input_splits_sections():
    rules, revisions = parse_input(EXAMPLE)
    assert len(rules) == 21
    assert Rule(97, 75) in rules
    assert revisions[0] == [75, 47, 61, 53, 29]
    assert len(revisions) == 6


def test_relevant_pages():
    rules = {Rule(1, 2), Rule(3, 2), Rule(2, 4)}
    befores, afters = relevant_pages(2, rules)
    assert sorted(befores) == [1, 3]
    assert afters == [4]


def test_valid_revisions_in_example():
    rules, revisions = parse_input(EXAMPLE)
    assert [valid_revision(r, rules) for r in revisions] == [
        True, True, True, False, False, False,
    ]


def test_corrected_revisions_become_valid():
    rules, revisions = parse_input(EXAMPLE)
    for revision in revisions:
        fixed = correct_revision(revision, rules)
        assert sorted(fixed) == sorted(revision)
        assert valid_revision(fixed, rules)


def test_correct_revision_keeps_valid_order():
    rules, revisions = parse_input(EXAMPLE)
    for revision in revisions:
        if valid_revision(revision, rules):
            assert correct_revision(revision, rules) == revision


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert read_input(path) == parse_input(EXAMPLE)


def test_bad_revision_raises():
    with pytest.raises(ValueError):
        parse_input("1|2\n\n1,,2\n")


@pytest.mark.parametrize("part, expected", [("1", "143"), ("2", "123")])
def test_main(tmp_path, capsys, part, expected):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([part, str(path)]) == 0
    assert capsys.readouterr().out.strip() == expected