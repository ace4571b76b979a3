import pytest

from yuletide.springs import count_arrangements, parse_record, part_one, part_two, unfold

EXAMPLE = """\
???.### 1,1,3
.??..??...?##. 1,1,3
?#?#?#?#?#?#?#? 1,3,1,6
????.#...#... 4,1,1
????.######..#####. 1,6,5
?###???????? 3,2,1
"""


def test_parse_record_splits_pattern_and_groups():
    assert parse_record("???.### 1,1,3") == ("???.###", (1, 1, 3))


@pytest.mark.parametrize("line", ["???.###", "??? 1,x", "??a 1", "??? 0,1", "a b c"])
def test_parse_record_rejects_malformed_lines(line):
    with pytest.raises(ValueError):
        parse_record(line)


def test_unfold_repeats_five_times():
    assert unfold("?#", (1,)) == ("?#??#??#??#??#", (1, 1, 1, 1, 1))


def test_example_line_count():
    assert count_arrangements("?###????????", (3, 2, 1)) == 10


def test_example_part_one():
    assert part_one(EXAMPLE) == 21


def test_example_part_two():
    assert part_two(EXAMPLE) == 525152


def test_part_one_is_sum_of_lines():
    lines = EXAMPLE.splitlines()
    assert part_one(EXAMPLE) == sum(part_one(line) for line in lines)


def test_part_two_of_single_line_matches_unfolded_count():
    line = ".??..??...?##. 1,1,3"
    assert part_two(line) == count_arrangements(*unfold(*parse_record(line)))


@pytest.mark.parametrize("n", range(1, 8))
def test_single_group_in_unknowns_counts_every_slot(n):
    assert count_arrangements("?" * n, (1,)) == n


@pytest.mark.parametrize("line", EXAMPLE.splitlines())
def test_unknown_splits_into_both_choices(line):
    pattern, groups = parse_record(line)
    index = pattern.index("?")
    working = pattern[:index] + "." + pattern[index + 1:]
    damaged = pattern[:index] + "#" + pattern[index + 1:]
    assert count_arrangements(pattern, groups) == (
        count_arrangements(working, groups) + count_arrangements(damaged, groups)
    )


@pytest.mark.parametrize("line", EXAMPLE.splitlines())
def test_reversed_record_has_same_count(line):
    pattern, groups = parse_record(line)
    assert count_arrangements(pattern[::-1], groups[::-1]) == count_arrangements(pattern, groups)


def test_count_rejects_bad_symbols():
    with pytest.raises(ValueError):
        count_arrangements("?x?", (1,))


def test_count_rejects_non_positive_groups():
    with pytest.raises(ValueError):
        count_arrangements("???", (0,))