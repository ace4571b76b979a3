import pytest

from yuletide.trebuchet import digit_value, main, part_one, part_two, spelled_value

EXAMPLE_ONE = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

EXAMPLE_TWO = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""


def test_example_part_one():
    assert part_one(EXAMPLE_ONE) == 142


def test_example_part_two():
    assert part_two(EXAMPLE_TWO) == 281


def test_overlapping_words():
    assert spelled_value("threeight") == 38


def test_no_digits_gives_none():
    assert digit_value("abc") is None
    assert spelled_value("xyz") is None


def test_lines_without_digits_add_nothing():
    assert part_one("abc\n" + EXAMPLE_ONE) == part_one(EXAMPLE_ONE)


@pytest.mark.parametrize("line", ["1abc2", "pqr3stu8vwx", "treb7uchet", "9"])
def test_spelled_matches_digit_on_numeric_lines(line):
    assert spelled_value(line) == digit_value(line)


def test_words_ignored_in_part_one():
    assert digit_value("one2three") == digit_value("2")


def test_part_two_at_least_sees_every_digit_line():
    assert part_two(EXAMPLE_ONE) == part_one(EXAMPLE_ONE)


def test_main(tmp_path, capsys):
    path = tmp_path / "calibration.txt"
    path.write_text(EXAMPLE_TWO)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == f"{part_one(EXAMPLE_TWO)}\n{part_two(EXAMPLE_TWO)}\n"